"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Whitespace
    WHITESPACE = auto()  # run of spaces (and other non-tab, non-newline space)
    TAB = auto()  # run of \t
    NEWLINE = auto()  # run of \n / \r

    # Single-character marks
    DOUBLE_QUOTE = auto()  # "
    SINGLE_QUOTE = auto()  # '
    AMPERSAND = auto()  # &
    DOLLAR_SIGN = auto()  # $
    EURO_SIGN = auto()  # €
    NUMBER_SIGN = auto()  # #
    EXCLAMATION = auto()  # !
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LESS_THAN = auto()  # <
    GREATER_THAN = auto()  # >
    ASTERISK = auto()  # *
    FORWARD_SLASH = auto()  # /
    BACKSLASH = auto()  # \
    SECTION_SIGN = auto()  # §
    PLUS = auto()  # +
    HYPHEN = auto()  # -
    CARET = auto()  # ^
    UNDERSCORE = auto()  # _
    DOT = auto()  # .
    COMMA = auto()  # ,
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    PIPE = auto()  # |
    CURRENCY_SIGN = auto()  # ¤
    TILDE = auto()  # ~
    GRAVE_ACCENT = auto()  # `
    DIACRITICAL = auto()  # ´
    EQUALS = auto()  # =
    MICRO = auto()  # µ
    PERCENT = auto()  # %
    QUESTION = auto()  # ?
    AT_SIGN = auto()  # @

    # Literals
    NUMERIC_LITERAL = auto()  # 42
    STRING_LITERAL = auto()  # "text"
    CHAR_LITERAL = auto()  # 'c'
    IDENTIFIER = auto()  # letter (letter | digit)*

    # Increments
    INCREMENT = auto()  # x++
    DECREMENT = auto()  # x--
    POWER = auto()  # 4 ** 2

    # Assignments
    ADDITION_ASSIGNMENT = auto()  # x += y
    SUBTRACTION_ASSIGNMENT = auto()  # x -= y
    MULTIPLICATION_ASSIGNMENT = auto()  # x *= y
    DIVISION_ASSIGNMENT = auto()  # x /= y

    # Bitwise
    BITWISE_EXCLUSIVE_AND = auto()  # "x XAND y"
    BITWISE_EXCLUSIVE_OR = auto()  # "x XOR y"
    BITWISE_SHIFT_RIGHT = auto()  # x >> y
    BITWISE_SHIFT_LEFT = auto()  # x << y

    # Aliases go last so they don't disturb auto() numbering
    BITWISE_AND = AMPERSAND  # "x & y" or "x AND y"
    BITWISE_OR = PIPE  # "x | y" or "x OR y"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme: ``source[start:end] == text``."""

    kind: TokenKind
    text: str
    start: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.start}:{self.end})"


# Line breaks as the lexer sees them: \r\n, lone \r, lone \n
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(source: str) -> list[str]:
    """Split *source* into lines without their line breaks."""
    return _LINE_BREAK.split(source)


def position_at(source: str, offset: int) -> Position:
    """Return the line/column Position of *offset* within *source*."""
    line = 1
    line_start = 0
    for m in _LINE_BREAK.finditer(source, 0, offset):
        line += 1
        line_start = m.end()
    return Position(line, offset - line_start + 1, offset)


# Single-character symbols. Quotes are absent: they always open a literal.
SYMBOLS: dict[str, TokenKind] = {
    "&": TokenKind.AMPERSAND,
    "$": TokenKind.DOLLAR_SIGN,
    "€": TokenKind.EURO_SIGN,
    "#": TokenKind.NUMBER_SIGN,
    "!": TokenKind.EXCLAMATION,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.FORWARD_SLASH,
    "\\": TokenKind.BACKSLASH,
    "§": TokenKind.SECTION_SIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.HYPHEN,
    "^": TokenKind.CARET,
    "_": TokenKind.UNDERSCORE,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "|": TokenKind.PIPE,
    "¤": TokenKind.CURRENCY_SIGN,
    "~": TokenKind.TILDE,
    "`": TokenKind.GRAVE_ACCENT,
    "´": TokenKind.DIACRITICAL,
    "=": TokenKind.EQUALS,
    "µ": TokenKind.MICRO,
    "%": TokenKind.PERCENT,
    "?": TokenKind.QUESTION,
    "@": TokenKind.AT_SIGN,
}

# Two-character operators, keyed by their first character.
OPERATORS: dict[str, dict[str, TokenKind]] = {
    "+": {"+": TokenKind.INCREMENT, "=": TokenKind.ADDITION_ASSIGNMENT},
    "-": {"-": TokenKind.DECREMENT, "=": TokenKind.SUBTRACTION_ASSIGNMENT},
    "*": {"*": TokenKind.POWER, "=": TokenKind.MULTIPLICATION_ASSIGNMENT},
    "/": {"=": TokenKind.DIVISION_ASSIGNMENT},
    ">": {">": TokenKind.BITWISE_SHIFT_RIGHT},
    "<": {"<": TokenKind.BITWISE_SHIFT_LEFT},
}

# Keyword spellings of the bitwise operators.
KEYWORD_OPERATORS: dict[str, TokenKind] = {
    "AND": TokenKind.BITWISE_AND,
    "OR": TokenKind.BITWISE_OR,
    "XOR": TokenKind.BITWISE_EXCLUSIVE_OR,
    "XAND": TokenKind.BITWISE_EXCLUSIVE_AND,
}

QUOTES: dict[str, TokenKind] = {
    '"': TokenKind.STRING_LITERAL,
    "'": TokenKind.CHAR_LITERAL,
}

NEWLINE_CHARS = frozenset("\r\n")


def is_space(ch: str) -> bool:
    """Return True for whitespace other than tabs and line breaks."""
    return ch.isspace() and ch != "\t" and ch not in NEWLINE_CHARS


def is_ident_start(ch: str) -> bool:
    return ch.isalpha() and ch not in SYMBOLS


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_ident_start(ch) or ch.isdecimal()
