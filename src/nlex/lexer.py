"""nlex lexer: converts source text into a lossless token stream."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from nlex.cursor import Cursor
from nlex.errors import LexError, UnrecognizedCharacterError, UnterminatedLiteralError
from nlex.tokens import (
    KEYWORD_OPERATORS,
    NEWLINE_CHARS,
    OPERATORS,
    QUOTES,
    SYMBOLS,
    Token,
    TokenKind,
    is_ident_char,
    is_ident_start,
    is_space,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Tokenize source text into a stream of Token objects.

    The lexer pulls one character at a time from a ``Cursor[str]`` and,
    for multi-character constructs, keeps driving the cursor until the
    lexeme is complete.  Tokens come out either all at once (``begin``)
    or one by one (``next_token`` / iteration).  A lexer is single-use:
    once its cursor is exhausted, or after it raises a LexError, it
    yields nothing more.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        *,
        keyword_operators: bool = True,
    ) -> None:
        self._source = source
        self._filename = filename
        self._keyword_operators = keyword_operators
        self._cursor: Cursor[str] = Cursor(source)
        self._emitted = 0
        self._finished = False

    def begin(self) -> list[Token]:
        """Tokenize the remaining source and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Return the next token, or None once the source is exhausted."""
        if self._finished:
            return None

        ch = self._cursor.advance_with_current()
        if ch is None:
            self._finished = True
            logger.debug("%s: exhausted after %d tokens", self._filename, self._emitted)
            return None

        start = self._cursor.position - 1

        if is_space(ch):
            token = self._lex_run(TokenKind.WHITESPACE, is_space, start)
        elif ch == "\t":
            token = self._lex_run(TokenKind.TAB, lambda c: c == "\t", start)
        elif ch in NEWLINE_CHARS:
            token = self._lex_run(TokenKind.NEWLINE, lambda c: c in NEWLINE_CHARS, start)
        elif ch in QUOTES:
            token = self._lex_literal(ch, start)
        elif is_ident_start(ch):
            token = self._lex_identifier(start)
        elif ch.isdecimal():
            token = self._lex_run(TokenKind.NUMERIC_LITERAL, str.isdecimal, start)
        elif ch in OPERATORS:
            token = self._lex_operator(ch, start)
        elif ch in SYMBOLS:
            token = Token(SYMBOLS[ch], ch, start, start + 1)
        else:
            raise self._error(UnrecognizedCharacterError(ch, start, self._source))

        self._emitted += 1
        return token

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, exc: LexError) -> LexError:
        # A failed lexer stays finished; resuming is left to a fresh Lexer
        self._finished = True
        logger.debug("%s: lex error at offset %d: %s", self._filename, exc.offset, exc.message)
        return exc

    def _lex_run(self, kind: TokenKind, predicate: Callable[[str], bool], start: int) -> Token:
        text = "".join(self._cursor.advance_while(predicate))
        return Token(kind, text, start, start + len(text))

    # ------------------------------------------------------------------
    # Identifiers and keyword operators
    # ------------------------------------------------------------------

    def _lex_identifier(self, start: int) -> Token:
        text = "".join(self._cursor.advance_while(is_ident_char))
        kind = TokenKind.IDENTIFIER
        if self._keyword_operators:
            kind = KEYWORD_OPERATORS.get(text, kind)
        return Token(kind, text, start, start + len(text))

    # ------------------------------------------------------------------
    # Operators: longest match first
    # ------------------------------------------------------------------

    def _lex_operator(self, ch: str, start: int) -> Token:
        if not self._cursor.at_end:
            kind = OPERATORS[ch].get(self._cursor.peek())
            if kind is not None:
                self._cursor.advance()
                return Token(kind, ch + self._cursor.current(), start, start + 2)
        return Token(SYMBOLS[ch], ch, start, start + 1)

    # ------------------------------------------------------------------
    # String and char literals
    # ------------------------------------------------------------------

    def _lex_literal(self, quote: str, start: int) -> Token:
        """Consume through the matching unescaped closing quote."""
        kind = QUOTES[quote]
        chars = [quote]
        escaped = False
        while self._cursor.advance():
            ch = self._cursor.current()
            chars.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                return Token(kind, "".join(chars), start, self._cursor.position)

        label = "string" if kind is TokenKind.STRING_LITERAL else "char"
        raise self._error(
            UnterminatedLiteralError(f"unterminated {label} literal", start, self._source, kind)
        )


def tokenize(
    source: str,
    filename: str = "<input>",
    *,
    keyword_operators: bool = True,
) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename, keyword_operators=keyword_operators).begin()
