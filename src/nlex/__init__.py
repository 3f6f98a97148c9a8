"""nlex: a lossless character-stream tokenizer."""

from __future__ import annotations

from nlex.cursor import Cursor
from nlex.errors import (
    LexError,
    OutOfRangeError,
    UnrecognizedCharacterError,
    UnterminatedLiteralError,
)
from nlex.lexer import Lexer, tokenize
from nlex.tokens import Position, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "LexError",
    "Lexer",
    "OutOfRangeError",
    "Position",
    "Token",
    "TokenKind",
    "UnrecognizedCharacterError",
    "UnterminatedLiteralError",
    "tokenize",
]
