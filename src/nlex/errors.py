"""Error types with formatted source context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nlex.tokens import Position, position_at, split_lines

if TYPE_CHECKING:
    from nlex.tokens import TokenKind


class OutOfRangeError(IndexError):
    """Raised when a cursor operation targets a position outside its elements."""

    def __init__(self, message: str, index: int, length: int) -> None:
        self.message = message
        self.index = index
        self.length = length
        super().__init__(f"{message} (index {index}, length {length})")


class LexError(Exception):
    """Raised on the first lexing error, with offset and source context."""

    # Underline to the end of the source line instead of a single caret
    underline_to_line_end = False

    def __init__(
        self,
        message: str,
        offset: int,
        source: str,
        kind: TokenKind | None = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        self.kind = kind
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return position_at(self.source, self.offset)

    def format(self, filename: str = "<input>") -> str:
        position = self.position
        lines = split_lines(self.source)
        line_idx = position.line - 1
        col = position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        if self.underline_to_line_end:
            underline_len = max(1, len(source_line) - col + 1)
        else:
            underline_len = 1

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnterminatedLiteralError(LexError):
    """A string or char literal reached end of input before its closing quote."""

    underline_to_line_end = True


class UnrecognizedCharacterError(LexError):
    """A character that starts no known token."""

    def __init__(self, char: str, offset: int, source: str) -> None:
        self.char = char
        super().__init__(f"unrecognized character {char!r}", offset, source)
