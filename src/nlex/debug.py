"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from nlex.tokens import Token


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render one line per token: offsets, kind name, text."""
    lines = [f"{t.start:>5}:{t.end:<5} {t.kind.name:<26} {t.text!r}" for t in tokens]
    return "\n".join(lines) + "\n" if lines else ""


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token table to *file*."""
    file.write(format_tokens(tokens))
