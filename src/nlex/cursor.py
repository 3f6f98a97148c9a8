"""Generic stepping cursor over a fixed sequence of elements.

Positions are 1-based: the current element is ``elements[position - 1]``
and a fresh cursor sits at position 0, before the first element.  The
cursor knows nothing about what its elements mean; the lexer drives a
``Cursor[str]`` over the source characters.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from nlex.errors import OutOfRangeError

T = TypeVar("T")


class Cursor(Generic[T]):
    """An ordered sequence of elements with a movable current position."""

    def __init__(
        self,
        elements: Iterable[T] = (),
        on_advance: Callable[[T], None] | None = None,
    ) -> None:
        self._elements: tuple[T, ...] = tuple(elements)
        self._position = 0
        self._on_advance = on_advance

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={len(self._elements)})"

    @property
    def position(self) -> int:
        """Current 1-based position (0 before the first advance)."""
        return self._position

    @property
    def at_end(self) -> bool:
        """True when there is no next element to advance onto."""
        return self._position >= len(self._elements)

    # ------------------------------------------------------------------
    # Single steps
    # ------------------------------------------------------------------

    def advance(self) -> bool:
        """Step onto the next element. Returns False when there is none."""
        if self._position >= len(self._elements):
            return False
        self._position += 1
        if self._on_advance is not None:
            self._on_advance(self._elements[self._position - 1])
        return True

    def advance_with_current(self) -> T | None:
        """Advance and return the new current element, or None at the end."""
        if self.advance():
            return self._elements[self._position - 1]
        return None

    def go_to(self, position: int) -> None:
        """Reposition directly. Valid targets are 0 through len(self)."""
        if position < 0 or position > len(self._elements):
            raise OutOfRangeError("cannot go to position", position, len(self._elements))
        self._position = position

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def current(self) -> T:
        if self._position == 0:
            raise OutOfRangeError("no current element", self._position - 1, len(self._elements))
        return self._elements[self._position - 1]

    def peek(self, offset: int = 1) -> T:
        """Return the element *offset* steps from the current one without moving."""
        idx = self._position - 1 + offset
        if idx < 0 or idx >= len(self._elements):
            raise OutOfRangeError("cannot peek", idx, len(self._elements))
        return self._elements[idx]

    # ------------------------------------------------------------------
    # Bulk advances
    # ------------------------------------------------------------------

    def advance_while(self, predicate: Callable[[T], bool]) -> list[T]:
        """Capture the current element plus every following one matching *predicate*.

        The first element that fails the predicate is left unconsumed, so
        after the call the cursor sits on the last captured element.
        """
        run = [self.current()]
        elements = self._elements
        while self._position < len(elements) and predicate(elements[self._position]):
            self.advance()
            run.append(elements[self._position - 1])
        return run

    def advance_until(self, predicate: Callable[[T], bool]) -> list[T]:
        return self.advance_while(lambda element: not predicate(element))

    def advance_until_end(self) -> list[T]:
        """Consume and return every element after the current one."""
        run: list[T] = []
        while self.advance():
            run.append(self._elements[self._position - 1])
        return run

    # ------------------------------------------------------------------
    # Non-moving queries
    # ------------------------------------------------------------------

    def index_of(self, element: T, start: int = 0) -> int:
        """0-based index of the first *element* at or after *start*, or -1."""
        try:
            return self._elements.index(element, start)
        except ValueError:
            return -1

    def get_range(self, start: int, count: int) -> list[T]:
        """Return *count* elements from the 0-based index *start*."""
        if start < 0 or count < 0 or start + count > len(self._elements):
            raise OutOfRangeError("range out of bounds", start + count, len(self._elements))
        return list(self._elements[start : start + count])

    def remaining(self) -> list[T]:
        """Elements after the current one, without moving."""
        return list(self._elements[self._position :])
