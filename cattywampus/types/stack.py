"""The calculator's operand stack.

A last-in-first-out sequence of Values, stored bottom-first. Reading
(`peek_n`, `slice_n`) and removing (`chop_n`) are separate operations so that
checked application can validate and invoke against the current contents
before mutating anything.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from cattywampus.types.value import Value


class Stack:
    __slots__ = ("_elements",)

    def __init__(self, values: Iterable[Value] = ()):
        self._elements: list[Value] = list(values)

    def push(self, value: Value) -> None:
        """Push `value`, making it the top element."""
        self._elements.append(value)

    def extend(self, values: Iterable[Value]) -> None:
        """Push each of `values` in order; the last one becomes the top."""
        self._elements.extend(values)

    def pop(self) -> Optional[Value]:
        """Remove and return the top value, or None if the stack is empty."""
        if not self._elements:
            return None
        return self._elements.pop()

    def height(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def peek_n(self, n: int) -> Value:
        """Return the value `n` positions below the top (0 is the top).

        Requires 0 <= n < height(); callers check the height first.
        """
        if not 0 <= n < len(self._elements):
            raise IndexError(f"peek_n({n}) on a stack of height {len(self._elements)}")
        return self._elements[-1 - n]

    def slice_n(self, n: int) -> tuple[Value, ...]:
        """Return the top n + 1 values, oldest first.

        Index 0 of the result is `n` positions below the top. Same precondition
        as peek_n.
        """
        if not 0 <= n < len(self._elements):
            raise IndexError(f"slice_n({n}) on a stack of height {len(self._elements)}")
        return tuple(self._elements[len(self._elements) - 1 - n:])

    def chop_n(self, n: int) -> None:
        """Remove the top `n` values without returning them.

        Requires 0 <= n <= height().
        """
        if not 0 <= n <= len(self._elements):
            raise IndexError(f"chop_n({n}) on a stack of height {len(self._elements)}")
        if n:
            del self._elements[-n:]

    def clear(self) -> None:
        self._elements.clear()

    def iter(self) -> Iterator[Value]:
        """Iterate oldest first over a snapshot of the current contents."""
        return iter(tuple(self._elements))

    def __iter__(self) -> Iterator[Value]:
        return self.iter()

    def __repr__(self):
        return f"Stack({self._elements!r})"
