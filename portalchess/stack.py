"""A LIFO stack used to record moves so they can be undone."""

from __future__ import annotations

from typing import Any


class MoveStack:
    """Last-in, first-out store of moves."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self):
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def record_move(self, record: Any) -> None:
        """Save a move so that it can be undone later."""
        self.push(record)

    def undo_move(self) -> Any:
        """Remove the last recorded move and return it."""
        return self.pop()

    def last_move(self) -> Any:
        """Return the last recorded move without removing it."""
        return self.top()