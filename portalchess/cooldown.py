"""A FIFO queue that holds portals waiting out their cooldown."""

from __future__ import annotations

from collections import deque
from typing import Any


class CooldownQueue:
    """First-in, first-out queue of portals on cooldown."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self):
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def enter_cooldown(self, portal: Any) -> None:
        """Put a portal that has just been used into the cooldown queue."""
        self.enqueue(portal)