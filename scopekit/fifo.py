"""Fixed-capacity circular FIFO that drops items when full."""

from typing import Any, List


class Fifo:
    """Circular queue backed by ``size`` slots, holding at most ``size - 1`` items."""

    def __init__(self, size: int = 11) -> None:
        if size < 2:
            raise ValueError("fifo size must be at least 2")
        self._slots: List[Any] = [None] * size
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of items the FIFO can hold."""
        return len(self._slots) - 1

    def put(self, item: Any) -> bool:
        """Append ``item``; return False and drop it if the FIFO is full."""
        new_tail = (self._tail + 1) % len(self._slots)
        if new_tail == self._head:
            return False
        self._slots[self._tail] = item
        self._tail = new_tail
        return True

    def get(self) -> Any:
        """Remove and return the oldest item; raise IndexError if empty."""
        if self._head == self._tail:
            raise IndexError("get from empty fifo")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        return item

    def __len__(self) -> int:
        return (self._tail - self._head) % len(self._slots)