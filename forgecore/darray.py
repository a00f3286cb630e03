"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from typing import Any, Iterator

from forgecore.kmemory import MemoryTag, MemoryTracker

DEFAULT_CAPACITY = 1
RESIZE_FACTOR = 2
# capacity, length and stride, each a 64-bit field.
_HEADER_SIZE = 3 * 8


class DynamicArray:
    """Ordered elements with doubling capacity and optional memory accounting."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        stride: int = 8,
        tracker: MemoryTracker | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        if stride < 0:
            raise ValueError(f"stride must not be negative, got {stride}")
        self.stride = stride
        self._tracker = tracker
        self._items: list[Any] = []
        self._capacity = capacity
        self._destroyed = False
        self._block = self._reserve(capacity)

    def _footprint(self, capacity: int) -> int:
        return _HEADER_SIZE + capacity * self.stride

    def _reserve(self, capacity: int) -> bytearray | None:
        if self._tracker is None:
            return None
        return self._tracker.allocate(self._footprint(capacity), MemoryTag.DARRAY)

    def _release(self) -> None:
        if self._tracker is not None:
            self._tracker.free(self._block, self._footprint(self._capacity), MemoryTag.DARRAY)
        self._block = None

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError("array has been destroyed")

    def _grow(self) -> None:
        new_capacity = self._capacity * RESIZE_FACTOR
        new_block = self._reserve(new_capacity)
        self._release()
        self._capacity = new_capacity
        self._block = new_block

    def capacity(self) -> int:
        """Number of elements that fit before the next resize."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Append ``value``, growing if the array is full."""
        self._ensure_alive()
        if len(self._items) >= self._capacity:
            self._grow()
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def pop_at(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting the rest down."""
        length = len(self._items)
        if not 0 <= index < length:
            raise IndexError(
                f"Index outside of bounds of this array! Length: {length}, index: {index}"
            )
        return self._items.pop(index)

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` before the existing element at ``index``."""
        self._ensure_alive()
        length = len(self._items)
        if not 0 <= index < length:
            raise IndexError(
                f"Index outside the bounds of this array! Length: {length}, index: {index}"
            )
        if length >= self._capacity:
            self._grow()
        self._items.insert(index, value)

    def clear(self) -> None:
        """Drop all elements but keep the capacity."""
        self._items.clear()

    def destroy(self) -> None:
        """Release the array's storage; it cannot be used afterwards."""
        self._ensure_alive()
        self._release()
        self._items.clear()
        self._capacity = 0
        self._destroyed = True

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)