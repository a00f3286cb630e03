"""A bump allocator that hands out consecutive slices of one buffer."""

from __future__ import annotations

from forgecore.kmemory import MemoryTag, MemoryTracker, zero_memory


class AllocationError(Exception):
    """Raised when an allocator cannot satisfy a request."""


class LinearAllocator:
    """Allocates slices of a fixed buffer in order and frees them all at once."""

    def __init__(
        self,
        total_size: int,
        memory: bytearray | None = None,
        tracker: MemoryTracker | None = None,
    ) -> None:
        if total_size < 0:
            raise ValueError(f"total size must not be negative, got {total_size}")
        if memory is not None and len(memory) < total_size:
            raise ValueError(
                f"memory of {len(memory)} bytes is smaller than total size {total_size}"
            )
        self.total_size = total_size
        self.allocated = 0
        self.owns_memory = memory is None
        self._tracker = tracker
        if memory is not None:
            self.memory: bytearray | None = memory
        elif tracker is not None:
            self.memory = tracker.allocate(total_size, MemoryTag.LINEAR_ALLOCATOR)
        else:
            self.memory = bytearray(total_size)

    def remaining(self) -> int:
        """Bytes still available."""
        return self.total_size - self.allocated

    def allocate(self, size: int) -> memoryview:
        """Return a view of the next ``size`` bytes of the buffer."""
        if self.memory is None:
            raise AllocationError("linear_allocator_allocate - provided allocator not initialized.")
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        if self.allocated + size > self.total_size:
            raise AllocationError(
                f"linear_allocator_allocate - Tried to allocate {size}B, "
                f"only {self.remaining()}B remaining."
            )
        start = self.allocated
        self.allocated += size
        return memoryview(self.memory)[start:start + size]

    def free_all(self) -> None:
        """Release every allocation and zero the buffer."""
        if self.memory is not None:
            self.allocated = 0
            zero_memory(memoryview(self.memory)[: self.total_size])

    def destroy(self) -> None:
        """Give up the buffer, releasing it if this allocator owns it."""
        self.allocated = 0
        if self.owns_memory and self.memory is not None and self._tracker is not None:
            self._tracker.free(self.memory, self.total_size, MemoryTag.LINEAR_ALLOCATOR)
        self.memory = None
        self.total_size = 0
        self.owns_memory = False