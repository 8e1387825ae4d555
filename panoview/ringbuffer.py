"""A fixed-size byte ring buffer with contiguous put/get semantics."""

from __future__ import annotations


class RingBuffer:
    """Byte ring buffer over a fixed-size storage area.

    Writes and reads only ever touch one contiguous region of the storage,
    so data that wraps around the end may need two calls to be fully
    written or read.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("ring buffer size must be positive")
        self._buf = bytearray(size)
        self._size = size
        self._load = 0
        self._consume = 0
        self._count = 0
        self._max_load = size
        self._max_consume = 0
        self._update_state()

    def put(self, data: bytes | bytearray | memoryview) -> int:
        """Buffer as much of ``data`` as fits contiguously; return bytes taken."""
        view = memoryview(data).cast("B")
        n = min(len(view), self._max_load)
        self._buf[self._load:self._load + n] = view[:n]
        self._load += n
        self._count += n
        self._update_state()
        return n

    def get(self, size: int) -> bytes:
        """Read up to ``size`` contiguous bytes from the buffer."""
        if size < 0:
            raise ValueError("size must not be negative")
        n = min(size, self._max_consume)
        out = bytes(self._buf[self._consume:self._consume + n])
        self._consume += n
        self._count -= n
        self._update_state()
        return out

    def skip(self, size: int) -> int:
        """Discard up to ``size`` bytes, across the wrap if needed; return bytes skipped."""
        if size < 0:
            raise ValueError("size must not be negative")
        remaining = size
        for _ in range(2):  # the skipped region may wrap once
            step = min(remaining, self._max_consume)
            self._consume += step
            self._count -= step
            remaining -= step
            self._update_state()
        return size - remaining

    def free_space(self) -> int:
        """Bytes a single :meth:`put` call can currently accept."""
        return self._max_load

    def buffered_bytes(self) -> int:
        """Total bytes held, possibly split across the wrap."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def _update_state(self) -> None:
        if self._consume == self._size:
            self._consume = 0
        if self._load == self._size:
            self._load = 0

        if self._load == self._consume:
            if self._count > 0:
                self._max_load = 0
                self._max_consume = self._size - self._consume
            else:
                self._max_load = self._size - self._load
                self._max_consume = 0
        elif self._load > self._consume:
            self._max_load = self._size - self._load
            self._max_consume = self._load - self._consume
        else:
            self._max_load = self._consume - self._load
            self._max_consume = self._size - self._consume