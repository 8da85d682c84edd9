"""Readable stream of arbitrary length backed by a circular buffer."""

from __future__ import annotations

import io

from .models import EOF, SharedBuffer


class CircularStream(io.RawIOBase):
    """Yields `size` bytes by reading the shared buffer over and over.

    Byte `i` of the stream is `buffer.data[i % buffer.capacity]`. Once `size`
    bytes were produced the stream is exhausted: `read_into` and `read_byte`
    return `EOF`, while the `io` methods (`readinto`, `read`) follow the usual
    convention of returning 0 / ``b""``.

    The cursor is private state; concurrent reads on one instance must be
    serialized by the caller. The buffer itself may be shared freely.
    """

    def __init__(self, buffer: SharedBuffer, size: int | None = None) -> None:
        super().__init__()
        if size is None:
            size = buffer.capacity
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise ValueError(f"Stream size must be a non-negative integer, got {size!r}")
        self._buffer = buffer
        self._size = size
        self._position = 0

    @property
    def buffer(self) -> SharedBuffer:
        return self._buffer

    @property
    def size(self) -> int:
        return self._size

    @property
    def position(self) -> int:
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= self._size

    def bytes_remaining(self) -> int:
        return self._size - self._position

    available = bytes_remaining

    def read_into(self, destination: bytearray | memoryview, offset: int = 0, length: int | None = None) -> int:
        """Copy up to `length` bytes into ``destination[offset:offset + length]``.

        Returns the number of bytes copied, or `EOF` when the stream is
        exhausted. A zero-length request on an active stream returns 0.
        Raises `ValueError` when the region does not fit into `destination`.
        """

        self._check_open()
        target = memoryview(destination).cast("B")
        if length is None:
            length = len(target) - offset
        if offset < 0 or length < 0 or offset + length > len(target):
            raise ValueError(
                f"Region [{offset}, {offset + length}) does not fit destination of {len(target)} bytes"
            )

        if self.exhausted:
            return EOF

        source = memoryview(self._buffer.data)
        capacity = self._buffer.capacity
        total = min(length, self.bytes_remaining())
        copied = 0
        while copied < total:
            start = (self._position + copied) % capacity
            chunk = min(total - copied, capacity - start)
            target[offset + copied : offset + copied + chunk] = source[start : start + chunk]
            copied += chunk

        self._position += copied
        return copied

    def read_byte(self) -> int:
        """Return the next byte value (0-255) or `EOF`."""

        single = bytearray(1)
        if self.read_into(single, 0, 1) == EOF:
            return EOF
        return single[0]

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed stream")

    # io.RawIOBase protocol

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        count = self.read_into(b)
        return 0 if count == EOF else count

    def tell(self) -> int:
        self._check_open()
        return self._position

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._size}, position={self._position}, "
            f"capacity={self._buffer.capacity})"
        )
