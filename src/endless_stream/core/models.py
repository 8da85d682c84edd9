"""Data model of the stream generator."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 2 * 1024 * 1024

# Returned by the bulk and single-byte reads once a stream is exhausted.
EOF = -1


@dataclass(frozen=True, slots=True)
class SharedBuffer:
    """Immutable backing buffer reused by every stream.

    `data` starts with `header_length` bytes of an encoded image followed by
    random filler. Built once and shared read-only.
    """

    data: bytes
    header_length: int = 0

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("Shared buffer must not be empty")
        if not 0 <= self.header_length <= len(self.data):
            raise ValueError("Header length out of range")

    @property
    def capacity(self) -> int:
        return len(self.data)

    @property
    def header(self) -> bytes:
        return self.data[: self.header_length]
