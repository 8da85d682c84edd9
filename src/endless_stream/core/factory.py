"""Creates streams over a single, lazily built shared buffer."""

from __future__ import annotations

import threading
from typing import Iterator

from endless_stream.generation.buffer import BufferFactory
from endless_stream.generation.encoder import ImageEncoder, PillowImageEncoder
from endless_stream.shared.config import StreamConfig, load_stream_config

from .models import SharedBuffer
from .stream import CircularStream

DEFAULT_CHUNK_SIZE = 64 * 1024


class StreamFactory:
    """Owns the shared buffer and opens streams over it.

    The buffer is built on first use, exactly once, even when several threads
    open streams at the same time. Every stream gets a reference to the same
    immutable buffer.
    """

    def __init__(
        self,
        config: StreamConfig | None = None,
        *,
        encoder: ImageEncoder | None = None,
        buffer_factory: BufferFactory | None = None,
    ) -> None:
        self.config = (config or StreamConfig.default()).validate()
        if buffer_factory is None:
            buffer_factory = BufferFactory(
                encoder or PillowImageEncoder(self.config.image_format),
                seed=self.config.seed,
            )
        self._buffer_factory = buffer_factory
        self._buffer: SharedBuffer | None = None
        self._lock = threading.Lock()

    @property
    def buffer(self) -> SharedBuffer:
        buffer = self._buffer
        if buffer is None:
            with self._lock:
                if self._buffer is None:
                    self._buffer = self._buffer_factory.build(self.config.buffer_size)
                buffer = self._buffer
        return buffer

    def open(self, size: int | None = None) -> CircularStream:
        if size is None:
            size = self.config.default_stream_size
        return CircularStream(self.buffer, size)

    def iter_chunks(self, size: int | None = None, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the content of a fresh stream in chunks of at most `chunk_size` bytes."""

        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        with self.open(size) as stream:
            while True:
                chunk = stream.read(chunk_size)
                if not chunk:
                    return
                yield chunk


_default_factory: StreamFactory | None = None
_default_lock = threading.Lock()


def get_default_factory() -> StreamFactory:
    """Process-wide factory configured from the environment."""

    global _default_factory
    factory = _default_factory
    if factory is None:
        with _default_lock:
            if _default_factory is None:
                _default_factory = StreamFactory(load_stream_config())
            factory = _default_factory
    return factory


def open_stream(size: int | None = None) -> CircularStream:
    return get_default_factory().open(size)
