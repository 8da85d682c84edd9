"""One-time construction of the shared backing buffer."""

from __future__ import annotations

import random

import structlog

from endless_stream.core.models import DEFAULT_BUFFER_SIZE, SharedBuffer
from endless_stream.shared.errors import ConfigurationError, EncodingError

from .encoder import ImageEncoder, PillowImageEncoder


def random_filler(length: int, *, seed: int | None = None) -> bytes:
    """Return pseudo-random filler bytes (reproducible when seeded)."""

    return random.Random(seed).randbytes(int(length))


class BufferFactory:
    """Builds a `SharedBuffer`: encoded image header followed by random filler.

    Encoding failures never propagate; the buffer then consists of filler only.
    A header longer than the requested capacity is truncated to fit.
    """

    def __init__(self, encoder: ImageEncoder | None = None, *, seed: int | None = None) -> None:
        self.encoder = encoder or PillowImageEncoder()
        self.seed = seed
        self._logger = structlog.get_logger(__name__)

    def build(self, capacity: int = DEFAULT_BUFFER_SIZE) -> SharedBuffer:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ConfigurationError(f"Buffer capacity must be a positive integer, got {capacity!r}")

        header = self._encode_header()
        if len(header) > capacity:
            self._logger.warning("image-header-truncated", header_length=len(header), capacity=capacity)
            header = header[:capacity]

        filler = random_filler(capacity - len(header), seed=self.seed)
        buffer = SharedBuffer(data=header + filler, header_length=len(header))
        self._logger.debug("shared-buffer-built", capacity=buffer.capacity, header_length=buffer.header_length)
        return buffer

    def _encode_header(self) -> bytes:
        try:
            return bytes(self.encoder.encode() or b"")
        except EncodingError as exc:
            self._logger.warning("image-encoding-failed", error=str(exc))
        except Exception as exc:  # third-party encoders may raise anything
            self._logger.warning("image-encoding-failed", error=str(exc), error_type=type(exc).__name__)
        return b""
