"""Environment-based configuration for stream generation."""

from __future__ import annotations

from dataclasses import dataclass
import os

from endless_stream.core.models import DEFAULT_BUFFER_SIZE
from endless_stream.generation.encoder import SUPPORTED_FORMATS

from .errors import ConfigurationError


_SIZE_SUFFIXES = {
    "K": 1024,
    "M": 1024 * 1024,
    "G": 1024 * 1024 * 1024,
}


@dataclass(frozen=True, slots=True)
class StreamConfig:
    """Settings shared by every stream created from one factory."""

    buffer_size: int = DEFAULT_BUFFER_SIZE
    image_format: str = "GIF"
    seed: int | None = None
    default_stream_size: int | None = None

    @classmethod
    def default(cls) -> "StreamConfig":
        return cls()

    def validate(self) -> "StreamConfig":
        if not isinstance(self.buffer_size, int) or self.buffer_size <= 0:
            raise ConfigurationError(f"Buffer size must be a positive integer, got {self.buffer_size!r}")
        if self.image_format.upper() not in SUPPORTED_FORMATS:
            raise ConfigurationError(
                f"Unsupported image format {self.image_format!r} (expected one of: {', '.join(SUPPORTED_FORMATS)})"
            )
        if self.default_stream_size is not None and self.default_stream_size < 0:
            raise ConfigurationError("Default stream size must not be negative")
        return self


def parse_size(text: str | int) -> int:
    """Parses a byte count such as ``4096``, ``64K`` or ``2M``.

    Suffixes are binary multiples and case-insensitive; an optional trailing
    ``B`` / ``iB`` is accepted (``2MiB``, ``512kb``).
    """

    if isinstance(text, int):
        value = text
    else:
        raw = (text or "").strip().upper()
        if raw.endswith("IB") and len(raw) > 2 and raw[-3] in _SIZE_SUFFIXES:
            raw = raw[:-2]
        elif raw.endswith("B") and len(raw) > 1:
            raw = raw[:-1]
        multiplier = 1
        if raw and raw[-1] in _SIZE_SUFFIXES:
            multiplier = _SIZE_SUFFIXES[raw[-1]]
            raw = raw[:-1]
        try:
            value = int(raw) * multiplier
        except ValueError:
            raise ConfigurationError(f"Invalid size: {text!r}") from None

    if value < 0:
        raise ConfigurationError(f"Size must not be negative: {text!r}")
    return value


def _env(name: str) -> str:
    return (os.getenv(name) or "").strip()


def load_stream_config() -> StreamConfig:
    """Loads stream configuration from the environment.

    Recognised variables (blank or missing ones keep the default):
    - `ENDLESS_STREAM_BUFFER_SIZE`: backing buffer capacity (default 2M)
    - `ENDLESS_STREAM_IMAGE_FORMAT`: header image format (default GIF)
    - `ENDLESS_STREAM_SEED`: integer seed for reproducible filler
    - `ENDLESS_STREAM_DEFAULT_SIZE`: size of streams opened without one
    """

    defaults = StreamConfig.default()

    buffer_size = defaults.buffer_size
    raw = _env("ENDLESS_STREAM_BUFFER_SIZE")
    if raw:
        buffer_size = parse_size(raw)

    image_format = _env("ENDLESS_STREAM_IMAGE_FORMAT").upper() or defaults.image_format

    seed = defaults.seed
    raw = _env("ENDLESS_STREAM_SEED")
    if raw:
        try:
            seed = int(raw)
        except ValueError:
            raise ConfigurationError(f"Invalid ENDLESS_STREAM_SEED: {raw!r}") from None

    default_stream_size = defaults.default_stream_size
    raw = _env("ENDLESS_STREAM_DEFAULT_SIZE")
    if raw:
        default_stream_size = parse_size(raw)

    return StreamConfig(
        buffer_size=buffer_size,
        image_format=image_format,
        seed=seed,
        default_stream_size=default_stream_size,
    ).validate()
