"""Shared modules: configuration, errors, logging."""

from .config import StreamConfig, load_stream_config, parse_size
from .errors import ConfigurationError, EncodingError, EndlessStreamError
from .logging import configure_logging

__all__ = [
	"StreamConfig",
	"load_stream_config",
	"parse_size",
	"ConfigurationError",
	"EncodingError",
	"EndlessStreamError",
	"configure_logging",
]
