"""Core: data model, circular stream and stream factory."""

from .models import DEFAULT_BUFFER_SIZE, EOF, SharedBuffer
from .stream import CircularStream
from .factory import StreamFactory, get_default_factory, open_stream

__all__ = [
	"DEFAULT_BUFFER_SIZE",
	"EOF",
	"SharedBuffer",
	"CircularStream",
	"StreamFactory",
	"get_default_factory",
	"open_stream",
]
