"""Generation of the shared backing buffer."""

from .buffer import BufferFactory, random_filler
from .encoder import SUPPORTED_FORMATS, ImageEncoder, PillowImageEncoder

__all__ = [
    "BufferFactory",
    "random_filler",
    "SUPPORTED_FORMATS",
    "ImageEncoder",
    "PillowImageEncoder",
]
