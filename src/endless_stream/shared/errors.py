"""Exceptions raised by the stream generator."""

from __future__ import annotations


class EndlessStreamError(RuntimeError):
    """Base error of the package."""


class ConfigurationError(EndlessStreamError):
    """Invalid buffer capacity, stream size or image format."""


class EncodingError(EndlessStreamError):
    """The image encoder could not produce a header.

    Recovered inside `BufferFactory`; stream consumers never see it.
    """
