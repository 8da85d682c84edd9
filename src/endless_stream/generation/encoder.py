"""Minimal image encoding used as the stream header."""

from __future__ import annotations

import io
from typing import Protocol

from PIL import Image

from endless_stream.shared.errors import EncodingError

SUPPORTED_FORMATS = ("GIF", "PNG", "BMP")


class ImageEncoder(Protocol):
    """Produces a short, valid image encoding."""

    def encode(self) -> bytes:
        """Returns encoded image bytes or raises `EncodingError`."""


class PillowImageEncoder:
    """Encodes a single-pixel, single-colour canvas with Pillow."""

    def __init__(self, image_format: str = "GIF", *, mode: str = "L", color: int | tuple[int, ...] = 0) -> None:
        self.image_format = image_format.upper()
        self.mode = mode
        self.color = color

    def encode(self) -> bytes:
        try:
            image = Image.new(self.mode, (1, 1), color=self.color)
        except (ValueError, TypeError, KeyError) as exc:
            raise EncodingError(f"Cannot create {self.mode} canvas: {exc}") from exc

        try:
            with io.BytesIO() as out:
                image.save(out, format=self.image_format)
                return out.getvalue()
        except (OSError, ValueError, KeyError) as exc:
            raise EncodingError(f"Cannot encode image as {self.image_format}: {exc}") from exc
        finally:
            image.close()
