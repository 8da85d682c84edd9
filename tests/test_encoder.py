"""Tests for the Pillow-based header encoder."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from endless_stream.generation.encoder import SUPPORTED_FORMATS, PillowImageEncoder
from endless_stream.shared.errors import EncodingError


def test_default_encoding_is_single_pixel_gif() -> None:
    payload = PillowImageEncoder().encode()

    assert payload.startswith(b"GIF8")
    with Image.open(io.BytesIO(payload)) as image:
        assert image.format == "GIF"
        assert image.size == (1, 1)


@pytest.mark.parametrize("image_format", SUPPORTED_FORMATS)
def test_supported_formats_decode_back(image_format: str) -> None:
    payload = PillowImageEncoder(image_format.lower()).encode()

    with Image.open(io.BytesIO(payload)) as image:
        assert image.format == image_format
        assert image.size == (1, 1)


def test_unknown_format_raises_encoding_error() -> None:
    with pytest.raises(EncodingError):
        PillowImageEncoder("NOT-A-FORMAT").encode()


def test_invalid_mode_raises_encoding_error() -> None:
    with pytest.raises(EncodingError):
        PillowImageEncoder(mode="bogus").encode()
