"""Shared fixtures for stream generator tests."""

from __future__ import annotations

import pytest

from endless_stream.core.models import SharedBuffer

from tests.stubs import StaticEncoder


@pytest.fixture
def ten_byte_buffer() -> SharedBuffer:
    return SharedBuffer(data=bytes(range(1, 11)), header_length=0)


@pytest.fixture
def static_encoder() -> StaticEncoder:
    return StaticEncoder(b"GIF89a-fake-header")


@pytest.fixture(autouse=True)
def _clean_stream_env(monkeypatch) -> None:
    for key in (
        "ENDLESS_STREAM_BUFFER_SIZE",
        "ENDLESS_STREAM_IMAGE_FORMAT",
        "ENDLESS_STREAM_SEED",
        "ENDLESS_STREAM_DEFAULT_SIZE",
    ):
        monkeypatch.delenv(key, raising=False)
