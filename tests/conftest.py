"""Shared fixtures for tests."""

from pathlib import Path
from urllib.parse import quote

import pytest

from frameflow_media.media.application.protocol_service import ResourceProtocolService

MEDIA_LENGTH = 4096


def make_content(length: int = MEDIA_LENGTH) -> bytes:
    """Deterministic, non-repeating-looking test payload"""
    return bytes((i * 31 + i // 256) % 256 for i in range(length))


def to_uri(path: Path) -> str:
    return "frameflow://" + quote(str(path), safe="")


@pytest.fixture
def media_content() -> bytes:
    return make_content()


@pytest.fixture
def media_file(tmp_path: Path, media_content: bytes) -> Path:
    """A small .mp4 file with known bytes."""
    path = tmp_path / "clip.mp4"
    path.write_bytes(media_content)
    return path


@pytest.fixture
def protocol_service() -> ResourceProtocolService:
    return ResourceProtocolService()


@pytest.fixture
def uri_for():
    """Build a frameflow:// URI for a path."""
    return to_uri


@pytest.fixture
def media_uri(media_file: Path) -> str:
    return to_uri(media_file)
