"""Tests for the resource protocol service."""

import asyncio
import os

import pytest

from frameflow_media.media.application.protocol_service import ResourceProtocolService
from frameflow_media.media.domain.models import (
    ByteRange,
    FullBody,
    IoFailure,
    NotFound,
    PartialBody,
    RangeNotSatisfiable,
    ResourceRequest,
)
from frameflow_media.media.infrastructure.caching import InMemoryRangeCache


def _respond(service: ResourceProtocolService, uri: str, range_header=None):
    return asyncio.run(service.respond(ResourceRequest(raw_uri=uri, range_header=range_header)))


def _handle(service: ResourceProtocolService, uri: str, range_header=None):
    return asyncio.run(service.handle(ResourceRequest(raw_uri=uri, range_header=range_header)))


@pytest.mark.parametrize("start, end", [(0, 0), (0, 99), (100, 1123), (4000, 4095), (4095, 4095)])
def test_satisfiable_range_returns_exact_slice(protocol_service, media_uri, media_content, start, end) -> None:
    response = _respond(protocol_service, media_uri, f"bytes={start}-{end}")

    assert response.status == 206
    assert response.body == media_content[start:end + 1]
    assert response.headers["Content-Length"] == str(end - start + 1)
    assert response.headers["Content-Range"] == f"bytes {start}-{end}/{len(media_content)}"
    assert response.headers["Content-Type"] == "video/mp4"
    assert response.headers["Accept-Ranges"] == "bytes"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_open_range_from_zero_returns_whole_content_as_partial(protocol_service, media_uri, media_content) -> None:
    outcome = _handle(protocol_service, media_uri, "bytes=0-")

    assert isinstance(outcome, PartialBody)
    assert outcome.byte_range == ByteRange(start=0, end=len(media_content) - 1)

    response = outcome.to_response()
    assert response.status == 206
    assert response.body == media_content


def test_no_range_returns_whole_file(protocol_service, media_uri, media_content) -> None:
    response = _respond(protocol_service, media_uri)

    assert response.status == 200
    assert response.body == media_content
    assert response.headers == {
        "Access-Control-Allow-Origin": "*",
        "Content-Type": "video/mp4",
        "Content-Length": str(len(media_content)),
        "Accept-Ranges": "bytes",
    }


def test_malformed_range_returns_whole_file(protocol_service, media_uri, media_content) -> None:
    response = _respond(protocol_service, media_uri, "frames=0-10")

    assert response.status == 200
    assert response.body == media_content


def test_start_beyond_eof_serves_last_byte(protocol_service, media_uri, media_content) -> None:
    length = len(media_content)
    response = _respond(protocol_service, media_uri, f"bytes={length + 100}-")

    assert response.status == 206
    assert response.body == media_content[-1:]
    assert response.headers["Content-Range"] == f"bytes {length - 1}-{length - 1}/{length}"
    assert response.headers["Content-Length"] == "1"


@pytest.mark.parametrize("range_header", [None, "bytes=0-10", "bytes=10-5"])
def test_missing_file_is_not_found(protocol_service, tmp_path, uri_for, range_header) -> None:
    outcome = _handle(protocol_service, uri_for(tmp_path / "missing.mp4"), range_header)

    assert outcome == NotFound()
    response = outcome.to_response()
    assert response.status == 404
    assert response.body == b"File not found"


def test_start_after_end_is_not_satisfiable(protocol_service, media_uri, media_content) -> None:
    outcome = _handle(protocol_service, media_uri, "bytes=10-5")

    assert outcome == RangeNotSatisfiable(length=len(media_content))
    response = outcome.to_response()
    assert response.status == 416
    assert response.headers == {"Content-Range": f"bytes */{len(media_content)}"}
    assert response.body == b""


def test_empty_file(protocol_service, tmp_path, uri_for) -> None:
    path = tmp_path / "empty.wav"
    path.write_bytes(b"")

    whole = _respond(protocol_service, uri_for(path))
    assert whole.status == 200
    assert whole.body == b""
    assert whole.headers["Content-Length"] == "0"
    assert whole.headers["Content-Type"] == "audio/wav"

    ranged = _respond(protocol_service, uri_for(path), "bytes=0-")
    assert ranged.status == 416
    assert ranged.headers["Content-Range"] == "bytes */0"


@pytest.mark.parametrize(
    "name, mime_type",
    [("poster.png", "image/png"), ("notes.xyz", "application/octet-stream"), ("track.MP3", "audio/mpeg")],
)
def test_content_type_follows_extension(protocol_service, tmp_path, uri_for, name, mime_type) -> None:
    path = tmp_path / name
    path.write_bytes(b"0123456789")

    outcome = _handle(protocol_service, uri_for(path), "bytes=2-4")

    assert isinstance(outcome, PartialBody)
    assert outcome.body == b"234"
    assert outcome.file_info.mime_type == mime_type


def test_directory_is_an_io_failure(protocol_service, tmp_path, uri_for) -> None:
    directory = tmp_path / "folder.mp4"
    directory.mkdir()

    outcome = _handle(protocol_service, uri_for(directory))

    assert isinstance(outcome, IoFailure)
    response = outcome.to_response()
    assert response.status == 500
    assert response.body == outcome.message.encode("utf-8")
    assert response.body


def test_path_with_spaces_and_unicode(protocol_service, tmp_path, uri_for) -> None:
    path = tmp_path / "take één.mp4"
    path.write_bytes(b"abcdef")

    outcome = _handle(protocol_service, uri_for(path))

    assert outcome == FullBody(body=b"abcdef", file_info=outcome.file_info)
    assert outcome.file_info.length == 6


def test_repeated_request_is_identical(protocol_service, media_uri) -> None:
    first = _respond(protocol_service, media_uri, "bytes=512-2047")
    second = _respond(protocol_service, media_uri, "bytes=512-2047")

    assert first.body == second.body
    assert first.headers == second.headers


def test_concurrent_ranges_do_not_interfere(protocol_service, media_uri, media_content) -> None:
    ranges = [(i * 97 % 4000, i * 97 % 4000 + (i % 13) * 7) for i in range(64)]

    async def fetch_all():
        requests = [ResourceRequest(raw_uri=media_uri, range_header=f"bytes={s}-{e}") for s, e in ranges]
        return await asyncio.gather(*(protocol_service.respond(r) for r in requests))

    responses = asyncio.run(fetch_all())

    for (start, end), response in zip(ranges, responses):
        assert response.status == 206
        assert response.body == media_content[start:end + 1]


def test_custom_scheme_and_origin(tmp_path) -> None:
    path = tmp_path / "a.jpg"
    path.write_bytes(b"jpeg")
    service = ResourceProtocolService(scheme="media", allow_origin="http://localhost:1420")

    response = _respond(service, f"media://{path}")

    assert response.status == 200
    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:1420"
    assert response.headers["Content-Type"] == "image/jpeg"


class TestRangeCaching:
    @pytest.fixture
    def cache(self) -> InMemoryRangeCache:
        return InMemoryRangeCache(max_size_mb=1, max_age_minutes=10)

    @pytest.fixture
    def cached_service(self, cache) -> ResourceProtocolService:
        return ResourceProtocolService(range_cache=cache)

    def test_partial_bodies_are_cached(self, cached_service, cache, media_uri, media_file, media_content) -> None:
        _respond(cached_service, media_uri, "bytes=0-9")

        stats = asyncio.run(cache.get_cache_stats())
        assert stats["entries"] == 1
        assert stats["size_bytes"] == 10

        response = _respond(cached_service, media_uri, "bytes=0-9")
        assert response.body == media_content[:10]

    def test_whole_file_is_not_cached(self, cached_service, cache, media_uri) -> None:
        _respond(cached_service, media_uri)

        assert asyncio.run(cache.get_cache_stats())["entries"] == 0

    def test_modified_file_is_not_served_from_cache(self, cached_service, media_uri, media_file) -> None:
        _respond(cached_service, media_uri, "bytes=0-3")

        media_file.write_bytes(b"ZZZZ" + media_file.read_bytes()[4:])
        stat = media_file.stat()
        os.utime(media_file, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))

        response = _respond(cached_service, media_uri, "bytes=0-3")
        assert response.body == b"ZZZZ"

    def test_invalidate_drops_entries_for_path(self, cached_service, media_uri, media_file) -> None:
        _respond(cached_service, media_uri, "bytes=0-3")
        _respond(cached_service, media_uri, "bytes=4-7")

        assert asyncio.run(cached_service.invalidate_cache(str(media_file))) == 2
        assert asyncio.run(cached_service.invalidate_cache(str(media_file))) == 0

    def test_invalidate_without_cache(self, protocol_service, media_file) -> None:
        assert asyncio.run(protocol_service.invalidate_cache(str(media_file))) == 0


def test_empty_uri_is_not_found(protocol_service) -> None:
    outcome = _handle(protocol_service, "frameflow://")

    assert outcome == NotFound()
