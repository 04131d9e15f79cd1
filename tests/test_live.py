"""Tests against the real Google Drive service.

Skipped unless ``GDRIVE_INFO_LIVE_TESTS`` is set.
"""

from __future__ import annotations

import os

import pytest

from gdrive_info import ErrorKind, GDriveError, InvalidIdentifierError, fetch_info, is_url

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not os.environ.get("GDRIVE_INFO_LIVE_TESTS"), reason="live tests disabled"),
]


@pytest.mark.parametrize(
    ("item_id", "file_name", "size_bytes"),
    [
        ("1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD", "big-buck-bunny-720p-h264.mp4", 158008374),
        ("1X-1PiZWpgZrpmBcVpyUPSuz_7hI383LC", "flower.png", 114590),
        ("1oTQi2sxyTRHHhKoviK_YJCO6nPh7Obmf", "dummy.txt", 0),
    ],
)
async def test_public_file(item_id: str, file_name: str, size_bytes: int) -> None:
    info = await fetch_info(f"https://drive.google.com/open?id={item_id}")
    assert info.size_bytes == size_bytes
    assert info.file_name == file_name
    assert is_url(info.download_url)
    assert info.download_url.endswith(item_id)


async def test_repeated_fetch_is_equal() -> None:
    url = "https://drive.google.com/open?id=1X-1PiZWpgZrpmBcVpyUPSuz_7hI383LC"
    first = await fetch_info(url)
    second = await fetch_info(url)
    assert (first.file_name, first.size_bytes, first.scan_result) == (
        second.file_name,
        second.size_bytes,
        second.scan_result,
    )


async def test_invalid_id() -> None:
    with pytest.raises(InvalidIdentifierError, match="Invalid ID provided."):
        await fetch_info("Invalid **video** id")


async def test_missing_file() -> None:
    with pytest.raises(GDriveError, match="Item is not found.") as excinfo:
        await fetch_info("https://drive.google.com/open?id=dummy_gO6Y4cFjfxszUb1LhdyeKrq_wGD")
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


async def test_private_file() -> None:
    with pytest.raises(GDriveError, match="Item is not accessible.") as excinfo:
        await fetch_info("https://drive.google.com/open?id=1-AszYwYOagB6hkvJVgz9cfkwd4nVG4rd")
    assert excinfo.value.kind == ErrorKind.NOT_ACCESSIBLE
