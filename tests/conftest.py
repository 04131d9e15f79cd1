"""Shared fixtures for gdrive-info tests."""

from __future__ import annotations

import json

import pytest

from gdrive_info import ClientConfig


INFO_URL = "https://drive.google.com/uc"
THUMBNAIL_URL = "https://drive.google.com/thumbnail"

PUBLIC_ID = "1X-1PiZWpgZrpmBcVpyUPSuz_7hI383LC"
MISSING_ID = "dummy_gO6Y4cFjfxszUb1LhdyeKrq_wGD"
PRIVATE_ID = "1-AszYwYOagB6hkvJVgz9cfkwd4nVG4rd"


# ---------------------------------------------------------------------------
# Response body fixtures
# ---------------------------------------------------------------------------


def padded(payload: dict) -> str:
    """Render a metadata record the way /uc returns it."""
    return ")]}'\n" + json.dumps(payload)


@pytest.fixture()
def item_id() -> str:
    return PUBLIC_ID


@pytest.fixture()
def payload(item_id: str) -> dict:
    return {
        "disposition": "SCAN_CLEAN",
        "fileName": "flower.png",
        "downloadUrl": f"https://doc-0c-docs.googleusercontent.com/docs/securesc/abc/def/1/{item_id}",
        "scanResult": "OK",
        "sizeBytes": 114590,
    }


@pytest.fixture()
def info_body(payload: dict) -> str:
    return padded(payload)


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def local_config() -> ClientConfig:
    """A config pointing at a fake local service."""
    return ClientConfig(
        base_url="http://drive.local:8080/",
        headers={"x-drive-first-party": "DriveWebUi", "x-test": "1"},
        auth_host="login.drive.local",
    )
