"""ClientConfig dataclass holding the service endpoint settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_BASE_URL = "https://drive.google.com"
DEFAULT_AUTH_HOST = "accounts.google.com"

# Without this header /uc answers with a restricted view of the item.
DEFAULT_HEADERS: Mapping[str, str] = {"x-drive-first-party": "DriveWebUi"}

INFO_PATH = "/uc"
THUMBNAIL_PATH = "/thumbnail"


@dataclass(frozen=True)
class ClientConfig:
    """Settings used by :class:`~gdrive_info.DriveClient` to reach Google Drive.

    Examples:
        >>> config = ClientConfig()
        >>> config.url("/uc")
        'https://drive.google.com/uc'
        >>> config = ClientConfig(base_url="http://localhost:8080/", timeout=30.0)
    """

    base_url: str = field(default=DEFAULT_BASE_URL)
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS), hash=False)
    auth_host: str = field(default=DEFAULT_AUTH_HOST)
    timeout: float | None = field(default=5.0)

    def url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
