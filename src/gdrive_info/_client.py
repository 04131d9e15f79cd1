"""DriveClient -- fetch Google Drive item metadata and thumbnail URLs."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from urllib.parse import urlparse

import httpx

from ._config import INFO_PATH, THUMBNAIL_PATH, ClientConfig
from ._errors import (
    FETCH_INFO_FAILED_MESSAGE,
    FETCH_THUMBNAIL_FAILED_MESSAGE,
    NOT_ACCESSIBLE_MESSAGE,
    NOT_FOUND_MESSAGE,
    ErrorKind,
    GDriveError,
    InvalidDimensionsError,
)
from ._identifier import resolve_item_id
from ._metadata import FileInfo, parse_payload

logger = logging.getLogger("gdrive_info")


class DriveClient:
    """Client for the Google Drive metadata and thumbnail endpoints.

    Holds no state between calls besides its configuration. When no
    ``http_client`` is given, a short-lived ``httpx.AsyncClient`` is opened for
    every request; a supplied client is borrowed and never closed.

    Examples:
        Fetch metadata for a shareable link::

            client = DriveClient()
            info = await client.fetch_info("https://drive.google.com/open?id=1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD")
            print(info.download_url)

        Reuse a connection pool::

            async with httpx.AsyncClient() as http:
                client = DriveClient(http_client=http)
                info = await client.fetch_info(item_id)
                thumb = await info.get_thumbnail_url(320, 240, client=client)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._http_client = http_client

    @property
    def config(self) -> ClientConfig:
        return self._config

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return

        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            yield client

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    async def fetch_info(self, value: str) -> FileInfo:
        """Fetch metadata for a Google Drive item.

        Args:
            value: A Google Drive ``open``/``view`` link or a raw item id.

        Returns:
            The item's ``FileInfo``.

        Raises:
            InvalidIdentifierError: If ``value`` does not resolve to a valid id.
                Raised before any request is sent.
            GDriveError: If the service answers with an HTTP error status.
            httpx.TransportError: On network failures (not wrapped).
            ValueError: If the response body is malformed (not wrapped).
        """
        item_id = resolve_item_id(value)
        logger.debug("Fetching info for item %s", item_id)

        try:
            async with self._session() as http:
                response = await http.post(
                    self._config.url(INFO_PATH),
                    params={"id": item_id},
                    headers=self._config.headers,
                    follow_redirects=False,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._error_from_status(exc, FETCH_INFO_FAILED_MESSAGE) from exc

        info = FileInfo.from_payload(item_id, parse_payload(response.text))
        logger.info("Fetched info for item %s: name=%s size=%s", item_id, info.file_name, info.size_bytes)
        return info

    # ------------------------------------------------------------------
    # Thumbnails
    # ------------------------------------------------------------------
    async def fetch_thumbnail_url(self, value: str, width: int, height: int) -> str:
        """Fetch a rendered-thumbnail URL for a Google Drive item.

        Args:
            value: A Google Drive ``open``/``view`` link or a raw item id.
            width: Thumbnail width in pixels.
            height: Thumbnail height in pixels.

        Returns:
            The thumbnail URL, exactly as given by the service's redirect.

        Raises:
            InvalidIdentifierError: If ``value`` does not resolve to a valid id.
            InvalidDimensionsError: If width or height is not a positive integer.
            GDriveError: If the service does not answer with a redirect.
        """
        return await self.fetch_item_thumbnail_url(resolve_item_id(value), width, height)

    async def fetch_item_thumbnail_url(self, item_id: str, width: int, height: int) -> str:
        """Like :meth:`fetch_thumbnail_url`, for an id that has already been validated."""
        _check_dimensions(width, height)
        size = "-".join((f"w{width}", f"h{height}", "p"))
        logger.debug("Fetching thumbnail for item %s (sz=%s)", item_id, size)

        try:
            async with self._session() as http:
                response = await http.get(
                    self._config.url(THUMBNAIL_PATH),
                    params={"id": item_id, "sz": size},
                    headers=self._config.headers,
                    follow_redirects=False,
                )
                if not response.is_redirect:
                    response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._error_from_status(exc, FETCH_THUMBNAIL_FAILED_MESSAGE) from exc

        if not response.is_redirect:
            raise GDriveError(FETCH_THUMBNAIL_FAILED_MESSAGE, kind=ErrorKind.FETCH_FAILED)
        return response.headers["location"]

    # ------------------------------------------------------------------
    # Error classification
    # ------------------------------------------------------------------
    def _error_from_status(self, exc: httpx.HTTPStatusError, fallback_message: str) -> GDriveError:
        response = exc.response
        if response.status_code == 404:
            error = GDriveError(NOT_FOUND_MESSAGE, kind=ErrorKind.NOT_FOUND, reason=exc)
        elif self._redirects_to_auth(response):
            error = GDriveError(NOT_ACCESSIBLE_MESSAGE, kind=ErrorKind.NOT_ACCESSIBLE, reason=exc)
        else:
            error = GDriveError(fallback_message, kind=ErrorKind.FETCH_FAILED, reason=exc)

        logger.debug("HTTP %s from %s classified as %s", response.status_code, exc.request.url, error.kind.value)
        return error

    def _redirects_to_auth(self, response: httpx.Response) -> bool:
        if not response.is_redirect:
            return False
        return _hostname(response.headers.get("location")) == self._config.auth_host

    def __repr__(self) -> str:
        return f"DriveClient(base_url={self._config.base_url!r})"


# ------------------------------------------------------------------
# Module-level shortcuts
# ------------------------------------------------------------------


async def fetch_info(value: str, config: ClientConfig | None = None) -> FileInfo:
    """Fetch metadata for a Google Drive link or item id with a default client.

    Examples:
        >>> info = await fetch_info("https://drive.google.com/open?id=1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD")
        >>> info.file_name
        'big-buck-bunny-720p-h264.mp4'
    """
    return await DriveClient(config).fetch_info(value)


async def fetch_thumbnail_url(value: str, width: int, height: int, config: ClientConfig | None = None) -> str:
    """Fetch a thumbnail URL for a Google Drive link or item id with a default client."""
    return await DriveClient(config).fetch_thumbnail_url(value, width, height)


# ------------------------------------------------------------------
# Module-private helpers
# ------------------------------------------------------------------


def _check_dimensions(width: object, height: object) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionsError(f"Invalid thumbnail {name}: {value!r}")


def _hostname(url: str | None) -> str | None:
    """Return the hostname of ``url``, or ``None``."""
    if not url:
        return None
    return urlparse(url).hostname
