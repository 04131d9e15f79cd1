"""FileInfo dataclass and FileInfoPayload TypedDict for Google Drive item metadata."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, TypedDict

if TYPE_CHECKING:
    from ._client import DriveClient

logger = logging.getLogger("gdrive_info")

JSON_PADDING = ")]}'"

_REQUIRED_FIELDS = ("disposition", "fileName", "downloadUrl", "scanResult", "sizeBytes")


class FileInfoPayload(TypedDict, total=False):
    """The raw metadata record returned by the ``/uc`` endpoint.

    Examples:
        >>> payload: FileInfoPayload = {"fileName": "flower.png", "sizeBytes": 114590}
    """

    disposition: str
    fileName: str
    downloadUrl: str
    scanResult: str
    sizeBytes: int | str


def parse_payload(body: str) -> dict[str, Any]:
    """Strip the anti-hijacking padding from a response body and decode the JSON record.

    Raises:
        ValueError: If the padding is missing or the remainder is not a JSON object.
    """
    if not body.startswith(JSON_PADDING):
        raise ValueError("Response body is missing the JSON padding prefix")

    data = json.loads(body[len(JSON_PADDING) :])
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class FileInfo:
    """Metadata about a Google Drive item.

    ``disposition`` and ``scan_result`` are service-defined scan status strings
    (e.g. ``"SCAN_CLEAN"`` / ``"OK"``). Payload fields this class does not know
    about are kept in ``extra``.

    Examples:
        >>> info = FileInfo(
        ...     item_id="1X-1PiZWpgZrpmBcVpyUPSuz_7hI383LC",
        ...     disposition="SCAN_CLEAN",
        ...     file_name="flower.png",
        ...     download_url="https://doc-0c-docs.googleusercontent.com/.../1X-1PiZWpgZrpmBcVpyUPSuz_7hI383LC",
        ...     scan_result="OK",
        ...     size_bytes=114590,
        ... )
    """

    item_id: str
    disposition: str
    file_name: str
    download_url: str
    scan_result: str
    size_bytes: int
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_payload(cls, item_id: str, payload: Mapping[str, Any]) -> FileInfo:
        """Build a FileInfo from a decoded ``/uc`` record.

        Args:
            item_id: The validated id the record was fetched for.
            payload: The decoded JSON object.

        Raises:
            ValueError: If a required field is missing or ``sizeBytes`` is not a
                non-negative integer.
        """
        missing = [key for key in _REQUIRED_FIELDS if key not in payload]
        if missing:
            raise ValueError(f"Metadata record is missing fields: {', '.join(missing)}")

        size_bytes = _parse_size(payload["sizeBytes"])
        extra = {k: v for k, v in payload.items() if k not in _REQUIRED_FIELDS}
        logger.debug("Metadata record for %s has extra fields: %s", item_id, sorted(extra))

        return cls(
            item_id=item_id,
            disposition=payload["disposition"],
            file_name=payload["fileName"],
            download_url=payload["downloadUrl"],
            scan_result=payload["scanResult"],
            size_bytes=size_bytes,
            extra=extra,
        )

    async def get_thumbnail_url(self, width: int, height: int, client: DriveClient | None = None) -> str:
        """Fetch a thumbnail URL for this item at the given size.

        Args:
            width: Thumbnail width in pixels.
            height: Thumbnail height in pixels.
            client: Client to send the request with. A default one is used if omitted.

        Returns:
            The rendered-thumbnail URL.
        """
        from ._client import DriveClient

        client = client or DriveClient()
        return await client.fetch_item_thumbnail_url(self.item_id, width, height)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return json.dumps(self.to_dict())


def _parse_size(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid sizeBytes: {value!r}")
    # int() would also take "1_000", padded whitespace and non-ASCII digits
    if isinstance(value, str) and not (value.isascii() and value.isdigit()):
        raise ValueError(f"Invalid sizeBytes: {value!r}")
    try:
        size = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Invalid sizeBytes: {value!r}") from None
    if isinstance(value, float) and value != size:
        raise ValueError(f"Invalid sizeBytes: {value!r}")
    if size < 0:
        raise ValueError(f"Invalid sizeBytes: {value!r}")
    return size
