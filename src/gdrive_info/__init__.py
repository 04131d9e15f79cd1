"""gdrive-info - Google Drive item metadata for Python.

Resolves Google Drive shareable links or item ids into file metadata (name,
size, scan status), a direct download URL, and thumbnail URLs.
"""

__version__ = "1.0.0"

from ._client import DriveClient, fetch_info, fetch_thumbnail_url
from ._config import ClientConfig
from ._errors import (
    ErrorKind,
    GDriveError,
    InvalidDimensionsError,
    InvalidIdentifierError,
    InvalidInputError,
)
from ._identifier import get_item_id, is_id, is_url, resolve_item_id
from ._metadata import FileInfo, FileInfoPayload

__all__ = [
    "ClientConfig",
    "DriveClient",
    "ErrorKind",
    "FileInfo",
    "FileInfoPayload",
    "GDriveError",
    "InvalidDimensionsError",
    "InvalidIdentifierError",
    "InvalidInputError",
    "fetch_info",
    "fetch_thumbnail_url",
    "get_item_id",
    "is_id",
    "is_url",
    "resolve_item_id",
]
