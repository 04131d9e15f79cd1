"""Extract and validate Google Drive item ids from shareable links."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from ._errors import InvalidIdentifierError

ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]{8,64}")
URL_PATTERN = re.compile(r"^https?://")


def is_id(value: object) -> bool:
    """Check whether ``value`` looks like a Google Drive item id."""
    return isinstance(value, str) and ID_PATTERN.fullmatch(value) is not None


def is_url(value: object) -> bool:
    """Check whether ``value`` is an absolute HTTP(S) URL."""
    return isinstance(value, str) and URL_PATTERN.match(value) is not None


def get_item_id(url: str) -> str:
    """Extract the item id from a Google Drive shareable link.

    Recognises an ``id`` query parameter first, then a ``/d/<id>`` path segment.
    The extracted value is not validated here -- see :func:`resolve_item_id`.

    Args:
        url: A Google Drive ``open`` or ``view`` link.

    Returns:
        The raw item id.

    Raises:
        InvalidIdentifierError: If the URL carries neither shape.

    Examples:
        >>> get_item_id("https://drive.google.com/open?id=1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD")
        '1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD'
        >>> get_item_id("https://drive.google.com/file/d/1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD/view?usp=sharing")
        '1ObJEVgO6Y4cFjfxszUb1LhdyeKrq_wGD'
    """
    parsed = urlparse(url)

    ids = parse_qs(parsed.query).get("id")
    if ids:
        return ids[0]

    segments = parsed.path.split("/")
    for index, segment in enumerate(segments[:-1]):
        if segment == "d" and segments[index + 1]:
            return segments[index + 1]

    raise InvalidIdentifierError("Could not extract item id from URL.")


def resolve_item_id(value: str) -> str:
    """Turn a shareable link or raw item id into a validated item id.

    No network access happens here.

    Raises:
        InvalidIdentifierError: If the resulting id does not match the id pattern.
    """
    candidate = get_item_id(value) if is_url(value) else value
    if not is_id(candidate):
        raise InvalidIdentifierError("Invalid ID provided.")
    return candidate
