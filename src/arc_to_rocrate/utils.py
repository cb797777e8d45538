"""Utility functions for building RO-Crate identifiers and values."""

from datetime import UTC, datetime
from urllib.parse import quote

# Characters ECMAScript's encodeURI leaves untouched, besides letters and digits.
URI_SAFE_CHARACTERS = ";,/?:@&=+$-_.!~*'()#"


def to_valid_id(text: str) -> str:
    """Percent-encode text for use as an ``@id`` URI reference.

    Args:
        text: Human readable text, e.g. a folder name.

    Returns:
        The text with spaces, percent signs and other characters outside the
        URI character set escaped, e.g. ``Results and Diagrams`` becomes
        ``Results%20and%20Diagrams``.
    """
    return quote(text, safe=URI_SAFE_CHARACTERS)


def format_datetime(value: datetime) -> str:
    """Format a datetime as ISO 8601 UTC with millisecond precision.

    Naive datetimes are taken as UTC.

    Example:
        ``2023-01-15T00:00:00.000Z``
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc_value = value.astimezone(UTC)
    return utc_value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
