"""Small string and time helpers used by the cookie classes."""

from __future__ import annotations

import re
import string
from datetime import datetime, timedelta, timezone

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def split_string(text: str, delimiter: str) -> list[str]:
    """Split on a single delimiter, keeping inner empty fields.

    An empty text gives no fields, and a trailing delimiter does not
    produce a trailing empty field.
    """
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_items(text: str, separators: str) -> list[str]:
    """Split on any of the separator characters, dropping empty items."""
    if not text:
        return []
    if not separators:
        return [text]
    pattern = "[" + re.escape(separators) + "]+"
    return [item for item in re.split(pattern, text) if item]


def trim_spaces(text: str) -> str:
    """Remove leading and trailing space characters (only ' ')."""
    return text.strip(" ")


def str_case_eq(first: str, second: str) -> bool:
    """Compare two strings, ignoring the case of ASCII letters."""
    return first.translate(_ASCII_LOWER) == second.translate(_ASCII_LOWER)


def format_expires(expires: int) -> str:
    """Format a Unix timestamp as an RFC 1123 date in GMT.

    Day and month names are always English, whatever the locale.
    """
    try:
        moment = _EPOCH + timedelta(seconds=int(expires))
    except OverflowError as exc:
        raise ValueError(f"timestamp out of range: {expires}") from exc
    weekday = _DAYS[moment.isoweekday() % 7]
    month = _MONTHS[moment.month - 1]
    return (
        f"{weekday}, {moment.day:02d} {month} {moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} GMT"
    )