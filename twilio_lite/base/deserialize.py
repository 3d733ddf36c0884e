"""Wire -> Python conversions for instance fields.

Helpers are lenient: a value that does not parse is handed back unchanged
(dates in ISO8601) or as None (RFC2822), never raised, so one odd field
does not make a whole record unreadable.
"""

from __future__ import annotations

import datetime
from decimal import Decimal, InvalidOperation
from email.utils import parsedate_to_datetime
from typing import Any

ISO8601_DATE_FORMAT = "%Y-%m-%d"
ISO8601_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def iso8601_date(s: Any) -> Any:
    try:
        return (
            datetime.datetime.strptime(s, ISO8601_DATE_FORMAT)
            .replace(tzinfo=datetime.timezone.utc)
            .date()
        )
    except (TypeError, ValueError):
        return s


def iso8601_datetime(s: Any) -> Any:
    try:
        return datetime.datetime.strptime(s, ISO8601_DATETIME_FORMAT).replace(
            tzinfo=datetime.timezone.utc
        )
    except (TypeError, ValueError):
        return s


def rfc2822_datetime(s: Any) -> datetime.datetime | None:
    if not s:
        return None
    try:
        return parsedate_to_datetime(s)
    except (TypeError, ValueError, IndexError):
        return None


def decimal(d: Any) -> Any:
    """Exact Decimal from a vendor price ("-0.00750" keeps its trailing zero)."""
    if not d:
        return d
    try:
        return Decimal(str(d))
    except InvalidOperation:
        return d


def integer(i: Any) -> Any:
    try:
        return int(i)
    except (TypeError, ValueError):
        return i
