"""Python -> wire conversions for request parameters."""

from __future__ import annotations

import datetime
from email.utils import format_datetime
from typing import Any, Callable

from . import values


def iso8601_date(d: Any) -> Any:
    if d is values.unset or isinstance(d, str):
        return d
    if isinstance(d, (datetime.datetime, datetime.date)):
        return d.strftime("%Y-%m-%d")
    return d


def iso8601_datetime(d: Any) -> Any:
    if d is values.unset or isinstance(d, str):
        return d
    if isinstance(d, datetime.datetime):
        if d.tzinfo is not None:
            d = d.astimezone(datetime.timezone.utc)
        return d.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(d, datetime.date):
        return d.strftime("%Y-%m-%dT00:00:00Z")
    return d


def rfc2822_datetime(d: Any) -> Any:
    if d is values.unset or isinstance(d, str):
        return d
    if isinstance(d, datetime.datetime):
        if d.tzinfo is None:
            d = d.replace(tzinfo=datetime.timezone.utc)
        return format_datetime(d)
    return d


def boolean_to_string(b: Any) -> Any:
    if b is values.unset or b is None or isinstance(b, str):
        return b
    return "true" if b else "false"


def map(lst: Any, serialize_func: Callable[[Any], Any]) -> Any:
    """Apply `serialize_func` to every element of a list (or to a lone value)."""
    if isinstance(lst, list):
        return [serialize_func(e) for e in lst]
    return serialize_func(lst)
