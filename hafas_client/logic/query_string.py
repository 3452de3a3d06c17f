"""Query-string encoding in the dotted-path dialect the HAFAS REST servers parse.

Nested mappings are flattened with dots (``from.latitude=52.5``), sequences
with bracketed indices (``products[0]=bus``, brackets percent-encoded). This
is the ``qs`` ``allowDots`` format and it has to match byte for byte.

Datetimes are sent in UTC with milliseconds and a ``Z`` suffix; naive ones
are taken as local time. Plain dates are sent as ``YYYY-MM-DD``. Floats use
Python's ``str()`` except that integral values drop ``.0``, so very small or
very large numbers are written in Python's exponent form (``1e-07``).
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import parse_qsl, quote


def _encode(value: str) -> str:
    return quote(value, safe="")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        utc = value.astimezone(timezone.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _flatten(prefix: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for key, item in value.items():
            pairs.extend(_flatten(f"{prefix}.{key}", item))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{index}]", item))
        return pairs
    return [(prefix, _scalar(value))]


def encode_query(params: Mapping[str, Any]) -> str:
    """Encode ``params`` into a query string without the leading ``?``."""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        pairs.extend(_flatten(str(key), value))
    return "&".join(f"{_encode(key)}={_encode(value)}" for key, value in pairs)


def merge_query(url_query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Combine a URL's own query string with explicit parameters.

    URL entries come first in their original order, then ``params``. A key
    seen twice keeps its first position and takes the later value, so
    explicit parameters win over the URL.
    """
    merged: dict[str, Any] = {}
    for key, value in parse_qsl(url_query, keep_blank_values=True):
        merged[key] = value
    for key, value in (params or {}).items():
        merged[key] = value
    return merged


__all__ = ["encode_query", "merge_query"]
