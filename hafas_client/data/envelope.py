"""Response envelopes that carry request metadata out of band.

A decoded body behaves exactly like the plain dict or list it was decoded
from: iteration, ``len``, equality and ``json.dumps`` only see the server's
data. The raw response and a few headers ride along in a private slot and
are read back with one of the marker objects below::

    departures = client.departures("900000100003")
    departures[CACHE]                      # "HIT", "MISS" or None
    departures.get(CACHE)                  # same, on JSON objects
    get_metadata(departures, SERVER_TIMING)

Markers are not data keys: ``CACHE in departures`` is False, the same as
for iteration and ``keys()``.
"""

from __future__ import annotations

from typing import Any

import requests


class Marker:
    """Identity token used to look up one piece of response metadata."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Marker {self.name}>"


RESPONSE = Marker("Response")
HEADERS = Marker("Response.headers")
SERVER_TIMING = Marker("Server-Timing header")
CACHE = Marker("X-Cache header")

MARKERS = (RESPONSE, HEADERS, SERVER_TIMING, CACHE)


class _Envelope:
    __slots__ = ()

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, Marker):
            return self._metadata[key]
        return super().__getitem__(key)


class ResponseDict(_Envelope, dict):
    """A decoded JSON object with response metadata attached."""

    __slots__ = ("_metadata",)

    def get(self, key: Any, default: Any = None) -> Any:
        if isinstance(key, Marker):
            return self._metadata.get(key, default)
        return super().get(key, default)


class ResponseList(_Envelope, list):
    """A decoded JSON array with response metadata attached."""

    __slots__ = ("_metadata",)


def attach_metadata(decoded: Any, response: requests.Response) -> ResponseDict | ResponseList:
    """Wrap a decoded body and attach metadata taken from ``response``.

    Only JSON objects and arrays can carry metadata; anything else raises
    TypeError.
    """
    if isinstance(decoded, dict):
        envelope: ResponseDict | ResponseList = ResponseDict(decoded)
    elif isinstance(decoded, list):
        envelope = ResponseList(decoded)
    else:
        raise TypeError(f"cannot attach metadata to {type(decoded).__name__}")

    headers = response.headers
    envelope._metadata = {
        RESPONSE: response,
        HEADERS: headers,
        SERVER_TIMING: headers.get("Server-Timing") or None,
        CACHE: headers.get("X-Cache") or None,
    }
    return envelope


def get_metadata(envelope: Any, marker: Marker) -> Any:
    """Return the metadata stored under ``marker`` on a response envelope."""
    if not isinstance(envelope, _Envelope):
        raise TypeError(f"{type(envelope).__name__} does not carry response metadata")
    return envelope[marker]


__all__ = [
    "CACHE",
    "HEADERS",
    "MARKERS",
    "Marker",
    "RESPONSE",
    "ResponseDict",
    "ResponseList",
    "SERVER_TIMING",
    "attach_metadata",
    "get_metadata",
]
