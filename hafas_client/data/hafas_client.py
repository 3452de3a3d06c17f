"""HAFAS REST API client."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import re
from typing import Any
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

import requests

from hafas_client.data.envelope import ResponseDict, ResponseList, attach_metadata
from hafas_client.data.errors import (
    HafasHTTPError,
    HafasRequestError,
    InvalidArgumentError,
    InvalidEndpointError,
    ResponseDecodeError,
)
from hafas_client.data.transport import TransportOptions
from hafas_client.logic.query_string import encode_query, merge_query

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "hafas-rest-api-client"

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MIME_TYPE = re.compile(rf"^{_TOKEN}/{_TOKEN}$")

Envelope = ResponseDict | ResponseList
Params = Mapping[str, Any] | None


def _segment(value: Any) -> str:
    return quote(str(value), safe="!'()*")


def _mime_type(content_type: str) -> str:
    mime_type = content_type.split(";", 1)[0].strip()
    if not _MIME_TYPE.match(mime_type):
        raise ValueError(f"invalid media type: {content_type!r}")
    return mime_type.lower()


def _enrich(message: str, response: requests.Response | None) -> tuple[str, Any]:
    """Return ``message`` and the JSON error payload of a failed response.

    The API explains most failures in a JSON body with a ``msg`` field; that
    text is appended to the message. Any problem reading the body leaves the
    message unchanged and the payload None, so the caller always raises the
    original failure.
    """
    if response is None:
        return message, None
    try:
        content_type = response.headers.get("content-type")
        if not content_type or _mime_type(content_type) != "application/json":
            return message, None
        body = response.json()
    except Exception:
        return message, None

    msg = body.get("msg") if isinstance(body, Mapping) else None
    if isinstance(msg, str) and msg:
        message = f"{message} – {msg}"
    return message, body


def _validate_endpoint(endpoint: Any) -> None:
    if not isinstance(endpoint, str):
        raise InvalidEndpointError(f"Invalid endpoint URL: {endpoint!r}")
    try:
        parts = urlsplit(endpoint)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidEndpointError(f"Invalid endpoint URL: {endpoint!r}") from exc
    if not parts.scheme or not parts.hostname:
        raise InvalidEndpointError(f"Invalid endpoint URL: {endpoint!r}")
    if any(char.isspace() or not char.isprintable() for char in parts.netloc):
        raise InvalidEndpointError(f"Invalid endpoint URL: {endpoint!r}")


class HafasClient:
    """Client for one HAFAS REST endpoint such as https://v6.bvg.transport.rest.

    The handle is immutable; concurrent calls share nothing but the endpoint
    and the base transport options.
    """

    def __init__(
        self,
        endpoint: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
        distinct_arrivals_path: bool = False,
    ) -> None:
        _validate_endpoint(endpoint)
        self._endpoint = endpoint
        self._user_agent = user_agent
        self._transport = TransportOptions.base(user_agent, timeout)
        self._arrivals_board = "arrivals" if distinct_arrivals_path else "departures"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def __repr__(self) -> str:
        return f"HafasClient({self._endpoint!r})"

    def locations(
        self,
        query: str,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Search stops, addresses and POIs by name."""
        return self._request("/locations", {"query": query, **(opt or {})}, request_options)

    def nearby(
        self,
        location: Mapping[str, Any],
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Find stops close to a ``latitude``/``longitude`` location."""
        return self._request("/stops/nearby", {**location, **(opt or {})}, request_options)

    def stations(
        self,
        query: str,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Search stations by name (the ``/stations`` autocomplete index)."""
        return self._request("/stations", {**(opt or {}), "query": query}, request_options)

    def reachable_from(
        self,
        location: Mapping[str, Any],
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Find stops reachable from an address within a travel time budget."""
        query = {**location, **(opt or {})}
        return self._request("/stops/reachable-from", query, request_options)

    def stop(
        self,
        id: str,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Fetch a single stop or station by id."""
        if not id:
            raise InvalidArgumentError("invalid id")
        return self._request(f"/stops/{_segment(id)}", opt, request_options)

    def departures(
        self,
        stop: str | Mapping[str, Any],
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Fetch the departure board of a stop, given its id or a stop object."""
        return self._station_board("departures", stop, opt, request_options)

    def arrivals(
        self,
        stop: str | Mapping[str, Any],
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Fetch the arrival board of a stop.

        Unless the client was created with ``distinct_arrivals_path=True``
        this requests ``/stops/{id}/departures``, the path every deployed
        version of this client has always used for arrivals.
        """
        return self._station_board(self._arrivals_board, stop, opt, request_options)

    def journeys(
        self,
        from_: Any,
        to: Any,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Plan journeys between two locations (ids or location objects)."""
        query = {"from": from_, "to": to, **(opt or {})}
        return self._request("/journeys", query, request_options)

    def refresh_journey(
        self,
        ref: str,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Refetch a journey by its ``refreshToken``."""
        if not ref:
            raise InvalidArgumentError("invalid ref")
        return self._request(f"/journeys/{_segment(ref)}", opt, request_options)

    def trip(
        self,
        id: str,
        line_name: str | None = None,
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Fetch a trip with its stopovers; ``line_name`` is sent as ``lineName``."""
        if not id:
            raise InvalidArgumentError("invalid id")
        query = {"lineName": line_name, **(opt or {})}
        return self._request(f"/trips/{_segment(id)}", query, request_options)

    def radar(
        self,
        bbox: Mapping[str, Any],
        opt: Params = None,
        *,
        request_options: Params = None,
    ) -> Envelope:
        """Fetch vehicle positions inside a ``north``/``west``/``south``/``east`` box."""
        return self._request("/radar", {**bbox, **(opt or {})}, request_options)

    def _station_board(
        self,
        board: str,
        stop: str | Mapping[str, Any],
        opt: Params,
        request_options: Params,
    ) -> Envelope:
        if not stop:
            raise InvalidArgumentError("invalid stop")
        if isinstance(stop, Mapping) and stop.get("id"):
            stop = stop["id"]
        elif not isinstance(stop, str):
            raise InvalidArgumentError("invalid stop")
        return self._request(f"/stops/{_segment(stop)}/{board}", opt, request_options)

    def _request(
        self,
        path: str,
        query: Params = None,
        options: Params = None,
    ) -> Envelope:
        parts = urlsplit(urljoin(self._endpoint, path))
        search = encode_query(merge_query(parts.query, query))
        url = urlunsplit(parts._replace(query=search, fragment=""))
        transport = self._transport.layered(options)

        try:
            response = requests.get(url, **transport.as_kwargs())
        except requests.RequestException as exc:
            message, body = _enrich(f"HAFAS request failed: {exc}", exc.response)
            raise HafasRequestError(message, url, response=exc.response, body=body) from exc

        if not 200 <= response.status_code < 300:
            message, body = _enrich(
                f"HAFAS request failed: {response.status_code} {response.reason}: GET {url}",
                response,
            )
            raise HafasHTTPError(message, url, response=response, body=body)

        logger.debug("%s %s %s", response.status_code, path, query)

        try:
            decoded = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"HAFAS response from {url} was not valid JSON") from exc
        try:
            return attach_metadata(decoded, response)
        except TypeError as exc:
            raise ResponseDecodeError(f"HAFAS response from {url} is not a JSON object or array") from exc


def create_client(
    endpoint: str,
    user_agent: str = DEFAULT_USER_AGENT,
    *,
    timeout: float | None = None,
    distinct_arrivals_path: bool = False,
) -> HafasClient:
    """Create a client for ``endpoint``; raises InvalidEndpointError for a bad URL."""
    return HafasClient(
        endpoint,
        user_agent=user_agent,
        timeout=timeout,
        distinct_arrivals_path=distinct_arrivals_path,
    )


__all__ = ["DEFAULT_USER_AGENT", "HafasClient", "create_client"]
