"""Client for HAFAS REST APIs such as v6.bvg.transport.rest."""

from hafas_client.data import (
    CACHE,
    DEFAULT_USER_AGENT,
    HEADERS,
    RESPONSE,
    SERVER_TIMING,
    HafasClient,
    HafasClientError,
    HafasHTTPError,
    HafasRequestError,
    InvalidArgumentError,
    InvalidEndpointError,
    ResponseDecodeError,
    create_client,
    get_metadata,
)

__all__ = [
    "CACHE",
    "DEFAULT_USER_AGENT",
    "HEADERS",
    "HafasClient",
    "HafasClientError",
    "HafasHTTPError",
    "HafasRequestError",
    "InvalidArgumentError",
    "InvalidEndpointError",
    "RESPONSE",
    "ResponseDecodeError",
    "SERVER_TIMING",
    "create_client",
    "get_metadata",
]
