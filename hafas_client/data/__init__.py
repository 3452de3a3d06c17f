"""HTTP access to HAFAS REST endpoints."""

from hafas_client.data.envelope import CACHE, HEADERS, RESPONSE, SERVER_TIMING, get_metadata
from hafas_client.data.errors import (
    HafasClientError,
    HafasHTTPError,
    HafasRequestError,
    InvalidArgumentError,
    InvalidEndpointError,
    ResponseDecodeError,
)
from hafas_client.data.hafas_client import DEFAULT_USER_AGENT, HafasClient, create_client

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
