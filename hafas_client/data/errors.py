"""Exceptions raised by the HAFAS REST client."""

from __future__ import annotations

from typing import Any

import requests


class HafasClientError(Exception):
    """Base class for every error raised by the client."""


class InvalidEndpointError(HafasClientError, ValueError):
    """Raised when the endpoint passed to create_client is not an absolute URL."""


class InvalidArgumentError(HafasClientError, TypeError):
    """Raised before any request is made when a required argument is missing."""


class HafasRequestError(HafasClientError):
    """Raised when the request could not be completed."""

    def __init__(
        self,
        message: str,
        url: str,
        response: requests.Response | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.response = response
        self.body = body


class HafasHTTPError(HafasRequestError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        url: str,
        response: requests.Response,
        body: Any = None,
    ) -> None:
        super().__init__(message, url, response=response, body=body)
        self.status_code = response.status_code


class ResponseDecodeError(HafasClientError, ValueError):
    """Raised when a successful response body is not usable JSON."""


__all__ = [
    "HafasClientError",
    "HafasHTTPError",
    "HafasRequestError",
    "InvalidArgumentError",
    "InvalidEndpointError",
    "ResponseDecodeError",
]
