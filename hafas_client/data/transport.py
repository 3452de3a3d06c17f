"""Transport options for requests.get, layered as base plus caller overrides."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from requests.structures import CaseInsensitiveDict

from hafas_client.data.errors import InvalidArgumentError

# requests.get keyword arguments a caller may override. Anything that would
# change the method, the URL or the body is not on the list.
OVERRIDABLE_SETTINGS = frozenset(
    {"allow_redirects", "timeout", "proxies", "verify", "cert", "auth", "cookies"}
)


@dataclass(frozen=True)
class TransportOptions:
    """Headers and requests.get settings for one request.

    ``layered`` applies a caller's overrides: ``headers`` are merged key by
    key (case-insensitively), every other setting replaces the base value
    as a whole.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    settings: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def base(cls, user_agent: str, timeout: float | None = None) -> TransportOptions:
        return cls(
            headers={"Accept": "application/json", "User-Agent": user_agent},
            settings={"allow_redirects": True, "timeout": timeout},
        )

    def layered(self, overrides: Mapping[str, Any] | None) -> TransportOptions:
        if not overrides:
            return self
        unknown = set(overrides) - OVERRIDABLE_SETTINGS - {"headers"}
        if unknown:
            raise InvalidArgumentError(f"unsupported request options: {', '.join(sorted(unknown))}")

        headers = CaseInsensitiveDict(self.headers)
        headers.update(overrides.get("headers") or {})
        settings = dict(self.settings)
        settings.update({key: value for key, value in overrides.items() if key != "headers"})
        return TransportOptions(headers=dict(headers.items()), settings=settings)

    def as_kwargs(self) -> dict[str, Any]:
        return {"headers": dict(self.headers), **self.settings}


__all__ = ["OVERRIDABLE_SETTINGS", "TransportOptions"]
