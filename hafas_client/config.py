"""Configuration loader for the HAFAS REST client."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

from hafas_client.data.hafas_client import DEFAULT_USER_AGENT, HafasClient, create_client


@dataclass(frozen=True)
class HafasConfig:
    """HAFAS REST endpoint configuration."""

    endpoint: str
    user_agent: str
    timeout_seconds: float | None
    distinct_arrivals_path: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    hafas: HafasConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load client configuration from a YAML file.

    ``HAFAS_ENDPOINT`` and ``HAFAS_USER_AGENT`` (from the environment or a
    ``.env`` file) take precedence over the file.
    """
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    hafas_section = _require_key(data, "hafas", "hafas")
    logging_section = data.get("logging") or {}

    if not isinstance(hafas_section, dict):
        raise ValueError("'hafas' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    endpoint = os.environ.get("HAFAS_ENDPOINT", "").strip()
    if not endpoint:
        endpoint = _require_key(hafas_section, "endpoint", "hafas")
    user_agent = os.environ.get("HAFAS_USER_AGENT", "").strip()
    if not user_agent:
        user_agent = hafas_section.get("user_agent", DEFAULT_USER_AGENT)

    timeout = hafas_section.get("timeout_seconds")
    hafas = HafasConfig(
        endpoint=endpoint,
        user_agent=user_agent,
        timeout_seconds=float(timeout) if timeout is not None else None,
        distinct_arrivals_path=bool(hafas_section.get("distinct_arrivals_path", False)),
    )

    logging = LoggingConfig(level=str(logging_section.get("level", "WARNING")).upper())

    return AppConfig(hafas=hafas, log=logging)


def create_client_from_config(config: HafasConfig) -> HafasClient:
    """Build a client from the ``hafas`` section of the configuration."""
    return create_client(
        config.endpoint,
        user_agent=config.user_agent,
        timeout=config.timeout_seconds,
        distinct_arrivals_path=config.distinct_arrivals_path,
    )
