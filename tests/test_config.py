from __future__ import annotations

import textwrap

import pytest

from hafas_client import HafasClient
from hafas_client.config import AppConfig, create_client_from_config, load_config


VALID_YAML = """
hafas:
  endpoint: "https://v6.bvg.transport.rest"
  user_agent: "departure-board"
  timeout_seconds: 10
  distinct_arrivals_path: true

logging:
  level: "info"
"""


def _write_yaml(tmp_path, contents: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(contents))
    return str(path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("HAFAS_ENDPOINT", raising=False)
    monkeypatch.delenv("HAFAS_USER_AGENT", raising=False)
    monkeypatch.setattr("hafas_client.config.load_dotenv", lambda: None)


def test_load_config_valid(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)

    config = load_config(path)

    assert isinstance(config, AppConfig)
    assert config.hafas.endpoint == "https://v6.bvg.transport.rest"
    assert config.hafas.user_agent == "departure-board"
    assert config.hafas.timeout_seconds == 10.0
    assert config.hafas.distinct_arrivals_path is True
    assert config.log.level == "INFO"


def test_load_config_defaults(tmp_path) -> None:
    path = _write_yaml(tmp_path, 'hafas:\n  endpoint: "https://v6.db.transport.rest"\n')

    config = load_config(path)

    assert config.hafas.user_agent == "hafas-rest-api-client"
    assert config.hafas.timeout_seconds is None
    assert config.hafas.distinct_arrivals_path is False
    assert config.log.level == "WARNING"


def test_environment_overrides_file(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)
    monkeypatch.setenv("HAFAS_ENDPOINT", "https://v6.vbb.transport.rest")
    monkeypatch.setenv("HAFAS_USER_AGENT", "from-env")

    config = load_config(path)

    assert config.hafas.endpoint == "https://v6.vbb.transport.rest"
    assert config.hafas.user_agent == "from-env"


def test_load_config_missing_file(tmp_path) -> None:
    missing_path = tmp_path / "does_not_exist.yaml"

    with pytest.raises(ValueError):
        load_config(str(missing_path))


def test_load_config_missing_hafas_section(tmp_path) -> None:
    path = _write_yaml(tmp_path, 'logging:\n  level: "INFO"\n')

    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_endpoint(tmp_path) -> None:
    path = _write_yaml(tmp_path, 'hafas:\n  user_agent: "x"\n')

    with pytest.raises(ValueError, match="endpoint"):
        load_config(path)


def test_load_config_rejects_non_mapping(tmp_path) -> None:
    path = _write_yaml(tmp_path, "- just\n- a list\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_create_client_from_config(tmp_path) -> None:
    config = load_config(_write_yaml(tmp_path, VALID_YAML))

    client = create_client_from_config(config.hafas)

    assert isinstance(client, HafasClient)
    assert client.endpoint == "https://v6.bvg.transport.rest"
    assert client.user_agent == "departure-board"
