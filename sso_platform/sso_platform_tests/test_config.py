"""Tests for settings loading."""
from datetime import timedelta

import pytest
from pydantic import ValidationError

from sso_platform.sso_service.config import CONFIG_PATH_ENV, Settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

    s = Settings(_env_file=None)

    assert s.ENV == "local"
    assert s.TOKEN_TTL == timedelta(hours=1)
    assert s.RPC_PORT == 44044
    assert s.RPC_TIMEOUT == timedelta(seconds=10)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("TOKEN_TTL", "PT15M")
    monkeypatch.setenv("RPC_PORT", "50051")

    s = load_settings(_env_file=None)

    assert s.ENV == "prod"
    assert s.TOKEN_TTL == timedelta(minutes=15)
    assert s.RPC_PORT == 50051


def test_yaml_config_file(monkeypatch, tmp_path):
    config_file = tmp_path / "local.yaml"
    config_file.write_text(
        "ENV: dev\n"
        "TOKEN_TTL: 1800\n"
        "RPC_PORT: 45000\n"
        "RPC_TIMEOUT: 5\n"
    )
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

    s = load_settings(_env_file=None)

    assert s.ENV == "dev"
    assert s.TOKEN_TTL == timedelta(minutes=30)
    assert s.RPC_PORT == 45000
    assert s.RPC_TIMEOUT == timedelta(seconds=5)


def test_environment_wins_over_yaml(monkeypatch, tmp_path):
    config_file = tmp_path / "local.yaml"
    config_file.write_text("RPC_PORT: 45000\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))
    monkeypatch.setenv("RPC_PORT", "46000")

    assert load_settings(_env_file=None).RPC_PORT == 46000


def test_missing_config_file_is_an_error(monkeypatch, tmp_path):
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "missing.yaml"))

    with pytest.raises(FileNotFoundError):
        load_settings(_env_file=None)


@pytest.mark.parametrize("field", ["TOKEN_TTL", "RPC_TIMEOUT"])
def test_durations_must_be_positive(monkeypatch, field):
    monkeypatch.setenv(field, "PT0S")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_env_is_rejected(monkeypatch):
    monkeypatch.setenv("ENV", "staging")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
