from __future__ import annotations

from pathlib import Path

import pytest

from infrastructure.config.settings import Settings, SettingsError, load_settings


def test_defaults_without_env(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "missing.env", environ={}) == Settings()


def test_env_file_values(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "WEBAPI_BASE_URL=http://localhost:8000\nWEBAPI_TIMEOUT_SEC=5\nWEBAPI_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )

    settings = load_settings(env_file, environ={})

    assert settings == Settings(base_url="http://localhost:8000", timeout_sec=5, log_level="debug")


def test_environment_wins_over_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("WEBAPI_BASE_URL=http://from-file\n", encoding="utf-8")

    settings = load_settings(env_file, environ={"WEBAPI_BASE_URL": "http://from-env"})

    assert settings.base_url == "http://from-env"


def test_invalid_timeout(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="WEBAPI_TIMEOUT_SEC"):
        load_settings(None, environ={"WEBAPI_TIMEOUT_SEC": "soon"})


def test_config_file_setting(tmp_path: Path) -> None:
    settings = load_settings(None, environ={"WEBAPI_CONFIG": "suite.yaml"})

    assert settings.config_file == "suite.yaml"
