"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from ptv_timetable.adapters.config import AppConfig
from ptv_timetable.adapters.ptv_api.timetable_client import PtvTimetableClient


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.developer_id is None
    assert config.secret_key.get_secret_value() == ""
    assert config.base_url == "http://timetableapi.ptv.vic.gov.au"
    assert config.timeout_seconds == 10.0


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given PTV_* environment variables, when loading config, then they are used."""
    monkeypatch.setenv("PTV_DEVELOPER_ID", "1000000")
    monkeypatch.setenv("PTV_SECRET_KEY", "secret")
    monkeypatch.setenv("PTV_BASE_URL", "https://timetableapi.ptv.vic.gov.au/")
    monkeypatch.setenv("PTV_TIMEOUT_SECONDS", "2.5")

    config = AppConfig(_env_file=None)

    assert config.developer_id == 1000000
    assert config.secret_key.get_secret_value() == "secret"
    assert config.base_url == "https://timetableapi.ptv.vic.gov.au"
    assert config.timeout_seconds == 2.5


def test_config_validates_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a non-positive timeout, when loading config, then validation error is raised."""
    monkeypatch.setenv("PTV_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError, match="timeout_seconds must be greater than 0"):
        AppConfig(_env_file=None)


def test_config_validates_base_url() -> None:
    """Given a base URL without scheme, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="base_url must start with"):
        AppConfig(_env_file=None, base_url="timetableapi.ptv.vic.gov.au")


def test_config_file_overrides_api_settings(tmp_path: Path) -> None:
    """Given a TOML file with an [api] section, when loading it, then values are applied."""
    config_path = tmp_path / "ptv.toml"
    config_path.write_text(
        """
[api]
developer_id = 1000001
secret_key = "from-toml"
timeout_seconds = 4
"""
    )
    config = AppConfig(_env_file=None, config_file=str(config_path))

    toml_data = config.load_config_file()

    assert "api" in toml_data
    assert config.developer_id == 1000001
    assert config.secret_key.get_secret_value() == "from-toml"
    assert config.timeout_seconds == 4.0


def test_config_file_missing_raises(tmp_path: Path) -> None:
    """Given a missing TOML file, when loading it, then FileNotFoundError is raised."""
    config = AppConfig(_env_file=None, config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_config_file()


def test_without_config_file_nothing_is_loaded() -> None:
    """Given no config file, when loading it, then returns an empty document."""
    assert AppConfig(_env_file=None).load_config_file() == {}


def test_require_credentials_without_developer_id_raises() -> None:
    """Given no developer id, when requiring credentials, then ValueError is raised."""
    with pytest.raises(ValueError, match="PTV_DEVELOPER_ID must be set"):
        AppConfig(_env_file=None).require_credentials()


def test_client_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given configured credentials, when building a client, then it uses them."""
    monkeypatch.setenv("PTV_DEVELOPER_ID", "1000000")
    monkeypatch.setenv("PTV_SECRET_KEY", "secret")

    client = PtvTimetableClient.from_config(AppConfig(_env_file=None))

    assert client.developer_id == 1000000
