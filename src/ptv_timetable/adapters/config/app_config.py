"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptv_timetable.adapters.ptv_api.constants import DEFAULT_TIMEOUT_SECONDS, PTV_BASE_URL
from ptv_timetable.domain.models.credentials import Credentials

API_SETTINGS = ("developer_id", "secret_key", "base_url", "timeout_seconds")


class AppConfig(BaseSettings):
    """Client configuration following 12-factor principles.

    Values come from PTV_* environment variables or a .env file. A TOML file
    named by PTV_CONFIG_FILE may override them in its [api] section.
    """

    model_config = SettingsConfigDict(
        env_prefix="PTV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    developer_id: int | None = Field(default=None, description="Developer id issued by PTV")
    secret_key: SecretStr = Field(
        default=SecretStr(""), description="API key used to sign requests"
    )
    base_url: str = Field(default=PTV_BASE_URL, description="Scheme and host of the API")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, description="Timeout for API requests in seconds"
    )
    config_file: str | None = Field(
        default=None, description="Path to a TOML file with an [api] section"
    )

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_seconds must be greater than 0")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is http(s) and strip any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file and apply its [api] section.

        Returns:
            The parsed TOML document (empty when no file is configured).
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        if not isinstance(api_config, dict):
            raise ValueError("TOML config 'api' must be a table")
        for key in API_SETTINGS:
            if key in api_config:
                setattr(self, key, api_config[key])

        return toml_data

    def require_credentials(self) -> Credentials:
        """Return the configured credentials.

        Raises:
            ValueError: If no developer id is configured.
        """
        if self.developer_id is None:
            raise ValueError("PTV_DEVELOPER_ID must be set (or developer_id in the [api] section)")
        return Credentials(developer_id=self.developer_id, secret_key=self.secret_key)
