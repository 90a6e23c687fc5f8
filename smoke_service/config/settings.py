"""Typed runtime settings read once from the process environment."""

from typing import Any, Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVER_BIND_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 3000
DEFAULT_APP_VERSION: Final[str] = "1.0.0"
DEFAULT_NODE_ENV: Final[str] = "production"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP responder.

    Environment variable names map directly to field names in uppercase.
    Example: `app_version` reads from `APP_VERSION`. Empty variables are
    treated as unset so the field default applies.

    Attributes:
        port: TCP port the listening socket binds to.
        app_version: Version label echoed by the greeting endpoint.
        node_env: Runtime environment label echoed by the greeting endpoint.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    app_version: str = Field(default=DEFAULT_APP_VERSION)
    node_env: str = Field(default=DEFAULT_NODE_ENV)

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_unparseable_port(cls, value: Any) -> Any:
        # Only non-numeric text falls back; numeric values still face the range check.
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return DEFAULT_PORT
        return value

    @property
    def application_host(self) -> str:
        """Return the fixed wildcard bind address.

        Returns:
            str: IPv4 wildcard address covering all interfaces.
        """

        return SERVER_BIND_HOST


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from the process environment.

    Returns:
        AppSettings: Validated, immutable runtime settings object.

    Raises:
        SettingsLoadError: Raised when a setting is present but invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update environment variables. Details: {error}"
        ) from error
