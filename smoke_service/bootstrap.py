"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from smoke_service.api import create_api_application
from smoke_service.config import AppSettings, config_load_settings


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application from validated startup settings.

    Args:
        settings: Pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(settings=resolved_settings)
