"""Configuration package for runtime settings and startup validation."""

from .settings import SERVER_BIND_HOST, AppSettings, SettingsLoadError, config_load_settings

__all__ = ["SERVER_BIND_HOST", "AppSettings", "SettingsLoadError", "config_load_settings"]
