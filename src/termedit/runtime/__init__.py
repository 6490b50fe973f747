"""Process-wide services: telemetry and settings."""

from .settings import Settings, SettingsLoadResult, default_config_path, load_settings

__all__ = [
    "Settings",
    "SettingsLoadResult",
    "default_config_path",
    "load_settings",
]
