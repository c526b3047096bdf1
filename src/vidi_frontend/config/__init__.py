"""Config – settings, loaders and validation errors."""

from vidi_frontend.config.settings import (
    EnvSettingsLoader,
    FrontendSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from vidi_frontend.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FrontendSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
