"""Config settings – env-based configuration."""
from vidi_frontend.config.settings.base import Settings
from vidi_frontend.config.settings.factory import SettingsFactory
from vidi_frontend.config.settings.frontend import FrontendSettings
from vidi_frontend.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FrontendSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
