"""Config settings – 12-factor env-based configuration."""
from search_helper.config.settings.base import Settings
from search_helper.config.settings.defaults import SearchDefaultsSettings
from search_helper.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from search_helper.config.settings.validator import SettingsValidator, SettingViolation

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SearchDefaultsSettings",
    "Settings",
    "SettingsLoader",
    "SettingViolation",
    "SettingsValidator",
]
