"""Config settings – env-based configuration."""
from scoped_search.config.settings.base import Settings
from scoped_search.config.settings.factory import SettingsFactory
from scoped_search.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
