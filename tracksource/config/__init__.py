"""Configuration module -- exports Settings and load_settings."""

from tracksource.config.loader import load_settings
from tracksource.config.settings import Settings

__all__ = ["Settings", "load_settings"]
