"""Configuration management for glyphmap.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LoadingConfig: Font container selection
- BitmapConfig: Bitmap strike lookup settings
- LoggingConfig: Logging settings
- GlyphmapSettings: Main application settings
"""

from glyphmap.config.settings import (
    BitmapConfig,
    GlyphmapSettings,
    LoadingConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BitmapConfig",
    "GlyphmapSettings",
    "LoadingConfig",
    "LoggingConfig",
    "get_default_settings",
]
