"""Configuration settings for glyphmap."""

from pathlib import Path

from pydantic import BaseModel, Field


class LoadingConfig(BaseModel):
    """Configuration for opening font containers."""

    font_number: int = Field(
        default=0,
        ge=0,
        description="Font record to select from a collection (TTC/OTC)",
    )
    lazy: bool | None = Field(
        default=None,
        description="fontTools lazy loading mode (None = decode tables on first access)",
    )


class BitmapConfig(BaseModel):
    """Configuration for bitmap strike lookup."""

    max_bit_depth: int = Field(
        default=32,
        description="Highest strike bit depth accepted (32 = full-colour strikes)",
    )
    include_svg: bool = Field(
        default=True,
        description="Treat 'SVG ' table documents as encapsulated bitmaps",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphmapSettings(BaseModel):
    """Main application settings."""

    loading: LoadingConfig = Field(default_factory=LoadingConfig)
    bitmap: BitmapConfig = Field(default_factory=BitmapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphmapSettings:
    """Get default application settings."""
    return GlyphmapSettings()
