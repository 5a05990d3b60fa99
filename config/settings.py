"""
Configuration management using Pydantic Settings.

Environment variables:
- MARKUP_BIND_PATTERN_COLOR: Fill squiggly runs through the pattern in the annotation colour
- MARKUP_COMPRESS_STREAMS: Compress appearance streams written to PDF files
- MARKUP_PREVIEW_DPI: Resolution of rendered page previews
- MARKUP_DEFAULT_COLOR: Default annotation colour, comma separated
- MARKUP_LOG_LEVEL: Logging level used by the CLI
"""
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Appearance generation
    bind_pattern_color: bool = True

    # PDF output
    compress_streams: bool = True
    preview_dpi: int = 150

    # CLI defaults
    default_color: str = "1,0,0"
    log_level: str = "INFO"

    class Config:
        env_prefix = "MARKUP_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def get_default_color(self) -> List[float]:
        """Parse default_color into colour components."""
        return [float(part) for part in self.default_color.split(',') if part.strip()]


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance."""
    return settings
