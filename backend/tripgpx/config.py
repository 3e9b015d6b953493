"""
Engine Configuration

Uses Pydantic Settings for type-safe configuration.
"""

import logging
import sys
from typing import Annotated, List

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """GPX engine settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Upload gate ===
    max_file_size_bytes: int = Field(
        default=20 * 1024 * 1024,
        gt=0,
        description="Largest accepted GPX upload (inclusive)"
    )
    # NoDecode: env value is a comma-separated list, not JSON
    accepted_mime_types: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["application/gpx+xml", "application/xml", "text/xml"],
        description="MIME types accepted as GPX"
    )
    default_filename: str = Field(default="unknown.gpx")

    # === Geometry ===
    elevation_noise_threshold_m: float = Field(
        default=3.0,
        ge=0,
        description="Minimum elevation delta counted as gain/loss"
    )
    key_point_interval_km: float = Field(default=30.0, gt=0)

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Reject names the logging module does not know."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('accepted_mime_types', mode='before')
    @classmethod
    def parse_mime_types(cls, v):
        """Parse MIME types from comma-separated string."""
        if isinstance(v, str):
            return [mime.strip().lower() for mime in v.split(',') if mime.strip()]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for scripts embedding the engine."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
