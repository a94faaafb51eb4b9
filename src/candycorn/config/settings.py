"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Display-related settings."""

    # Host window
    window_width: int = 1280
    window_height: int = 720
    fullscreen: bool = False
    title: str = "Candycorn"

    # Rendering
    fps: int = 60


class GameSettings(BaseSettings):
    """Gameplay and loop settings."""

    # Upper bound for a single frame delta in seconds
    max_frame_delta: float = Field(default=0.25, gt=0.0)

    start_level: int = Field(default=1, ge=1)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CANDYCORN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Image ids such as "images/jack.png" resolve against this directory
    assets_path: Path = Field(default_factory=lambda: Path.cwd())

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
