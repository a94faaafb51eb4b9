"""Configuration for CANDYCORN."""

from candycorn.config.settings import DisplaySettings, GameSettings, Settings, get_settings

__all__ = ["DisplaySettings", "GameSettings", "Settings", "get_settings"]
