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

    model_config = SettingsConfigDict(env_prefix="GEMROLL_DISPLAY_", extra="ignore")

    # Playfield (the simulation's screen)
    width: int = Field(default=800, gt=0)
    height: int = Field(default=400, gt=0)

    # Window
    scale: int = Field(default=1, ge=1, le=4)
    title: str = "Gemroll"
    hud_height: int = 40

    # Rendering
    fps: int = Field(default=60, gt=0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GEMROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Fixed seed for reproducible levels; None draws from system entropy
    seed: int | None = None

    # Terrain resolution: samples per screen width
    terrain_segments: int = Field(default=20, gt=0)

    # Paths
    log_file: Path = Field(default_factory=lambda: Path.cwd() / "gemroll.log")

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def tick_interval(self) -> float:
        """Seconds between simulation ticks."""
        return 1.0 / self.display.fps


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
