"""
Configuration settings using Pydantic Settings.
"""

from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Playback clock cadence, owned by the clock rather than the controller.
    TICK_INTERVAL_MS: int = 500

    # Speed is a normalized-time increment per tick.
    MIN_SPEED: float = 0.0025
    MAX_SPEED: float = 0.08
    DEFAULT_SPEED: float = 0.01

    CLOCK_AUTOSTART: bool = True

    ROSTER_PATH: Optional[str] = None

    MAP_CENTER_LAT: float = 43.195
    MAP_CENTER_LON: float = 12.09
    MAP_ZOOM: int = 13
    TILE_URL: str = "https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png"
    TILE_ATTRIBUTION: str = (
        "Map data: &copy; OpenStreetMap contributors, SRTM | "
        "Map style: &copy; OpenTopoMap (CC-BY-SA)"
    )

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    DEBUG: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @model_validator(mode="after")
    def check_playback_limits(self):
        if self.TICK_INTERVAL_MS <= 0:
            raise ValueError("TICK_INTERVAL_MS must be positive")
        if self.MIN_SPEED <= 0:
            raise ValueError("MIN_SPEED must be positive")
        if not self.MIN_SPEED <= self.DEFAULT_SPEED <= self.MAX_SPEED:
            raise ValueError(
                "speed limits must satisfy MIN_SPEED <= DEFAULT_SPEED <= MAX_SPEED, "
                f"got {self.MIN_SPEED} / {self.DEFAULT_SPEED} / {self.MAX_SPEED}"
            )
        return self

    @model_validator(mode="after")
    def resolve_relative_paths(self):
        if self.ROSTER_PATH:
            roster_path = Path(self.ROSTER_PATH)
            if not roster_path.is_absolute():
                self.ROSTER_PATH = str((BASE_DIR / roster_path).resolve())
        return self

    @property
    def tick_interval_seconds(self) -> float:
        return self.TICK_INTERVAL_MS / 1000.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: Cached Settings instance
    :rtype: Settings
    """
    return Settings()


settings = get_settings()
