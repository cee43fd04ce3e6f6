"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for where road maps are read
from, how the trip planner behaves and how logging is set up.

Configuration can be overridden via environment variables:
- RTP_MAP_DATA_DIR=/path/to/data
- RTP_PLANNER_REQUIRE_STRONGLY_CONNECTED=false
- RTP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class MapConfig(BaseSettings):
    """Road map data configuration.

    Environment variables prefixed with RTP_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="RTP_MAP_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    locations_file: str = "locations.csv"
    roads_file: str = "roads.csv"
    trips_file: str = "trips.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to the locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def roads_path(self) -> Path:
        """Full path to the roads CSV file."""
        return self.data_dir / self.roads_file

    @property
    def trips_path(self) -> Path:
        """Full path to the trips CSV file."""
        return self.data_dir / self.trips_file


class PlannerConfig(BaseSettings):
    """Trip planner configuration.

    Environment variables prefixed with RTP_PLANNER_.
    """

    model_config = SettingsConfigDict(env_prefix="RTP_PLANNER_")

    require_strongly_connected: bool = True
    cache_max_entries: Optional[int] = Field(default=None, ge=1)
    default_metric: Literal["distance", "time"] = "distance"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RTP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RTP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.map.roads_path)
        print(config.planner.require_strongly_connected)

    Environment variables prefixed with RTP_.
    """

    model_config = SettingsConfigDict(env_prefix="RTP_")

    map: MapConfig = Field(default_factory=MapConfig)
    planner: PlannerConfig = Field(default_factory=PlannerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure the root logger from the observability settings.

    Raises:
        ConfigurationError: If the level is not a known logging level name.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="RTP_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format, force=True)
