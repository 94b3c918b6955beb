"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TL_NETWORK_DATA_DIR=/path/to/data
- TL_NETWORK_SEGMENTS_FILE=segments.csv
- TL_LOG_LEVEL=DEBUG
- TL_LOG_STRUCTURED=true
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with TL_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="TL_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    stations_file: str = "stations.csv"
    lines_file: str = "lines.csv"
    segments_file: str = "segments.csv"

    @property
    def stations_path(self) -> Path:
        """Full path to stations CSV file."""
        return self.data_dir / self.stations_file

    @property
    def lines_path(self) -> Path:
        """Full path to lines CSV file."""
        return self.data_dir / self.lines_file

    @property
    def segments_path(self) -> Path:
        """Full path to segments CSV file."""
        return self.data_dir / self.segments_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TL_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TL_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.segments_path)

    Environment variables prefixed with TL_.
    """

    model_config = SettingsConfigDict(env_prefix="TL_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
