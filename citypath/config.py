"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
- where the vertex and edge record files live
- how the priority queue is sized
- logging level and format

Configuration can be overridden via environment variables:
- CITYPATH_GRAPH_DATA_DIR=/path/to/data
- CITYPATH_GRAPH_EUCLIDEAN_WEIGHTS=true
- CITYPATH_ENGINE_QUEUE_CAPACITY=1000
- CITYPATH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "cityxy.txt"
    edges_file: str = "citypairs.txt"
    delimiter: str = ","
    euclidean_weights: bool = False

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value

    @property
    def vertices_path(self) -> Path:
        """Full path to the vertex record file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edge record file."""
        return self.data_dir / self.edges_file


class EngineConfig(BaseSettings):
    """Shortest-path engine configuration.

    Environment variables prefixed with CITYPATH_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_ENGINE_")

    # None sizes the queue from the graph (arcs + 1)
    queue_capacity: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.vertices_path)
        print(config.engine.queue_capacity)

    Environment variables prefixed with CITYPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
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
