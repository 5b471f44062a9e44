"""
Configuration module for setgraph.

Uses pydantic-settings for environment-based configuration. All variables
carry the SETGRAPH_ prefix, e.g. SETGRAPH_STRICT_MEMBERSHIP=true.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Behavior flags:
    - strict_membership: Raise VertexNotFoundError instead of silently
      ignoring operations on vertices that are not in the graph
    - default_traversal: Order used by Graph.traverse when none is given
    """

    model_config = SettingsConfigDict(
        env_prefix="SETGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # LOGGING CONFIGURATION
    # ===========================================
    log_level: str = Field(default="INFO", description="Root log level for setgraph")
    log_file_path: str | None = Field(
        default=None,
        description="Rotating JSON log file; file logging is off when unset",
    )

    # ===========================================
    # GRAPH BEHAVIOR
    # ===========================================
    strict_membership: bool = Field(
        default=False,
        description="Raise on operations involving non-member vertices",
    )
    default_traversal: Literal["depth_first", "breadth_first"] = Field(
        default="depth_first",
        description="Traversal order used when Graph.traverse gets no order",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
