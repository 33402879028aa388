"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the world
storage engine and its block registry.

Usage:
    from blockworld.config import WorldSettings

    # Load from environment variables (BLOCKWORLD_*)
    settings = WorldSettings()

    # Or override with explicit values
    settings = WorldSettings(first_state=10)
"""

from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install blockworld"
    ) from e


class WorldSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for LocalWorld and its BlockRegistry.

    Attributes:
        first_state: First state number handed out by a new registry. State 0
            is reserved for "no block", so this must be at least 1.
        preserve_stale_dense_on_delete: Leave a chunk's dense byte untouched
            when a block is deleted. Only for compatibility with worlds written
            under the historical policy; reads then return the stale byte.

    Environment Variables:
        BLOCKWORLD_FIRST_STATE
        BLOCKWORLD_PRESERVE_STALE_DENSE_ON_DELETE
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOCKWORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    first_state: int = Field(default=1, ge=1, le=0xFFFF)
    preserve_stale_dense_on_delete: bool = False
