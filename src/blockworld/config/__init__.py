"""Configuration module using Pydantic Settings.

Provides typed configuration for the world storage engine with environment
variable support.

Usage:
    from blockworld.config import WorldSettings

    settings = WorldSettings(preserve_stale_dense_on_delete=True)
"""

from blockworld.config.settings import WorldSettings

__all__ = [
    "WorldSettings",
]
