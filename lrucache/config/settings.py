"""
LRU Cache Configuration Settings

Configuration constants read from the environment at import time.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Cache configuration settings."""

    # Cache settings
    DEFAULT_CAPACITY: int = int(os.environ.get("LRU_CACHE_CAPACITY", "1024"))

    # Logging settings
    DEBUG: bool = os.environ.get("LRU_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("LRU_CACHE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
