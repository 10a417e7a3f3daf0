"""Configuration management for concavehull.

This module provides configuration management using Pydantic models.

Key classes:
- HullConfig: Refinement settings (concavity)
- LoggingConfig: Logging settings
- ConcaveHullSettings: Main library settings
"""

from concavehull.config.settings import (
    ConcaveHullSettings,
    HullConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "ConcaveHullSettings",
    "HullConfig",
    "LoggingConfig",
    "get_default_settings",
]
