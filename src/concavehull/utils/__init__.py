"""Utility functions for concavehull.

This module provides:

- Logging setup and configuration
- Refinement statistics tracking
"""

from concavehull.utils.logging import (
    RefinementLogger,
    RefinementStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RefinementLogger",
    "RefinementStats",
    "configure_logging",
    "get_logger",
]
