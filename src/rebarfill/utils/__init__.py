"""Utility functions for rebarfill.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
"""

from rebarfill.utils.logging import (
    RunLogger,
    RunStats,
    configure_logging,
)

__all__ = [
    "RunLogger",
    "RunStats",
    "configure_logging",
]
