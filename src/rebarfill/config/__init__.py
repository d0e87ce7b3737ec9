"""Configuration management for rebarfill.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ScanConfig: Scan-line spacing and margin
- GeometryConfig: Geometric tolerances
- OutputConfig: Target layer and output naming
- LoggingConfig: Logging settings
- RebarFillSettings: Main application settings
"""

from rebarfill.config.settings import (
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    RebarFillSettings,
    ScanConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "OutputConfig",
    "RebarFillSettings",
    "ScanConfig",
    "get_default_settings",
]
