"""Configuration settings for rebarfill."""

from pathlib import Path

from pydantic import BaseModel, Field


class ScanConfig(BaseModel):
    """Configuration for the scan-line sweep."""

    spacing: float = Field(
        default=100.0,
        gt=0.0,
        description="Vertical distance between scan-lines in drawing units",
    )
    margin: float = Field(
        default=1000.0,
        ge=0.0,
        description="How far scan-lines extend beyond the boundary extents",
    )


class GeometryConfig(BaseModel):
    """Configuration for geometry tolerances.

    A single absolute tolerance is used both for treating two intersection
    points as the same point and for deciding that a scan-line passes through
    a boundary endpoint.
    """

    point_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance under which two points are considered identical",
    )


class OutputConfig(BaseModel):
    """Configuration for persisting generated bars."""

    layer: str = Field(
        default="REBAR",
        min_length=1,
        description="Layer that receives the generated bar lines",
    )
    suffix: str = Field(
        default="-rebar",
        description="Suffix appended to the drawing name when no output path is given",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RebarFillSettings(BaseModel):
    """Main application settings."""

    scan: ScanConfig = Field(default_factory=ScanConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RebarFillSettings:
    """Get default application settings."""
    return RebarFillSettings()
