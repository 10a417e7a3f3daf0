"""Configuration settings for concavehull."""

from pathlib import Path

from pydantic import BaseModel, Field


class HullConfig(BaseModel):
    """Configuration for the gift-opening refinement.

    Concavity is measured in the same units as the point coordinates and is
    not scale-invariant: rescaling a point cloud requires rescaling the
    concavity by the same factor.
    """

    concavity: float = Field(
        default=40.0,
        ge=0.0,
        description="Edges longer than this are opened; inf keeps the convex hull",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    configure: bool = Field(
        default=False,
        description="Install log handlers when a builder is created",
    )
    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file output if unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ConcaveHullSettings(BaseModel):
    """Main library settings."""

    hull: HullConfig = Field(default_factory=HullConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ConcaveHullSettings:
    """Get default library settings."""
    return ConcaveHullSettings()
