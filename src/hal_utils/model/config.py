"""Typed models for logging configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingConfig:
    """Two-field verbosity pair used to configure the HAL loggers.

    Both fields are kept as the decimal strings written to the logging flags.

    Attributes:
        severity: Minimum log level flag (``"0"`` = INFO … ``"3"`` = FATAL).
        verbosity: Verbose logging level flag (``"0"`` disables verbose logs).
    """

    severity: str
    verbosity: str
