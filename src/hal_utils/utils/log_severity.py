"""Conversions between log severity names and the logging flag pair."""

from __future__ import annotations

import logging

from hal_utils.errors import HalInvalidParamError
from hal_utils.model.config import LoggingConfig
from hal_utils.vendor.openconfig.mappings import LOG_SEVERITY_MAP, UNKNOWN

logger = logging.getLogger(__name__)

# Severity name -> stdlib logging level.
_PYTHON_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "NOTICE": logging.INFO,
    "INFORMATIONAL": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def convert_string_to_log_severity(severity: str) -> LoggingConfig:
    """Return the ``(severity, verbosity)`` flag pair for a severity name.

    Unlike the enum lookups in :mod:`hal_utils.utils.normalize`, an
    unrecognised name is an error.

    Args:
        severity: One of ``CRITICAL``, ``ERROR``, ``WARNING``, ``NOTICE``,
            ``INFORMATIONAL`` or ``DEBUG`` (case-sensitive).

    Returns:
        The matching :class:`LoggingConfig`.

    Raises:
        HalInvalidParamError: If *severity* is not a known name.
    """
    pair = LOG_SEVERITY_MAP.get(severity)
    if pair is None:
        raise HalInvalidParamError(parameter="severity", value=severity)
    return LoggingConfig(severity=pair[0], verbosity=pair[1])


def convert_log_severity_to_string(config: LoggingConfig) -> str:
    """Return the severity name for a flag pair, or ``UNKNOWN``.

    With severity ``"0"`` the verbosity selects DEBUG (``>= "2"``),
    INFORMATIONAL (``"1"``) or NOTICE (anything else). The verbosity
    comparison is a string comparison.
    """
    if config.severity == "0" and config.verbosity >= "2":
        return "DEBUG"
    if config.severity == "0" and config.verbosity == "1":
        return "INFORMATIONAL"
    if config.severity == "0":
        return "NOTICE"
    if config.severity == "1":
        return "WARNING"
    if config.severity == "2":
        return "ERROR"
    if config.severity == "3":
        return "CRITICAL"
    return UNKNOWN


def logging_level_for(config: LoggingConfig) -> int:
    """Return the stdlib :mod:`logging` level matching a flag pair.

    NOTICE and INFORMATIONAL both map to ``logging.INFO``; an unknown pair
    maps to ``logging.WARNING``.
    """
    name = convert_log_severity_to_string(config)
    level = _PYTHON_LEVELS.get(name)
    if level is None:
        logger.debug("No logging level for %r, using WARNING", config)
        return logging.WARNING
    return level
