"""
Library-wide settings and logging setup.
"""
import logging

from intvec.types.enums import LogLevel

_LOGGING_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 10,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Settings:
    """
    Process-wide switches read by the vector types. Values are class
    attributes so they can be flipped before (or between) uses without
    threading a settings object through every constructor.
    """

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Default logging level for the ``intvec`` logger."""

    STRICT_COMPONENTS: bool = False
    """
    When False (default) component values are wrapped into the element
    kind's range, matching fixed-width overflow. When True, any value that
    would need wrapping raises ComponentRangeError instead. Meant for test
    harnesses hunting unintended overflow.
    """


def configure_logging(level: LogLevel | None = None) -> logging.Logger:
    """Sets the ``intvec`` logger level from ``level`` or Settings.LOG_LEVEL. Installs no handlers."""
    if level is None:
        level = Settings.LOG_LEVEL
    logger = logging.getLogger("intvec")
    logger.setLevel(_LOGGING_LEVELS[LogLevel(level)])
    return logger
