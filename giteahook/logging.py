"""femtologging helpers shared by the webhook receiver and status client.

Messages are interpolated before they reach femtologging, so callers use
percent-style templates exactly as they would with :mod:`logging`.

Example:
>>> from giteahook.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Accepted %s delivery", "push")

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger


class LogLevel(enum.StrEnum):
    """Log level names understood by femtologging."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_DEFAULT_LEVEL = LogLevel.INFO.value


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Normalize a raw log level string.

    Parameters
    ----------
    level : str | None
        Level name as read from configuration.

    Returns
    -------
    tuple[str, bool]
        The normalized level and ``True`` when the input was unusable and the
        default was substituted.

    """
    if not level:
        return (_DEFAULT_LEVEL, True)

    candidate = level.strip().upper()
    if candidate in LogLevel.__members__:
        return (candidate, False)

    return (_DEFAULT_LEVEL, True)


def configure_logging(level: str, *, force: bool = False) -> tuple[str, bool]:
    """Install the root femtologging handler at ``level``.

    Parameters
    ----------
    level : str
        Raw log level string.
    force : bool, optional
        Replace any handler configuration that is already installed.

    Returns
    -------
    tuple[str, bool]
        Same as :func:`normalize_log_level`.

    """
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


def format_log_message(template: str, *args: object) -> str:
    """Interpolate ``args`` into a percent-style ``template``."""
    if not args:
        return template
    return template % args


class _SupportsLog(typ.Protocol):
    """Structural type of a femtologging logger."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: str,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    logger.log(
        level,
        format_log_message(template, *args),
        exc_info=exc_info,
        stack_info=False,
    )


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO message."""
    _emit(logger, "INFO", template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message."""
    _emit(logger, "WARNING", template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message."""
    _emit(logger, "ERROR", template, args, exc_info)


__all__ = [
    "LogLevel",
    "configure_logging",
    "format_log_message",
    "get_logger",
    "log_error",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
