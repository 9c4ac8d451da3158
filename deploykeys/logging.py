"""femtologging helpers shared by the REST client and resource services.

Messages are interpolated before they reach femtologging so every record
carries a finished string. Level names are normalised once at configuration
time.

Example:
>>> from deploykeys.logging import get_logger, log_debug
>>> logger = get_logger(__name__)
>>> log_debug(logger, "GET %s", "/repos/octocat/Hello-World/keys")

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger


class LogLevel(enum.StrEnum):
    """Level names accepted by femtologging."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Return ``(level, invalid)`` for a raw level name.

    Unknown or empty names fall back to ``INFO`` with ``invalid`` set so the
    caller can warn about the misconfiguration.

    Parameters
    ----------
    level : str | None
        Level name as configured, in any case and with surrounding blanks.

    Returns
    -------
    tuple[str, bool]
        Upper-case level name and whether the input had to be replaced.

    """
    if not level:
        return ("INFO", True)

    candidate = level.strip().upper()
    if candidate in LogLevel.__members__:
        return (candidate, False)

    return ("INFO", True)


def configure_logging(level: str, *, force: bool = False) -> tuple[str, bool]:
    """Install the femtologging root handler at the normalised level.

    Parameters
    ----------
    level : str
        Raw level name, typically read from ``DEPLOYKEYS_LOG_LEVEL``.
    force : bool, optional
        Replace an existing handler configuration.

    Returns
    -------
    tuple[str, bool]
        The level that was applied and whether the input was invalid.

    """
    applied, invalid = normalize_log_level(level)
    basicConfig(level=applied, force=force)
    return (applied, invalid)


def format_log_message(template: str, *args: object) -> str:
    """Interpolate ``args`` into a percent-style template.

    Parameters
    ----------
    template : str
        Message with ``%s``/``%d`` placeholders.
    *args : object
        Values substituted into the placeholders, in order.

    Returns
    -------
    str
        The finished message.

    """
    return template % args


class _SupportsLog(typ.Protocol):
    """Anything exposing femtologging's ``log`` signature."""

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
    level: LogLevel,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    """Format ``template`` and hand the record to ``logger``."""
    logger.log(
        level.value,
        format_log_message(template, *args),
        exc_info=exc_info,
        stack_info=False,
    )


def log_debug(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a DEBUG record with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        femtologging logger, usually the module-level ``logger``.
    template : str
        Message with ``%s``/``%d`` placeholders.
    *args : object
        Values substituted into the placeholders, in order.
    exc_info : object | None, optional
        Exception or ``exc_info`` tuple to attach to the record.

    """
    _emit(logger, LogLevel.DEBUG, template, args, exc_info)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a INFO record with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        femtologging logger, usually the module-level ``logger``.
    template : str
        Message with ``%s``/``%d`` placeholders.
    *args : object
        Values substituted into the placeholders, in order.
    exc_info : object | None, optional
        Exception or ``exc_info`` tuple to attach to the record.

    """
    _emit(logger, LogLevel.INFO, template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING record with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        femtologging logger, usually the module-level ``logger``.
    template : str
        Message with ``%s``/``%d`` placeholders.
    *args : object
        Values substituted into the placeholders, in order.
    exc_info : object | None, optional
        Exception or ``exc_info`` tuple to attach to the record.

    """
    _emit(logger, LogLevel.WARNING, template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a ERROR record with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        femtologging logger, usually the module-level ``logger``.
    template : str
        Message with ``%s``/``%d`` placeholders.
    *args : object
        Values substituted into the placeholders, in order.
    exc_info : object | None, optional
        Exception or ``exc_info`` tuple to attach to the record.

    """
    _emit(logger, LogLevel.ERROR, template, args, exc_info)


def log_exception(logger: _SupportsLog, message: str, exc: BaseException) -> None:
    """Log ``message`` at ERROR with ``exc`` attached as exc_info.

    Parameters
    ----------
    logger : _SupportsLog
        femtologging logger receiving the record.
    message : str
        Already formatted description of the failure.
    exc : BaseException
        Exception whose traceback accompanies the record.

    """
    logger.log(LogLevel.ERROR.value, message, exc_info=exc, stack_info=False)


__all__ = [
    "LogLevel",
    "configure_logging",
    "format_log_message",
    "get_logger",
    "log_debug",
    "log_error",
    "log_exception",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
