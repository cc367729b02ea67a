"""Structured logging configuration for conta-corrente."""

import logging
import sys
import traceback
from typing import Any

from conta_corrente.context import Context


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for conta-corrente.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("conta_corrente").setLevel(log_level)

    # Reduce noise from external libraries
    logging.getLogger("psycopg").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)


def log_error(logger: logging.Logger, ctx: Context | None, err: BaseException) -> None:
    """Record ``err`` with its traceback and the context fields.

    Failures inside the logging machinery are reported on stderr and never
    propagate to the caller.

    Parameters
    ----------
    logger : logging.Logger
        Destination logger.
    ctx : Context | None
        Request context of the failing call.
    err : BaseException
        The underlying error, logged with full detail.
    """
    extra: dict[str, Any] = {"error_type": type(err).__name__}
    if ctx is not None:
        extra.update(ctx.log_fields())

    try:
        logger.error(
            "%s: %s",
            type(err).__name__,
            err,
            exc_info=(type(err), err, err.__traceback__),
            extra={"extra": extra},
        )
    except Exception:  # noqa: BLE001
        # Best-effort sink: a failing handler must not abort the caller.
        traceback.print_exc(file=sys.stderr)
