import logging
import os
import sys
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler

from configs import AppConfig, app_config

# set by rest_client.Service.do for the duration of one call
trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)


def trace_id_generator() -> str:
    return uuid.uuid4().hex


class TraceIdFilter(logging.Filter):
    def filter(self, record):
        record.trace_id = trace_id_var.get() or ""
        return True


class TraceIdFormatter(logging.Formatter):
    """Formatter tolerating records that never passed a TraceIdFilter."""

    def format(self, record):
        if not hasattr(record, "trace_id"):
            record.trace_id = ""
        return super().format(record)


def _tz_converter(tz_name: str):
    import pytz

    timezone = pytz.timezone(tz_name)

    def time_converter(seconds):
        from datetime import datetime

        return datetime.fromtimestamp(seconds, tz=timezone).timetuple()

    return time_converter


def init_logging(config: AppConfig | None = None) -> None:
    """Route rest_client logs to stdout and, when LOG_FILE is set, a rotating file."""
    config = config or app_config

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        log_dir = os.path.dirname(config.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                filename=config.LOG_FILE,
                maxBytes=config.LOG_FILE_MAX_SIZE * 1024 * 1024,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
            )
        )

    formatter = TraceIdFormatter(config.LOG_FORMAT, config.LOG_DATEFORMAT)
    if config.LOG_TZ:
        formatter.converter = _tz_converter(config.LOG_TZ)

    for handler in handlers:
        handler.addFilter(TraceIdFilter())
        handler.setFormatter(formatter)

    logging.basicConfig(level=config.LOG_LEVEL, handlers=handlers, force=True)

    # httpx logs every request at INFO, rest_client already does
    logging.getLogger("httpx").setLevel(logging.WARNING)
