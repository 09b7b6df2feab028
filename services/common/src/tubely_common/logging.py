import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "tubely"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Sends every log record to stdout as one JSON object per line.

    Records carry the Datadog ``trace_id``/``span_id`` injected by ddtrace and
    a fixed ``service`` field. Uvicorn's request logs go through the same
    handler. Re-running it swaps the handlers instead of adding more.

    Args:
        level: Log level name; defaults to ``LOG_LEVEL`` or INFO.

    Returns:
        The root logger.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False

    return root_logger
