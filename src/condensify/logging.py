import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging for the backend.

    A single stdout handler with a JSON formatter (timestamp, level, logger
    name, message, trace_id and span_id) replaces the handlers of the root
    logger and of the Uvicorn loggers, so request logs and application logs
    share one format.

    Args:
        level: Name of the log level to apply, e.g. "INFO" or "DEBUG".
            Defaults to the LOG_LEVEL environment variable.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(log_level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger
