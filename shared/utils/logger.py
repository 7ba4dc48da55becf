"""
Logbook Shared Logger
Per-module loggers that follow the service's output format
"""

import logging
import sys
from typing import Optional, Union

from .config import get_settings
from .logging_config import CustomJsonFormatter


def _formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(name)s %(message)s")
    return logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get configured logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger writing to stdout at the configured level, JSON when
        ``json_logs`` is set
    """
    settings = get_settings()
    logger = logging.getLogger(name or settings.service_name)

    if logger.handlers:
        return logger

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_formatter(settings.json_logs))
    logger.addHandler(console_handler)

    return logger


def get_logger_with_context(
    name: Optional[str] = None,
    week_number: Union[int, str, None] = None,
    request_id: Optional[str] = None,
) -> logging.LoggerAdapter:
    """Logger whose records carry the logbook week and request being handled"""
    extra = {}
    if week_number is not None:
        extra["week_number"] = week_number
    if request_id:
        extra["request_id"] = request_id
    return logging.LoggerAdapter(get_logger(name), extra)
