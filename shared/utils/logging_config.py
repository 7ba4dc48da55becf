"""
Logbook Centralized Logging Configuration
Structured logging with JSON output for the service
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Union

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record"""
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = getattr(
            record, "service_name", record.name.split(".")[0]
        )

        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id

        if hasattr(record, "week_number"):
            log_record["week_number"] = record.week_number


def setup_logging(
    service_name: str, log_level: str = "INFO", json_logs: bool = True
) -> logging.Logger:
    """
    Setup centralized logging configuration

    Args:
        service_name: Name of the service (e.g., 'logbook-ocr')
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to use JSON formatting (True for production)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))

    if json_logs:
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={
                "levelname": "level",
                "name": "logger",
                "pathname": "file",
                "lineno": "line",
            },
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


# ============================================================================
# BUSINESS METRICS LOGGING
# ============================================================================


class MetricsLogger:
    """Logger for business metrics and events"""

    def __init__(self, service_name: str):
        self.logger = logging.getLogger(f"{service_name}.metrics")
        self.service_name = service_name

    def log_extraction(
        self,
        strategy: str,
        days_found: int,
        confidence: float,
        week_number: Union[int, str, None] = None,
    ):
        """
        Log one structured logbook page

        Args:
            strategy: Parser strategy whose result was kept
            days_found: Number of weekdays with activity text
            confidence: Structural confidence of the OCR input
            week_number: Logbook week the page belongs to, if known
        """
        extra = {
            "event_name": "logbook_structured",
            "strategy": strategy,
            "days_found": days_found,
            "confidence": confidence,
            "service_name": self.service_name,
        }

        if week_number is not None:
            extra["week_number"] = week_number

        self.logger.info(
            f"EXTRACTION: strategy={strategy} days={days_found} confidence={confidence}",
            extra=extra,
        )

    def log_api_call(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
    ):
        """
        Log API call metrics

        Args:
            endpoint: API endpoint
            method: HTTP method
            status_code: Response status code
            duration_ms: Request duration in milliseconds
        """
        extra = {
            "endpoint": endpoint,
            "method": method,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "service_name": self.service_name,
        }

        self.logger.info(
            f"API_CALL: {method} {endpoint} {status_code} {duration_ms}ms", extra=extra
        )
