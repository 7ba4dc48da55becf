"""
Logbook Shared Library - Models Module
Pydantic models shared between the OCR service and its consumers
"""

from .logbook import (
    WEEKDAYS,
    DayActivities,
    DayKey,
    ExtractionIssue,
    ExtractionResult,
)

__all__ = [
    "WEEKDAYS",
    "DayActivities",
    "DayKey",
    "ExtractionIssue",
    "ExtractionResult",
]
