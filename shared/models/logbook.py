"""
Logbook - OCR Extraction Data Models
Weekday activity records produced from scanned logbook pages
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# ENUMS
# ============================================================================


class DayKey(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Weekday order; Saturday and Sunday are never logged
WEEKDAYS: tuple[DayKey, ...] = tuple(DayKey)


class ExtractionIssue(str, Enum):
    NO_TEXT_DETECTED = "no_text_detected"
    PARSE_AMBIGUITY = "parse_ambiguity"
    MALFORMED_ANNOTATION = "malformed_annotation"


# ============================================================================
# RESULT MODELS
# ============================================================================


class DayActivities(BaseModel):
    """Cleaned activity text per weekday; absent days stay None"""

    model_config = ConfigDict(frozen=True)

    monday: Optional[str] = None
    tuesday: Optional[str] = None
    wednesday: Optional[str] = None
    thursday: Optional[str] = None
    friday: Optional[str] = None

    @classmethod
    def from_mapping(cls, activities: Mapping[DayKey, str]) -> "DayActivities":
        return cls(
            **{
                DayKey(day).value: text
                for day, text in activities.items()
                if text and text.strip()
            }
        )

    def populated_days(self) -> List[DayKey]:
        return [day for day in WEEKDAYS if getattr(self, day.value)]

    def missing_days(self) -> List[DayKey]:
        return [day for day in WEEKDAYS if not getattr(self, day.value)]

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class ExtractionResult(BaseModel):
    """Outcome of structuring one OCR annotation"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    full_text: str = Field(default="", alias="fullText")
    activities: DayActivities = Field(default_factory=DayActivities)
    confidence: float = Field(default=0.0, ge=0, le=1)
    warnings: List[str] = Field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        """JSON-ready payload with camelCase keys and absent days omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)
