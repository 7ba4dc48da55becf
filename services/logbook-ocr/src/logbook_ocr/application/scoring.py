"""
Logbook OCR - Confidence & Warnings

Confidence reflects how much structure the OCR input carried, not whether the
extracted text is right. A page with full block structure and plenty of text
scores 1.0 even when the handwriting was misread; downstream consumers should
read it as "how much did the parser have to work with".
"""

from shared.models import WEEKDAYS, DayActivities

from ..core.config import OCRParserConfig
from .annotation import AnyAnnotation

NO_TEXT_WARNING = (
    "No text detected in image. Please ensure the image is clear and contains text."
)
NO_ACTIVITIES_WARNING = (
    "No daily activities detected. Please ensure the image shows a weekly log "
    "with Monday-Friday entries."
)
MISSING_DAYS_TEMPLATE = "Missing activities for: {days}"
SHORT_CONTENT_TEMPLATE = (
    "{day}: Very short content detected. Please review and expand if needed."
)


def calculate_confidence(
    annotation: AnyAnnotation,
    config: OCRParserConfig,
) -> float:
    text_length = len(annotation.text)
    score = 0.0

    if text_length > 0:
        score += config.confidence_text_weight
    if annotation.has_pages:
        score += config.confidence_pages_weight
    if annotation.has_blocks:
        score += config.confidence_blocks_weight
    if text_length > config.confidence_medium_length:
        score += config.confidence_medium_length_weight
    if text_length > config.confidence_long_length:
        score += config.confidence_long_length_weight

    return round(min(score, 1.0), 4)


def generate_warnings(activities: DayActivities, config: OCRParserConfig) -> list[str]:
    warnings: list[str] = []
    found = activities.populated_days()

    if not found:
        warnings.append(NO_ACTIVITIES_WARNING)
    elif len(found) < len(WEEKDAYS):
        missing = ", ".join(day.label for day in activities.missing_days())
        warnings.append(MISSING_DAYS_TEMPLATE.format(days=missing))

    for day in found:
        if len(getattr(activities, day.value)) < config.short_content_length:
            warnings.append(SHORT_CONTENT_TEMPLATE.format(day=day.label))

    return warnings
