"""
Logbook OCR - Context Parser
Last-resort segmentation that finds weekday names anywhere in a line.
"""

from shared.utils.logger import get_logger

from ..classifier import ContentClassifier
from ..days import find_day_indicator
from ..normalizer import TextNormalizer
from .base import DayAccumulator, ParseOutcome

logger = get_logger(__name__)


class ContextParser:
    name = "context"

    def __init__(self, classifier: ContentClassifier, normalizer: TextNormalizer):
        self.classifier = classifier
        self.normalizer = normalizer

    def parse(self, text: str) -> ParseOutcome:
        days = DayAccumulator(self.normalizer)
        lines = [line.strip() for line in text.splitlines() if line.strip()]

        for line in lines:
            if self.classifier.looks_like_metadata(line):
                continue

            found = find_day_indicator(line, self.normalizer.patterns)
            if found:
                days.start(found.day)
                remainder = self.normalizer.clean_line_content(found.rest)
                if remainder and self.classifier.is_activity_content(remainder):
                    days.add(remainder)
                continue

            if not days.active:
                continue

            cleaned = self.normalizer.clean_line_content(line)
            if cleaned and self.classifier.is_activity_content(cleaned):
                days.add(cleaned)

        outcome = days.finish(self.name)
        logger.debug(f"Context parse: {outcome.populated_days} days")
        return outcome
