"""
Logbook OCR - Structured Parser
Segments a page hierarchy by weekday using OCR block boundaries.
"""

from shared.models import DayKey
from shared.utils.logger import get_logger

from ..annotation import StructuredAnnotation, block_text
from ..classifier import ContentClassifier
from ..days import match_day_header
from ..normalizer import TextNormalizer
from .base import DayAccumulator, ParseOutcome

logger = get_logger(__name__)


class StructuredParser:
    """
    Walk blocks in document order.

    A block whose first line (dates removed) opens with a weekday is a header:
    the previous day is flushed and the new day starts with an empty buffer.
    Any other block is appended to the active day when it reads as activity
    content.
    """

    name = "structured"

    def __init__(self, classifier: ContentClassifier, normalizer: TextNormalizer):
        self.classifier = classifier
        self.normalizer = normalizer

    def detect_header(self, text: str) -> DayKey | None:
        first_line = text.splitlines()[0] if text else ""
        match = match_day_header(
            self.normalizer.strip_noise_tokens(first_line).strip(),
            self.normalizer.patterns,
        )
        return match.day if match else None

    def parse(self, annotation: StructuredAnnotation) -> ParseOutcome:
        days = DayAccumulator(self.normalizer)
        blocks_seen = 0

        for block in annotation.iter_blocks():
            text = block_text(block)
            if not text:
                continue
            blocks_seen += 1

            day = self.detect_header(text)
            if day is not None:
                days.start(day)
                continue

            if not days.active:
                continue

            content = " ".join(line.strip() for line in text.splitlines() if line.strip())
            if self.classifier.is_activity_content(content):
                days.add(content)

        outcome = days.finish(self.name)
        logger.debug(
            f"Structured parse: {blocks_seen} blocks, {outcome.populated_days} days"
        )
        return outcome
