"""
Logbook OCR - Line-Based Parser
Segments flat OCR text by weekday header lines.
"""

from shared.utils.logger import get_logger

from ...core.config import OCRParserConfig
from ..classifier import ContentClassifier
from ..days import match_day_header
from ..normalizer import TextNormalizer
from .base import DayAccumulator, ParseOutcome

logger = get_logger(__name__)


class LineBasedParser:
    """
    Day headers must open a line ("Monday:", "Tue.", "Day 3 -").

    Content lines attach to the most recent header only while they stay within
    ``header_proximity_window`` lines of it, so trailing boilerplate at the
    bottom of a page does not end up under Friday.
    """

    name = "line_based"

    def __init__(
        self,
        config: OCRParserConfig,
        classifier: ContentClassifier,
        normalizer: TextNormalizer,
    ):
        self.config = config
        self.classifier = classifier
        self.normalizer = normalizer

    def split_lines(self, text: str) -> list[str]:
        # Dates go before splitting so fragments wrapped across lines vanish too
        prepared = self.normalizer.strip_noise_tokens(text)
        return [line.strip() for line in prepared.splitlines() if line.strip()]

    def parse(self, text: str) -> ParseOutcome:
        days = DayAccumulator(self.normalizer)
        last_header_index = -1
        lines = self.split_lines(text)

        for index, line in enumerate(lines):
            if self.classifier.looks_like_metadata(line):
                continue

            header = match_day_header(line, self.normalizer.patterns)
            if header:
                days.start(header.day)
                last_header_index = index

                trailing = self.normalizer.clean_line_content(header.rest)
                if trailing and self.classifier.is_activity_content(trailing):
                    days.add(trailing)
                continue

            if not days.active:
                continue

            if index - last_header_index > self.config.header_proximity_window:
                continue

            cleaned = self.normalizer.clean_line_content(line)
            if cleaned and self.classifier.is_activity_content(cleaned):
                days.add(cleaned)

        outcome = days.finish(self.name)
        logger.debug(
            f"Line-based parse: {len(lines)} lines, {outcome.populated_days} days"
        )
        return outcome
