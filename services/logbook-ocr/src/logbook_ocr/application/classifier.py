"""
Logbook OCR - Content Classifier
Decides whether a line is genuine activity content or boilerplate.
"""

from ..core.config import OCRParserConfig, get_ocr_config
from .patterns import DEFAULT_PATTERNS, PatternLibrary


class ContentClassifier:
    """
    Pure predicates over single lines.

    ``is_activity_content`` evaluates its rules in order and the first one
    that fires decides:

    1. too short (under ``min_content_length`` characters) -> reject
    2. matches a metadata-skip signature -> reject
    3. starts with a date -> keep only if the text after the date is longer
       than ``date_prefix_min_remainder`` characters
    4. fewer than ``min_word_count`` words -> reject
    5. otherwise -> accept
    """

    def __init__(
        self,
        config: OCRParserConfig | None = None,
        patterns: PatternLibrary = DEFAULT_PATTERNS,
    ):
        self.config = config or get_ocr_config()
        self.patterns = patterns

    def is_activity_content(self, line: str) -> bool:
        if not isinstance(line, str):
            return False

        trimmed = line.strip()
        if len(trimmed) < self.config.min_content_length:
            return False

        if self.patterns.first_match(self.patterns.metadata_skip, trimmed):
            return False

        date_prefix = self.patterns.date_prefix.match(trimmed)
        if date_prefix:
            remainder = trimmed[date_prefix.end():]
            return len(remainder) > self.config.date_prefix_min_remainder

        if len(trimmed.split()) < self.config.min_word_count:
            return False

        return True

    def looks_like_metadata(self, line: str) -> bool:
        if not isinstance(line, str):
            return False
        return self.metadata_reason(line) is not None

    def metadata_reason(self, line: str) -> str | None:
        """Name of the metadata signature the line carries, if any"""
        return self.patterns.first_match(self.patterns.metadata_lines, line.strip())

