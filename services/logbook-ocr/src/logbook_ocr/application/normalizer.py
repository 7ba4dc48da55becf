"""
Logbook OCR - Text Normalizer
Strips embedded dates and boilerplate tokens, then turns a day's lines into
one punctuated block of text.
"""

from typing import Iterable

from .classifier import ContentClassifier
from .patterns import (
    DEFAULT_PATTERNS,
    EMPTY_BRACKETS,
    HORIZONTAL_WHITESPACE,
    LABEL_PREFIX,
    LEADING_PUNCTUATION,
    LIST_NUMBERING,
    REPEATED_PERIODS,
    REPEATED_SEPARATORS,
    SEPARATOR_BEFORE_STOP,
    SPACE_BEFORE_PUNCTUATION,
    TRAILING_STRAY,
    WHITESPACE,
    NamedPattern,
    PatternLibrary,
)

_TERMINAL = (".", "!", "?")


class TextNormalizer:
    def __init__(
        self,
        classifier: ContentClassifier | None = None,
        patterns: PatternLibrary = DEFAULT_PATTERNS,
    ):
        self.patterns = patterns
        self.classifier = classifier or ContentClassifier(patterns=patterns)

    # ------------------------------------------------------------------
    # token removal
    # ------------------------------------------------------------------

    @staticmethod
    def _remove(text: str, table: Iterable[NamedPattern]) -> str:
        # Replace with a space so neighbouring digits never fuse into a new date
        for rule in table:
            text = rule.pattern.sub(" ", text)
        return text

    def strip_noise_tokens(self, text: str) -> str:
        """
        Remove dates, times, emails, URLs and week markers from a whole page.

        Line breaks survive so the result can still be split into lines.
        """
        text = self._remove(text, self.patterns.date_tokens)
        text = self._remove(text, self.patterns.noise_tokens)
        return HORIZONTAL_WHITESPACE.sub(" ", text)

    # ------------------------------------------------------------------
    # per line
    # ------------------------------------------------------------------

    def clean_line_content(self, line: str) -> str:
        if not line:
            return ""

        # Tightening punctuation can expose a new date token; repeat until stable
        cleaned = self._clean_once(line)
        while True:
            again = self._clean_once(cleaned)
            if again == cleaned:
                return cleaned
            cleaned = again

    def _clean_once(self, line: str) -> str:
        cleaned = self._remove(line, self.patterns.date_tokens)
        cleaned = EMPTY_BRACKETS.sub(" ", cleaned)
        cleaned = WHITESPACE.sub(" ", cleaned).strip()

        cleaned = SPACE_BEFORE_PUNCTUATION.sub(r"\1", cleaned)
        cleaned = REPEATED_SEPARATORS.sub(r"\1", cleaned)
        cleaned = SEPARATOR_BEFORE_STOP.sub("", cleaned)
        cleaned = REPEATED_PERIODS.sub(".", cleaned)

        return TRAILING_STRAY.sub("", self._strip_leading(cleaned))

    @staticmethod
    def _strip_leading(text: str) -> str:
        # Bullets, numbering and labels can be stacked ("1) - Tasks: ...")
        previous = None
        while previous != text:
            previous = text
            for pattern in (LEADING_PUNCTUATION, LIST_NUMBERING, LABEL_PREFIX):
                text = pattern.sub("", text, count=1)
        return text.strip()

    # ------------------------------------------------------------------
    # per day
    # ------------------------------------------------------------------

    def clean_activity_text(self, lines: Iterable[str] | str) -> str:
        """
        Clean a day's accumulated lines into a single sentence-like block.

        Lines that are not activity content or that look like metadata are
        dropped; survivors are joined with ". ". The result is stable under
        repeated application.
        """
        if isinstance(lines, str):
            lines = lines.splitlines()

        # Joining can line a month name up with the next line's number
        # ("in May. 3 printers"); rerun over the joined text until stable
        text = self._join_sentences(lines)
        while True:
            again = self._join_sentences([text])
            if again == text:
                return text
            text = again

    def _join_sentences(self, lines: Iterable[str]) -> str:
        sentences: list[str] = []
        for raw in lines:
            if not isinstance(raw, str):
                continue
            line = self.clean_line_content(raw)
            if not line:
                continue
            if not self.classifier.is_activity_content(line):
                continue
            if self.classifier.looks_like_metadata(line):
                continue

            if not line.endswith(_TERMINAL):
                line += "."
            sentences.append(line)

        text = " ".join(sentences)
        text = REPEATED_PERIODS.sub(".", text)
        text = TRAILING_STRAY.sub("", text).strip()

        if not text:
            return ""

        if text[0].islower():
            text = text[0].upper() + text[1:]

        if not text.endswith(_TERMINAL):
            text += "."

        return text
