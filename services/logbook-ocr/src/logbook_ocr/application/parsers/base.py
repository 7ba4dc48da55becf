"""
Logbook OCR - Parser building blocks
"""

from dataclasses import dataclass, field
from typing import Mapping

from shared.models import WEEKDAYS, DayKey

from ..normalizer import TextNormalizer


@dataclass(frozen=True)
class ParseOutcome:
    """Activities found by one parsing strategy"""

    strategy: str
    activities: Mapping[DayKey, str] = field(default_factory=dict)

    @property
    def populated_days(self) -> int:
        return sum(1 for day in WEEKDAYS if self.activities.get(day))


class DayAccumulator:
    """
    Collects lines for the active weekday and flushes them into cleaned text.

    A weekday that shows up again later (a page split across two photos,
    say) gets the new text appended rather than replacing what was found.
    """

    def __init__(self, normalizer: TextNormalizer):
        self.normalizer = normalizer
        self.activities: dict[DayKey, str] = {}
        self.current: DayKey | None = None
        self.buffer: list[str] = []

    @property
    def active(self) -> bool:
        return self.current is not None

    def start(self, day: DayKey) -> None:
        self.flush()
        self.current = day

    def add(self, line: str) -> None:
        self.buffer.append(line)

    def flush(self) -> None:
        if self.current is None or not self.buffer:
            self.buffer = []
            return

        text = self.normalizer.clean_activity_text(self.buffer)
        self.buffer = []
        if not text:
            return

        existing = self.activities.get(self.current)
        if existing:
            text = self.normalizer.clean_activity_text([existing, text])
        self.activities[self.current] = text

    def finish(self, strategy: str) -> ParseOutcome:
        self.flush()
        return ParseOutcome(strategy=strategy, activities=dict(self.activities))
