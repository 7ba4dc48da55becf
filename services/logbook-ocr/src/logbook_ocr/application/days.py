"""
Logbook OCR - Weekday header detection
"""

from dataclasses import dataclass

from shared.models import DayKey

from .patterns import DEFAULT_PATTERNS, PatternLibrary


@dataclass(frozen=True)
class DayMatch:
    day: DayKey
    start: int
    end: int
    rest: str = ""


def match_day_header(
    line: str, patterns: PatternLibrary = DEFAULT_PATTERNS
) -> DayMatch | None:
    """
    Match a weekday header at the start of a line.

    Accepts "Monday", "Tue.", "Day 3", optionally after bullets, list
    numbering or a "Date:" label, and returns any same-line text that follows
    the header in ``rest``.
    """
    for day, pattern in patterns.day_headers:
        match = pattern.match(line)
        if match:
            return DayMatch(
                day=day,
                start=match.start("day"),
                end=match.end("day"),
                rest=(match.group("rest") or "").strip(),
            )
    return None


def find_day_indicator(
    line: str, patterns: PatternLibrary = DEFAULT_PATTERNS
) -> DayMatch | None:
    """Earliest weekday indicator anywhere in the line, with any date glued before it"""
    best: DayMatch | None = None
    for day, pattern in patterns.day_indicators:
        match = pattern.search(line)
        if match and (best is None or match.start() < best.start):
            best = DayMatch(day=day, start=match.start(), end=match.end())
    if best is None:
        return None
    remainder = f"{line[:best.start]} {line[best.end:]}".strip()
    return DayMatch(day=best.day, start=best.start, end=best.end, rest=remainder)
