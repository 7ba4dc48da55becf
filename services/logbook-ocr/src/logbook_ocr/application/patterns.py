"""
Logbook OCR - Pattern Library
Named, immutable detection tables for dates, boilerplate and weekday headers.

Every table is a tuple of ``NamedPattern`` so rules can be listed, tested and
extended without touching the parsers. All patterns are case-insensitive.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Mapping

from shared.models import DayKey

_FLAGS = re.IGNORECASE

MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
ORDINAL = r"(?:st|nd|rd|th)"
NUMERIC_DATE = r"\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}"
EMAIL = r"\b[\w.%+-]+@[\w.-]+\.[a-z]{2,}\b"


@dataclass(frozen=True)
class NamedPattern:
    name: str
    pattern: re.Pattern

    @classmethod
    def compile(cls, name: str, expression: str) -> "NamedPattern":
        return cls(name, re.compile(expression, _FLAGS))

    def search(self, text: str):
        return self.pattern.search(text)


def _table(*rules: tuple[str, str]) -> tuple[NamedPattern, ...]:
    return tuple(NamedPattern.compile(name, expression) for name, expression in rules)


# ============================================================================
# TOKEN TABLES (removed from text)
# ============================================================================

# Order matters: ranges and full dates go before their shorter fragments
DATE_TOKENS = _table(
    ("iso_date", r"\b\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2}\b"),
    ("year_range", r"\b(?:19|20)\d{2}\s*[/\-–]\s*(?:19|20)\d{2}\b"),
    (
        "numeric_date_range",
        r"\b\d{1,2}[/\-.]\d{1,2}(?:[/\-.]\d{2,4})?\s*[-–—]\s*\d{1,2}[/\-.]\d{1,2}(?:[/\-.]\d{2,4})?\b",
    ),
    ("numeric_date", rf"\b{NUMERIC_DATE}\b"),
    (
        "day_month_name",
        rf"\b\d{{1,2}}{ORDINAL}?\s*(?:of\s+)?{MONTH}\b\.?(?:,?\s*(?:\d{{4}}|'\d{{2}})\b)?",
    ),
    ("month_name_day", rf"\b{MONTH}\b\.?\s*\d{{1,2}}{ORDINAL}?\b(?:,?\s*\d{{4}}\b)?"),
    ("month_year", rf"\b{MONTH}\b\.?,?\s*\d{{4}}\b"),
    ("day_month_numeric", r"\b\d{1,2}/\d{1,2}\b(?![/\-.]?\d)"),
    ("timestamp", r"\b\d{1,2}:\d{2}(?::\d{2})?(?:\s*[ap]\.?m\b\.?)?"),
    ("clock_hour", r"\b\d{1,2}\s*[ap]\.?m\b\.?"),
    ("bare_year", r"\b(?:19|20)\d{2}\b"),
)

NOISE_TOKENS = _table(
    ("week_marker", r"\bweek\s*(?:no\.?\s*|number\s*)?\d+\b"),
    ("week_ending", r"\bweek\s+ending\b"),
    ("email", EMAIL),
    ("url", r"\bhttps?://\S+|\bwww\.\S+"),
)

# ============================================================================
# CLASSIFICATION TABLES (whole-line signatures)
# ============================================================================

METADATA_SKIP = _table(
    ("page_label", r"^(?:page|p\.)\s*(?:no\.?\s*)?\d+$"),
    ("week_label", r"^week\s*(?:no\.?\s*)?\d+$"),
    ("week_ending", r"^week\s*ending\b"),
    ("section_work_done", r"^description\s*of\s*work\s*done"),
    ("section_progress_chart", r"^weekly\s*progress\s*chart"),
    (
        "signature_label",
        r"^(?:signature|supervisor|approved\s*by|checked\s*by|signed|date|time)\s*:?\s*$",
    ),
    (
        "supervisor_section",
        r"^(?:(?:industry[\s-]*based\s*)?supervisor'?s?|student'?s?)\s*(?:signature|comments?|remarks?)\b",
    ),
    ("logbook_title", r"^(?:siwes\s*log|log\s*book$|industrial\s*training)"),
    ("student_label", r"^student\s*(?:name|id|no\.?|number)\b"),
    ("organisation_label", r"^(?:company|department|organi[sz]ation|location)\s*(?:name)?\s*:"),
    ("bare_date", rf"^{NUMERIC_DATE}$"),
    ("bare_day_month", r"^\d{1,2}[/\-]\d{1,2}$"),
    ("bare_month", rf"^{MONTH}\b\.?,?(?:\s*\d{{1,2}}{ORDINAL}?)?,?(?:\s*\d{{4}})?$"),
    ("bare_date_month_name", rf"^\d{{1,2}}{ORDINAL}?\s*(?:of\s+)?{MONTH}\b\.?,?(?:\s*\d{{2,4}})?$"),
    ("bare_year", r"^\d{4}$"),
    ("bare_day_number", r"^day\s*\d+$"),
    (
        "label_only",
        r"^(?:activit(?:y|ies)|work\s*done|tasks?|remarks?|comments?|observations?)\s*:?\s*$",
    ),
    ("email", EMAIL),
    ("institution", r"^(?:fupre\b|federal\s*university|(?:federal|state)\s*polytechnic)"),
    ("separator", r"^(?:_{3,}|-{3,}|\.{3,}|=+|\*+|~{3,})$"),
)

METADATA_LINES = _table(
    ("field_label", r"^(?:name|id|department|company|location|supervisor)\s*:"),
    ("week_marker", r"^week\s*(?:no\.?\s*)?\d+"),
    ("week_ending", r"^week\s*ending"),
    ("section_work_done", r"^description\s*of\s*work\s*done"),
    ("section_progress_chart", r"^weekly\s*progress\s*chart"),
    ("bare_day_number", r"^day\s*\d+$"),
    ("bare_date", rf"^{NUMERIC_DATE}$"),
    ("approval", r"^(?:signed|approved|checked)(?:\s*by\b|\s*:)"),
    ("page_label", r"^page\s*\d+"),
    ("date_time_label", r"^(?:date|time)\s*:(?:[\s\d/.:\-–]|[ap]\.?m\b)*$"),
    ("duration_label", r"^duration\s*:"),
    ("activity_label", r"^(?:activit(?:y|ies)|work\s*done)\s*:\s*$"),
    ("email", EMAIL),
)

# ============================================================================
# LINE SHAPING
# ============================================================================

DATE_PREFIX = re.compile(r"^\d{1,2}[/\-.]\d{1,2}(?:[/\-.]\d{2,4})?\s*", _FLAGS)
EMPTY_BRACKETS = re.compile(r"\[\s*[x✓]?\s*\]|\(\s*\)", _FLAGS)
LEADING_PUNCTUATION = re.compile(r"^[\s\-–—:,.;•*·>|]+")
LIST_NUMBERING = re.compile(r"^\(?\d{1,2}[.)]\s+")
LABEL_PREFIX = re.compile(
    r"^(?:activit(?:y|ies)|work\s*done|tasks?|description)\s*[:\-]\s*", _FLAGS
)
SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([,.;:!?])")
REPEATED_SEPARATORS = re.compile(r"([,;:])(?:\s*[,;:])+")
SEPARATOR_BEFORE_STOP = re.compile(r"[,;:]+(?=[.!?])")
REPEATED_PERIODS = re.compile(r"\.(?:\s*\.)+")
TRAILING_STRAY = re.compile(r"[\s,;:\-–—]+$")
WHITESPACE = re.compile(r"\s+")
HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")

# ============================================================================
# WEEKDAY HEADERS
# ============================================================================

DAY_TOKENS: Mapping[DayKey, tuple[str, ...]] = {
    DayKey.MONDAY: ("monday", "mon", r"day\s*(?:1|one)"),
    DayKey.TUESDAY: ("tuesday", r"tues?", r"day\s*(?:2|two)"),
    DayKey.WEDNESDAY: ("wednesday", "wed", r"day\s*(?:3|three)"),
    DayKey.THURSDAY: ("thursday", r"thu(?:rs?)?", r"day\s*(?:4|four)"),
    DayKey.FRIDAY: ("friday", "fri", r"day\s*(?:5|five)"),
}


def day_indicator(tokens: tuple[str, ...]) -> str:
    # "Monday's" is prose, not a header
    return rf"\b(?:{'|'.join(tokens)})\b(?!['’]\w)\.?"


def _header_patterns() -> tuple[tuple[DayKey, re.Pattern], ...]:
    return tuple(
        (
            day,
            re.compile(
                r"^(?:(?:date|day)\s*[:\-]\s*)?(?:\(?\d{1,2}[.)]\s*)?[^\w]*"
                rf"(?P<day>{day_indicator(tokens)})"
                r"[\s:/\-,.–—|]*(?P<rest>.*)$",
                _FLAGS,
            ),
        )
        for day, tokens in DAY_TOKENS.items()
    )


def _indicator_patterns() -> tuple[tuple[DayKey, re.Pattern], ...]:
    return tuple(
        (
            day,
            re.compile(
                r"(?:\b\d{1,2}[/\-.]\d{1,2}(?:[/\-.]\d{2,4})?\s*[-,:]?\s*)?"
                + day_indicator(tokens),
                _FLAGS,
            ),
        )
        for day, tokens in DAY_TOKENS.items()
    )


# ============================================================================
# LIBRARY
# ============================================================================


@dataclass(frozen=True)
class PatternLibrary:
    """Bundle of tables handed to the classifier, normalizer and parsers"""

    date_tokens: tuple[NamedPattern, ...] = DATE_TOKENS
    noise_tokens: tuple[NamedPattern, ...] = NOISE_TOKENS
    metadata_skip: tuple[NamedPattern, ...] = METADATA_SKIP
    metadata_lines: tuple[NamedPattern, ...] = METADATA_LINES
    date_prefix: re.Pattern = DATE_PREFIX
    day_headers: tuple[tuple[DayKey, re.Pattern], ...] = field(
        default_factory=_header_patterns
    )
    day_indicators: tuple[tuple[DayKey, re.Pattern], ...] = field(
        default_factory=_indicator_patterns
    )

    def first_match(self, table: tuple[NamedPattern, ...], text: str) -> str | None:
        """Name of the first rule in ``table`` that matches, if any"""
        for rule in table:
            if rule.search(text):
                return rule.name
        return None

    def extend(self, table_name: str, *rules: tuple[str, str]) -> "PatternLibrary":
        """Copy of the library with extra rules appended to one table"""
        current = getattr(self, table_name)
        return replace(self, **{table_name: current + _table(*rules)})


DEFAULT_PATTERNS = PatternLibrary()
