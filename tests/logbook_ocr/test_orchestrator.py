from dataclasses import replace

import pytest

from logbook_ocr.application.annotation import resolve_annotation
from logbook_ocr.application.orchestrator import (
    LogbookOCRExtractor,
    ParseStrategy,
    extract_logbook_activities,
    line_based_is_enough,
    structured_is_enough,
)
from logbook_ocr.application.parsers import ParseOutcome
from logbook_ocr.application.scoring import NO_ACTIVITIES_WARNING, NO_TEXT_WARNING
from shared.models import DayKey

TWO_DAYS = (
    "Monday: Worked on database schema design for three hours.\n"
    "Tuesday: Attended sprint planning meeting and logged action items."
)

FILLER = "General notes about the placement and the team culture here.\n" * 10


@pytest.fixture(scope="module")
def extractor(config):
    return LogbookOCRExtractor(config)


def test_flat_text_with_day_labels(extractor):
    result = extractor.extract({"text": TWO_DAYS})

    assert result.success
    assert result.full_text == TWO_DAYS
    assert result.activities.monday.startswith("Worked on database schema design")
    assert result.activities.tuesday.startswith("Attended sprint planning meeting")
    assert result.warnings[0] == "Missing activities for: Wednesday, Thursday, Friday"


def test_no_weekday_anywhere(extractor):
    result = extractor.extract({"text": "Spent the week reading about network security."})

    assert result.success
    assert result.activities.as_dict() == {}
    assert result.warnings == [NO_ACTIVITIES_WARNING]


@pytest.mark.parametrize("raw", [{"text": ""}, {"text": "   \n "}, "", {}])
def test_no_text_is_unsuccessful(extractor, raw):
    result = extractor.extract(raw)

    assert not result.success
    assert result.confidence == 0.0
    assert result.warnings == [NO_TEXT_WARNING]
    assert result.to_response()["activities"] == {}


def test_structured_page_is_parsed_by_blocks(extractor, weekly_page):
    result, strategy = extractor.extract_annotation(resolve_annotation(weekly_page))

    assert strategy == "structured"
    assert result.activities.populated_days() == [
        DayKey.MONDAY,
        DayKey.TUESDAY,
        DayKey.WEDNESDAY,
    ]


def test_week_marker_before_first_header_stays_structured(extractor, vision_annotation):
    page = vision_annotation(
        "Week 3 Monday",
        "Configured the staging server and deployed the API.",
        "Tuesday",
        "Wrote integration tests for the payment service.",
        "Wednesday",
        "Documented the deployment process for the team.",
    )

    result, strategy = extractor.extract_annotation(resolve_annotation(page))

    assert strategy == "structured"
    assert result.activities.monday == (
        "Configured the staging server and deployed the API."
    )


def test_sparse_structured_result_escalates(config, weekly_page):
    extractor = LogbookOCRExtractor(replace(config, structured_min_days=4))

    result, strategy = extractor.extract_annotation(resolve_annotation(weekly_page))

    assert strategy == "line_based"
    assert len(result.activities.populated_days()) == 3


def test_long_text_without_headers_escalates_to_context(extractor):
    text = (
        FILLER
        + "On Monday I configured the firewall rules for the office.\n"
        + "On Tuesday I replaced faulty network cables in the lab."
    )

    result, strategy = extractor.extract_annotation(resolve_annotation(text))

    assert strategy == "context"
    assert "configured the firewall rules" in result.activities.monday
    assert "replaced faulty network cables" in result.activities.tuesday


def test_activity_keys_are_weekdays_only(extractor, weekly_page):
    weekdays = {"monday", "tuesday", "wednesday", "thursday", "friday"}
    for raw in (weekly_page, {"text": TWO_DAYS}, {"text": "Saturday: rest"}):
        assert set(extractor.extract(raw).to_response()["activities"]) <= weekdays


def test_identical_input_gives_identical_output(extractor, weekly_page):
    first = extractor.extract(weekly_page).model_dump_json()
    second = extractor.extract(weekly_page).model_dump_json()
    assert first == second


def test_activities_carry_no_dates(extractor):
    result = extractor.extract(
        {
            "text": "Monday 12/06/2025: Met the client on June 12 about invoicing.\n"
            "Tuesday 13-06-25: Filed the 12 Jun 2025 report with finance team."
        }
    )

    for text in result.activities.as_dict().values():
        assert not any(char.isdigit() for char in text)


def test_custom_strategy_chain(config):
    fixed = ParseOutcome(strategy="fixed", activities={DayKey.FRIDAY: "Demo day."})
    extractor = LogbookOCRExtractor(
        config,
        strategies=[
            ParseStrategy(
                name="fixed",
                applies=lambda _: True,
                run=lambda _: fixed,
                accept=lambda outcome, _: True,
            )
        ],
    )

    result, strategy = extractor.extract_annotation(resolve_annotation("anything"))

    assert strategy == "fixed"
    assert result.activities.as_dict() == {"friday": "Demo day."}


def test_module_level_wrapper(config):
    result = extract_logbook_activities({"text": TWO_DAYS}, config)
    assert result.activities.monday is not None


@pytest.mark.unit
class TestEscalationPredicates:
    def _outcome(self, count: int) -> ParseOutcome:
        days = list(DayKey)[:count]
        return ParseOutcome(strategy="t", activities={day: "Work." for day in days})

    def test_structured_needs_three_days(self, config):
        assert structured_is_enough(self._outcome(3), config)
        assert not structured_is_enough(self._outcome(2), config)

    def test_line_based_rejected_only_when_sparse_and_long(self, config):
        long_text = "x" * 501
        assert not line_based_is_enough(self._outcome(2), long_text, config)
        assert line_based_is_enough(self._outcome(2), "x" * 500, config)
        assert line_based_is_enough(self._outcome(3), long_text, config)
