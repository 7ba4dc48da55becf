from dataclasses import replace

import pytest

from logbook_ocr.application.annotation import resolve_annotation
from logbook_ocr.application.classifier import ContentClassifier
from logbook_ocr.application.normalizer import TextNormalizer
from logbook_ocr.application.parsers import (
    ContextParser,
    DayAccumulator,
    LineBasedParser,
    StructuredParser,
)
from shared.models import DayKey


@pytest.fixture(scope="module")
def classifier(config):
    return ContentClassifier(config)


@pytest.fixture(scope="module")
def normalizer(classifier):
    return TextNormalizer(classifier)


# ===========================================================================
# Structured
# ===========================================================================


@pytest.mark.unit
class TestStructuredParser:
    def test_blocks_are_grouped_under_day_headers(
        self, classifier, normalizer, weekly_page
    ):
        parser = StructuredParser(classifier, normalizer)

        outcome = parser.parse(resolve_annotation(weekly_page))

        assert outcome.strategy == "structured"
        assert outcome.populated_days == 3
        assert outcome.activities[DayKey.MONDAY] == (
            "Configured the staging server and deployed the API."
        )
        assert outcome.activities[DayKey.TUESDAY] == (
            "Wrote integration tests for the payment service."
        )
        assert outcome.activities[DayKey.WEDNESDAY] == (
            "Documented the deployment process for the team."
        )

    def test_header_detection_ignores_dates(self, classifier, normalizer):
        parser = StructuredParser(classifier, normalizer)

        assert parser.detect_header("12/06/2025 Thursday\nsomething") is DayKey.THURSDAY
        assert parser.detect_header("Configured the switch") is None
        assert parser.detect_header("") is None

    @pytest.mark.parametrize(
        "first_line",
        ["Week 3 Monday", "WEEK NO. 3 Monday 12/06/2025", "Monday 9:00 AM"],
    )
    def test_header_detection_ignores_week_markers_and_times(
        self, classifier, normalizer, first_line
    ):
        parser = StructuredParser(classifier, normalizer)

        assert parser.detect_header(first_line) is DayKey.MONDAY

    def test_blocks_before_first_header_are_dropped(
        self, classifier, normalizer, vision_annotation
    ):
        parser = StructuredParser(classifier, normalizer)
        annotation = resolve_annotation(
            vision_annotation(
                "SIWES log book for the industrial training programme",
                "Friday",
                "Presented the weekly report to the supervisor.",
            )
        )

        outcome = parser.parse(annotation)

        assert list(outcome.activities) == [DayKey.FRIDAY]

    def test_multi_line_block_is_joined(self, classifier, normalizer, vision_annotation):
        parser = StructuredParser(classifier, normalizer)
        annotation = resolve_annotation(
            vision_annotation("Monday", "Replaced faulty cables\nin the server room")
        )

        outcome = parser.parse(annotation)

        assert outcome.activities[DayKey.MONDAY] == (
            "Replaced faulty cables in the server room."
        )


# ===========================================================================
# Line-based
# ===========================================================================


@pytest.mark.unit
class TestLineBasedParser:
    def test_header_lines_with_trailing_text(self, config, classifier, normalizer):
        parser = LineBasedParser(config, classifier, normalizer)

        outcome = parser.parse(
            "Monday: Worked on database schema design for three hours.\n"
            "Tuesday: Attended sprint planning meeting and logged action items."
        )

        assert outcome.activities[DayKey.MONDAY].startswith(
            "Worked on database schema design"
        )
        assert outcome.activities[DayKey.TUESDAY].startswith(
            "Attended sprint planning meeting"
        )

    def test_dates_and_metadata_are_removed(self, config, classifier, normalizer):
        parser = LineBasedParser(config, classifier, normalizer)

        outcome = parser.parse(
            "Week 6\n"
            "Name: Ada Obi\n"
            "Monday 12/06/2025: Met with the client on June 12 to gather requirements.\n"
            "Signature:\n"
        )

        monday = outcome.activities[DayKey.MONDAY]
        assert monday == "Met with the client on to gather requirements."
        assert outcome.populated_days == 1

    def test_content_outside_proximity_window_is_ignored(
        self, config, classifier, normalizer
    ):
        parser = LineBasedParser(config, classifier, normalizer)
        filler = ["ok"] * 14
        text = "\n".join(
            ["Friday: Cleaned up the backlog and closed stale tickets."]
            + filler
            + ["Still within reach of the header line."]
            + ["This trailing footer text should be ignored entirely."]
        )

        friday = parser.parse(text).activities[DayKey.FRIDAY]

        assert "Still within reach" in friday
        assert "footer" not in friday

    def test_proximity_window_is_configurable(self, config, classifier, normalizer):
        parser = LineBasedParser(
            replace(config, header_proximity_window=1), classifier, normalizer
        )

        outcome = parser.parse(
            "Monday\nFirst line of the day's work.\nSecond line of the day's work."
        )

        assert outcome.activities[DayKey.MONDAY] == "First line of the day's work."

    def test_repeated_day_is_merged(self, config, classifier, normalizer):
        parser = LineBasedParser(config, classifier, normalizer)

        outcome = parser.parse(
            "Monday: Configured the firewall rules.\n"
            "Tuesday: Replaced the UPS battery pack.\n"
            "Monday: Updated the network diagram."
        )

        assert outcome.activities[DayKey.MONDAY] == (
            "Configured the firewall rules. Updated the network diagram."
        )

    def test_no_headers_means_no_days(self, config, classifier, normalizer):
        parser = LineBasedParser(config, classifier, normalizer)

        outcome = parser.parse("Spent the week learning about network security.")

        assert outcome.activities == {}
        assert outcome.populated_days == 0


# ===========================================================================
# Context
# ===========================================================================


@pytest.mark.unit
class TestContextParser:
    def test_day_names_inside_lines(self, classifier, normalizer):
        parser = ContextParser(classifier, normalizer)

        outcome = parser.parse(
            "On Monday I configured the firewall rules for the office.\n"
            "On Tuesday I replaced faulty network cables in the lab.\n"
            "Also tested every port with the cable tester."
        )

        assert outcome.strategy == "context"
        assert "configured the firewall rules" in outcome.activities[DayKey.MONDAY]
        tuesday = outcome.activities[DayKey.TUESDAY]
        assert "replaced faulty network cables" in tuesday
        assert "tested every port" in tuesday

    def test_text_without_day_names(self, classifier, normalizer):
        parser = ContextParser(classifier, normalizer)
        assert parser.parse("Nothing here mentions a weekday at all.").activities == {}


def test_accumulator_skips_days_without_content(normalizer):
    days = DayAccumulator(normalizer)
    days.start(DayKey.MONDAY)
    days.start(DayKey.TUESDAY)
    days.add("Installed the new projector in the hall")

    outcome = days.finish("manual")

    assert list(outcome.activities) == [DayKey.TUESDAY]
    assert outcome.strategy == "manual"
