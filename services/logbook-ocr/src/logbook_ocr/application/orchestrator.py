"""
Logbook OCR - Orchestrator
Runs the parsing strategies in order, escalating to a looser one while too
few weekdays come back, then scores the result and attaches warnings.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from shared.models import DayActivities, ExtractionIssue, ExtractionResult
from shared.utils.logger import get_logger

from ..core.config import OCRParserConfig, get_ocr_config
from .annotation import AnyAnnotation, StructuredAnnotation, resolve_annotation
from .classifier import ContentClassifier
from .normalizer import TextNormalizer
from .parsers import ContextParser, LineBasedParser, ParseOutcome, StructuredParser
from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .scoring import NO_TEXT_WARNING, calculate_confidence, generate_warnings

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParseStrategy:
    """
    One stage of the escalation chain.

    ``applies`` says whether the stage can run on this annotation at all,
    ``accept`` whether its outcome is good enough to stop escalating.
    """

    name: str
    applies: Callable[[AnyAnnotation], bool]
    run: Callable[[AnyAnnotation], ParseOutcome]
    accept: Callable[[ParseOutcome, AnyAnnotation], bool]


# ============================================================================
# ESCALATION PREDICATES
# ============================================================================


def has_block_structure(annotation: AnyAnnotation) -> bool:
    return isinstance(annotation, StructuredAnnotation) and annotation.has_blocks


def structured_is_enough(outcome: ParseOutcome, config: OCRParserConfig) -> bool:
    return outcome.populated_days >= config.structured_min_days


def line_based_is_enough(
    outcome: ParseOutcome, text: str, config: OCRParserConfig
) -> bool:
    too_sparse = outcome.populated_days <= config.context_max_days
    too_long = len(text) > config.context_min_text_length
    return not (too_sparse and too_long)


def default_strategies(
    config: OCRParserConfig,
    classifier: ContentClassifier,
    normalizer: TextNormalizer,
) -> tuple[ParseStrategy, ...]:
    structured = StructuredParser(classifier, normalizer)
    line_based = LineBasedParser(config, classifier, normalizer)
    context = ContextParser(classifier, normalizer)

    return (
        ParseStrategy(
            name=structured.name,
            applies=has_block_structure,
            run=structured.parse,
            accept=lambda outcome, _: structured_is_enough(outcome, config),
        ),
        ParseStrategy(
            name=line_based.name,
            applies=lambda _: True,
            run=lambda annotation: line_based.parse(annotation.text),
            accept=lambda outcome, annotation: line_based_is_enough(
                outcome, annotation.text, config
            ),
        ),
        ParseStrategy(
            name=context.name,
            applies=lambda _: True,
            run=lambda annotation: context.parse(annotation.text),
            accept=lambda outcome, _: True,
        ),
    )


# ============================================================================
# EXTRACTOR
# ============================================================================


class LogbookOCRExtractor:
    """
    Turn one OCR annotation into an ``ExtractionResult``.

    Holds no per-call state; one instance can serve concurrent requests.
    """

    def __init__(
        self,
        config: OCRParserConfig | None = None,
        patterns: PatternLibrary = DEFAULT_PATTERNS,
        strategies: Sequence[ParseStrategy] | None = None,
    ):
        self.config = config or get_ocr_config()
        self.classifier = ContentClassifier(self.config, patterns)
        self.normalizer = TextNormalizer(self.classifier, patterns)
        self.strategies = tuple(
            strategies
            if strategies is not None
            else default_strategies(self.config, self.classifier, self.normalizer)
        )

    def select_outcome(self, annotation: AnyAnnotation) -> ParseOutcome:
        outcome: ParseOutcome | None = None

        for strategy in self.strategies:
            if not strategy.applies(annotation):
                continue

            outcome = strategy.run(annotation)
            if strategy.accept(outcome, annotation):
                return outcome

            logger.debug(
                f"{ExtractionIssue.PARSE_AMBIGUITY.value}: {strategy.name} found "
                f"{outcome.populated_days} days, escalating"
            )

        return outcome or ParseOutcome(strategy="none")

    def extract(self, raw: Any) -> ExtractionResult:
        result, _ = self.extract_annotation(resolve_annotation(raw))
        return result

    def extract_annotation(
        self, annotation: AnyAnnotation
    ) -> tuple[ExtractionResult, str]:
        """Result plus the name of the strategy that produced it"""
        if not annotation.text.strip():
            logger.info(ExtractionIssue.NO_TEXT_DETECTED.value)
            result = ExtractionResult(
                success=False,
                full_text="",
                activities=DayActivities(),
                confidence=0.0,
                warnings=[NO_TEXT_WARNING],
            )
            return result, "none"

        outcome = self.select_outcome(annotation)
        activities = DayActivities.from_mapping(outcome.activities)

        logger.info(
            f"Logbook extraction via {outcome.strategy}: "
            f"{outcome.populated_days} days from {len(annotation.text)} chars"
        )

        result = ExtractionResult(
            success=True,
            full_text=annotation.text,
            activities=activities,
            confidence=calculate_confidence(annotation, self.config),
            warnings=generate_warnings(activities, self.config),
        )
        return result, outcome.strategy


def extract_logbook_activities(
    raw: Any, config: OCRParserConfig | None = None
) -> ExtractionResult:
    """Convenience wrapper around a one-off ``LogbookOCRExtractor``"""
    return LogbookOCRExtractor(config).extract(raw)
