from .annotation import (
    AnyAnnotation,
    FlatAnnotation,
    StructuredAnnotation,
    resolve_annotation,
)
from .classifier import ContentClassifier
from .normalizer import TextNormalizer
from .orchestrator import (
    LogbookOCRExtractor,
    ParseStrategy,
    default_strategies,
    extract_logbook_activities,
)
from .patterns import DEFAULT_PATTERNS, NamedPattern, PatternLibrary

__all__ = [
    "AnyAnnotation",
    "ContentClassifier",
    "DEFAULT_PATTERNS",
    "FlatAnnotation",
    "LogbookOCRExtractor",
    "NamedPattern",
    "ParseStrategy",
    "PatternLibrary",
    "StructuredAnnotation",
    "TextNormalizer",
    "default_strategies",
    "extract_logbook_activities",
    "resolve_annotation",
]
