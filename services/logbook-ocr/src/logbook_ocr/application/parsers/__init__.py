from .base import DayAccumulator, ParseOutcome
from .context import ContextParser
from .line_based import LineBasedParser
from .structured import StructuredParser

__all__ = [
    "ContextParser",
    "DayAccumulator",
    "LineBasedParser",
    "ParseOutcome",
    "StructuredParser",
]
