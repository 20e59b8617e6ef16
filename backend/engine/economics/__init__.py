"""Savings analysis module."""

from .comparison import (
    ComparisonResult,
    SourceBreakdown,
    compare,
    savings_percentage,
    source_breakdown,
)

__all__ = [
    "ComparisonResult",
    "SourceBreakdown",
    "compare",
    "savings_percentage",
    "source_breakdown",
]
