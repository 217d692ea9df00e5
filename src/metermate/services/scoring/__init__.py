"""Job scoring service exports."""

from .classifier import (
    NO_ACCESS_REASONS,
    classify,
    has_no_access_status,
    has_register_filled,
    is_valid_no_access_reason,
)
from .service import BonusSummary, ScoreResult, aggregate, calculate_award, calculate_points, score

__all__ = [
    "NO_ACCESS_REASONS",
    "classify",
    "has_register_filled",
    "has_no_access_status",
    "is_valid_no_access_reason",
    "score",
    "calculate_points",
    "calculate_award",
    "aggregate",
    "ScoreResult",
    "BonusSummary",
]
