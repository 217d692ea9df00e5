"""Points and award calculation for completed jobs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from ...models.domain import JobOutcome
from .classifier import classify, has_no_access_status, has_register_filled

BONUS_PER_SUCCESSFUL_READING = 0.50
BONUS_PER_NO_ACCESS = 0.15

# (points, award) per outcome; the only place either value is assigned.
OUTCOME_RATES: Dict[JobOutcome, Tuple[float, float]] = {
    JobOutcome.REGISTER_FILLED: (1, BONUS_PER_SUCCESSFUL_READING),
    JobOutcome.NO_ACCESS_RECORDED: (0.5, BONUS_PER_NO_ACCESS),
    JobOutcome.INCOMPLETE: (0, 0),
}


@dataclass(slots=True)
class ScoreResult:
    points: float
    award: float
    outcome: JobOutcome
    has_register: bool
    has_no_access: bool

    @property
    def is_valid_no_access(self) -> bool:
        return self.outcome is JobOutcome.NO_ACCESS_RECORDED


@dataclass(slots=True)
class BonusBreakdown:
    from_successful_readings: float
    from_no_access: float


@dataclass(slots=True)
class BonusSummary:
    total_points: float
    total_award: float
    successful_readings: int
    no_access_jobs: int
    incomplete_jobs: int
    breakdown: BonusBreakdown
    bonus_per_successful_reading: float = BONUS_PER_SUCCESSFUL_READING
    bonus_per_no_access: float = BONUS_PER_NO_ACCESS


def score(job: Any) -> ScoreResult:
    outcome = classify(job)
    points, award = OUTCOME_RATES[outcome]
    return ScoreResult(
        points=points,
        award=award,
        outcome=outcome,
        has_register=has_register_filled(job),
        has_no_access=has_no_access_status(job),
    )


def calculate_points(job: Any) -> float:
    return score(job).points


def calculate_award(job: Any) -> float:
    return score(job).award


def aggregate(jobs: Iterable[Any] | None = None) -> BonusSummary:
    """Fold ``score`` over ``jobs`` into a bonus summary.

    Totals are derived from the per-outcome counts, so the result does not
    depend on job order and each breakdown entry is exactly
    ``count * rate``.
    """

    counts: Counter[JobOutcome] = Counter(score(job).outcome for job in jobs or ())

    total_points = 0.0
    award_by_outcome: Dict[JobOutcome, float] = {}
    for outcome, (points, award) in OUTCOME_RATES.items():
        total_points += counts[outcome] * points
        award_by_outcome[outcome] = counts[outcome] * award

    breakdown = BonusBreakdown(
        from_successful_readings=award_by_outcome[JobOutcome.REGISTER_FILLED],
        from_no_access=award_by_outcome[JobOutcome.NO_ACCESS_RECORDED],
    )
    return BonusSummary(
        total_points=total_points,
        total_award=breakdown.from_successful_readings + breakdown.from_no_access,
        successful_readings=counts[JobOutcome.REGISTER_FILLED],
        no_access_jobs=counts[JobOutcome.NO_ACCESS_RECORDED],
        incomplete_jobs=counts[JobOutcome.INCOMPLETE],
        breakdown=breakdown,
    )
