"""Distance and job-count based wage calculation."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RATE_PER_MILE = 0.50
DEFAULT_FUEL_ALLOWANCE_PER_JOB = 1.00


@dataclass(slots=True)
class WageResult:
    total_distance: float
    completed_jobs: int
    rate_per_distance_unit: float
    allowance_per_job: float
    base_wage: float
    allowance: float
    total_wage: float
    average_distance_per_job: float


def compute_wage(
    total_distance: float = 0,
    completed_jobs: int = 0,
    rate_per_distance_unit: float = DEFAULT_RATE_PER_MILE,
    allowance_per_job: float = DEFAULT_FUEL_ALLOWANCE_PER_JOB,
) -> WageResult:
    """Return the wage breakdown. Values are not rounded."""

    base_wage = total_distance * rate_per_distance_unit
    allowance = completed_jobs * allowance_per_job
    average = total_distance / completed_jobs if completed_jobs > 0 else 0
    return WageResult(
        total_distance=total_distance,
        completed_jobs=completed_jobs,
        rate_per_distance_unit=rate_per_distance_unit,
        allowance_per_job=allowance_per_job,
        base_wage=base_wage,
        allowance=allowance,
        total_wage=base_wage + allowance,
        average_distance_per_job=average,
    )
