"""Per-worker wage and mileage reports built from job records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

from .service import DEFAULT_FUEL_ALLOWANCE_PER_JOB, DEFAULT_RATE_PER_MILE, WageResult, compute_wage

COMPLETED_STATUS = "completed"


@dataclass(slots=True)
class WorkerMileage:
    worker_id: str
    total_distance: float = 0.0
    total_jobs: int = 0
    completed_jobs: int = 0
    job_ids: List[str] = field(default_factory=list)

    @property
    def average_distance_per_job(self) -> float:
        if self.completed_jobs > 0 and self.total_distance > 0:
            return self.total_distance / self.completed_jobs
        return 0.0


@dataclass(slots=True)
class MileageReport:
    workers: List[WorkerMileage]
    total_users: int
    total_distance: float
    total_jobs: int
    total_completed_jobs: int


@dataclass(slots=True)
class WorkerWage:
    worker_id: str
    total_jobs: int
    wage: WageResult


@dataclass(slots=True)
class WageReport:
    workers: List[WorkerWage]
    total_users: int
    total_distance: float
    total_jobs: int
    total_completed_jobs: int
    total_base_wage: float
    total_fuel_allowance: float
    total_wage: float
    rate_per_mile: float
    fuel_allowance_per_job: float


def _worker_id(job: Mapping) -> Optional[str]:
    assigned = job.get("assignedTo")
    if isinstance(assigned, Mapping):
        assigned = assigned.get("_id") or assigned.get("id")
    if assigned is None or assigned == "":
        return None
    return str(assigned)


def _job_id(job: Mapping) -> Optional[str]:
    value = job.get("_id") or job.get("id")
    return str(value) if value is not None else None


def _positive_distance(value: Any) -> float:
    if isinstance(value, Real) and not isinstance(value, bool) and value > 0:
        return float(value)
    return 0.0


def _group_by_worker(jobs: Iterable[Any]) -> Dict[str, WorkerMileage]:
    grouped: Dict[str, WorkerMileage] = {}
    for job in jobs:
        if not isinstance(job, Mapping):
            continue
        worker_id = _worker_id(job)
        if worker_id is None:
            continue
        entry = grouped.setdefault(worker_id, WorkerMileage(worker_id=worker_id))
        entry.total_jobs += 1
        if job.get("status") == COMPLETED_STATUS:
            entry.completed_jobs += 1
            entry.total_distance += _positive_distance(job.get("distanceTraveled"))
        job_id = _job_id(job)
        if job_id is not None:
            entry.job_ids.append(job_id)
    return grouped


def build_mileage_report(jobs: Iterable[Any]) -> MileageReport:
    workers = list(_group_by_worker(jobs).values())
    return MileageReport(
        workers=workers,
        total_users=len(workers),
        total_distance=sum(worker.total_distance for worker in workers),
        total_jobs=sum(worker.total_jobs for worker in workers),
        total_completed_jobs=sum(worker.completed_jobs for worker in workers),
    )


def build_wage_report(
    jobs: Iterable[Any],
    *,
    rate_per_mile: float = DEFAULT_RATE_PER_MILE,
    fuel_allowance_per_job: float = DEFAULT_FUEL_ALLOWANCE_PER_JOB,
) -> WageReport:
    """Group jobs by assigned worker and compute each worker's wage.

    Only completed jobs contribute distance and allowance; every job counts
    toward ``total_jobs``. Workers appear in first-seen order.
    """

    workers = [
        WorkerWage(
            worker_id=mileage.worker_id,
            total_jobs=mileage.total_jobs,
            wage=compute_wage(
                mileage.total_distance,
                mileage.completed_jobs,
                rate_per_mile,
                fuel_allowance_per_job,
            ),
        )
        for mileage in _group_by_worker(jobs).values()
    ]
    return WageReport(
        workers=workers,
        total_users=len(workers),
        total_distance=sum(worker.wage.total_distance for worker in workers),
        total_jobs=sum(worker.total_jobs for worker in workers),
        total_completed_jobs=sum(worker.wage.completed_jobs for worker in workers),
        total_base_wage=sum(worker.wage.base_wage for worker in workers),
        total_fuel_allowance=sum(worker.wage.allowance for worker in workers),
        total_wage=sum(worker.wage.total_wage for worker in workers),
        rate_per_mile=rate_per_mile,
        fuel_allowance_per_job=fuel_allowance_per_job,
    )
