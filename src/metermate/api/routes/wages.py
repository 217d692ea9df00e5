"""Wage and mileage endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...schemas.wages import (
    MileageReportRequest,
    MileageReportResponse,
    MileageReportSummary,
    WageReportRequest,
    WageReportResponse,
    WageReportSummary,
    WageRequest,
    WageResponse,
    WorkerMileageModel,
    WorkerWageModel,
)
from ...services.wages import WageResult, build_mileage_report, build_wage_report, compute_wage

router = APIRouter(prefix="/wages", tags=["wages"])

logger = logging.getLogger(__name__)


def _wage_fields(result: WageResult) -> dict:
    return {
        "total_distance_miles": result.total_distance,
        "completed_jobs": result.completed_jobs,
        "rate_per_mile": result.rate_per_distance_unit,
        "fuel_allowance_per_job": result.allowance_per_job,
        "base_wage": result.base_wage,
        "fuel_allowance": result.allowance,
        "total_wage": result.total_wage,
        "average_distance_per_job": result.average_distance_per_job,
    }


def _rates(rate_per_mile: float | None, fuel_allowance_per_job: float | None) -> tuple[float, float]:
    return (
        settings.rate_per_mile if rate_per_mile is None else rate_per_mile,
        settings.fuel_allowance_per_job if fuel_allowance_per_job is None else fuel_allowance_per_job,
    )


@router.post("/calculate", response_model=WageResponse, status_code=status.HTTP_200_OK)
def calculate(payload: WageRequest) -> WageResponse:
    rate, allowance = _rates(payload.rate_per_mile, payload.fuel_allowance_per_job)
    result = compute_wage(payload.total_distance_miles, payload.completed_jobs, rate, allowance)
    return WageResponse(**_wage_fields(result))


@router.post("/report", response_model=WageReportResponse, status_code=status.HTTP_200_OK)
def wage_report(payload: WageReportRequest) -> WageReportResponse:
    """Wage breakdown per meter reader over the supplied job records."""
    rate, allowance = _rates(payload.rate_per_mile, payload.fuel_allowance_per_job)
    try:
        report = build_wage_report(payload.jobs, rate_per_mile=rate, fuel_allowance_per_job=allowance)
    except Exception as exc:
        logger.exception("Error building wage report: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build wage report: {str(exc)}",
        ) from exc

    return WageReportResponse(
        data=[
            WorkerWageModel(user_id=worker.worker_id, total_jobs=worker.total_jobs, **_wage_fields(worker.wage))
            for worker in report.workers
        ],
        summary=WageReportSummary(
            total_users=report.total_users,
            total_distance=report.total_distance,
            total_jobs=report.total_jobs,
            total_completed_jobs=report.total_completed_jobs,
            total_base_wage=report.total_base_wage,
            total_fuel_allowance=report.total_fuel_allowance,
            total_wage=report.total_wage,
            rate_per_mile=report.rate_per_mile,
            fuel_allowance_per_job=report.fuel_allowance_per_job,
        ),
    )


@router.post("/mileage-report", response_model=MileageReportResponse, status_code=status.HTTP_200_OK)
def mileage_report(payload: MileageReportRequest) -> MileageReportResponse:
    try:
        report = build_mileage_report(payload.jobs)
    except Exception as exc:
        logger.exception("Error building mileage report: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build mileage report: {str(exc)}",
        ) from exc

    return MileageReportResponse(
        data=[
            WorkerMileageModel(
                user_id=worker.worker_id,
                total_distance=worker.total_distance,
                total_jobs=worker.total_jobs,
                completed_jobs=worker.completed_jobs,
                average_distance_per_job=worker.average_distance_per_job,
                job_ids=worker.job_ids,
            )
            for worker in report.workers
        ],
        summary=MileageReportSummary(
            total_users=report.total_users,
            total_distance=report.total_distance,
            total_jobs=report.total_jobs,
            total_completed_jobs=report.total_completed_jobs,
        ),
    )
