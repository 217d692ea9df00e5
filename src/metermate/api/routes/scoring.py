"""Points and bonus endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.scoring import (
    BonusBreakdownModel,
    BonusSummaryRequest,
    BonusSummaryResponse,
    NoAccessReasonRequest,
    NoAccessReasonResponse,
    ScoreRequest,
    ScoreResponse,
)
from ...services.scoring import NO_ACCESS_REASONS, aggregate, is_valid_no_access_reason, score

router = APIRouter(prefix="/scoring", tags=["scoring"])


@router.post("/score", response_model=ScoreResponse, status_code=status.HTTP_200_OK)
def score_job(payload: ScoreRequest) -> ScoreResponse:
    result = score(payload.job)
    return ScoreResponse(
        points=result.points,
        award=result.award,
        outcome=result.outcome,
        is_valid_no_access=result.is_valid_no_access,
        has_reg1=result.has_register,
        has_no_access=result.has_no_access,
    )


@router.post("/summary", response_model=BonusSummaryResponse, status_code=status.HTTP_200_OK)
def bonus_summary(payload: BonusSummaryRequest) -> BonusSummaryResponse:
    summary = aggregate(payload.jobs)
    return BonusSummaryResponse(
        total_points=summary.total_points,
        total_bonus=summary.total_award,
        successful_readings=summary.successful_readings,
        no_access_jobs=summary.no_access_jobs,
        incomplete_jobs=summary.incomplete_jobs,
        bonus_per_successful_reading=summary.bonus_per_successful_reading,
        bonus_per_no_access=summary.bonus_per_no_access,
        breakdown=BonusBreakdownModel(
            from_successful_readings=summary.breakdown.from_successful_readings,
            from_no_access=summary.breakdown.from_no_access,
        ),
    )


@router.get("/no-access-reasons", status_code=status.HTTP_200_OK)
def list_no_access_reasons() -> dict:
    return {"reasons": list(NO_ACCESS_REASONS)}


@router.post("/no-access-reason", response_model=NoAccessReasonResponse, status_code=status.HTTP_200_OK)
def check_no_access_reason(payload: NoAccessReasonRequest) -> NoAccessReasonResponse:
    return NoAccessReasonResponse(reason=payload.reason, valid=is_valid_no_access_reason(payload.reason))
