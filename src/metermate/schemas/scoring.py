"""Scoring API schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import JobOutcome


class ScoreRequest(BaseModel):
    job: Dict[str, Any] = Field(default_factory=dict, description="Raw job record as stored.")


class ScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    points: float
    award: float
    outcome: JobOutcome
    is_valid_no_access: bool = Field(..., alias="isValidNoAccess")
    has_reg1: bool = Field(..., alias="hasReg1")
    has_no_access: bool = Field(..., alias="hasNoAccess")


class BonusSummaryRequest(BaseModel):
    jobs: List[Dict[str, Any]] = Field(default_factory=list)


class BonusBreakdownModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_successful_readings: float = Field(..., alias="fromSuccessfulReadings")
    from_no_access: float = Field(..., alias="fromNoAccess")


class BonusSummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_points: float = Field(..., alias="totalPoints")
    total_bonus: float = Field(..., alias="totalBonus")
    successful_readings: int = Field(..., alias="successfulReadings")
    no_access_jobs: int = Field(..., alias="noAccessJobs")
    incomplete_jobs: int = Field(..., alias="incompleteJobs")
    bonus_per_successful_reading: float = Field(..., alias="bonusPerSuccessfulReading")
    bonus_per_no_access: float = Field(..., alias="bonusPerNoAccess")
    breakdown: BonusBreakdownModel


class NoAccessReasonRequest(BaseModel):
    reason: Optional[str] = None


class NoAccessReasonResponse(BaseModel):
    reason: Optional[str] = None
    valid: bool
