"""Wage and mileage API schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_distance_miles: float = Field(0.0, ge=0, alias="totalDistanceMiles")
    completed_jobs: int = Field(0, ge=0, alias="completedJobs")
    rate_per_mile: Optional[float] = Field(None, ge=0, alias="ratePerMile")
    fuel_allowance_per_job: Optional[float] = Field(None, ge=0, alias="fuelAllowancePerJob")


class WageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_distance_miles: float = Field(..., alias="totalDistanceMiles")
    completed_jobs: int = Field(..., alias="completedJobs")
    rate_per_mile: float = Field(..., alias="ratePerMile")
    fuel_allowance_per_job: float = Field(..., alias="fuelAllowancePerJob")
    base_wage: float = Field(..., alias="baseWage")
    fuel_allowance: float = Field(..., alias="fuelAllowance")
    total_wage: float = Field(..., alias="totalWage")
    average_distance_per_job: float = Field(..., alias="averageDistancePerJob")


class WageReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jobs: List[Dict[str, Any]] = Field(default_factory=list)
    rate_per_mile: Optional[float] = Field(None, ge=0, alias="ratePerMile")
    fuel_allowance_per_job: Optional[float] = Field(None, ge=0, alias="fuelAllowancePerJob")


class WorkerWageModel(WageResponse):
    user_id: str = Field(..., alias="userId")
    total_jobs: int = Field(..., alias="totalJobs")


class WageReportSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(..., alias="totalUsers")
    total_distance: float = Field(..., alias="totalDistance")
    total_jobs: int = Field(..., alias="totalJobs")
    total_completed_jobs: int = Field(..., alias="totalCompletedJobs")
    total_base_wage: float = Field(..., alias="totalBaseWage")
    total_fuel_allowance: float = Field(..., alias="totalFuelAllowance")
    total_wage: float = Field(..., alias="totalWage")
    rate_per_mile: float = Field(..., alias="ratePerMile")
    fuel_allowance_per_job: float = Field(..., alias="fuelAllowancePerJob")


class WageReportResponse(BaseModel):
    data: List[WorkerWageModel]
    summary: WageReportSummary


class MileageReportRequest(BaseModel):
    jobs: List[Dict[str, Any]] = Field(default_factory=list)


class WorkerMileageModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId")
    total_distance: float = Field(..., alias="totalDistance")
    total_jobs: int = Field(..., alias="totalJobs")
    completed_jobs: int = Field(..., alias="completedJobs")
    average_distance_per_job: float = Field(..., alias="averageDistancePerJob")
    job_ids: List[str] = Field(default_factory=list, alias="jobIds")


class MileageReportSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(..., alias="totalUsers")
    total_distance: float = Field(..., alias="totalDistance")
    total_jobs: int = Field(..., alias="totalJobs")
    total_completed_jobs: int = Field(..., alias="totalCompletedJobs")


class MileageReportResponse(BaseModel):
    data: List[WorkerMileageModel]
    summary: MileageReportSummary
