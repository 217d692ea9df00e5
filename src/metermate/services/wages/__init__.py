"""Wage service exports."""

from .reports import MileageReport, WageReport, build_mileage_report, build_wage_report
from .service import WageResult, compute_wage

__all__ = [
    "compute_wage",
    "WageResult",
    "build_wage_report",
    "build_mileage_report",
    "WageReport",
    "MileageReport",
]
