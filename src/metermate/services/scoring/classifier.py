"""Classify a job record into its completion outcome.

Job records arrive as loosely typed mappings straight from the document
store, so every accessor here tolerates missing keys, ``None`` and values of
the wrong type. Nothing in this module raises on malformed job data; a record
that carries no usable signal is simply ``INCOMPLETE``.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

from ...models.domain import JobOutcome

LEGACY_READING_FIELDS = ("electric", "gas", "water")

NO_ACCESS_REASONS: tuple[str, ...] = (
    "Property locked - no key access",
    "Dog on property - safety concern",
    "Occupant not home - appointment required",
    "Meter location inaccessible",
    "Property under construction",
    "Hazardous conditions present",
    "Permission denied by occupant",
    "Meter damaged - requires repair first",
)
_NO_ACCESS_REASON_SET = frozenset(NO_ACCESS_REASONS)


def _as_mapping(job: Any) -> Mapping:
    return job if isinstance(job, Mapping) else {}


def _first_item(values: Any) -> tuple[bool, Any]:
    if isinstance(values, (list, tuple)) and values:
        return True, values[0]
    return False, None


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _is_numeric_zero(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value == 0


def has_register_filled(job: Any) -> bool:
    """Return True when the job carries a usable register reading.

    Checked in order: first register value, first register id, then the
    legacy ``meterReadings`` object. A leading register value of 0 is not a
    reading, but a legacy reading of 0 is.
    """

    record = _as_mapping(job)

    present, first_value = _first_item(record.get("registerValues"))
    if present and not _is_blank(first_value) and not _is_numeric_zero(first_value):
        return True

    present, first_id = _first_item(record.get("registerIds"))
    if present and not _is_blank(first_id):
        return True

    readings = record.get("meterReadings")
    if isinstance(readings, Mapping):
        return any(not _is_blank(readings.get(field)) for field in LEGACY_READING_FIELDS)

    return False


def has_no_access_status(job: Any) -> bool:
    record = _as_mapping(job)
    return bool(record.get("customerRead")) or bool(record.get("noAccessReason"))


def is_valid_no_access_reason(reason: Any) -> bool:
    """Exact membership test against the canonical no-access reasons."""

    if not reason or not isinstance(reason, str):
        return False
    return reason.strip() in _NO_ACCESS_REASON_SET


def classify(job: Any) -> JobOutcome:
    if has_register_filled(job):
        return JobOutcome.REGISTER_FILLED
    if has_no_access_status(job):
        return JobOutcome.NO_ACCESS_RECORDED
    return JobOutcome.INCOMPLETE
