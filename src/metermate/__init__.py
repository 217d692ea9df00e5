"""MeterMate field-service rules engine."""
