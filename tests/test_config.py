import pytest
from pydantic import ValidationError

from metermate.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("METERMATE_GEOFENCE_RADIUS_METERS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.geofence_radius_meters == 10
    assert settings.rate_per_mile == 0.50
    assert settings.fuel_allowance_per_job == 1.00
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("METERMATE_GEOFENCE_RADIUS_METERS", "25")
    monkeypatch.setenv("METERMATE_RATE_PER_MILE", "0.45")
    monkeypatch.setenv("METERMATE_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.geofence_radius_meters == 25
    assert settings.rate_per_mile == 0.45
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["http://a.test","http://b.test"]', ("http://a.test", "http://b.test")),
        ("http://a.test, http://b.test", ("http://a.test", "http://b.test")),
        ("http://a.test", ("http://a.test",)),
    ],
)
def test_allowed_origins_parsing(monkeypatch: pytest.MonkeyPatch, raw, expected):
    monkeypatch.setenv("METERMATE_FRONTEND_ALLOWED_ORIGINS", raw)

    assert Settings(_env_file=None).frontend_allowed_origins == expected


def test_non_positive_radius_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, geofence_radius_meters=0)


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("METERMATE_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
