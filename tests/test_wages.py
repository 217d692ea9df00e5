import pytest

from metermate.services.wages import build_mileage_report, build_wage_report, compute_wage


def test_compute_wage_with_default_rates():
    result = compute_wage(100, 20)

    assert result.base_wage == 50
    assert result.allowance == 20
    assert result.total_wage == 70
    assert result.average_distance_per_job == 5
    assert result.rate_per_distance_unit == 0.50
    assert result.allowance_per_job == 1.00


def test_compute_wage_custom_rates_are_not_rounded():
    result = compute_wage(10.333, 3, 0.45, 1.25)

    assert result.base_wage == pytest.approx(10.333 * 0.45)
    assert result.allowance == 3.75
    assert result.total_wage == pytest.approx(10.333 * 0.45 + 3.75)
    assert result.average_distance_per_job == pytest.approx(10.333 / 3)


@pytest.mark.parametrize("distance", [0, 12.5, 1000])
def test_zero_jobs_average_is_zero(distance):
    result = compute_wage(distance, 0)

    assert result.average_distance_per_job == 0
    assert result.allowance == 0


def test_compute_wage_defaults_to_nothing():
    result = compute_wage()

    assert result.total_wage == 0
    assert result.average_distance_per_job == 0


def _job(worker, status="completed", distance=None, job_id=None):
    job = {"assignedTo": worker, "status": status}
    if distance is not None:
        job["distanceTraveled"] = distance
    if job_id is not None:
        job["_id"] = job_id
    return job


def test_wage_report_groups_by_worker():
    jobs = [
        _job("u1", distance=10, job_id="j1"),
        _job({"_id": "u2", "firstName": "Sam"}, distance=4, job_id="j2"),
        _job("u1", status="pending", distance=99, job_id="j3"),
        _job("u1", distance=6, job_id="j4"),
        _job("u2", distance=-3, job_id="j5"),
        {"status": "completed", "distanceTraveled": 50},
    ]

    report = build_wage_report(jobs, rate_per_mile=0.5, fuel_allowance_per_job=1.0)

    assert [worker.worker_id for worker in report.workers] == ["u1", "u2"]
    first, second = report.workers
    assert first.total_jobs == 3
    assert first.wage.completed_jobs == 2
    assert first.wage.total_distance == 16
    assert first.wage.base_wage == 8
    assert first.wage.total_wage == 10
    assert first.wage.average_distance_per_job == 8
    assert second.wage.completed_jobs == 2
    assert second.wage.total_distance == 4

    assert report.total_users == 2
    assert report.total_jobs == 5
    assert report.total_completed_jobs == 4
    assert report.total_distance == 20
    assert report.total_base_wage == 10
    assert report.total_fuel_allowance == 4
    assert report.total_wage == 14
    assert report.rate_per_mile == 0.5


def test_wage_report_empty():
    report = build_wage_report([])

    assert report.workers == []
    assert report.total_wage == 0
    assert report.fuel_allowance_per_job == 1.00


def test_mileage_report():
    jobs = [
        _job("u1", distance=12, job_id="a"),
        _job("u1", status="in_progress", job_id="b"),
        _job("u2", job_id="c"),
        "not a job",
    ]

    report = build_mileage_report(jobs)

    assert report.total_users == 2
    assert report.total_jobs == 3
    assert report.total_completed_jobs == 2
    assert report.total_distance == 12
    first, second = report.workers
    assert first.job_ids == ["a", "b"]
    assert first.average_distance_per_job == 12
    assert second.completed_jobs == 1
    assert second.average_distance_per_job == 0
