import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from zen.repository import JobNotFoundError, JobRepository
from zen.types import CreateJobRequest


@pytest.fixture
def repo():
    connection = sqlite3.connect(":memory:", check_same_thread=False)
    repository = JobRepository(connection)
    repository.ensure_schema()
    yield repository
    connection.close()


def sample_request(**overrides):
    fields = dict(
        name="backup",
        description="nightly",
        python_file_path="/scripts/backup.py",
        cron_expression="0 2 * * *",
        is_active=True,
        timeout_seconds=300,
        max_retries=3,
    )
    fields.update(overrides)
    return CreateJobRequest(**fields)


def test_create_job_stores_all_fields(repo):
    request = sample_request()
    job = repo.create_job(request)
    assert job.name == request.name
    assert job.description == request.description
    assert job.python_file_path == request.python_file_path
    assert job.cron_expression == request.cron_expression
    assert job.is_active is True
    assert job.timeout_seconds == request.timeout_seconds
    assert job.max_retries == request.max_retries


def test_get_job_returns_created_job(repo):
    created = repo.create_job(sample_request())
    assert repo.get_job(created.id) == created


def test_ids_increase(repo):
    first = repo.create_job(sample_request(name="a"))
    second = repo.create_job(sample_request(name="b"))
    assert second.id > first.id
    assert repo.get_job(second.id).name == "b"


def test_empty_description_is_stored_not_null(repo):
    job = repo.create_job(sample_request(description=""))
    assert repo.get_job(job.id).description == ""


def test_inactive_job_round_trip(repo):
    job = repo.create_job(sample_request(is_active=False, timeout_seconds=0))
    fetched = repo.get_job(job.id)
    assert fetched.is_active is False
    assert fetched.timeout_seconds == 0


def test_created_at_is_recent_utc(repo):
    job = repo.create_job(sample_request())
    assert job.created_at.utcoffset() == timedelta(0)
    assert abs(datetime.now(timezone.utc) - job.created_at) < timedelta(minutes=5)


def test_missing_job_raises(repo):
    with pytest.raises(JobNotFoundError) as info:
        repo.get_job(12345)
    assert info.value.job_id == 12345
    assert isinstance(info.value, LookupError)


def test_ensure_schema_is_idempotent(repo):
    repo.ensure_schema()
    job = repo.create_job(sample_request())
    assert repo.get_job(job.id).name == "backup"


def test_created_job_is_committed(tmp_path):
    path = tmp_path / "jobs.db"
    connection = sqlite3.connect(path)
    repository = JobRepository(connection)
    repository.ensure_schema()
    job = repository.create_job(sample_request())
    connection.close()

    other = JobRepository(sqlite3.connect(path))
    assert other.get_job(job.id) == job