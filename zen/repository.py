"""SQLite storage for jobs."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timezone
from typing import Protocol

from zen.types import CreateJobRequest, Job

_SCHEMA = """
CREATE TABLE IF NOT EXISTS jobs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT,
    python_file_path TEXT NOT NULL,
    cron_expression TEXT NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT 1,
    timeout_seconds INTEGER,
    max_retries INTEGER,
    created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""

_INSERT = """
INSERT INTO jobs (
    name, description, python_file_path, cron_expression,
    is_active, timeout_seconds, max_retries
) VALUES (?, ?, ?, ?, ?, ?, ?)
"""

_SELECT = """
SELECT id, name, description, python_file_path, cron_expression,
       is_active, timeout_seconds, max_retries, created_at
FROM jobs WHERE id = ?
"""


class JobNotFoundError(LookupError):
    """No job has the requested id."""

    def __init__(self, job_id: int) -> None:
        super().__init__(f"job {job_id} not found")
        self.job_id = job_id


class JobRepositoryProtocol(Protocol):
    """What the service layer needs from job storage."""

    def create_job(self, request: CreateJobRequest) -> Job: ...

    def get_job(self, job_id: int) -> Job: ...


def _parse_timestamp(value: str | datetime) -> datetime:
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _row_to_job(row: tuple) -> Job:
    (job_id, name, description, path, cron, active, timeout, retries, created) = row
    return Job(
        id=job_id,
        name=name,
        description=description,
        python_file_path=path,
        cron_expression=cron,
        is_active=bool(active),
        timeout_seconds=timeout,
        max_retries=retries,
        created_at=_parse_timestamp(created),
    )


class JobRepository:
    """Stores jobs in the ``jobs`` table of a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._lock = threading.Lock()

    def ensure_schema(self) -> None:
        """Create the ``jobs`` table if it does not exist."""
        with self._lock, self._connection:
            self._connection.execute(_SCHEMA)

    def create_job(self, request: CreateJobRequest) -> Job:
        with self._lock:
            with self._connection:
                cursor = self._connection.execute(
                    _INSERT,
                    (
                        request.name,
                        request.description,
                        request.python_file_path,
                        request.cron_expression,
                        request.is_active,
                        request.timeout_seconds,
                        request.max_retries,
                    ),
                )
            return self._fetch(cursor.lastrowid)

    def get_job(self, job_id: int) -> Job:
        with self._lock:
            return self._fetch(job_id)

    def _fetch(self, job_id: int) -> Job:
        row = self._connection.execute(_SELECT, (job_id,)).fetchone()
        if row is None:
            raise JobNotFoundError(job_id)
        return _row_to_job(row)