"""Wiring of storage, services and routes into one application."""

from __future__ import annotations

import os
import sqlite3

from zen.api import JobHandler, set_up_router
from zen.repository import JobRepository
from zen.service import JobService


def connect_db(db_path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the SQLite database, usable from the server's worker threads."""
    return sqlite3.connect(db_path, check_same_thread=False)


class App:
    """The assembled application: database, services and router."""

    def __init__(self, db_path: str | os.PathLike[str]) -> None:
        self.db: sqlite3.Connection | None = connect_db(db_path)
        repository = JobRepository(self.db)
        repository.ensure_schema()
        self.job_service = JobService(repository)
        self.router = set_up_router(JobHandler(self.job_service))

    def shutdown(self) -> None:
        """Close the database connection; safe to call more than once."""
        if self.db is not None:
            self.db.close()
            self.db = None

    def __enter__(self) -> App:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()