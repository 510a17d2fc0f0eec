"""Job records and the request and response shapes of the jobs API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Job:
    """A stored job row; nullable columns are ``None`` when unset."""

    id: int
    name: str
    description: str | None
    python_file_path: str
    cron_expression: str
    is_active: bool
    timeout_seconds: int | None
    max_retries: int | None
    created_at: datetime


# Normalised JSON key -> (field name, expected type).
_REQUEST_FIELDS: dict[str, tuple[str, type]] = {
    "name": ("name", str),
    "description": ("description", str),
    "pythonfilepath": ("python_file_path", str),
    "cronexpression": ("cron_expression", str),
    "isactive": ("is_active", bool),
    "timeoutseconds": ("timeout_seconds", int),
    "maxretries": ("max_retries", int),
}


def _coerce(field: str, kind: type, value: Any) -> Any:
    if kind is str:
        if not isinstance(value, str):
            raise ValueError(f"field {field!r} must be a string")
        return value
    if kind is bool:
        if not isinstance(value, bool):
            raise ValueError(f"field {field!r} must be a boolean")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {field!r} must be an integer")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"field {field!r} is out of range")
    return value


def _format_time(value: datetime) -> str:
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()


@dataclass
class CreateJobRequest:
    """The body of a job creation request."""

    name: str = ""
    description: str = ""
    python_file_path: str = ""
    cron_expression: str = ""
    is_active: bool = False
    timeout_seconds: int = 0
    max_retries: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> CreateJobRequest:
        """Build a request from decoded JSON.

        Keys match field names case-insensitively (``PythonFilePath``,
        ``python_file_path``); unknown keys and nulls are ignored and missing
        fields keep their zero values. Raises ``ValueError`` on bad input.
        """
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")
        values: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str) or value is None:
                continue
            spec = _REQUEST_FIELDS.get(key.replace("_", "").casefold())
            if spec is None:
                continue
            field, kind = spec
            values[field] = _coerce(field, kind, value)
        return cls(**values)


@dataclass(frozen=True)
class CreateJobResponse:
    """What the API returns after a job is created."""

    id: int
    name: str
    description: str
    created_at: datetime

    @classmethod
    def from_job(cls, job: Job) -> CreateJobResponse:
        return cls(
            id=job.id,
            name=job.name,
            description=job.description or "",
            created_at=job.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": _format_time(self.created_at),
        }


@dataclass(frozen=True)
class GetJobResponse:
    """What the API returns for a single job."""

    id: int
    name: str
    description: str
    python_file_path: str
    cron_expression: str
    is_active: bool
    timeout_seconds: int
    max_retries: int
    created_at: datetime

    @classmethod
    def from_job(cls, job: Job) -> GetJobResponse:
        return cls(
            id=job.id,
            name=job.name,
            description=job.description or "",
            python_file_path=job.python_file_path,
            cron_expression=job.cron_expression,
            is_active=job.is_active,
            timeout_seconds=job.timeout_seconds or 0,
            max_retries=job.max_retries or 0,
            created_at=job.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "python_file_path": self.python_file_path,
            "cron_expression": self.cron_expression,
            "is_active": self.is_active,
            "timeout_seconds": self.timeout_seconds,
            "max_retries": self.max_retries,
            "created_at": _format_time(self.created_at),
        }