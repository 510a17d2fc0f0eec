"""Business operations on jobs."""

from __future__ import annotations

from zen.repository import JobRepositoryProtocol
from zen.types import CreateJobRequest, CreateJobResponse, GetJobResponse


class JobService:
    """Creates and looks up jobs, shaping them for the API."""

    def __init__(self, repository: JobRepositoryProtocol) -> None:
        self._repository = repository

    def create_job(self, request: CreateJobRequest) -> CreateJobResponse:
        return CreateJobResponse.from_job(self._repository.create_job(request))

    def get_job(self, job_id: int) -> GetJobResponse:
        return GetJobResponse.from_job(self._repository.get_job(job_id))