"""HTTP handlers and routing for the jobs API."""

from __future__ import annotations

import json
import re

from flask import Flask, jsonify, request

from zen.service import JobService
from zen.types import CreateJobRequest

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_job_id(text: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(text)
    return value


class JobHandler:
    """Request handlers for job endpoints."""

    def __init__(self, job_service: JobService) -> None:
        self._job_service = job_service

    def create_job(self):
        """Create a job from the JSON request body."""
        try:
            payload = json.loads(request.get_data())
            job_request = CreateJobRequest.from_dict(payload)
        except ValueError as exc:
            return jsonify(error=str(exc) or "invalid request body"), 400

        try:
            job = self._job_service.create_job(job_request)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(job.to_dict()), 200

    def get_job(self, job_id: str):
        """Return the job with the given id."""
        try:
            parsed_id = _parse_job_id(job_id)
        except ValueError:
            return jsonify(error="Invalid job ID"), 400

        try:
            job = self._job_service.get_job(parsed_id)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(job.to_dict()), 200


def set_up_router(job_handler: JobHandler) -> Flask:
    """Build the web application with the job routes."""
    router = Flask("zen")
    router.json.sort_keys = False
    router.add_url_rule(
        "/api/jobs/", "create_job", job_handler.create_job, methods=["POST"]
    )
    router.add_url_rule(
        "/api/jobs/<job_id>", "get_job", job_handler.get_job, methods=["GET"]
    )
    return router