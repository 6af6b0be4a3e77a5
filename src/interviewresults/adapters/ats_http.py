"\"\"\"HTTP client for the ATS REST API.\"\"\""

from __future__ import annotations

import json
from typing import Any
from urllib import error, parse, request

import structlog

from ..errors import FetchFailure, FocusAreaFetchError
from ..schemas import InterviewRecord, JobSummary
from ..schemas.config import Scope
from .ats import AtsPayloadAdapter

_SCOPE_PATHS: dict[str, str] = {
    "all": "/api/interviews/completed",
    "assigned_by_current_user": "/api/interviews/assigned-by-me",
}


class AtsHttpClient:
    """Implements the record source, job directory and focus-area registry over HTTP.

    Every failure surfaces as ``FetchFailure``; retrying is left to the caller.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 10.0,
        adapter: AtsPayloadAdapter | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._adapter = adapter or AtsPayloadAdapter()
        self._logger = structlog.get_logger(__name__)

    def get_completed_interviews(self, scope: Scope = "all") -> list[InterviewRecord]:
        try:
            path = _SCOPE_PATHS[scope]
        except KeyError as exc:
            raise ValueError(f"Unsupported scope: {scope!r}") from exc
        operation = "get_completed_interviews"
        payload = self._get_json(path, operation)
        try:
            return self._adapter.parse_interviews(payload or [])
        except (ValueError, TypeError, AttributeError) as exc:
            raise FetchFailure(operation, f"malformed payload ({exc})") from exc

    def list_jobs(self) -> list[JobSummary]:
        operation = "list_jobs"
        payload = self._get_json("/api/jobs", operation)
        try:
            return [self._adapter.parse_job(item) for item in payload or []]
        except (ValueError, TypeError, AttributeError) as exc:
            raise FetchFailure(operation, f"malformed payload ({exc})") from exc

    def get_focus_areas(self, job_id: str) -> list[str]:
        path = f"/api/skeleton-job-associations/job/{parse.quote(str(job_id), safe='')}/focus-areas"
        try:
            payload = self._get_json(path, "get_focus_areas")
            return self._adapter.parse_focus_areas(payload)
        except FetchFailure as exc:
            raise FocusAreaFetchError(str(job_id), exc.message) from exc
        except ValueError as exc:
            raise FocusAreaFetchError(str(job_id), str(exc)) from exc

    def _get_json(self, path: str, operation: str) -> Any:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        req = request.Request(f"{self._base_url}{path}", headers=headers, method="GET")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
        except error.HTTPError as exc:
            self._logger.warning("api.request_failed", path=path, status=exc.code)
            raise FetchFailure(operation, f"HTTP {exc.code}") from exc
        except (error.URLError, OSError) as exc:
            self._logger.warning("api.request_failed", path=path, error=str(exc))
            raise FetchFailure(operation, str(exc)) from exc

        if not body:
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise FetchFailure(operation, "response is not valid JSON") from exc
