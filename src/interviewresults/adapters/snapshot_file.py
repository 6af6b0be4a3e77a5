"\"\"\"File-backed collaborators reading an exported ATS snapshot.\"\"\""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import FetchFailure, FocusAreaFetchError
from ..schemas import InterviewRecord, JobSummary
from ..schemas.config import Scope
from .ats import AtsPayloadAdapter


class SnapshotFileCollaborators:
    """Serve interviews, jobs and focus areas from a JSON export.

    Expected layout::

        {
          "interviews": [<ATS interview DTO>, ...],
          "assigned_by_me": [<interview id>, ...],
          "jobs": [{"id": 1, "title": "..."}, ...],
          "focus_areas": {"1": ["Coding", ...], ...}
        }

    A job listed in ``jobs`` but missing from ``focus_areas`` makes
    ``get_focus_areas`` fail for that job, the same way an unreachable
    registry would.
    """

    def __init__(self, path: Path, *, adapter: AtsPayloadAdapter | None = None) -> None:
        self._path = Path(path)
        self._adapter = adapter or AtsPayloadAdapter()
        self._data: dict[str, Any] | None = None

    def get_completed_interviews(self, scope: Scope = "all") -> list[InterviewRecord]:
        data = self._load("get_completed_interviews")
        raw = data.get("interviews") or []
        try:
            if scope == "assigned_by_current_user":
                allowed = {str(item) for item in data.get("assigned_by_me") or []}
                raw = [item for item in raw if str(item.get("id")) in allowed]
            return self._adapter.parse_interviews(raw)
        except (ValueError, TypeError, AttributeError) as exc:
            raise FetchFailure("get_completed_interviews", str(exc)) from exc

    def list_jobs(self) -> list[JobSummary]:
        data = self._load("list_jobs")
        try:
            return [self._adapter.parse_job(item) for item in data.get("jobs") or []]
        except (ValueError, TypeError, AttributeError) as exc:
            raise FetchFailure("list_jobs", str(exc)) from exc

    def get_focus_areas(self, job_id: str) -> list[str]:
        data = self._load("get_focus_areas")
        focus_areas = data.get("focus_areas") or {}
        key = str(job_id)
        if key not in focus_areas:
            raise FocusAreaFetchError(key, "no focus areas recorded for job")
        try:
            return self._adapter.parse_focus_areas(focus_areas[key])
        except ValueError as exc:
            raise FocusAreaFetchError(key, str(exc)) from exc

    def _load(self, operation: str) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError as exc:
            raise FetchFailure(operation, f"snapshot not found: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise FetchFailure(operation, f"invalid snapshot JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise FetchFailure(operation, "snapshot must be a JSON object")
        self._data = data
        return data
