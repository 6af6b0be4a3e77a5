"\"\"\"Mapping of ATS REST payloads onto engine schemas.\"\"\""

from __future__ import annotations

import json
from typing import Any

from ..schemas import (
    CandidateIdentity,
    FocusAreaResponse,
    InterviewRecord,
    JobReference,
    JobSummary,
)


class AtsPayloadAdapter:
    """Convert ATS interview and job DTOs (camelCase JSON) into schema models."""

    provider = "ats"

    def parse_interview(self, payload: dict[str, Any] | str | bytes) -> InterviewRecord:
        data = self._load(payload)
        application = data.get("application") or {}

        responses = [
            FocusAreaResponse(
                title=item.get("title") or "",
                feedback=item.get("feedback"),
                rating=item.get("rating"),
            )
            for item in data.get("responses") or []
        ]

        return InterviewRecord(
            interview_id=data.get("id", ""),
            candidate=CandidateIdentity(
                name=application.get("candidateName") or "",
                email=application.get("candidateEmail") or "",
            ),
            job=JobReference(
                job_id=application.get("jobId", ""),
                title=application.get("jobTitle") or "",
            ),
            template_name=data.get("skeletonName") or "",
            interviewer_name=data.get("interviewerName") or "",
            status=data.get("status"),
            completed_at=data.get("completedAt"),
            responses=responses,
        )

    def parse_interviews(self, payload: list[dict[str, Any]]) -> list[InterviewRecord]:
        return [self.parse_interview(item) for item in payload]

    def parse_job(self, payload: dict[str, Any]) -> JobSummary:
        data = self._load(payload)
        return JobSummary(job_id=data.get("id", ""), title=data.get("title") or "")

    @staticmethod
    def parse_focus_areas(payload: Any) -> list[str]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ValueError("Focus-area payload must be a list of titles")
        return [str(title) for title in payload]

    @staticmethod
    def _load(blob: dict[str, Any] | str | bytes) -> dict[str, Any]:
        if isinstance(blob, dict):
            return blob
        if isinstance(blob, bytes):
            blob = blob.decode("utf-8")
        try:
            data = json.loads(blob)
        except json.JSONDecodeError as exc:
            raise ValueError("Invalid ATS payload") from exc
        if not isinstance(data, dict):
            raise ValueError("ATS payload must be a JSON object")
        return data
