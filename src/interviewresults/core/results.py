"\"\"\"Computed result types.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

from ..schemas import InterviewRecord

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(slots=True, frozen=True)
class AttributedResponse:
    """A focus-area response tagged with the interview it came from."""

    title: str
    rating: int | None
    feedback: str | None
    interview_id: str
    template_name: str
    interviewer_name: str


@dataclass(slots=True, frozen=True)
class CandidateJobResult:
    """All completed interviews of one candidate for one job, merged."""

    candidate_email: str
    candidate_name: str
    job_id: str
    job_title: str
    interviews: tuple[InterviewRecord, ...]
    responses_by_focus_area: Mapping[str, tuple[AttributedResponse, ...]]
    area_scores: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    overall_rating: int = 0

    @property
    def key(self) -> tuple[str, str]:
        return self.candidate_email, self.job_id

    @property
    def template_names(self) -> list[str]:
        return [interview.template_name for interview in self.interviews]

    @property
    def interviewer_names(self) -> list[str]:
        return [interview.interviewer_name for interview in self.interviews]

    @property
    def latest_completed_at(self) -> datetime | None:
        stamps = [
            as_utc(interview.completed_at)
            for interview in self.interviews
            if interview.completed_at is not None
        ]
        return max(stamps) if stamps else None

    def responses_for(self, title: str) -> list[AttributedResponse]:
        return list(self.responses_by_focus_area.get(title, ()))


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so mixed inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def completion_sort_value(result: CandidateJobResult) -> datetime:
    return result.latest_completed_at or _EPOCH
