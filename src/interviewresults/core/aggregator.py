"\"\"\"Grouping of completed interviews per (candidate, job).\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from ..schemas import FocusAreaResponse, InterviewRecord
from .results import AttributedResponse, CandidateJobResult


@dataclass
class AggregatorConfig:
    """Grouping and ingestion options."""

    normalize_email: bool = False
    zero_means_unrated: bool = False


@dataclass
class _Group:
    email: str
    name: str
    job_id: str
    job_title: str
    interviews: list[InterviewRecord]
    responses: dict[str, list[AttributedResponse]]


class Aggregator:
    """Merge completed interview records into one result per candidate and job.

    Non-completed records are dropped. Responses are appended per title in the
    order interviews are processed; nothing is overwritten, so two interviews
    rating the same area yield two entries. Titles are kept verbatim.
    """

    def __init__(self, *, config: AggregatorConfig | None = None) -> None:
        self._config = config or AggregatorConfig()

    def group_key(self, interview: InterviewRecord) -> tuple[str, str]:
        email = interview.candidate.email
        if self._config.normalize_email:
            email = email.strip().lower()
        return email, interview.job.job_id

    def aggregate(self, interviews: Iterable[InterviewRecord]) -> list[CandidateJobResult]:
        groups: dict[tuple[str, str], _Group] = {}

        for interview in interviews:
            if not interview.is_completed:
                continue
            key = self.group_key(interview)
            group = groups.get(key)
            if group is None:
                group = _Group(
                    email=key[0],
                    name=interview.candidate.name,
                    job_id=interview.job.job_id,
                    job_title=interview.job.title,
                    interviews=[],
                    responses={},
                )
                groups[key] = group

            group.interviews.append(interview)
            for response in interview.responses:
                group.responses.setdefault(response.title, []).append(
                    self._attribute(response, interview)
                )

        return [
            CandidateJobResult(
                candidate_email=group.email,
                candidate_name=group.name,
                job_id=group.job_id,
                job_title=group.job_title,
                interviews=tuple(group.interviews),
                responses_by_focus_area=MappingProxyType(
                    {title: tuple(entries) for title, entries in group.responses.items()}
                ),
            )
            for group in groups.values()
        ]

    def _attribute(
        self,
        response: FocusAreaResponse,
        interview: InterviewRecord,
    ) -> AttributedResponse:
        rating = response.rating
        if self._config.zero_means_unrated and rating == 0:
            rating = None
        return AttributedResponse(
            title=response.title,
            rating=rating,
            feedback=response.feedback,
            interview_id=interview.interview_id,
            template_name=interview.template_name,
            interviewer_name=interview.interviewer_name,
        )
