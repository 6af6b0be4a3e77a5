"\"\"\"Results engine facade consumed by the presentation layer.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

import pendulum
import structlog

from ..schemas import InterviewRecord, JobSummary, ViewState
from . import columns, index
from .aggregator import Aggregator
from .results import CandidateJobResult
from .scorer import Scorer, canonical_titles


@dataclass(slots=True, frozen=True)
class ResultSnapshot:
    """Immutable output of one compute pass; a refresh replaces it wholesale."""

    results: tuple[CandidateJobResult, ...]
    focus_area_sets: Mapping[str, tuple[str, ...]]
    failed_jobs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    jobs: tuple[JobSummary, ...] = ()
    generated_at: pendulum.DateTime = field(default_factory=pendulum.now)

    @property
    def partial(self) -> bool:
        return bool(self.failed_jobs)


class ResultsEngine:
    """Aggregate, score, filter and project interview results."""

    def __init__(
        self,
        *,
        aggregator: Aggregator | None = None,
        scorer: Scorer | None = None,
    ) -> None:
        self._aggregator = aggregator or Aggregator()
        self._scorer = scorer or Scorer()
        self._logger = structlog.get_logger(__name__)

    def compute(
        self,
        interviews: Iterable[InterviewRecord],
        focus_area_sets: Mapping[str, Sequence[str]],
        *,
        failed_jobs: Mapping[str, str] | None = None,
        jobs: Iterable[JobSummary] = (),
    ) -> ResultSnapshot:
        """Group completed interviews and score each group against its job.

        Jobs without an entry in ``focus_area_sets`` are scored against an
        empty set, which forces their overall rating to 0.
        """
        canonical = {
            str(job_id): tuple(canonical_titles(titles))
            for job_id, titles in focus_area_sets.items()
        }
        grouped = self._aggregator.aggregate(interviews)
        self._logger.debug("aggregator.grouped", groups=len(grouped))

        scored: list[CandidateJobResult] = []
        for result in grouped:
            card = self._scorer.score(result, canonical.get(result.job_id, ()))
            if card.unassociated_titles:
                self._logger.debug(
                    "scoring.unassociated_focus_areas",
                    candidate_email=result.candidate_email,
                    job_id=result.job_id,
                    titles=card.unassociated_titles,
                )
            scored.append(
                replace(
                    result,
                    area_scores=MappingProxyType(dict(card.area_scores)),
                    overall_rating=card.overall_rating,
                )
            )

        return ResultSnapshot(
            results=tuple(scored),
            focus_area_sets=MappingProxyType(canonical),
            failed_jobs=MappingProxyType(dict(failed_jobs or {})),
            jobs=tuple(self.list_job_options(jobs)),
        )

    def apply_view(
        self,
        results: Iterable[CandidateJobResult],
        view: ViewState,
    ) -> list[CandidateJobResult]:
        return index.apply_view(results, view)

    def project_columns(
        self,
        filtered_results: Iterable[CandidateJobResult],
        focus_area_sets: Mapping[str, Sequence[str]],
    ) -> list[str]:
        return columns.project_columns(filtered_results, focus_area_sets)

    @staticmethod
    def list_job_options(jobs: Iterable[JobSummary]) -> list[JobSummary]:
        """Jobs for the filter selector, ordered by title."""
        return sorted(jobs, key=lambda job: (job.title.lower(), job.job_id))
