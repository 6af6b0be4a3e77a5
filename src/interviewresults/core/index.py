"\"\"\"Filtering, free-text search and sorting over computed results.\"\"\""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..schemas import ResultFilter, SortSpec, ViewState
from .results import CandidateJobResult, completion_sort_value

COMPLETED_STATUS = "completed"


def matches_job(result: CandidateJobResult, job_id: str | None) -> bool:
    return not job_id or result.job_id == job_id


def matches_status(status: str | None) -> bool:
    """Only completed interviews are aggregated, so any other status matches nothing."""
    return not status or status.strip().lower() == COMPLETED_STATUS


def matches_search(result: CandidateJobResult, term: str | None) -> bool:
    if not term:
        return True
    needle = term.lower()
    haystacks = (
        result.candidate_name,
        result.candidate_email,
        result.job_title,
        " ".join(result.template_names),
        " ".join(result.interviewer_names),
    )
    return any(needle in haystack.lower() for haystack in haystacks)


def matches_filter(result: CandidateJobResult, result_filter: ResultFilter) -> bool:
    return (
        matches_job(result, result_filter.job_id)
        and matches_status(result_filter.status)
        and matches_search(result, result_filter.search)
    )


def filter_results(
    results: Iterable[CandidateJobResult],
    result_filter: ResultFilter,
) -> list[CandidateJobResult]:
    return [result for result in results if matches_filter(result, result_filter)]


_SORT_KEYS: dict[str, Callable[[CandidateJobResult], Any]] = {
    "candidate_name": lambda result: result.candidate_name.lower(),
    "job_title": lambda result: result.job_title.lower(),
    "overall_rating": lambda result: result.overall_rating,
    "latest_completed_at": completion_sort_value,
}


def sort_results(
    results: Iterable[CandidateJobResult],
    sort: SortSpec,
) -> list[CandidateJobResult]:
    # sorted() stays stable with reverse=True, so ties keep their input order
    return sorted(results, key=_SORT_KEYS[sort.key], reverse=sort.descending)


def apply_view(
    results: Iterable[CandidateJobResult],
    view: ViewState,
) -> list[CandidateJobResult]:
    """Filter then sort; an empty outcome is a normal state."""
    return sort_results(filter_results(results, view.filter), view.sort)
