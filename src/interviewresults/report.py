"\"\"\"JSON report assembly for a viewed snapshot.\"\"\""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

import pendulum

from . import __version__
from .core import CandidateJobResult, ResultSnapshot, rating_band, summarize_focus_area
from .schemas import ViewState


def build_report(
    snapshot: ResultSnapshot,
    view: ViewState,
    results: Sequence[CandidateJobResult],
    columns: Sequence[str],
) -> dict[str, Any]:
    """Render the viewed results with one cell per projected column."""
    metadata = {
        "timestamp": pendulum.now().to_iso8601_string(),
        "snapshot_generated_at": snapshot.generated_at.to_iso8601_string(),
        "app_version": __version__,
        "total_results": len(snapshot.results),
        "visible_results": len(results),
        "partial": snapshot.partial,
        "failed_jobs": dict(snapshot.failed_jobs),
        "view": view.model_dump(mode="json"),
    }
    return {
        "metadata": metadata,
        "jobs": [job.model_dump(mode="json") for job in snapshot.jobs],
        "columns": list(columns),
        "results": [serialize_result(result, columns) for result in results],
    }


def serialize_result(result: CandidateJobResult, columns: Sequence[str]) -> dict[str, Any]:
    cells: dict[str, Any] = {}
    for title in columns:
        summary = summarize_focus_area(result, title)
        cells[title] = {
            "area_score": result.area_scores.get(title),
            "total_responses": summary.total_responses,
            "rated_average": summary.rated_average,
            "with_feedback": summary.with_feedback,
            "band": summary.band.value,
            "responses": [
                {
                    "rating": response.rating,
                    "band": rating_band(response.rating).value,
                    "feedback": response.feedback,
                    "interview_id": response.interview_id,
                    "template_name": response.template_name,
                    "interviewer_name": response.interviewer_name,
                }
                for response in summary.responses
            ],
        }

    return {
        "candidate_name": result.candidate_name,
        "candidate_email": result.candidate_email,
        "job_id": result.job_id,
        "job_title": result.job_title,
        "overall_rating": result.overall_rating,
        "overall_band": rating_band(result.overall_rating).value,
        "latest_completed_at": _isoformat(result.latest_completed_at),
        "interviews": [
            {
                "interview_id": interview.interview_id,
                "template_name": interview.template_name,
                "interviewer_name": interview.interviewer_name,
                "completed_at": _isoformat(interview.completed_at),
            }
            for interview in result.interviews
        ],
        "area_scores": dict(result.area_scores),
        "focus_areas": cells,
        "unassociated_focus_areas": [
            title for title in result.responses_by_focus_area if title not in result.area_scores
        ],
    }


def _isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    return pendulum.instance(value).to_iso8601_string()


class OutputWriter:
    """Persist rendered reports."""

    def write(self, path: Path, payload: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
