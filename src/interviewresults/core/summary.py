"\"\"\"Detail summaries for a single focus area of a result.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from .results import AttributedResponse, CandidateJobResult
from .scorer import round_half_up

EXCELLENT_THRESHOLD = 70
GOOD_THRESHOLD = 50


class RatingBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    NOT_RATED = "not_rated"


def rating_band(rating: float | None) -> RatingBand:
    if rating is None:
        return RatingBand.NOT_RATED
    if rating >= EXCELLENT_THRESHOLD:
        return RatingBand.EXCELLENT
    if rating >= GOOD_THRESHOLD:
        return RatingBand.GOOD
    return RatingBand.NEEDS_IMPROVEMENT


@dataclass(slots=True)
class FocusAreaSummary:
    """What a reviewer sees when expanding one focus-area cell."""

    focus_area: str
    candidate_name: str
    job_title: str
    responses: list[AttributedResponse]
    total_responses: int
    rated_average: int
    with_feedback: int

    @property
    def band(self) -> RatingBand:
        if not any(response.rating is not None for response in self.responses):
            return RatingBand.NOT_RATED
        return rating_band(self.rated_average)


def summarize_focus_area(result: CandidateJobResult, title: str) -> FocusAreaSummary:
    """Summarize the responses recorded under ``title``.

    The average here covers rated responses only and is for display; the
    area score used for ranking lives in ``result.area_scores``.
    """
    responses = result.responses_for(title)
    rated = [response.rating for response in responses if response.rating is not None]
    average = round_half_up(Fraction(sum(rated), len(rated))) if rated else 0
    with_feedback = sum(
        1 for response in responses if response.feedback and response.feedback.strip()
    )
    return FocusAreaSummary(
        focus_area=title,
        candidate_name=result.candidate_name,
        job_title=result.job_title,
        responses=responses,
        total_responses=len(responses),
        rated_average=average,
        with_feedback=with_feedback,
    )
