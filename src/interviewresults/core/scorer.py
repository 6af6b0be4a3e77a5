"\"\"\"Per-focus-area and overall scoring restricted to a job's focus areas.\"\"\""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from fractions import Fraction
from numbers import Rational
from typing import Sequence

from .results import CandidateJobResult

MAX_RATING = 100


@dataclass(slots=True)
class ScoreCard:
    """Scores for one result, in canonical focus-area order."""

    area_scores: dict[str, float]
    overall_rating: int
    unassociated_titles: list[str] = field(default_factory=list)


def round_half_up(value: float | Rational) -> int:
    """Round halves towards +inf; pass a ``Fraction`` to avoid float drift at .5."""
    if isinstance(value, Rational):
        return math.floor(value + Fraction(1, 2))
    return int(math.floor(value + 0.5))


def canonical_titles(focus_areas: Sequence[str]) -> list[str]:
    """Deduplicate while keeping the registry's order."""
    return list(dict.fromkeys(focus_areas))


class Scorer:
    """Score a merged result against its job's canonical focus areas.

    Every canonical area gets a score: the mean of all its responses, unrated
    ones counting as 0, or 0 when no response carries the title. Titles outside
    the canonical set never contribute. The overall rating is the half-up
    rounded mean of the area scores, 0 for an empty canonical set.
    """

    def score(self, result: CandidateJobResult, focus_areas: Sequence[str]) -> ScoreCard:
        titles = canonical_titles(focus_areas)
        exact_scores = {
            title: self._area_score(result, title)
            for title in titles
        }
        area_scores = {title: float(value) for title, value in exact_scores.items()}

        if exact_scores:
            mean = sum(exact_scores.values(), Fraction(0)) / len(exact_scores)
            overall = max(0, min(MAX_RATING, round_half_up(mean)))
        else:
            overall = 0

        canonical = set(titles)
        unassociated = [
            title for title in result.responses_by_focus_area if title not in canonical
        ]
        return ScoreCard(
            area_scores=area_scores,
            overall_rating=overall,
            unassociated_titles=unassociated,
        )

    @staticmethod
    def _area_score(result: CandidateJobResult, title: str) -> Fraction:
        responses = result.responses_by_focus_area.get(title) or ()
        if not responses:
            return Fraction(0)
        return Fraction(sum(response.rating or 0 for response in responses), len(responses))
