from __future__ import annotations

from fractions import Fraction
from typing import Any

import pytest

from interviewresults.core import Aggregator, CandidateJobResult, Scorer, round_half_up
from interviewresults.schemas import InterviewRecord


def build_result(*response_sets: list[dict[str, Any]]) -> CandidateJobResult:
    interviews = [
        InterviewRecord.model_validate(
            {
                "interview_id": f"I-{idx}",
                "candidate": {"name": "Candidate A", "email": "a@example.com"},
                "job": {"job_id": "J1", "title": "Engineer"},
                "status": "COMPLETED",
                "completed_at": "2024-05-01T10:00:00Z",
                "responses": responses,
            }
        )
        for idx, responses in enumerate(response_sets, start=1)
    ]
    (result,) = Aggregator().aggregate(interviews)
    return result


def test_missing_canonical_area_scores_zero():
    result = build_result([{"title": "Coding", "rating": 80}])

    card = Scorer().score(result, ["Coding", "Communication"])

    assert card.area_scores == {"Coding": 80.0, "Communication": 0.0}
    assert card.overall_rating == 40


def test_multiple_interviews_average_per_area():
    result = build_result(
        [{"title": "Coding", "rating": 80}],
        [{"title": "Coding", "rating": 60}],
    )

    card = Scorer().score(result, ["Coding", "Communication"])

    assert card.area_scores["Coding"] == pytest.approx(70.0)
    assert card.overall_rating == 35


def test_zero_and_unrated_responses_count_in_mean():
    result = build_result(
        [{"title": "Coding", "rating": 90}],
        [{"title": "Coding", "rating": 0}],
        [{"title": "Coding", "rating": None}],
    )

    card = Scorer().score(result, ["Coding"])

    assert card.area_scores["Coding"] == pytest.approx(30.0)
    assert card.overall_rating == 30


def test_unassociated_titles_never_change_overall_rating():
    base = build_result([{"title": "Coding", "rating": 70}])
    extended = build_result(
        [{"title": "Coding", "rating": 70}, {"title": "Leadership", "rating": 100}]
    )

    base_card = Scorer().score(base, ["Coding", "Design"])
    extended_card = Scorer().score(extended, ["Coding", "Design"])

    assert base_card.overall_rating == extended_card.overall_rating == 35
    assert "Leadership" not in extended_card.area_scores
    assert extended_card.unassociated_titles == ["Leadership"]
    assert "Leadership" in extended.responses_by_focus_area


def test_empty_canonical_set_scores_zero():
    result = build_result([{"title": "Coding", "rating": 100}])

    card = Scorer().score(result, [])

    assert card.area_scores == {}
    assert card.overall_rating == 0


def test_area_scores_follow_canonical_order_and_deduplicate():
    result = build_result(
        [{"title": "Communication", "rating": 50}, {"title": "Coding", "rating": 40}]
    )

    card = Scorer().score(result, ["Coding", "Communication", "Coding"])

    assert list(card.area_scores) == ["Coding", "Communication"]
    assert card.overall_rating == 45


def test_overall_rating_rounds_half_up():
    result = build_result(
        [{"title": "A", "rating": 50}, {"title": "B", "rating": 51}]
    )

    card = Scorer().score(result, ["A", "B"])

    assert card.overall_rating == 51


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, 1), (1.49, 1), (34.5, 35), (99.5, 100), (0.0, 0)],
)
def test_round_half_up(value: float, expected: int):
    assert round_half_up(value) == expected


def test_round_half_up_exact_fraction():
    assert round_half_up(Fraction(79, 2)) == 40
    assert round_half_up(Fraction(157, 4)) == 39


def test_overall_rating_rounds_exact_half_mean_up():
    # (36.5 + 50.666.. + 31.333..) / 3 is exactly 39.5
    result = build_result(
        [{"title": "A", "rating": 36}, {"title": "B", "rating": 50}, {"title": "C", "rating": 31}],
        [{"title": "A", "rating": 37}, {"title": "B", "rating": 51}, {"title": "C", "rating": 31}],
        [{"title": "B", "rating": 51}, {"title": "C", "rating": 32}],
    )

    card = Scorer().score(result, ["A", "B", "C"])

    assert card.area_scores["A"] == pytest.approx(36.5)
    assert isinstance(card.area_scores["B"], float)
    assert card.overall_rating == 40


def test_overall_rating_is_monotonic_in_area_score():
    ratings = [0, 10, 35, 50, 99, 100]
    overall = [
        Scorer()
        .score(
            build_result([{"title": "Coding", "rating": r}, {"title": "Design", "rating": 40}]),
            ["Coding", "Design", "Testing"],
        )
        .overall_rating
        for r in ratings
    ]

    assert overall == sorted(overall)
    assert all(0 <= value <= 100 for value in overall)
