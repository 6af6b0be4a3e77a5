"\"\"\"Core aggregation and scoring components.\"\"\""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .aggregator import Aggregator, AggregatorConfig
from .columns import project_columns
from .engine import ResultSnapshot, ResultsEngine
from .index import apply_view, filter_results, matches_filter, sort_results
from .results import AttributedResponse, CandidateJobResult
from .scorer import ScoreCard, Scorer, round_half_up
from .summary import FocusAreaSummary, RatingBand, rating_band, summarize_focus_area

__all__ = [
    "Aggregator",
    "AggregatorConfig",
    "AttributedResponse",
    "CandidateJobResult",
    "FocusAreaSummary",
    "RatingBand",
    "ResultSnapshot",
    "ResultsEngine",
    "ScoreCard",
    "Scorer",
    "apply_view",
    "filter_results",
    "matches_filter",
    "project_columns",
    "rating_band",
    "round_half_up",
    "sort_results",
    "summarize_focus_area",
]
