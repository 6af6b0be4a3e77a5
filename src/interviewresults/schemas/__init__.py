"\"\"\"Pydantic schema definitions for interview results.\"\"\""

from __future__ import annotations

from .interview import (
    CandidateIdentity,
    FocusAreaResponse,
    InterviewRecord,
    InterviewStatus,
    JobReference,
)
from .job import JobSummary
from .view import ResultFilter, SortKey, SortSpec, ViewState

__all__ = [
    "CandidateIdentity",
    "FocusAreaResponse",
    "InterviewRecord",
    "InterviewStatus",
    "JobReference",
    "JobSummary",
    "ResultFilter",
    "SortKey",
    "SortSpec",
    "ViewState",
]
