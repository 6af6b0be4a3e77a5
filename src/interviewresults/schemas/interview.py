"\"\"\"Interview records consumed by the results engine.\"\"\""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

RATING_MIN = 0
RATING_MAX = 100


class InterviewStatus(str, Enum):
    """Lifecycle state of an interview assignment."""

    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class CandidateIdentity(BaseModel):
    """Candidate name and email as recorded on the application."""

    name: str = ""
    email: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)


class JobReference(BaseModel):
    """Job the interview was held for."""

    job_id: str
    title: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)


class FocusAreaResponse(BaseModel):
    """One interviewer's answer for a focus area.

    ``rating`` is ``None`` when the interviewer left the area unrated. Numeric
    ratings outside 0-100 are clamped rather than rejected.
    """

    title: str
    feedback: str | None = None
    rating: int | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        try:
            numeric = float(value)
        except OverflowError:
            return RATING_MAX if value > 0 else RATING_MIN
        except (TypeError, ValueError):
            return value
        if math.isnan(numeric):
            return None
        if math.isinf(numeric):
            return RATING_MAX if numeric > 0 else RATING_MIN
        return max(RATING_MIN, min(RATING_MAX, round(numeric)))

    @property
    def is_rated(self) -> bool:
        return self.rating is not None


class InterviewRecord(BaseModel):
    """A single interview assignment as exposed by the ATS."""

    interview_id: str
    candidate: CandidateIdentity
    job: JobReference
    template_name: str = ""
    interviewer_name: str = ""
    status: InterviewStatus
    completed_at: datetime | None = None
    responses: list[FocusAreaResponse] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    @field_validator("responses", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_completed(self) -> bool:
        return self.status is InterviewStatus.COMPLETED
