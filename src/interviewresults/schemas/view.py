"\"\"\"View inputs for filtering and ordering computed results.\"\"\""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SortKey = Literal["candidate_name", "job_title", "overall_rating", "latest_completed_at"]


class ResultFilter(BaseModel):
    """Active filters; unset fields pass everything through."""

    job_id: str | None = None
    status: str | None = None
    search: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)


class SortSpec(BaseModel):
    key: SortKey = "latest_completed_at"
    descending: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)


class ViewState(BaseModel):
    """Filter and sort passed explicitly into ``apply_view``."""

    filter: ResultFilter = Field(default_factory=ResultFilter)
    sort: SortSpec = Field(default_factory=SortSpec)

    model_config = ConfigDict(extra="forbid", frozen=True)
