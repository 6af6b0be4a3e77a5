from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JobSummary(BaseModel):
    """Entry returned by the job directory."""

    job_id: str
    title: str = ""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)
