"\"\"\"Collaborator contracts and their concrete adapters.\"\"\""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..schemas import InterviewRecord, JobSummary
from ..schemas.config import Scope
from .ats import AtsPayloadAdapter
from .ats_http import AtsHttpClient
from .snapshot_file import SnapshotFileCollaborators


@runtime_checkable
class InterviewRecordSource(Protocol):
    """Supplies interview records visible to the caller."""

    def get_completed_interviews(self, scope: Scope) -> list[InterviewRecord]:
        """Return interviews for ``scope``; non-completed entries may be included."""


@runtime_checkable
class JobDirectory(Protocol):
    def list_jobs(self) -> list[JobSummary]:
        """Return every job known to the ATS."""


@runtime_checkable
class FocusAreaRegistry(Protocol):
    """Job focus-area registry.

    Implementations raise ``FetchFailure`` when the lookup cannot be answered.
    """

    def get_focus_areas(self, job_id: str) -> Sequence[str]:
        """Return the ordered canonical focus-area titles for ``job_id``."""


__all__ = [
    "AtsHttpClient",
    "AtsPayloadAdapter",
    "FocusAreaRegistry",
    "InterviewRecordSource",
    "JobDirectory",
    "SnapshotFileCollaborators",
]
