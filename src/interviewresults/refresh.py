"\"\"\"Snapshot refresh: collaborator fan-out followed by a compute pass.\"\"\""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

import structlog

from .adapters import FocusAreaRegistry, InterviewRecordSource, JobDirectory
from .core import ResultSnapshot, ResultsEngine
from .schemas import InterviewRecord
from .schemas.config import Scope


class ResultsRefresher:
    """Fetch everything a compute pass needs, then build a fresh snapshot.

    Record-source and job-directory failures propagate as ``FetchFailure``.
    Focus-area lookups run concurrently, one per job referenced by a completed
    interview; a failed lookup degrades only that job to an empty focus-area
    set and marks the snapshot partial.
    """

    def __init__(
        self,
        *,
        engine: ResultsEngine,
        source: InterviewRecordSource,
        directory: JobDirectory,
        registry: FocusAreaRegistry,
        max_workers: int = 8,
        scope: Scope = "all",
    ) -> None:
        self._engine = engine
        self._source = source
        self._directory = directory
        self._registry = registry
        self._max_workers = max_workers
        self._scope = scope
        self._logger = structlog.get_logger(__name__)

    def refresh(self, *, scope: Scope | None = None) -> ResultSnapshot:
        scope = scope or self._scope
        self._logger.info("refresh.started", scope=scope)

        interviews = self._source.get_completed_interviews(scope)
        jobs = self._directory.list_jobs()
        job_ids = referenced_job_ids(interviews)

        focus_area_sets, failed_jobs = self.fetch_focus_areas(job_ids)
        snapshot = self._engine.compute(
            interviews,
            focus_area_sets,
            failed_jobs=failed_jobs,
            jobs=jobs,
        )

        self._logger.info(
            "refresh.completed",
            scope=scope,
            interviews=len(interviews),
            results=len(snapshot.results),
            jobs=len(job_ids),
            failed_jobs=sorted(failed_jobs),
        )
        return snapshot

    def fetch_focus_areas(
        self,
        job_ids: Sequence[str],
    ) -> tuple[dict[str, list[str]], dict[str, str]]:
        """Look up every job's focus areas concurrently and wait for all of them."""
        focus_area_sets: dict[str, list[str]] = {}
        failed_jobs: dict[str, str] = {}
        if not job_ids:
            return focus_area_sets, failed_jobs

        workers = max(1, min(self._max_workers, len(job_ids)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                job_id: executor.submit(self._registry.get_focus_areas, job_id)
                for job_id in job_ids
            }
            for job_id, future in futures.items():
                try:
                    focus_area_sets[job_id] = list(future.result())
                except Exception as exc:  # noqa: BLE001
                    self._logger.warning(
                        "refresh.focus_areas_failed",
                        job_id=job_id,
                        error=str(exc),
                    )
                    focus_area_sets[job_id] = []
                    failed_jobs[job_id] = str(exc)

        return focus_area_sets, failed_jobs


def referenced_job_ids(interviews: Iterable[InterviewRecord]) -> list[str]:
    """Distinct job ids of completed interviews, in first-seen order."""
    return list(
        dict.fromkeys(
            interview.job.job_id for interview in interviews if interview.is_completed
        )
    )
