"\"\"\"Focus-area column projection for the filtered view.\"\"\""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .results import CandidateJobResult


def project_columns(
    filtered_results: Iterable[CandidateJobResult],
    focus_area_sets: Mapping[str, Sequence[str]],
) -> list[str]:
    """Return the sorted union of focus areas for jobs present in ``filtered_results``.

    Pass the results *after* filtering. Areas belonging only to jobs outside
    the current view are never included.
    """
    job_ids = {result.job_id for result in filtered_results}
    columns: set[str] = set()
    for job_id in job_ids:
        columns.update(focus_area_sets.get(job_id, ()))
    return sorted(columns)
