"""Errors raised at the collaborator boundary."""

from __future__ import annotations


class FetchFailure(Exception):
    """Raised when a collaborator is unreachable or answers with an error.

    The engine never retries; callers decide whether to retry the refresh.
    """

    retryable = True

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


class FocusAreaFetchError(FetchFailure):
    """Focus-area lookup failed for a single job."""

    def __init__(self, job_id: str, message: str):
        super().__init__("get_focus_areas", message)
        self.job_id = job_id
