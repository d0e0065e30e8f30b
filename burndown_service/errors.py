"""
Error types raised by Burndown Service.

The projection engine itself never raises: degenerate input (no sprints,
zero scope, missing fields, malformed dates) resolves to fallback output.
The only reportable failure is the data store not delivering a snapshot.
"""

from typing import Optional


class BurndownServiceError(Exception):
    """Base class for Burndown Service errors."""


class DataUnavailableError(BurndownServiceError):
    """The external data store failed to supply sprints or tasks."""

    def __init__(self, project_id: str, reason: Optional[str] = None):
        self.project_id = project_id
        self.reason = reason
        message = f"Burndown data unavailable for project '{project_id}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
