# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Task Status Resolver - Middle Layer for Store-Specific Task Fields

The data store hands out tasks as loosely typed JSON: status names vary in
casing and vocabulary ("Done", "closed", "In Progress", "in_progress"),
story points may live under different keys, and timestamps are ISO strings.
This module maps those payloads onto the closed TaskStatus enumeration and
the Task model so the burndown engine never compares raw strings.
"""

import logging
import math
from datetime import datetime
from typing import Any, Dict, Optional

from burndown_service.analytics.models import Task, TaskStatus

logger = logging.getLogger(__name__)

DONE_KEYWORDS = ("done", "closed", "completed", "resolved")
BLOCKED_KEYWORDS = ("block", "hold")
IN_PROGRESS_KEYWORDS = ("progress", "doing")
IN_REVIEW_KEYWORDS = ("review", "testing")


class TaskStatusResolver:
    """
    Resolves raw data-store task payloads into Task models.

    Exact status values ("done", "in-progress", ...) map directly; anything
    else is categorized by keyword, and unrecognised strings resolve to
    TaskStatus.UNKNOWN, which never counts as completed.
    """

    def resolve_status(self, raw_status: Any) -> TaskStatus:
        """Categorize a raw status value into a TaskStatus"""
        if isinstance(raw_status, dict):
            # {"name": "Done", ...} style status objects
            raw_status = raw_status.get("name")
        if not isinstance(raw_status, str) or not raw_status.strip():
            return TaskStatus.UNKNOWN

        status = TaskStatus(raw_status)
        if status is not TaskStatus.UNKNOWN:
            return status

        status_lower = raw_status.lower()
        if any(keyword in status_lower for keyword in DONE_KEYWORDS):
            return TaskStatus.DONE
        elif any(keyword in status_lower for keyword in BLOCKED_KEYWORDS):
            return TaskStatus.BLOCKED
        elif any(keyword in status_lower for keyword in IN_REVIEW_KEYWORDS):
            return TaskStatus.IN_REVIEW
        elif any(keyword in status_lower for keyword in IN_PROGRESS_KEYWORDS):
            return TaskStatus.IN_PROGRESS

        logger.debug("Unrecognised task status %r", raw_status)
        return TaskStatus.UNKNOWN

    def extract_story_points(self, payload: Dict[str, Any]) -> Optional[float]:
        """Story points from ``storyPoints`` or ``story_points``, None when absent"""
        for key in ("storyPoints", "story_points"):
            value = payload.get(key)
            if value is None:
                continue
            try:
                points = float(value)
            except (TypeError, ValueError):
                points = math.nan
            if not math.isfinite(points):
                logger.warning("Ignoring non-numeric story points %r on task %s", value, payload.get("id"))
                return None
            return max(0.0, points)
        return None

    def get_completion_date(self, payload: Dict[str, Any]) -> Optional[datetime]:
        """
        Last mutation timestamp, which is the completion time of a done task.

        Unparseable timestamps resolve to None so the task simply contributes
        nothing to the actual curve.
        """
        value = payload.get("updatedAt") or payload.get("updated_at")
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Ignoring malformed updatedAt %r on task %s", value, payload.get("id"))
            return None

    def to_task(
        self,
        payload: Dict[str, Any],
        sprint_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> Optional[Task]:
        """Build a Task from a store payload, or None if it has no identifier"""
        task_id = payload.get("id")
        if task_id is None:
            logger.warning("Skipping task payload without id: %r", payload)
            return None

        task_project_id = payload.get("projectId") or payload.get("project_id") or project_id
        task_sprint_id = payload.get("sprintId") or payload.get("sprint_id") or sprint_id

        return Task(
            id=str(task_id),
            project_id=str(task_project_id) if task_project_id is not None else None,
            sprint_id=str(task_sprint_id) if task_sprint_id is not None else None,
            status=self.resolve_status(payload.get("status")),
            story_points=self.extract_story_points(payload),
            updated_at=self.get_completion_date(payload),
        )
