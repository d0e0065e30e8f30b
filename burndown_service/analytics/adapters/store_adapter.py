# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Data Store Burndown Adapter

Fetches a project's sprints and their tasks from the data store API and
converts the raw payloads into Sprint and Task models.
"""

import asyncio
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from burndown_service.analytics.adapters.base import BaseBurndownAdapter
from burndown_service.analytics.adapters.status_resolver import TaskStatusResolver
from burndown_service.analytics.models import Sprint, Task
from burndown_service.client.async_client import AsyncDataStoreClient

logger = logging.getLogger(__name__)


def _parse_date(value: Any) -> Optional[date]:
    """Calendar date from a date, datetime or ISO string; None when malformed"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


class DataStoreBurndownAdapter(BaseBurndownAdapter):
    """
    Burndown adapter backed by the data store HTTP API.

    Sprint tasks are fetched concurrently, one request stream per sprint.
    Malformed records are skipped with a warning rather than failing the
    whole snapshot.
    """

    def __init__(
        self,
        client: AsyncDataStoreClient,
        status_resolver: Optional[TaskStatusResolver] = None
    ):
        self.client = client
        self.status_resolver = status_resolver or TaskStatusResolver()

    async def get_burndown_snapshot(
        self,
        project_id: str
    ) -> Tuple[List[Sprint], List[Task]]:
        """Fetch sprints and sprint tasks for a project"""
        logger.info(f"[DataStoreBurndownAdapter] Fetching snapshot for project={project_id}")

        sprint_payloads = await self.client.list_sprints(project_id)
        sprints = [
            sprint
            for sprint in (self._to_sprint(payload, project_id) for payload in sprint_payloads)
            if sprint is not None
        ]

        task_batches = await asyncio.gather(
            *(self.client.list_tasks(sprint.id) for sprint in sprints)
        )

        tasks: List[Task] = []
        seen_ids = set()
        for sprint, payloads in zip(sprints, task_batches):
            for payload in payloads:
                task = self.status_resolver.to_task(payload, sprint_id=sprint.id, project_id=project_id)
                if task is None or task.id in seen_ids:
                    continue
                seen_ids.add(task.id)
                tasks.append(task)

        logger.info(
            f"[DataStoreBurndownAdapter] Project {project_id}: "
            f"{len(sprints)} sprints, {len(tasks)} tasks"
        )
        return sprints, tasks

    def _to_sprint(self, payload: Dict[str, Any], project_id: str) -> Optional[Sprint]:
        """Convert a sprint payload, or None when its dates are unusable"""
        start_date = _parse_date(payload.get("startDate") or payload.get("start_date"))
        end_date = _parse_date(payload.get("endDate") or payload.get("end_date"))
        if start_date is None or end_date is None:
            logger.warning(
                f"[DataStoreBurndownAdapter] Skipping sprint {payload.get('id')} "
                f"with malformed dates"
            )
            return None

        try:
            return Sprint(
                id=str(payload["id"]),
                project_id=str(payload.get("projectId") or payload.get("project_id") or project_id),
                start_date=start_date,
                end_date=end_date,
                name=payload.get("name"),
            )
        except (KeyError, ValidationError) as exc:
            logger.warning(f"[DataStoreBurndownAdapter] Skipping invalid sprint payload: {exc}")
            return None
