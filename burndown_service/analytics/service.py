"""Burndown service - main entry point for burndown chart generation."""

from typing import List, Optional, Sequence, Tuple
from datetime import datetime
import logging

import httpx

from burndown_service.analytics.models import (
    BurndownDataPoint,
    ChartResponse,
    Sprint,
    Task,
)
from burndown_service.analytics.calculators.burndown import BurndownCalculator
from burndown_service.analytics.adapters.base import BaseBurndownAdapter
from burndown_service.config import Settings, get_settings
from burndown_service.errors import DataUnavailableError

logger = logging.getLogger(__name__)

# Failures of the data store round trip; anything else is a bug and propagates
RETRIEVAL_ERRORS = (httpx.HTTPError, OSError, ValueError)


class BurndownService:
    """Fetches project snapshots and runs the burndown calculator over them."""

    def __init__(
        self,
        adapter: Optional[BaseBurndownAdapter] = None,
        calculator: Optional[BurndownCalculator] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize burndown service.

        Args:
            adapter: Adapter for fetching sprints and tasks from the data store.
            calculator: Burndown calculator; built from settings when omitted.
            settings: Service settings; the cached global settings by default.
        """
        self.adapter = adapter
        self.settings = settings or get_settings()
        self.calculator = calculator or BurndownCalculator.from_settings(self.settings)

    def now(self) -> datetime:
        """Current wall-clock time in the configured timezone"""
        return datetime.now(self.calculator.tz)

    def calculate(
        self,
        sprints: Sequence[Sprint],
        tasks: Sequence[Task],
        now: Optional[datetime] = None,
    ) -> List[BurndownDataPoint]:
        """Burndown series for an already materialized snapshot"""
        return self.calculator.calculate(sprints, tasks, now or self.now())

    async def get_burndown(
        self,
        project_id: str,
        now: Optional[datetime] = None,
    ) -> List[BurndownDataPoint]:
        """
        Get the burndown series for a project.

        Args:
            project_id: Project identifier
            now: Caller's current time (defaults to the wall clock)

        Returns:
            One data point per day of the resolved timeframe

        Raises:
            DataUnavailableError: If the data store could not supply the snapshot
        """
        sprints, tasks = await self._fetch_snapshot(project_id)
        return self.calculate(sprints, tasks, now)

    async def get_burndown_chart(
        self,
        project_id: str,
        now: Optional[datetime] = None,
    ) -> ChartResponse:
        """
        Get the burndown chart (ideal and actual series plus summary) for a project.

        Raises:
            DataUnavailableError: If the data store could not supply the snapshot
        """
        now = now or self.now()
        sprints, tasks = await self._fetch_snapshot(project_id)

        timeframe = self.calculator.resolve_timeframe(sprints, tasks, now)
        points = self.calculator.build_points(timeframe, tasks, now)
        return self.calculator.to_chart(points, timeframe, now)

    async def _fetch_snapshot(self, project_id: str) -> Tuple[List[Sprint], List[Task]]:
        if not self.adapter:
            logger.info("No burndown adapter configured for project %s", project_id)
            raise DataUnavailableError(project_id, "no data source configured")

        try:
            return await self.adapter.get_burndown_snapshot(project_id)
        except RETRIEVAL_ERRORS as exc:
            logger.error("Failed to fetch burndown snapshot for project %s: %s", project_id, exc)
            raise DataUnavailableError(project_id, str(exc)) from exc
