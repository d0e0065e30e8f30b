# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for all tests.

This file ensures the project root is in the Python path
so that imports work correctly for all test modules.
"""

import sys
from datetime import date, datetime
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from burndown_service.analytics.models import Sprint, Task, TaskStatus
from burndown_service.analytics.calculators.burndown import BurndownCalculator


@pytest.fixture
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture
def calculator():
    """Calculator with the default projection settings."""
    return BurndownCalculator(timezone="UTC")


@pytest.fixture
def ten_day_sprint():
    """One sprint covering 2024-01-01 .. 2024-01-10."""
    return Sprint(
        id="sprint-1",
        project_id="proj-1",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 10),
        name="Sprint 1",
    )


@pytest.fixture
def ten_point_tasks():
    """Two 5-point tasks, one finished on 2024-01-03."""
    return [
        Task(
            id="task-1",
            sprint_id="sprint-1",
            status=TaskStatus.DONE,
            story_points=5,
            updated_at=datetime(2024, 1, 3, 14, 30),
        ),
        Task(
            id="task-2",
            sprint_id="sprint-1",
            status=TaskStatus.IN_PROGRESS,
            story_points=5,
            updated_at=datetime(2024, 1, 2, 9, 0),
        ),
    ]
