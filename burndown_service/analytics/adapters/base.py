# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Base Burndown Adapter

Defines the interface for fetching project snapshots from a data store.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from burndown_service.analytics.models import Sprint, Task


class BaseBurndownAdapter(ABC):
    """
    Abstract base class for burndown data adapters.
    
    Adapters are responsible for fetching sprints and tasks from a data
    store and transforming them into the models the burndown calculator
    consumes. Retrieval failures propagate as exceptions; the service
    layer reports them as unavailable data.
    """
    
    @abstractmethod
    async def get_burndown_snapshot(
        self,
        project_id: str
    ) -> Tuple[List[Sprint], List[Task]]:
        """
        Fetch the data for a project burndown.
        
        Returns:
            Tuple of:
                - sprints: All sprints of the project
                - tasks: Tasks belonging to those sprints
        """
        pass
