# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Burndown Data Adapters

Adapters for fetching and transforming project snapshots from a data
store into the models the burndown calculator consumes.
"""

from .base import BaseBurndownAdapter
from .status_resolver import TaskStatusResolver
from .store_adapter import DataStoreBurndownAdapter

__all__ = [
    "BaseBurndownAdapter",
    "DataStoreBurndownAdapter",
    "TaskStatusResolver",
]
