# Data Store Client
"""
Client library for the project data store API.
Used by the burndown adapter to fetch sprint and task snapshots.
"""

from .async_client import AsyncDataStoreClient

__all__ = ["AsyncDataStoreClient"]
