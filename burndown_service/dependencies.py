"""
FastAPI dependencies for Burndown Service.
"""

from functools import lru_cache

from burndown_service.analytics.adapters.store_adapter import DataStoreBurndownAdapter
from burndown_service.analytics.service import BurndownService
from burndown_service.client.async_client import AsyncDataStoreClient
from burndown_service.config import get_settings


@lru_cache()
def get_data_store_client() -> AsyncDataStoreClient:
    """Shared data store client for the application lifetime."""
    return AsyncDataStoreClient()


def get_burndown_service() -> BurndownService:
    """Burndown service wired to the data store."""
    adapter = DataStoreBurndownAdapter(get_data_store_client())
    return BurndownService(adapter=adapter, settings=get_settings())
