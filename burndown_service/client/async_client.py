# Data Store Async Client
"""
Async client for the project data store API.
Provides the read-only endpoints the burndown service needs.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from burndown_service.config import settings

logger = logging.getLogger(__name__)


class AsyncDataStoreClient:
    """
    Async client for the project data store API.

    Usage:
        async with AsyncDataStoreClient() as client:
            sprints = await client.list_sprints("proj-1")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None
    ):
        """
        Initialize async client.

        Args:
            base_url: Data store base URL
            timeout: Request timeout in seconds
            max_retries: Maximum attempts per request
            retry_delay: Initial delay between retries in seconds
        """
        self.base_url = (base_url or settings.data_store_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.max_retries = max(1, max_retries if max_retries is not None else settings.max_retries)
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "AsyncDataStoreClient":
        """Enter async context."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating one if needed."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"}
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None
    ) -> Any:
        """
        Make HTTP request with retry logic.

        Client errors (4xx) are raised immediately; server errors and
        transport failures are retried with exponential backoff.

        Raises:
            httpx.HTTPError: On request failure after retries
        """
        client = self._get_client()
        last_error: Optional[httpx.HTTPError] = None

        for attempt in range(self.max_retries):
            try:
                response = await client.request(method=method, url=path, params=params)
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                if 400 <= e.response.status_code < 500:
                    logger.error(f"Client error: {e.response.status_code} - {e.response.text}")
                    raise
                last_error = e

            except httpx.RequestError as e:
                last_error = e

            if attempt < self.max_retries - 1:
                delay = self.retry_delay * (2 ** attempt)
                logger.warning(f"Request failed, retrying in {delay}s: {last_error}")
                await asyncio.sleep(delay)

        logger.error(f"Request failed after {self.max_retries} attempts: {last_error}")
        raise last_error

    async def _paginate_all(
        self,
        path: str,
        params: Optional[dict] = None,
        page_size: int = 500
    ) -> list[dict[str, Any]]:
        """
        Fetch ALL items from a paginated endpoint by iterating through pages.

        Accepts both list responses and ``{"items": [...], "total": n}``
        envelopes.
        """
        all_items: list[dict[str, Any]] = []
        offset = 0
        base_params = params.copy() if params else {}

        while True:
            page_params = {**base_params, "limit": page_size, "offset": offset}
            result = await self._request("GET", path, params=page_params)

            if isinstance(result, list):
                all_items.extend(result)
                break

            items = result.get("items", [])
            total = result.get("total")
            all_items.extend(items)

            logger.debug(
                f"Pagination: fetched {len(items)} items from {path} (offset={offset}, "
                f"total so far={len(all_items)}, reported total={total})"
            )

            if len(items) < page_size:
                break
            if total is not None and len(all_items) >= total:
                break
            offset += page_size
            if offset > 50000:
                logger.warning(f"Pagination safety limit reached at offset {offset}")
                break

        return all_items

    # ==================== Sprints ====================

    async def list_sprints(self, project_id: str) -> list[dict[str, Any]]:
        """
        List ALL sprints of a project.

        Args:
            project_id: Project ID

        Returns:
            Raw sprint payloads
        """
        return await self._paginate_all("/api/v1/sprints", params={"project_id": project_id})

    # ==================== Tasks ====================

    async def list_tasks(self, sprint_id: str) -> list[dict[str, Any]]:
        """
        List ALL tasks in a sprint.

        Args:
            sprint_id: Sprint ID

        Returns:
            Raw task payloads
        """
        return await self._paginate_all(f"/api/v1/sprints/{sprint_id}/tasks")
