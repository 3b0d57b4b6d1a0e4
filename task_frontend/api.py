import logging
from typing import Any, Optional

import httpx

from .config import ApiConfig

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = 5.0


class ApiClient:
    """Thin async JSON client for the remote task API.

    Non-2xx responses raise httpx.HTTPStatusError and network failures raise
    httpx.RequestError; both propagate to the caller unchanged.
    """

    def __init__(self, config: ApiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        url = self.config.url_for(endpoint)
        async with httpx.AsyncClient(timeout=API_TIMEOUT_SECONDS, transport=self._transport) as client:
            response = await client.request(method, url, **kwargs)

        logger.debug("%s %s -> %s", method, url, response.status_code)
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()

    async def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: dict) -> Any:
        return await self._request("POST", endpoint, json=data)

    async def put(self, endpoint: str, data: dict) -> Any:
        return await self._request("PUT", endpoint, json=data)

    async def delete(self, endpoint: str) -> Any:
        return await self._request("DELETE", endpoint)
