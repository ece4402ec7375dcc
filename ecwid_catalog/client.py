from __future__ import annotations
from typing import Optional
import logging

import httpx

from ecwid_catalog.core.config import Settings, get_settings
from ecwid_catalog.domain.repositories.category_repo import CategoryRepo
from ecwid_catalog.domain.repositories.product_repo import ProductRepo
from ecwid_catalog.transport.http import DEFAULT_API_URL, create_http_client

logger = logging.getLogger(__name__)


class EcwidClient:
    """
    Entry point: one store, one token, one shared HTTP session.

        async with EcwidClient(store_id, token) as ecwid:
            product = await ecwid.products.get(42)
            async with ecwid.categories.iterate({"parent": "0"}) as categories:
                async for category in categories:
                    ...
    """

    def __init__(
        self,
        store_id: int,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not token:
            raise ValueError("Ecwid access token is required")
        self.store_id = store_id
        self.http = create_http_client(
            store_id,
            token,
            api_url=api_url,
            timeout=timeout,
            transport=transport,
        )
        self.products = ProductRepo(self.http)
        self.categories = CategoryRepo(self.http)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EcwidClient":
        """Build a client from ECWID_* settings (env / .env file)."""
        settings = settings or get_settings()
        if settings.ECWID_STORE_ID is None:
            raise ValueError("ECWID_STORE_ID is not configured")
        return cls(
            settings.ECWID_STORE_ID,
            settings.ECWID_TOKEN,
            api_url=settings.ECWID_API_URL,
            timeout=httpx.Timeout(settings.http_timeout_s, connect=settings.http_connect_timeout_s),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.http.aclose()
        logger.debug("ecwid client closed store_id=%s", self.store_id)

    async def __aenter__(self) -> "EcwidClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
