# ecwid_catalog/domain/repositories/catalog_repo.py

from __future__ import annotations
from typing import Generic, List, Mapping, Optional, Type, TypeVar
import asyncio
import logging

import httpx

from ecwid_catalog.domain.models.common import EcwidModel, ID, SearchPage
from ecwid_catalog.domain.services.pagination import Visitor, collect, trampoline
from ecwid_catalog.domain.services.streaming import CatalogStream
from ecwid_catalog.transport.http import send
from ecwid_catalog.transport.responses import (
    decode_add,
    decode_delete,
    decode_update,
    unmarshal,
)

logger = logging.getLogger(__name__)

NewT = TypeVar("NewT", bound=EcwidModel)
RecordT = TypeVar("RecordT", bound=EcwidModel)


class CatalogRepo(Generic[NewT, RecordT]):
    """
    REST adapter for one Ecwid catalog collection (/products, /categories).
    One method = one HTTP call; no retries, no caching, errors raise straight through.
    Holds nothing but the shared httpx client, so it is safe to use concurrently.
    """

    path: str = ""
    record_model: Type[RecordT]
    page_model: Type[SearchPage]

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    def _item_path(self, item_id: ID) -> str:
        return f"{self.path}/{int(item_id)}"

    # ---------- CRUD ----------
    async def search(self, filter: Optional[Mapping[str, str]] = None) -> SearchPage[RecordT]:
        """Search/filter the collection. Filter keys go to the query string untouched."""
        response = await send(self.http, "GET", self.path, params=filter)
        return unmarshal(response, self.page_model)

    async def get(self, item_id: ID) -> RecordT:
        response = await send(self.http, "GET", self._item_path(item_id))
        return unmarshal(response, self.record_model)

    async def add(self, record: NewT) -> ID:
        """Create a record; returns the id assigned by the server."""
        response = await send(self.http, "POST", self.path, json=record.to_payload())
        new_id = decode_add(response)
        logger.info("%s add id=%s", self.path, new_id)
        return new_id

    async def update(self, item_id: ID, record: NewT) -> None:
        """Only the fields set on `record` are sent."""
        response = await send(self.http, "PUT", self._item_path(item_id), json=record.to_payload())
        decode_update(response)
        logger.info("%s update id=%s", self.path, item_id)

    async def delete(self, item_id: ID) -> int:
        """Returns the server's deleteCount. Repeated calls are forwarded as-is."""
        response = await send(self.http, "DELETE", self._item_path(item_id))
        count = decode_delete(response)
        logger.info("%s delete id=%s count=%s", self.path, item_id, count)
        return count

    # ---------- Iteration helpers ----------
    async def trampoline(self, filter: Optional[Mapping[str, str]], visit: Visitor) -> int:
        """Call `visit(index, record)` on every match, page after page. Raise from `visit` to stop."""
        return await trampoline(self.search, filter, visit)

    async def all(self, filter: Optional[Mapping[str, str]] = None) -> List[RecordT]:
        """Every match, all pages, in server order."""
        return await collect(self.search, filter)

    def iterate(
        self,
        filter: Optional[Mapping[str, str]] = None,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> CatalogStream[RecordT]:
        """Stream every match from a background task. Call from a running event loop."""
        return CatalogStream(self.search, filter, cancel=cancel, name=self.path.strip("/"))
