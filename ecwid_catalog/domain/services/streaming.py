# ecwid_catalog/domain/services/streaming.py
from __future__ import annotations
from typing import Any, Generic, Mapping, Optional, TypeVar
import asyncio
import logging

from ecwid_catalog.core.errors import CancellationError
from ecwid_catalog.domain.services.pagination import SearchFn, trampoline

"""
Note:
    - A CatalogStream runs the pagination trampoline in one background task
      and hands items to the consumer one at a time.
    - The handoff is a rendezvous: the producer does not fetch or offer the next
      item until the consumer has taken the current one, or cancellation fires.
    - The stream always ends with a clean StopAsyncIteration. Why it stopped
      (search failure, decode failure...) is never raised through iteration;
      it is kept on `stream.error` for callers who want to look.
"""

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CLOSED = object()  # end-of-stream marker


class CatalogStream(Generic[T]):
    """
    Lazy, finite, non-restartable async iterator over every item of a search.

    Must be created from a running event loop. Either iterate it to the end or
    close it (`async with`, `aclose()`), otherwise the producer task stays parked
    on its handoff.

        async with client.products.iterate({"keyword": "shoe"}) as products:
            async for product in products:
                ...
    """

    def __init__(
        self,
        search: SearchFn,
        filter: Optional[Mapping[str, str]] = None,
        *,
        cancel: Optional[asyncio.Event] = None,
        name: str = "catalog",
    ):
        self.name = name
        self.error: Optional[BaseException] = None  # stop reason, never raised
        self.delivered = 0
        self._cancel = cancel if cancel is not None else asyncio.Event()
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self._closed = False
        self._task = asyncio.create_task(
            self._produce(search, dict(filter or {})),
            name=f"{name}-stream",
        )

    # ---------- Producer ----------
    async def _produce(self, search: SearchFn, filter: dict) -> None:
        try:
            visited = await trampoline(search, filter, self._handoff)
            logger.debug("[%s] stream exhausted items=%s", self.name, visited)
        except CancellationError:
            logger.info("[%s] stream cancelled after items=%s", self.name, self.delivered)
        except Exception as e:
            # consumers only see a shorter stream; the reason lives on .error
            self.error = e
            logger.warning("[%s] stream stopped after items=%s err=%s", self.name, self.delivered, e)
        finally:
            self._discard_pending()
            self._queue.put_nowait(_CLOSED)

    async def _handoff(self, index: int, item: Any) -> None:
        if self._cancel.is_set():
            raise CancellationError()

        self._queue.put_nowait(item)  # slot is free: the previous item was taken
        taken = asyncio.ensure_future(self._queue.join())
        cancelled = asyncio.ensure_future(self._cancel.wait())
        try:
            done, _ = await asyncio.wait({taken, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            taken.cancel()
            cancelled.cancel()

        if taken not in done:
            raise CancellationError()

    def _discard_pending(self) -> None:
        """Drop an item that was offered but never taken."""
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()

    # ---------- Consumer ----------
    def __aiter__(self) -> "CatalogStream[T]":
        return self

    async def __anext__(self) -> T:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        self._queue.task_done()
        if item is _CLOSED:
            self._closed = True
            raise StopAsyncIteration
        self.delivered += 1
        return item

    def cancel(self) -> None:
        """Ask the producer to stop at its next handoff."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def done(self) -> bool:
        """True once the producer task has finished."""
        return self._task.done()

    async def aclose(self) -> None:
        """Cancel and wait for the producer to wind down (an in-flight page fetch is not interrupted)."""
        if not self._task.done():
            self.cancel()
        try:
            await self._task
        finally:
            self._closed = True

    async def __aenter__(self) -> "CatalogStream[T]":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
