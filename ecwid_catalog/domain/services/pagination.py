# ecwid_catalog/domain/services/pagination.py

from __future__ import annotations
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar, Union
import inspect
import logging

from ecwid_catalog.core.errors import PaginationError
from ecwid_catalog.domain.models.common import SearchPage
from ecwid_catalog.domain.services.filters import with_page

logger = logging.getLogger(__name__)

T = TypeVar("T")

SearchFn = Callable[[Mapping[str, str]], Awaitable[SearchPage]]
Visitor = Callable[[int, T], Union[None, Awaitable[None]]]


async def trampoline(
    search: SearchFn,
    filter: Optional[Mapping[str, str]],
    visit: Visitor,
) -> int:
    """
    Walk every page of a search, calling `visit(index, item)` on each item in
    server order. `index` runs across pages (0, 1, 2, ...).

    Steps:
      1) search with the current filter (a private copy; caller's map is never touched)
      2) search errors propagate as-is, no retry
      3) visit each item; if `visit` raises, stop right there and re-raise
         (this is how callers stop early, cancellation included)
      4) done once offset + count >= total; page fullness is never consulted
      5) otherwise move offset to offset + count and go again

    `visit` may be a plain function or a coroutine function.
    Returns the number of visited items.
    """
    current = dict(filter or {})
    index = 0
    pages = 0

    while True:
        page = await search(current)
        pages += 1
        logger.debug(
            "page %s offset=%s count=%s total=%s items=%s",
            pages, page.offset, page.count, page.total, len(page.items),
        )

        for item in page.items:
            result = visit(index, item)
            if inspect.isawaitable(result):
                await result
            index += 1

        if page.offset + page.count >= page.total:
            logger.debug("pagination done pages=%s visited=%s", pages, index)
            return index

        if page.count <= 0:
            # Same offset again would fetch the same page forever
            raise PaginationError(
                f"empty page at offset={page.offset} while total={page.total}"
            )

        current = with_page(current, page.offset + page.count)


async def collect(search: SearchFn, filter: Optional[Mapping[str, str]] = None) -> list:
    """Every item of every page, in order."""
    items: list = []

    def _append(_index: int, item: Any) -> None:
        items.append(item)

    await trampoline(search, filter, _append)
    return items
