import asyncio

import pytest

from conftest import PagedCollection, category_items, product_items
from ecwid_catalog.core.errors import TransportError
from ecwid_catalog.domain.models.common import SearchPage
from ecwid_catalog.domain.services.streaming import CatalogStream


@pytest.mark.asyncio
async def test_stream_yields_everything_in_order(make_client):
    collection = PagedCollection(product_items(25), page_limit=10)
    async with make_client(collection) as ecwid:
        async with ecwid.products.iterate({"limit": "10"}) as products:
            ids = [p.id async for p in products]

    assert ids == list(range(1, 26))
    assert collection.offsets == [None, "10", "20"]
    assert products.error is None
    assert products.done


@pytest.mark.asyncio
async def test_stream_categories(make_client):
    collection = PagedCollection(category_items(3), page_limit=2)
    async with make_client(collection) as ecwid:
        async with ecwid.categories.iterate() as categories:
            names = [c.name async for c in categories]

    assert names == ["Category 1", "Category 2", "Category 3"]


@pytest.mark.asyncio
async def test_stream_empty_result_closes(make_client):
    async with make_client(PagedCollection([])) as ecwid:
        async with ecwid.products.iterate() as products:
            assert [p async for p in products] == []


@pytest.mark.asyncio
async def test_stream_cancel_stops_producer(make_client):
    collection = PagedCollection(product_items(25), page_limit=10)
    received = []
    async with make_client(collection) as ecwid:
        stream = ecwid.products.iterate({"limit": "10"})
        async for product in stream:
            received.append(product.id)
            if len(received) == 3:
                stream.cancel()
        await asyncio.wait_for(stream.aclose(), timeout=1)

    assert received[:3] == [1, 2, 3]
    assert len(received) <= 4
    assert len(collection.requests) == 1
    assert stream.done
    assert stream.error is None


@pytest.mark.asyncio
async def test_stream_external_cancel_signal(make_client):
    collection = PagedCollection(product_items(25), page_limit=10)
    cancel = asyncio.Event()
    received = []
    async with make_client(collection) as ecwid:
        async with ecwid.products.iterate(cancel=cancel) as products:
            async for product in products:
                received.append(product.id)
                if product.id == 12:
                    cancel.set()

    assert received[:12] == list(range(1, 13))
    assert len(received) <= 13
    assert collection.offsets == [None, "10"]


@pytest.mark.asyncio
async def test_stream_already_cancelled_yields_nothing(make_client):
    collection = PagedCollection(product_items(5))
    cancel = asyncio.Event()
    cancel.set()
    async with make_client(collection) as ecwid:
        async with ecwid.products.iterate(cancel=cancel) as products:
            assert [p async for p in products] == []

    # the first page is still fetched; cancellation is only seen at the handoff
    assert len(collection.requests) == 1


@pytest.mark.asyncio
async def test_stream_error_closes_silently(make_client):
    collection = PagedCollection(product_items(25), page_limit=10)
    collection.fail_at_offset = 10
    async with make_client(collection) as ecwid:
        async with ecwid.products.iterate() as products:
            ids = [p.id async for p in products]

    assert ids == list(range(1, 11))
    assert isinstance(products.error, TransportError)


@pytest.mark.asyncio
async def test_stream_is_not_restartable(make_client):
    async with make_client(PagedCollection(product_items(2))) as ecwid:
        async with ecwid.products.iterate() as products:
            assert len([p async for p in products]) == 2
            assert [p async for p in products] == []


@pytest.mark.asyncio
async def test_stream_holds_one_item_in_flight():
    fetched = []

    async def search(filter):
        offset = int(filter.get("offset", "0"))
        fetched.append(offset)
        items = list(range(offset, min(offset + 2, 6)))
        return SearchPage(total=6, count=len(items), offset=offset, limit=2, items=items)

    stream = CatalogStream(search, {})
    first = await stream.__anext__()
    # give the producer every chance to run ahead
    for _ in range(10):
        await asyncio.sleep(0)

    assert first == 0
    assert fetched == [0]  # second item of page one is offered, page two not fetched
    assert [i async for i in stream] == [1, 2, 3, 4, 5]
    await stream.aclose()


@pytest.mark.asyncio
async def test_stream_aclose_midway_unblocks_producer(make_client):
    collection = PagedCollection(product_items(25), page_limit=10)
    async with make_client(collection) as ecwid:
        stream = ecwid.products.iterate()
        await stream.__anext__()
        await asyncio.wait_for(stream.aclose(), timeout=1)

        assert stream.done
        assert stream.cancelled
        assert [p async for p in stream] == []
