"""
Shared fixtures: an in-memory Ecwid API behind httpx.MockTransport.
No test touches the network.
"""

import json
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from ecwid_catalog.client import EcwidClient

STORE_ID = 666
TOKEN = "token"
BASE_URL = f"https://app.ecwid.com/api/v3/{STORE_ID}"


class PagedCollection:
    """
    Serves GET /{collection} as offset/limit pages over a fixed list of items.
    Records every request for later assertions.
    """

    def __init__(self, items: List[dict], page_limit: int = 10):
        self.items = items
        self.page_limit = page_limit
        self.requests: List[httpx.Request] = []
        self.fail_at_offset: Optional[int] = None

    @property
    def offsets(self) -> List[Optional[str]]:
        return [r.url.params.get("offset") for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        offset = int(request.url.params.get("offset", "0"))
        limit = int(request.url.params.get("limit", str(self.page_limit)))
        if self.fail_at_offset is not None and offset >= self.fail_at_offset:
            return httpx.Response(500, json={"errorMessage": "boom", "errorCode": "INTERNAL"})
        page = self.items[offset:offset + limit]
        return httpx.Response(
            200,
            json={
                "total": len(self.items),
                "count": len(page),
                "offset": offset,
                "limit": limit,
                "items": page,
            },
        )


class FakeStore:
    """Tiny stateful /products + /categories backend for add/get/update/delete flows."""

    def __init__(self):
        self.records: Dict[str, Dict[int, dict]] = {"products": {}, "categories": {}}
        self.next_id = 1000

    def __call__(self, request: httpx.Request) -> httpx.Response:
        parts = request.url.path.split("/")[4:]  # drop '', 'api', 'v3', '666'
        collection = parts[0]
        store = self.records[collection]

        if len(parts) == 1 and request.method == "POST":
            body = json.loads(request.content)
            self.next_id += 1
            store[self.next_id] = {**body, "id": self.next_id}
            return httpx.Response(200, json={"id": self.next_id})

        item_id = int(parts[1])
        if len(parts) == 3 and parts[2] == "inventory":
            if item_id not in store:
                return httpx.Response(404, json={"errorMessage": "Product not found"})
            delta = json.loads(request.content)["quantityDelta"]
            store[item_id]["quantity"] = store[item_id].get("quantity", 0) + delta
            return httpx.Response(200, json={"updateCount": store[item_id]["quantity"]})

        if request.method == "GET":
            if item_id not in store:
                return httpx.Response(404, json={"errorMessage": "Not found", "errorCode": "NOT_FOUND"})
            return httpx.Response(200, json=store[item_id])
        if request.method == "PUT":
            if item_id not in store:
                return httpx.Response(200, json={"updateCount": 0})
            store[item_id].update(json.loads(request.content))
            return httpx.Response(200, json={"updateCount": 1})
        if request.method == "DELETE":
            count = 1 if store.pop(item_id, None) is not None else 0
            return httpx.Response(200, json={"deleteCount": count})
        return httpx.Response(405)


def product_items(n: int) -> List[dict]:
    return [{"id": i + 1, "name": f"Product {i + 1}", "sku": f"SKU-{i + 1}"} for i in range(n)]


def category_items(n: int) -> List[dict]:
    return [{"id": i + 1, "name": f"Category {i + 1}", "parentId": 0} for i in range(n)]


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], EcwidClient]:
    """Factory: EcwidClient whose every request is answered by `handler`."""
    def _make(handler) -> EcwidClient:
        return EcwidClient(STORE_ID, TOKEN, transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()
