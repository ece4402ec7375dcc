# ecwid_catalog/domain/repositories/product_repo.py

from __future__ import annotations
import logging

from ecwid_catalog.domain.models.common import ID
from ecwid_catalog.domain.models.product import NewProduct, Product, ProductsSearchResponse
from ecwid_catalog.domain.repositories.catalog_repo import CatalogRepo
from ecwid_catalog.domain.services.constants import PRODUCTS_PATH
from ecwid_catalog.transport.http import send
from ecwid_catalog.transport.responses import decode_update_count

logger = logging.getLogger(__name__)


class ProductRepo(CatalogRepo[NewProduct, Product]):
    """
    Products of one store.
    Search filter keys: keyword, priceFrom, priceTo, category, withSubcategories,
    sortBy, offset, limit, createdFrom, createdTo, updatedFrom, updatedTo,
    enabled, inStock, onsale, sku, productId, baseUrl, cleanUrls,
    plus free-form field{name}=, option_{name}=, attribute_{name}=.
    """

    path = PRODUCTS_PATH
    record_model = Product
    page_model = ProductsSearchResponse

    async def inventory_adjust(self, product_id: ID, quantity_delta: int) -> int:
        """
        Increase or decrease stock by `quantity_delta` (negative to decrease).
        The delta is sent as-is; the arithmetic happens server side.
        Returns the figure the server reports back (updateCount).
        """
        response = await send(
            self.http,
            "PUT",
            f"{self._item_path(product_id)}/inventory",
            json={"quantityDelta": int(quantity_delta)},
        )
        result = decode_update_count(response)
        logger.info("inventory adjust product_id=%s delta=%s result=%s", product_id, quantity_delta, result)
        return result
