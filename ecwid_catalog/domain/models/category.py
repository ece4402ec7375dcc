from __future__ import annotations
from typing import List, Optional

from ecwid_catalog.domain.models.common import EcwidModel, ID, ImageDetails, SearchPage

# https://developers.ecwid.com/api-documentation/categories


class NewCategory(EcwidModel):
    name: Optional[str] = None
    parent_id: Optional[ID] = None
    order_by: Optional[int] = None
    description: Optional[str] = None  # HTML
    enabled: Optional[bool] = None
    product_ids: Optional[List[ID]] = None


class Category(NewCategory):
    id: ID
    hd_thumbnail_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    image_url: Optional[str] = None
    original_image_url: Optional[str] = None
    url: Optional[str] = None
    product_count: Optional[int] = None
    enabled_product_count: Optional[int] = None
    original_image: Optional[ImageDetails] = None


CategoriesSearchResponse = SearchPage[Category]
