from __future__ import annotations
from typing import List, Optional

from pydantic import Field

from ecwid_catalog.domain.models.common import EcwidDateTime, EcwidModel, ID, SearchPage

# https://developers.ecwid.com/api-documentation/products


class WholesalePrice(EcwidModel):
    quantity: Optional[int] = None
    price: Optional[float] = None


class ProductOptionChoice(EcwidModel):
    text: Optional[str] = None
    price_modifier: Optional[float] = None
    price_modifier_type: Optional[str] = None  # ABSOLUTE | PERCENT


class ProductOption(EcwidModel):
    type: Optional[str] = None  # SELECT, RADIO, CHECKBOX, TEXTFIELD, TEXTAREA, DATE, FILES
    name: Optional[str] = None
    choices: Optional[List[ProductOptionChoice]] = None
    default_choice: Optional[int] = None
    required: Optional[bool] = None


class AttributeValue(EcwidModel):
    id: Optional[ID] = None
    name: Optional[str] = None
    value: Optional[str] = None
    type: Optional[str] = None
    show: Optional[str] = None


class TaxInfo(EcwidModel):
    taxable: Optional[bool] = None
    default_location_included_tax_rate: Optional[float] = None
    enabled_manual_taxes: Optional[List[ID]] = None


class ShippingSettings(EcwidModel):
    type: Optional[str] = None  # GLOBAL_METHODS, SELECTED_METHODS, FLAT_RATE, FREE_SHIPPING
    method_markup: Optional[float] = None
    flat_rate: Optional[float] = None
    disabled_methods: Optional[List[str]] = None
    enabled_methods: Optional[List[str]] = None


class RelatedCategory(EcwidModel):
    enabled: Optional[bool] = None
    category_id: Optional[ID] = None
    product_count: Optional[int] = None


class RelatedProducts(EcwidModel):
    product_ids: Optional[List[ID]] = None
    related_category: Optional[RelatedCategory] = None


class ProductDimensions(EcwidModel):
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class ProductImage(EcwidModel):
    id: Optional[str] = None
    is_main: Optional[bool] = None
    order_by: Optional[int] = None
    image160px_url: Optional[str] = Field(default=None, alias="image160pxUrl")
    image400px_url: Optional[str] = Field(default=None, alias="image400pxUrl")
    image800px_url: Optional[str] = Field(default=None, alias="image800pxUrl")
    image1500px_url: Optional[str] = Field(default=None, alias="image1500pxUrl")
    image_original_url: Optional[str] = None


class ProductMedia(EcwidModel):
    images: Optional[List[ProductImage]] = None


class OptionValue(EcwidModel):
    name: Optional[str] = None
    value: Optional[str] = None


class ProductVariation(EcwidModel):
    id: Optional[ID] = None
    combination_number: Optional[int] = None
    options: Optional[List[OptionValue]] = None
    sku: Optional[str] = None
    thumbnail_url: Optional[str] = None
    image_url: Optional[str] = None
    small_thumbnail_url: Optional[str] = None
    hd_thumbnail_url: Optional[str] = None
    original_image_url: Optional[str] = None
    quantity: Optional[int] = None
    unlimited: Optional[bool] = None
    price: Optional[float] = None
    default_displayed_price: Optional[float] = None
    wholesale_prices: Optional[List[WholesalePrice]] = None
    weight: Optional[float] = None
    warning_limit: Optional[int] = None
    attributes: Optional[List[AttributeValue]] = None
    compare_to_price: Optional[float] = None


class CategoriesInfo(EcwidModel):
    id: Optional[ID] = None
    enabled: Optional[bool] = None


class NewProduct(EcwidModel):
    """
    Writable product fields, used as the body of add and update.
    Every field is optional so an update only carries what the caller set;
    the server requires `name` on add and rejects the call otherwise.
    """
    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[int] = None
    unlimited: Optional[bool] = None
    price: Optional[float] = None
    compare_to_price: Optional[float] = None
    is_shipping_required: Optional[bool] = None
    weight: Optional[float] = None
    product_class_id: Optional[ID] = None
    created: Optional[EcwidDateTime] = None
    enabled: Optional[bool] = None
    warning_limit: Optional[int] = None
    fixed_shipping_rate_only: Optional[bool] = None
    fixed_shipping_rate: Optional[float] = None
    description: Optional[str] = None  # HTML
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    default_category_id: Optional[ID] = None
    show_on_frontpage: Optional[int] = None
    category_ids: Optional[List[ID]] = None
    wholesale_prices: Optional[List[WholesalePrice]] = None
    options: Optional[List[ProductOption]] = None
    attributes: Optional[List[AttributeValue]] = None
    tax: Optional[TaxInfo] = None
    shipping: Optional[ShippingSettings] = None
    related_products: Optional[RelatedProducts] = None
    dimensions: Optional[ProductDimensions] = None
    media: Optional[ProductMedia] = None


class Product(NewProduct):
    """Product as returned by get and search; adds the server-assigned fields."""
    id: ID
    in_stock: Optional[bool] = None
    default_displayed_price: Optional[float] = None
    default_displayed_price_formatted: Optional[str] = None
    compare_to_price_formatted: Optional[str] = None
    compare_to_price_discount: Optional[float] = None
    compare_to_price_discount_formatted: Optional[str] = None
    compare_to_price_discount_percent: Optional[float] = None
    compare_to_price_discount_percent_formatted: Optional[str] = None
    url: Optional[str] = None
    updated: Optional[EcwidDateTime] = None
    create_timestamp: Optional[int] = None
    update_timestamp: Optional[int] = None
    default_combination_id: Optional[ID] = None
    is_sample_product: Optional[bool] = None
    combinations: Optional[List[ProductVariation]] = None
    categories: Optional[List[CategoriesInfo]] = None


ProductsSearchResponse = SearchPage[Product]
