"""Schemas and record shapes for the Retail API (v2).

API Reference:
    https://cloud.google.com/retail/docs/reference/rest
"""

from datetime import datetime
from typing import Literal, TypedDict

from coercion import SchemaRegistry, duration, field_mask, message, timestamp

Availability = Literal[
    "AVAILABILITY_UNSPECIFIED",
    "IN_STOCK",
    "OUT_OF_STOCK",
    "PREORDER",
    "BACKORDER",
]

SCHEMAS = SchemaRegistry("retail", "v2")

SCHEMAS.define("PriceInfo", {
    "priceEffectiveTime": timestamp(),
    "priceExpireTime": timestamp(),
})
SCHEMAS.define("Product", {
    "availableTime": timestamp(),
    "expireTime": timestamp(),
    "publishTime": timestamp(),
    "ttl": duration(),
    "retrievableFields": field_mask(),
    "priceInfo": message("PriceInfo"),
    "variants": message("Product", repeated=True),
})
SCHEMAS.define("ListProductsResponse", {"products": message("Product", repeated=True)})
SCHEMAS.define("ProductDetail", {"product": message("Product")})
SCHEMAS.define("UserEvent", {
    "eventTime": timestamp(),
    "productDetails": message("ProductDetail", repeated=True),
})
SCHEMAS.define("ProductsListParams", {"readMask": field_mask()})
SCHEMAS.define("ProductsPatchParams", {"updateMask": field_mask()})


class PriceInfo(TypedDict, total=False):
    currencyCode: str
    price: float
    originalPrice: float
    cost: float
    priceEffectiveTime: datetime
    priceExpireTime: datetime


class CustomAttribute(TypedDict, total=False):
    text: list[str]
    numbers: list[float]
    searchable: bool
    indexable: bool


class Product(TypedDict, total=False):
    """A catalog product.

    Attributes:
        name: Full resource name, '.../branches/{b}/products/{id}'.
        id: Product id, the last segment of name.
        title: Product title, required.
        categories: Category paths, e.g. 'Shoes > Running'.
        priceInfo: Pricing, with native effective/expire times.
        availableTime: When the product became available.
        expireTime: When the product stops being searchable.
        ttl: Alternative to expireTime, as a Duration string, e.g. '86400s'.
    """

    name: str
    id: str
    type: str
    primaryProductId: str
    title: str
    description: str
    categories: list[str]
    brands: list[str]
    languageCode: str
    attributes: dict[str, CustomAttribute]
    tags: list[str]
    priceInfo: PriceInfo
    availability: Availability
    availableQuantity: int
    uri: str
    images: list[dict]
    availableTime: datetime
    publishTime: datetime
    expireTime: datetime
    ttl: str
    retrievableFields: str
    variants: list["Product"]


class UserEvent(TypedDict, total=False):
    eventType: str
    visitorId: str
    eventTime: datetime
    productDetails: list[dict]
    attributionToken: str
    uri: str
