"""Retail API client."""

from apis.retail.client import RetailClient
from apis.retail.schemas import SCHEMAS, PriceInfo, Product, UserEvent

__all__ = ["RetailClient", "SCHEMAS", "PriceInfo", "Product", "UserEvent"]
