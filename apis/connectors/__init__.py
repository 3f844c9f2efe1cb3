"""Connectors API client."""

from apis.connectors.client import ConnectorsClient
from apis.connectors.schemas import SCHEMAS, Entity

__all__ = ["ConnectorsClient", "SCHEMAS", "Entity"]
