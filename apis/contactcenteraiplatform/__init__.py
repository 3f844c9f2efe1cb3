"""Contact Center AI Platform API client."""

from apis.contactcenteraiplatform.client import ContactCenterAIPlatformClient
from apis.contactcenteraiplatform.schemas import SCHEMAS, ContactCenter, Operation, Status

__all__ = ["ContactCenterAIPlatformClient", "SCHEMAS", "ContactCenter", "Operation", "Status"]
