"""Uber Direct Python SDK — typed async client for the Uber Direct delivery API."""

__version__ = "1.0.0"

from uber_direct_sdk.client import UberDirectClient
from uber_direct_sdk.config import DirectSettings
from uber_direct_sdk.exceptions import (
    DeserializationError,
    DirectAPIError,
    RequestCancelledError,
    UberDirectError,
)
from uber_direct_sdk.schemas import (
    CreateDeliveryRequest,
    CreateQuoteRequest,
    CreateQuoteResponse,
    Delivery,
    ListDeliveriesResponse,
    ManifestItem,
    Quote,
    UpdateDeliveryRequest,
)

__all__ = [
    "CreateDeliveryRequest",
    "CreateQuoteRequest",
    "CreateQuoteResponse",
    "Delivery",
    "DeserializationError",
    "DirectAPIError",
    "DirectSettings",
    "ListDeliveriesResponse",
    "ManifestItem",
    "Quote",
    "RequestCancelledError",
    "UberDirectClient",
    "UberDirectError",
    "UpdateDeliveryRequest",
]
