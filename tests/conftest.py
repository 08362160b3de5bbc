"""Shared fixtures for the Uber Direct SDK test suite.

HTTP is faked with ``httpx.MockTransport``; every request the client sends
is recorded so tests can assert on method, URL, headers and body.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from uber_direct_sdk import UberDirectClient

BASE_URL = "https://api.uber.com/"  # trailing slash on purpose
CUSTOMER_ID = "cust_123"
TOKEN = "test_token"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def json_response(body: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=body)


class Recorder:
    """Mock transport handler that records requests and replies via ``responder``."""

    def __init__(self, responder: Callable[[httpx.Request], Any]):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_client():
    """Factory returning ``(client, recorder)`` wired to a mock transport."""
    def _make(responder: Callable[[httpx.Request], Any], **kwargs) -> tuple[UberDirectClient, Recorder]:
        recorder = Recorder(responder)
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        client = UberDirectClient(
            base_url=kwargs.pop("base_url", BASE_URL),
            customer_id=kwargs.pop("customer_id", CUSTOMER_ID),
            access_token=kwargs.pop("access_token", TOKEN),
            http_client=http,
            **kwargs,
        )
        return client, recorder

    return _make


@pytest.fixture
def sample_delivery() -> dict:
    """A delivery body shaped like a real Direct API response."""
    return {
        "id": "del_Rk2iqgMvRjyhGnXYvvWq2g",
        "quote_id": "dqt_Av1xoZ7tT8yJ8wYjWbOp3A",
        "status": "pending",
        "complete": False,
        "kind": "delivery",
        "pickup": {
            "name": "Store NYC",
            "phone_number": "+15555555555",
            "address": "20 W 34th St, New York, NY 10001",
            "detailed_address": {
                "street_address_1": "20 W 34th St",
                "street_address_2": "",
                "city": "New York",
                "state": "NY",
                "zip_code": "10001",
                "country": "US",
            },
            "location": {"lat": 40.7484, "lng": -73.9857},
            "notes": "Ring the bell",
            "verification_requirements": {"picture": True},
        },
        "dropoff": {
            "name": "Ada Lovelace",
            "phone_number": "+15555555556",
            "address": "285 Fulton St, New York, NY 10006",
            "location": {"lat": 40.7127, "lng": -74.0134},
            "verification_requirements": {
                "signature_requirement": {
                    "enabled": True,
                    "collect_signer_name": True,
                    "collect_signer_relationship": False,
                },
                "identification": {"min_age": 21},
            },
            "verification": {
                "picture": {"image_url": "https://img/p.png"},
                "barcodes": [
                    {
                        "value": "123",
                        "type": "QR",
                        "scan_result": {"outcome": "SUCCESS", "timestamp": "2026-10-18T12:00:00Z"},
                    }
                ],
                "signature_proof": {"image_url": "https://img/s.png", "signer_name": "Ada"},
            },
        },
        "manifest": {"description": "1 x Box", "total_value": 1099},
        "manifest_items": [
            {
                "name": "Box",
                "quantity": 1,
                "size": "medium",
                "weight": 500,
                "price": 1099,
                "dimensions": {"length": 20, "height": 10, "depth": 15},
                "must_be_upright": True,
            }
        ],
        "created": "2026-10-18T11:00:00Z",
        "updated": "2026-10-18T11:00:05Z",
        "pickup_ready": "2026-10-18T11:05:00Z",
        "pickup_deadline": "2026-10-18T11:30:00Z",
        "dropoff_ready": "2026-10-18T11:05:00Z",
        "dropoff_deadline": "2026-10-18T12:30:00Z",
        "pickup_eta": "2026-10-18T11:15:00Z",
        "dropoff_eta": "2026-10-18T11:45:00Z",
        "fee": 799,
        "currency": "usd",
        "tracking_url": "https://www.ubereats.com/orders/abc",
        "courier_imminent": False,
        "live_mode": False,
        "undeliverable_action": None,
        "undeliverable_reason": None,
        "uuid": "3fa85f6457174562b3fc2c963f66afa6",
        "some_future_field": {"ignored": True},
    }
