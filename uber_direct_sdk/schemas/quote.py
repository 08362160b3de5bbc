"""Create Quote payloads.

Addresses are JSON strings holding the structured address, e.g.
``'{"street_address":["20 W 34th St"],"city":"New York","state":"NY","zip_code":"10001","country":"US"}'``.
All ``*_dt`` fields are RFC 3339 timestamps.
"""

from __future__ import annotations

from pydantic import Field

from uber_direct_sdk.schemas.common import WireModel


class CreateQuoteRequest(WireModel):
    """Checks deliverability, validity and cost between two addresses."""

    pickup_address: str | None = Field(default=None, description="Required. JSON-encoded pickup address")
    dropoff_address: str | None = Field(default=None, description="Required. JSON-encoded dropoff address")
    pickup_latitude: float | None = None
    pickup_longitude: float | None = None
    dropoff_latitude: float | None = None
    dropoff_longitude: float | None = None
    pickup_ready_dt: str | None = Field(default=None, description="Must be less than 30 days in the future")
    pickup_deadline_dt: str | None = Field(
        default=None,
        description="At least 10 mins after pickup_ready_dt and 20 mins from now",
    )
    dropoff_ready_dt: str | None = Field(default=None, description="Less than or equal to pickup_deadline_dt")
    dropoff_deadline_dt: str | None = Field(
        default=None,
        description="At least 20 mins after dropoff_ready_dt, not before pickup_deadline_dt",
    )
    pickup_phone_number: str | None = Field(default=None, description=r"^\+[0-9]+$")
    dropoff_phone_number: str | None = Field(default=None, description=r"Required. ^\+[0-9]+$")
    manifest_total_value: int | None = Field(default=None, description="Minor currency units, $10.99 => 1099")
    external_store_id: str | None = Field(
        default=None,
        description="Must also be sent on Create Delivery when used there",
    )


class CreateQuoteResponse(WireModel):
    """A priced, time-bounded delivery estimate."""

    kind: str | None = Field(default=None, description='Always "delivery_quote"')
    id: str | None = Field(default=None, description="Starts with dqt_")
    created: str | None = None
    expires: str | None = Field(default=None, description="Quote is no longer accepted after this time")
    fee: int | None = Field(default=None, description="Minor currency units")
    currency: str | None = Field(default=None, description="Lower-case ISO 4217")
    currency_type: str | None = None
    dropoff_eta: str | None = None
    duration: int | None = Field(default=None, description="Minutes")
    pickup_duration: int | None = Field(default=None, description="Minutes")
    dropoff_deadline: str | None = None


Quote = CreateQuoteResponse
