"""Delivery payloads: creation, partial update, the delivery snapshot and listings."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from uber_direct_sdk.schemas.common import (
    DropoffVerification,
    ManifestItem,
    ManifestSummary,
    StopInfo,
    UserFeesSummary,
    VerificationRequirements,
    WireModel,
)


class CreateDeliveryRequest(WireModel):
    """Books a courier, usually against a prior ``quote_id``.

    Notes fields are limited to 280 characters by the API.
    """

    pickup_name: str | None = Field(default=None, description="Required. Shown in the courier app")
    pickup_address: str | None = Field(default=None, description="Required. JSON-encoded pickup address")
    pickup_phone_number: str | None = Field(default=None, description="Required")
    dropoff_name: str | None = Field(default=None, description="Required. Shown in the courier app")
    dropoff_address: str | None = Field(default=None, description="Required. JSON-encoded dropoff address")
    dropoff_phone_number: str | None = Field(default=None, description="Required")
    manifest_items: list[ManifestItem] | None = Field(default=None, description="Required")
    pickup_business_name: str | None = Field(default=None, description="Overrides pickup_name in the courier app")
    pickup_latitude: float | None = None
    pickup_longitude: float | None = None
    pickup_notes: str | None = None
    pickup_verification: VerificationRequirements | None = None
    dropoff_business_name: str | None = None
    dropoff_latitude: float | None = None
    dropoff_longitude: float | None = None
    dropoff_notes: str | None = None
    dropoff_seller_notes: str | None = None
    dropoff_verification: DropoffVerification | None = None
    deliverable_action: str | None = Field(default=None, description="See DeliverableAction; meet at door by default")
    manifest_reference: str | None = Field(default=None, description="Must be unique together with external_id")
    manifest_total_value: int | None = Field(default=None, description="Minor currency units")
    quote_id: str | None = None
    undeliverable_action: str | None = Field(default=None, description="See UndeliverableAction; return by default")
    pickup_ready_dt: str | None = None
    pickup_deadline_dt: str | None = None
    dropoff_ready_dt: str | None = None
    dropoff_deadline_dt: str | None = None
    tip: int | None = Field(default=None, description="Minor currency units; included in the response fee")
    idempotency_key: int | None = Field(default=None, description="Deduplicates creation for about 60 minutes")
    external_store_id: str | None = None
    return_notes: str | None = None
    return_verification: VerificationRequirements | None = None
    external_user_info: dict[str, Any] | None = None
    external_id: str | None = None
    user_fees_summary: list[UserFeesSummary] | None = None


class UpdateDeliveryRequest(WireModel):
    pickup_notes: str | None = None


class Delivery(WireModel):
    """Snapshot of a delivery as returned by create, get, update and cancel."""

    id: str | None = None
    quote_id: str | None = None
    status: str | None = Field(default=None, description='Server-defined, e.g. "pending", "pickup", "delivered", "canceled"')
    complete: bool | None = None
    kind: str | None = None
    pickup: StopInfo | None = None
    dropoff: StopInfo | None = None
    manifest: ManifestSummary | None = None
    manifest_items: list[ManifestItem] | None = None
    created: str | None = None
    updated: str | None = None
    pickup_ready: str | None = None
    pickup_deadline: str | None = None
    dropoff_ready: str | None = None
    dropoff_deadline: str | None = None
    pickup_eta: str | None = None
    dropoff_eta: str | None = None
    fee: int | None = Field(default=None, description="Minor currency units, tip included")
    currency: str | None = None
    tracking_url: str | None = None
    courier_imminent: bool | None = None
    live_mode: bool | None = None
    undeliverable_action: str | None = None
    undeliverable_reason: str | None = None
    uuid: str | None = None


class ListDeliveriesResponse(WireModel):
    count: int = 0
    data: list[Delivery] = Field(default_factory=list)
