"""Wire shapes shared by quotes and deliveries.

Attribute names are the vendor's JSON keys. Every optional field defaults to
``None`` and is dropped from serialized bodies, so an unset field never goes
over the wire as ``null``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ────────────────────────────────────────────────────────


class ItemSize(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"
    xlarge = "xlarge"


class DeliverableAction(str, Enum):
    meet_at_door = "deliverable_action_meet_at_door"
    leave_at_door = "deliverable_action_leave_at_door"


class UndeliverableAction(str, Enum):
    leave_at_door = "leave_at_door"
    return_ = "return"
    discard = "discard"


# ── Base ─────────────────────────────────────────────────────────


class WireModel(BaseModel):
    """Immutable vendor payload; unknown response keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", use_enum_values=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with vendor keys, omitting every unset field."""
        return self.model_dump(mode="json", exclude_none=True)


# ── Fees ─────────────────────────────────────────────────────────


class UserFeesSummaryTaxInfo(WireModel):
    tax_rate: int | None = Field(default=None, description="Integer tax added to the price to get a total")


class UserFeesSummary(WireModel):
    """One line in the breakdown of how the order value is calculated."""

    fee_type: str | None = Field(
        default=None,
        description="Type of fee added or subtracted (delivery fee, promo, loyalty points, ...)",
    )
    amount: int | None = Field(default=None, description="Integer price in cents")
    user_fee_tax_info: UserFeesSummaryTaxInfo | None = None


# ── Manifest ─────────────────────────────────────────────────────


class Dimensions(WireModel):
    """Physical item dimensions in centimeters."""

    length: float | None = None
    height: float | None = None
    depth: float | None = None


class ManifestItem(WireModel):
    name: str | None = None
    quantity: int | None = None
    size: str | None = Field(default=ItemSize.small.value, description="small, medium, large or xlarge")
    weight: float | None = Field(default=None, description="Grams; required when dimensions are provided")
    price: int | None = Field(default=None, description="Minor currency units")
    dimensions: Dimensions | None = None
    must_be_upright: bool | None = None


class ManifestSummary(WireModel):
    description: str | None = None
    total_value: int | None = Field(default=None, description="Minor currency units")


# ── Verification ─────────────────────────────────────────────────


class BarcodeSpec(WireModel):
    value: str | None = None
    type: str | None = None


class SignatureRequirement(WireModel):
    enabled: bool | None = None
    collect_signer_name: bool | None = None
    collect_signer_relationship: bool | None = None


class IdentificationSpec(WireModel):
    min_age: int | None = None


class VerificationRequirements(WireModel):
    """Evidence the courier must capture before completing a stop."""

    barcodes: list[BarcodeSpec] | None = None
    picture: bool | None = None
    signature_requirement: SignatureRequirement | None = None
    identification: IdentificationSpec | None = None


class DropoffVerification(VerificationRequirements):
    """Verification steps attached to ``dropoff_verification`` on delivery creation."""


class ProofImage(WireModel):
    image_url: str | None = None


class BarcodeScanResult(WireModel):
    outcome: str | None = None
    timestamp: str | None = None


class BarcodeProof(WireModel):
    value: str | None = None
    type: str | None = None
    scan_result: BarcodeScanResult | None = None


class SignatureProof(WireModel):
    image_url: str | None = None
    signer_name: str | None = None


class VerificationProof(WireModel):
    """Evidence captured at a stop, once available."""

    picture: ProofImage | None = None
    barcodes: list[BarcodeProof] | None = None
    signature_proof: SignatureProof | None = None


# ── Stops ────────────────────────────────────────────────────────


class DetailedAddress(WireModel):
    street_address_1: str | None = None
    street_address_2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class LatLng(WireModel):
    lat: float | None = None
    lng: float | None = None


class StopInfo(WireModel):
    """Pickup or dropoff waypoint of a delivery."""

    name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    detailed_address: DetailedAddress | None = None
    location: LatLng | None = None
    notes: str | None = None
    verification_requirements: VerificationRequirements | None = None
    verification: VerificationProof | None = None


# ── Errors ───────────────────────────────────────────────────────


class ErrorResponse(WireModel):
    """Error body returned by the Direct API with non-2xx responses."""

    code: str | None = None
    message: str | None = None
    metadata: dict[str, Any] | None = None
