"""Pydantic v2 models mirroring the Direct API wire format."""

from uber_direct_sdk.schemas.common import (
    BarcodeProof,
    BarcodeScanResult,
    BarcodeSpec,
    DeliverableAction,
    DetailedAddress,
    Dimensions,
    DropoffVerification,
    ErrorResponse,
    IdentificationSpec,
    ItemSize,
    LatLng,
    ManifestItem,
    ManifestSummary,
    ProofImage,
    SignatureProof,
    SignatureRequirement,
    StopInfo,
    UndeliverableAction,
    UserFeesSummary,
    UserFeesSummaryTaxInfo,
    VerificationProof,
    VerificationRequirements,
    WireModel,
)
from uber_direct_sdk.schemas.delivery import (
    CreateDeliveryRequest,
    Delivery,
    ListDeliveriesResponse,
    UpdateDeliveryRequest,
)
from uber_direct_sdk.schemas.quote import CreateQuoteRequest, CreateQuoteResponse, Quote

__all__ = [
    "BarcodeProof",
    "BarcodeScanResult",
    "BarcodeSpec",
    "CreateDeliveryRequest",
    "CreateQuoteRequest",
    "CreateQuoteResponse",
    "DeliverableAction",
    "Delivery",
    "DetailedAddress",
    "Dimensions",
    "DropoffVerification",
    "ErrorResponse",
    "IdentificationSpec",
    "ItemSize",
    "LatLng",
    "ListDeliveriesResponse",
    "ManifestItem",
    "ManifestSummary",
    "ProofImage",
    "Quote",
    "SignatureProof",
    "SignatureRequirement",
    "StopInfo",
    "UndeliverableAction",
    "UpdateDeliveryRequest",
    "UserFeesSummary",
    "UserFeesSummaryTaxInfo",
    "VerificationProof",
    "VerificationRequirements",
    "WireModel",
]
