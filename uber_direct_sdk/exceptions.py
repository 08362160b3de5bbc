"""Errors raised by the Direct API client.

Connection, DNS and TLS problems are not wrapped: ``httpx.TransportError``
and its subclasses reach the caller unchanged.
"""

from __future__ import annotations

from uber_direct_sdk.schemas.common import ErrorResponse

STATUS_DESCRIPTIONS = {
    400: "Invalid parameters or undeliverable address",
    401: "Missing or invalid bearer token",
    403: "Token lacks the required scope or permissions",
    404: "Unknown customer, delivery or quote",
    409: "Conflict with the current delivery state or a reused idempotency key",
    422: "Request failed semantic validation",
    429: "Rate limited",
}


class UberDirectError(Exception):
    """Base class for every error raised by this library."""


class DirectAPIError(UberDirectError):
    """The Direct API answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        body: str = "",
        error: ErrorResponse | None = None,
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body
        self.error = error
        detail = self.message or self.description
        super().__init__(f"Direct API Error {status_code} on {method} {url}: {detail}")

    @property
    def code(self) -> str | None:
        return self.error.code if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @property
    def description(self) -> str:
        if self.status_code >= 500:
            return "Vendor service unavailable or transient failure"
        return STATUS_DESCRIPTIONS.get(self.status_code, "Unexpected response status")


class DeserializationError(UberDirectError):
    """A successful response did not match the expected wire shape."""

    def __init__(self, model: str, url: str, detail: str):
        self.model = model
        self.url = url
        super().__init__(f"Could not decode {model} from {url}: {detail}")


class RequestCancelledError(UberDirectError):
    """The caller's cancel signal fired while the request was in flight."""

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        super().__init__(f"Request cancelled: {method} {url}")
