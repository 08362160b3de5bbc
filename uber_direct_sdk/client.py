"""Uber Direct API client with async support."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from uber_direct_sdk.config import DEFAULT_BASE_URL, DirectSettings
from uber_direct_sdk.exceptions import DeserializationError, DirectAPIError, RequestCancelledError
from uber_direct_sdk.schemas.common import ErrorResponse, WireModel
from uber_direct_sdk.schemas.delivery import (
    CreateDeliveryRequest,
    Delivery,
    ListDeliveriesResponse,
    UpdateDeliveryRequest,
)
from uber_direct_sdk.schemas.quote import CreateQuoteRequest, CreateQuoteResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WireModel)


class UberDirectClient:
    """Async client for the Uber Direct REST API.

    Usage:
        async with UberDirectClient(customer_id="cust_123", access_token=token) as direct:
            quote = await direct.create_quote(CreateQuoteRequest(...))
            delivery = await direct.create_delivery(CreateDeliveryRequest(quote_id=quote.id, ...))

    ``access_token`` is read on every call, so a caller may swap in a fresh
    token between calls. Assigning it while other calls are in flight is not
    synchronized: those calls may send either token. Concurrent calls that
    leave the token alone are safe.

    Pass ``http_client`` to reuse an existing ``httpx.AsyncClient`` (its
    timeouts, proxies and transport apply); the client is then never closed
    by this class. Without one, ``async with`` opens and closes a private
    client.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        customer_id: str = "",
        access_token: str = "",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        if not customer_id:
            raise ValueError("customer_id is required")
        self.base_url = base_url.rstrip("/")
        self.customer_id = customer_id
        self.access_token = access_token
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: DirectSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> UberDirectClient:
        """Build a client from ``UBER_DIRECT_*`` environment settings."""
        settings = settings or DirectSettings()
        return cls(
            base_url=settings.base_url,
            customer_id=settings.customer_id,
            access_token=settings.access_token,
            http_client=http_client,
            timeout=settings.timeout_seconds,
        )

    async def __aenter__(self) -> UberDirectClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Use 'async with UberDirectClient() as client:' or pass http_client")
        return self._client

    # --- Quotes ---

    async def create_quote(
        self,
        body: CreateQuoteRequest,
        *,
        cancel: asyncio.Event | None = None,
    ) -> CreateQuoteResponse:
        """Create Quote: check deliverability, fee and ETA between two addresses.

        Vendor statuses: 400 invalid parameters or undeliverable address,
        401 bad token, 403 missing scope, 404 unknown customer, 422 validation,
        429 rate limited, 5xx vendor failure.
        """
        resp = await self._send("POST", self._path("/delivery_quotes"), body=body, cancel=cancel)
        return self._decode(resp, CreateQuoteResponse)

    # --- Deliveries ---

    async def create_delivery(
        self,
        body: CreateDeliveryRequest,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Delivery:
        """Create Delivery, normally from a prior ``quote_id``.

        404 is returned for an unknown or expired quote and 409 when an
        idempotency key is reused with a different payload.
        """
        resp = await self._send("POST", self._path("/deliveries"), body=body, cancel=cancel)
        return self._decode(resp, Delivery)

    async def list_deliveries(
        self,
        filter: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> ListDeliveriesResponse:
        """List Deliveries, one page at a time.

        Only the parameters supplied are sent, in ``filter``, ``limit``,
        ``offset`` order; ``filter`` is percent-encoded.
        """
        params = []
        if filter and filter.strip():
            params.append(f"filter={quote(filter, safe='')}")
        if limit is not None:
            params.append(f"limit={int(limit)}")
        if offset is not None:
            params.append(f"offset={int(offset)}")
        query = "?" + "&".join(params) if params else ""

        resp = await self._send("GET", self._path(f"/deliveries{query}"), cancel=cancel)
        return self._decode(resp, ListDeliveriesResponse)

    async def update_delivery(
        self,
        delivery_id: str,
        body: UpdateDeliveryRequest,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Delivery:
        """Update Delivery. Timing-sensitive: later lifecycle stages reject edits (400/409)."""
        resp = await self._send("POST", self._path(f"/deliveries/{delivery_id}"), body=body, cancel=cancel)
        return self._decode(resp, Delivery)

    async def get_delivery(
        self,
        delivery_id: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Delivery:
        resp = await self._send("GET", self._path(f"/deliveries/{delivery_id}"), cancel=cancel)
        return self._decode(resp, Delivery)

    async def cancel_delivery(
        self,
        delivery_id: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Delivery:
        """Cancel Delivery; only allowed at certain lifecycle stages (400/409 otherwise)."""
        resp = await self._send("POST", self._path(f"/deliveries/{delivery_id}/cancel"), cancel=cancel)
        return self._decode(resp, Delivery)

    async def get_proof_of_delivery(
        self,
        delivery_id: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> str:
        """Proof of Delivery: the base64 PNG exactly as the API returns it.

        The body is not parsed, even when labelled ``application/json``.
        """
        resp = await self._send(
            "POST",
            self._path(f"/deliveries/{delivery_id}/proof-of-delivery"),
            cancel=cancel,
        )
        return resp.text

    # --- Internals ---

    def _path(self, suffix: str) -> str:
        # ids are inserted verbatim
        return f"{self.base_url}/v1/customers/{self.customer_id}{suffix}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        }

    async def _send(
        self,
        method: str,
        url: str,
        body: WireModel | None = None,
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError(method, url)

        payload = body.to_wire() if body is not None else None
        request = self.client.request(method, url, json=payload, headers=self._headers())

        if cancel is None:
            response = await request
        else:
            response = await self._race_cancel(request, cancel, method, url)

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not response.is_success:
            raise self._api_error(response, method, url)
        return response

    @staticmethod
    async def _race_cancel(
        request: Awaitable[httpx.Response],
        cancel: asyncio.Event,
        method: str,
        url: str,
    ) -> httpx.Response:
        """Await ``request`` unless ``cancel`` fires first, in which case abort it."""
        request_task = asyncio.ensure_future(request)
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        if request_task in done:
            return request_task.result()

        # let httpx unwind the aborted request before reporting
        await asyncio.wait({request_task})
        logger.debug("%s %s cancelled by caller", method, url)
        raise RequestCancelledError(method, url)

    @staticmethod
    def _api_error(response: httpx.Response, method: str, url: str) -> DirectAPIError:
        error = None
        if response.content:
            try:
                error = ErrorResponse.model_validate_json(response.content)
            except ValidationError:
                logger.debug("Unstructured error body from %s %s", method, url)

        logger.debug(
            "Direct API %s %s failed with %d (code=%s)",
            method,
            url,
            response.status_code,
            error.code if error else None,
        )
        return DirectAPIError(
            status_code=response.status_code,
            method=method,
            url=url,
            body=response.text,
            error=error,
        )

    @staticmethod
    def _decode(response: httpx.Response, model: type[M]) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(model.__name__, str(response.url), str(e)) from e
