"""
MultiSafepay Python SDK

A client for the MultiSafepay payment API (orders, refunds, gateways, issuers).

Example usage:
    ```python
    from multisafepay import MultiSafepayClient, Money, OrderRequest

    with MultiSafepayClient(api_key="your-api-key", is_production=False) as client:
        transaction = client.transactions.create(
            OrderRequest(
                order_id="order-1001",
                money=Money.of("20.00", "EUR"),
                gateway="IDEAL",
                description="Order #1001",
            )
        )
        print(transaction.payment_url)
    ```
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

import httpx

from .config import MultiSafepaySettings
from .logging import get_logger, mask_headers, mask_sensitive_data
from .models.base import RequestBody, remove_none
from .models.errors import InvalidApiKeyError
from .resources.categories import AsyncCategoriesResource, CategoriesResource
from .resources.gateways import AsyncGatewaysResource, GatewaysResource
from .resources.issuers import AsyncIssuersResource, IssuersResource
from .resources.transactions import AsyncTransactionsResource, TransactionsResource
from .response import Response

logger = get_logger(__name__)

LIVE_URL = "https://api.multisafepay.com/v1/json/"
TEST_URL = "https://testapi.multisafepay.com/v1/json/"

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PATCH = "PATCH"

MIN_API_KEY_LENGTH = 5
DEFAULT_LOCALE = "en_US"
DEFAULT_TIMEOUT = 30.0

Body = Union[RequestBody, Mapping[str, Any], None]


@dataclass
class PreparedRequest:
    """Everything needed to send one call, plus the diagnostics context."""

    method: str
    url: str
    headers: Dict[str, str]
    content: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


class BaseClient:
    """Request construction shared by the sync and async clients.

    Args:
        api_key: Your MultiSafepay API key (at least 5 characters)
        is_production: Use the live endpoint instead of the test endpoint
        locale: Value of the ``locale`` query parameter sent with every call
        strict_mode: Refuse to send request bodies carrying undeclared fields
        timeout: Request timeout in seconds for the transport the client creates
    """

    LIVE_URL = LIVE_URL
    TEST_URL = TEST_URL

    def __init__(
        self,
        api_key: Optional[str],
        is_production: bool = False,
        locale: str = DEFAULT_LOCALE,
        strict_mode: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._api_key = self._validate_api_key(api_key)
        self._is_production = is_production
        self._base_url = self.LIVE_URL if is_production else self.TEST_URL
        self._locale = locale
        self._strict_mode = strict_mode
        self._timeout = timeout

    @staticmethod
    def _validate_api_key(api_key: Optional[str]) -> str:
        if not api_key or len(api_key) < MIN_API_KEY_LENGTH:
            raise InvalidApiKeyError("Invalid API key")
        return api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_production(self) -> bool:
        return self._is_production

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    def set_strict_mode(self, strict_mode: bool):
        """Toggle strict mode for subsequent requests. Returns the client."""
        self._strict_mode = strict_mode
        return self

    def get_request_url(self, endpoint: str, parameters: Optional[Mapping[str, Any]] = None) -> str:
        """Build the full URL of an endpoint; ``locale`` is always appended.

        ``get_request_url("orders", {})`` on a production client yields
        ``https://api.multisafepay.com/v1/json/orders?locale=en_US``.
        """
        query = {
            key: _query_value(value) for key, value in (parameters or {}).items() if value is not None
        }
        query["locale"] = self._locale
        return f"{self._base_url}{endpoint.lstrip('/')}?{urlencode(query, doseq=True)}"

    def encode_body(self, request_body: Body) -> str:
        """Serialize a request body as pretty-printed JSON.

        The client's strict mode is pushed onto :class:`RequestBody` instances
        first, so a strict client raises :class:`StrictModeError` here.
        """
        if isinstance(request_body, RequestBody):
            request_body.set_strict_mode(self._strict_mode)
            data: Any = request_body.get_data()
        elif request_body is None:
            data = {}
        else:
            data = remove_none(dict(request_body))
        # json.dumps never escapes "/", which is what the API expects for URLs.
        return json.dumps(data, indent=4)

    def _base_headers(self) -> Dict[str, str]:
        return {
            "api_key": self._api_key,
            "accept-encoding": "application/json",
        }

    def _prepare_with_body(
        self,
        method: str,
        endpoint: str,
        request_body: Body,
        context: Optional[Dict[str, Any]],
    ) -> PreparedRequest:
        content = self.encode_body(request_body)
        headers = self._base_headers()
        headers["Content-Type"] = "application/json"
        headers["Content-Length"] = str(len(content.encode("utf-8")))

        context = dict(context or {})
        context["headers"] = mask_headers(headers)
        context["request_body"] = mask_sensitive_data(json.loads(content))
        return PreparedRequest(
            method=method,
            url=self.get_request_url(endpoint),
            headers=headers,
            content=content,
            context=context,
        )

    def _prepare_get(
        self,
        endpoint: str,
        parameters: Optional[Mapping[str, Any]],
        context: Optional[Dict[str, Any]],
    ) -> PreparedRequest:
        headers = self._base_headers()
        context = dict(context or {})
        context["headers"] = mask_headers(headers)
        context["request_params"] = dict(parameters or {})
        return PreparedRequest(
            method=METHOD_GET,
            url=self.get_request_url(endpoint, parameters),
            headers=headers,
            context=context,
        )

    def _handle(self, prepared: PreparedRequest, http_response: httpx.Response) -> Response:
        logger.debug(
            "%s %s -> HTTP %s",
            prepared.method,
            prepared.url,
            http_response.status_code,
        )
        return Response.with_json(
            http_response.text,
            context=prepared.context,
            status_code=http_response.status_code,
        )

    def _log_send(self, prepared: PreparedRequest) -> None:
        logger.debug(
            "Sending %s %s headers=%s body=%s",
            prepared.method,
            prepared.url,
            prepared.context.get("headers"),
            prepared.context.get("request_body"),
        )


class MultiSafepayClient(BaseClient):
    """
    Synchronous MultiSafepay API client.

    Provides access to the API resources:
    - transactions: Create, fetch, update and refund orders
    - gateways: List payment methods
    - issuers: List iDEAL issuers
    - categories: List merchant categories

    Args:
        api_key: Your MultiSafepay API key
        is_production: Use the live endpoint (default: test endpoint)
        http_client: Optional ``httpx.Client`` to send requests with; it is
            never closed by the SDK
        locale: Locale sent with every call (default: en_US)
        strict_mode: Refuse undeclared request body fields (default: False)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        api_key: Optional[str],
        is_production: bool = False,
        http_client: Optional[httpx.Client] = None,
        locale: str = DEFAULT_LOCALE,
        strict_mode: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(api_key, is_production, locale, strict_mode, timeout)
        self._client = http_client
        self._owns_client = http_client is None

        self.transactions = TransactionsResource(self)
        self.gateways = GatewaysResource(self)
        self.issuers = IssuersResource(self)
        self.categories = CategoriesResource(self)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[MultiSafepaySettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> "MultiSafepayClient":
        """Build a client from ``MULTISAFEPAY_*`` environment settings."""
        settings = settings or MultiSafepaySettings()
        return cls(
            api_key=settings.api_key,
            is_production=settings.is_production,
            http_client=http_client,
            locale=settings.locale,
            strict_mode=settings.strict_mode,
            timeout=settings.timeout,
        )

    @property
    def http_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.Client(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _send(self, prepared: PreparedRequest) -> Response:
        self._log_send(prepared)
        http_response = self.http_client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.content,
        )
        return self._handle(prepared, http_response)

    def create_post_request(
        self,
        endpoint: str,
        request_body: Body = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """POST a JSON body to an endpoint and parse the response."""
        return self._send(self._prepare_with_body(METHOD_POST, endpoint, request_body, context))

    def create_patch_request(
        self,
        endpoint: str,
        request_body: Body = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """PATCH a JSON body to an endpoint and parse the response."""
        return self._send(self._prepare_with_body(METHOD_PATCH, endpoint, request_body, context))

    def create_get_request(
        self,
        endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """GET an endpoint with query parameters and parse the response."""
        return self._send(self._prepare_get(endpoint, parameters, context))

    def close(self) -> None:
        """Close the HTTP client if the SDK created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "MultiSafepayClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncMultiSafepayClient(BaseClient):
    """
    Asynchronous MultiSafepay API client.

    Same surface as :class:`MultiSafepayClient`, with awaitable request and
    resource methods and an optional injected ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        is_production: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
        locale: str = DEFAULT_LOCALE,
        strict_mode: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(api_key, is_production, locale, strict_mode, timeout)
        self._client = http_client
        self._owns_client = http_client is None

        self.transactions = AsyncTransactionsResource(self)
        self.gateways = AsyncGatewaysResource(self)
        self.issuers = AsyncIssuersResource(self)
        self.categories = AsyncCategoriesResource(self)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[MultiSafepaySettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "AsyncMultiSafepayClient":
        """Build a client from ``MULTISAFEPAY_*`` environment settings."""
        settings = settings or MultiSafepaySettings()
        return cls(
            api_key=settings.api_key,
            is_production=settings.is_production,
            http_client=http_client,
            locale=settings.locale,
            strict_mode=settings.strict_mode,
            timeout=settings.timeout,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def _send(self, prepared: PreparedRequest) -> Response:
        self._log_send(prepared)
        http_response = await self.http_client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.content,
        )
        return self._handle(prepared, http_response)

    async def create_post_request(
        self,
        endpoint: str,
        request_body: Body = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """POST a JSON body to an endpoint and parse the response."""
        return await self._send(self._prepare_with_body(METHOD_POST, endpoint, request_body, context))

    async def create_patch_request(
        self,
        endpoint: str,
        request_body: Body = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """PATCH a JSON body to an endpoint and parse the response."""
        return await self._send(self._prepare_with_body(METHOD_PATCH, endpoint, request_body, context))

    async def create_get_request(
        self,
        endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """GET an endpoint with query parameters and parse the response."""
        return await self._send(self._prepare_get(endpoint, parameters, context))

    async def close(self) -> None:
        """Close the HTTP client if the SDK created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncMultiSafepayClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "1" if value else "0"
    return value


__all__ = [
    "LIVE_URL",
    "TEST_URL",
    "MIN_API_KEY_LENGTH",
    "BaseClient",
    "PreparedRequest",
    "MultiSafepayClient",
    "AsyncMultiSafepayClient",
]
