"""
Pytest configuration and fixtures for MultiSafepay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from multisafepay import AsyncMultiSafepayClient, MultiSafepayClient

TEST_BASE = "https://testapi.multisafepay.com/v1/json/"
LIVE_BASE = "https://api.multisafepay.com/v1/json/"


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None

    def json(self) -> Any:
        return json.loads(self.content) if self.content else None


class _LocalHTTPXMock:
    """Queue of canned responses matched on method and URL, recording what was sent."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[SentRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def get_request(self) -> SentRequest:
        assert len(self.requests) == 1, f"Expected one request, got {len(self.requests)}"
        return self.requests[0]

    def _record(self, method: str, url: str, headers: Any, content: Any) -> None:
        if isinstance(content, bytes):
            content = content.decode("utf-8")
        self.requests.append(
            SentRequest(method=method.upper(), url=str(url), headers=dict(headers or {}), content=content)
        )

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """`httpx_mock` fixture patching both httpx clients."""
    mock = _LocalHTTPXMock()

    def _respond(method, url, headers=None, content=None):
        mock._record(method, url, headers, content)
        match = mock._pop_match(method, str(url))
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    async def _async_request(self, method, url, *, headers=None, content=None, **kwargs):
        return _respond(method, url, headers, content)

    def _sync_request(self, method, url, *, headers=None, content=None, **kwargs):
        return _respond(method, url, headers, content)

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


def success(data: Any, **extra: Any) -> dict:
    """Wrap data in the API success envelope."""
    return {"success": True, "data": data, **extra}


# Mock response data
MOCK_RESPONSES = {
    "order_created": {
        "order_id": "order-1001",
        "payment_url": "https://payv2.multisafepay.com/connect/99wi/?order_id=order-1001",
        "session_id": "sess_abc",
    },
    "order": {
        "order_id": "order-1001",
        "transaction_id": 4051823,
        "status": "completed",
        "financial_status": "completed",
        "amount": 2000,
        "amount_refunded": 0,
        "currency": "EUR",
        "description": "Order #1001",
        "created": "2020-01-20T12:00:00",
        "modified": "2020-01-20T12:05:00",
        "customer": {"first_name": "Jan", "last_name": "Jansen", "country": "NL"},
        "payment_details": {
            "type": "IDEAL",
            "account_holder_name": "J. Jansen",
            "external_transaction_id": "0050001284693398",
            "issuer_id": "0031",
        },
        "costs": [{"amount": 0.35, "description": "iDEAL fee", "type": "SYSTEM"}],
        "fastcheckout": "NO",
    },
    "refund": {
        "transaction_id": 4051823,
        "refund_id": 4051824,
    },
    "gateways": [
        {"id": "IDEAL", "description": "iDEAL"},
        {"id": "VISA", "description": "Visa"},
        {"id": "WEBSHOPGIFTCARD", "description": "Webshop giftcard", "type": "coupon"},
    ],
    "issuers": [
        {"code": "0031", "description": "ABN AMRO"},
        {"code": "0761", "description": "ASN Bank"},
        {"code": "0721", "description": "ING"},
    ],
    "categories": [
        {"code": "1", "description": "Books"},
        {"code": "2", "description": "Electronics"},
    ],
    "error": {
        "success": False,
        "data": {},
        "error_code": 1006,
        "error_info": "Invalid transaction ID",
    },
}


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key-0123456789"


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def client(api_key: str) -> MultiSafepayClient:
    """Create a sync test client against the test endpoint."""
    client = MultiSafepayClient(api_key=api_key, is_production=False)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str) -> AsyncMultiSafepayClient:
    """Create an async test client against the test endpoint."""
    client = AsyncMultiSafepayClient(api_key=api_key, is_production=False)
    yield client
    await client.close()
