"""
Base resource classes for the MultiSafepay SDK.

Resources group the endpoints of one API area and map raw responses onto
models. Each area has an async and a sync class with identical signatures.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..response import Response

if TYPE_CHECKING:
    from ..client import AsyncMultiSafepayClient, Body, MultiSafepayClient


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncMultiSafepayClient") -> None:
        self._client = client

    async def _get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a GET request.

        Args:
            endpoint: API endpoint relative to the base URL
            params: Query parameters (``locale`` is added by the client)
            context: Optional diagnostics context

        Returns:
            Parsed response
        """
        return await self._client.create_get_request(endpoint, params, context)

    async def _post(
        self,
        endpoint: str,
        body: "Body" = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a POST request.

        Args:
            endpoint: API endpoint relative to the base URL
            body: Request body
            context: Optional diagnostics context

        Returns:
            Parsed response
        """
        return await self._client.create_post_request(endpoint, body, context)

    async def _patch(
        self,
        endpoint: str,
        body: "Body" = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a PATCH request."""
        return await self._client.create_patch_request(endpoint, body, context)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "MultiSafepayClient") -> None:
        self._client = client

    def _get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a GET request.

        Args:
            endpoint: API endpoint relative to the base URL
            params: Query parameters (``locale`` is added by the client)
            context: Optional diagnostics context

        Returns:
            Parsed response
        """
        return self._client.create_get_request(endpoint, params, context)

    def _post(
        self,
        endpoint: str,
        body: "Body" = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a POST request.

        Args:
            endpoint: API endpoint relative to the base URL
            body: Request body
            context: Optional diagnostics context

        Returns:
            Parsed response
        """
        return self._client.create_post_request(endpoint, body, context)

    def _patch(
        self,
        endpoint: str,
        body: "Body" = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make a PATCH request."""
        return self._client.create_patch_request(endpoint, body, context)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
]
