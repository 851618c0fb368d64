"""
Gateways resource for the MultiSafepay SDK.

This module provides both async and sync interfaces for listing payment methods.
"""
from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

from ..models.gateway import Gateway
from .base import AsyncBaseResource, SyncBaseResource


def _list_params(include_coupons: bool) -> Dict[str, Any]:
    return {"include": "coupons"} if include_coupons else {}


class AsyncGatewaysResource(AsyncBaseResource):
    """Async resource for gateway (payment method) lookups."""

    async def list(self, include_coupons: bool = True) -> List[Gateway]:
        """List the gateways enabled for the account.

        Args:
            include_coupons: Also list gift card and coupon gateways

        Returns:
            List of gateways
        """
        response = await self._get("gateways", _list_params(include_coupons))
        return [Gateway.model_validate(item) for item in response.data or []]

    async def get(self, code: str) -> Gateway:
        """Get a single gateway by its code (e.g. ``IDEAL``)."""
        response = await self._get(f"gateways/{quote(code.upper(), safe='')}")
        return Gateway.model_validate(response.data)


class GatewaysResource(SyncBaseResource):
    """Sync resource for gateway (payment method) lookups."""

    def list(self, include_coupons: bool = True) -> List[Gateway]:
        """List the gateways enabled for the account.

        Args:
            include_coupons: Also list gift card and coupon gateways

        Returns:
            List of gateways
        """
        response = self._get("gateways", _list_params(include_coupons))
        return [Gateway.model_validate(item) for item in response.data or []]

    def get(self, code: str) -> Gateway:
        """Get a single gateway by its code (e.g. ``IDEAL``)."""
        response = self._get(f"gateways/{quote(code.upper(), safe='')}")
        return Gateway.model_validate(response.data)


__all__ = [
    "AsyncGatewaysResource",
    "GatewaysResource",
]
