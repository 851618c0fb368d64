"""
Issuers resource for the MultiSafepay SDK.

This module provides both async and sync interfaces for listing the banks of
issuer-based gateways.
"""
from __future__ import annotations

from typing import List

from ..models.errors import ValidationError
from ..models.gateway import GatewayCode
from ..models.issuer import ISSUER_GATEWAY_CODES, Issuer
from .base import AsyncBaseResource, SyncBaseResource


def _issuer_endpoint(gateway_code: str) -> str:
    code = gateway_code.upper()
    if code not in ISSUER_GATEWAY_CODES:
        raise ValidationError(
            f"Gateway {gateway_code!r} has no issuers; allowed: {', '.join(sorted(ISSUER_GATEWAY_CODES))}",
            field="gateway_code",
        )
    return f"issuers/{code}"


def _to_issuers(data: object, gateway_code: str) -> List[Issuer]:
    return [
        Issuer.model_validate({**item, "gateway_code": gateway_code.upper()})
        for item in data or []
    ]


class AsyncIssuersResource(AsyncBaseResource):
    """Async resource for issuer lookups."""

    async def list(self, gateway_code: str = GatewayCode.IDEAL.value) -> List[Issuer]:
        """List the issuers of a gateway.

        Raises:
            ValidationError: the gateway has no issuer list (checked before any call)
        """
        response = await self._get(_issuer_endpoint(gateway_code))
        return _to_issuers(response.data, gateway_code)


class IssuersResource(SyncBaseResource):
    """Sync resource for issuer lookups."""

    def list(self, gateway_code: str = GatewayCode.IDEAL.value) -> List[Issuer]:
        """List the issuers of a gateway.

        Raises:
            ValidationError: the gateway has no issuer list (checked before any call)
        """
        response = self._get(_issuer_endpoint(gateway_code))
        return _to_issuers(response.data, gateway_code)


__all__ = [
    "AsyncIssuersResource",
    "IssuersResource",
]
