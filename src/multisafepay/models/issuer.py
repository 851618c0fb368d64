"""Issuer models for the MultiSafepay SDK."""
from __future__ import annotations

from pydantic import field_validator

from .base import MultiSafepayModel
from .gateway import GatewayCode

# Only iDEAL exposes an issuer list.
ISSUER_GATEWAY_CODES = frozenset({GatewayCode.IDEAL.value})


class Issuer(MultiSafepayModel):
    """A bank selectable for an issuer-based gateway."""

    code: str
    description: str
    gateway_code: str = GatewayCode.IDEAL.value

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: object) -> object:
        if isinstance(value, int):
            return f"{value:04d}"
        return value
