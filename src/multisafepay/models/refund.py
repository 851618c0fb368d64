"""Refund models for the MultiSafepay SDK."""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import ConfigDict, field_validator

from .base import MultiSafepayModel, RequestBody
from .money import Money


class RefundRequest(RequestBody):
    """Body of ``POST orders/{order_id}/refunds``.

    Always carries exactly ``amount`` (minor units), ``currency`` and
    ``description``; the description is sent even when empty.
    """

    amount: int
    currency: str
    description: str = ""

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        return value.strip().upper()

    @classmethod
    def from_money(cls, money: Money, description: str = "") -> "RefundRequest":
        return cls(amount=money.minor_units, currency=money.currency, description=description)


class Refund(MultiSafepayModel):
    """Result of a refund."""

    model_config = ConfigDict(extra="allow")

    transaction_id: Optional[Union[str, int]] = None
    refund_id: Optional[Union[str, int]] = None

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
