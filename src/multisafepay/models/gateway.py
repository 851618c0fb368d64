"""Gateway (payment method) models for the MultiSafepay SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field

from .base import MultiSafepayModel


class GatewayCode(str, Enum):
    """Gateway codes accepted in the ``gateway`` field of an order."""

    AFTERPAY = "AFTERPAY"
    ALIPAY = "ALIPAY"
    AMEX = "AMEX"
    APPLEPAY = "APPLEPAY"
    BANCONTACT = "MISTERCASH"
    BANKTRANSFER = "BANKTRANS"
    BELFIUS = "BELFIUS"
    CREDITCARD = "CREDITCARD"
    DIRDEB = "DIRDEB"
    DOTPAY = "DOTPAY"
    EINVOICE = "EINVOICE"
    EPS = "EPS"
    GIROPAY = "GIROPAY"
    IDEAL = "IDEAL"
    IN3 = "IN3"
    KLARNA = "KLARNA"
    MAESTRO = "MAESTRO"
    MASTERCARD = "MASTERCARD"
    PAYAFTER = "PAYAFTER"
    PAYPAL = "PAYPAL"
    SOFORT = "DIRECTBANK"
    TRUSTLY = "TRUSTLY"
    VISA = "VISA"


class Gateway(MultiSafepayModel):
    """A gateway as listed by the ``gateways`` endpoint."""

    model_config = ConfigDict(extra="allow")

    code: str = Field(alias="id")
    description: str = ""
    type: Optional[str] = None

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class OrderType(str, Enum):
    """How the payment flow of an order is driven."""

    DIRECT = "direct"
    REDIRECT = "redirect"
    PAYMENTLINK = "paymentlink"
