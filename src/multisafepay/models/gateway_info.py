"""Gateway-specific payment details attached to an order as ``gateway_info``.

Every variant declares, through static lookup tables, which gateway codes and
which order types it may be combined with. :class:`OrderRequest` checks those
tables when the order is built.
"""
from __future__ import annotations

from datetime import date
from typing import ClassVar, FrozenSet, Optional

from pydantic import computed_field

from .base import RequestBody
from .gateway import GatewayCode, OrderType
from .value_objects import CardNumber, Country, Cvc, Email, ExpiryDate, Gender, Iban


class GatewayInfo(RequestBody):
    """Base class for gateway info variants."""

    compatible_gateways: ClassVar[FrozenSet[str]] = frozenset()
    compatible_types: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def supports(cls, gateway: Optional[str], order_type: str) -> bool:
        """Whether this variant may be sent with the given gateway and order type."""
        gateway = getattr(gateway, "value", gateway)
        order_type = getattr(order_type, "value", order_type)
        gateway_ok = gateway is None or gateway.upper() in cls.compatible_gateways
        return gateway_ok and order_type in cls.compatible_types


class Creditcard(GatewayInfo):
    """Card details for direct credit card orders."""

    compatible_gateways: ClassVar[FrozenSet[str]] = frozenset({
        GatewayCode.CREDITCARD.value,
        GatewayCode.VISA.value,
    })
    compatible_types: ClassVar[FrozenSet[str]] = frozenset({OrderType.DIRECT.value})

    card_number: CardNumber
    card_holder_name: str
    card_expiry_date: ExpiryDate
    cvc: Cvc
    flexible_3d: bool = False

    # Some acquirers read the CVC under this name instead.
    @computed_field
    @property
    def card_cvc(self) -> str:
        return self.cvc


class Ideal(GatewayInfo):
    """Issuer selection for iDEAL; without it the payer picks a bank on the payment page."""

    compatible_gateways: ClassVar[FrozenSet[str]] = frozenset({GatewayCode.IDEAL.value})
    compatible_types: ClassVar[FrozenSet[str]] = frozenset({
        OrderType.DIRECT.value,
        OrderType.REDIRECT.value,
    })

    issuer_id: str


class Account(GatewayInfo):
    """Bank account details for direct debit."""

    compatible_gateways: ClassVar[FrozenSet[str]] = frozenset({GatewayCode.DIRDEB.value})
    compatible_types: ClassVar[FrozenSet[str]] = frozenset({OrderType.DIRECT.value})

    account_id: Iban
    account_holder_name: str
    account_holder_iban: Iban
    emandate: Optional[str] = None


class Meta(GatewayInfo):
    """Shopper details required by the pay-after-delivery and billing gateways."""

    compatible_gateways: ClassVar[FrozenSet[str]] = frozenset({
        GatewayCode.PAYAFTER.value,
        GatewayCode.KLARNA.value,
        GatewayCode.AFTERPAY.value,
        GatewayCode.EINVOICE.value,
        GatewayCode.IN3.value,
    })
    compatible_types: ClassVar[FrozenSet[str]] = frozenset({
        OrderType.DIRECT.value,
        OrderType.REDIRECT.value,
    })

    birthday: Optional[date] = None
    bank_account: Optional[Iban] = None
    phone: Optional[str] = None
    email: Optional[Email] = None
    gender: Optional[Gender] = None
    country: Optional[Country] = None
