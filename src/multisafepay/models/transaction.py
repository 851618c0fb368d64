"""Transaction models for the MultiSafepay SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, field_validator

from .base import MultiSafepayModel
from .money import Money


class OrderStatus(str, Enum):
    """Order status as reported by the API."""

    INITIALIZED = "initialized"
    UNCLEARED = "uncleared"
    COMPLETED = "completed"
    DECLINED = "declined"
    CANCELLED = "cancelled"
    VOID = "void"
    EXPIRED = "expired"
    RESERVED = "reserved"
    REFUNDED = "refunded"
    PARTIAL_REFUNDED = "partial_refunded"
    CHARGEDBACK = "chargedback"
    SHIPPED = "shipped"


class PaymentDetails(MultiSafepayModel):
    """How the order was paid."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    account_id: Optional[Union[str, int]] = None
    account_holder_name: Optional[str] = None
    external_transaction_id: Optional[Union[str, int]] = None
    recurring_id: Optional[str] = None
    issuer_id: Optional[str] = None
    card_expiry_date: Optional[Union[str, int]] = None
    last4: Optional[Union[str, int]] = None


class Transaction(MultiSafepayModel):
    """Server-side state of an order.

    Returned both by order creation (mostly ``order_id`` and ``payment_url``)
    and by order retrieval (full state). Keys the SDK does not model are kept
    and available through :attr:`extra`.
    """

    model_config = ConfigDict(extra="allow")

    order_id: str
    transaction_id: Optional[Union[str, int]] = None
    status: Optional[str] = None
    financial_status: Optional[str] = None
    amount: Optional[int] = None
    amount_refunded: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    payment_url: Optional[str] = None
    session_id: Optional[str] = None
    reason: Optional[str] = None
    reason_code: Optional[str] = None
    created: Optional[str] = None
    modified: Optional[str] = None
    var1: Optional[str] = None
    var2: Optional[str] = None
    var3: Optional[str] = None
    customer: Optional[Dict[str, Any]] = None
    payment_details: Optional[PaymentDetails] = None
    costs: Optional[List[Dict[str, Any]]] = None
    related_transactions: Optional[List[Dict[str, Any]]] = None

    @field_validator("order_id", mode="before")
    @classmethod
    def _coerce_order_id(cls, value: Any) -> Any:
        # Numeric order ids come back as JSON numbers.
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def money(self) -> Optional[Money]:
        if self.amount is None or not self.currency:
            return None
        return Money.from_minor_units(self.amount, self.currency)

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def is_status(self, status: Union[OrderStatus, str]) -> bool:
        value = status.value if isinstance(status, OrderStatus) else status
        return self.status == value
