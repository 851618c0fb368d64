"""Order request models for the MultiSafepay SDK."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field, SerializeAsAny, field_serializer, field_validator, model_validator

from .base import RequestBody
from .errors import ValidationError
from .gateway import OrderType
from .gateway_info import GatewayInfo
from .money import Money
from .value_objects import Country, Email


class PaymentOptions(RequestBody):
    """Callback and redirect URLs of an order."""

    notification_url: Optional[str] = None
    notification_method: Optional[str] = None
    redirect_url: Optional[str] = None
    cancel_url: Optional[str] = None
    close_window: Optional[bool] = None


class _Address(RequestBody):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    house_number: Optional[str] = None
    zip_code: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[Country] = None
    phone: Optional[str] = None
    email: Optional[Email] = None


class CustomerDetails(_Address):
    """The paying customer, including the browser details used for fraud checks."""

    locale: Optional[str] = None
    ip_address: Optional[str] = None
    forwarded_ip: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


class DeliveryDetails(_Address):
    """Shipping address when it differs from the customer address."""


class PluginDetails(RequestBody):
    """Identifies the integration that created the order."""

    shop: Optional[str] = None
    shop_version: Optional[str] = None
    plugin_version: Optional[str] = None
    partner: Optional[str] = None
    shop_root_url: Optional[str] = None


class SecondChance(RequestBody):
    """Reminder e-mail for unfinished payments."""

    send_email: bool = False


class CartItem(RequestBody):
    """A shopping cart line."""

    name: str
    unit_price: Decimal
    quantity: int = 1
    description: Optional[str] = None
    merchant_item_id: Optional[str] = None
    tax_table_selector: Optional[str] = None

    @field_serializer("unit_price")
    def _serialize_unit_price(self, value: Decimal) -> float:
        return float(value)


class ShoppingCart(RequestBody):
    """Cart lines, required by the billing gateways."""

    items: List[CartItem] = Field(default_factory=list)


class OrderRequest(RequestBody):
    """An order to create through ``POST orders``.

    ``amount`` is expressed in minor units (cents). A :class:`Money` can be
    passed as ``money=`` instead of ``amount`` and ``currency``.

    Example:
        ```python
        order = OrderRequest(
            type=OrderType.REDIRECT,
            order_id="order-1001",
            money=Money.of("20.00", "EUR"),
            gateway=GatewayCode.IDEAL,
            gateway_info=Ideal(issuer_id="0031"),
            description="Order #1001",
            payment_options=PaymentOptions(redirect_url="https://shop.example/paid"),
        )
        ```
    """

    type: OrderType = OrderType.REDIRECT
    order_id: str
    currency: str
    amount: int
    gateway: Optional[str] = None
    description: Optional[str] = None
    days_active: Optional[int] = None
    recurring_id: Optional[str] = None
    var1: Optional[str] = None
    var2: Optional[str] = None
    var3: Optional[str] = None
    payment_options: Optional[PaymentOptions] = None
    customer: Optional[CustomerDetails] = None
    delivery: Optional[DeliveryDetails] = None
    gateway_info: Optional[SerializeAsAny[GatewayInfo]] = None
    second_chance: Optional[SecondChance] = None
    plugin: Optional[PluginDetails] = None
    shopping_cart: Optional[ShoppingCart] = None

    @model_validator(mode="before")
    @classmethod
    def _expand_money(cls, data: Any) -> Any:
        if isinstance(data, dict) and "money" in data:
            data = dict(data)
            money = data.pop("money")
            if isinstance(money, dict):
                money = Money.model_validate(money)
            data["amount"] = money.minor_units
            data["currency"] = money.currency
        return data

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("amount")
    @classmethod
    def _validate_amount(cls, value: int) -> int:
        if value < 0:
            raise ValidationError("Order amount cannot be negative", field="amount")
        return value

    @field_validator("gateway", mode="before")
    @classmethod
    def _normalize_gateway(cls, value: Any) -> Any:
        if hasattr(value, "value"):
            value = value.value
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_gateway_info(self) -> "OrderRequest":
        order_type = getattr(self.type, "value", self.type)
        if order_type == OrderType.DIRECT.value and not self.gateway:
            raise ValidationError("Direct orders need a gateway", field="gateway")
        info = self.gateway_info
        if info is not None and not info.supports(self.gateway, order_type):
            raise ValidationError(
                f"{type(info).__name__} gateway info cannot be used with gateway "
                f"{self.gateway!r} on a {order_type} order",
                field="gateway_info",
            )
        return self

    @property
    def money(self) -> Money:
        return Money.from_minor_units(self.amount, self.currency)


class UpdateOrderRequest(RequestBody):
    """Body of ``PATCH orders/{order_id}``, e.g. to mark an order shipped."""

    status: Optional[str] = None
    tracktrace_code: Optional[str] = None
    carrier: Optional[str] = None
    ship_date: Optional[str] = None
    invoice_id: Optional[str] = None
    reason: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        return value.value if hasattr(value, "value") else value
