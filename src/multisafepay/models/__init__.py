"""MultiSafepay SDK Models."""
from .base import MultiSafepayModel, RequestBody
from .category import Category
from .errors import (
    ApiError,
    InvalidApiKeyError,
    MultiSafepayError,
    StrictModeError,
    ValidationError,
)
from .gateway import Gateway, GatewayCode, OrderType
from .gateway_info import Account, Creditcard, GatewayInfo, Ideal, Meta
from .issuer import Issuer
from .money import Money
from .order import (
    CartItem,
    CustomerDetails,
    DeliveryDetails,
    OrderRequest,
    PaymentOptions,
    PluginDetails,
    SecondChance,
    ShoppingCart,
    UpdateOrderRequest,
)
from .refund import Refund, RefundRequest
from .transaction import OrderStatus, PaymentDetails, Transaction
from .value_objects import Gender

__all__ = [
    "MultiSafepayModel",
    "RequestBody",
    "Category",
    "ApiError",
    "InvalidApiKeyError",
    "MultiSafepayError",
    "StrictModeError",
    "ValidationError",
    "Gateway",
    "GatewayCode",
    "OrderType",
    "GatewayInfo",
    "Account",
    "Creditcard",
    "Ideal",
    "Meta",
    "Issuer",
    "Money",
    "CartItem",
    "CustomerDetails",
    "DeliveryDetails",
    "OrderRequest",
    "PaymentOptions",
    "PluginDetails",
    "SecondChance",
    "ShoppingCart",
    "UpdateOrderRequest",
    "Refund",
    "RefundRequest",
    "OrderStatus",
    "PaymentDetails",
    "Transaction",
    "Gender",
]
