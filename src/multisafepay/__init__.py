"""
MultiSafepay Python SDK

A client for the MultiSafepay payment API.
"""

from .client import AsyncMultiSafepayClient, MultiSafepayClient
from .config import MultiSafepaySettings
from .models.errors import (
    ApiError,
    InvalidApiKeyError,
    MultiSafepayError,
    StrictModeError,
    ValidationError,
)
from .models.base import RequestBody
from .models.gateway import Gateway, GatewayCode, OrderType
from .models.gateway_info import Account, Creditcard, GatewayInfo, Ideal, Meta
from .models.issuer import Issuer
from .models.category import Category
from .models.money import Money
from .models.order import (
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
from .models.refund import Refund, RefundRequest
from .models.transaction import OrderStatus, Transaction
from .response import Pager, Response

__version__ = "0.1.0"

__all__ = [
    # Clients
    "MultiSafepayClient",
    "AsyncMultiSafepayClient",
    "MultiSafepaySettings",
    # Errors
    "MultiSafepayError",
    "ApiError",
    "InvalidApiKeyError",
    "StrictModeError",
    "ValidationError",
    # Request/response
    "RequestBody",
    "Response",
    "Pager",
    # Gateways
    "Gateway",
    "GatewayCode",
    "OrderType",
    "GatewayInfo",
    "Account",
    "Creditcard",
    "Ideal",
    "Meta",
    "Issuer",
    "Category",
    # Orders
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
    "Transaction",
]
