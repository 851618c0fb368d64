"""
Resources for the MultiSafepay SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .categories import AsyncCategoriesResource, CategoriesResource
from .gateways import AsyncGatewaysResource, GatewaysResource
from .issuers import AsyncIssuersResource, IssuersResource
from .transactions import AsyncTransactionsResource, TransactionsResource

__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "AsyncCategoriesResource",
    "CategoriesResource",
    "AsyncGatewaysResource",
    "GatewaysResource",
    "AsyncIssuersResource",
    "IssuersResource",
    "AsyncTransactionsResource",
    "TransactionsResource",
]
