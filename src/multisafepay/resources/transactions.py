"""
Transactions resource for the MultiSafepay SDK.

This module provides both async and sync interfaces for order operations.
"""
from __future__ import annotations

from typing import Any, Dict, Union
from urllib.parse import quote

from ..models.money import Money
from ..models.order import OrderRequest, UpdateOrderRequest
from ..models.refund import Refund, RefundRequest
from ..models.transaction import OrderStatus, Transaction
from .base import AsyncBaseResource, SyncBaseResource

OrderRef = Union[Transaction, str]


def _order_path(order: OrderRef, *suffix: str) -> str:
    order_id = order.order_id if isinstance(order, Transaction) else order
    return "/".join(["orders", quote(str(order_id), safe=""), *suffix])


class AsyncTransactionsResource(AsyncBaseResource):
    """Async resource for order operations.

    Example:
        ```python
        async with AsyncMultiSafepayClient(api_key="...") as client:
            transaction = await client.transactions.create(order)
            transaction = await client.transactions.get(transaction.order_id)
            await client.transactions.refund(transaction, Money.of("5.00", "EUR"))
        ```
    """

    async def create(self, order: OrderRequest) -> Transaction:
        """Create an order.

        Args:
            order: The order to create

        Returns:
            Transaction with the order id and, for redirect orders, the payment URL
        """
        response = await self._post("orders", order)
        return Transaction.model_validate(response.data)

    async def get(self, order_id: str) -> Transaction:
        """Get the full state of an order.

        Args:
            order_id: The merchant order id

        Returns:
            Transaction details
        """
        response = await self._get(_order_path(order_id))
        return Transaction.model_validate(response.data)

    async def refund(self, transaction: OrderRef, money: Money, description: str = "") -> Refund:
        """Refund (part of) an order.

        Args:
            transaction: The transaction, or its order id
            money: Amount and currency to refund
            description: Refund description (sent even when empty)

        Returns:
            Refund with the refund and transaction ids
        """
        body = RefundRequest.from_money(money, description)
        response = await self._post(_order_path(transaction, "refunds"), body)
        return Refund.model_validate(response.data)

    async def update(
        self,
        order_id: str,
        status: Union[OrderStatus, str, None] = None,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Update an order, e.g. ``update("1001", OrderStatus.SHIPPED, tracktrace_code="3S...")``.

        Returns:
            The ``data`` member of the response
        """
        body = UpdateOrderRequest(status=status, **fields)
        response = await self._patch(_order_path(order_id), body)
        return response.data


class TransactionsResource(SyncBaseResource):
    """Sync resource for order operations.

    Example:
        ```python
        with MultiSafepayClient(api_key="...") as client:
            transaction = client.transactions.create(order)
            transaction = client.transactions.get(transaction.order_id)
            client.transactions.refund(transaction, Money.of("5.00", "EUR"))
        ```
    """

    def create(self, order: OrderRequest) -> Transaction:
        """Create an order.

        Args:
            order: The order to create

        Returns:
            Transaction with the order id and, for redirect orders, the payment URL
        """
        response = self._post("orders", order)
        return Transaction.model_validate(response.data)

    def get(self, order_id: str) -> Transaction:
        """Get the full state of an order.

        Args:
            order_id: The merchant order id

        Returns:
            Transaction details
        """
        response = self._get(_order_path(order_id))
        return Transaction.model_validate(response.data)

    def refund(self, transaction: OrderRef, money: Money, description: str = "") -> Refund:
        """Refund (part of) an order.

        Args:
            transaction: The transaction, or its order id
            money: Amount and currency to refund
            description: Refund description (sent even when empty)

        Returns:
            Refund with the refund and transaction ids
        """
        body = RefundRequest.from_money(money, description)
        response = self._post(_order_path(transaction, "refunds"), body)
        return Refund.model_validate(response.data)

    def update(
        self,
        order_id: str,
        status: Union[OrderStatus, str, None] = None,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Update an order, e.g. ``update("1001", OrderStatus.SHIPPED, tracktrace_code="3S...")``.

        Returns:
            The ``data`` member of the response
        """
        body = UpdateOrderRequest(status=status, **fields)
        response = self._patch(_order_path(order_id), body)
        return response.data


__all__ = [
    "AsyncTransactionsResource",
    "TransactionsResource",
]
