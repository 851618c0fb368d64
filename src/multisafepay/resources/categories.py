"""Categories resource for the MultiSafepay SDK."""
from __future__ import annotations

from typing import List

from ..models.category import Category
from .base import AsyncBaseResource, SyncBaseResource


class AsyncCategoriesResource(AsyncBaseResource):
    """Async resource for merchant categories."""

    async def list(self) -> List[Category]:
        response = await self._get("categories")
        return [Category.model_validate(item) for item in response.data or []]


class CategoriesResource(SyncBaseResource):
    """Sync resource for merchant categories."""

    def list(self) -> List[Category]:
        response = self._get("categories")
        return [Category.model_validate(item) for item in response.data or []]


__all__ = [
    "AsyncCategoriesResource",
    "CategoriesResource",
]
