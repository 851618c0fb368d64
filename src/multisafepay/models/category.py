"""Merchant category model for the MultiSafepay SDK."""
from __future__ import annotations

from pydantic import field_validator

from .base import MultiSafepayModel


class Category(MultiSafepayModel):
    """A merchant category as listed by the ``categories`` endpoint."""

    code: str
    description: str

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value
