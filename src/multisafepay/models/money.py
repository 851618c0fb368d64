"""Money value object for the MultiSafepay SDK."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict

from pydantic import ConfigDict, field_validator

from .base import MultiSafepayModel
from .errors import ValidationError

# Currencies the API settles without a minor unit. Everything else uses cents.
DECIMAL_PLACES: Dict[str, int] = {
    "ISK": 0,
    "JPY": 0,
    "KRW": 0,
}


def decimal_places(currency: str) -> int:
    return DECIMAL_PLACES.get(currency.upper(), 2)


class Money(MultiSafepayModel):
    """An amount in major units together with its ISO 4217 currency.

    Example:
        ```python
        Money(amount=Decimal("10.00"), currency="EUR").minor_units  # 1000
        Money.from_minor_units(1000, "EUR").amount  # Decimal("10.00")
        ```
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency: str

    @field_validator("currency")
    @classmethod
    def _validate_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 3 or not value.isalpha():
            raise ValidationError(f"Invalid ISO 4217 currency code: {value!r}", field="currency")
        return value

    @property
    def minor_units(self) -> int:
        places = decimal_places(self.currency)
        scaled = (self.amount * (Decimal(10) ** places)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(scaled)

    @classmethod
    def from_minor_units(cls, amount: int, currency: str) -> "Money":
        places = decimal_places(currency)
        major = (Decimal(amount) / (Decimal(10) ** places)).quantize(Decimal(1).scaleb(-places))
        return cls(amount=major, currency=currency)

    @classmethod
    def of(cls, amount: "Decimal | int | str", currency: str) -> "Money":
        """Shorthand constructor accepting a string or integer amount."""
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise ValidationError(f"Invalid amount: {amount!r}", field="amount") from None
        return cls(amount=value, currency=currency)

    def __str__(self) -> str:
        places = decimal_places(self.currency)
        return f"{self.amount.quantize(Decimal(1).scaleb(-places))} {self.currency}"
