"""Validated scalar value objects used inside request bodies.

Each type is a plain ``str`` annotated with validators, so it serializes as
the string the API expects. Invalid input raises
:class:`~multisafepay.models.errors.ValidationError`.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator

from .errors import ValidationError

_EXPIRY_FORMATS = ("%m/%y", "%m/%Y", "%m-%y", "%m-%Y", "%Y-%m", "%Y-%m-%d", "%m%y")


def luhn_valid(digits: str) -> bool:
    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_card_number(value: Any) -> str:
    number = re.sub(r"[\s-]", "", str(value))
    if not number.isdigit() or not 12 <= len(number) <= 19:
        raise ValidationError("Card number must contain 12 to 19 digits", field="card_number")
    if not luhn_valid(number):
        raise ValidationError("Card number fails the Luhn check", field="card_number")
    return number


def validate_cvc(value: Any) -> str:
    cvc = str(value).strip()
    if not cvc.isdigit() or len(cvc) not in (3, 4):
        raise ValidationError("CVC must be 3 or 4 digits", field="cvc")
    return cvc


def validate_expiry_date(value: Any) -> str:
    """Normalize an expiry date to the ``mmyy`` form the API expects."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%m%y")
    text = str(value).strip()
    for fmt in _EXPIRY_FORMATS:
        try:
            return datetime.strptime(text, fmt).strftime("%m%y")
        except ValueError:
            continue
    raise ValidationError(f"Unrecognized expiry date: {text!r}", field="card_expiry_date")


def validate_iban(value: Any) -> str:
    iban = re.sub(r"\s", "", str(value)).upper()
    if not re.fullmatch(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{11,30}", iban):
        raise ValidationError("Malformed IBAN", field="iban")
    rearranged = iban[4:] + iban[:4]
    numeric = "".join(str(int(char, 36)) for char in rearranged)
    if int(numeric) % 97 != 1:
        raise ValidationError("IBAN checksum mismatch", field="iban")
    return iban


def validate_country(value: Any) -> str:
    code = str(value).strip().upper()
    if len(code) != 2 or not code.isalpha():
        raise ValidationError("Country must be an ISO 3166-1 alpha-2 code", field="country")
    return code


def validate_email(value: Any) -> str:
    email = str(value).strip()
    if not re.fullmatch(r"[^@\s]+@[^@\s]+\.[^@\s]+", email):
        raise ValidationError(f"Invalid email address: {email!r}", field="email")
    return email


CardNumber = Annotated[str, BeforeValidator(validate_card_number)]
Cvc = Annotated[str, BeforeValidator(validate_cvc)]
ExpiryDate = Annotated[str, BeforeValidator(validate_expiry_date)]
Iban = Annotated[str, BeforeValidator(validate_iban)]
Country = Annotated[str, BeforeValidator(validate_country)]
Email = Annotated[str, BeforeValidator(validate_email)]


class Gender(str, Enum):
    """Salutation accepted by the pay-after-delivery gateways."""

    MR = "mr"
    MRS = "mrs"
    MISS = "miss"
