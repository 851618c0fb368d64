"""
Logging utilities for the MultiSafepay SDK with sensitive data masking.

The SDK logs through standard module loggers and never installs handlers.
Request and response logging masks the API key header as well as card and
bank account data in request bodies.

Usage:
    from multisafepay.logging import get_logger, mask_headers, mask_sensitive_data

    logger = get_logger(__name__)
    logger.debug("Sending %s", mask_sensitive_data(body))
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

MASK_PATTERN = "***"

SENSITIVE_FIELDS = frozenset({
    "api_key",
    "card_number",
    "cvc",
    "card_cvc",
    "account_holder_iban",
    "bank_account",
    "password",
    "token",
})

SENSITIVE_HEADERS = frozenset({
    "api_key",
    "authorization",
    "cookie",
    "set-cookie",
})


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``multisafepay`` hierarchy."""
    if not name.startswith("multisafepay"):
        name = f"multisafepay.{name}"
    return logging.getLogger(name)


def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, keeping the last characters visible.

    Args:
        value: The value to mask
        show_chars: Number of trailing characters to keep

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN
    return f"{MASK_PATTERN}{value[-show_chars:]}"


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Mask sensitive HTTP headers.

    Args:
        headers: HTTP headers mapping

    Returns:
        Headers with sensitive values masked
    """
    result = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            result[key] = mask_value(value)
        else:
            result[key] = value
    return result


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive values in a JSON-like structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)
        additional_fields: Additional field names to mask

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            if key in SENSITIVE_FIELDS or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(value, additional_fields, _depth + 1, _max_depth)
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth)
            for item in data
        )

    return data


__all__ = [
    "MASK_PATTERN",
    "get_logger",
    "mask_headers",
    "mask_sensitive_data",
    "mask_value",
]
