"""Error models for the MultiSafepay SDK."""
from __future__ import annotations

import json
from typing import Any, Optional


class MultiSafepayError(Exception):
    """Base exception for the MultiSafepay SDK."""

    default_code = "MULTISAFEPAY_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidApiKeyError(MultiSafepayError):
    """Raised before any network call when the API key is malformed."""

    default_code = "INVALID_API_KEY"

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message)


class StrictModeError(MultiSafepayError):
    """A request body carries fields outside its schema while strict mode is on."""

    default_code = "STRICT_MODE"

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Unexpected fields in request body: {', '.join(sorted(fields))}",
            details={"fields": sorted(fields)},
        )
        self.fields = sorted(fields)


class ValidationError(MultiSafepayError):
    """Validation error."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field})
        self.field = field


class ApiError(MultiSafepayError):
    """Error reported by the API, or a response that could not be parsed.

    Carries the raw response body and the request context (headers with the
    API key masked, request body or query parameters) for diagnostics.
    """

    default_code = "API_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
        raw: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details={"status_code": status_code, "error_code": error_code},
        )
        self.status_code = status_code
        self.error_code = error_code
        self.raw = raw
        self.context = context or {}

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: dict[str, Any],
        raw: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> "ApiError":
        """Create ApiError from a decoded error envelope."""
        message = body.get("error_info") or body.get("message")
        if not message:
            message = f"Unknown API error (HTTP {status_code})"
        error_code = body.get("error_code")
        if isinstance(error_code, str) and error_code.isdigit():
            error_code = int(error_code)
        return cls(
            message=str(message),
            status_code=status_code,
            error_code=error_code,
            raw=raw,
            context=context,
        )

    def __str__(self) -> str:
        if self.error_code is not None:
            return f"[{self.error_code}] {self.message}"
        return f"[{self.code}] {self.message}"

    def get_details(self) -> str:
        """Render the error together with its request context."""
        lines = [str(self)]
        if self.status_code is not None:
            lines.append(f"HTTP status: {self.status_code}")
        for key, value in self.context.items():
            if not isinstance(value, str):
                value = json.dumps(value, indent=4, default=str)
            lines.append(f"{key}: {value}")
        if self.raw:
            lines.append(f"response: {self.raw}")
        return "\n".join(lines)
