"""Parsed API responses."""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .logging import get_logger
from .models.base import MultiSafepayModel
from .models.errors import ApiError

logger = get_logger(__name__)


class Pager(MultiSafepayModel):
    """Cursor information returned by list endpoints."""

    after: Optional[str] = None
    before: Optional[str] = None
    limit: Optional[int] = None

    @classmethod
    def from_envelope(cls, pager: Dict[str, Any]) -> "Pager":
        cursor = pager.get("cursor") or {}
        return cls(
            after=cursor.get("after", pager.get("after")),
            before=cursor.get("before", pager.get("before")),
            limit=pager.get("limit"),
        )


class Response:
    """A successful API response envelope.

    The API wraps every payload as ``{"success": true, "data": ...}``; list
    endpoints add a ``pager``. Construct through :meth:`with_json`, which
    raises :class:`ApiError` for anything that is not a success envelope.

    Attributes:
        body: The decoded envelope
        context: Request diagnostics (masked headers, request body or params)
        raw: The raw response text
        status_code: HTTP status of the response
    """

    def __init__(
        self,
        body: Dict[str, Any],
        context: Optional[Dict[str, Any]] = None,
        raw: Optional[str] = None,
        status_code: int = 200,
    ) -> None:
        self.body = body
        self.context = context or {}
        self.raw = raw
        self.status_code = status_code

    @classmethod
    def with_json(
        cls,
        raw: str,
        context: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
    ) -> "Response":
        """Parse a raw JSON response.

        Raises:
            ApiError: the body is not a JSON object, reports ``success: false``,
                or came with an HTTP error status
        """
        context = context or {}
        try:
            body = json.loads(raw)
        except ValueError:
            body = None
        if not isinstance(body, dict):
            logger.warning("Unparsable response (HTTP %s)", status_code)
            raise ApiError(
                "Unable to parse response",
                status_code=status_code,
                raw=raw,
                context=context,
            )

        if not 200 <= status_code < 300 or body.get("success") is False:
            error = ApiError.from_response(status_code, body, raw=raw, context=context)
            logger.warning(
                "API error (HTTP %s, code %s): %s",
                status_code,
                error.error_code,
                error.message,
            )
            raise error

        return cls(body, context=context, raw=raw, status_code=status_code)

    @property
    def data(self) -> Any:
        """The ``data`` member of the envelope (``{}`` when absent)."""
        data = self.body.get("data")
        return {} if data is None else data

    @property
    def pager(self) -> Optional[Pager]:
        pager = self.body.get("pager")
        if not isinstance(pager, dict):
            return None
        return Pager.from_envelope(pager)

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, success={self.body.get('success')!r})"
