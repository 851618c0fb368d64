"""Base models for the MultiSafepay SDK."""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, PrivateAttr

from .errors import StrictModeError


def remove_none(data: Any) -> Any:
    """Recursively drop ``None`` values from dicts and lists."""
    if isinstance(data, dict):
        return {key: remove_none(value) for key, value in data.items() if value is not None}
    if isinstance(data, list):
        return [remove_none(item) for item in data if item is not None]
    return data


class MultiSafepayModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultiSafepayModel":
        """Create model from dictionary."""
        return cls.model_validate(data)


class RequestBody(MultiSafepayModel):
    """A JSON request body.

    Fields beyond the declared schema may be added with keyword arguments or
    :meth:`add_data` and are sent as-is. With strict mode enabled,
    :meth:`get_data` refuses to serialize a body (or any nested body) that
    carries such fields.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )

    _strict_mode: bool = PrivateAttr(default=False)

    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    def set_strict_mode(self, strict_mode: bool) -> "RequestBody":
        self._strict_mode = strict_mode
        return self

    def add_data(self, data: Mapping[str, Any]) -> "RequestBody":
        """Merge raw key/value pairs into the body."""
        for key, value in data.items():
            setattr(self, key, value)
        return self

    def unexpected_fields(self, prefix: str = "") -> list[str]:
        """List undeclared fields of this body and of nested bodies, dotted."""
        found = [f"{prefix}{key}" for key in (self.model_extra or {})]
        for name in type(self).model_fields:
            found.extend(_nested_unexpected(getattr(self, name), f"{prefix}{name}."))
        return found

    def get_data(self) -> dict[str, Any]:
        """Return the JSON-ready payload.

        Raises:
            StrictModeError: strict mode is on and undeclared fields are present
        """
        if self._strict_mode:
            unexpected = self.unexpected_fields()
            if unexpected:
                raise StrictModeError(unexpected)
        return remove_none(self.model_dump(mode="json", by_alias=True, exclude_none=True))


def _nested_unexpected(value: Any, prefix: str) -> list[str]:
    if isinstance(value, RequestBody):
        return value.unexpected_fields(prefix)
    if isinstance(value, (list, tuple)):
        found: list[str] = []
        for index, item in enumerate(value):
            found.extend(_nested_unexpected(item, f"{prefix}{index}."))
        return found
    return []
