"""Configuration surface for the MultiSafepay SDK."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MultiSafepaySettings(BaseSettings):
    """Client settings loaded from ``MULTISAFEPAY_*`` environment variables.

    Example:
        MULTISAFEPAY_API_KEY=...  MULTISAFEPAY_ENVIRONMENT=live
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTISAFEPAY_",
        env_file=".env",
        extra="ignore",
    )

    api_key: Optional[str] = None
    environment: Literal["test", "live"] = "test"
    locale: str = "en_US"
    strict_mode: bool = False
    timeout: float = 30.0

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_environment(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "live"
