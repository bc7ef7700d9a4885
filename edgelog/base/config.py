"""
Pydantic configuration model for the configuration API client.

Validates the client config at initialization time instead of silently
passing bad values to the HTTP layer.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_BASE_URL = "https://api.fastly.com"


class ClientConfig(BaseModel):
    """Configuration for the configuration API client.

    Values are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (FASTLY_API_KEY, FASTLY_API_URL).
    3. Defaults (public API URL, no key, 30 second timeout).
    """

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = Field(default=None, description="API token sent as the Fastly-Key header")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing values."""
        values = dict(values)
        if not values.get("api_key"):
            values["api_key"] = os.environ.get("FASTLY_API_KEY")
        if not values.get("base_url"):
            values["base_url"] = os.environ.get("FASTLY_API_URL") or DEFAULT_BASE_URL
        return values

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def validate_config(config: dict | ClientConfig) -> ClientConfig:
    """Validate and return a typed client config.

    Args:
        config: Raw configuration dictionary, or an already-validated model.

    Returns:
        A validated :class:`ClientConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    if isinstance(config, ClientConfig):
        return config
    return ClientConfig(**config)


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "validate_config",
]
