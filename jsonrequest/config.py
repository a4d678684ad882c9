"""Configuration management for jsonrequest."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class JSONRequestConfig(BaseModel):
    """Immutable settings read by every request.

    A request snapshots the configuration it was submitted with, so
    replacing a client's configuration never affects calls in flight.
    """

    # Timeouts, in seconds
    request_timeout: float = Field(default=30.0, gt=0)
    resource_timeout: float = Field(default=30.0, gt=0)

    # Session defaults
    user_agent: Optional[str] = Field(default=None)
    check_reachability: bool = Field(default=True)

    # Tracing
    log: Optional[Callable[[str], None]] = Field(default=None)
    sensitive_headers: frozenset[str] = Field(
        default=frozenset({"Authorization", "Proxy-Authorization"})
    )

    class Config:
        frozen = True

    @classmethod
    def from_environment(cls, **overrides: Any) -> "JSONRequestConfig":
        """Create configuration from environment variables.

        Recognized variables are ``JSONREQUEST_REQUEST_TIMEOUT``,
        ``JSONREQUEST_RESOURCE_TIMEOUT``, ``JSONREQUEST_USER_AGENT`` and
        ``JSONREQUEST_CHECK_REACHABILITY``. Keyword arguments take precedence.
        """
        config_data: dict[str, Any] = {}

        if value := os.getenv("JSONREQUEST_REQUEST_TIMEOUT"):
            config_data["request_timeout"] = value
        if value := os.getenv("JSONREQUEST_RESOURCE_TIMEOUT"):
            config_data["resource_timeout"] = value
        if value := os.getenv("JSONREQUEST_USER_AGENT"):
            config_data["user_agent"] = value
        config_data["check_reachability"] = _get_bool("JSONREQUEST_CHECK_REACHABILITY", True)

        config_data.update(overrides)
        return cls(**config_data)

    def with_overrides(self, **changes: Any) -> "JSONRequestConfig":
        """Return a validated copy with ``changes`` applied."""
        current = {name: getattr(self, name) for name in type(self).model_fields}
        return type(self)(**{**current, **changes})


def _get_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Global configuration instance
_config: Optional[JSONRequestConfig] = None


def get_config(*, reload: bool = False) -> JSONRequestConfig:
    """Get the default configuration, built from the environment once."""
    global _config

    if _config is None or reload:
        _config = JSONRequestConfig.from_environment()

    return _config


def load_dotenv_for_sdk(path: Optional[Path] = None, *, override: bool = False) -> bool:
    """Load environment variables from a .env file.

    Defaults to ``.env`` in the current working directory. Returns True if a
    file was found and loaded. Call :func:`get_config` with ``reload=True``
    afterwards to pick up the new values.
    """
    if path is None:
        path = Path.cwd() / ".env"

    if not path.exists():
        return False

    return load_dotenv(path, override=override)

