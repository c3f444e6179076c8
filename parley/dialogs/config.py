"""Shared constants and transport configuration.

This module centralizes the page size used by the dialog iterator and the
settings consumed by the HTTP gateway transport so the runtime modules can
stay small and focused.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

# Largest page the server hands out for a single dialogs request
MAX_PAGE_SIZE = 100

# Seconds before an HTTP gateway call is abandoned
DEFAULT_TIMEOUT = 30.0

GATEWAY_URL_ENV = "PARLEY_GATEWAY_URL"
GATEWAY_TIMEOUT_ENV = "PARLEY_GATEWAY_TIMEOUT"


@dataclass(frozen=True)
class TransportConfig:
    """Settings for the HTTP gateway transport.

    Attributes:
        base_url: Gateway root; method names are appended as path segments
        timeout: Total timeout per call in seconds
        headers: Extra headers sent with every call (e.g. an API token)
    """

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("TransportConfig requires a non-empty base_url")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @classmethod
    def from_env(cls, **overrides: object) -> TransportConfig:
        """Build a config from ``PARLEY_GATEWAY_*`` environment variables.

        Keyword arguments take precedence over the environment.
        """
        values: dict[str, object] = {}
        if url := os.environ.get(GATEWAY_URL_ENV):
            values["base_url"] = url
        if timeout := os.environ.get(GATEWAY_TIMEOUT_ENV):
            values["timeout"] = float(timeout)
        values.update(overrides)
        if "base_url" not in values:
            raise ValueError(f"{GATEWAY_URL_ENV} is not set and no base_url was given")
        return cls(**values)  # type: ignore[arg-type]
