"""Client configuration: API key, base URL and default headers."""

from __future__ import annotations

import base64
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from xendit_requests.exceptions import ConfigError

DEFAULT_BASE_URL = "https://api.xendit.co"
DEFAULT_TIMEOUT = 60.0
USER_AGENT = "xendit-requests/0.1.0"


def _is_real_value(val: str | None) -> bool:
    """Check if an env var value is a real setting (not a placeholder)."""
    if not val:
        return False
    return not val.startswith("${")


@dataclass(frozen=True)
class XenditConfig:
    """Connection settings shared by every request a client sends.

    Args:
        api_key: Secret API key. Sent as the Basic auth username.
        base_url: API root, without trailing slash.
        timeout: Per-request timeout in seconds.
        default_headers: Extra headers sent with every request
            (e.g. ``for-user-id`` for sub-account calls).
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    default_headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("api_key must not be empty")
        if not self.base_url:
            raise ConfigError("base_url must not be empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(
            self, "default_headers", MappingProxyType(dict(self.default_headers))
        )

    def get_base_url(self) -> str:
        return self.base_url

    @property
    def authorization_header(self) -> str:
        token = base64.b64encode(f"{self.api_key}:".encode()).decode()
        return f"Basic {token}"

    def headers(self) -> dict[str, str]:
        """Headers applied to every request, before per-call overrides."""
        headers = {
            "Authorization": self.authorization_header,
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        headers.update(self.default_headers)
        return headers

    def __repr__(self) -> str:
        return (
            f"XenditConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> XenditConfig:
        """Build a config from XENDIT_API_KEY, XENDIT_BASE_URL and XENDIT_TIMEOUT.

        Raises:
            ConfigError: If no API key is set or the timeout is not a number.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("XENDIT_API_KEY", "")
        if not _is_real_value(api_key):
            raise ConfigError("XENDIT_API_KEY must be set")

        base_url = env.get("XENDIT_BASE_URL", "")
        if not _is_real_value(base_url):
            base_url = DEFAULT_BASE_URL

        timeout_raw = env.get("XENDIT_TIMEOUT", "")
        timeout = DEFAULT_TIMEOUT
        if _is_real_value(timeout_raw):
            try:
                timeout = float(timeout_raw)
            except ValueError as exc:
                raise ConfigError(
                    f"XENDIT_TIMEOUT must be a number, got '{timeout_raw}'"
                ) from exc

        return cls(api_key=api_key, base_url=base_url, timeout=timeout)
