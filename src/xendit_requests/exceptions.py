"""Xendit client exceptions."""

from __future__ import annotations

from typing import Any


class XenditError(Exception):
    """Base exception for xendit-requests."""


class ApiError(XenditError):
    """The API answered with a structured error body."""

    def __init__(
        self,
        status_code: int,
        error_code: str | None,
        message: str | None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.body = body
        super().__init__(f"Xendit API error ({status_code}) {error_code}: {message}")


class TransportError(XenditError):
    """Network failure, or a response that is not the JSON we expect."""

    def __init__(self, reason: str, status_code: int | None = None, body: str | None = None):
        self.reason = reason
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"Transport error: {reason}")
        else:
            super().__init__(f"Transport error ({status_code}): {reason}")


class ValidationError(XenditError):
    """Caller-side parameter check failed before a request was sent."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for {field}: {reason}")


class ConfigError(XenditError):
    """Client configuration is missing or invalid."""
