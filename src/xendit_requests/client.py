"""Xendit HTTP client: the single chokepoint for outbound API calls.

Builds the request, sends it through httpx, and turns the response into
typed records or a structured error.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from xendit_requests import wire
from xendit_requests.config import XenditConfig
from xendit_requests.exceptions import ApiError, TransportError, XenditError
from xendit_requests.models import Invoices, RecurringPayments

logger = logging.getLogger(__name__)

METHODS = frozenset({"GET", "POST", "PATCH", "DELETE", "PUT"})


def _error_from_response(response: httpx.Response) -> XenditError:
    """Map a non-2xx response to ApiError, or TransportError if the body is not a JSON object."""
    try:
        body = wire.loads(response.text)
    except json.JSONDecodeError:
        return TransportError(
            "non-JSON error response", response.status_code, response.text
        )
    if not isinstance(body, dict):
        return TransportError(
            "unexpected error response shape", response.status_code, response.text
        )
    return ApiError(
        status_code=response.status_code,
        error_code=body.get("error_code"),
        message=body.get("message"),
        body=body,
    )


class XenditClient:
    """Synchronous Xendit API client.

    Usage:
        client = XenditClient(XenditConfig(api_key="xnd_development_..."))
        payment = client.recurring_payments.get("5e0cb0bbf4d38b20d5421b72")

    The client holds only read-only configuration. Each call opens its own
    httpx.Client, so one instance can be shared between threads.
    """

    def __init__(self, config: XenditConfig, **httpx_kwargs: Any):
        """
        Args:
            config: API key, base URL and default headers.
            **httpx_kwargs: Additional kwargs passed to httpx.Client.
        """
        self.config = config
        self._httpx_kwargs = {"timeout": config.timeout, **httpx_kwargs}
        self.recurring_payments = RecurringPayments(self)
        self.invoices = Invoices(self)

    @classmethod
    def from_env(cls, **httpx_kwargs: Any) -> XenditClient:
        """Build a client from XENDIT_* environment variables."""
        return cls(XenditConfig.from_env(), **httpx_kwargs)

    def url(self, path: str) -> str:
        """Resolve an API path against the configured base URL."""
        if path.startswith("/"):
            return f"{self.config.get_base_url()}{path}"
        return path

    def _merge_headers(self, headers: Mapping[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(self.config.headers())
        if headers:
            merged.update(headers)
        return merged

    def request(
        self,
        method: str,
        url: str,
        result_type: Any,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and decode the response into ``result_type``.

        Args:
            method: One of GET, POST, PATCH, DELETE, PUT.
            url: Absolute URL, or a path starting with "/" under the base URL.
            result_type: Record class, or ``list[RecordClass]`` for array responses.
            params: Request body. Ignored for GET; put query strings in ``url``.
            headers: Per-call headers, overriding the configured defaults.

        Raises:
            ApiError: The API returned a JSON error body.
            TransportError: Network failure, or a body that is not the expected JSON.
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        target = self.url(url)
        content = None
        if params is not None and method != "GET":
            content = wire.dumps(dict(params))

        logger.debug("Sending %s %s", method, target)
        try:
            with httpx.Client(**self._httpx_kwargs) as client:
                response = client.request(
                    method, target, headers=self._merge_headers(headers), content=content
                )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, target, e)
            raise TransportError(str(e)) from e

        logger.debug("%s %s -> %s", method, target, response.status_code)

        if not response.is_success:
            error = _error_from_response(response)
            logger.warning("%s %s returned %s: %s", method, target, response.status_code, error)
            raise error

        try:
            payload = wire.loads(response.text)
        except json.JSONDecodeError as e:
            raise TransportError(
                "malformed JSON response body", response.status_code, response.text
            ) from e

        try:
            return wire.decode(result_type, payload)
        except (TypeError, ValueError) as e:
            raise TransportError(str(e), response.status_code, response.text) from e

    def get(self, url: str, result_type: Any, **kwargs: Any) -> Any:
        return self.request("GET", url, result_type, **kwargs)

    def post(self, url: str, result_type: Any, **kwargs: Any) -> Any:
        return self.request("POST", url, result_type, **kwargs)

    def patch(self, url: str, result_type: Any, **kwargs: Any) -> Any:
        return self.request("PATCH", url, result_type, **kwargs)

    def put(self, url: str, result_type: Any, **kwargs: Any) -> Any:
        return self.request("PUT", url, result_type, **kwargs)

    def delete(self, url: str, result_type: Any, **kwargs: Any) -> Any:
        return self.request("DELETE", url, result_type, **kwargs)
