"""Shared mock transport and client fixtures."""

from __future__ import annotations

import json

import httpx
import pytest

from xendit_requests.client import XenditClient
from xendit_requests.config import XenditConfig

BASE_URL = "https://api.xendit.test"


class RecordingTransport(httpx.BaseTransport):
    """Returns canned responses and records every request it receives."""

    def __init__(self, status_code: int = 200, json_body=None, text: str | None = None):
        self.status_code = status_code
        self.json_body = {} if json_body is None and text is None else json_body
        self.text = text
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def config() -> XenditConfig:
    return XenditConfig(api_key="xnd_development_test", base_url=BASE_URL)


@pytest.fixture
def make_client(config):
    def _make(transport: httpx.BaseTransport) -> XenditClient:
        return XenditClient(config, transport=transport)

    return _make
