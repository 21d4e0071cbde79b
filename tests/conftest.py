"""Shared fixtures: an in-memory stand-in for the validator web service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

from html5check import Html5Assertions, ValidatorClient

VALIDATOR_URL = "http://validator.test/"


@dataclass
class FakeValidator:
    """Answers like a Nu validator; ``messages`` is what the next POST returns."""

    messages: list[dict[str, Any]] = field(default_factory=list)
    reachable: bool = True
    body: str | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if not self.reachable:
            raise httpx.ConnectError("Connection refused", request=request)
        if request.method == "GET":
            return httpx.Response(200, text="<!DOCTYPE html><title>Validator</title>")
        if self.body is not None:
            return httpx.Response(200, text=self.body)
        return httpx.Response(200, json={"messages": self.messages})

    @property
    def posts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    @property
    def gets(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    def posted_form(self, index: int = -1) -> dict[str, str]:
        fields = parse_qs(self.posts[index].content.decode(), keep_blank_values=True)
        return {key: values[0] for key, values in fields.items()}


def error(message: str, last_line: int = 1) -> dict[str, Any]:
    return {"type": "error", "message": message, "lastLine": last_line}


def info(message: str, last_line: int = 1) -> dict[str, Any]:
    return {"type": "info", "message": message, "lastLine": last_line}


@dataclass
class FakePageResponse:
    status_code: int
    text: str


@dataclass
class FakePageClient:
    """Stands in for an application test client."""

    pages: dict[str, FakePageResponse] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)

    def request(self, method: str, url: str) -> FakePageResponse:
        self.calls.append((method, url))
        return self.pages.get(url, FakePageResponse(404, "Not Found"))


@pytest.fixture
def fake_validator() -> FakeValidator:
    return FakeValidator()


@pytest.fixture
def validator_client(fake_validator: FakeValidator):
    http_client = httpx.Client(transport=httpx.MockTransport(fake_validator.handler))
    client = ValidatorClient(VALIDATOR_URL, http_client=http_client)
    yield client
    http_client.close()


@pytest.fixture
def page_client() -> FakePageClient:
    return FakePageClient()


@pytest.fixture
def assertions(validator_client: ValidatorClient, page_client: FakePageClient) -> Html5Assertions:
    return Html5Assertions(validator_client, page_client)
