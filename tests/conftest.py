"""Shared fakes for profile and schema endpoints."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Mapping
from typing import Any

import pytest


class FakeResponse:
    """In-memory stand-in for an HTTP response."""

    def __init__(self, status_code: int, body: Any = None, *, text: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return copy.deepcopy(self._body)


class FakeHttpClient:
    """HTTP client serving canned responses keyed by URL."""

    def __init__(self, routes: Mapping[str, FakeResponse]) -> None:
        self.routes = dict(routes)
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> FakeResponse:
        self.requests.append((url, dict(headers or {})))
        return self.routes.get(url, FakeResponse(404, {"error": "not found"}))

    def close(self) -> None:
        self.closed = True


class FakeCompiler:
    """Compiler recording calls and rendering a one-line definition per schema."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []

    def compile(
        self, schema: Mapping[str, Any], name: str, *, additional_properties: bool
    ) -> str:
        self.calls.append((name, additional_properties))
        fields = ", ".join(sorted(schema.get("properties", {})))
        return f"type {name} = {{{fields}}}\n"


def schema_body(title: str = "Profile", **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "title": title,
        "type": "object",
        "definitions": {},
        "properties": {
            "name": {"title": "Name", "readOnly": True, "type": "string", "format": "uri"},
            "age": {"title": "Age", "readOnly": False, "type": "integer"},
        },
    }
    body.update(overrides)
    return body


def profile_body(base: str, *relations: str) -> dict[str, Any]:
    links = {"self": {"href": f"{base}/profile"}}
    for relation in relations:
        links[relation] = {"href": f"{base}/profile/{relation}"}
    return {"_links": links}


@pytest.fixture
def make_schema_body() -> Callable[..., dict[str, Any]]:
    return schema_body


@pytest.fixture
def make_profile_body() -> Callable[..., dict[str, Any]]:
    return profile_body


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_http_client() -> Callable[[Mapping[str, FakeResponse]], FakeHttpClient]:
    return FakeHttpClient


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()
