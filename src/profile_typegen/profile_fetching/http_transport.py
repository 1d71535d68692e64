"""HTTP transport used to reach the profile API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

import requests


class HttpResponse(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of a response object consumed by the fetch pipeline."""

    status_code: int

    def json(self) -> Any: ...


class HttpClient(Protocol):
    """Protocol for HTTP clients used by the fetch pipeline."""

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse: ...

    def close(self) -> None: ...


class RequestsHttpClient:
    """Real HTTP client implementation backed by a shared requests session."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self._session = requests.Session()
        self._timeout_seconds = timeout_seconds

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> requests.Response:
        return self._session.get(url, headers=dict(headers or {}), timeout=self._timeout_seconds)

    def close(self) -> None:
        self._session.close()


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300
