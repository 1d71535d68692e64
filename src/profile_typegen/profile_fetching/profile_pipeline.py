"""Two-stage profile and schema document fetch service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any

from profile_typegen.configuration.runtime_settings import HttpSettings
from profile_typegen.shape_validation import (
    DocumentShapeError,
    ProfileDocument,
    SchemaDocument,
    parse_profile_document,
    parse_schema_document,
)

from .http_transport import HttpClient, HttpResponse, is_success_status

PROFILE_PATH = "profile"

PROFILE_REQUEST_FAILED = "Fetch request failed"
PROFILE_SHAPE_INVALID = "Schema error"
SCHEMA_REQUESTS_FAILED = "Some requests failed"
SCHEMA_SHAPE_INVALID = "Schema error in profile endpoint"

logger = logging.getLogger(__name__)


class FetchPipelineError(Exception):
    """Raised when a profile or schema document cannot be used."""


def build_profile_url(base_url: str) -> str:
    """Return the profile endpoint for an API base URL."""
    return f"{base_url.rstrip('/')}/{PROFILE_PATH}"


def fetch_schema_documents(
    base_url: str, http_client: HttpClient, settings: HttpSettings
) -> list[SchemaDocument]:
    """Fetch the profile document and every schema document it links to.

    Args:
      base_url: API root; the profile document is read from `{base_url}/profile`.
      http_client: Transport used for every request.
      settings: Parallelism and media type settings.

    Returns:
      Validated schema documents in profile link order.

    Raises:
      FetchPipelineError: If any response has a failing status or an unexpected shape.
    """
    profile = fetch_profile_document(base_url, http_client)
    hrefs = [link.href for link in profile.follow_up_links()]
    if not hrefs:
        logger.warning("profile document lists no schema links")
        return []

    responses = _fetch_all(hrefs, http_client, settings)
    failed = [
        (href, response.status_code)
        for href, response in zip(hrefs, responses, strict=True)
        if not is_success_status(response.status_code)
    ]
    if failed:
        logger.debug("schema requests failed: %s", failed)
        raise FetchPipelineError(SCHEMA_REQUESTS_FAILED)

    bodies = _decode_all(responses, settings)
    documents: list[SchemaDocument] = []
    for href, body in zip(hrefs, bodies, strict=True):
        try:
            documents.append(parse_schema_document(body))
        except DocumentShapeError as exc:
            logger.debug("schema document %s rejected: %s", href, exc)
            raise FetchPipelineError(SCHEMA_SHAPE_INVALID) from exc
    return documents


def fetch_profile_document(base_url: str, http_client: HttpClient) -> ProfileDocument:
    """Fetch and validate the discovery document of an API."""
    profile_url = build_profile_url(base_url)
    logger.info("fetching %s", profile_url)
    response = http_client.get(profile_url)
    if not is_success_status(response.status_code):
        logger.debug("profile request returned status %s", response.status_code)
        raise FetchPipelineError(PROFILE_REQUEST_FAILED)
    body = response.json()
    try:
        return parse_profile_document(body)
    except DocumentShapeError as exc:
        logger.debug("profile document rejected: %s", exc)
        raise FetchPipelineError(PROFILE_SHAPE_INVALID) from exc


def _fetch_all(
    hrefs: Sequence[str], http_client: HttpClient, settings: HttpSettings
) -> list[HttpResponse]:
    headers = {"Accept": settings.schema_accept}
    with ThreadPoolExecutor(max_workers=_worker_count(len(hrefs), settings)) as executor:
        futures = [executor.submit(_fetch_one, http_client, href, headers) for href in hrefs]
        wait(futures)
    return [future.result() for future in futures]


def _fetch_one(http_client: HttpClient, href: str, headers: dict[str, str]) -> HttpResponse:
    logger.info("fetching %s", href)
    return http_client.get(href, headers=headers)


def _decode_all(responses: Sequence[HttpResponse], settings: HttpSettings) -> list[Any]:
    with ThreadPoolExecutor(max_workers=_worker_count(len(responses), settings)) as executor:
        futures = [executor.submit(response.json) for response in responses]
        wait(futures)
    return [future.result() for future in futures]


def _worker_count(pending: int, settings: HttpSettings) -> int:
    if settings.max_parallel_requests is None:
        return max(1, pending)
    return max(1, min(pending, settings.max_parallel_requests))
