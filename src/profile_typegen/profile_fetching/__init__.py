"""Profile fetching exports."""

from .http_transport import HttpClient, HttpResponse, RequestsHttpClient
from .profile_pipeline import (
    PROFILE_REQUEST_FAILED,
    PROFILE_SHAPE_INVALID,
    SCHEMA_REQUESTS_FAILED,
    SCHEMA_SHAPE_INVALID,
    FetchPipelineError,
    build_profile_url,
    fetch_profile_document,
    fetch_schema_documents,
)

__all__ = [
    "HttpClient",
    "HttpResponse",
    "RequestsHttpClient",
    "FetchPipelineError",
    "PROFILE_REQUEST_FAILED",
    "PROFILE_SHAPE_INVALID",
    "SCHEMA_REQUESTS_FAILED",
    "SCHEMA_SHAPE_INVALID",
    "build_profile_url",
    "fetch_profile_document",
    "fetch_schema_documents",
]
