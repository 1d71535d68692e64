"""Shape validation exports."""

from .document_models import ProfileDocument, ProfileLink, SchemaDocument, SchemaProperty
from .shape_predicates import (
    DocumentShapeError,
    is_object,
    is_profile_document,
    is_schema_document,
    is_url,
    parse_profile_document,
    parse_schema_document,
)

__all__ = [
    "DocumentShapeError",
    "ProfileDocument",
    "ProfileLink",
    "SchemaDocument",
    "SchemaProperty",
    "is_object",
    "is_profile_document",
    "is_schema_document",
    "is_url",
    "parse_profile_document",
    "parse_schema_document",
]
