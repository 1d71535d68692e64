"""Shape checks for decoded profile and schema documents.

Every check accepts any decoded value and never raises for unexpected input
types. The `parse_*` functions return typed documents or raise
`DocumentShapeError` naming the first violation; the `is_*` predicates answer
the same question as a boolean.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from .document_models import ProfileDocument, ProfileLink, SchemaDocument, SchemaProperty

PROPERTY_TYPES = frozenset({"string", "integer"})
PROPERTY_FORMATS = frozenset({"uri", "date-time"})

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_NON_OBJECT_TYPES = (str, bytes, bytearray, int, float, complex, bool, list, tuple)


class DocumentShapeError(Exception):
    """Raised when a decoded document does not have the expected shape."""


def is_object(value: Any) -> bool:
    """Return True for mappings and structured records.

    `None`, primitives, lists, tuples, classes and other callables are not objects.
    """
    if value is None or isinstance(value, _NON_OBJECT_TYPES):
        return False
    return not callable(value)


def is_url(value: Any) -> bool:
    """Return True when value is a string holding an absolute URL."""
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
        _ = parts.port
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_PATTERN.match(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_REQUIRED_SCHEMES:
        hostname = parts.hostname
        if not hostname or any(char.isspace() for char in hostname):
            return False
    return True


def is_profile_document(value: Any) -> bool:
    """Return True when value is a discovery document with string link targets."""
    return _profile_violation(value) is None


def is_schema_document(value: Any) -> bool:
    """Return True when value is an object schema with supported property types."""
    return _schema_violation(value) is None


def parse_profile_document(value: Any) -> ProfileDocument:
    """Validate a decoded profile document and return its typed form."""
    violation = _profile_violation(value)
    if violation is not None:
        raise DocumentShapeError(violation)
    links = tuple(
        ProfileLink(relation=str(relation), href=entry["href"])
        for relation, entry in value["_links"].items()
    )
    return ProfileDocument(links=links)


def parse_schema_document(value: Any) -> SchemaDocument:
    """Validate a decoded schema document and return its typed form."""
    violation = _schema_violation(value)
    if violation is not None:
        raise DocumentShapeError(violation)
    properties = tuple(
        SchemaProperty(
            name=str(name),
            title=definition["title"],
            read_only=definition["readOnly"],
            type=definition["type"],
            format=definition.get("format") or None,
        )
        for name, definition in value["properties"].items()
    )
    return SchemaDocument(title=value["title"], properties=properties, raw=value)


def _profile_violation(value: Any) -> str | None:
    if not isinstance(value, Mapping):
        return "profile document must be an object"
    if "_links" not in value:
        return "profile document has no _links"
    links = value["_links"]
    if not isinstance(links, Mapping):
        return "_links must be an object"
    for relation, entry in links.items():
        if not isinstance(entry, Mapping) or not isinstance(entry.get("href"), str):
            return f"link '{relation}' has no string href"
    return None


def _schema_violation(value: Any) -> str | None:
    if not isinstance(value, Mapping):
        return "schema document must be an object"
    if not isinstance(value.get("title"), str):
        return "title must be a string"
    properties = value.get("properties")
    if not isinstance(properties, Mapping):
        return "properties must be an object"
    if "definitions" not in value:
        return "definitions is missing"
    if value.get("type") != "object":
        return "type must be 'object'"
    for name, definition in properties.items():
        violation = _property_violation(definition)
        if violation is not None:
            return f"property '{name}': {violation}"
    return None


def _property_violation(definition: Any) -> str | None:
    if not isinstance(definition, Mapping):
        return "definition must be an object"
    if not isinstance(definition.get("title"), str):
        return "title must be a string"
    if not isinstance(definition.get("readOnly"), bool):
        return "readOnly must be a boolean"
    property_type = definition.get("type")
    if not isinstance(property_type, str) or property_type not in PROPERTY_TYPES:
        return "type must be 'string' or 'integer'"
    # An empty format is treated the same as no format.
    property_format = definition.get("format")
    if property_format and (
        not isinstance(property_format, str) or property_format not in PROPERTY_FORMATS
    ):
        return "format must be 'uri' or 'date-time'"
    return None
