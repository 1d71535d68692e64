"""Validated discovery and schema document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

SELF_RELATION = "self"


@dataclass(frozen=True)
class ProfileLink:
    """One named hyperlink of a profile document."""

    relation: str
    href: str


@dataclass(frozen=True)
class ProfileDocument:
    """Discovery document mapping relation names to hyperlinks."""

    links: tuple[ProfileLink, ...]

    def follow_up_links(self) -> tuple[ProfileLink, ...]:
        """Return every link except the document's own `self` location."""
        return tuple(link for link in self.links if link.relation != SELF_RELATION)


@dataclass(frozen=True)
class SchemaProperty:
    """Declared field of a schema document."""

    name: str
    title: str
    read_only: bool
    type: str
    format: str | None


@dataclass(frozen=True)
class SchemaDocument:
    """JSON Schema fragment describing one object type."""

    title: str
    properties: tuple[SchemaProperty, ...]
    raw: Mapping[str, Any]
