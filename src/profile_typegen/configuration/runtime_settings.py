"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

SCHEMA_MEDIA_TYPE = "application/schema+json"
DEFAULT_TYPE_NAME = "Default"


class EmitMode(str, Enum):
    """Which compiled type definitions are written to standard output."""

    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class HttpSettings:
    """Remote API connectivity configuration."""

    timeout_seconds: float | None = None
    max_parallel_requests: int | None = None
    schema_accept: str = SCHEMA_MEDIA_TYPE


@dataclass(frozen=True)
class EmitSettings:
    """Type definition generation configuration."""

    mode: EmitMode = EmitMode.FIRST
    default_type_name: str = DEFAULT_TYPE_NAME
    additional_properties: bool = False


@dataclass(frozen=True)
class TypegenSettings:
    """Complete runtime configuration."""

    http: HttpSettings = field(default_factory=HttpSettings)
    emit: EmitSettings = field(default_factory=EmitSettings)

    def with_emit_mode(self, mode: EmitMode) -> TypegenSettings:
        return replace(self, emit=replace(self.emit, mode=mode))
