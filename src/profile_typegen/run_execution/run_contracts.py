"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from profile_typegen.configuration.runtime_settings import EmitMode


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    url: str
    config_path: str | None = None
    emit_mode: EmitMode | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    schema_titles: tuple[str, ...]
    emitted: tuple[str, ...]
