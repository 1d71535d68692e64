"""Run execution use-case service."""

from __future__ import annotations

from collections.abc import Callable

import requests

from profile_typegen.configuration import ConfigurationError, TypegenSettings, load_configuration
from profile_typegen.profile_fetching import (
    FetchPipelineError,
    HttpClient,
    fetch_schema_documents,
)
from profile_typegen.type_emission import (
    SchemaCompiler,
    compile_schema_documents,
    select_emitted_output,
)

from .run_contracts import RunOutcome, RunRequest


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_profile_typegen_run(
    request: RunRequest,
    *,
    http_client_factory: Callable[[TypegenSettings], HttpClient],
    compiler_factory: Callable[[TypegenSettings], SchemaCompiler],
) -> RunOutcome:
    """Fetch the schema documents of one API and compile them into type definitions."""
    settings = _load_settings(request)
    http_client = http_client_factory(settings)
    try:
        documents = fetch_schema_documents(request.url, http_client, settings.http)
    except FetchPipelineError as exc:
        raise RunExecutionError(str(exc)) from exc
    except (requests.RequestException, ValueError) as exc:
        raise RunExecutionError(f"{type(exc).__name__}: {exc}") from exc
    finally:
        http_client.close()

    compiled = compile_schema_documents(documents, compiler_factory(settings), settings.emit)
    return RunOutcome(
        schema_titles=tuple(document.title for document in documents),
        emitted=select_emitted_output(compiled, settings.emit.mode),
    )


def _load_settings(request: RunRequest) -> TypegenSettings:
    try:
        settings = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc
    if request.emit_mode is not None:
        settings = settings.with_emit_mode(request.emit_mode)
    return settings
