"""Concurrent type definition generation for validated schema documents."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, wait

from profile_typegen.configuration.runtime_settings import EmitMode, EmitSettings
from profile_typegen.shape_validation import SchemaDocument

from .schema_compiler import SchemaCompiler

logger = logging.getLogger(__name__)


def resolve_type_name(document: SchemaDocument, default_type_name: str) -> str:
    """Return the generated type name for a document, falling back on an empty title."""
    return document.title or default_type_name


def compile_schema_documents(
    documents: Sequence[SchemaDocument], compiler: SchemaCompiler, settings: EmitSettings
) -> list[str]:
    """Compile every document concurrently and return results in document order."""
    if not documents:
        return []
    with ThreadPoolExecutor(max_workers=len(documents)) as executor:
        futures = [
            executor.submit(
                compiler.compile,
                document.raw,
                resolve_type_name(document, settings.default_type_name),
                additional_properties=settings.additional_properties,
            )
            for document in documents
        ]
        wait(futures)
    return [future.result() for future in futures]


def select_emitted_output(compiled: Sequence[str], mode: EmitMode) -> tuple[str, ...]:
    """Pick the compiled type definitions that are written to standard output."""
    if mode is EmitMode.ALL:
        return tuple(compiled)
    if len(compiled) > 1:
        logger.info("emitting first of %d compiled schema documents", len(compiled))
    return tuple(compiled[:1])
