"""Type emission exports."""

from .schema_compiler import DatamodelCodeGenerator, SchemaCompiler
from .type_definition_emitter import (
    compile_schema_documents,
    resolve_type_name,
    select_emitted_output,
)

__all__ = [
    "DatamodelCodeGenerator",
    "SchemaCompiler",
    "compile_schema_documents",
    "resolve_type_name",
    "select_emitted_output",
]
