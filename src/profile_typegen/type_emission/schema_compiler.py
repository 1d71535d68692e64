"""Schema-to-type-definition compiler boundary."""

from __future__ import annotations

import json
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from datamodel_code_generator import DataModelType, InputFileType, generate


class SchemaCompiler(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for compilers turning one JSON Schema into type definition source."""

    def compile(
        self, schema: Mapping[str, Any], name: str, *, additional_properties: bool
    ) -> str: ...


class DatamodelCodeGenerator:  # pylint: disable=too-few-public-methods
    """Compiler implementation emitting Pydantic models via datamodel-code-generator."""

    def __init__(
        self, output_model_type: DataModelType = DataModelType.PydanticV2BaseModel
    ) -> None:
        self._output_model_type = output_model_type

    def compile(
        self, schema: Mapping[str, Any], name: str, *, additional_properties: bool
    ) -> str:
        document = dict(schema)
        # Explicit additionalProperties in the document take precedence.
        document.setdefault("additionalProperties", additional_properties)
        with tempfile.TemporaryDirectory() as workdir:
            output_path = Path(workdir) / "models.py"
            generate(
                json.dumps(document),
                input_file_type=InputFileType.JsonSchema,
                output=output_path,
                output_model_type=self._output_model_type,
                class_name=name,
                disable_timestamp=True,
            )
            return output_path.read_text(encoding="utf-8")
