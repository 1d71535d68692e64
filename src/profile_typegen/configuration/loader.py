"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_TYPE_NAME,
    SCHEMA_MEDIA_TYPE,
    EmitMode,
    EmitSettings,
    HttpSettings,
    TypegenSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> TypegenSettings:
    """Load and validate the configuration file, or return defaults when no path is given."""
    if config_path is None:
        return TypegenSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return TypegenSettings(
        http=_parse_http_section(parsed.get("http")),
        emit=_parse_emit_section(parsed.get("emit")),
    )


def _parse_http_section(value: Any) -> HttpSettings:
    section = _optional_mapping(value, "http")
    timeout_seconds = _optional_positive_number(
        section.get("timeout_seconds"), "http.timeout_seconds"
    )
    max_parallel_requests = _optional_positive_int(
        section.get("max_parallel_requests"), "http.max_parallel_requests"
    )
    schema_accept = _require_non_empty_string(
        section.get("schema_accept", SCHEMA_MEDIA_TYPE), "http.schema_accept"
    )
    return HttpSettings(
        timeout_seconds=timeout_seconds,
        max_parallel_requests=max_parallel_requests,
        schema_accept=schema_accept,
    )


def _parse_emit_section(value: Any) -> EmitSettings:
    section = _optional_mapping(value, "emit")
    mode_raw = _require_non_empty_string(section.get("mode", EmitMode.FIRST.value), "emit.mode")
    try:
        mode = EmitMode(mode_raw.lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in EmitMode)
        raise ConfigurationError(f"emit.mode must be one of: {allowed}.") from exc
    default_type_name = _require_non_empty_string(
        section.get("default_type_name", DEFAULT_TYPE_NAME), "emit.default_type_name"
    )
    additional_properties = section.get("additional_properties", False)
    if not isinstance(additional_properties, bool):
        raise ConfigurationError("emit.additional_properties must be a boolean.")
    return EmitSettings(
        mode=mode,
        default_type_name=default_type_name,
        additional_properties=additional_properties,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_positive_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _optional_positive_number(value: Any, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return float(value)
