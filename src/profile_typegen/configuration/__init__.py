"""Configuration domain exports."""

from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_TYPE_NAME,
    SCHEMA_MEDIA_TYPE,
    EmitMode,
    EmitSettings,
    HttpSettings,
    TypegenSettings,
)

__all__ = [
    "DEFAULT_TYPE_NAME",
    "SCHEMA_MEDIA_TYPE",
    "EmitMode",
    "EmitSettings",
    "HttpSettings",
    "TypegenSettings",
    "ConfigurationError",
    "load_configuration",
]
