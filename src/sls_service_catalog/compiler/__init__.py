"""Service Catalog template compiler."""

from .environment import (
    EnvironmentValue,
    ValueKind,
    classify_environment_value,
    deserialize_environment,
    serialize_environment,
    validate_environment,
)
from .service_catalog import AwsCompileServiceCatalog

__all__ = [
    "AwsCompileServiceCatalog",
    "EnvironmentValue",
    "ValueKind",
    "classify_environment_value",
    "deserialize_environment",
    "serialize_environment",
    "validate_environment",
]
