"""
Environment variable validation and encoding.

Every value is classified once by ``classify_environment_value``; validation
and serialization only look at the resulting ``EnvironmentValue``.
"""

import json
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sls_service_catalog.core.exceptions import (
    InvalidEnvironmentKey,
    InvalidEnvironmentValue,
)

logger = logging.getLogger(__name__)

ENVIRONMENT_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

REF = "Ref"
GET_ATT = "Fn::GetAtt"


class ValueKind(str, Enum):
    """Shapes an environment variable value can take."""

    STRING = "string"
    REFERENCE = "reference"
    ATTRIBUTE = "attribute"
    INVALID = "invalid"


@dataclass(frozen=True)
class EnvironmentValue:
    kind: ValueKind
    literal: str | None = None
    target: Any = None

    @property
    def is_reference(self) -> bool:
        return self.kind in (ValueKind.REFERENCE, ValueKind.ATTRIBUTE)

    def to_intrinsic(self) -> dict[str, Any]:
        """Render a reference as its CloudFormation intrinsic function."""
        if self.kind is ValueKind.REFERENCE:
            return {REF: self.target}
        if self.kind is ValueKind.ATTRIBUTE:
            return {GET_ATT: self.target}
        raise ValueError(f"{self.kind.value} value has no intrinsic form")


_TAG_KINDS = {REF: ValueKind.REFERENCE, GET_ATT: ValueKind.ATTRIBUTE}


def classify_environment_value(value: Any) -> EnvironmentValue:
    """
    Classify a declared environment value.

    Recognized shapes:
        - a plain string
        - the shorthand ``[tag]`` / ``[tag, target]`` where tag is
          ``Ref`` or ``Fn::GetAtt``
        - the intrinsic mapping ``{"Ref": target}`` / ``{"Fn::GetAtt": target}``

    Anything else is ``ValueKind.INVALID``.
    """
    if isinstance(value, str):
        return EnvironmentValue(ValueKind.STRING, literal=value)

    if isinstance(value, Mapping):
        if len(value) == 1:
            tag, target = next(iter(value.items()))
            if tag in _TAG_KINDS:
                return EnvironmentValue(_TAG_KINDS[tag], target=target)
        return EnvironmentValue(ValueKind.INVALID)

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if 1 <= len(value) <= 2 and isinstance(value[0], str):
            kind = _TAG_KINDS.get(value[0])
            if kind is not None:
                target = value[1] if len(value) == 2 else None
                return EnvironmentValue(kind, target=target)

    return EnvironmentValue(ValueKind.INVALID)


def validate_environment(
    variables: Mapping[str, Any], function_name: str | None = None
) -> dict[str, EnvironmentValue]:
    """
    Validate names and values, failing on the first offending entry.

    Args:
        variables: Environment variable name to declared value
        function_name: Function the variables belong to, for error context

    Returns:
        The classified values, in declaration order

    Raises:
        InvalidEnvironmentKey: If a name is not a shell identifier
        InvalidEnvironmentValue: If a value is neither a string nor a reference
    """
    classified: dict[str, EnvironmentValue] = {}
    for key, value in variables.items():
        if not isinstance(key, str) or not ENVIRONMENT_KEY_PATTERN.match(key):
            raise InvalidEnvironmentKey(str(key), function_name=function_name)

        env_value = classify_environment_value(value)
        if env_value.kind is ValueKind.INVALID:
            raise InvalidEnvironmentValue(key, value, function_name=function_name)

        classified[key] = env_value
    return classified


def serialize_environment(
    variables: Mapping[str, EnvironmentValue],
) -> str | dict[str, Any]:
    """
    Encode classified variables as one JSON array of ``KEY=VALUE`` strings.

    String-only environments produce a plain JSON string. When references
    are present the result is an ``Fn::Join`` whose literal parts are the
    JSON text and whose other parts are the references, so the value
    CloudFormation resolves is the same JSON array.

    Literal values are always JSON-escaped. Resolved reference values are
    spliced in verbatim because CloudFormation cannot escape them, so a
    reference resolving to text with ``"`` or ``\\`` yields a parameter that
    is not valid JSON. Bucket names, ARNs and other resource identifiers
    never contain either character.
    """
    if not any(v.is_reference for v in variables.values()):
        return json.dumps([f"{k}={v.literal}" for k, v in variables.items()])

    parts: list[Any] = []
    buffer = "["
    for index, (key, env_value) in enumerate(variables.items()):
        if index:
            buffer += ", "
        if env_value.is_reference:
            # open the string, splice the reference in, close the string
            opening = json.dumps(f"{key}=")[:-1]
            parts.extend([buffer + opening, env_value.to_intrinsic()])
            buffer = '"'
        else:
            buffer += json.dumps(f"{key}={env_value.literal}")
    parts.append(buffer + "]")
    return {"Fn::Join": ["", parts]}


def deserialize_environment(encoded: str) -> dict[str, str]:
    """Decode the literal JSON form produced by ``serialize_environment``."""
    entries = json.loads(encoded)
    variables: dict[str, str] = {}
    for entry in entries:
        key, _, value = entry.partition("=")
        variables[key] = value
    return variables
