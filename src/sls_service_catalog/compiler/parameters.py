"""Provisioning parameter construction and merging."""

import base64
import hashlib
import logging
import posixpath
from collections.abc import Iterable
from pathlib import PurePath
from typing import Any

from sls_service_catalog.core.exceptions import TemplateLoadError
from sls_service_catalog.models.resources import ProvisioningParameter

logger = logging.getLogger(__name__)

ENVIRONMENT_PARAMETER = "EnvironmentVariables"


def compute_fingerprint(content: bytes) -> str:
    """Base64 SHA-256 digest of the artifact, as Lambda reports ``CodeSha256``."""
    return base64.b64encode(hashlib.sha256(content).digest()).decode("ascii")


def get_artifact_s3_key(artifact: str, artifact_directory_name: str | None) -> str:
    file_name = PurePath(artifact).name
    if artifact_directory_name:
        return posixpath.join(artifact_directory_name, file_name)
    return file_name


def build_parameter_list(values: dict[str, Any]) -> list[ProvisioningParameter]:
    """Turn an ordered Key -> Value mapping into parameters, skipping None."""
    return [
        ProvisioningParameter(key=key, value=value)
        for key, value in values.items()
        if value is not None
    ]


def extract_template_parameters(
    document: Any, template_path: str | None = None
) -> list[ProvisioningParameter]:
    """
    Read the provisioning parameters declared by a custom template.

    Accepted shapes:
        - ``[{Key, Value}, ...]``
        - ``{ProvisioningParameters: [...]}``
        - ``{Properties: {ProvisioningParameters: [...]}}``

    Raises:
        TemplateLoadError: If no parameter list is found or an entry is malformed
    """
    raw = document
    if isinstance(raw, dict):
        if "Properties" in raw and isinstance(raw["Properties"], dict):
            raw = raw["Properties"]
        raw = raw.get("ProvisioningParameters")

    if not isinstance(raw, list):
        raise TemplateLoadError(
            "Custom template must declare a ProvisioningParameters list",
            template_path=template_path,
        )

    parameters = []
    for entry in raw:
        if not isinstance(entry, dict) or "Key" not in entry or "Value" not in entry:
            raise TemplateLoadError(
                f"Malformed provisioning parameter in custom template: {entry!r}",
                template_path=template_path,
            )
        parameters.append(
            ProvisioningParameter(key=str(entry["Key"]), value=entry["Value"])
        )
    return parameters


def merge_parameters(
    base: Iterable[ProvisioningParameter],
    computed: Iterable[ProvisioningParameter],
) -> list[ProvisioningParameter]:
    """
    Merge computed parameters over a template's base parameters.

    Parameters stay unique by key. A computed parameter replaces a base
    parameter with the same key in place; new keys are appended in order.
    """
    merged: dict[str, ProvisioningParameter] = {}
    for parameter in base:
        merged[parameter.key] = parameter
    for parameter in computed:
        if parameter.key in merged and merged[parameter.key] != parameter:
            logger.debug(
                f"Computed parameter '{parameter.key}' overrides the custom template"
            )
        merged[parameter.key] = parameter
    return list(merged.values())
