"""Parser for serverless service files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML

from sls_service_catalog.core.common.base_parser import BaseServiceFileParser
from sls_service_catalog.core.exceptions import ServiceConfigurationError
from sls_service_catalog.models.service import ServiceDefinition

logger = logging.getLogger(__name__)


class ServiceFileParser(BaseServiceFileParser):
    """
    Read a ``serverless.yml`` (or JSON) file into a ServiceDefinition.

    Relative artifact and custom template paths are made absolute against
    the directory holding the service file.
    """

    def __init__(self, encoding: str = "utf-8"):
        super().__init__(encoding)
        self._yaml = YAML(typ="safe")

    def get_supported_extensions(self) -> list[str]:
        return [".yml", ".yaml", ".json"]

    def validate_file(self, file_path: Path) -> None:
        try:
            super().validate_file(file_path)
        except ValueError as e:
            raise ServiceConfigurationError(str(e), source=str(file_path)) from e

    def _parse_content(self, content: str, file_path: Path) -> ServiceDefinition:
        try:
            if file_path.suffix == ".json":
                data = json.loads(content)
            else:
                data = self._yaml.load(content)
        except Exception as e:
            raise ServiceConfigurationError(
                f"Cannot parse {file_path.name}: {e}", source=str(file_path)
            ) from e

        if not isinstance(data, dict):
            raise ServiceConfigurationError(
                "Service file must contain a mapping", source=str(file_path)
            )

        try:
            service = ServiceDefinition.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first["loc"])
            raise ServiceConfigurationError(
                f"Invalid service definition: {field_name}: {first['msg']}",
                field_name=field_name,
                source=str(file_path),
            ) from e

        self._resolve_paths(service, file_path.parent)
        self._logger.debug(
            f"Service '{service.service}' declares {len(service.functions)} function(s)"
        )
        return service

    @staticmethod
    def _resolve_paths(service: ServiceDefinition, base_dir: Path) -> None:
        def absolute(path: str | None) -> str | None:
            if not path or Path(path).is_absolute():
                return path
            return str((base_dir / path).resolve())

        service.package.artifact = absolute(service.package.artifact)
        service.provider.sc_product_template = absolute(
            service.provider.sc_product_template
        )
        for function in service.functions.values():
            function.package.artifact = absolute(function.package.artifact)
