"""Concrete loader that supports local YAML / JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML

from ..exceptions import TemplateLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read a template document from disk and return its parsed content."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else None

    def resolve(self, path: str | Path) -> Path:
        file_path = Path(path)
        if self.base_dir and not file_path.is_absolute():
            file_path = self.base_dir / file_path
        return file_path

    def load(self, path: str | Path) -> Any:
        file_path = self.resolve(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise TemplateLoadError(
                f"File not found: {file_path}", template_path=str(file_path)
            )

        if file_path.suffix.lower() not in self.supported_exts:
            raise TemplateLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(self.supported_exts))}",
                template_path=str(file_path),
            )

        try:
            raw_text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateLoadError(
                f"Cannot read {file_path.name}: {exc}", template_path=str(file_path)
            ) from exc

        # parse
        try:
            if file_path.suffix.lower() in _YAML_EXTS:
                data = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except Exception as exc:
            raise TemplateLoadError(
                f"Cannot parse {file_path.name}: {exc}", template_path=str(file_path)
            ) from exc

        if not isinstance(data, (dict, list)):
            raise TemplateLoadError(
                "Top-level object must be a mapping or a list",
                template_path=str(file_path),
            )

        logger.debug("Document loaded from %s", file_path)
        return data
