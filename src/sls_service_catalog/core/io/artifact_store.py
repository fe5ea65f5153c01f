"""Artifact access for packaged function code."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileArtifactStore:
    """Read deployment artifacts from the local file system."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else None

    def read(self, path: str | Path) -> bytes:
        artifact_path = Path(path)
        if self.base_dir and not artifact_path.is_absolute():
            artifact_path = self.base_dir / artifact_path

        if not artifact_path.is_file():
            raise FileNotFoundError(f"Artifact not found: {artifact_path}")

        content = artifact_path.read_bytes()
        logger.debug("Read %d bytes from %s", len(content), artifact_path)
        return content
