from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ArtifactStore(Protocol):
    """Defines the contract for reading packaged deployment artifacts."""

    def read(self, path: str | Path) -> bytes:
        """
        Return the raw bytes of the artifact at the given path.

        Args:
            path: Artifact location as declared in the service definition

        Raises:
            FileNotFoundError: If the artifact does not exist
            OSError: If the artifact cannot be read
        """
        ...


@runtime_checkable
class DocumentLoader(Protocol):
    """Defines the contract for loading a parsed declarative document."""

    def load(self, path: str | Path) -> Any:
        """Parses a JSON or YAML file into Python mappings and lists."""
        ...
