from .artifact_store import FileArtifactStore
from .file_loader import FileLoader

__all__ = ["FileArtifactStore", "FileLoader"]
