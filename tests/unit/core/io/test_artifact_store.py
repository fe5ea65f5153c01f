from __future__ import annotations

from pathlib import Path

import pytest

from sls_service_catalog.core.io import FileArtifactStore
from sls_service_catalog.core.protocols import ArtifactStore


def test_satisfies_protocol() -> None:
    assert isinstance(FileArtifactStore(), ArtifactStore)


def test_read_absolute(tmp_path: Path) -> None:
    f = tmp_path / "svc.zip"
    f.write_bytes(b"foobar")
    assert FileArtifactStore().read(str(f)) == b"foobar"


def test_read_relative_to_base_dir(tmp_path: Path) -> None:
    (tmp_path / "svc.zip").write_bytes(b"barbaz")
    assert FileArtifactStore(tmp_path).read("svc.zip") == b"barbaz"


def test_missing_artifact(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Artifact not found"):
        FileArtifactStore(tmp_path).read("gone.zip")


def test_directory_is_not_an_artifact(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileArtifactStore().read(tmp_path)
