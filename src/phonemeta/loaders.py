"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Resource loaders that hand out byte streams for named metadata resources.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import BinaryIO, Protocol

from .errors import MetadataSettingsError, ResourceAccessError
from .settings import MetadataSettings

logger = logging.getLogger("phonemeta.loaders")


class MetadataLoader(Protocol):
    """
    Open the named metadata resource.

    Returns `None` when the resource does not exist. The caller owns the
    returned stream and must close it.
    """

    def load_metadata(self, name: str) -> BinaryIO | None: ...


class DirectoryMetadataLoader:
    """Load resources from files under one root directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def load_metadata(self, name: str) -> BinaryIO | None:
        # Absolute prefixes are taken relative to the root.
        relative = name.lstrip("/")
        if not relative:
            raise ResourceAccessError(f"invalid metadata resource name '{name}'")
        target = (self._root / relative).resolve()
        if not _is_under(target, self._root):
            raise ResourceAccessError(
                f"metadata resource escapes configured root "
                f"(name='{name}', root='{self._root}')"
            )
        if not target.is_file():
            logger.debug("Metadata resource not found: %s", target)
            return None
        return target.open("rb")


class PackageResourceMetadataLoader:
    """Load resources bundled as package data."""

    def __init__(self, package: str = "phonemeta", subdir: str = "data") -> None:
        self._package = package
        self._subdir = subdir

    def load_metadata(self, name: str) -> BinaryIO | None:
        parts = [part for part in name.split("/") if part]
        if not parts or any(part in (".", "..") for part in parts):
            raise ResourceAccessError(f"invalid metadata resource name '{name}'")

        target = importlib_resources.files(self._package)
        for part in (*self._subdir.split("/"), *parts):
            if part:
                target = target.joinpath(part)
        if not target.is_file():
            logger.debug(
                "Metadata resource not found in package %s: %s", self._package, name
            )
            return None
        return target.open("rb")


class InMemoryMetadataLoader:
    """Serve resources from a name -> bytes mapping."""

    def __init__(self, resources: Mapping[str, bytes] | None = None) -> None:
        self._resources: dict[str, bytes] = dict(resources or {})

    def add(self, name: str, payload: bytes) -> None:
        self._resources[name] = payload

    def load_metadata(self, name: str) -> BinaryIO | None:
        payload = self._resources.get(name)
        if payload is None:
            return None
        return io.BytesIO(payload)


def create_metadata_loader(settings: MetadataSettings) -> MetadataLoader:
    """Build the loader selected by `settings.loader_backend`."""
    if settings.loader_backend == "directory":
        if settings.data_dir is None:
            raise MetadataSettingsError("directory loader requires data_dir")
        return DirectoryMetadataLoader(settings.data_dir)
    return PackageResourceMetadataLoader(
        package=settings.data_package,
        subdir=settings.data_subdir,
    )


def _is_under(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False
