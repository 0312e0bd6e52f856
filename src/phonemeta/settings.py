"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metadata source settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .codec import DEFAULT_BUFFER_SIZE
from .errors import MetadataSettingsError

DEFAULT_FILE_PREFIX = "PhoneNumberMetadata"
LOADER_BACKENDS = ("package", "directory")


@dataclass(frozen=True, slots=True)
class MetadataSettings:
    """Explicit settings used to build a metadata source."""

    file_prefix: str = DEFAULT_FILE_PREFIX
    loader_backend: str = "package"
    data_dir: Path | None = None
    data_package: str = "phonemeta"
    data_subdir: str = "data"
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        if not self.file_prefix.strip():
            raise MetadataSettingsError("file_prefix must be non-empty")
        if self.loader_backend not in LOADER_BACKENDS:
            raise MetadataSettingsError(
                f"unknown loader backend '{self.loader_backend}' "
                f"(expected one of: {', '.join(LOADER_BACKENDS)})"
            )
        if self.loader_backend == "directory" and self.data_dir is None:
            raise MetadataSettingsError("directory loader requires data_dir")
        if self.buffer_size <= 0:
            raise MetadataSettingsError(
                f"buffer_size must be positive, got {self.buffer_size}"
            )

    @staticmethod
    def from_env() -> "MetadataSettings":
        """Load settings from `PHONEMETA_*` environment variables."""
        data_dir = (os.getenv("PHONEMETA_DATA_DIR") or "").strip()
        raw_buffer = os.getenv("PHONEMETA_BUFFER_SIZE", str(DEFAULT_BUFFER_SIZE))
        try:
            buffer_size = int(raw_buffer)
        except ValueError as exc:
            raise MetadataSettingsError(
                f"PHONEMETA_BUFFER_SIZE must be an integer, got {raw_buffer!r}"
            ) from exc
        return MetadataSettings(
            file_prefix=os.getenv("PHONEMETA_FILE_PREFIX", DEFAULT_FILE_PREFIX),
            loader_backend=os.getenv("PHONEMETA_LOADER", "package").strip().lower(),
            data_dir=Path(data_dir) if data_dir else None,
            data_package=os.getenv("PHONEMETA_DATA_PACKAGE", "phonemeta"),
            data_subdir=os.getenv("PHONEMETA_DATA_SUBDIR", "data"),
            buffer_size=buffer_size,
        )
