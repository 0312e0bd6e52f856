"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Lazily populated metadata source backed by one resource per key.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol, runtime_checkable

from .cache import MetadataMap, load_metadata_from_resource
from .codec import DEFAULT_BUFFER_SIZE, JSONMetadataDecoder, MetadataDecoder
from .loaders import MetadataLoader, create_metadata_loader
from .regions import CallingCodeClassifier, default_country_code_map, is_non_geographical
from .settings import DEFAULT_FILE_PREFIX, MetadataSettings
from .types import PhoneMetadata

logger = logging.getLogger("phonemeta.source")


@runtime_checkable
class MetadataSource(Protocol):
    """Lookup surface used by parsing/formatting code."""

    def get_for_region(self, region_code: str) -> PhoneMetadata: ...

    def get_for_non_geographic_region(self, calling_code: int) -> PhoneMetadata | None: ...


class MultiFileMetadataSource:
    """
    Metadata source that reads one resource per region or calling code.

    Records are loaded on first access and cached for the process lifetime.
    Concurrent first accesses may each load the resource, but every caller
    receives the single record that was stored first.
    """

    def __init__(
        self,
        loader: MetadataLoader,
        *,
        file_prefix: str = DEFAULT_FILE_PREFIX,
        decoder: MetadataDecoder | None = None,
        classifier: CallingCodeClassifier | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._loader = loader
        self._file_prefix = file_prefix
        self._decoder = decoder or JSONMetadataDecoder()
        self._classifier = classifier or default_country_code_map()
        self._buffer_size = buffer_size
        self._geographical_regions: MetadataMap[str] = MetadataMap()
        # Non-geographic entities such as 800 (International Toll Free Service).
        self._non_geographical_regions: MetadataMap[int] = MetadataMap()

    @classmethod
    def from_settings(
        cls,
        settings: MetadataSettings,
        *,
        loader: MetadataLoader | None = None,
        decoder: MetadataDecoder | None = None,
        classifier: CallingCodeClassifier | None = None,
    ) -> "MultiFileMetadataSource":
        """Build a source from settings, optionally overriding collaborators."""
        return cls(
            loader or create_metadata_loader(settings),
            file_prefix=settings.file_prefix,
            decoder=decoder,
            classifier=classifier,
            buffer_size=settings.buffer_size,
        )

    @property
    def file_prefix(self) -> str:
        return self._file_prefix

    def get_for_region(self, region_code: str) -> PhoneMetadata:
        metadata = self._geographical_regions.get(region_code)
        if metadata is not None:
            return metadata
        return load_metadata_from_resource(
            region_code,
            self._geographical_regions,
            self._file_prefix,
            self._loader,
            self._decoder,
            buffer_size=self._buffer_size,
        )

    def get_for_non_geographic_region(self, calling_code: int) -> PhoneMetadata | None:
        """
        Return metadata for a non-geographic calling code.

        Returns `None` for calling codes that belong to a geographic region,
        and for calling codes the classifier does not know.
        """
        metadata = self._non_geographical_regions.get(calling_code)
        if metadata is not None:
            return metadata
        if not is_non_geographical(self._classifier, calling_code):
            logger.debug("Calling code %d is not non-geographic", calling_code)
            return None
        return load_metadata_from_resource(
            calling_code,
            self._non_geographical_regions,
            self._file_prefix,
            self._loader,
            self._decoder,
            buffer_size=self._buffer_size,
        )

    def loaded_region_codes(self) -> list[str]:
        return sorted(self._geographical_regions.keys())

    def loaded_non_geographic_codes(self) -> list[int]:
        return sorted(self._non_geographical_regions.keys())


_METADATA_SOURCE: MultiFileMetadataSource | None = None
_METADATA_SOURCE_LOCK = threading.Lock()


def get_metadata_source() -> MultiFileMetadataSource:
    """
    Return process-wide metadata source singleton built from the environment.
    """
    global _METADATA_SOURCE
    if _METADATA_SOURCE is not None:
        return _METADATA_SOURCE
    with _METADATA_SOURCE_LOCK:
        if _METADATA_SOURCE is None:
            _METADATA_SOURCE = MultiFileMetadataSource.from_settings(
                MetadataSettings.from_env()
            )
    return _METADATA_SOURCE


def reset_metadata_source() -> None:
    """
    Reset process-wide metadata source singleton.

    Intended for test isolation.
    """
    global _METADATA_SOURCE
    with _METADATA_SOURCE_LOCK:
        _METADATA_SOURCE = None
