"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Lazily loaded, thread-safe phone number metadata cache.

Quick start::

    from phonemeta import get_metadata_source

    source = get_metadata_source()
    us = source.get_for_region("US")
    toll_free = source.get_for_non_geographic_region(800)
"""

from .cache import MetadataMap, load_metadata_from_resource
from .codec import (
    DEFAULT_BUFFER_SIZE,
    JSONMetadataDecoder,
    MetadataDecoder,
    encode_metadata_collection,
    read_stream,
)
from .errors import (
    CorruptResourceError,
    EmptyResourceError,
    MetadataError,
    MetadataSettingsError,
    MissingResourceError,
    ResourceAccessError,
)
from .loaders import (
    DirectoryMetadataLoader,
    InMemoryMetadataLoader,
    MetadataLoader,
    PackageResourceMetadataLoader,
    create_metadata_loader,
)
from .regions import (
    REGION_CODE_FOR_NON_GEO_ENTITY,
    CallingCodeClassifier,
    CountryCodeRegionMap,
    default_country_code_map,
    is_non_geographical,
)
from .settings import DEFAULT_FILE_PREFIX, MetadataSettings
from .source import (
    MetadataSource,
    MultiFileMetadataSource,
    get_metadata_source,
    reset_metadata_source,
)
from .types import NumberFormat, PhoneMetadata, PhoneMetadataCollection, PhoneNumberDesc

__version__ = "0.1.0"

__all__ = [
    "MetadataMap",
    "load_metadata_from_resource",
    "DEFAULT_BUFFER_SIZE",
    "JSONMetadataDecoder",
    "MetadataDecoder",
    "encode_metadata_collection",
    "read_stream",
    "MetadataError",
    "MissingResourceError",
    "CorruptResourceError",
    "EmptyResourceError",
    "ResourceAccessError",
    "MetadataSettingsError",
    "MetadataLoader",
    "DirectoryMetadataLoader",
    "PackageResourceMetadataLoader",
    "InMemoryMetadataLoader",
    "create_metadata_loader",
    "REGION_CODE_FOR_NON_GEO_ENTITY",
    "CallingCodeClassifier",
    "CountryCodeRegionMap",
    "default_country_code_map",
    "is_non_geographical",
    "DEFAULT_FILE_PREFIX",
    "MetadataSettings",
    "MetadataSource",
    "MultiFileMetadataSource",
    "get_metadata_source",
    "reset_metadata_source",
    "PhoneMetadata",
    "PhoneMetadataCollection",
    "PhoneNumberDesc",
    "NumberFormat",
]
