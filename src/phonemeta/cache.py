"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Write-once concurrent metadata map and the resource load routine that fills it.
"""

from __future__ import annotations

import logging
import threading
from typing import BinaryIO, Generic, TypeVar

from .codec import DEFAULT_BUFFER_SIZE, MetadataDecoder, read_stream
from .errors import CorruptResourceError, EmptyResourceError, MissingResourceError
from .loaders import MetadataLoader
from .types import PhoneMetadata

K = TypeVar("K", str, int)

logger = logging.getLogger("phonemeta.cache")


class MetadataMap(Generic[K]):
    """
    Key -> metadata map where each key is written at most once.

    Only lookups and the insert itself take the lock; loading happens outside.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[K, PhoneMetadata] = {}

    def get(self, key: K) -> PhoneMetadata | None:
        with self._lock:
            return self._entries.get(key)

    def put_if_absent(self, key: K, value: PhoneMetadata) -> PhoneMetadata:
        """
        Store `value` under `key` unless a value is already present.

        Returns the value stored for `key` after the call, which is the
        existing one when another thread inserted first.
        """
        with self._lock:
            return self._entries.setdefault(key, value)

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def load_metadata_from_resource(
    key: K,
    entries: MetadataMap[K],
    file_prefix: str,
    loader: MetadataLoader,
    decoder: MetadataDecoder,
    *,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> PhoneMetadata:
    """
    Load the metadata resource for `key` and publish it into `entries`.

    Args:
        key: Region code or non-geographic calling code.
        entries: Map that receives the loaded record.
        file_prefix: Resource name prefix; the resource is `<prefix>_<key>`.
        loader: Source of resource streams.
        decoder: Payload -> records decoder.
        buffer_size: Chunk size used when reading the resource.

    Returns:
        The record stored for `key`, which may come from a concurrent loader.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    resource_name = f"{file_prefix}_{key}"
    source = loader.load_metadata(resource_name)
    if source is None:
        raise MissingResourceError(resource_name)

    records = _decode_and_close(source, resource_name, decoder, buffer_size)
    if len(records) == 0:
        raise EmptyResourceError(resource_name)
    if len(records) > 1:
        logger.warning("invalid metadata (too many entries): %s", resource_name)

    metadata = records[0]
    stored = entries.put_if_absent(key, metadata)
    if stored is metadata:
        logger.debug("Loaded metadata resource %s", resource_name)
    else:
        logger.debug("Discarded duplicate load of metadata resource %s", resource_name)
    return stored


def _decode_and_close(
    source: BinaryIO,
    resource_name: str,
    decoder: MetadataDecoder,
    buffer_size: int,
) -> list[PhoneMetadata]:
    try:
        payload = read_stream(source, buffer_size)
        return list(decoder.decode(payload))
    except (OSError, ValueError) as exc:
        raise CorruptResourceError(resource_name) from exc
    finally:
        try:
            source.close()
        except Exception:
            logger.warning(
                "error closing input stream (ignored): %s", resource_name, exc_info=True
            )
