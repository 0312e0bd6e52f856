"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Stream buffering and record decoding for metadata resources.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import BinaryIO, Protocol

from .types import PhoneMetadata, PhoneMetadataCollection

DEFAULT_BUFFER_SIZE = 16 * 1024


class MetadataDecoder(Protocol):
    """
    Decode one resource payload into its ordered records.

    Implementations raise `ValueError` (or a subclass) on malformed input.
    """

    def decode(self, payload: bytes) -> Sequence[PhoneMetadata]: ...


def read_stream(source: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> bytes:
    """
    Read `source` to EOF in `buffer_size` chunks and return the full payload.

    Does not close `source`.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    chunks = bytearray()
    while True:
        chunk = source.read(buffer_size)
        if not chunk:
            break
        chunks.extend(chunk)
    return bytes(chunks)


class JSONMetadataDecoder:
    """Decode `{"metadata": [...]}` JSON documents into frozen records."""

    def decode(self, payload: bytes) -> Sequence[PhoneMetadata]:
        # pydantic ValidationError is a ValueError subclass.
        collection = PhoneMetadataCollection.model_validate_json(payload)
        return collection.metadata


def encode_metadata_collection(records: Iterable[PhoneMetadata]) -> bytes:
    """Serialize `records` into the payload `JSONMetadataDecoder` accepts."""
    collection = PhoneMetadataCollection(metadata=tuple(records))
    return collection.model_dump_json(exclude_defaults=True).encode("utf-8")
