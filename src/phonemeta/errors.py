"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error types raised while resolving phone metadata resources.
"""

from __future__ import annotations


class MetadataError(RuntimeError):
    """Base metadata error."""


class _ResourceError(MetadataError):
    """Metadata error tied to one named resource."""

    def __init__(self, message: str, *, resource_name: str) -> None:
        super().__init__(message)
        self.resource_name = resource_name


class MissingResourceError(_ResourceError):
    """Raised when the loader cannot find a metadata resource."""

    def __init__(self, resource_name: str) -> None:
        super().__init__(
            f"missing metadata: {resource_name}", resource_name=resource_name
        )


class CorruptResourceError(_ResourceError):
    """Raised when a metadata resource cannot be read or decoded."""

    def __init__(self, resource_name: str) -> None:
        super().__init__(
            f"cannot load/parse metadata: {resource_name}",
            resource_name=resource_name,
        )


class EmptyResourceError(_ResourceError):
    """Raised when a metadata resource decodes to zero records."""

    def __init__(self, resource_name: str) -> None:
        super().__init__(
            f"empty metadata: {resource_name}", resource_name=resource_name
        )


class ResourceAccessError(MetadataError):
    """Raised when a resource name escapes the loader's configured root."""


class MetadataSettingsError(MetadataError):
    """Raised when metadata settings are invalid."""
