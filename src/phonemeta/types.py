"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Immutable metadata records shared between the cache and its callers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PhoneNumberDesc(_FrozenModel):
    """Pattern and length rules for one class of numbers."""

    national_number_pattern: str | None = None
    possible_lengths: tuple[int, ...] = ()
    example_number: str | None = None


class NumberFormat(_FrozenModel):
    """One formatting rule, applied to numbers matching `pattern`."""

    pattern: str
    format: str
    leading_digits_patterns: tuple[str, ...] = ()
    national_prefix_formatting_rule: str | None = None


class PhoneMetadata(_FrozenModel):
    """
    Parsed numbering-plan metadata for one region or non-geographic entity.

    `id` holds the region code, or `"001"` for non-geographic entities which
    are keyed by `country_code` instead.
    """

    id: str
    country_code: int
    international_prefix: str | None = None
    national_prefix: str | None = None
    national_prefix_for_parsing: str | None = None
    leading_digits: str | None = None
    main_country_for_code: bool = False
    general_desc: PhoneNumberDesc = Field(default_factory=PhoneNumberDesc)
    number_formats: tuple[NumberFormat, ...] = ()


class PhoneMetadataCollection(_FrozenModel):
    """Ordered records decoded from one metadata resource."""

    metadata: tuple[PhoneMetadata, ...] = ()
