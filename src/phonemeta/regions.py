"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Country calling code to region code classification.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

REGION_CODE_FOR_NON_GEO_ENTITY = "001"


class CallingCodeClassifier(Protocol):
    """
    Resolve the region codes served by one country calling code.

    Unknown calling codes resolve to an empty sequence.
    """

    def region_codes_for_country_code(self, country_code: int) -> Sequence[str]: ...


class CountryCodeRegionMap:
    """
    Read-only calling code -> region codes table.

    The first region code listed for a calling code is its main country.
    """

    def __init__(self, mapping: Mapping[int, Iterable[str]]) -> None:
        self._regions: dict[int, tuple[str, ...]] = {
            int(code): tuple(regions) for code, regions in mapping.items()
        }

    def region_codes_for_country_code(self, country_code: int) -> Sequence[str]:
        return self._regions.get(country_code, ())

    def country_codes(self) -> list[int]:
        return sorted(self._regions)

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._regions

    def __len__(self) -> int:
        return len(self._regions)


def is_non_geographical(classifier: CallingCodeClassifier, country_code: int) -> bool:
    """
    Return True when `country_code` maps only to the non-geographic region.

    Geographic codes, shared codes and unknown codes all return False.
    """
    region_codes = classifier.region_codes_for_country_code(country_code)
    return (
        len(region_codes) == 1
        and region_codes[0] == REGION_CODE_FOR_NON_GEO_ENTITY
    )


_NON_GEO = (REGION_CODE_FOR_NON_GEO_ENTITY,)

_DEFAULT_COUNTRY_CODES: dict[int, tuple[str, ...]] = {
    1: ("US", "AG", "AI", "AS", "BB", "BM", "BS", "CA", "DM", "DO", "GD",
        "GU", "JM", "KN", "KY", "LC", "MP", "MS", "PR", "SX", "TC", "TT",
        "VC", "VG", "VI"),
    7: ("RU", "KZ"),
    20: ("EG",),
    27: ("ZA",),
    30: ("GR",),
    31: ("NL",),
    32: ("BE",),
    33: ("FR",),
    34: ("ES",),
    36: ("HU",),
    39: ("IT", "VA"),
    40: ("RO",),
    41: ("CH",),
    43: ("AT",),
    44: ("GB", "GG", "IM", "JE"),
    45: ("DK",),
    46: ("SE",),
    47: ("NO", "SJ"),
    48: ("PL",),
    49: ("DE",),
    52: ("MX",),
    54: ("AR",),
    55: ("BR",),
    61: ("AU", "CC", "CX"),
    62: ("ID",),
    64: ("NZ",),
    65: ("SG",),
    81: ("JP",),
    82: ("KR",),
    86: ("CN",),
    90: ("TR",),
    91: ("IN",),
    234: ("NG",),
    254: ("KE",),
    353: ("IE",),
    358: ("FI", "AX"),
    800: _NON_GEO,
    808: _NON_GEO,
    870: _NON_GEO,
    878: _NON_GEO,
    881: _NON_GEO,
    882: _NON_GEO,
    883: _NON_GEO,
    888: _NON_GEO,
    972: ("IL",),
    979: _NON_GEO,
}


def default_country_code_map() -> CountryCodeRegionMap:
    """Return the bundled calling code table, including every non-geographic entity."""
    return CountryCodeRegionMap(_DEFAULT_COUNTRY_CODES)
