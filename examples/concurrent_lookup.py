"""
concurrent_lookup.py — Look up metadata from many threads at once.

Demonstrates that concurrent first lookups of the same region all receive
the same cached record.

Usage:
    python examples/concurrent_lookup.py
    PHONEMETA_LOADER=directory PHONEMETA_DATA_DIR=/path/to/data python examples/concurrent_lookup.py
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from phonemeta import MetadataSource, get_metadata_source


def describe_toll_free(source: MetadataSource) -> None:
    toll_free = source.get_for_non_geographic_region(800)
    print(f"800 is non-geographic: {toll_free is not None}")
    print(f"44 is non-geographic: {source.get_for_non_geographic_region(44) is not None}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    source = get_metadata_source()

    with ThreadPoolExecutor(max_workers=8) as pool:
        records = list(pool.map(lambda _: source.get_for_region("GB"), range(16)))

    print(f"distinct GB records: {len({id(record) for record in records})}")
    print(f"GB country code: +{records[0].country_code}")

    describe_toll_free(source)


if __name__ == "__main__":
    main()
