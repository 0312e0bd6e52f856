from __future__ import annotations

import io
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from phonemeta import (
    CountryCodeRegionMap,
    EmptyResourceError,
    MissingResourceError,
    MultiFileMetadataSource,
    PhoneMetadata,
    encode_metadata_collection,
)


def _payload(region: str, country_code: int) -> bytes:
    return encode_metadata_collection(
        [PhoneMetadata(id=region, country_code=country_code)]
    )


class _RecordingLoader:
    def __init__(self, resources: dict[str, bytes]) -> None:
        self._resources = resources
        self._lock = threading.Lock()
        self.requested: list[str] = []

    def load_metadata(self, name: str):
        with self._lock:
            self.requested.append(name)
        payload = self._resources.get(name)
        return io.BytesIO(payload) if payload is not None else None


class _BarrierLoader(_RecordingLoader):
    """Holds every caller until `parties` callers are loading at once."""

    def __init__(self, resources: dict[str, bytes], parties: int) -> None:
        super().__init__(resources)
        self._barrier = threading.Barrier(parties, timeout=5)

    def load_metadata(self, name: str):
        self._barrier.wait()
        return super().load_metadata(name)


_CLASSIFIER = CountryCodeRegionMap({800: ["001"], 44: ["GB", "GG", "IM", "JE"], 33: ["FR"]})


def _source(loader, prefix: str = "P") -> MultiFileMetadataSource:
    return MultiFileMetadataSource(loader, file_prefix=prefix, classifier=_CLASSIFIER)


def test_get_for_region_requests_prefixed_name():
    loader = _RecordingLoader({"P_FR": _payload("FR", 33)})
    metadata = _source(loader).get_for_region("FR")

    assert metadata.id == "FR"
    assert metadata.country_code == 33
    assert loader.requested == ["P_FR"]


def test_get_for_region_returns_same_instance_without_reloading():
    loader = _RecordingLoader({"P_FR": _payload("FR", 33)})
    source = _source(loader)

    first = source.get_for_region("FR")
    for _ in range(5):
        assert source.get_for_region("FR") is first
    assert loader.requested == ["P_FR"]
    assert source.loaded_region_codes() == ["FR"]


def test_missing_region_raises_missing_resource_error():
    source = _source(_RecordingLoader({}), prefix="X")
    with pytest.raises(MissingResourceError) as info:
        source.get_for_region("missing")
    assert info.value.resource_name == "X_missing"
    assert source.loaded_region_codes() == []


def test_failed_load_is_retried_on_next_lookup():
    resources: dict[str, bytes] = {"P_FR": encode_metadata_collection([])}
    loader = _RecordingLoader(resources)
    source = _source(loader)

    with pytest.raises(EmptyResourceError):
        source.get_for_region("FR")

    resources["P_FR"] = _payload("FR", 33)
    assert source.get_for_region("FR").id == "FR"
    assert loader.requested == ["P_FR", "P_FR"]


def test_concurrent_cold_lookups_converge_on_one_record():
    workers = 8
    loader = _BarrierLoader({"P_GB": _payload("GB", 44)}, parties=workers)
    source = _source(loader)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: source.get_for_region("GB"), range(workers)))

    # Every worker loaded and decoded its own copy; only one was published.
    assert len(loader.requested) == workers
    assert all(result is results[0] for result in results)
    assert source.get_for_region("GB") is results[0]
    assert source.loaded_region_codes() == ["GB"]


def test_non_geographic_code_is_loaded_and_cached():
    loader = _RecordingLoader({"P_800": _payload("001", 800)})
    source = _source(loader)

    metadata = source.get_for_non_geographic_region(800)

    assert metadata is not None
    assert metadata.country_code == 800
    assert source.get_for_non_geographic_region(800) is metadata
    assert loader.requested == ["P_800"]
    assert source.loaded_non_geographic_codes() == [800]


def test_geographic_calling_code_returns_none_without_loading():
    loader = _RecordingLoader({"P_44": _payload("GB", 44)})
    source = _source(loader)

    assert source.get_for_non_geographic_region(44) is None
    assert loader.requested == []


def test_single_geographic_region_code_is_not_non_geographic():
    loader = _RecordingLoader({"P_33": _payload("FR", 33)})
    assert _source(loader).get_for_non_geographic_region(33) is None
    assert loader.requested == []


def test_unknown_calling_code_returns_none_without_loading():
    loader = _RecordingLoader({"P_999": _payload("001", 999)})
    source = _source(loader)

    assert source.get_for_non_geographic_region(999) is None
    assert loader.requested == []


def test_non_geographic_missing_resource_raises():
    source = _source(_RecordingLoader({}))
    with pytest.raises(MissingResourceError) as info:
        source.get_for_non_geographic_region(800)
    assert info.value.resource_name == "P_800"


def test_partitions_are_independent():
    loader = _RecordingLoader(
        {"P_800": _payload("001", 800), "P_FR": _payload("FR", 33)}
    )
    source = _source(loader)

    source.get_for_region("FR")
    source.get_for_non_geographic_region(800)

    assert source.loaded_region_codes() == ["FR"]
    assert source.loaded_non_geographic_codes() == [800]


def test_rejects_non_positive_buffer_size():
    with pytest.raises(ValueError):
        MultiFileMetadataSource(_RecordingLoader({}), buffer_size=0)
