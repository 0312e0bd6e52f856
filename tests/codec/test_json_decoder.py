from __future__ import annotations

import io

import pydantic
import pytest

from phonemeta import (
    JSONMetadataDecoder,
    NumberFormat,
    PhoneMetadata,
    PhoneNumberDesc,
    encode_metadata_collection,
    read_stream,
)


def test_read_stream_concatenates_chunks():
    payload = bytes(range(256)) * 100
    assert read_stream(io.BytesIO(payload), buffer_size=1000) == payload


def test_read_stream_leaves_source_open():
    source = io.BytesIO(b"abc")
    read_stream(source)
    assert not source.closed


def test_read_stream_rejects_non_positive_buffer():
    with pytest.raises(ValueError):
        read_stream(io.BytesIO(b""), buffer_size=0)


def test_decoder_preserves_record_order_and_fields():
    records = [
        PhoneMetadata(
            id="GB",
            country_code=44,
            national_prefix="0",
            main_country_for_code=True,
            general_desc=PhoneNumberDesc(
                national_number_pattern=r"[1-9]\d{9}", possible_lengths=(10,)
            ),
            number_formats=(
                NumberFormat(pattern=r"(\d{4})(\d{6})", format="$1 $2"),
            ),
        ),
        PhoneMetadata(id="JE", country_code=44),
    ]

    decoded = JSONMetadataDecoder().decode(encode_metadata_collection(records))

    assert [record.id for record in decoded] == ["GB", "JE"]
    assert decoded[0].general_desc.possible_lengths == (10,)
    assert decoded[0].number_formats[0].format == "$1 $2"


def test_decoder_ignores_unknown_fields():
    payload = b'{"metadata": [{"id": "FR", "country_code": 33, "mobile": {}}]}'
    (record,) = JSONMetadataDecoder().decode(payload)
    assert record.id == "FR"


def test_decoder_raises_value_error_for_missing_required_field():
    with pytest.raises(ValueError):
        JSONMetadataDecoder().decode(b'{"metadata": [{"id": "FR"}]}')


def test_decoded_records_are_immutable():
    (record,) = JSONMetadataDecoder().decode(
        b'{"metadata": [{"id": "FR", "country_code": 33}]}'
    )
    with pytest.raises(pydantic.ValidationError):
        record.national_prefix = "1"
