import io

import pytest

from fault_demo.utils.records import (
    MAX_RECORD_BYTES,
    SAMPLE_RECORDS,
    encode_record,
    read_all_records,
    read_record,
    write_records,
)


def test_encode_record_layout():
    assert encode_record("hi") == b"\x00\x02hi"
    assert encode_record("") == b"\x00\x00"
    # Length counts UTF-8 bytes, not characters
    assert encode_record("é") == b"\x00\x02\xc3\xa9"


def test_encode_record_too_long():
    with pytest.raises(ValueError, match="too long"):
        encode_record("x" * (MAX_RECORD_BYTES + 1))


def test_write_then_read_until_exhausted():
    stream = io.BytesIO()
    assert write_records(stream, SAMPLE_RECORDS) == len(SAMPLE_RECORDS)
    stream.seek(0)

    assert read_record(stream) == SAMPLE_RECORDS[0]
    assert read_record(stream) == SAMPLE_RECORDS[1]
    with pytest.raises(EOFError):
        read_record(stream)


def test_empty_stream_raises_eof():
    with pytest.raises(EOFError):
        read_record(io.BytesIO(b""))


def test_truncated_header_raises_eof():
    with pytest.raises(EOFError, match="expected 2 bytes, got 1"):
        read_record(io.BytesIO(b"\x00"))


def test_truncated_body_raises_eof():
    with pytest.raises(EOFError, match="expected 5 bytes, got 3"):
        read_record(io.BytesIO(b"\x00\x05abc"))


def test_plain_text_is_not_a_record_stream():
    # "ab" as a header announces 0x6162 bytes that never arrive
    with pytest.raises(EOFError):
        read_record(io.BytesIO(b"abcdef"))


def test_read_all_records_drops_truncated_tail():
    data = encode_record("one") + encode_record("two") + b"\x00\x09par"
    assert read_all_records(io.BytesIO(data)) == ["one", "two"]
