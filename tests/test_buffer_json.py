"""Tests for the buffer-safe JSON codec."""

import pytest

from redis_auth_state import DecodeError, decode, encode


def test_bytes_are_tagged_as_base64():
    assert encode({"a": b"\x00\x01"}) == '{"a":{"type":"Buffer","data":"AAE="}}'


def test_output_is_compact():
    assert encode({"a": [1, 2], "b": {"c": True}}) == '{"a":[1,2],"b":{"c":true}}'


def test_non_ascii_is_kept_verbatim():
    assert encode({"name": "José"}) == '{"name":"José"}'


def test_nested_round_trip():
    value = {
        "keyPair": {"private": b"\x01" * 32, "public": bytearray(b"\x02" * 32)},
        "list": [b"\xff", {"deep": b""}],
        "plain": "text",
        "n": 7,
        "none": None,
    }
    restored = decode(encode(value))
    assert restored == {
        "keyPair": {"private": b"\x01" * 32, "public": b"\x02" * 32},
        "list": [b"\xff", {"deep": b""}],
        "plain": "text",
        "n": 7,
        "none": None,
    }
    assert isinstance(restored["keyPair"]["public"], bytes)


def test_decode_buffer_with_byte_list():
    """Node's default Buffer#toJSON writes the bytes as a number list."""
    assert decode('{"k":{"type":"Buffer","data":[1,2,3]}}') == {"k": b"\x01\x02\x03"}


def test_decode_buffer_flag_with_value():
    assert decode('{"buffer":true,"value":"AAE="}') == b"\x00\x01"


def test_already_tagged_dict_is_normalized():
    assert encode({"type": "Buffer", "data": [0, 1]}) == '{"type":"Buffer","data":"AAE="}'


def test_decode_accepts_bytes_input():
    assert decode(b'{"a":1}') == {"a": 1}


def test_decode_invalid_json_raises():
    with pytest.raises(DecodeError) as exc_info:
        decode("{not json", location="DB1:creds")
    assert "DB1:creds" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_decode_invalid_base64_raises():
    with pytest.raises(DecodeError):
        decode('{"type":"Buffer","data":"AAE"}')
