"""Tests for summary fingerprinting."""

import base64
import hashlib

import pytest

from solfhe_analyzer.exceptions import DecodeError
from solfhe_analyzer.keywords.models import KeywordCount
from solfhe_analyzer.summary.encoder import (
    canonical_json,
    decode_for_inspection,
    encode,
    encode_base64,
    to_result_value,
    verify,
)


def test_to_result_value_with_summary():
    value = to_result_value(KeywordCount("uniswap", 3))
    assert value == {"most_common_word": "uniswap", "count": 3}


def test_to_result_value_without_summary():
    assert to_result_value(None) == {"error": "No words analyzed yet"}


def test_canonical_json_is_sorted_and_compact():
    value = {"most_common_word": "uniswap", "count": 1}
    assert canonical_json(value) == '{"count":1,"most_common_word":"uniswap"}'


def test_canonical_json_keeps_unicode():
    assert canonical_json({"most_common_word": "köln", "count": 1}) == '{"count":1,"most_common_word":"köln"}'


def test_encode_is_sha256_without_padding():
    value = {"most_common_word": "uniswap", "count": 1}
    digest = hashlib.sha256(b'{"count":1,"most_common_word":"uniswap"}').digest()
    encoded = encode(value)
    assert encoded == base64.b64encode(digest).decode().rstrip("=")
    assert len(encoded) == 43
    assert "=" not in encoded


def test_encode_is_deterministic_and_order_independent():
    a = encode({"most_common_word": "scroll", "count": 2})
    b = encode({"count": 2, "most_common_word": "scroll"})
    assert a == b
    assert a != encode({"most_common_word": "scroll", "count": 3})


def test_decode_for_inspection_returns_digest_hex():
    value = {"error": "No words analyzed yet"}
    expected = hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()
    assert decode_for_inspection(encode(value)) == expected


def test_decode_for_inspection_does_not_recover_value():
    value = {"most_common_word": "ethereum", "count": 4}
    assert "ethereum" not in decode_for_inspection(encode(value))


def test_base64_stage_round_trip():
    data = b"hello"
    assert encode_base64(data) == "aGVsbG8"
    assert decode_for_inspection(encode_base64(data)) == data.hex()
    assert decode_for_inspection("") == ""


@pytest.mark.parametrize("encoded", ["!!!", "aGVsbG8=", "A", "AB", "aGVs bG8", "ümlaut"])
def test_decode_for_inspection_rejects_malformed(encoded):
    with pytest.raises(DecodeError):
        decode_for_inspection(encoded)


def test_verify():
    value = {"most_common_word": "polkadot", "count": 2}
    assert verify(value, encode(value))
    assert not verify({"most_common_word": "polkadot", "count": 1}, encode(value))
    assert not verify(value, "ümlaut")
