"""Summary fingerprinting."""

from solfhe_analyzer.summary.encoder import (
    canonical_json,
    decode_for_inspection,
    encode,
    encode_base64,
    to_result_value,
    verify,
)

__all__ = [
    "canonical_json",
    "decode_for_inspection",
    "encode",
    "encode_base64",
    "to_result_value",
    "verify",
]
