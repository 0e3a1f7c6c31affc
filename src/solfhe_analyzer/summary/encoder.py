"""Fingerprint batch summaries and render them for inspection.

The fingerprint is a SHA-256 digest of the canonical JSON summary, written
as padding-free base64. It cannot be turned back into the summary:
``decode_for_inspection`` only undoes the base64 step and shows the digest
bytes as hex.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import logging
import re

from solfhe_analyzer.exceptions import DecodeError
from solfhe_analyzer.keywords.models import KeywordCount

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No words analyzed yet"

_BASE64_NO_PAD = re.compile(r"[A-Za-z0-9+/]*")


def to_result_value(summary: KeywordCount | None) -> dict:
    """Build the JSON-ready result for a batch summary."""
    if summary is None:
        return {"error": NO_DATA_MESSAGE}
    return {"most_common_word": summary.word, "count": summary.count}


def canonical_json(value: dict) -> str:
    """Serialize with sorted keys and no whitespace so equal values hash equally."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def encode_base64(data: bytes) -> str:
    """Standard-alphabet base64 with the ``=`` padding stripped."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def encode(value: dict) -> str:
    """Return the one-way fingerprint of a result value."""
    digest = hashlib.sha256(canonical_json(value).encode("utf-8")).digest()
    return encode_base64(digest)


def decode_for_inspection(encoded: str) -> str:
    """Undo the base64 rendering of a fingerprint and return the bytes as hex.

    Raises:
        DecodeError: ``encoded`` is not canonical padding-free base64.
    """
    if not _BASE64_NO_PAD.fullmatch(encoded):
        raise DecodeError(f"Invalid base64 characters in {encoded!r}")
    if len(encoded) % 4 == 1:
        raise DecodeError(f"Invalid base64 length {len(encoded)}")

    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64: {e}") from e

    # Reject leftover bits in the last symbol; they would not survive re-encoding.
    if encode_base64(raw) != encoded:
        raise DecodeError("Invalid base64: non-zero trailing bits")
    return raw.hex()


def verify(value: dict, encoded: str) -> bool:
    """Check a claimed fingerprint against one recomputed from ``value``."""
    if not encoded.isascii():
        return False
    matches = hmac.compare_digest(encode(value), encoded)
    if not matches:
        logger.debug("Fingerprint mismatch for %s", canonical_json(value))
    return matches
