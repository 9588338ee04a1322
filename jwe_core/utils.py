"""
jwe_core.utils
--------------
Base64url and canonical JSON helpers shared by the parser and serializer.
Decoding is strict: the JWE wire forms never carry padding, so any `=`
or character outside the URL-safe alphabet is rejected.
"""

from __future__ import annotations
import base64, binascii, json, re
from typing import Any, Dict

from .errors import Base64Error

_B64URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64u_encode(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).decode("ascii").rstrip("=")


def b64u_decode(s: str) -> bytes:
    if not isinstance(s, str):
        raise Base64Error(f"expected base64url text, got {type(s).__name__}")
    if not _B64URL_ALPHABET.fullmatch(s):
        raise Base64Error("invalid base64url alphabet or padding")
    try:
        return base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    except (binascii.Error, ValueError) as exc:
        raise Base64Error(f"invalid base64url length: {len(s)}") from exc


def canonical_json(obj: Dict[str, Any]) -> bytes:
    # Deterministic, minimal JSON for protected headers
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False).encode("utf-8")


def compact_json(obj: Any) -> str:
    # Minimal JSON that keeps the caller's key order
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def strip_whitespace(text: str) -> str:
    return "".join(text.split())
