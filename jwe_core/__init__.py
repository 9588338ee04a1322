"""
JWE Core Package
================
Parsing and serialization of JWE encrypted-message envelopes.

Provides:
- Envelope / RecipientInfo data model with merged headers and AAD reconstruction
- parse_encrypted() for compact and JSON (general or flattened) input
- compact_serialize() / full_serialize() for output
"""

from .envelope import Envelope, RecipientInfo
from .errors import (
    JWEError,
    ParseError,
    Base64Error,
    MalformedRecipient,
    JSONSyntaxError,
    MalformedHeader,
    MalformedCompact,
    MissingAlgEnc,
    InputTooLarge,
    SerializationError,
    UnsupportedShapeError,
    InvalidEnvelope,
)
from .headers import merge_headers, has_alg_enc
from .parser import parse_encrypted
from .serializer import compact_serialize, full_serialize

__all__ = [
    "Envelope",
    "RecipientInfo",
    "parse_encrypted",
    "compact_serialize",
    "full_serialize",
    "merge_headers",
    "has_alg_enc",
    "JWEError",
    "ParseError",
    "Base64Error",
    "MalformedRecipient",
    "JSONSyntaxError",
    "MalformedHeader",
    "MalformedCompact",
    "MissingAlgEnc",
    "InputTooLarge",
    "SerializationError",
    "UnsupportedShapeError",
    "InvalidEnvelope",
]
