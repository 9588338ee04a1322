# jwe_core/errors.py
from __future__ import annotations


class JWEError(Exception):
    pass


class ParseError(JWEError):
    """Raised when JWE input text cannot be turned into an Envelope."""


class Base64Error(ParseError):
    pass


class MalformedRecipient(Base64Error):
    """A `recipients` entry is not an object or carries a bad encrypted key."""


class JSONSyntaxError(ParseError):
    pass


class MalformedHeader(ParseError):
    pass


class MalformedCompact(ParseError):
    pass


class MissingAlgEnc(ParseError):
    """A recipient's merged header lacks a non-empty `alg` or `enc`."""


class InputTooLarge(ParseError):
    pass


class SerializationError(JWEError):
    pass


class UnsupportedShapeError(SerializationError):
    """
    Compact serialization was requested for an envelope with more than one
    recipient, an unprotected header, or a per-recipient header.
    """


class InvalidEnvelope(JWEError, ValueError):
    pass
