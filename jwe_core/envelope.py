"""
jwe_core.envelope
-----------------
Defines the Envelope class, the in-memory form of a JWE encrypted message.
Both wire shapes (compact and JSON) parse into, and serialize from, this
structure.

Key features:
- Per-recipient merged headers (protected < unprotected < recipient)
- Byte-exact AAD reconstruction from the protected header as received
- Read-only once built; the crypto layer consumes it, never mutates it

An Envelope built by hand (not via parse) carries no original protected
bytes, so its AAD comes from canonical_json(protected). Two implementations
that canonicalize differently will disagree on that AAD; when authenticity
matters, keep the parsed Envelope around instead of rebuilding one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

from .constants import HEADER_ALG, HEADER_ENC
from .errors import InvalidEnvelope, MissingAlgEnc
from .headers import Header, has_alg_enc, merge_headers
from .utils import b64u_encode, canonical_json


@dataclass(frozen=True)
class RecipientInfo:
    header: Optional[Header] = None
    encrypted_key: bytes = b""  # empty for direct-key algorithms

    __hash__ = None

    def __post_init__(self):
        if self.header is not None:
            object.__setattr__(self, "header", dict(self.header))


@dataclass(frozen=True)
class Envelope:
    protected: Header
    recipients: Sequence[RecipientInfo] = field(default_factory=lambda: (RecipientInfo(),))
    iv: bytes = b""
    ciphertext: bytes = b""
    tag: bytes = b""
    unprotected: Optional[Header] = None
    aad: Optional[bytes] = None
    # exact protected-header bytes as received; set by the parser only
    original_protected: Optional[bytes] = field(default=None, repr=False)

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "protected", dict(self.protected or {}))
        if self.unprotected is not None:
            object.__setattr__(self, "unprotected", dict(self.unprotected))
        object.__setattr__(self, "recipients", tuple(self.recipients))
        # an empty aad authenticates nothing and is never serialized
        if not self.aad:
            object.__setattr__(self, "aad", None)

        if not self.recipients:
            raise InvalidEnvelope("envelope must have at least one recipient")

        for index, recipient in enumerate(self.recipients):
            if not has_alg_enc(self.merged_header(recipient)):
                raise MissingAlgEnc(f"recipient {index} is missing alg/enc headers")

    def merged_header(self, recipient: Union[RecipientInfo, int, None] = None) -> Header:
        """
        Effective header for one recipient.

        `recipient` may be a RecipientInfo, an index into `recipients`, or
        None for the message-level header (protected + unprotected only).
        """
        if isinstance(recipient, int):
            recipient = self.recipients[recipient]
        return merge_headers(
            self.protected,
            self.unprotected,
            recipient.header if recipient is not None else None,
        )

    def algorithms(self, recipient: Union[RecipientInfo, int] = 0) -> Tuple[str, str]:
        merged = self.merged_header(recipient)
        return merged[HEADER_ALG], merged[HEADER_ENC]

    @property
    def is_compact_eligible(self) -> bool:
        return (
            len(self.recipients) == 1
            and self.unprotected is None
            and self.recipients[0].header is None
        )

    def protected_bytes(self) -> bytes:
        if self.original_protected is not None:
            return self.original_protected
        return canonical_json(self.protected)

    def compute_aad(self) -> bytes:
        """Bytes the content cipher authenticates: b64u(protected)[.b64u(aad)]"""
        out = b64u_encode(self.protected_bytes())
        if self.aad is not None:
            out += "." + b64u_encode(self.aad)
        return out.encode("ascii")

    def auth_data(self) -> Optional[bytes]:
        if self.aad is None:
            return None
        return bytes(self.aad)

    def compact_serialize(self) -> str:
        from .serializer import compact_serialize
        return compact_serialize(self)

    def full_serialize(self) -> str:
        from .serializer import full_serialize
        return full_serialize(self)

    @classmethod
    def parse(cls, text: str, config=None) -> "Envelope":
        from .parser import parse_encrypted
        return parse_encrypted(text, config=config)
