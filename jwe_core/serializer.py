"""
jwe_core.serializer
-------------------
Turns an Envelope back into wire text.

- compact_serialize(): five dot-separated segments, single recipient only
- full_serialize(): JSON object; flattened automatically for one recipient

Both emit the protected header bytes the Envelope was parsed from when it
has them, so a re-serialized message still authenticates against the AAD
the producer computed. This includes the compact form: a parsed header is
echoed as received rather than re-encoded from its mapping, since any
re-encoding that changes key order or spacing changes the AAD. Only a
hand-built Envelope gets canonical_json(protected).
"""

from __future__ import annotations
from typing import Any, Dict, List

from .constants import (
    FIELD_AAD, FIELD_CIPHERTEXT, FIELD_ENCRYPTED_KEY, FIELD_HEADER, FIELD_IV,
    FIELD_PROTECTED, FIELD_RECIPIENTS, FIELD_TAG, FIELD_UNPROTECTED,
    COMPACT_SEPARATOR, FULL_FIELD_ORDER,
)
from .envelope import Envelope
from .errors import UnsupportedShapeError
from .logger import get_logger
from .utils import b64u_encode, compact_json

log = get_logger("Serializer")


def compact_serialize(env: Envelope) -> str:
    if not env.is_compact_eligible:
        raise UnsupportedShapeError(
            "compact serialization needs exactly one recipient and no unprotected or per-recipient headers"
        )

    return COMPACT_SEPARATOR.join(
        b64u_encode(part)
        for part in (
            env.protected_bytes(),
            env.recipients[0].encrypted_key,
            env.iv,
            env.ciphertext,
            env.tag,
        )
    )


def full_serialize(env: Envelope) -> str:
    raw: Dict[str, Any] = {
        FIELD_PROTECTED: _encoded(env.protected_bytes()),
        FIELD_UNPROTECTED: env.unprotected or None,
        FIELD_AAD: _encoded(env.aad),
        FIELD_IV: _encoded(env.iv),
        FIELD_CIPHERTEXT: _encoded(env.ciphertext),
        FIELD_TAG: _encoded(env.tag),
    }

    if len(env.recipients) > 1:
        recipients: List[Dict[str, Any]] = []
        for recipient in env.recipients:
            info: Dict[str, Any] = {}
            if recipient.header:
                info[FIELD_HEADER] = recipient.header
            if recipient.encrypted_key:
                info[FIELD_ENCRYPTED_KEY] = b64u_encode(recipient.encrypted_key)
            recipients.append(info)
        raw[FIELD_RECIPIENTS] = recipients
    else:
        # flattened serialization
        raw[FIELD_HEADER] = env.recipients[0].header or None
        raw[FIELD_ENCRYPTED_KEY] = _encoded(env.recipients[0].encrypted_key)

    log.debug(f"[SERIALIZE] JSON recipients={len(env.recipients)}")
    return compact_json({k: raw[k] for k in FULL_FIELD_ORDER if raw.get(k) is not None})


def _encoded(data):
    return b64u_encode(data) if data else None
