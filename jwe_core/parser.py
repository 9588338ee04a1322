"""
jwe_core.parser
---------------
Turns JWE text into an Envelope. Whitespace is insignificant in both wire
forms and is stripped first; a leading `{` selects the JSON parser,
anything else the compact parser.

Either a fully valid Envelope is returned or a ParseError subclass is
raised. The protected header bytes are retained verbatim so the AAD can be
reproduced exactly as the producer computed it.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
import json

from .config import ParserConfig, load_parser_config
from .constants import (
    COMPACT_PARTS, COMPACT_SEPARATOR,
    FIELD_AAD, FIELD_CIPHERTEXT, FIELD_ENCRYPTED_KEY, FIELD_HEADER, FIELD_IV,
    FIELD_PROTECTED, FIELD_RECIPIENTS, FIELD_TAG, FIELD_UNPROTECTED,
)
from .envelope import Envelope, RecipientInfo
from .errors import (
    Base64Error, InputTooLarge, JSONSyntaxError, MalformedCompact,
    MalformedHeader, MalformedRecipient, MissingAlgEnc, ParseError,
)
from .headers import Header, has_alg_enc
from .logger import get_logger
from .utils import b64u_decode, strip_whitespace

log = get_logger("Parser")


def parse_encrypted(text: str, config: Union[ParserConfig, dict, None] = None) -> Envelope:
    """Parse an encrypted message in compact or JSON serialization."""
    if not isinstance(config, ParserConfig):
        config = load_parser_config(config)

    text = strip_whitespace(text)
    if config.max_input_length is not None and len(text) > config.max_input_length:
        raise InputTooLarge(f"input length {len(text)} exceeds {config.max_input_length}")

    try:
        if text.startswith("{"):
            log.debug("[PARSE] JSON serialization")
            return _parse_full(text)
        log.debug("[PARSE] compact serialization")
        return _parse_compact(text)
    except ParseError as e:
        log.warning(f"[PARSE] rejected: {type(e).__name__}")
        raise


# ------------------------------------------------------------------
# JSON serialization (general and flattened)
# ------------------------------------------------------------------
def _parse_full(text: str) -> Envelope:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JSONSyntaxError(f"invalid JWE JSON: {exc.msg} at {exc.pos}") from exc
    except RecursionError as exc:
        raise JSONSyntaxError("JWE JSON nested too deeply") from exc
    if not isinstance(raw, dict):
        raise JSONSyntaxError("JWE JSON serialization must be an object")

    original_protected = _decode_field(raw, FIELD_PROTECTED) or b""
    protected: Header = {}
    if original_protected:
        protected = _decode_header(original_protected)

    unprotected = _header_field(raw, FIELD_UNPROTECTED)

    raw_recipients = raw.get(FIELD_RECIPIENTS)
    if raw_recipients is not None and raw_recipients != []:
        if FIELD_HEADER in raw or FIELD_ENCRYPTED_KEY in raw:
            log.warning("[PARSE] flattened header/encrypted_key ignored: recipients array present")
        recipients = _parse_recipients(raw_recipients)
    else:
        recipients = [
            RecipientInfo(
                header=_header_field(raw, FIELD_HEADER),
                encrypted_key=_decode_field(raw, FIELD_ENCRYPTED_KEY) or b"",
            )
        ]

    log.debug(f"[PARSE] recipients={len(recipients)}")
    return Envelope(
        protected=protected,
        recipients=recipients,
        iv=_decode_field(raw, FIELD_IV) or b"",
        ciphertext=_decode_field(raw, FIELD_CIPHERTEXT) or b"",
        tag=_decode_field(raw, FIELD_TAG) or b"",
        unprotected=unprotected,
        # an empty aad member carries nothing to authenticate
        aad=_decode_field(raw, FIELD_AAD) or None,
        original_protected=original_protected,
    )


def _parse_recipients(raw_recipients: Any) -> List[RecipientInfo]:
    if not isinstance(raw_recipients, list):
        raise MalformedRecipient("recipients must be an array")

    recipients = []
    for index, entry in enumerate(raw_recipients):
        if not isinstance(entry, dict):
            raise MalformedRecipient(f"recipient {index} is not an object")
        header = entry.get(FIELD_HEADER)
        if header is not None and not isinstance(header, dict):
            raise MalformedRecipient(f"recipient {index} header is not an object")
        raw_key = entry.get(FIELD_ENCRYPTED_KEY)
        try:
            encrypted_key = b64u_decode(raw_key) if raw_key is not None else b""
        except Base64Error as exc:
            raise MalformedRecipient(f"recipient {index} encrypted_key: {exc}") from exc
        recipients.append(RecipientInfo(header=header, encrypted_key=encrypted_key))
    return recipients


def _decode_field(raw: Dict[str, Any], name: str) -> Optional[bytes]:
    value = raw.get(name)
    if value is None:
        return None
    try:
        return b64u_decode(value)
    except Base64Error as exc:
        raise Base64Error(f"{name}: {exc}") from exc


def _header_field(raw: Dict[str, Any], name: str) -> Optional[Header]:
    value = raw.get(name)
    if value is not None and not isinstance(value, dict):
        raise MalformedHeader(f"{name} header must be an object")
    return value


def _decode_header(data: bytes) -> Header:
    try:
        header = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise MalformedHeader(f"invalid protected header: {exc}") from exc
    if not isinstance(header, dict):
        raise MalformedHeader("protected header must be a JSON object")
    return header


# ------------------------------------------------------------------
# Compact serialization
# ------------------------------------------------------------------
def _parse_compact(text: str) -> Envelope:
    parts = text.split(COMPACT_SEPARATOR)
    if len(parts) != COMPACT_PARTS:
        raise MalformedCompact(f"compact JWE format must have five parts, got {len(parts)}")

    raw_protected = b64u_decode(parts[0])
    protected = _decode_header(raw_protected)

    # compact form has no other header source to merge
    if not has_alg_enc(protected):
        raise MissingAlgEnc("message is missing alg/enc headers")

    encrypted_key, iv, ciphertext, tag = (b64u_decode(p) for p in parts[1:])

    return Envelope(
        protected=protected,
        recipients=[RecipientInfo(encrypted_key=encrypted_key)],
        iv=iv,
        ciphertext=ciphertext,
        tag=tag,
        original_protected=raw_protected,
    )
