# jwe_core/headers.py
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from .constants import HEADER_ALG, HEADER_ENC

Header = Dict[str, Any]


def merge_headers(*headers: Optional[Mapping[str, Any]]) -> Header:
    """
    Fold header fragments left to right into a new dict.

    Absent (None) fragments are skipped and a later fragment overrides an
    earlier one on key collision. Inputs are never mutated.
    """
    out: Header = {}
    for header in headers:
        if header is not None:
            out.update(header)
    return out


def has_alg_enc(header: Mapping[str, Any]) -> bool:
    # both must be non-empty strings
    return all(
        isinstance(header.get(name), str) and header.get(name) != ""
        for name in (HEADER_ALG, HEADER_ENC)
    )
