# jwe_core/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

from .constants import ENV_MAX_INPUT_LENGTH


@dataclass(frozen=True)
class ParserConfig:
    # None means unbounded; callers that accept untrusted input should set it
    max_input_length: Optional[int] = None


def load_parser_config(config: dict | None = None) -> ParserConfig:
    """
    Resolve parser settings from an explicit dict, then the environment.

        - max_input_length / JWE_MAX_INPUT_LENGTH (characters, after whitespace strip)
    """
    config = config or {}
    raw = config.get("max_input_length")
    if raw is None:
        raw = os.getenv(ENV_MAX_INPUT_LENGTH) or None

    if raw is None:
        return ParserConfig()

    try:
        limit = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid max_input_length: {raw!r}")
    if limit <= 0:
        raise ValueError(f"max_input_length must be positive, got {limit}")
    return ParserConfig(max_input_length=limit)
