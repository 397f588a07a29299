"""Tally obfuscation strategies.

These map a raw vote count to an opaque string for reporting. The reference
strategy is a label only and offers no confidentiality.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Protocol

from . import config


class TallyObfuscator(Protocol):
    def obfuscate(self, count: int) -> str:
        ...


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError("count must be an int")
    if count < 0:
        raise ValueError("count must be non-negative")


class LabelObfuscator:
    """Prefix the count with a fixed label, e.g. 3 -> 'encrypted_3'."""

    def __init__(self, prefix: str = config.OBFUSCATION_PREFIX):
        self.prefix = prefix

    def obfuscate(self, count: int) -> str:
        _check_count(count)
        return f"{self.prefix}{count}"


class DigestObfuscator:
    """HMAC-SHA256 of the count under a fixed key, hex encoded.

    Deterministic for a given key, so equal counts give equal strings.
    """

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError("key must be bytes")
        self._key = bytes(key)

    def obfuscate(self, count: int) -> str:
        _check_count(count)
        return hmac.new(self._key, str(count).encode("utf-8"), hashlib.sha256).hexdigest()
