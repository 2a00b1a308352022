"""
Canonical JSON serialization and hashing helpers for version identifiers.

Provides a single canonical JSON policy, a SHA-256 digest that is stable across
processes, and the legacy 32-bit packed hash kept for compatibility with hashes
persisted by older clients. This module is zero-IO.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - ``version_digest`` hashes the canonical JSON of the VersionRecord payload.
    - ``legacy_hash`` is lossy: it ignores stage and pre-release build and masks every
      component to its bit width (e.g. majors 1 and 17 collide). Do not use it for
      ``__hash__`` or for new persisted data.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from typing import Any

from .constants import LEGACY_HASH_LAYOUT
from .schema import VersionRecord
from .versioning import VersionIdentifier

__all__ = [
    "json_dumps_canonical",
    "hash_payload",
    "version_digest",
    "legacy_hash",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sha256_hexdigest(s: str) -> str:
    """Compute SHA-256 hex digest of a UTF-8 string."""
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def hash_payload(payload: Mapping[str, Any]) -> str:
    """
    Compute a stable hash for a mapping by hashing its canonical JSON.

    Notes:
        Re-ordering keys in the mapping does not change the result.
    """
    return _sha256_hexdigest(json_dumps_canonical(dict(payload)))


def version_digest(version: VersionIdentifier) -> str:
    """
    SHA-256 hex digest of a version, stable across processes and interpreters.

    Equal versions always produce the same digest.

    Examples:
        >>> from upver.core.versioning import parse
        >>> version_digest(parse("1.0")) == version_digest(parse("1.0.0.0"))
        True
    """
    return hash_payload(VersionRecord.from_version(version).model_dump(mode="json"))


def legacy_hash(version: VersionIdentifier) -> int:
    """
    Bit-packed 32-bit hash compatible with older clients.

    Layout (most to least significant): major 4 bits, minor 8, build 8, revision 12.

    Returns:
        int: Signed 32-bit integer.

    Examples:
        >>> from upver.core.versioning import parse
        >>> legacy_hash(parse("1.2.3.4")) == (1 << 28) | (2 << 20) | (3 << 12) | 4
        True
    """
    accumulator = 0
    for name, bits, shift in LEGACY_HASH_LAYOUT:
        accumulator |= (getattr(version, name) & ((1 << bits) - 1)) << shift
    if accumulator >= 1 << 31:
        accumulator -= 1 << 32
    return accumulator
