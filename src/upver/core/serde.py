"""
JSON serialization/deserialization of version identifiers.

Encodes a VersionIdentifier as the canonical JSON of its ``VersionRecord`` and decodes
it back through pydantic validation. Re-exports ``json_dumps_canonical`` from
``upver.core.hashing`` to keep a single canonical JSON policy. This module is zero-IO.

Notes:
    - Decoding errors surface as ``pydantic.ValidationError`` (malformed JSON included).
    - Collaborators that prefer text should persist ``VersionIdentifier.descriptive_form``
      instead; both round-trip losslessly.
"""

from __future__ import annotations

# Re-export canonical dumps to keep a single canonicalization policy.
from .hashing import json_dumps_canonical
from .schema import VersionRecord
from .versioning import VersionIdentifier

__all__ = [
    "json_dumps_canonical",
    "version_to_json",
    "version_from_json",
]


def version_to_json(version: VersionIdentifier) -> str:
    """
    Serialize a version to canonical JSON.

    Examples:
        >>> from upver.core.versioning import parse
        >>> version_to_json(parse("1.2b3"))
        '{"build":0,"major":1,"minor":2,"pre_release_build":3,"revision":0,"stage":"beta"}'
    """
    return json_dumps_canonical(VersionRecord.from_version(version).model_dump(mode="json"))


def version_from_json(s: str) -> VersionIdentifier:
    """
    Deserialize a version from JSON produced by ``version_to_json``.

    Raises:
        pydantic.ValidationError: If the payload is not a valid VersionRecord.
    """
    return VersionRecord.model_validate_json(s).to_version()
