"""
Total order and equality over version identifiers.

Ordering is lexicographic over::

    major, minor, build, revision, stage rank (smaller is newer), pre-release build

A release beats any of its pre-releases; within one pre-release stage a larger build
is newer. The pre-release build of a release never takes part.

Equality is agreement of the descriptive form, so ``compare(a, b) is Ordering.EQUAL``
exactly when ``a == b``.

Notes:
    - ``Ordering.GREATER`` means the left operand is newer, so ascending sorts run
      oldest to newest.
    - Every entry point rejects ``None`` with NullArgument.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .errors import NullArgument
from .grammar import Stage, stage_rank

if TYPE_CHECKING:
    from .versioning import VersionIdentifier

__all__ = [
    "Ordering",
    "compare",
    "sort_key",
    "is_equal_to",
    "is_newer_than",
    "is_older_than",
    "is_newer_or_equal_to",
    "is_older_or_equal_to",
]


class Ordering(IntEnum):
    """Three-way comparison result; GREATER means newer."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _require_version(value: Any, name: str) -> VersionIdentifier:
    from .versioning import VersionIdentifier

    if value is None:
        raise NullArgument(f"{name} must be a VersionIdentifier, not None")
    if not isinstance(value, VersionIdentifier):
        raise TypeError(f"{name} must be a VersionIdentifier (got: {type(value).__name__})")
    return value


def sort_key(version: VersionIdentifier) -> tuple[int, int, int, int, int, int]:
    """
    Tuple key whose natural order matches ``compare``.

    The stage rank is negated so that RELEASE (rank 0) sorts above ALPHA (rank 3).

    Examples:
        >>> from upver.core.versioning import parse
        >>> [str(v) for v in sorted([parse("1.0"), parse("1.0a"), parse("1.0rc")], key=sort_key)]
        ['1.0.0.0 Alpha', '1.0.0.0 ReleaseCandidate', '1.0.0.0']
    """
    version = _require_version(version, "version")
    pre = version.pre_release_build if version.stage is not Stage.RELEASE else 0
    return (
        version.major,
        version.minor,
        version.build,
        version.revision,
        -stage_rank(version.stage),
        pre,
    )


def compare(a: VersionIdentifier, b: VersionIdentifier) -> Ordering:
    """
    Three-way compare two versions.

    Args:
        a (VersionIdentifier): Left operand.
        b (VersionIdentifier): Right operand.

    Returns:
        Ordering: GREATER if a is newer, LESS if a is older, EQUAL otherwise.

    Raises:
        NullArgument: If either operand is None.
        TypeError: If either operand is not a VersionIdentifier.
    """
    a = _require_version(a, "a")
    b = _require_version(b, "b")
    key_a = sort_key(a)
    key_b = sort_key(b)
    if key_a > key_b:
        return Ordering.GREATER
    if key_a < key_b:
        return Ordering.LESS
    return Ordering.EQUAL


def is_equal_to(a: VersionIdentifier, b: VersionIdentifier) -> bool:
    """True if both versions render the same descriptive form."""
    a = _require_version(a, "a")
    b = _require_version(b, "b")
    return a.descriptive_form == b.descriptive_form


def is_newer_than(a: VersionIdentifier, b: VersionIdentifier) -> bool:
    return compare(a, b) is Ordering.GREATER


def is_older_than(a: VersionIdentifier, b: VersionIdentifier) -> bool:
    return compare(a, b) is Ordering.LESS


def is_newer_or_equal_to(a: VersionIdentifier, b: VersionIdentifier) -> bool:
    return compare(a, b) is not Ordering.LESS


def is_older_or_equal_to(a: VersionIdentifier, b: VersionIdentifier) -> bool:
    return compare(a, b) is not Ordering.GREATER
