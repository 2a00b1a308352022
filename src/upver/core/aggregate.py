"""
Highest/lowest version over a collection.

``highest`` seeds its accumulator with ``ZERO_VERSION`` (0.0.0.0, release). When no
element is newer than the seed, including the empty case, the seed itself is
returned: a zero result is a sentinel value, not a "nothing found" signal.
Pass ``on_empty="error"`` to reject empty input instead.

``lowest`` has no sentinel: it seeds with the highest element of the input and scans
for older ones, so an empty input raises EmptyInput.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from .comparison import is_newer_than, is_older_than
from .errors import EmptyInput
from .versioning import ZERO_VERSION, VersionIdentifier

__all__ = [
    "OnEmpty",
    "highest",
    "lowest",
]

OnEmpty = Literal["sentinel", "error"]


def highest(
    versions: Iterable[VersionIdentifier], *, on_empty: OnEmpty = "sentinel"
) -> VersionIdentifier:
    """
    Return the newest version in a collection.

    Args:
        versions (Iterable[VersionIdentifier]): Versions to scan (any iterable).
        on_empty (Literal["sentinel", "error"]): Behavior for an empty collection.

    Returns:
        VersionIdentifier: The newest element, or ``ZERO_VERSION`` when no element is
        newer than it.

    Raises:
        EmptyInput: If versions is empty and on_empty is "error".

    Examples:
        >>> from upver.core.versioning import parse
        >>> str(highest([parse("1.0.0.0"), parse("2.0.0.0"), parse("1.5.0.0")]))
        '2.0.0.0'
        >>> str(highest([]))
        '0.0.0.0'
    """
    newest = ZERO_VERSION
    seen = False
    for version in versions:
        seen = True
        if is_newer_than(version, newest):
            newest = version
    if not seen and on_empty == "error":
        raise EmptyInput("highest() needs at least one version")
    return newest


def lowest(versions: Iterable[VersionIdentifier]) -> VersionIdentifier:
    """
    Return the oldest version in a collection.

    Raises:
        EmptyInput: If versions is empty.

    Examples:
        >>> from upver.core.versioning import parse
        >>> str(lowest([parse("1.0b"), parse("1.0"), parse("1.0a2")]))
        '1.0.0.0 Alpha 2'
    """
    items = list(versions)
    if not items:
        raise EmptyInput("lowest() needs at least one version")
    oldest = highest(items)
    for version in items:
        if is_older_than(version, oldest):
            oldest = version
    return oldest
