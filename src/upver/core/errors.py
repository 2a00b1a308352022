"""
Core exception types raised by parsing, construction, comparison, and aggregation.

Provides typed exceptions for version-domain failures:
- InvalidFormat for text that does not match the version grammar or the descriptive form.
- InvalidComponent for negative or non-integer components and unknown stages.
- EmptyInput for aggregation over an empty collection.
- NullArgument for ``None`` passed where a version is required.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - All value errors share the ``VersionError`` base so callers can catch one type.
    - NullArgument derives from TypeError, not VersionError: it signals a caller bug,
      not bad input text.

Examples:
    Catch any parse failure.

    >>> from upver.core.errors import VersionError
    >>> from upver.core.versioning import parse
    >>> try:
    ...     parse("1.2.3.4.5")
    ... except VersionError as e:
    ...     msg = str(e)
    >>> "not a valid version" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "VersionError",
    "InvalidFormat",
    "InvalidComponent",
    "EmptyInput",
    "NullArgument",
]


class VersionError(ValueError):
    """Base class for version parsing, construction, and aggregation failures."""


class InvalidFormat(VersionError):
    """Input text does not match the version grammar or the descriptive form."""


class InvalidComponent(VersionError):
    """A component is negative or not an integer, or the stage is unknown."""


class EmptyInput(VersionError):
    """An aggregation that needs at least one version received none."""


class NullArgument(TypeError):
    """``None`` was passed where a VersionIdentifier is required."""
