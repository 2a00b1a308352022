"""
Immutable software version identifier and its factories.

A ``VersionIdentifier`` carries four non-negative numeric components
(major, minor, build, revision), a release ``Stage`` and a pre-release build
counter. Values are created only through validating factories and are never
mutated; every textual form is computed on demand. This module is zero-IO.

Notes:
    - Construction raises InvalidComponent for negative or non-integer components.
    - A release never carries a pre-release build: it is normalized to 0, which keeps
      ``from_descriptive_form(v.descriptive_form) == v`` field for field.
    - ``==`` compares descriptive forms; ``<``/``>`` follow upver.core.comparison.
    - ``hash()`` covers every field that takes part in equality, without truncation.
      The legacy 32-bit packing lives in upver.core.hashing.legacy_hash.

Examples:
    >>> from upver.core.versioning import VersionIdentifier, parse
    >>> v = parse("2.0.0.0-rc.1")
    >>> v.stage.name, v.pre_release_build
    ('RELEASE_CANDIDATE', 1)
    >>> v < parse("2.0")
    True
    >>> VersionIdentifier.from_descriptive_form(v.descriptive_form) == v
    True
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from . import comparison, formatting
from .comparison import Ordering
from .constants import COMPONENT_NAMES, ZERO_COMPONENTS
from .errors import InvalidComponent
from .grammar import Stage, VersionMatch, is_valid, parse_components, stage_from_value

__all__ = [
    "VersionIdentifier",
    "ZERO_VERSION",
    "parse",
    "is_valid",
    "from_descriptive_form",
]


def _check_component(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidComponent(f"{name} must be an integer, got {value!r}")
    # Every form renders components as decimal text.
    try:
        str(value)
    except ValueError as e:
        raise InvalidComponent(f"{name} has too many digits to render") from e
    if value < 0:
        raise InvalidComponent(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True, eq=False)
class VersionIdentifier:
    """
    Immutable four-component version with release stage.

    Attributes:
        major (int): Non-negative major component.
        minor (int): Non-negative minor component.
        build (int): Non-negative build component.
        revision (int): Non-negative revision component.
        stage (Stage): Release maturity; any spelling accepted by
            ``stage_from_value`` is normalized to a Stage member.
        pre_release_build (int): Non-negative counter within a pre-release stage;
            0 means none. Always 0 for releases.

    Raises:
        InvalidComponent: If a component is negative or not an int, or the stage
            is unknown.
    """

    major: int
    minor: int
    build: int
    revision: int
    stage: Stage = Stage.RELEASE
    pre_release_build: int = 0

    def __post_init__(self) -> None:
        for name in COMPONENT_NAMES:
            _check_component(name, getattr(self, name))
        _check_component("pre_release_build", self.pre_release_build)
        stage = stage_from_value(self.stage)
        object.__setattr__(self, "stage", stage)
        if stage is Stage.RELEASE:
            object.__setattr__(self, "pre_release_build", 0)

    # ------------------------------------------------------------------ factories

    @classmethod
    def _from_match(cls, found: VersionMatch) -> VersionIdentifier:
        major, minor, build, revision = found.components
        return cls(major, minor, build, revision, found.stage, found.pre_release_build)

    @classmethod
    def parse(cls, text: str) -> VersionIdentifier:
        """
        Parse grammar input such as "1.2.3.4-rc.5", "1.0 b2" or "2.0.0.0".

        Raises:
            InvalidFormat: If text does not match the version grammar.
        """
        return cls._from_match(parse_components(text))

    @classmethod
    def from_descriptive_form(cls, text: str, *, strict: bool = False) -> VersionIdentifier:
        """
        Parse the descriptive form ("1.2.3.4 Beta 2"), the inverse of ``descriptive_form``.

        Raises:
            InvalidFormat: If text is not a descriptive form (see
                upver.core.formatting.split_descriptive_form).
        """
        return cls._from_match(formatting.split_descriptive_form(text, strict=strict))

    def replace(self, **changes: Any) -> VersionIdentifier:
        """Return a new, validated version with the given fields changed."""
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------ derived views

    @property
    def components(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.build, self.revision)

    @property
    def is_release(self) -> bool:
        return self.stage is Stage.RELEASE

    @property
    def basic_form(self) -> str:
        return formatting.basic_form(self)

    @property
    def descriptive_form(self) -> str:
        return formatting.descriptive_form(self)

    @property
    def compact_form(self) -> str:
        return formatting.compact_form(self)

    # ------------------------------------------------------------------ comparison

    def compare_to(self, other: VersionIdentifier) -> Ordering:
        return comparison.compare(self, other)

    def is_newer_than(self, other: VersionIdentifier) -> bool:
        return comparison.is_newer_than(self, other)

    def is_older_than(self, other: VersionIdentifier) -> bool:
        return comparison.is_older_than(self, other)

    def is_newer_or_equal_to(self, other: VersionIdentifier) -> bool:
        return comparison.is_newer_or_equal_to(self, other)

    def is_older_or_equal_to(self, other: VersionIdentifier) -> bool:
        return comparison.is_older_or_equal_to(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return self.descriptive_form == other.descriptive_form

    def __hash__(self) -> int:
        return hash(comparison.sort_key(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return comparison.compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return comparison.compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return comparison.compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return comparison.compare(self, other) is not Ordering.LESS

    def __str__(self) -> str:
        return self.descriptive_form


# Aggregation sentinel: the oldest possible release.
ZERO_VERSION = VersionIdentifier(*ZERO_COMPONENTS)


def parse(text: str) -> VersionIdentifier:
    """
    Parse version text into a VersionIdentifier.

    Args:
        text (str): Grammar input, e.g. "1.2.3.4", "1.0", "2.0.0.0-rc.1", "1.0 b2".

    Returns:
        VersionIdentifier: Parsed value; missing components default to 0.

    Raises:
        InvalidFormat: If text does not match the version grammar.

    Examples:
        >>> parse("1.0").components
        (1, 0, 0, 0)
    """
    return VersionIdentifier.parse(text)


def from_descriptive_form(text: str, *, strict: bool = False) -> VersionIdentifier:
    """Module-level alias for ``VersionIdentifier.from_descriptive_form``."""
    return VersionIdentifier.from_descriptive_form(text, strict=strict)
