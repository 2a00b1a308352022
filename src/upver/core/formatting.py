"""
Textual forms of a version and the inverse parser for the descriptive form.

Forms
- basic:        "1.2.3.4"           always four components, no stage
- descriptive:  "1.2.3.4 Beta 2"    full stage word and optional pre-release build
- compact:      "1.2.3.4b2"         short stage code glued to the numbers

The descriptive form is the round-trip serialization: ``split_descriptive_form``
inverts ``descriptive_form`` field for field. The compact form re-parses through the
grammar because every shortcut is also a grammar stage token.

Notes:
    - Rendering functions only read fields; they never build values.
    - Unknown stage words fall back to RELEASE unless ``strict=True``. The fallback
      is a legacy convention and is logged at WARNING level.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from .constants import MAX_COMPONENTS
from .errors import InvalidFormat
from .grammar import Stage, VersionMatch, stage_from_word, stage_shortcut, stage_word

if TYPE_CHECKING:
    from .versioning import VersionIdentifier

__all__ = [
    "basic_form",
    "descriptive_form",
    "compact_form",
    "split_descriptive_form",
]

logger = logging.getLogger(__name__)

_MAX_SECTIONS: Final[int] = 3
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+", re.ASCII)


def basic_form(version: VersionIdentifier) -> str:
    """
    Render the canonical four-component form.

    Examples:
        >>> from upver.core.versioning import parse
        >>> basic_form(parse("1.2-rc.3"))
        '1.2.0.0'
    """
    return f"{version.major}.{version.minor}.{version.build}.{version.revision}"


def descriptive_form(version: VersionIdentifier) -> str:
    """
    Render the descriptive form used for equality and round-trip serialization.

    Args:
        version (VersionIdentifier): Value to render.

    Returns:
        str: Basic form for releases; otherwise basic form, a space, the full stage
        word, and " <pre_release_build>" when the build is non-zero.

    Examples:
        >>> from upver.core.versioning import parse
        >>> descriptive_form(parse("1.2.3.4b2"))
        '1.2.3.4 Beta 2'
        >>> descriptive_form(parse("1.2.3.4-rc"))
        '1.2.3.4 ReleaseCandidate'
    """
    basic = basic_form(version)
    if version.stage is Stage.RELEASE:
        return basic
    text = f"{basic} {stage_word(version.stage)}"
    if version.pre_release_build != 0:
        text = f"{text} {version.pre_release_build}"
    return text


def compact_form(version: VersionIdentifier) -> str:
    """
    Render the terse legacy form (e.g., "1.2.3.4rc1").

    Examples:
        >>> from upver.core.versioning import parse
        >>> compact_form(parse("1.2.3.4 Beta"))
        '1.2.3.4b'
    """
    basic = basic_form(version)
    if version.stage is Stage.RELEASE:
        return basic
    suffix = str(version.pre_release_build) if version.pre_release_build != 0 else ""
    return f"{basic}{stage_shortcut(version.stage)}{suffix}"


def _parse_integer(token: str, what: str, text: str) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidFormat(f"{what} must be a non-negative integer in {text!r} (got: {token!r})")
    try:
        return int(token)
    except ValueError as e:
        raise InvalidFormat(f"{what} is too large in {text!r}") from e


def split_descriptive_form(text: str, *, strict: bool = False) -> VersionMatch:
    """
    Parse the descriptive form back into components.

    Args:
        text (str): Descriptive text such as "1.2.3.4", "1.2.3.4 Alpha" or
            "1.2.3.4 ReleaseCandidate 3".
        strict (bool): If True, an unknown stage word is an error instead of
            falling back to RELEASE.

    Returns:
        VersionMatch: Extracted components.

    Raises:
        InvalidFormat: If text has more than three space-separated sections, the
            numeric section is not exactly four integers, the pre-release build is
            not an integer, a number is too large to convert, or (strict only) the
            stage word is unknown.
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"descriptive form must be a string (got: {type(text).__name__})")
    sections = [section for section in text.split(" ") if section]
    if not sections:
        raise InvalidFormat("descriptive form is empty")
    if len(sections) > _MAX_SECTIONS:
        raise InvalidFormat(
            f"descriptive form has at most {_MAX_SECTIONS} sections (got {len(sections)}): {text!r}"
        )

    parts = sections[0].split(".")
    if len(parts) != MAX_COMPONENTS:
        raise InvalidFormat(
            f"descriptive form needs exactly {MAX_COMPONENTS} numeric components: {text!r}"
        )
    major, minor, build, revision = (_parse_integer(p, "version component", text) for p in parts)
    components = (major, minor, build, revision)

    if len(sections) == 1:
        return VersionMatch(components, Stage.RELEASE, 0)

    stage = stage_from_word(sections[1])
    if stage is None:
        if strict:
            raise InvalidFormat(f"unknown stage word {sections[1]!r} in {text!r}")
        logger.warning("Unknown stage word %r in %r; treating as Release", sections[1], text)
        stage = Stage.RELEASE

    pre_release_build = 0
    if len(sections) == _MAX_SECTIONS:
        pre_release_build = _parse_integer(sections[2], "pre-release build", text)

    return VersionMatch(components, stage, pre_release_build)
