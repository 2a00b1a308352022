"""
Canonical upver version grammar, stage vocabulary, and matching helpers.

Defines the release stages, the static tables that map stages to grammar tokens,
full English words, compact shortcuts and comparison ranks, and a zero-IO matcher
that splits version text into components. The authoritative EBNF lives next to this
module in ``version.ebnf`` and is exposed verbatim as ``EBNF_GRAMMAR``.

Responsibilities
- Define the closed ``Stage`` enum (serialized values are lower_snake).
- Centralize every stage spelling in explicit tables (no runtime introspection).
- Match text against the grammar and return components without building a value.

Grammar summary
---------------
    version      := number ('.' number){0,3}
    stage-token  := 'alpha' | 'beta' | 'rc' | 'a' | 'b'      (case-insensitive)
    stage-suffix := ('-' | ' ')? stage-token ('.'? digits)?
    input        := version stage-suffix?

| Stage              | rank | token(s)    | word              | shortcut
|--------------------|------|-------------|-------------------|---------
| RELEASE            | 0    | (none)      | Release           | (none)
| RELEASE_CANDIDATE  | 1    | rc          | ReleaseCandidate  | rc
| BETA               | 2    | b, beta     | Beta              | b
| ALPHA              | 3    | a, alpha    | Alpha             | a

A smaller rank is closer to a final release and therefore newer.

Downstream usage
----------------
- ``upver.core.versioning`` builds ``VersionIdentifier`` values from ``match_version``.
- ``upver.core.formatting`` renders stages with ``stage_word`` and ``stage_shortcut``.
- ``upver.core.comparison`` orders stages with ``stage_rank``.

Examples
--------
>>> from upver.core.grammar import Stage, is_valid, match_version
>>> is_valid("1.2.3.4-rc.5")
True
>>> is_valid("1.2.3.4.5")
False
>>> m = match_version("1.0 b2")
>>> m.components, m.stage is Stage.BETA, m.pre_release_build
((1, 0, 0, 0), True, 2)
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from .constants import MAX_COMPONENTS
from .errors import InvalidComponent, InvalidFormat

__all__ = [
    "Stage",
    "EBNF_GRAMMAR",
    "GrammarProduction",
    "ParsedGrammar",
    "PARSED_GRAMMAR",
    "STAGE_TOKENS",
    "VersionMatch",
    # helpers/validators
    "stage_rank",
    "stage_word",
    "stage_shortcut",
    "stage_from_token",
    "stage_from_word",
    "stage_from_value",
    "match_version",
    "parse_components",
    "is_valid",
]

# Canonical grammar file next to this module
_EBNF_PATH = Path(__file__).with_name("version.ebnf")


def _load_ebnf_text() -> str:
    return _EBNF_PATH.read_text(encoding="utf-8")


EBNF_GRAMMAR: Final[str] = _load_ebnf_text()


# ============================================================================
# STAGES
# ============================================================================


class Stage(Enum):
    """
    Release maturity of a version, from most to least final.

    Serialized values are lower_snake and appear in:
      - VersionRecord.stage (upver.core.schema)
      - JSON payloads written by upver.core.serde

    Notes:
      Member order follows the comparison rank (RELEASE first, ALPHA last).
    """

    RELEASE = "release"
    RELEASE_CANDIDATE = "release_candidate"
    BETA = "beta"
    ALPHA = "alpha"


_STAGE_RANKS: Final[Mapping[Stage, int]] = {
    Stage.RELEASE: 0,
    Stage.RELEASE_CANDIDATE: 1,
    Stage.BETA: 2,
    Stage.ALPHA: 3,
}

# Full English names used by the descriptive form.
_STAGE_WORDS: Final[Mapping[Stage, str]] = {
    Stage.RELEASE: "Release",
    Stage.RELEASE_CANDIDATE: "ReleaseCandidate",
    Stage.BETA: "Beta",
    Stage.ALPHA: "Alpha",
}

# Short codes used by the compact form. Each one is also a grammar token.
_STAGE_SHORTCUTS: Final[Mapping[Stage, str]] = {
    Stage.RELEASE: "",
    Stage.RELEASE_CANDIDATE: "rc",
    Stage.BETA: "b",
    Stage.ALPHA: "a",
}

# Grammar tokens (lowercase), in the order of the stage_token production.
STAGE_TOKENS: Final[Mapping[str, Stage]] = {
    "alpha": Stage.ALPHA,
    "beta": Stage.BETA,
    "rc": Stage.RELEASE_CANDIDATE,
    "a": Stage.ALPHA,
    "b": Stage.BETA,
}

_WORD_TO_STAGE: Final[Mapping[str, Stage]] = {word: stage for stage, word in _STAGE_WORDS.items()}


def stage_rank(stage: Stage) -> int:
    """
    Get the comparison rank of a stage.

    Args:
      stage (Stage): Stage enum.

    Returns:
      int: 0 for RELEASE up to 3 for ALPHA; smaller is newer.
    """
    return _STAGE_RANKS[stage]


def stage_word(stage: Stage) -> str:
    """Full English name of a stage (e.g., "ReleaseCandidate")."""
    return _STAGE_WORDS[stage]


def stage_shortcut(stage: Stage) -> str:
    """Compact short code of a stage ("" for RELEASE)."""
    return _STAGE_SHORTCUTS[stage]


def stage_from_token(token: str) -> Stage:
    """
    Parse a grammar stage token into a Stage.

    Args:
      token (str): One of "a", "b", "rc", "alpha", "beta" in any letter case.

    Returns:
      Stage: Parsed stage.

    Raises:
      InvalidFormat: If token is not a known stage token.
    """
    try:
        return STAGE_TOKENS[token.lower()]
    except (KeyError, AttributeError) as exc:
        raise InvalidFormat(f"unknown stage token: {token!r}") from exc


def stage_from_word(word: str) -> Stage | None:
    """
    Look up a stage by its full English name.

    Matching is exact ("Beta", not "beta"). Returns None for unknown words so
    callers can decide between the legacy fallback and a hard error.
    """
    return _WORD_TO_STAGE.get(word)


def stage_from_value(value: Stage | str) -> Stage:
    """
    Normalize any accepted stage spelling into a Stage.

    Accepts a Stage member, its lower_snake value ("release_candidate"), its full
    word ("ReleaseCandidate"), or a grammar token ("rc").

    Args:
      value (Stage | str): Candidate stage.

    Returns:
      Stage: Normalized stage.

    Raises:
      InvalidComponent: If value does not name a stage.

    Examples:
      >>> stage_from_value("ReleaseCandidate") is stage_from_value("rc") is Stage.RELEASE_CANDIDATE
      True
    """
    if isinstance(value, Stage):
        return value
    if isinstance(value, str):
        by_word = stage_from_word(value)
        if by_word is not None:
            return by_word
        lowered = value.strip().lower()
        for stage in Stage:
            if stage.value == lowered:
                return stage
        if lowered in STAGE_TOKENS:
            return STAGE_TOKENS[lowered]
    raise InvalidComponent(f"stage must name a release stage (got: {value!r})")


# ============================================================================
# EBNF introspection
# ============================================================================


@dataclass(slots=True, frozen=True)
class GrammarProduction:
    """Parsed production with its quoted terminals in source order."""

    name: str
    expression: str
    terminals: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class ParsedGrammar:
    """Container for parsed grammar productions."""

    productions: dict[str, GrammarProduction]

    def production(self, name: str) -> GrammarProduction:
        try:
            return self.productions[name]
        except KeyError as exc:
            raise KeyError(f"Unknown grammar production: {name}") from exc

    def terminals(self, name: str) -> tuple[str, ...]:
        return self.production(name).terminals

    @classmethod
    def from_text(cls, text: str) -> ParsedGrammar:
        stripped = _COMMENT_RE.sub(" ", text)
        productions: dict[str, GrammarProduction] = {}
        for match in _RULE_RE.finditer(stripped):
            rule_name = match.group(1)
            expression = " ".join(match.group(2).split())
            productions[rule_name] = GrammarProduction(
                name=rule_name,
                expression=expression,
                terminals=_dedupe_preserving_order(_LITERAL_RE.findall(expression)),
            )
        return cls(productions=productions)


_COMMENT_RE = re.compile(r"\(\*.*?\*\)", re.DOTALL)
_RULE_RE = re.compile(r"(?ms)^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*;")
_LITERAL_RE = re.compile(r"\"([^\"]+)\"")


def _dedupe_preserving_order(items: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return tuple(ordered)


PARSED_GRAMMAR: Final[ParsedGrammar] = ParsedGrammar.from_text(EBNF_GRAMMAR)


# ============================================================================
# Matching (zero I/O)
# ============================================================================

# Longest tokens first so "beta" is not read as "b" followed by garbage.
_TOKEN_ALTERNATION = "|".join(
    re.escape(token) for token in sorted(STAGE_TOKENS, key=len, reverse=True)
)

_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<numbers>[0-9]+(?:\.[0-9]+){0,%d})"
    r"(?:[- ]?(?P<stage>%s)(?:\.?(?P<build>[0-9]+))?)?" % (MAX_COMPONENTS - 1, _TOKEN_ALTERNATION),
    re.IGNORECASE | re.ASCII,
)


@dataclass(slots=True, frozen=True)
class VersionMatch:
    """Components extracted from text that matched the grammar."""

    components: tuple[int, int, int, int]
    stage: Stage
    pre_release_build: int


def match_version(text: str) -> VersionMatch | None:
    """
    Match text against the version grammar.

    Args:
      text (str): Candidate version text. The whole string must match.

    Returns:
      VersionMatch | None: Extracted components, or None when text does not match.
    """
    if not isinstance(text, str):
        return None
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        return None

    # int() refuses digit strings beyond sys.get_int_max_str_digits().
    try:
        numbers = [int(part) for part in match.group("numbers").split(".")]
        digits = match.group("build")
        pre_release_build = int(digits) if digits is not None else 0
    except ValueError:
        return None
    numbers.extend([0] * (MAX_COMPONENTS - len(numbers)))
    major, minor, build, revision = numbers

    token = match.group("stage")
    if token is None:
        return VersionMatch((major, minor, build, revision), Stage.RELEASE, 0)

    return VersionMatch(
        components=(major, minor, build, revision),
        stage=stage_from_token(token),
        pre_release_build=pre_release_build,
    )


def parse_components(text: str) -> VersionMatch:
    """
    Match text against the version grammar or fail.

    Raises:
      InvalidFormat: If text does not match the grammar.
    """
    found = match_version(text)
    if found is None:
        raise InvalidFormat(f"not a valid version: {text!r}")
    return found


def is_valid(text: str) -> bool:
    """
    Check whether text is a valid version without building a value.

    Never raises; non-string input is simply invalid.

    Examples:
      >>> is_valid("1.0.0.0-beta.2")
      True
      >>> is_valid("v1.0")
      False
    """
    return match_version(text) is not None
