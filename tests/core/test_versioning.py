"""Tests for `upver.core.versioning` value type and factories."""

import dataclasses

import pytest

from upver.core.constants import ZERO_COMPONENTS
from upver.core.errors import InvalidComponent, InvalidFormat
from upver.core.grammar import Stage
from upver.core.versioning import (
    ZERO_VERSION,
    VersionIdentifier,
    from_descriptive_form,
    is_valid,
    parse,
)


def test_parse_full_release() -> None:
    v = parse("1.2.3.4")

    assert (v.major, v.minor, v.build, v.revision) == (1, 2, 3, 4)
    assert v.stage is Stage.RELEASE
    assert v.pre_release_build == 0
    assert v.is_release is True


def test_parse_release_candidate_with_build() -> None:
    v = parse("2.0.0.0-rc.1")

    assert v.components == (2, 0, 0, 0)
    assert v.stage is Stage.RELEASE_CANDIDATE
    assert v.pre_release_build == 1
    assert v.is_release is False


def test_parse_defaults_missing_components() -> None:
    v = parse("1.0")

    assert v.components == (1, 0, 0, 0)
    assert v.stage is Stage.RELEASE


def test_parse_classmethod_matches_module_function() -> None:
    assert VersionIdentifier.parse("1.0 b2") == parse("1.0 b2")


@pytest.mark.parametrize("text", ["1.2.3.4.5", "1.0-", "abc", ""])
def test_parse_rejects_invalid(text: str) -> None:
    assert is_valid(text) is False
    with pytest.raises(InvalidFormat):
        parse(text)


@pytest.mark.parametrize(
    "field", ["major", "minor", "build", "revision", "pre_release_build"]
)
def test_constructor_rejects_negative_components(field: str) -> None:
    kwargs = {
        "major": 1,
        "minor": 2,
        "build": 3,
        "revision": 4,
        "stage": Stage.BETA,
        "pre_release_build": 1,
    }
    kwargs[field] = -1

    with pytest.raises(InvalidComponent, match=f"{field} must be non-negative"):
        VersionIdentifier(**kwargs)


@pytest.mark.parametrize("value", [1.5, "1", True, None])
def test_constructor_rejects_non_integer_components(value: object) -> None:
    with pytest.raises(InvalidComponent, match="major must be an integer"):
        VersionIdentifier(value, 0, 0, 0)  # type: ignore[arg-type]


def test_constructor_rejects_unrenderable_component() -> None:
    with pytest.raises(InvalidComponent, match="revision has too many digits"):
        VersionIdentifier(1, 0, 0, 10**5000)


def test_constructor_normalizes_stage_spelling() -> None:
    assert VersionIdentifier(1, 0, 0, 0, "Beta", 2).stage is Stage.BETA  # type: ignore[arg-type]
    rc = VersionIdentifier(1, 0, 0, 0, "rc")  # type: ignore[arg-type]
    assert rc.stage is Stage.RELEASE_CANDIDATE


def test_constructor_rejects_unknown_stage() -> None:
    with pytest.raises(InvalidComponent, match="stage must name a release stage"):
        VersionIdentifier(1, 0, 0, 0, "gamma")  # type: ignore[arg-type]


def test_release_drops_pre_release_build() -> None:
    v = VersionIdentifier(1, 0, 0, 0, Stage.RELEASE, 5)

    assert v.pre_release_build == 0
    assert v == VersionIdentifier(1, 0, 0, 0)


def test_version_is_immutable() -> None:
    v = parse("1.2.3.4")

    with pytest.raises(dataclasses.FrozenInstanceError):
        v.major = 2  # type: ignore[misc]


def test_replace_returns_new_validated_value() -> None:
    v = parse("1.2.3.4b2")

    bumped = v.replace(revision=5)
    assert bumped.descriptive_form == "1.2.3.5 Beta 2"
    assert v.revision == 4

    released = v.replace(stage=Stage.RELEASE)
    assert released.pre_release_build == 0

    with pytest.raises(InvalidComponent):
        v.replace(major=-1)


def test_zero_version_sentinel() -> None:
    assert ZERO_VERSION.components == (0, 0, 0, 0)
    assert ZERO_VERSION.stage is Stage.RELEASE
    assert ZERO_VERSION == parse("0")
    assert ZERO_VERSION.components == ZERO_COMPONENTS


def test_str_is_descriptive_form() -> None:
    assert str(parse("1.2.3.4-rc.5")) == "1.2.3.4 ReleaseCandidate 5"
    assert str(parse("1.2")) == "1.2.0.0"


def test_equality_follows_descriptive_form() -> None:
    assert parse("1.0") == parse("1.0.0.0")
    assert parse("1.0b") == parse("1.0.0.0-beta")
    assert parse("1.0-b.0") == parse("1.0b")
    assert parse("1.0b1") != parse("1.0b2")
    assert parse("1.0b1") != parse("1.0a1")


def test_equality_with_other_types() -> None:
    v = parse("1.0")

    assert (v == "1.0.0.0") is False
    assert (v != None) is True  # noqa: E711


def test_hash_is_consistent_with_equality() -> None:
    versions = {parse("1.0"), parse("1.0.0.0"), parse("1.0.0.0-beta"), parse("1.0 b")}

    assert versions == {parse("1"), parse("1b")}
    assert hash(parse("2.1-rc.3")) == hash(from_descriptive_form("2.1.0.0 ReleaseCandidate 3"))


def test_rich_comparisons() -> None:
    assert parse("1.0") > parse("1.0-rc")
    assert parse("1.0-rc") >= parse("1.0-rc")
    assert parse("1.0a") < parse("1.0b")
    assert parse("1.0a") <= parse("1.0a")
    assert sorted([parse("2.0"), parse("1.0"), parse("1.0a")]) == [
        parse("1.0a"),
        parse("1.0"),
        parse("2.0"),
    ]


def test_rich_comparison_with_other_types_raises() -> None:
    with pytest.raises(TypeError):
        parse("1.0") < "2.0"  # type: ignore[operator]
