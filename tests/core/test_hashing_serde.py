import json

import pytest
from pydantic import ValidationError

from upver.core.hashing import hash_payload, json_dumps_canonical, legacy_hash, version_digest
from upver.core.serde import json_dumps_canonical as serde_dumps
from upver.core.serde import version_from_json, version_to_json
from upver.core.versioning import parse


def test_json_dumps_canonical_sorted_and_compact() -> None:
    s1 = json_dumps_canonical({"b": 2, "a": 1, "nested": {"y": 2, "x": 1}})
    s2 = json_dumps_canonical({"nested": {"x": 1, "y": 2}, "a": 1, "b": 2})
    assert s1 == s2 == '{"a":1,"b":2,"nested":{"x":1,"y":2}}'
    assert serde_dumps is json_dumps_canonical


def test_hash_payload_order_invariant() -> None:
    assert hash_payload({"x": 1, "y": 2}) == hash_payload({"y": 2, "x": 1})


def test_legacy_hash_bit_layout() -> None:
    assert legacy_hash(parse("1.2.3.4")) == (1 << 28) | (2 << 20) | (3 << 12) | 4
    assert legacy_hash(parse("0.0.0.0")) == 0


def test_legacy_hash_ignores_stage_and_pre_release_build() -> None:
    assert legacy_hash(parse("1.2.3.4b2")) == legacy_hash(parse("1.2.3.4"))
    assert legacy_hash(parse("1.2.3.4a")) == legacy_hash(parse("1.2.3.4rc9"))


def test_legacy_hash_truncates_components() -> None:
    assert legacy_hash(parse("17.0")) == legacy_hash(parse("1.0"))
    assert legacy_hash(parse("0.256")) == legacy_hash(parse("0.0"))
    assert legacy_hash(parse("0.0.0.4096")) == legacy_hash(parse("0.0.0.0"))


def test_legacy_hash_is_signed_32_bit() -> None:
    assert legacy_hash(parse("15.0")) == (15 << 28) - (1 << 32)
    assert legacy_hash(parse("15.255.255.4095")) == -1


def test_version_digest_follows_equality() -> None:
    assert version_digest(parse("1.0")) == version_digest(parse("1.0.0.0"))
    assert version_digest(parse("1.0b")) != version_digest(parse("1.0"))
    assert version_digest(parse("1.0b1")) != version_digest(parse("1.0b2"))
    assert len(version_digest(parse("1.0"))) == 64


def test_version_to_json_is_canonical() -> None:
    assert version_to_json(parse("1.2b3")) == (
        '{"build":0,"major":1,"minor":2,"pre_release_build":3,"revision":0,"stage":"beta"}'
    )


@pytest.mark.parametrize("text", ["1.2.3.4", "1.0-rc.2", "0.0.0.0a", "9.8.7.6b5"])
def test_serde_round_trip(text: str) -> None:
    v = parse(text)
    assert version_from_json(version_to_json(v)) == v


def test_version_from_json_accepts_stage_words() -> None:
    payload = json.dumps({"major": 2, "stage": "ReleaseCandidate", "pre_release_build": 1})
    assert version_from_json(payload) == parse("2.0-rc.1")


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"major": -1}',
        '{"major": 1, "stage": "gamma"}',
        '{"major": 1, "stage": "release", "pre_release_build": 2}',
        '{"major": 1, "extra": true}',
        "{}",
        '{"major": "7"}',
        '{"major": 7, "minor": true}',
        '{"major": 7, "pre_release_build": 1.0, "stage": "beta"}',
    ],
)
def test_version_from_json_rejects_invalid(payload: str) -> None:
    with pytest.raises(ValidationError):
        version_from_json(payload)
