from __future__ import annotations

import logging
from pathlib import Path

import pytest

from upver.config import VersionSettings

_ENV_KEYS = [
    "UPVER_STRICT_STAGE_WORDS",
    "UPVER_EMPTY_HIGHEST",
    "UPVER_OUTPUT_FORM",
    "UPVER_HASH_MODE",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_upver_toml(tmp: Path, content: str) -> Path:
    p = tmp / "upver.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _write_upver_toml(
        tmp_path,
        """
        [upver]
        strict_stage_words = true
        output_form = "compact"
        hash_mode = "legacy"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UPVER_OUTPUT_FORM", "basic")
    monkeypatch.setenv("UPVER_STRICT_STAGE_WORDS", "no")

    s = VersionSettings.load()

    assert s.output_form == "basic"  # env override
    assert s.strict_stage_words is False  # env override
    assert s.hash_mode == "legacy"  # from TOML


def test_settings_from_toml_top_level_keys(tmp_path: Path, monkeypatch) -> None:
    _write_upver_toml(
        tmp_path,
        """
        empty_highest = "error"
        strict_stage_words = 1
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    s = VersionSettings.load()

    assert s.empty_highest == "error"
    assert s.strict_stage_words is True


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [project]
        name = "demo"

        [tool.upver]
        output_form = "compact"
        """.strip()
    )
    monkeypatch.chdir(tmp_path)

    assert VersionSettings.load().output_form == "compact"


def test_settings_explicit_path(tmp_path: Path) -> None:
    p = tmp_path / "custom.toml"
    p.write_text('hash_mode = "legacy"\n')

    assert VersionSettings.load(p).hash_mode == "legacy"


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    s = VersionSettings.load()

    assert s == VersionSettings()
    assert s.strict_stage_words is False
    assert s.empty_highest == "sentinel"
    assert s.output_form == "descriptive"
    assert s.hash_mode == "full"


def test_invalid_values_are_ignored_and_logged(
    tmp_path: Path, monkeypatch, caplog: pytest.LogCaptureFixture
) -> None:
    _write_upver_toml(
        tmp_path,
        """
        output_form = "fancy"
        strict_stage_words = "maybe"
        hash_mode = "legacy"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    with caplog.at_level(logging.WARNING, logger="upver.config"):
        s = VersionSettings.load()

    assert s.output_form == "descriptive"
    assert s.strict_stage_words is False
    assert s.hash_mode == "legacy"
    assert "output_form" in caplog.text
    assert "strict_stage_words" in caplog.text


def test_settings_are_frozen() -> None:
    import dataclasses

    with pytest.raises(dataclasses.FrozenInstanceError):
        VersionSettings().output_form = "basic"  # type: ignore[misc]
