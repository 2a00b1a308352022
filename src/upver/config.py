"""
Configuration for upver callers and the command line.

Defines VersionSettings, a frozen dataclass carrying the policy choices the core
leaves to callers: strict or legacy handling of unknown stage words, the empty-input
behavior of ``highest``, the default output form, and the hash flavor.

Source of truth
- upver.core.constants.ENV_PREFIX and CONFIG_FILE_NAME
- Value semantics come from upver.core; settings only select between documented options.

Import DAG discipline
- Depends only on stdlib and upver.core.
- upver.core never imports this module; settings are passed explicitly.

Notes
- Precedence: environment > TOML > defaults.
- Invalid values are ignored (the previous value is kept) and logged at WARNING level.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from upver.core.constants import CONFIG_FILE_NAME, ENV_PREFIX

logger = logging.getLogger(__name__)

EmptyHighest = Literal["sentinel", "error"]
OutputForm = Literal["descriptive", "basic", "compact"]
HashMode = Literal["full", "legacy"]

_EMPTY_HIGHEST_CHOICES = ("sentinel", "error")
_OUTPUT_FORM_CHOICES = ("descriptive", "basic", "compact")
_HASH_MODE_CHOICES = ("full", "legacy")


@dataclass(frozen=True)
class VersionSettings:
    """
    Runtime settings for upver callers.

    Attributes:
        strict_stage_words (bool): If True, ``from_descriptive_form`` rejects unknown
            stage words instead of falling back to Release.
        empty_highest (Literal["sentinel", "error"]): ``highest`` over an empty
            collection returns the 0.0.0.0 sentinel or raises EmptyInput.
        output_form (Literal["descriptive", "basic", "compact"]): Form printed by the CLI.
        hash_mode (Literal["full", "legacy"]): Hash printed by ``upver hash``.

    Examples:
        >>> from upver.config import VersionSettings
        >>> VersionSettings(strict_stage_words=True)  # doctest: +ELLIPSIS
        VersionSettings(...)
    """

    strict_stage_words: bool = False
    empty_highest: EmptyHighest = "sentinel"
    output_form: OutputForm = "descriptive"
    hash_mode: HashMode = "full"

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: VersionSettings, cfg: dict[str, Any] | None) -> VersionSettings:
        """Apply a loose config mapping onto VersionSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool | None:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                lo = v.strip().lower()
                if lo in {"1", "true", "t", "yes", "y", "on"}:
                    return True
                if lo in {"0", "false", "f", "no", "n", "off"}:
                    return False
            return None

        def _choice(key: str, allowed: tuple[str, ...]) -> str | None:
            val = cfg[key]
            if isinstance(val, str) and val.strip().lower() in allowed:
                return val.strip().lower()
            logger.warning("Ignoring %s=%r (expected one of %s)", key, val, ", ".join(allowed))
            return None

        if "strict_stage_words" in cfg:
            flag = _bool(cfg["strict_stage_words"])
            if flag is None:
                logger.warning(
                    "Ignoring strict_stage_words=%r (expected a boolean)", cfg["strict_stage_words"]
                )
            else:
                s = replace(s, strict_stage_words=flag)

        if "empty_highest" in cfg:
            val = _choice("empty_highest", _EMPTY_HIGHEST_CHOICES)
            if val is not None:
                s = replace(s, empty_highest=val)  # type: ignore[arg-type]

        if "output_form" in cfg:
            val = _choice("output_form", _OUTPUT_FORM_CHOICES)
            if val is not None:
                s = replace(s, output_form=val)  # type: ignore[arg-type]

        if "hash_mode" in cfg:
            val = _choice("hash_mode", _HASH_MODE_CHOICES)
            if val is not None:
                s = replace(s, hash_mode=val)  # type: ignore[arg-type]

        return s

    @classmethod
    def from_env(
        cls, base: VersionSettings | None = None, prefix: str = ENV_PREFIX
    ) -> VersionSettings:
        """
        Build VersionSettings from environment variables.

        Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - UPVER_STRICT_STAGE_WORDS (1/0/true/false/yes/no/on/off)
            - UPVER_EMPTY_HIGHEST ("sentinel" | "error")
            - UPVER_OUTPUT_FORM ("descriptive" | "basic" | "compact")
            - UPVER_HASH_MODE ("full" | "legacy")
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("strict_stage_words", "empty_highest", "output_form", "hash_mode"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> VersionSettings:
        """
        Build VersionSettings from a TOML file.

        Search order when `path` is None:
            1) ./upver.toml (with either a top-level [upver] table or direct keys)
            2) ./pyproject.toml under [tool.upver]

        Returns defaults if no file is present.

        Raises:
            tomllib.TOMLDecodeError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / CONFIG_FILE_NAME)
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            with p.open("rb") as fh:
                data = tomllib.load(fh)
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("upver") if isinstance(tool, dict) else None
            elif isinstance(data.get("upver"), dict):
                cfg = data["upver"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> VersionSettings:
        """
        Load VersionSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (upver.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
