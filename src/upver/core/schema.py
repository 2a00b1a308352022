"""
Typed persistence record for version identifiers.

Collaborators that store versions (update catalogs, install history) persist either
the descriptive form or the raw fields. ``VersionRecord`` is the raw-field shape:
four components, the lower_snake stage value, and the pre-release build.

Notes:
    - Zero-IO (stdlib + pydantic only).
    - Field names are lower_snake; ``stage`` accepts any spelling understood by
      ``stage_from_value`` and is stored as the Stage value ("release_candidate").
    - A release record must carry ``pre_release_build == 0``.
    - Integer fields are strict: numeric strings and booleans are rejected, matching
      VersionIdentifier.

Examples:
    >>> from upver.core.schema import VersionRecord
    >>> VersionRecord(major=1, minor=2, build=0, revision=0, stage="Beta", pre_release_build=3).stage
    'beta'
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .grammar import Stage, stage_from_value
from .versioning import VersionIdentifier

__all__ = [
    "VersionRecord",
]


class VersionRecord(BaseModel):
    """
    Raw-field record of a VersionIdentifier.

    Attributes:
        major (int): Non-negative major component.
        minor (int): Non-negative minor component.
        build (int): Non-negative build component.
        revision (int): Non-negative revision component.
        stage (str): Lower_snake Stage value.
        pre_release_build (int): Non-negative pre-release counter; 0 for releases.

    Raises:
        pydantic.ValidationError: On negative components, unknown stages, or a release
            with a non-zero pre-release build.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    major: int = Field(..., ge=0, strict=True)
    minor: int = Field(0, ge=0, strict=True)
    build: int = Field(0, ge=0, strict=True)
    revision: int = Field(0, ge=0, strict=True)
    stage: str = Stage.RELEASE.value
    pre_release_build: int = Field(0, ge=0, strict=True)

    @field_validator("stage", mode="before")
    @classmethod
    def _normalize_stage(cls, v: object) -> str:
        return stage_from_value(v).value  # type: ignore[arg-type]

    @model_validator(mode="after")
    def _release_has_no_pre_release_build(self) -> VersionRecord:
        if self.stage == Stage.RELEASE.value and self.pre_release_build != 0:
            raise ValueError("pre_release_build must be 0 for a release")
        return self

    @classmethod
    def from_version(cls, version: VersionIdentifier) -> VersionRecord:
        return cls(
            major=version.major,
            minor=version.minor,
            build=version.build,
            revision=version.revision,
            stage=version.stage.value,
            pre_release_build=version.pre_release_build,
        )

    def to_version(self) -> VersionIdentifier:
        return VersionIdentifier(
            self.major,
            self.minor,
            self.build,
            self.revision,
            Stage(self.stage),
            self.pre_release_build,
        )
