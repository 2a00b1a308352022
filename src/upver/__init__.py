"""
upver — immutable software version identifiers.

## Responsibilities
- Parse version text ("1.2.3.4-rc.5", "1.0 b2", "2.0.0.0") into validated values.
- Render canonical ("1.2.3.4"), descriptive ("1.2.3.4 Beta 2") and compact ("1.2.3.4b2") forms.
- Order versions, releases above their pre-releases, and pick the highest/lowest.

## Public API
- VersionIdentifier, Stage, Ordering — value type, release stages, comparison result.
- parse, is_valid, from_descriptive_form — factories and validation.
- compare, highest, lowest — ordering and aggregation.
- VersionSettings — env/TOML configuration.
- VersionError, InvalidFormat, InvalidComponent, EmptyInput, NullArgument — errors.

## Import DAG discipline
- upver.core depends only on stdlib and pydantic.
- upver.config and upver.cli sit above upver.core; core never imports them.
"""

from __future__ import annotations

from .config import VersionSettings
from .core.aggregate import highest, lowest
from .core.comparison import Ordering, compare
from .core.errors import EmptyInput, InvalidComponent, InvalidFormat, NullArgument, VersionError
from .core.grammar import Stage
from .core.versioning import (
    ZERO_VERSION,
    VersionIdentifier,
    from_descriptive_form,
    is_valid,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "VersionIdentifier",
    "Stage",
    "Ordering",
    "ZERO_VERSION",
    "parse",
    "is_valid",
    "from_descriptive_form",
    "compare",
    "highest",
    "lowest",
    "VersionSettings",
    "VersionError",
    "InvalidFormat",
    "InvalidComponent",
    "EmptyInput",
    "NullArgument",
]
