"""
upver core defaults.

Defines the zero components used as the aggregation sentinel, the bit layout of the
legacy 32-bit hash, and the environment prefix consumed by ``upver.config``. This
module is zero-IO and uses only the Python standard library.

Notes:
    - ``LEGACY_HASH_LAYOUT`` lists (field, bit width, shift) from most to least
      significant bits; widths sum to 32.
    - Changing the layout breaks compatibility with hashes persisted by older clients.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "COMPONENT_NAMES",
    "MAX_COMPONENTS",
    "ZERO_COMPONENTS",
    "LEGACY_HASH_LAYOUT",
    "ENV_PREFIX",
    "CONFIG_FILE_NAME",
]

# Numeric components in positional order.
COMPONENT_NAMES: Final[tuple[str, ...]] = ("major", "minor", "build", "revision")

MAX_COMPONENTS: Final[int] = len(COMPONENT_NAMES)

ZERO_COMPONENTS: Final[tuple[int, int, int, int]] = (0, 0, 0, 0)

# (field, bits, shift)
LEGACY_HASH_LAYOUT: Final[tuple[tuple[str, int, int], ...]] = (
    ("major", 4, 28),
    ("minor", 8, 20),
    ("build", 8, 12),
    ("revision", 12, 0),
)

ENV_PREFIX: Final[str] = "UPVER_"

CONFIG_FILE_NAME: Final[str] = "upver.toml"
