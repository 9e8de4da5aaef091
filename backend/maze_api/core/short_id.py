"""Short Identifiers — compact random URL-safe keys for maze records.

Invariants:
    - generate_short_id() output always satisfies is_valid_short_id()
    - Identifiers carry no natural key or timestamp information

Design Decisions:
    - secrets over random: ids are public locators, must not be guessable
    - 10 symbols from a 64-symbol alphabet = 60 bits of entropy
"""

import re
import secrets

from maze_api.core.domain_types import (
    MazeId, SHORT_ID_ALPHABET, SHORT_ID_LENGTH,
    SHORT_ID_MIN_LENGTH, SHORT_ID_MAX_LENGTH,
)

_SHORT_ID_PATTERN = re.compile(
    rf"[A-Za-z0-9_-]{{{SHORT_ID_MIN_LENGTH},{SHORT_ID_MAX_LENGTH}}}",
)


def generate_short_id(length: int = SHORT_ID_LENGTH) -> MazeId:
    return MazeId(
        "".join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(length)),
    )


def is_valid_short_id(value: str) -> bool:
    """True if value fits the short-id key syntax."""
    return bool(_SHORT_ID_PATTERN.fullmatch(value))
