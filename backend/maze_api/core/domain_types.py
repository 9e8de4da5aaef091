"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MazeId wraps the short public identifier, never a database-internal key
    - GridCell is a (row, col) pair of non-negative ints
    - Short-id alphabet is URL-safe (64 symbols)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

import string
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MazeId = NewType("MazeId", str)


# ─── Value Types ─────────────────────────────────────────────────

GridCell = tuple[int, int]   # (row, col)


# ─── Short identifier scheme ─────────────────────────────────────

SHORT_ID_ALPHABET = string.ascii_letters + string.digits + "_-"
SHORT_ID_LENGTH = 10
SHORT_ID_MIN_LENGTH = 7
SHORT_ID_MAX_LENGTH = 14


# ─── Grid limits ─────────────────────────────────────────────────

MAX_GRID_SIZE = 2**31 - 1   # int4 column ceiling
