"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Maze persistence accessed only through MazeRepository

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Create and point lookup only: records are never updated, listed or deleted
"""

from datetime import datetime
from typing import Protocol

from maze_api.core.domain_types import MazeId, GridCell


class MazeLike(Protocol):
    """Structural contract for persisted maze records."""
    id: str
    grid_size: int
    start_node: dict
    end_node: dict
    walls: list
    created_at: datetime


class MazeRepository(Protocol):
    """Contract for maze persistence — implemented by shell."""
    async def create(
        self,
        grid_size: int,
        start_node: GridCell,
        end_node: GridCell,
        walls: list[GridCell],
    ) -> MazeLike: ...
    async def find_by_id(self, maze_id: MazeId) -> MazeLike | None: ...
