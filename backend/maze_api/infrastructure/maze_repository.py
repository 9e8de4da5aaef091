"""Maze Repository — SQLAlchemy implementation of the MazeRepository protocol.

Invariants:
    - One row written per create(); nothing is ever updated or deleted
    - id and created_at assigned here, at write time, never regenerated
    - Driver/connection failures surface as StoreError with a generic client message
    - Ids that fail the short-id syntax raise MalformedIdentifierError before any query

Design Decisions:
    - Repository maps its own exceptions: errors raised inside a route never
      reach the get_db context manager as raw SQLAlchemy exceptions
    - No retry on id collision: a duplicate key is a StoreError like any other
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from maze_api.core.domain_types import MazeId, GridCell
from maze_api.core.errors import StoreError, MalformedIdentifierError
from maze_api.core.short_id import generate_short_id, is_valid_short_id
from maze_api.models.maze import Maze

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Server error while saving maze."
FETCH_FAILED_MESSAGE = "Server error while fetching maze."


def _node(cell: GridCell) -> dict:
    row, col = cell
    return {"row": row, "col": col}


class SqlMazeRepository:
    """Maze persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self,
        grid_size: int,
        start_node: GridCell,
        end_node: GridCell,
        walls: list[GridCell],
    ) -> Maze:
        maze = Maze(
            id=generate_short_id(),
            grid_size=grid_size,
            start_node=_node(start_node),
            end_node=_node(end_node),
            walls=[[row, col] for row, col in walls],
            created_at=datetime.now(timezone.utc),
        )
        self._db.add(maze)
        try:
            await self._db.commit()
        except (SQLAlchemyError, OSError) as e:
            await self._db.rollback()
            logger.error(
                f"Error saving maze: {e}",
                extra={"maze_id": maze.id, "error_code": "STORE_ERROR"},
            )
            raise StoreError(
                str(e), "create", message=SAVE_FAILED_MESSAGE,
            ) from e
        logger.info("Maze saved", extra={"maze_id": maze.id})
        return maze

    async def find_by_id(self, maze_id: MazeId) -> Maze | None:
        if not is_valid_short_id(maze_id):
            raise MalformedIdentifierError(maze_id)
        try:
            return await self._db.get(Maze, maze_id)
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"Error fetching maze: {e}",
                extra={"maze_id": maze_id, "error_code": "STORE_ERROR"},
            )
            raise StoreError(
                str(e), "find_by_id", message=FETCH_FAILED_MESSAGE,
            ) from e
