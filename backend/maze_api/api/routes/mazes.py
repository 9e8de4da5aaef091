"""Maze Routes — create a maze record and fetch it back by short id.

Invariants:
    - Payload shape validated by Pydantic before the handler runs (400 otherwise)
    - Nothing reaches the store when validation fails
    - Missing id and malformed id are the same 404 to the caller
    - Store failures surface as StoreError → generic 500 (error_handlers.py)

Design Decisions:
    - Repository injected via Depends: handlers never touch the ORM session
    - Strict bounds check lives here, not in the schema: it depends on settings
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from maze_api.config import Settings, get_settings
from maze_api.core.domain_types import MazeId
from maze_api.core.errors import (
    MalformedIdentifierError, NotFoundError, ValidationError,
)
from maze_api.core.grid_bounds import find_out_of_bounds
from maze_api.core.repository_protocols import MazeLike, MazeRepository
from maze_api.infrastructure.database import get_db
from maze_api.infrastructure.maze_repository import SqlMazeRepository
from maze_api.schemas.maze import GridNode, MazeCreate, MazeResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/mazes", tags=["mazes"])


def get_maze_repository(
    db: AsyncSession = Depends(get_db),
) -> MazeRepository:
    return SqlMazeRepository(db)


def to_maze_response(maze: MazeLike) -> MazeResponse:
    return MazeResponse(
        id=maze.id,
        grid_size=maze.grid_size,
        start_node=GridNode(**maze.start_node),
        end_node=GridNode(**maze.end_node),
        walls=[tuple(wall) for wall in maze.walls],
        created_at=maze.created_at,
    )


@router.post(
    "", response_model=MazeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_maze(
    body: MazeCreate,
    repo: MazeRepository = Depends(get_maze_repository),
    settings: Settings = Depends(get_settings),
):
    """Save a new maze configuration."""
    if settings.maze_strict_bounds:
        bad_fields = find_out_of_bounds(
            body.grid_size, body.start_node.as_cell(),
            body.end_node.as_cell(), body.walls,
        )
        if bad_fields:
            raise ValidationError(
                f"Cells outside the {body.grid_size}x{body.grid_size} grid: "
                f"{', '.join(bad_fields)}",
                field=bad_fields[0],
            )

    maze = await repo.create(
        grid_size=body.grid_size,
        start_node=body.start_node.as_cell(),
        end_node=body.end_node.as_cell(),
        walls=body.walls,
    )
    return to_maze_response(maze)


@router.get("/{maze_id}", response_model=MazeResponse)
async def get_maze(
    maze_id: str,
    repo: MazeRepository = Depends(get_maze_repository),
):
    """Retrieve a saved maze by its short id."""
    try:
        maze = await repo.find_by_id(MazeId(maze_id))
    except MalformedIdentifierError:
        logger.info("Malformed maze id requested", extra={"maze_id": maze_id})
        raise NotFoundError(maze_id)
    if maze is None:
        logger.info("Unknown maze id requested", extra={"maze_id": maze_id})
        raise NotFoundError(maze_id)
    return to_maze_response(maze)
