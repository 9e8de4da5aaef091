"""Maze Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - MazeCreate requires gridSize, startNode, endNode, walls (all four)
    - Integers are strict: strings, booleans and floats are rejected, never coerced
    - 0 < gridSize <= MAX_GRID_SIZE (int4 column); row/col >= 0; every wall is exactly a [row, col] pair
    - Wire format is camelCase, attributes are snake_case

Design Decisions:
    - No range check against gridSize here: out-of-grid cells are accepted unless
      strict bounds mode is on (checked in the route, see core/grid_bounds.py)
    - created_at normalized to UTC: SQLite hands back naive datetimes
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from maze_api.core.domain_types import GridCell, MAX_GRID_SIZE

CellIndex = Annotated[int, Field(strict=True, ge=0)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GridNode(BaseModel):
    """A distinguished cell on the grid."""
    row: CellIndex
    col: CellIndex

    def as_cell(self) -> GridCell:
        return (self.row, self.col)


class MazeCreate(CamelModel):
    """Maze creation payload."""
    grid_size: int = Field(strict=True, gt=0, le=MAX_GRID_SIZE)
    start_node: GridNode
    end_node: GridNode
    walls: list[tuple[CellIndex, CellIndex]]


class MazeResponse(CamelModel):
    """Full stored maze record."""
    id: str
    grid_size: int
    start_node: GridNode
    end_node: GridNode
    walls: list[tuple[int, int]]
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
