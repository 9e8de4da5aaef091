"""Maze ORM — persists one maze configuration per row.

Invariants:
    - id is a short URL-safe string primary key (client-side default)
    - grid_size, start_node, end_node, walls are non-nullable
    - Rows are insert-only: nothing in the API updates or deletes them

Design Decisions:
    - JSON columns for start_node/end_node/walls: stored exactly as the client sent them
    - String PK over UUID: the short id IS the public locator, no second key
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from maze_api.core.domain_types import SHORT_ID_MAX_LENGTH
from maze_api.core.short_id import generate_short_id
from maze_api.db.base import Base


class Maze(Base):
    """Maze record: grid size, start/end cells and wall cells."""
    __tablename__ = "mazes"

    id: Mapped[str] = mapped_column(
        String(SHORT_ID_MAX_LENGTH), primary_key=True, default=generate_short_id,
    )
    grid_size: Mapped[int] = mapped_column(Integer, nullable=False)
    start_node: Mapped[dict] = mapped_column(JSON, nullable=False)
    end_node: Mapped[dict] = mapped_column(JSON, nullable=False)
    walls: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
