"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - Models imported here so Base.metadata is populated for alembic and test fixtures
"""

from maze_api.models.maze import Maze  # noqa: F401
