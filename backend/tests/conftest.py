"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database, and serve the fixture client bundle
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault(
    "STATIC_DIR",
    os.path.join(os.path.dirname(__file__), "fixtures", "static"),
)
os.environ.setdefault("MAZE_STRICT_BOUNDS", "false")
