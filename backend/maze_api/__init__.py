"""Maze API Package — persistence backend for the maze-drawing client.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
