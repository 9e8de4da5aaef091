"""Grid Bounds — pure check of maze cells against the grid size.

Invariants:
    - Pure function, no IO
    - Only used when strict bounds mode is enabled (off by default)
"""

from maze_api.core.domain_types import GridCell


def find_out_of_bounds(
    grid_size: int,
    start: GridCell,
    end: GridCell,
    walls: list[GridCell],
) -> list[str]:
    """Return field paths of every cell outside a grid_size x grid_size grid."""
    def outside(cell: GridCell) -> bool:
        return any(v >= grid_size for v in cell)

    fields = []
    if outside(start):
        fields.append("startNode")
    if outside(end):
        fields.append("endNode")
    fields.extend(
        f"walls.{i}" for i, wall in enumerate(walls) if outside(wall)
    )
    return fields
