"""Grid Bounds — verifies out-of-grid detection used by strict bounds mode."""

from maze_api.core.grid_bounds import find_out_of_bounds


def test_all_cells_inside_grid():
    assert find_out_of_bounds(10, (0, 0), (9, 9), [(1, 1), (5, 9)]) == []


def test_start_and_end_outside_grid():
    assert find_out_of_bounds(5, (5, 0), (0, 7), []) == ["startNode", "endNode"]


def test_walls_reported_by_index():
    result = find_out_of_bounds(3, (0, 0), (2, 2), [(1, 1), (3, 0), (0, 9)])
    assert result == ["walls.1", "walls.2"]


def test_empty_walls():
    assert find_out_of_bounds(1, (0, 0), (0, 0), []) == []
