from clothsim.grid import grid_coords, grid_index, in_bounds, neighbors


def test_row_major_index():
    assert grid_index(0, 0, 5) == 0
    assert grid_index(4, 0, 5) == 4
    assert grid_index(0, 1, 5) == 5
    assert grid_index(2, 3, 5) == 17


def test_coords_invert_index():
    for x, y in [(0, 0), (4, 0), (0, 1), (2, 3)]:
        assert grid_coords(grid_index(x, y, 5), 5) == (x, y)


def test_bounds():
    assert in_bounds(0, 0, 2, 2)
    assert not in_bounds(2, 0, 2, 2)
    assert not in_bounds(0, -1, 2, 2)


def test_neighbors_right_then_bottom():
    assert list(neighbors(0, 0, 3, 3)) == [(1, 0), (0, 1)]
    assert list(neighbors(2, 0, 3, 3)) == [(2, 1)]
    assert list(neighbors(0, 2, 3, 3)) == [(1, 2)]
    assert list(neighbors(2, 2, 3, 3)) == []
