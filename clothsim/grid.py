"""Row-major indexing for the cloth grid."""


def grid_index(x, y, nx):
    """Index of column ``x`` in row ``y`` for a grid ``nx`` particles wide."""
    return y * nx + x


def grid_coords(index, nx):
    """Inverse of :func:`grid_index`, returns ``(x, y)``."""
    y, x = divmod(index, nx)
    return x, y


def in_bounds(x, y, nx, ny):
    return 0 <= x < nx and 0 <= y < ny


def neighbors(x, y, nx, ny):
    """Right and bottom neighbours of ``(x, y)``. No diagonals."""
    for dx, dy in ((1, 0), (0, 1)):
        if in_bounds(x + dx, y + dy, nx, ny):
            yield x + dx, y + dy
