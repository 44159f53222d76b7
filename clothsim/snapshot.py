"""
Render-ready export of a cloth's geometry.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class ClothSnapshot:
    """Geometry of one cloth at one tick.

    Attributes:
        name: Material name, for labels.
        color: Material color (0xRRGGBB), passed through untouched.
        positions: float32 array of shape (num_particles, 3). y is flipped so
            that "up" is positive for the renderer, z is always 0.
        indices: uint32 array of shape (2 * num_constraints,). A cut
            constraint is written as the degenerate edge (0, 0) so the buffer
            keeps the same size for the cloth's whole lifetime.
        active: bool array of shape (num_constraints,).
    """

    name: str
    color: int
    positions: np.ndarray
    indices: np.ndarray
    active: np.ndarray

    @classmethod
    def capture(cls, material, particles, constraints) -> "ClothSnapshot":
        positions = np.zeros((len(particles), 3), dtype=np.float32)
        for i, p in enumerate(particles):
            positions[i, 0] = p.pos.x
            positions[i, 1] = -p.pos.y

        active = np.fromiter((c.active for c in constraints), dtype=bool, count=len(constraints))
        edges = np.zeros((len(constraints), 2), dtype=np.uint32)
        for i, c in enumerate(constraints):
            if c.active:
                edges[i, 0] = c.p1
                edges[i, 1] = c.p2

        return cls(
            name=material.name,
            color=material.color,
            positions=positions,
            indices=edges.reshape(-1),
            active=active,
        )

    @property
    def num_particles(self) -> int:
        return self.positions.shape[0]

    @property
    def num_edges(self) -> int:
        return self.active.shape[0]

    def active_edges(self) -> np.ndarray:
        """Only the live edges, shape (K, 2)."""
        return self.indices.reshape(-1, 2)[self.active]

    def plane_positions(self) -> np.ndarray:
        """Positions back in simulation-plane convention (y down), shape (N, 2)."""
        xy = self.positions[:, :2].copy()
        xy[:, 1] *= -1.0
        return xy
