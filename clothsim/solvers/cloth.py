import logging

from clothsim.collision import resolve_floor_collision, segments_intersect
from clothsim.config import DEFAULT_CONFIG
from clothsim.DistanceConstraint import DistanceConstraint
from clothsim.grid import grid_coords, grid_index, neighbors
from clothsim.Particle import Particle
from clothsim.snapshot import ClothSnapshot
from clothsim.Vec2 import Vec2
from .solver import solver

logger = logging.getLogger(__name__)


class ClothSimulation(solver):
    def __init__(self, material, offset_x=0.0, config=DEFAULT_CONFIG):
        """
        A hanging sheet of cloth: a grid of Verlet particles joined to their
        right and bottom neighbours by distance constraints, pinned along
        the top row.

        :param material: MaterialProfile with the fabric's coefficients.
        :param offset_x: Horizontal placement of the left edge.
        :param config: SimulationConfig with cloth size, floor and wind radius.
        """
        super().__init__()
        self.material = material
        self.offset_x = float(offset_x)
        self.config = config
        self._particles: list[Particle] = []
        self._constraints: list[DistanceConstraint] = []
        self.reset()

    @property
    def particles(self):
        return tuple(self._particles)

    @property
    def constraints(self):
        return tuple(self._constraints)

    @property
    def spacing(self):
        """Distance between neighbouring particles, derived from the cloth size."""
        return (self.config.cloth_width / self.material.particles_x,
                self.config.cloth_height / self.material.particles_y)

    @property
    def active_count(self):
        return sum(1 for c in self._constraints if c.active)

    @property
    def cut_count(self):
        return len(self._constraints) - self.active_count

    def particle_at(self, x, y):
        return self._particles[grid_index(x, y, self.material.particles_x)]

    def rest_position(self, index):
        """Where ``reset`` places particle ``index``."""
        nx = self.material.particles_x
        x, y = grid_coords(index, nx)
        gap_x, gap_y = self.spacing
        return Vec2(self.offset_x + x * gap_x, self.config.start_y + y * gap_y)

    def reset(self):
        """
        Throw away the current particles and constraints and build the grid
        from scratch. Calling it twice gives identical geometry.
        """
        nx = self.material.particles_x
        ny = self.material.particles_y

        particles = []
        for y in range(ny):
            for x in range(nx):
                pos = self.rest_position(grid_index(x, y, nx))
                particles.append(Particle(pos, pinned=(y == 0)))

        constraints = []
        for y in range(ny):
            for x in range(nx):
                i = grid_index(x, y, nx)
                for other_x, other_y in neighbors(x, y, nx, ny):
                    j = grid_index(other_x, other_y, nx)
                    constraints.append(
                        DistanceConstraint.from_particles(particles, i, j, self.material.stiffness)
                    )

        self._particles = particles
        self._constraints = constraints
        logger.info(
            f"{self.material.name}: reset {len(particles)} particles, {len(constraints)} constraints"
        )

    def step(self):
        """Advance one tick: relax constraints, then integrate and collide with the floor."""
        if self.fixed:
            return
        self._relax()
        self._integrate()

    def solve(self):
        self.step()

    def _relax(self):
        particles = self._particles
        for _ in range(self.material.iterations):
            for c in self._constraints:
                c.update(particles)

    def _integrate(self):
        friction = self.material.friction
        gravity = self.material.gravity
        config = self.config
        for p in self._particles:
            if p.pinned:
                continue
            vx, vy = p.integrate(friction, gravity)
            resolve_floor_collision(p, vx, vy, config)

    def cut_along_segment(self, start, end):
        """
        Sever every active constraint crossed by the pointer path start-end.
        Call this once per pointer sample so fast strokes don't skip edges.
        Returns the number of constraints cut.
        """
        start = Vec2.of(start)
        end = Vec2.of(end)
        particles = self._particles
        cut = 0
        for c in self._constraints:
            if not c.active:
                continue
            a, b = c.endpoints(particles)
            if segments_intersect(start, end, a, b):
                c.cut()
                cut += 1
        if cut:
            logger.debug(f"{self.material.name}: cut {cut} constraints")
        return cut

    def apply_radial_impulse(self, center, radius=None):
        """
        Push particles away from ``center`` with a linear falloff. This moves
        positions directly, so calling it every tick compounds.
        Returns the number of particles moved.
        """
        center = Vec2.of(center)
        radius = self.config.wind_radius if radius is None else float(radius)
        gain = self.material.sensitivity
        moved = 0
        for p in self._particles:
            if p.pinned:
                continue
            dx = p.pos.x - center.x
            dy = p.pos.y - center.y
            dist = (dx * dx + dy * dy) ** 0.5
            if dist >= radius:
                continue
            # no division by dist: a particle on the center just gets zero delta
            force = (radius - dist) / radius
            strength = force * gain
            if p.nudge(dx * strength, dy * strength):
                moved += 1
        return moved

    def snapshot(self):
        return ClothSnapshot.capture(self.material, self._particles, self._constraints)

    def __repr__(self):
        return (f"<{self.__class__.__name__} material={self.material.name} "
                f"offset_x={self.offset_x} active={self.active_count}/{len(self._constraints)}>")
