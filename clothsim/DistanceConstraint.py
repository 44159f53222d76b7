from clothsim.TwoPointConstraint import TwoPointConstraint


class DistanceConstraint(TwoPointConstraint):
    # each end takes half of the correction; the full amount in one go explodes the mesh
    SPLIT = 0.5

    def __init__(self, p1, p2, length, stiffness=1.0):
        super().__init__(p1, p2)
        self._length = float(length)
        self.stiffness = float(stiffness)
        self._active = True

    @classmethod
    def from_particles(cls, particles, p1, p2, stiffness=1.0):
        """Constraint whose rest length is the current distance between p1 and p2."""
        length = particles[p1].pos.distance_to(particles[p2].pos)
        return cls(p1, p2, length, stiffness)

    @property
    def length(self):
        return self._length

    @property
    def active(self):
        return self._active

    def cut(self):
        """Deactivate for good. There is no way back short of rebuilding the cloth."""
        was_active = self._active
        self._active = False
        return was_active

    def update(self, particles):
        """
        Single Gauss-Seidel correction towards the rest length. Positions are
        written in place so later constraints in the same pass see them.
        Returns True if a correction was applied.
        """
        if not self._active:
            return False

        a = particles[self.p1]
        b = particles[self.p2]

        dx = a.pos.x - b.pos.x
        dy = a.pos.y - b.pos.y
        dist = (dx * dx + dy * dy) ** 0.5
        if dist == 0.0:
            return False

        diff = (self._length - dist) / dist * self.stiffness
        correction = diff * self.SPLIT
        offset_x = dx * correction
        offset_y = dy * correction

        if not a.pinned:
            a.pos.x += offset_x
            a.pos.y += offset_y
        if not b.pinned:
            b.pos.x -= offset_x
            b.pos.y -= offset_y
        return True

    def __repr__(self):
        return f"<{self.__class__.__name__} p1={self.p1} p2={self.p2} length={self._length:.3f} active={self._active}>"

    def to_dict(self):
        return {'p1': self.p1, 'p2': self.p2, 'length': self._length, 'active': self._active}
