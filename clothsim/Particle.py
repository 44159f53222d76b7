from clothsim.Vec2 import Vec2


class Particle:
    """Verlet point mass: velocity is implied by ``pos - old_pos``."""

    def __init__(self, pos, old_pos=None, pinned=False):
        self.pos = Vec2.of(pos)
        # zero initial velocity unless told otherwise
        self.old_pos = Vec2.of(old_pos) if old_pos is not None else self.pos.copy()
        self._pinned = bool(pinned)

    @property
    def pinned(self):
        return self._pinned

    def velocity(self):
        return self.pos - self.old_pos

    def nudge(self, dx, dy):
        """Move the particle directly. Pinned particles ignore this."""
        if self._pinned:
            return False
        self.pos.x += dx
        self.pos.y += dy
        return True

    def integrate(self, friction, gravity):
        """
        One Verlet step. Returns the damped velocity (vx, vy) used, which the
        floor response needs afterwards. Gravity only acts on y.
        """
        if self._pinned:
            return 0.0, 0.0
        vx = (self.pos.x - self.old_pos.x) * friction
        vy = (self.pos.y - self.old_pos.y) * friction

        self.old_pos.x = self.pos.x
        self.old_pos.y = self.pos.y

        self.pos.x += vx
        self.pos.y += vy + gravity
        return vx, vy

    def __eq__(self, other):
        if other is None or not isinstance(other, Particle):
            return False
        return self.pos == other.pos and self.old_pos == other.old_pos and self.pinned == other.pinned

    def __hash__(self):
        return hash((self.pos, self.old_pos, self.pinned))

    def __repr__(self):
        return f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), old=({self.old_pos.x:.2f}, {self.old_pos.y:.2f}), pinned={self.pinned})"

    def __str__(self):
        return self.__repr__()

    def to_dict(self):
        return {
            'pos': (self.pos.x, self.pos.y),
            'old_pos': (self.old_pos.x, self.old_pos.y),
            'pinned': self.pinned
        }
