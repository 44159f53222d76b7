class TwoPointConstraint:
    """Base class for constraints between two particles, referenced by index."""
    def __init__(self, p1, p2):
        if p1 == p2:
            raise ValueError(f"constraint endpoints must differ, got {p1} twice")
        self.p1 = int(p1)
        self.p2 = int(p2)

    def endpoints(self, particles):
        """Current positions of both ends."""
        return particles[self.p1].pos, particles[self.p2].pos

    def update(self, particles):
        """Update the constraint. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} p1={self.p1} p2={self.p2}>"

    def __str__(self):
        return self.__repr__()
