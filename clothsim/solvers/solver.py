class solver:
    def __init__(self, fixed=False):
        # a fixed solver keeps its state frozen; used to pause a simulation
        self.fixed = bool(fixed)

    def reset(self):
        """
        Placeholder for rebuilding the solver state.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def solve(self):
        """
        Placeholder for advancing the solver by one tick.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} fixed={self.fixed}>"

    def __str__(self):
        return self.__repr__()
