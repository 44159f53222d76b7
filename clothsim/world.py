import logging

from clothsim.config import DEFAULT_CONFIG
from clothsim.materials import MATERIALS
from clothsim.solvers.cloth import ClothSimulation
from clothsim.Vec2 import Vec2

logger = logging.getLogger(__name__)


class ClothWorld:
    def __init__(self, config=DEFAULT_CONFIG):
        """
        A set of independent cloths driven by one pointer.

        The world owns the per-tick protocol: every cloth steps, then the
        wind is applied while it is held. Cutting happens on pointer moves,
        not on ticks, so the tested path is the one since the last sample.
        """
        self.config = config
        self.cloths: list[ClothSimulation] = []

        self.pointer = Vec2(0.0, 0.0)
        self.prev_pointer = Vec2(0.0, 0.0)
        self.cutting = False
        self.blowing = False
        self._paused = False

    @property
    def paused(self):
        return self._paused

    @paused.setter
    def paused(self, value):
        self._paused = bool(value)
        for cloth in self.cloths:
            cloth.fixed = self._paused

    def add_cloth(self, material, offset_x=0.0):
        cloth = ClothSimulation(material, offset_x, self.config)
        cloth.fixed = self._paused
        self.cloths.append(cloth)
        return cloth

    def create_default_cloths(self, materials=None, spacing=300.0):
        """
        Lay the materials out side by side, centered on x=0. With the four
        presets and the default spacing the left edges sit at -450, -150,
        150 and 450.
        """
        if materials is None:
            materials = list(MATERIALS.values())
        count = len(materials)
        created = []
        for i, material in enumerate(materials):
            offset = (i - (count - 1) / 2.0) * spacing
            created.append(self.add_cloth(material, offset))
        return created

    def move_pointer(self, x, y):
        """
        Record a pointer sample in simulation-plane coordinates. While the
        cut gesture is held, cuts every cloth along the path since the
        previous sample. Returns the number of constraints cut.
        """
        self.prev_pointer = self.pointer
        self.pointer = Vec2(x, y)
        if not self.cutting:
            return 0
        return sum(c.cut_along_segment(self.prev_pointer, self.pointer) for c in self.cloths)

    def update(self):
        """One animation tick."""
        for cloth in self.cloths:
            cloth.step()
            if self.blowing and not self._paused:
                cloth.apply_radial_impulse(self.pointer)

    def reset_all(self):
        logger.info(f"Resetting {len(self.cloths)} cloths")
        for cloth in self.cloths:
            cloth.reset()

    def snapshots(self):
        return [cloth.snapshot() for cloth in self.cloths]

    def stats(self):
        """Per-cloth (name, active, cut) triples for status displays."""
        return [(c.material.name, c.active_count, c.cut_count) for c in self.cloths]
