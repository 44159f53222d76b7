"""
Fabric presets.

A MaterialProfile is read-only input to a simulation. Everything that used to
depend on the fabric's name (e.g. the number of relaxation passes) is a field
here, so adding a fabric is a data change only.
"""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Tuple

from clothsim.errors import MaterialError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialProfile:
    """Physical coefficients of one fabric.

    Attributes:
        name: Display label.
        color: 0xRRGGBB, only used for drawing.
        friction: Velocity retained per tick. Near 1 keeps moving (silk),
            near 0.9 settles quickly (denim).
        gravity: Downward displacement added per tick.
        stiffness: Scale on each constraint correction.
        particles_x: Grid columns.
        particles_y: Grid rows.
        sensitivity: Gain of the radial wind impulse.
        iterations: Relaxation passes per step. Finer grids need more.
    """

    name: str
    color: int
    friction: float
    gravity: float
    stiffness: float
    particles_x: int
    particles_y: int
    sensitivity: float
    iterations: int = 4

    def __post_init__(self):
        if not self.name:
            raise MaterialError("material name must not be empty")
        for field in ('color', 'particles_x', 'particles_y', 'iterations'):
            value = getattr(self, field)
            # bool is an int subclass but never a valid count
            if not isinstance(value, int) or isinstance(value, bool):
                raise MaterialError(f"{self.name}: {field} must be an integer, got {value!r}")
        for field in ('friction', 'gravity', 'stiffness', 'sensitivity'):
            value = getattr(self, field)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise MaterialError(f"{self.name}: {field} must be a number, got {value!r}")
        if not 0 <= self.color <= 0xFFFFFF:
            raise MaterialError(f"{self.name}: color out of range: {self.color!r}")
        if not 0.0 < self.friction <= 1.0:
            raise MaterialError(f"{self.name}: friction must be in (0, 1], got {self.friction}")
        if self.gravity < 0.0:
            raise MaterialError(f"{self.name}: gravity must be >= 0, got {self.gravity}")
        if not 0.0 < self.stiffness <= 1.0:
            raise MaterialError(f"{self.name}: stiffness must be in (0, 1], got {self.stiffness}")
        if self.particles_x < 1 or self.particles_y < 1:
            raise MaterialError(
                f"{self.name}: grid needs at least 1x1 particles, got {self.particles_x}x{self.particles_y}"
            )
        if self.sensitivity < 0.0:
            raise MaterialError(f"{self.name}: sensitivity must be >= 0, got {self.sensitivity}")
        if self.iterations < 1:
            raise MaterialError(f"{self.name}: iterations must be >= 1, got {self.iterations}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return ((self.color >> 16) & 0xFF, (self.color >> 8) & 0xFF, self.color & 0xFF)

    @property
    def num_particles(self) -> int:
        return self.particles_x * self.particles_y

    @property
    def num_constraints(self) -> int:
        nx, ny = self.particles_x, self.particles_y
        return nx * (ny - 1) + (nx - 1) * ny

    def to_dict(self) -> dict:
        data = asdict(self)
        data['color'] = f"#{self.color:06x}"
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MaterialProfile":
        if not isinstance(data, dict):
            raise MaterialError(f"material entry must be an object, got {data!r}")
        data = dict(data)
        color = data.get('color', 0xFFFFFF)
        if isinstance(color, str):
            try:
                data['color'] = int(color.lstrip('#'), 16)
            except ValueError as e:
                raise MaterialError(f"bad color {color!r} in material entry {data!r}") from e
        try:
            return cls(**data)
        except TypeError as e:
            raise MaterialError(f"bad material entry {data!r}: {e}") from e


DENIM = MaterialProfile(
    name='Denim',
    color=0x6688cc,
    friction=0.90,
    gravity=0.35,
    stiffness=1.0,
    particles_x=15,
    particles_y=20,
    sensitivity=0.05,
    iterations=4,
)

LINEN = MaterialProfile(
    name='Linen',
    color=0xdddddd,
    friction=0.96,
    gravity=0.25,
    stiffness=0.9,
    particles_x=25,
    particles_y=35,
    sensitivity=0.1,
    iterations=4,
)

SILK = MaterialProfile(
    name='Silk',
    color=0xff66cc,
    friction=0.995,
    gravity=0.1,
    stiffness=1.0,
    particles_x=45,
    particles_y=60,
    sensitivity=0.2,
    iterations=8,
)

ULTRA_SILK = MaterialProfile(
    name='Ultra Silk',
    color=0x9932cc,
    friction=0.998,
    gravity=0.06,
    stiffness=0.95,
    particles_x=60,
    particles_y=80,
    sensitivity=0.3,
    iterations=12,
)

MATERIALS: Dict[str, MaterialProfile] = {
    'DENIM': DENIM,
    'LINEN': LINEN,
    'SILK': SILK,
    'ULTRA_SILK': ULTRA_SILK,
}


def _key(name: str) -> str:
    return name.strip().upper().replace(' ', '_').replace('-', '_')


def get_material(name: str) -> MaterialProfile:
    """Look up a preset by key or display name, ignoring case."""
    profile = MATERIALS.get(_key(name))
    if profile is None:
        raise MaterialError(f"unknown material {name!r}, expected one of {', '.join(MATERIALS)}")
    return profile


def load_materials(filename) -> List[MaterialProfile]:
    """Read a JSON list of material entries."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read materials from {filename}: {e}")
        raise MaterialError(f"could not read materials from {filename}: {e}") from e

    if isinstance(data, dict):
        data = data.get('materials', [])
    if not isinstance(data, list):
        raise MaterialError(f"{filename}: expected a list of materials")

    try:
        profiles = [MaterialProfile.from_dict(entry) for entry in data]
    except MaterialError as e:
        logger.error(f"Invalid material in {filename}: {e}")
        raise MaterialError(f"{filename}: {e}") from e
    logger.info(f"Loaded {len(profiles)} materials from {filename}")
    return profiles


def save_materials(profiles: Iterable[MaterialProfile], filename) -> None:
    data = {'materials': [p.to_dict() for p in profiles]}
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=4)
