"""
Interactive mass-spring cloth simulation.

Grids of Verlet particles joined by distance constraints, with a floor,
a cutting operator and a radial wind push. Rendering is left to the caller,
which reads a ClothSnapshot every tick.
"""

from .config import DEFAULT_CONFIG, SimulationConfig
from .errors import ClothSimError, ConfigError, MaterialError
from .materials import MATERIALS, MaterialProfile, get_material, load_materials
from .snapshot import ClothSnapshot
from .solvers.cloth import ClothSimulation
from .Vec2 import Vec2
from .world import ClothWorld

__all__ = [
    "DEFAULT_CONFIG",
    "SimulationConfig",
    "ClothSimError",
    "ConfigError",
    "MaterialError",
    "MATERIALS",
    "MaterialProfile",
    "get_material",
    "load_materials",
    "ClothSnapshot",
    "ClothSimulation",
    "Vec2",
    "ClothWorld",
]
