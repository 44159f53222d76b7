"""
Simulation-wide settings shared by every cloth in a world.

These used to be module constants of the demo; keeping them on a frozen
dataclass lets several simulations with different bounds coexist.
"""

from dataclasses import dataclass, replace

from clothsim.errors import ConfigError


@dataclass(frozen=True)
class SimulationConfig:
    """Geometry and contact settings for a cloth.

    Attributes:
        cloth_width: Logical width of every cloth, independent of resolution.
        cloth_height: Logical height of every cloth.
        start_y: Vertical coordinate of the pinned top row.
        floor_y: Floor threshold. y grows downward, so particles below the
            floor have ``y > floor_y``.
        wind_radius: Influence radius of the radial impulse.
        floor_damping: Fraction of downward speed kept after hitting the floor.
        floor_friction: Fraction of horizontal speed kept while on the floor.
    """

    cloth_width: float = 250.0
    cloth_height: float = 350.0
    start_y: float = -250.0
    floor_y: float = 300.0
    wind_radius: float = 80.0
    floor_damping: float = 0.1
    floor_friction: float = 0.4

    def __post_init__(self):
        if self.cloth_width <= 0 or self.cloth_height <= 0:
            raise ConfigError(
                f"cloth size must be positive, got {self.cloth_width}x{self.cloth_height}"
            )
        if self.wind_radius <= 0:
            raise ConfigError(f"wind_radius must be positive, got {self.wind_radius}")
        # anything above 0.2 would let more than 20% of the impact speed through
        if not 0.0 <= self.floor_damping <= 0.2:
            raise ConfigError(f"floor_damping must be in [0, 0.2], got {self.floor_damping}")
        if not 0.0 <= self.floor_friction < 1.0:
            raise ConfigError(f"floor_friction must be in [0, 1), got {self.floor_friction}")

    def with_overrides(self, **changes) -> "SimulationConfig":
        """Copy of this config with some fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = SimulationConfig()
