import pytest

from clothsim.config import SimulationConfig
from clothsim.materials import MaterialProfile


@pytest.fixture
def small_material():
    return MaterialProfile(
        name='Test',
        color=0x123456,
        friction=0.96,
        gravity=0.25,
        stiffness=1.0,
        particles_x=4,
        particles_y=3,
        sensitivity=0.1,
        iterations=4,
    )


@pytest.fixture
def column_material():
    """One pinned particle with a single free particle hanging below it."""
    return MaterialProfile(
        name='Column',
        color=0xffffff,
        friction=0.99,
        gravity=0.5,
        stiffness=1.0,
        particles_x=1,
        particles_y=2,
        sensitivity=0.2,
        iterations=4,
    )


@pytest.fixture
def config():
    return SimulationConfig()
