import numpy as np
import pytest

from clothsim.solvers.cloth import ClothSimulation


@pytest.fixture
def cloth(small_material, config):
    return ClothSimulation(small_material, offset_x=-20.0, config=config)


def test_shapes_and_dtypes(cloth):
    snap = cloth.snapshot()
    assert snap.positions.shape == (12, 3)
    assert snap.positions.dtype == np.float32
    assert snap.indices.shape == (2 * len(cloth.constraints),)
    assert snap.indices.dtype == np.uint32
    assert snap.num_particles == 12
    assert snap.num_edges == len(cloth.constraints)
    assert snap.name == 'Test'
    assert snap.color == 0x123456


def test_vertical_axis_flipped(cloth):
    snap = cloth.snapshot()
    for i, p in enumerate(cloth.particles):
        assert snap.positions[i, 0] == pytest.approx(p.pos.x)
        assert snap.positions[i, 1] == pytest.approx(-p.pos.y)
        assert snap.positions[i, 2] == 0.0
    np.testing.assert_allclose(snap.plane_positions()[:, 1], [p.pos.y for p in cloth.particles], rtol=1e-6)


def test_edges_follow_creation_order(cloth):
    snap = cloth.snapshot()
    pairs = snap.indices.reshape(-1, 2)
    for (a, b), c in zip(pairs, cloth.constraints):
        assert (a, b) == (c.p1, c.p2)
    assert snap.active.all()


def test_cut_edges_become_degenerate(cloth):
    before = cloth.snapshot()
    cut = cloth.cut_along_segment((-1000, -200), (1000, -200))
    after = cloth.snapshot()

    assert after.indices.shape == before.indices.shape
    pairs = after.indices.reshape(-1, 2)
    for (a, b), c, live in zip(pairs, cloth.constraints, after.active):
        assert live == c.active
        if not c.active:
            assert (a, b) == (0, 0)
    assert len(after.active_edges()) == len(cloth.constraints) - cut
    assert after.active_edges().shape[1] == 2


def test_snapshot_is_a_copy(cloth):
    snap = cloth.snapshot()
    snap.positions[:] = 0.0
    assert cloth.particles[5].pos.y != 0.0
    assert cloth.snapshot().positions[5, 1] != 0.0
