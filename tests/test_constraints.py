import math

import pytest

from clothsim.DistanceConstraint import DistanceConstraint
from clothsim.Particle import Particle


def _pair(a, b, pin_first=False):
    return [Particle(a, pinned=pin_first), Particle(b)]


def test_rest_length_from_particles():
    particles = _pair((0, 0), (3, 4))
    c = DistanceConstraint.from_particles(particles, 0, 1)
    assert c.length == 5.0
    assert c.active


def test_same_endpoint_rejected():
    with pytest.raises(ValueError):
        DistanceConstraint(2, 2, 1.0)


def test_single_pass_moves_toward_rest_length():
    particles = _pair((0, 0), (20, 0))
    c = DistanceConstraint(0, 1, 10.0)
    before = abs(particles[0].pos.distance_to(particles[1].pos) - c.length)
    assert c.update(particles)
    after = abs(particles[0].pos.distance_to(particles[1].pos) - c.length)
    assert after < before
    # free on both sides: each end takes half the correction
    assert particles[0].pos.x == pytest.approx(5.0)
    assert particles[1].pos.x == pytest.approx(15.0)


def test_converges_with_pinned_end():
    particles = _pair((0, 0), (20, 0), pin_first=True)
    c = DistanceConstraint(0, 1, 10.0)
    for _ in range(30):
        c.update(particles)
    assert particles[0].pos.x == 0.0
    assert particles[1].pos.distance_to(particles[0].pos) == pytest.approx(10.0, abs=1e-6)


def test_compressed_constraint_pushes_apart():
    particles = _pair((0, 0), (4, 0))
    c = DistanceConstraint(0, 1, 10.0)
    c.update(particles)
    assert particles[1].pos.x - particles[0].pos.x > 4.0


def test_stiffness_scales_correction():
    soft = _pair((0, 0), (20, 0))
    hard = _pair((0, 0), (20, 0))
    DistanceConstraint(0, 1, 10.0, stiffness=0.5).update(soft)
    DistanceConstraint(0, 1, 10.0, stiffness=1.0).update(hard)
    assert soft[1].pos.x == pytest.approx(17.5)
    assert hard[1].pos.x == pytest.approx(15.0)


def test_coincident_particles_are_skipped():
    particles = _pair((1, 1), (1, 1))
    c = DistanceConstraint(0, 1, 10.0)
    assert not c.update(particles)
    for p in particles:
        assert math.isfinite(p.pos.x) and math.isfinite(p.pos.y)
        assert (p.pos.x, p.pos.y) == (1.0, 1.0)


def test_cut_is_permanent_and_inert():
    particles = _pair((0, 0), (20, 0))
    c = DistanceConstraint(0, 1, 10.0)
    assert c.cut() is True
    assert c.cut() is False
    assert not c.active
    assert not c.update(particles)
    assert particles[1].pos.x == 20.0
    with pytest.raises(AttributeError):
        c.active = True


def test_rest_length_is_read_only():
    c = DistanceConstraint(0, 1, 10.0)
    with pytest.raises(AttributeError):
        c.length = 3.0
