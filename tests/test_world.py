import pytest

from clothsim.materials import MATERIALS
from clothsim.world import ClothWorld


@pytest.fixture
def world(small_material, config):
    w = ClothWorld(config)
    w.create_default_cloths([small_material, small_material])
    return w


def test_default_layout(config):
    w = ClothWorld(config)
    cloths = w.create_default_cloths()
    assert [c.offset_x for c in cloths] == [-450.0, -150.0, 150.0, 450.0]
    assert [c.material for c in cloths] == list(MATERIALS.values())


def test_custom_layout(world):
    assert [c.offset_x for c in world.cloths] == [-150.0, 150.0]


def test_pointer_moves_without_cutting(world):
    assert world.move_pointer(-1000, -200) == 0
    assert world.move_pointer(1000, -200) == 0
    assert all(c.cut_count == 0 for c in world.cloths)


def test_cut_gesture_cuts_every_cloth(world):
    world.move_pointer(-1000, -200)
    world.cutting = True
    assert world.move_pointer(1000, -200) == 8
    assert [c.cut_count for c in world.cloths] == [4, 4]
    assert world.prev_pointer.x == -1000.0
    assert world.pointer.x == 1000.0


def test_cut_uses_path_since_last_sample(world):
    world.cutting = True
    world.move_pointer(-1000, -200)
    before = [c.cut_count for c in world.cloths]
    # short hop far from any cloth
    world.move_pointer(-990, -200)
    assert [c.cut_count for c in world.cloths] == before


def test_update_steps_every_cloth(world):
    world.move_pointer(-1000, -200)
    world.cutting = True
    world.move_pointer(1000, -200)
    world.cutting = False
    y_before = [c.particle_at(0, 1).pos.y for c in world.cloths]
    for _ in range(10):
        world.update()
    for cloth, y in zip(world.cloths, y_before):
        assert cloth.particle_at(0, 1).pos.y > y


def test_wind_only_while_blowing(world):
    target = world.cloths[0].particle_at(1, 1)
    world.move_pointer(target.pos.x, target.pos.y + 10.0)
    world.paused = True
    start = target.pos.copy()
    world.update()
    assert target.pos == start

    world.blowing = True
    world.update()
    # paused: neither gravity nor wind
    assert target.pos == start

    world.paused = False
    world.update()
    assert target.pos.y < start.y


def test_pause_applies_to_new_cloths(world, small_material):
    world.paused = True
    cloth = world.add_cloth(small_material, 600.0)
    assert cloth.fixed
    world.paused = False
    assert not cloth.fixed


def test_reset_all(world):
    world.cutting = True
    world.move_pointer(-1000, -200)
    world.move_pointer(1000, -200)
    for _ in range(5):
        world.update()
    world.reset_all()
    assert all(c.cut_count == 0 for c in world.cloths)
    assert world.stats() == [('Test', 17, 0), ('Test', 17, 0)]


def test_snapshots(world):
    snaps = world.snapshots()
    assert len(snaps) == 2
    assert snaps[0].positions[0, 0] == pytest.approx(-150.0)
    assert snaps[1].positions[0, 0] == pytest.approx(150.0)
