import random

import pytest

from gemroll.game import physics
from gemroll.game.entities import Enemy, Gem, InputState, Player, Spike, TerrainSample
from gemroll.game.physics import Contact

FLAT = [TerrainSample(0, 300), TerrainSample(100, 300), TerrainSample(200, 300)]


def test_gravity_and_euler_step():
    p = Player(x=50, y=100)
    physics.integrate(p, InputState())

    assert p.dy == pytest.approx(0.4)
    assert p.y == pytest.approx(100.4)
    assert p.x == 50


def test_left_wins_when_both_directions_held():
    p = Player()
    physics.integrate(p, InputState(left=True, right=True))
    assert p.dx == -5
    assert p.x == pytest.approx(45)


def test_right_sets_full_speed():
    p = Player()
    physics.integrate(p, InputState(right=True))
    assert p.dx == 5


def test_horizontal_speed_decays_without_input():
    p = Player(dx=10)
    physics.integrate(p, InputState())
    assert p.dx == pytest.approx(9)
    assert p.x == pytest.approx(59)


def test_jump_only_from_the_ground():
    grounded = Player(on_ground=True)
    physics.integrate(grounded, InputState(jump=True))
    assert grounded.dy == -12
    assert grounded.y == pytest.approx(88)
    assert grounded.on_ground is False

    airborne = Player(on_ground=False)
    physics.integrate(airborne, InputState(jump=True))
    assert airborne.dy == pytest.approx(0.4)


@pytest.mark.parametrize("x, expected", [(0, 0), (400, 0), (401, 1), (900, 500)])
def test_camera_offset(x, expected):
    assert physics.camera_offset(x, 800) == pytest.approx(expected)


def test_ball_lands_on_terrain():
    p = Player(x=50, y=290, dx=2, dy=3)
    physics.resolve_terrain(p, FLAT, camera=0)

    assert p.y == pytest.approx(285)
    assert p.dy == 0
    assert p.on_ground is True
    assert p.dx == pytest.approx(1.98)


def test_every_overlapping_segment_applies_and_last_wins():
    slope = [TerrainSample(0, 300), TerrainSample(100, 300), TerrainSample(200, 400)]
    p = Player(x=95, y=290, dx=1)
    physics.resolve_terrain(p, slope, camera=0)

    # First segment snaps to 285, second (ground 295 at x=95) to 280.
    assert p.y == pytest.approx(280)
    assert p.dx == pytest.approx(0.99 * 0.99)


def test_ball_above_ground_stays_airborne():
    p = Player(x=50, y=200, dy=2, on_ground=True)
    physics.resolve_terrain(p, FLAT, camera=0)

    assert p.on_ground is False
    assert p.dy == 2
    assert p.y == 200


def test_ball_deep_below_the_tolerance_band_is_not_snapped():
    p = Player(x=50, y=330, dy=2)
    physics.resolve_terrain(p, FLAT, camera=0)
    assert p.on_ground is False
    assert p.y == 330


def test_terrain_collision_is_camera_relative():
    far = [TerrainSample(1000, 300), TerrainSample(1100, 300)]
    p = Player(x=50, y=290)

    physics.resolve_terrain(p, far, camera=0)
    assert p.on_ground is False

    physics.resolve_terrain(p, far, camera=1000)
    assert p.on_ground is True


def test_grounded_ball_never_keeps_vertical_speed():
    rng = random.Random(5)
    wavy = [TerrainSample(i * 40 - 40, 300 + rng.uniform(-30, 30)) for i in range(30)]
    for _ in range(500):
        p = Player(x=rng.uniform(0, 1000), y=rng.uniform(200, 350), dy=rng.uniform(-12, 12))
        physics.resolve_terrain(p, wavy, camera=rng.uniform(0, 200))
        if p.on_ground:
            assert p.dy == 0


def test_gem_collection():
    p = Player(x=50, y=100)
    near = Gem(x=60, y=100)
    far = Gem(x=200, y=100)

    assert physics.collect_gems(p, [near, far], camera=0) == 1
    assert near.collected is True
    assert far.collected is False
    # Already collected gems are not counted again.
    assert physics.collect_gems(p, [near, far], camera=0) == 0


def test_gem_collection_is_camera_adjusted():
    gem = Gem(x=1060, y=100)
    assert physics.collect_gems(Player(x=50, y=100), [gem], camera=1000) == 1


def test_gem_must_be_strictly_closer_than_the_radii():
    gem = Gem(x=50 + 23, y=100)
    assert physics.collect_gems(Player(x=50, y=100), [gem], camera=0) == 0


def test_spike_contact():
    spike = Spike(x=40, y=120)

    assert physics.touches_spike(Player(x=50, y=100), spike, camera=0)
    assert not physics.touches_spike(Player(x=50, y=90), spike, camera=0)
    assert not physics.touches_spike(Player(x=80, y=100), spike, camera=0)
    assert physics.touches_spike(Player(x=50, y=100), Spike(x=1040, y=120), camera=1000)


def test_enemy_stomp_from_above():
    enemy = Enemy(x=40, y=280, speed=1, direction=1)  # top at 255
    assert physics.enemy_contact(Player(x=50, y=250, dy=3), enemy, 0) is Contact.STOMP


def test_enemy_hit_when_rising_or_too_low():
    enemy = Enemy(x=40, y=280, speed=1, direction=1)
    assert physics.enemy_contact(Player(x=50, y=250, dy=-1), enemy, 0) is Contact.HIT
    assert physics.enemy_contact(Player(x=50, y=280, dy=3), enemy, 0) is Contact.HIT


def test_enemy_side_contact_is_a_hit():
    enemy = Enemy(x=40, y=280, speed=1, direction=1)
    assert physics.enemy_contact(Player(x=30, y=270, dy=0), enemy, 0) is Contact.HIT


def test_enemy_no_contact():
    enemy = Enemy(x=40, y=280, speed=1, direction=1)
    assert physics.enemy_contact(Player(x=200, y=270), enemy, 0) is None
    assert physics.enemy_contact(Player(x=50, y=270), enemy, camera=500) is None


def test_bounce_and_fall_out():
    p = Player(dy=4)
    physics.bounce(p)
    assert p.dy == -10

    assert physics.fell_out(Player(y=416), 400)
    assert not physics.fell_out(Player(y=415), 400)
