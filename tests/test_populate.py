import random

import pytest

from gemroll.game.entities import Viewport
from gemroll.game.populate import populate


class SequenceRandom:
    """Feeds a fixed list of values to ``random()`` in order."""

    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


@pytest.mark.parametrize("level", [1, 2, 3, 7])
def test_counts_scale_with_level(level):
    content = populate(level, Viewport(), random.Random(level))

    assert len(content.gems) == 5 + 2 * level
    assert len(content.spikes) == 3 + level
    assert len(content.enemies) == level


def test_level_one_counts():
    content = populate(1, Viewport(), random.Random(0))
    assert (len(content.gems), len(content.spikes), len(content.enemies)) == (7, 4, 1)


def test_placement_ranges():
    vp = Viewport(width=800, height=400)
    content = populate(5, vp, random.Random(99))

    for gem in content.gems:
        assert 0 <= gem.x < 1600
        assert 50 <= gem.y < 250
        assert gem.radius == 8
        assert gem.collected is False

    for spike in content.spikes:
        assert 0 <= spike.x < 1600
        assert spike.y == 320
        assert (spike.width, spike.height) == (20, 20)

    for enemy in content.enemies:
        assert 0 <= enemy.x < 1600
        assert enemy.y == 280
        assert (enemy.width, enemy.height) == (25, 25)
        assert 1 <= enemy.speed < 2
        assert enemy.direction in (1, -1)


def test_enemy_direction_coin_flip():
    # level 1 draws: 7 gems x (x, y), 4 spikes x (x), 1 enemy x (x, speed, dir)
    head = [0.0] * (7 * 2 + 4)
    right = populate(1, Viewport(), SequenceRandom(head + [0.25, 0.5, 0.75]))
    left = populate(1, Viewport(), SequenceRandom(head + [0.25, 0.5, 0.5]))

    assert right.enemies[0].direction == 1
    assert right.enemies[0].x == pytest.approx(400)
    assert right.enemies[0].speed == pytest.approx(1.5)
    assert left.enemies[0].direction == -1


def test_populate_returns_fresh_lists():
    rng = random.Random(3)
    first = populate(1, Viewport(), rng)
    second = populate(1, Viewport(), rng)
    assert first.gems is not second.gems
    assert first.enemies[0] is not second.enemies[0]
