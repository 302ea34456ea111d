import math

import pytest

from gemroll.game import terrain
from gemroll.game.entities import TerrainSample


def test_generate_produces_segment_count_plus_two_samples():
    samples = terrain.generate(20, 400, 800)

    assert len(samples) == 22
    assert samples[0].x == -40
    assert samples[-1].x == 800
    for i, sample in enumerate(samples):
        assert sample.x == pytest.approx((i - 1) * 40)
        assert sample.y == pytest.approx(400 - 100 + 30 * math.sin(0.5 * i))


def test_generate_is_strictly_increasing_in_x():
    samples = terrain.generate(7, 300, 500)
    xs = [s.x for s in samples]
    assert all(b > a for a, b in zip(xs, xs[1:]))


def test_extend_appends_one_sample_on_the_waveform():
    samples = terrain.generate(20, 400, 800)
    last = samples[-1]

    assert terrain.needs_extension(samples, camera_offset=0, screen_width=800)
    added = terrain.extend(samples, segment_width=40, screen_height=400)

    assert len(samples) == 23
    assert samples[-1] is added
    assert added.x == pytest.approx(last.x + 40)
    assert added.y == pytest.approx(300 + 30 * math.sin(0.5 * 22))


def test_extension_stops_one_and_a_half_screens_ahead():
    samples = terrain.generate(20, 400, 800)
    while terrain.needs_extension(samples, 0, 800):
        terrain.extend(samples, 40, 400)

    assert samples[-1].x == pytest.approx(1200)
    assert len(samples) == 32


def test_extension_follows_the_camera():
    samples = terrain.generate(20, 400, 800)
    assert terrain.needs_extension(samples, camera_offset=-500, screen_width=800) is False
    assert terrain.needs_extension(samples, camera_offset=1000, screen_width=800) is True


def test_height_at_interpolates_linearly():
    a = TerrainSample(0, 300)
    b = TerrainSample(100, 200)
    assert terrain.height_at(a, b, 0) == 300
    assert terrain.height_at(a, b, 25) == pytest.approx(275)
    assert terrain.height_at(a, b, 100) == 200


def test_height_at_rejects_zero_width_segment():
    with pytest.raises(AssertionError):
        terrain.height_at(TerrainSample(10, 0), TerrainSample(10, 5), 10)


def test_empty_terrain_is_an_invariant_violation():
    with pytest.raises(AssertionError):
        terrain.extend([], 40, 400)
