import asyncio

import pytest

from gemroll.core.driver import FrameDriver


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FrameDriver(lambda: True, fps=0)


def test_interval():
    assert FrameDriver(lambda: True, fps=50).interval == pytest.approx(0.02)


def test_stops_when_tick_reports_done():
    calls = []

    def tick():
        calls.append(1)
        return len(calls) < 5

    async def scenario():
        driver = FrameDriver(tick, fps=1000)
        driver.start()
        await driver.wait()
        return driver

    driver = asyncio.run(scenario())

    assert len(calls) == 5
    assert driver.frame == 5
    assert driver.is_running is False


def test_restart_cancels_the_previous_stream():
    log = []

    def make_tick(name):
        def tick():
            log.append(name)
            return True
        return tick

    async def scenario():
        driver = FrameDriver(make_tick("first"), fps=1000)
        driver.start()
        await asyncio.sleep(0.02)

        driver._tick_fn = make_tick("second")
        driver.start()
        marker = len(log)
        await asyncio.sleep(0.02)
        driver.stop()
        return marker

    marker = asyncio.run(scenario())

    assert "first" in log[:marker]
    assert log[marker:]
    assert set(log[marker:]) == {"second"}


def test_stop_without_start_is_harmless():
    driver = FrameDriver(lambda: True)
    driver.stop()
    assert driver.is_running is False


def test_wait_after_stop_returns():
    async def scenario():
        driver = FrameDriver(lambda: True, fps=1000)
        driver.start()
        await asyncio.sleep(0.005)
        task = driver._task
        driver.stop()
        await driver.wait()
        await asyncio.sleep(0.005)
        return task

    task = asyncio.run(scenario())
    assert task.cancelled()


def test_tick_errors_propagate():
    def tick():
        raise RuntimeError("tick exploded")

    async def scenario():
        driver = FrameDriver(tick, fps=1000)
        driver.start()
        await driver.wait()

    with pytest.raises(RuntimeError, match="tick exploded"):
        asyncio.run(scenario())
