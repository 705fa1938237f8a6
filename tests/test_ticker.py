import threading
import time

import pytest

from gravity.Entity import Entity
from gravity.ticker import AutoTicker, SimulationController, clamp
from gravity.world import World


class SlowWorld:
    """Stand-in world that notices overlapping steps."""
    def __init__(self):
        self.entities = []
        self.tick_count = 0
        self.active = 0
        self.overlaps = 0
        self._guard = threading.Lock()

    def step(self, dt):
        with self._guard:
            self.active += 1
            if self.active > 1:
                self.overlaps += 1
        time.sleep(0.002)
        self.tick_count += 1
        with self._guard:
            self.active -= 1

    def reset(self, entities):
        self.entities = list(entities)
        self.tick_count = 0


def test_clamp():
    assert clamp(0, 1, 1000) == 1
    assert clamp(5000, 1, 1000) == 1000
    assert clamp(10, 1, 1000) == 10


def test_manual_tick_steps_world():
    world = World()
    world.reset([Entity.from_record(1, 0, 0, 1, 0, 0, 0)])
    controller = SimulationController(world, dt=0.5)
    controller.tick()
    assert world.tick_count == 1
    assert controller.snapshot() == [(1.0, 0.5, 0.0, 1.0, 0.0, 0.0, 0.0)]


def test_reset_and_read():
    controller = SimulationController(World())
    controller.reset([Entity.from_record(2, 1, 1, 0, 0, 0, 0)])
    assert controller.read(lambda w: len(w.entities)) == 1


def test_manual_and_automatic_ticks_never_overlap():
    world = SlowWorld()
    controller = SimulationController(world)
    ticker = AutoTicker(controller, interval_ms=1)
    ticker.start()
    workers = [threading.Thread(target=lambda: [controller.tick() for _ in range(10)]) for _ in range(3)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    ticker.stop()
    assert world.overlaps == 0
    assert world.tick_count >= 30


def test_stop_leaves_whole_ticks():
    world = SlowWorld()
    controller = SimulationController(world)
    ticker = AutoTicker(controller, interval_ms=1)
    ticker.start()
    assert ticker.running
    time.sleep(0.05)
    ticker.stop()
    assert not ticker.running
    assert world.active == 0
    ticks = world.tick_count
    time.sleep(0.02)
    assert world.tick_count == ticks


def test_ticker_can_restart():
    world = SlowWorld()
    ticker = AutoTicker(SimulationController(world), interval_ms=1)
    ticker.start()
    ticker.start()
    ticker.stop()
    first = world.tick_count
    ticker.start()
    time.sleep(0.05)
    ticker.stop()
    assert world.tick_count > first


@pytest.mark.parametrize("requested, expected", [(0, 1), (-20, 1), (10, 10), (1000, 1000), (5000, 1000)])
def test_interval_is_clamped(requested, expected):
    ticker = AutoTicker(SimulationController(SlowWorld()), interval_ms=requested)
    assert ticker.interval_ms == expected


def test_stop_without_start_is_harmless():
    AutoTicker(SimulationController(SlowWorld())).stop()
