import logging
import threading

from .constants import DT, MAX_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS, TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


def clamp(x, lo, hi):
    return max(lo, min(hi, x))


class SimulationController:
    """
    Shared access to a World from the manual tick button, the automatic
    ticker thread and the renderer. Every operation holds the lock, so ticks
    never overlap and readers only ever see whole ticks.
    """
    def __init__(self, world, dt=DT):
        self.lock = threading.RLock()
        self.world = world
        self.dt = dt

    def tick(self):
        with self.lock:
            self.world.step(self.dt)

    def reset(self, entities):
        with self.lock:
            self.world.reset(entities)

    def set_dt(self, dt):
        with self.lock:
            self.dt = float(dt)

    def read(self, fn):
        """Call fn(world) with no tick in progress and return its result."""
        with self.lock:
            return fn(self.world)

    def snapshot(self):
        with self.lock:
            return [e.to_record() for e in self.world.entities]


class AutoTicker:
    """
    Ticks a SimulationController every `interval_ms` milliseconds on a daemon
    thread until stopped. A stopped ticker can be started again.
    """
    def __init__(self, controller, interval_ms=TICK_INTERVAL_MS):
        self.controller = controller
        self._interval_ms = TICK_INTERVAL_MS
        self.interval_ms = interval_ms
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def interval_ms(self):
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, value):
        requested = int(value)
        ms = clamp(requested, MIN_TICK_INTERVAL_MS, MAX_TICK_INTERVAL_MS)
        if ms != requested:
            logger.warning("Tick interval %s ms out of range, using %d ms", value, ms)
        self._interval_ms = ms

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stop_event,),
                                        name="AutoTicker", daemon=True)
        self._thread.start()
        logger.info("Auto ticking every %d ms", self._interval_ms)

    def stop(self, timeout=None):
        """Signal the thread to stop and wait for the tick in flight to finish."""
        if self._thread is None:
            return
        self._stop_event.set()
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)
        self._thread = None
        logger.info("Auto ticking stopped")

    def _run(self, stop_event):
        # the interval is re-read every cycle so slider changes apply live
        while not stop_event.wait(self._interval_ms / 1000.0):
            self.controller.tick()
