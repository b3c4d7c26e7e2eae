"""Elapsed time tracking for the bomb fuse and the bots' thinking time."""

import time


class ManualClock:
    """Clock that only moves when told to.

    The scheduler owns one and sets it from every ``tick(now)`` so that round
    timing depends on the timestamps handed in, never on wall time.
    """

    def __init__(self, now=0.0):
        self.now = float(now)

    def __call__(self):
        return self.now

    def set(self, now):
        # a jittery driver may hand in a stale timestamp; time never runs back
        self.now = max(self.now, float(now))

    def advance(self, dt):
        if dt < 0:
            raise ValueError(f"cannot advance by a negative delta ({dt})")
        self.now += dt


class Countdown:
    """Seconds elapsed since the last ``start``/``reset``."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._started_at = None
        self._high_water = 0.0

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        self._started_at = self._clock()
        self._high_water = 0.0

    def reset(self) -> None:
        # resetting an idle countdown is the same as starting it
        self.start()

    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        value = self._clock() - self._started_at
        if value > self._high_water:
            self._high_water = value
        return self._high_water

    def expired(self, threshold) -> bool:
        return self.elapsed() >= threshold
