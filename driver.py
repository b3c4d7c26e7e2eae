"""Bridges an outside cadence (the pygame frame loop, a fixed step, a test's
timestamps) into :meth:`TurnScheduler.tick`.

The driver owns no game state.  It only decides what ``now`` is and passes
the interesting events back up.  How often it is called does not matter,
the scheduler's countdowns keep the round timing.
"""

import logging

import pygame

from countdown import ManualClock
from events import TERMINAL_EVENTS, RoundWon

logger = logging.getLogger(__name__)


def pygame_seconds():
    return pygame.time.get_ticks() / 1000.0


class RoundDriver:
    def __init__(self, scheduler, clock=pygame_seconds):
        self.scheduler = scheduler
        self.clock = clock
        self.now = None

    @property
    def finished(self) -> bool:
        return self.scheduler.finished

    def start(self, roster, fuse_seconds, now=None):
        self.now = self.clock() if now is None else now
        return self.scheduler.start(roster, fuse_seconds, now=self.now)

    def tick(self, now=None) -> list:
        """Forward one tick; returns the eliminations/win it caused."""
        self.now = self.clock() if now is None else now
        events = self.scheduler.tick(self.now)
        return [e for e in events if isinstance(e, TERMINAL_EVENTS)]

    def advance(self, dt) -> list:
        """Tick ``dt`` seconds after the previous tick."""
        if self.now is None:
            self.now = 0.0
        return self.tick(self.now + dt)

    def stop(self) -> None:
        self.scheduler.abort()


def run_headless(scheduler, roster, fuse_seconds, step=0.05, max_ticks=100_000):
    """Play a whole round on a manual clock, no window needed.

    Returns the :class:`RoundWon` event, or None when ``max_ticks`` ran out
    first.
    """
    clock = ManualClock()
    driver = RoundDriver(scheduler, clock=clock)
    # only this round's events count; the bus may be shared with earlier rounds
    won = [e for e in driver.start(roster, fuse_seconds, now=0.0) if isinstance(e, RoundWon)]
    ticks = 0
    while not driver.finished and ticks < max_ticks:
        clock.advance(step)
        won += [e for e in driver.tick() if isinstance(e, RoundWon)]
        ticks += 1
    if not won:
        logger.warning("Round still running after %d ticks", ticks)
        scheduler.abort()
        return None
    return won[-1]
