"""Turn scheduler: who holds the bomb, and what happens when it goes off.

The scheduler is a tick driven state machine (``SETUP -> ACTIVE ->
FINISHED``).  Every call to :meth:`TurnScheduler.tick` does at most one of
the following for the participant currently holding the bomb:

- the fuse lapsed: one health point is lost and the bomb moves on;
- a bot finished thinking: it answers;
- the human submitted a response: it is checked.

A correct answer passes the bomb to the next seat with a fresh fuse.  A wrong
answer costs a health point (taken by :meth:`Participant.answer`) and also
passes the bomb.  Participants without health are removed on the spot and
the round ends once a single participant (or nobody) is left.

Nothing here sleeps or reads wall time.  The caller hands in ``now`` and the
scheduler's :class:`ManualClock` follows it, so tests can replay exact
timelines.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import Optional

from config import THINKING_MARGIN, THINKING_RATIO
from countdown import Countdown, ManualClock
from entities import Outcome, ParticipantView
from errors import (
    EmptyRoster,
    InvalidFuse,
    InvalidSetting,
    InvalidStateTransition,
    ParticipantEliminated,
)
from events import (
    AnswerResult,
    DeadlinePenalty,
    Eliminated,
    EventBus,
    RoundStarted,
    RoundWon,
    TurnAdvanced,
)

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    SETUP = "setup"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclasses.dataclass(frozen=True)
class RoundSnapshot:
    """Everything a renderer needs to draw one frame."""
    phase: Phase
    participants: tuple
    current_id: Optional[int]
    prompt: Optional[str]
    fuse_seconds: float
    fuse_elapsed: float
    winner_id: Optional[int]

    @property
    def fuse_remaining(self) -> float:
        return max(0.0, self.fuse_seconds - self.fuse_elapsed)

    def participant(self, pid) -> Optional[ParticipantView]:
        return next((p for p in self.participants if p.id == pid), None)


def default_thinking_seconds(fuse_seconds):
    return max(0.0, fuse_seconds * THINKING_RATIO - THINKING_MARGIN)


class TurnScheduler:
    def __init__(self, provider, bus=None, thinking_seconds=None):
        self.provider = provider
        self.bus = bus or EventBus()
        self.thinking_seconds = thinking_seconds
        # only ever moved by the ``now`` given to start()/tick()
        self.clock = ManualClock()
        self.fuse = Countdown(self.clock)
        self.thinking = Countdown(self.clock)
        self.fuse_seconds = 0.0
        self.phase = Phase.SETUP
        self.challenge = None
        self.winner = None
        self._roster = []
        self._index = 0
        self._pending = None
        self._emitted = []

    # ------------------------------------------------------------------
    # read-only accessors
    # ------------------------------------------------------------------

    @property
    def roster(self) -> tuple:
        return tuple(self._roster)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self):
        if not self._roster or self.phase is not Phase.ACTIVE:
            return None
        return self._roster[self._index]

    @property
    def finished(self) -> bool:
        return self.phase is Phase.FINISHED

    def snapshot(self) -> RoundSnapshot:
        current = self.current
        return RoundSnapshot(
            phase=self.phase,
            participants=tuple(p.view() for p in self._roster),
            current_id=current.id if current else None,
            prompt=self.challenge.prompt if self.challenge and current else None,
            fuse_seconds=self.fuse_seconds,
            fuse_elapsed=self.fuse.elapsed(),
            winner_id=self.winner.id if self.winner else None,
        )

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def start(self, roster, fuse_seconds, now=None) -> list:
        """Light the fuse and hand the bomb to seat 0."""
        if self.phase is not Phase.SETUP:
            raise InvalidStateTransition(f"Cannot start a round in phase {self.phase.value}")
        roster = list(roster)
        if not roster:
            raise EmptyRoster()
        # written as "not > 0" so NaN is refused too
        if fuse_seconds is None or not fuse_seconds > 0:
            raise InvalidFuse(fuse_seconds)
        for p in roster:
            if not p.alive:
                raise ParticipantEliminated(p.id)
        if self.thinking_seconds is None:
            self.thinking_seconds = default_thinking_seconds(fuse_seconds)
        elif self.thinking_seconds < 0:
            raise InvalidSetting(f"Thinking delay must not be negative, got {self.thinking_seconds}")

        if now is not None:
            self.clock.set(now)
        self._emitted = []
        self._roster = roster
        self._index = 0
        self.fuse_seconds = float(fuse_seconds)
        self.phase = Phase.ACTIVE
        self.fuse.start()
        self.thinking.start()
        logger.info("Round started with %d participants, fuse=%.2fs thinking=%.2fs",
                    len(roster), self.fuse_seconds, self.thinking_seconds)
        self._emit(RoundStarted(tuple(p.id for p in roster)))
        if not self._check_finished():
            self._begin_turn()
        return self._drain()

    def abort(self) -> None:
        """End the round from outside (quit button, window closed)."""
        if self.phase is Phase.FINISHED:
            return
        logger.info("Round aborted with %d participants left", len(self._roster))
        self.phase = Phase.FINISHED
        self._pending = None

    def submit(self, response) -> bool:
        """Hand in the human's response; it is checked on the next tick."""
        current = self.current
        if current is None or current.has_automated_decision:
            logger.debug("Ignoring response %r, no human holds the bomb", response)
            return False
        self._pending = response
        return True

    # ------------------------------------------------------------------
    # tick
    # ------------------------------------------------------------------

    def tick(self, now=None) -> list:
        """Advance the round to ``now`` and return the events this produced."""
        if self.phase is not Phase.ACTIVE:
            return []
        if now is not None:
            self.clock.set(now)
        self._emitted = []
        current = self._roster[self._index]

        if self.fuse.expired(self.fuse_seconds):
            current.reduce_health()
            logger.debug("Fuse lapsed on %s, %d health left", current.name, current.health)
            self._emit(DeadlinePenalty(current.id, current.health))
            self._pass_bomb(current)
        elif current.has_automated_decision:
            delay = current.policy.thinking_delay(self.thinking_seconds)
            if self.thinking.expired(delay):
                self._resolve(current, current.decide(self.challenge))
        elif self._pending is not None:
            response, self._pending = self._pending, None
            self._resolve(current, response)
        return self._drain()

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _resolve(self, current, response):
        outcome = current.answer(self.challenge, response)
        correct = outcome is Outcome.CORRECT
        logger.debug("%s answered %r to %r: %s", current.name, response,
                     self.challenge.prompt, "correct" if correct else "wrong")
        self._emit(AnswerResult(current.id, correct))
        if correct:
            self.fuse.reset()
            self._index = (self._index + 1) % len(self._roster)
            self._begin_turn()
        else:
            self._pass_bomb(current)

    def _pass_bomb(self, current):
        self.fuse.reset()
        if current.alive:
            self._index = (self._index + 1) % len(self._roster)
        else:
            del self._roster[self._index]
            self._index %= max(1, len(self._roster))
            logger.info("%s is eliminated, %d left", current.name, len(self._roster))
            self._emit(Eliminated(current.id))
        if not self._check_finished():
            self._begin_turn()

    def _begin_turn(self):
        self.challenge = self.provider.issue()
        self.thinking.reset()
        self._pending = None
        self._emit(TurnAdvanced(self._roster[self._index].id))

    def _check_finished(self) -> bool:
        if len(self._roster) > 1:
            return False
        self.phase = Phase.FINISHED
        self._pending = None
        if self._roster:
            self.winner = self._roster[0]
            self._index = 0
            logger.info("%s wins!", self.winner.name)
            self._emit(RoundWon(self.winner.id))
        else:
            # unreachable through play: only the bomb holder loses health
            logger.info("Nobody survived, the round is a draw")
            self._emit(RoundWon(None))
        return True

    def _emit(self, event):
        self._emitted.append(event)
        self.bus.publish(event)

    def _drain(self) -> list:
        emitted, self._emitted = self._emitted, []
        return emitted
