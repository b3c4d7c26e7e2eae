"""Notifications published by the round core.

The UI (or a replay log) subscribes to an :class:`EventBus`; the core never
depends on anybody acting on an event.  Events are frozen dataclasses so a
listener cannot alter what other listeners see.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RoundStarted:
    participant_ids: tuple


@dataclasses.dataclass(frozen=True)
class TurnAdvanced:
    participant_id: int


@dataclasses.dataclass(frozen=True)
class DeadlinePenalty:
    participant_id: int
    remaining_health: int


@dataclasses.dataclass(frozen=True)
class AnswerResult:
    participant_id: int
    correct: bool


@dataclasses.dataclass(frozen=True)
class Eliminated:
    participant_id: int


@dataclasses.dataclass(frozen=True)
class RoundWon:
    """``participant_id`` is None when nobody survived (a draw)."""
    participant_id: Optional[int]


TERMINAL_EVENTS = (Eliminated, RoundWon)

Listener = Callable[[object], None]


class EventBus:
    """Synchronous fan-out of events plus the log of everything published."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self.history: list = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener`` (matched by identity)."""
        self._listeners = [l for l in self._listeners if l is not listener]

    def publish(self, event) -> None:
        logger.debug("event %s", event)
        self.history.append(event)
        for listener in list(self._listeners):
            listener(event)

    def of_type(self, *types) -> list:
        """Logged events that are instances of ``types``."""
        return [e for e in self.history if isinstance(e, types)]
