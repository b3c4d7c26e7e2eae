"""Round setup: validated settings and the starting roster.

``new_round`` plays the part ``reset_round`` plays in a shooter: it builds
everything a fresh round needs and hands it back, nothing is started yet.
"""

from __future__ import annotations

import dataclasses
import logging
import random
from typing import Optional

from ai import BotPolicy
from challenge import make_provider
from config import (
    BOT_NAME,
    CHALLENGE_KIND,
    DIFFICULTY,
    DIFFICULTY_LEVEL,
    FUSE_SECONDS,
    HEALTH,
    HUMAN_NAME,
    PARTICIPANTS,
    SEED,
)
from entities import Participant
from errors import InvalidFuse, InvalidSetting
from scheduler import TurnScheduler, default_thinking_seconds

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RoundSettings:
    """What the lobby screen collects before a round starts."""
    participant_count: int = PARTICIPANTS
    health: int = HEALTH
    fuse_seconds: float = FUSE_SECONDS
    difficulty: int = DIFFICULTY_LEVEL
    human: bool = True
    thinking_seconds: Optional[float] = None
    challenge: str = CHALLENGE_KIND
    seed: Optional[int] = SEED

    @property
    def effective_thinking_seconds(self) -> float:
        if self.thinking_seconds is None:
            return default_thinking_seconds(self.fuse_seconds)
        return self.thinking_seconds

    def validate(self) -> None:
        if self.participant_count <= 0:
            raise InvalidSetting(f"Need at least one participant, got {self.participant_count}")
        if self.health <= 0:
            raise InvalidSetting(f"Health must be positive, got {self.health}")
        if not self.fuse_seconds > 0:
            raise InvalidFuse(self.fuse_seconds)
        if self.difficulty not in DIFFICULTY:
            raise InvalidSetting(
                f"Unknown difficulty {self.difficulty!r}, expected one of {sorted(DIFFICULTY)}"
            )
        thinking = self.effective_thinking_seconds
        if not 0 <= thinking < self.fuse_seconds:
            raise InvalidSetting(
                f"Thinking delay {thinking}s must be shorter than the fuse ({self.fuse_seconds}s)"
            )


def build_roster(settings: RoundSettings, provider, rng: random.Random) -> list:
    """Seat the human first, then the bots, in turn order."""
    roster = []
    if settings.human:
        roster.append(Participant(0, HUMAN_NAME, settings.health, provider))
    while len(roster) < settings.participant_count:
        seat = len(roster)
        number = seat if settings.human else seat + 1
        policy = BotPolicy.for_difficulty(settings.difficulty, random.Random(rng.getrandbits(32)))
        roster.append(Participant(seat, BOT_NAME.format(number), settings.health, provider, policy))
    return roster


def new_round(settings: Optional[RoundSettings] = None, bus=None):
    """Return ``(scheduler, roster)`` for a round described by ``settings``.

    All randomness (challenges and bot decisions) is derived from
    ``settings.seed`` so the same seed replays the same round.
    """
    settings = settings or RoundSettings()
    settings.validate()
    rng = random.Random(settings.seed)
    provider = make_provider(settings.challenge, random.Random(rng.getrandbits(32)))
    roster = build_roster(settings, provider, rng)
    scheduler = TurnScheduler(provider, bus=bus, thinking_seconds=settings.effective_thinking_seconds)
    logger.info("New %s round: %d participants (%s), health=%d, difficulty=%s",
                settings.challenge, len(roster),
                "with human" if settings.human else "bots only",
                settings.health, DIFFICULTY[settings.difficulty]["name"])
    return scheduler, roster
