import os
import random
import sys

import pytest

# Ensure the project root (holding the game modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from ai import BotPolicy
from challenge import Challenge, ChallengeProvider
from countdown import ManualClock
from entities import Participant
from events import EventBus
from scheduler import TurnScheduler


class ScriptedChallenges(ChallengeProvider):
    """Numbered prompts whose only right answer is "right"."""

    def __init__(self):
        self.issued = 0

    def issue(self):
        self.issued += 1
        return Challenge(f"q{self.issued}", "right")

    def validate(self, challenge, response):
        return response == challenge.solution

    def solve(self, challenge):
        return challenge.solution

    def guess(self, challenge, rng):
        return "wrong"


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def bus():
    return EventBus()


@pytest.fixture()
def provider():
    return ScriptedChallenges()


@pytest.fixture()
def perfect_bot(provider):
    def _make(pid, health=3, think_factor=1.0):
        policy = BotPolicy(3, 1.0, think_factor, random.Random(pid))
        return Participant(pid, f"Bot {pid}", health, provider, policy)
    return _make


@pytest.fixture()
def hopeless_bot(provider):
    def _make(pid, health=3):
        policy = BotPolicy(1, 0.0, 1.0, random.Random(pid))
        return Participant(pid, f"Bot {pid}", health, provider, policy)
    return _make


@pytest.fixture()
def human(provider):
    def _make(pid=0, health=3):
        return Participant(pid, "Player", health, provider)
    return _make


@pytest.fixture()
def make_scheduler(provider, bus):
    def _make(thinking_seconds=1.0):
        return TurnScheduler(provider, bus=bus, thinking_seconds=thinking_seconds)
    return _make
