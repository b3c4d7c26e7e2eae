"""Challenges the bomb holder has to answer before the fuse runs out.

A provider issues a fresh :class:`Challenge` for every turn attempt and
validates candidate responses.  Bots additionally ask it for the correct
response (``solve``) or for a random candidate (``guess``).
"""

from __future__ import annotations

import dataclasses
import operator
import random
import re

from config import FRAGMENT_LENGTH, GUESS_SPREAD, OPERAND_MAX, OPERAND_MIN, WORDS
from errors import InvalidSetting


@dataclasses.dataclass(frozen=True)
class Challenge:
    """What the bomb shows: a prompt plus what it takes to defuse it."""
    prompt: str
    solution: object


class ChallengeProvider:
    """Interface every challenge provider implements."""

    def issue(self) -> Challenge:
        raise NotImplementedError

    def validate(self, challenge: Challenge, response) -> bool:
        raise NotImplementedError

    def solve(self, challenge: Challenge) -> str:
        raise NotImplementedError

    def guess(self, challenge: Challenge, rng: random.Random) -> str:
        raise NotImplementedError


class ArithmeticChallenges(ChallengeProvider):
    """Small ``a <op> b`` problems, answered with an integer."""

    OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul}

    def __init__(self, rng=None, low=OPERAND_MIN, high=OPERAND_MAX):
        if low > high:
            raise InvalidSetting(f"Operand range is empty: [{low}, {high}]")
        self.rng = rng or random.Random()
        self.low = low
        self.high = high

    def issue(self) -> Challenge:
        a = self.rng.randint(self.low, self.high)
        b = self.rng.randint(self.low, self.high)
        symbol = self.rng.choice(sorted(self.OPERATORS))
        return Challenge(f"{a} {symbol} {b}", self.OPERATORS[symbol](a, b))

    def validate(self, challenge: Challenge, response) -> bool:
        if response is None or isinstance(response, bool):
            return False
        text = str(response).strip()
        # plain ASCII digits only; int() would also take "1_2" or non-latin numerals
        if not re.fullmatch(r"[+-]?[0-9]+", text):
            return False
        return int(text) == challenge.solution

    def solve(self, challenge: Challenge) -> str:
        return str(challenge.solution)

    def guess(self, challenge: Challenge, rng: random.Random) -> str:
        spread = max(GUESS_SPREAD, abs(challenge.solution))
        return str(rng.randint(challenge.solution - spread, challenge.solution + spread))


class WordChallenges(ChallengeProvider):
    """Name a word containing the letters on the bomb."""

    def __init__(self, rng=None, words=WORDS, fragment_length=FRAGMENT_LENGTH):
        if fragment_length < 1:
            raise InvalidSetting(f"Fragment length must be positive, got {fragment_length}")
        self.words = tuple(sorted({w.lower() for w in words if len(w) >= fragment_length}))
        if not self.words:
            raise InvalidSetting(f"No word is at least {fragment_length} letters long")
        self.rng = rng or random.Random()
        self.fragment_length = fragment_length

    def issue(self) -> Challenge:
        word = self.rng.choice(self.words)
        start = self.rng.randint(0, len(word) - self.fragment_length)
        fragment = word[start:start + self.fragment_length]
        return Challenge(fragment.upper(), fragment)

    def validate(self, challenge: Challenge, response) -> bool:
        if not isinstance(response, str):
            return False
        word = response.strip().lower()
        return word in self.words and challenge.solution in word

    def solve(self, challenge: Challenge) -> str:
        return next(w for w in self.words if challenge.solution in w)

    def guess(self, challenge: Challenge, rng: random.Random) -> str:
        return rng.choice(self.words)


PROVIDERS = {
    "arithmetic": ArithmeticChallenges,
    "words": WordChallenges,
}


def make_provider(kind: str, rng=None) -> ChallengeProvider:
    """Build the provider registered under ``kind``."""
    try:
        cls = PROVIDERS[kind]
    except KeyError:
        raise InvalidSetting(f"Unknown challenge kind {kind!r}") from None
    return cls(rng=rng)
