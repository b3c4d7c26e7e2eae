import random

from config import DIFFICULTY
from errors import InvalidSetting

# Bot brain.  A bot "knows" the answer with probability ``accuracy`` and
# otherwise blurts out a random candidate.  How long it deliberates is the
# scheduler's business; the policy only scales that delay.


class BotPolicy:
    def __init__(self, difficulty, accuracy, think_factor=1.0, rng=None):
        if not 0.0 <= accuracy <= 1.0:
            raise InvalidSetting(f"Accuracy must lie in [0, 1], got {accuracy}")
        if think_factor < 0:
            raise InvalidSetting(f"Thinking factor must not be negative, got {think_factor}")
        self.difficulty = difficulty
        self.accuracy = accuracy
        self.think_factor = think_factor
        self.rng = rng or random.Random()

    def __repr__(self):
        return (f"BotPolicy(difficulty={self.difficulty}, accuracy={self.accuracy}, "
                f"think_factor={self.think_factor})")

    @classmethod
    def for_difficulty(cls, level, rng=None):
        """Policy tuned from the ``DIFFICULTY`` table."""
        try:
            data = DIFFICULTY[level]
        except KeyError:
            raise InvalidSetting(
                f"Unknown difficulty {level!r}, expected one of {sorted(DIFFICULTY)}"
            ) from None
        return cls(level, data["accuracy"], data.get("think", 1.0), rng)

    def thinking_delay(self, base):
        return base * self.think_factor

    def decide(self, challenge, provider):
        if self.rng.random() < self.accuracy:
            return provider.solve(challenge)
        return provider.guess(challenge, self.rng)
