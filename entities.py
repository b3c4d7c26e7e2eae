import dataclasses
import enum

from config import HEALTH_UNIT
from errors import InvalidSetting, ParticipantEliminated, PreconditionViolation


class Kind(enum.Enum):
    HUMAN = "human"
    AUTOMATED = "automated"


class Outcome(enum.Enum):
    CORRECT = enum.auto()
    INCORRECT = enum.auto()


@dataclasses.dataclass(frozen=True)
class ParticipantView:
    """Read-only copy of a participant handed to the UI."""
    id: int
    name: str
    kind: Kind
    health: int
    max_health: int

    @property
    def alive(self) -> bool:
        return self.health > 0


class Participant:
    """Player or bot holding the bomb in turn.

    A bot is simply a participant with a decision ``policy`` attached; the
    scheduler asks ``has_automated_decision`` instead of checking types.
    """

    def __init__(self, pid, name, health, provider, policy=None):
        if health <= 0:
            raise InvalidSetting(f"Health must be positive, got {health}")
        self.id = pid
        self.name = name
        self.health = health
        self.max_health = health
        self.provider = provider
        self.policy = policy

    def __repr__(self):
        return f"Participant({self.id}, {self.name!r}, health={self.health})"

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def has_automated_decision(self) -> bool:
        return self.policy is not None

    @property
    def kind(self) -> Kind:
        return Kind.AUTOMATED if self.has_automated_decision else Kind.HUMAN

    def reduce_health(self) -> None:
        self.health = max(0, self.health - HEALTH_UNIT)

    def decide(self, challenge):
        """Come up with a response to ``challenge`` (bots only)."""
        self._require_alive()
        if not self.has_automated_decision:
            raise PreconditionViolation(f"{self.name} has no automated decision")
        return self.policy.decide(challenge, self.provider)

    def answer(self, challenge, response) -> Outcome:
        """Check ``response``; a wrong one costs a health point."""
        self._require_alive()
        if self.provider.validate(challenge, response):
            return Outcome.CORRECT
        self.reduce_health()
        return Outcome.INCORRECT

    def view(self) -> ParticipantView:
        return ParticipantView(self.id, self.name, self.kind, self.health, self.max_health)

    def _require_alive(self):
        if not self.alive:
            raise ParticipantEliminated(self.id)
