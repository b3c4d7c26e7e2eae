"""Exceptions raised by the round core.

Everything here signals a setup or integration bug.  A wrong or malformed
answer is never an exception, it is just an incorrect answer.
"""


class BombGameError(Exception):
    """Base class for every error of the game core."""
    pass


# ============ Preconditions ============

class PreconditionViolation(BombGameError):
    """A caller broke the contract of an operation."""
    pass


class EmptyRoster(PreconditionViolation):
    """A round cannot start without participants."""
    def __init__(self):
        super().__init__("Roster must contain at least one participant")


class InvalidFuse(PreconditionViolation):
    """The fuse must burn for a positive number of seconds."""
    def __init__(self, fuse_seconds):
        self.fuse_seconds = fuse_seconds
        super().__init__(f"Fuse must be positive, got {fuse_seconds!r}")


class InvalidSetting(PreconditionViolation):
    """A lobby setting is out of range."""
    pass


class ParticipantEliminated(PreconditionViolation):
    """An eliminated participant was asked to play."""
    def __init__(self, participant_id):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} is already eliminated")


# ============ State transitions ============

class InvalidStateTransition(BombGameError):
    """The round phase does not allow the requested operation."""
    pass
