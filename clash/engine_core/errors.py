"""
Engine errors - Precondition violations raised by the engine.

Every error here is a caller contract violation. The engine never
recovers from them: the round is aborted and the input Game is left
untouched. Each class carries a machine-readable error_code so the
non-raising entry point (apply_round) can report it in a RoundResult.
"""


class ClashError(Exception):
    """Base class for engine precondition violations."""
    error_code = "CLASH_ERROR"


class GameNotPlayingError(ClashError):
    """Raised when a round is submitted before the game has started."""
    error_code = "GAME_NOT_PLAYING"


class GameEndedError(ClashError):
    """Raised when a finished game is started or played again."""
    error_code = "GAME_ENDED"


class GameAlreadyStartedError(ClashError):
    """Raised when the roster is changed after setup."""
    error_code = "GAME_ALREADY_STARTED"


class DuplicateParticipantError(ClashError):
    """Raised when two participants share an id."""
    error_code = "DUPLICATE_PARTICIPANT"

    def __init__(self, participant_id: int):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} is already in the game")


class UnknownParticipantError(ClashError):
    """Raised when an action is submitted for an id outside the roster."""
    error_code = "UNKNOWN_PARTICIPANT"

    def __init__(self, participant_id: int):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} is not in the game")


class UnknownTargetError(ClashError):
    """Raised when an action targets an id with no submitted move."""
    error_code = "UNKNOWN_TARGET"

    def __init__(self, actor_id: int, target_id: int):
        self.actor_id = actor_id
        self.target_id = target_id
        super().__init__(
            f"Participant {actor_id} targets {target_id}, who has no move this round"
        )


class InsufficientChargeError(ClashError):
    """Raised when a move costs more charges than the participant holds."""
    error_code = "INSUFFICIENT_CHARGE"

    def __init__(self, participant_id: int, charges: int, cost: int):
        self.participant_id = participant_id
        self.charges = charges
        self.cost = cost
        super().__init__(
            f"Participant {participant_id} has {charges} charge(s), move costs {cost}"
        )


class DuplicateMoveError(ClashError):
    """Raised when one participant submits more than one move in a round."""
    error_code = "DUPLICATE_MOVE"

    def __init__(self, participant_id: int):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} submitted more than one move")
