"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    States of the round engine.

    The allowed moves between them live in BlackjackGame.TRANSITIONS;
    the state machine there is the only place they are enforced.
    """

    WAITING_FOR_BET = auto()
    DEALING = auto()  # fresh deck shuffled, two cards each
    PLAYER_TURN = auto()
    DEALER_TURN = auto()  # dealer draws to 17
    ROUND_COMPLETE = auto()  # outcome applied to the balance
    GAME_OVER = auto()  # broke or quit

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
