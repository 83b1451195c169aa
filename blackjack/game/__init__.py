"""Round engine, state machine and session loop."""

from blackjack.game.actions import Action
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.outcome import Outcome, balance_delta, resolve_outcome
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame, RoundResult, validate_bet
from blackjack.game.session import Display, InputProvider, ScriptedInput, Session

__all__ = [
    "Action",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "Outcome",
    "balance_delta",
    "resolve_outcome",
    "GameState",
    "BlackjackGame",
    "RoundResult",
    "validate_bet",
    "Display",
    "InputProvider",
    "ScriptedInput",
    "Session",
]
