"""Keyboard input: parse typed answers and re-prompt on anything malformed."""

import logging
import sys
from typing import Callable, TextIO, TypeVar

from blackjack.errors import MalformedInputError
from blackjack.game.actions import Action
from blackjack.game.session import InputProvider
from blackjack.hand import Hand

logger = logging.getLogger(__name__)

T = TypeVar("T")

BET_PROMPT = "\nBALANCE: ${balance} | Enter bet: "
ACTION_PROMPT = "ACTION: [h] Hit | [s] Stand: "
AGAIN_PROMPT = "\nPlay another round? (y/n): "

_ACTIONS = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STAND,
    "stand": Action.STAND,
}

_ANSWERS = {
    "y": True,
    "yes": True,
    "n": False,
    "no": False,
}


def parse_bet(raw: str) -> int:
    """Parse a typed wager. Range checks belong to the engine."""
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        raise MalformedInputError(raw, f"'{text}' is not a whole number.") from None


def parse_action(raw: str) -> Action:
    text = raw.strip().lower()
    if text not in _ACTIONS:
        raise MalformedInputError(raw, "Please type 'h' to hit or 's' to stand.")
    return _ACTIONS[text]


def parse_yes_no(raw: str) -> bool:
    text = raw.strip().lower()
    if text not in _ANSWERS:
        raise MalformedInputError(raw, "Please answer 'y' or 'n'.")
    return _ANSWERS[text]


class TerminalInput(InputProvider):
    """
    Blocking line-based input.

    Malformed lines are discarded and the question is asked again. End of
    input (EOFError) propagates so the caller can wind the session down.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._stream = stream or sys.stdout

    def _ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            raw = self._input(prompt)
            try:
                return parse(raw)
            except MalformedInputError as exc:
                logger.debug("Discarding malformed input %r", exc.raw)
                print(exc, file=self._stream)

    def next_bet(self, balance: int) -> int:
        return self._ask(BET_PROMPT.format(balance=balance), parse_bet)

    def next_action(self, player_hand: Hand, dealer_hand: Hand) -> Action:
        return self._ask(ACTION_PROMPT, parse_action)

    def play_again(self) -> bool:
        return self._ask(AGAIN_PROMPT, parse_yes_no)
