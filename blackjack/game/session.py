"""Session loop: repeat rounds while the player has chips and wants to play."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from blackjack.game.actions import Action
from blackjack.game.engine import BlackjackGame, RoundResult
from blackjack.game.events import EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.hand import Hand

logger = logging.getLogger(__name__)


class InputProvider(ABC):
    """Source of player decisions."""

    @abstractmethod
    def next_bet(self, balance: int) -> int:
        """Return the wager for the next round."""

    @abstractmethod
    def next_action(self, player_hand: Hand, dealer_hand: Hand) -> Action:
        """Return HIT or STAND for the current turn."""

    @abstractmethod
    def play_again(self) -> bool:
        """Return True to deal another round."""


class Display(ABC):
    """Sink for everything the player sees."""

    @abstractmethod
    def show_banner(self) -> None: ...

    @abstractmethod
    def show_hand(self, hand: Hand, owner: str, hide_first: bool = False) -> None: ...

    @abstractmethod
    def show_total(self, total: int) -> None: ...

    @abstractmethod
    def show_message(self, message: str) -> None: ...

    @abstractmethod
    def show_result(self, result: RoundResult) -> None: ...

    @abstractmethod
    def show_final_balance(self, balance: int) -> None: ...


class ScriptedInput(InputProvider):
    """
    Replays canned decisions, for tests and demos.

    Runs out loudly: asking for more answers than were scripted raises
    LookupError instead of inventing one.
    """

    def __init__(
        self,
        bets: Iterable[int] = (),
        actions: Iterable[Action] = (),
        answers: Iterable[bool] = (),
    ) -> None:
        self._bets = list(bets)
        self._actions = list(actions)
        self._answers = list(answers)
        self.bet_prompts = 0
        self.action_prompts = 0
        self.again_prompts = 0

    def next_bet(self, balance: int) -> int:
        self.bet_prompts += 1
        if not self._bets:
            raise LookupError("No scripted bets left")
        return self._bets.pop(0)

    def next_action(self, player_hand: Hand, dealer_hand: Hand) -> Action:
        self.action_prompts += 1
        if not self._actions:
            raise LookupError("No scripted actions left")
        return self._actions.pop(0)

    def play_again(self) -> bool:
        self.again_prompts += 1
        if not self._answers:
            raise LookupError("No scripted answers left")
        return self._answers.pop(0)


class Session:
    """
    Drives a BlackjackGame with an input provider and a display.

    The session never touches the balance itself; it only forwards
    decisions to the engine and shows what the engine reports.
    """

    def __init__(
        self,
        game: BlackjackGame,
        inputs: InputProvider,
        display: Display,
    ) -> None:
        self.game = game
        self.inputs = inputs
        self.display = display
        self.rounds_played = 0
        self.game.subscribe(self._on_invalid_bet, EventType.INVALID_BET)

    def _on_invalid_bet(self, event: GameEvent) -> None:
        self.display.show_message(
            "Invalid bet! Input must be between 1 and current balance."
        )

    def run(self) -> int:
        """Play rounds until the player quits or goes broke; return the final balance."""
        self.display.show_banner()

        while not self.game.is_over:
            result = self.play_round()
            self.rounds_played += 1

            if self.game.is_over:
                self.display.show_message("GAME OVER! Zero balance.")
                break

            if self.inputs.play_again():
                self.game.start_new_round()
            else:
                self.game.quit()

        logger.info(
            "Session finished after %d rounds with balance %d",
            self.rounds_played,
            self.game.balance,
        )
        self.display.show_final_balance(self.game.balance)
        return self.game.balance

    def play_round(self) -> RoundResult:
        """Take a bet, play it out, and report the result."""
        if self.game.state != GameState.WAITING_FOR_BET:
            raise RuntimeError(f"Cannot start a round in state {self.game.state}")

        while self.game.state == GameState.WAITING_FOR_BET:
            # A rejected bet leaves the state unchanged; INVALID_BET shows why
            self.game.bet(self.inputs.next_bet(self.game.balance))

        stood = False
        while self.game.state == GameState.PLAYER_TURN:
            self._show_table()
            action = self.inputs.next_action(self.game.player_hand, self.game.dealer_hand)
            if action is Action.HIT:
                self.game.hit()
            else:
                stood = self.game.stand()

        if not stood:
            # Turn ended on 21 or a bust; show the hand that ended it
            self._show_table()

        result = self.game.last_result
        if result is None:
            raise RuntimeError(f"Round did not resolve (state: {self.game.state})")

        if result.dealer_played:
            self.display.show_message("--- DEALER'S TURN ---")
            self.display.show_hand(self.game.dealer_hand, "FINAL DEALER HAND")

        self.display.show_result(result)
        return result

    def _show_table(self) -> None:
        # Dealt cards only; on 21 the dealer has already drawn
        dealt = Hand(list(self.game.dealer_hand.cards[:2]))
        self.display.show_hand(dealt, "DEALER HAND", hide_first=True)
        self.display.show_hand(self.game.player_hand, "PLAYER HAND")
        self.display.show_total(self.game.player_hand.value)
