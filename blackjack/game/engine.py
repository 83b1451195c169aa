"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, new_deck
from blackjack.dealer import dealer_should_hit
from blackjack.errors import InvalidBetError
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.outcome import Outcome, balance_delta, resolve_outcome
from blackjack.game.state import GameState
from blackjack.hand import BLACKJACK, Hand

logger = logging.getLogger(__name__)

DEFAULT_STARTING_BALANCE = 1000


def validate_bet(amount: object, balance: int) -> int:
    """
    Check a wager against the current balance.

    Returns:
        The accepted amount

    Raises:
        InvalidBetError: if the amount is not a whole number in 1..balance
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidBetError(amount, balance, "Bet must be a whole number")
    if amount <= 0:
        raise InvalidBetError(amount, balance, "Bet must be positive")
    if amount > balance:
        raise InvalidBetError(
            amount, balance, f"Bet of {amount} exceeds balance of {balance}"
        )
    return amount


@dataclass(frozen=True)
class RoundResult:
    """Summary of a resolved round."""

    bet: int
    player_final: int
    dealer_final: int
    outcome: Outcome
    delta: int
    balance: int

    @property
    def dealer_played(self) -> bool:
        """The dealer only draws when the player did not bust."""
        return self.outcome is not Outcome.BUST


class BlackjackGame:
    """
    Single-player blackjack engine using a state machine.

    Owns the balance across rounds; every round deals from a fresh, freshly
    shuffled 52-card deck. The engine is UI-agnostic: communication happens
    through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "place_bet", "source": "waiting_for_bet", "dest": "dealing"},
        {"trigger": "deal_cards", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "round_complete"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "round_complete"},
        {"trigger": "new_round", "source": "round_complete", "dest": "waiting_for_bet"},
        {
            "trigger": "end_game",
            "source": ["waiting_for_bet", "round_complete"],
            "dest": "game_over",
        },
    ]

    def __init__(
        self,
        starting_balance: int = DEFAULT_STARTING_BALANCE,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            starting_balance: Chips the player starts with
            rng: Random number generator for reproducible shuffles
        """
        if starting_balance <= 0:
            raise ValueError("Starting balance must be positive")

        self._rng = rng or Random()
        self._balance = starting_balance
        self._bet = 0
        self._deck = new_deck(self._rng)
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.last_result: RoundResult | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def current_bet(self) -> int:
        return self._bet

    @property
    def cards_remaining(self) -> int:
        """Cards left in this round's deck."""
        return len(self._deck)

    @property
    def dealer_hole_hidden(self) -> bool:
        """The dealer's first card stays face down until the dealer turn."""
        return self.state in (GameState.DEALING, GameState.PLAYER_TURN)

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def bet(self, amount: int) -> bool:
        """
        Place a bet and deal a new round.

        Args:
            amount: Bet amount, 1..balance

        Returns:
            True if the bet was accepted and the cards dealt
        """
        if self.state != GameState.WAITING_FOR_BET:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot bet in current state",
                state=self.state.name,
            )
            return False

        try:
            self._bet = validate_bet(amount, self._balance)
        except InvalidBetError as exc:
            logger.info("Rejected bet %r: %s", amount, exc.reason)
            self.events.emit_new(
                EventType.INVALID_BET,
                amount=amount,
                balance=self._balance,
                message=exc.reason,
            )
            return False

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.last_result = None

        self.events.emit_new(EventType.BET_PLACED, amount=self._bet)
        self.place_bet()  # Trigger state transition

        self._deal_initial_cards()
        return True

    def _deal_initial_cards(self) -> None:
        """Shuffle a fresh deck and deal two cards each."""
        self._deck = new_deck(self._rng)
        self._deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self._deck))

        # Deal: player, player, dealer (face down), dealer
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)
        self._deal_card_to_hand(self.dealer_hand)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            bet=self._bet,
            player_value=self.player_hand.value,
        )
        self.deal_cards()  # Move to player turn

        # 21 or more ends the player's turn before any decision
        self._check_player_total()

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self._deck.draw()
        hand.add_card(card)
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_value=None if is_dealer and self.dealer_hole_hidden else hand.value,
        )
        return card

    def _check_player_total(self) -> None:
        """End the player's turn on a bust or on 21."""
        value = self.player_hand.value
        if value > BLACKJACK:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=value)
            self.player_busts()
            self._resolve_round()
        elif self.player_hand.is_twenty_one:
            self.events.emit_new(
                EventType.PLAYER_TWENTY_ONE,
                natural=self.player_hand.is_blackjack,
            )
            self.player_done()
            self._play_dealer()

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return (
            self.state == GameState.PLAYER_TURN
            and self.player_hand.value < BLACKJACK
        )

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if not self.can_hit:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot hit now",
                state=self.state.name,
            )
            return False

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)
        self._check_player_total()
        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if not self.can_stand:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot stand now",
                state=self.state.name,
            )
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_done()
        self._play_dealer()
        return True

    def _play_dealer(self) -> None:
        """Dealer reveals and draws until the house rule says stop."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[0]),
            hand_value=self.dealer_hand.value,
        )

        while dealer_should_hit(self.dealer_hand):
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self.dealer_plays()
        self._resolve_round()

    def _resolve_round(self) -> None:
        """Settle the bet against the balance."""
        player_final = self.player_hand.value
        dealer_final = self.dealer_hand.value
        outcome = resolve_outcome(player_final, dealer_final)
        delta = balance_delta(outcome, self._bet)

        if outcome is Outcome.WIN:
            self.events.emit_new(EventType.PLAYER_WINS, amount=delta)
        elif outcome is Outcome.PUSH:
            self.events.emit_new(EventType.PUSH)
        else:
            self.events.emit_new(
                EventType.PLAYER_LOSES, amount=-delta, outcome=outcome.value
            )

        self._balance += delta
        self.last_result = RoundResult(
            bet=self._bet,
            player_final=player_final,
            dealer_final=dealer_final,
            outcome=outcome,
            delta=delta,
            balance=self._balance,
        )
        logger.debug("Round resolved: %s", self.last_result)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.value,
            result=delta,
            balance=self._balance,
        )

        if self._balance <= 0:
            self.events.emit_new(EventType.GAME_ENDED, reason="bankrupt", balance=self._balance)
            self.end_game()

    def start_new_round(self) -> bool:
        """Return to betting after a resolved round."""
        if self.state != GameState.ROUND_COMPLETE:
            return False
        self._bet = 0
        self.new_round()
        return True

    def quit(self) -> bool:
        """End the session between rounds."""
        if self.state not in (GameState.WAITING_FOR_BET, GameState.ROUND_COMPLETE):
            return False
        self.events.emit_new(EventType.GAME_ENDED, reason="quit", balance=self._balance)
        self.end_game()
        return True
