"""Round outcomes and their effect on the balance."""

from enum import Enum

from blackjack.hand import BLACKJACK


class Outcome(Enum):
    """How a round ended for the player."""

    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
    BUST = "bust"

    def __str__(self) -> str:
        return self.value


def resolve_outcome(player_final: int, dealer_final: int) -> Outcome:
    """
    Compare final totals.

    A player total over 21 is a bust regardless of the dealer's hand,
    since the dealer never plays in that case. Otherwise a dealer bust
    wins for the player, then the higher total wins, then equal totals push.
    """
    if player_final > BLACKJACK:
        return Outcome.BUST
    if dealer_final > BLACKJACK:
        return Outcome.WIN
    if player_final > dealer_final:
        return Outcome.WIN
    if dealer_final > player_final:
        return Outcome.LOSS
    return Outcome.PUSH


def balance_delta(outcome: Outcome, bet: int) -> int:
    """Return the change in balance for an outcome at even money."""
    if outcome is Outcome.WIN:
        return bet
    if outcome is Outcome.PUSH:
        return 0
    return -bet
