"""House drawing rule for the dealer."""

from typing import Iterable

from blackjack.cards import Card
from blackjack.hand import score

# Dealer stands on any 17, soft or hard
DEALER_STAND_THRESHOLD = 17


def dealer_should_hit(cards: Iterable[Card]) -> bool:
    """Return True while the dealer's total is below 17.

    A bust also stops the dealer since it fails the same check.
    """
    return score(cards) < DEALER_STAND_THRESHOLD
