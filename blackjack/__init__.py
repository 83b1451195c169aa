"""Blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit, new_deck
from blackjack.dealer import DEALER_STAND_THRESHOLD, dealer_should_hit
from blackjack.errors import (
    BlackjackError,
    DeckExhaustedError,
    InvalidBetError,
    MalformedInputError,
)
from blackjack.hand import Hand, score

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "new_deck",
    "Hand",
    "score",
    "DEALER_STAND_THRESHOLD",
    "dealer_should_hit",
    "BlackjackError",
    "DeckExhaustedError",
    "InvalidBetError",
    "MalformedInputError",
]
