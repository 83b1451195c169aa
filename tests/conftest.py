"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import BlackjackGame


class StackedShuffle:
    """
    Stand-in random source whose shuffle puts chosen cards on top of the deck.

    Codes are given in draw order. Each round the engine deals player,
    player, dealer (hole card), dealer, then player hits, then dealer draws.
    """

    def __init__(self, *codes: str) -> None:
        self.top = [Card.from_string(code) for code in codes]
        self.shuffles = 0

    def shuffle(self, cards: list) -> None:
        self.shuffles += 1
        rest = [card for card in cards if card not in self.top]
        # Deck draws from the end of the list
        cards[:] = rest + self.top[::-1]


def make_hand(*codes: str) -> Hand:
    """Build a hand from short codes like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new game instance with the default balance."""
    return BlackjackGame(starting_balance=1000, rng=rng)


@pytest.fixture
def stacked_game():
    """Factory for a game whose deal order is fixed."""

    def _make(*codes: str, balance: int = 1000) -> BlackjackGame:
        return BlackjackGame(starting_balance=balance, rng=StackedShuffle(*codes))

    return _make


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand
