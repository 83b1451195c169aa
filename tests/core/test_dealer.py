"""Tests for the dealer drawing rule."""

import pytest

from blackjack.cards import Card
from blackjack.dealer import DEALER_STAND_THRESHOLD, dealer_should_hit

from conftest import make_hand


class TestDealerPolicy:
    """Tests for dealer_should_hit."""

    @pytest.mark.parametrize(
        "codes",
        [("10S", "6H"), ("2S", "3H"), ("AS", "5H"), ("AS", "AH")],
    )
    def test_hits_below_17(self, codes):
        """Test that the dealer draws on 16 or less."""
        assert dealer_should_hit(make_hand(*codes))

    @pytest.mark.parametrize(
        "codes",
        [("10S", "7H"), ("AS", "6H"), ("KS", "QH"), ("10S", "6H", "KC")],
    )
    def test_stands_on_17_or_more_and_on_bust(self, codes):
        """Test that hard 17, soft 17, 20 and a bust all stop the dealer."""
        assert not dealer_should_hit(make_hand(*codes))

    def test_threshold(self):
        """Test the house threshold."""
        assert DEALER_STAND_THRESHOLD == 17

    def test_sixteen_draws_exactly_one_card_before_rechecking(self):
        """Test that 16 takes one card, then the rule is applied again."""
        hand = make_hand("10S", "6H")
        supply = iter(Card.from_string(code) for code in ("5C", "9D"))

        draws = 0
        while dealer_should_hit(hand):
            hand.add_card(next(supply))
            draws += 1

        assert draws == 1
        assert hand.value == 21

    def test_drawing_can_end_in_a_bust(self):
        """Test that the loop stops on a bust like on any total of 17+."""
        hand = make_hand("10S", "6H")
        hand.add_card(Card.from_string("9D"))
        assert hand.value == 25
        assert not dealer_should_hit(hand)
