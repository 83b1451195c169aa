"""Tests for hand scoring."""

from hypothesis import given

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand, score

from conftest import hand_strategy, make_hand


def cards(*codes):
    return [Card.from_string(code) for code in codes]


class TestScore:
    """Tests for the score function."""

    def test_empty(self):
        """Test that no cards score zero."""
        assert score([]) == 0

    def test_no_aces(self):
        """Test plain sums."""
        assert score(cards("KS", "7H")) == 17
        assert score(cards("5S", "6H", "9C")) == 20

    def test_ace_stays_eleven(self):
        """Test a soft total that needs no correction."""
        assert score(cards("AS", "6H")) == 17
        assert score(cards("AS", "9H")) == 20

    def test_ace_drops_to_one(self):
        """Test 11+9+5=25 becomes 15."""
        assert score(cards("AS", "9H", "5C")) == 15

    def test_two_aces_and_nine(self):
        """Test 11+11+9=31 downgrades exactly one ace to reach 21."""
        assert score(cards("AS", "AH", "9C")) == 21

    def test_four_aces(self):
        """Test 4 aces score 14 (11 + 1 + 1 + 1)."""
        assert score(cards("AS", "AH", "AC", "AD")) == 14

    def test_bust_after_all_aces_downgraded(self):
        """Test that the total can still exceed 21."""
        assert score(cards("AS", "KH", "QC", "5D")) == 26

    def test_bust_without_aces(self):
        """Test a plain bust."""
        assert score(cards("10S", "6H", "KC")) == 26

    def test_accepts_any_iterable(self):
        """Test scoring a generator and a Hand."""
        assert score(c for c in cards("KS", "AH")) == 21
        assert score(make_hand("KS", "AH")) == 21

    @given(hand_strategy())
    def test_ace_correction_bounds(self, hand):
        """Test the best total lies between the hard and all-eleven totals."""
        hard = sum(1 if card.is_ace else card.value for card in hand)
        total = score(hand.cards)
        assert hard <= total <= hard + 10
        assert (total - hard) % 10 == 0
        if total > 21:
            assert total == hard


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_twenty_one
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_hard_hand_value(self, hard_16_hand):
        """Test hard hand value calculation."""
        assert hard_16_hand.value == 16

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17

    def test_blackjack(self):
        """Test two-card 21 detection."""
        hand = make_hand("AS", "KH")
        assert hand.is_blackjack
        assert hand.is_twenty_one

    def test_three_card_21_is_not_blackjack(self):
        """Test that 21 with 3+ cards is not a natural."""
        hand = make_hand("7S", "7H", "7C")
        assert hand.is_twenty_one
        assert not hand.is_blackjack

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = make_hand("AS")
        assert hand.value == 11

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert hand.value == 14

    def test_hand_only_grows(self):
        """Test that cards keep their order as they are added."""
        hand = make_hand("2S", "3H")
        hand.add_card(Card(Rank.FOUR, Suit.CLUBS))
        assert [str(card) for card in hand] == ["2♠", "3♥", "4♣"]
