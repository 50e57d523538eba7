"""Tests for the Hand class."""

from cardgames.cards import Card, Rank, Suit
from cardgames.hand import Hand


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.is_empty()
        assert empty_hand.first is None
        assert empty_hand.show() == ""

    def test_add_card_keeps_order(self, empty_hand):
        """Test cards are kept in the order received."""
        king = Card(Rank.KING, Suit.SPADES)
        two = Card(Rank.TWO, Suit.HEARTS)
        empty_hand.add_card(king)
        empty_hand.add_card(two)
        assert list(empty_hand) == [king, two]
        assert empty_hand.first == king
        assert empty_hand.num_cards == 2

    def test_clear(self, empty_hand):
        """Test clearing the hand."""
        empty_hand.add_card(Card(Rank.ACE, Suit.SPADES))
        empty_hand.clear()
        assert empty_hand.is_empty()

    def test_show(self, empty_hand):
        """Test one card per line rendering."""
        empty_hand.add_card(Card(Rank.ACE, Suit.SPADES))
        empty_hand.add_card(Card(Rank.TEN, Suit.HEARTS))
        assert empty_hand.show() == "Ace of Spades\n10 of Hearts\n"

    def test_str(self):
        """Test summary string includes the owner."""
        hand = Hand("Dealer")
        assert str(hand) == "Dealer: (empty)"
        hand.add_card(Card(Rank.QUEEN, Suit.CLUBS))
        assert str(hand) == "Dealer: Queen of Clubs"

    def test_hands_do_not_share_cards(self):
        """Test each participant owns its own list."""
        player = Hand("Player")
        dealer = Hand("Dealer")
        player.add_card(Card(Rank.TWO, Suit.CLUBS))
        assert dealer.is_empty()
