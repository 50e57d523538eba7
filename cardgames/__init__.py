"""Card game engines - 100% UI-agnostic."""

from cardgames.cards import Card, Deck, Rank, Suit, standard_cards, suit_cards
from cardgames.hand import Hand

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "standard_cards",
    "suit_cards",
    "Hand",
]
