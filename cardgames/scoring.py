"""Scoring rules for each game variant.

All functions are pure and accept any iterable of cards, so they work on a
``Hand`` as well as a plain list.
"""

from enum import Enum, auto
from typing import Iterable

from cardgames.cards import Card, Rank

BLACKJACK = 21


class Comparison(Enum):
    """Result of comparing two cards or hands."""

    FIRST = auto()
    SECOND = auto()
    TIE = auto()


def blackjack_card_value(card: Card) -> int:
    """Return the blackjack point value (Ace = 11, face cards = 10)."""
    if card.is_ace:
        return 11
    if card.rank.is_face:
        return 10
    return card.rank.value


def blackjack_score(cards: Iterable[Card]) -> int:
    """
    Calculate the best blackjack total.

    Aces start at 11 and drop to 1, one at a time, while the total is over 21.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += blackjack_card_value(card)

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_bust(cards: Iterable[Card]) -> bool:
    """Check if a blackjack hand is over 21."""
    return blackjack_score(cards) > BLACKJACK


def compare_totals(first: int, second: int) -> Comparison:
    """Compare two numeric totals, reporting ties."""
    if first > second:
        return Comparison.FIRST
    if second > first:
        return Comparison.SECOND
    return Comparison.TIE


def high_card_value(card: Card) -> int:
    """Return the High Card ranking (Ace 14, King 13, Queen 12, Jack 11)."""
    return card.rank.value


def compare_high_card(first: Card, second: Card) -> Comparison:
    """Compare two cards by High Card ranking; suits never break ties."""
    return compare_totals(high_card_value(first), high_card_value(second))


def guess_matches(guess: str, card: Card) -> bool:
    """Check a free-text rank guess against a card, ignoring case."""
    return guess.casefold() == card.rank.label.casefold()


def is_slappable(card: Card | None) -> bool:
    """Check if a revealed card may be slapped (it is a Jack)."""
    return card is not None and card.rank == Rank.JACK


def apply_penalty(score: int, penalty: int = 1) -> int:
    """Subtract a slap penalty, never going below zero."""
    return max(0, score - penalty)
