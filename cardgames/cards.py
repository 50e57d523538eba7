"""Card and Deck classes - immutable cards, a thin FIFO deck."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator


class Suit(Enum):
    """Card suits, in deck-building order."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ordered 2 through Ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Return the display name ("2".."10", "Jack", "Queen", "King", "Ace")."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()

    @property
    def short(self) -> str:
        """Return the one- or two-character abbreviation."""
        if self.value <= 10:
            return str(self.value)
        return self.name[0]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.label} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_jack(self) -> bool:
        """Check if this card is a Jack."""
        return self.rank == Rank.JACK

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.short: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.name[0]: suit for suit in Suit}
        suit_map.update({suit.symbol: suit for suit in Suit})

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def standard_cards() -> list[Card]:
    """Return a fresh, ordered 52-card list (Hearts 2..Ace first)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def suit_cards(suit: Suit) -> list[Card]:
    """Return a fresh, ordered 13-card list of a single suit."""
    return [Card(rank, suit) for rank in Rank]


class Deck:
    """
    An ordered deck of cards dealt from the front.

    The deck never refills itself; owners decide when to ``reset`` it.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            cards: Initial cards, front first (defaults to a standard deck)
            rng: Random number generator used for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset(standard_cards() if cards is None else cards)

    def reset(self, new_cards: Iterable[Card]) -> None:
        """Replace the entire contents with a new sequence of cards."""
        self._cards = list(new_cards)

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def deal_card(self) -> Card | None:
        """Remove and return the front card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def is_empty(self) -> bool:
        """Check if no cards remain."""
        return not self._cards

    def size(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def rng(self) -> Random:
        """Return the random source used by this deck."""
        return self._rng

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
