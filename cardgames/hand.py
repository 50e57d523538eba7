"""Participant hands."""

from dataclasses import dataclass, field
from typing import Iterator

from cardgames.cards import Card


@dataclass
class Hand:
    """Ordered cards held by one participant."""

    owner: str
    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def is_empty(self) -> bool:
        """Check if the hand holds no cards."""
        return not self.cards

    def show(self) -> str:
        """Render the hand one card per line."""
        return "".join(f"{card}\n" for card in self.cards)

    @property
    def first(self) -> Card | None:
        """Return the first card dealt, if any."""
        return self.cards[0] if self.cards else None

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"{self.owner}: {cards_str or '(empty)'}"

    def __repr__(self) -> str:
        return f"Hand({self.owner!r}, {self.cards!r})"
