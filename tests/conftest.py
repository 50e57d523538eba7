"""Pytest fixtures for card table tests."""

import pytest
from random import Random

from cardgames.cards import Card, Deck
from cardgames.hand import Hand
from cardgames.game import BlackjackGame, HighCardGame, SlapjackGame


class OrderedRandom(Random):
    """Random source whose shuffle leaves cards in order."""

    def shuffle(self, x) -> None:
        pass


class AceRandom(Random):
    """Random source that always chooses the first Ace on offer."""

    def choice(self, seq):
        return next(card for card in seq if card.is_ace)


class LastJackRandom(Random):
    """Random source whose shuffle moves the Jack to the back, keeping the rest in order."""

    def shuffle(self, x) -> None:
        x.sort(key=lambda card: card.is_jack)


def make_deck(*codes: str) -> Deck:
    """Build a stacked deck, front first, from short card strings."""
    return Deck([Card.from_string(code) for code in codes])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def ordered_rng():
    """Random source that never reorders a deck."""
    return OrderedRandom()


@pytest.fixture
def last_jack_rng():
    """Random source that deals each suit's Jack last."""
    return LastJackRandom()


@pytest.fixture
def ace_rng():
    """Random source that always picks an Ace."""
    return AceRandom()


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand("Player 1")


@pytest.fixture
def game():
    """A blackjack table with an unshuffled deck."""
    return BlackjackGame()


@pytest.fixture
def high_card(rng):
    """A High Card game with a shuffled deck."""
    return HighCardGame(rng=rng)


@pytest.fixture
def slapjack(ordered_rng):
    """A Slapjack game whose sub-decks run 2 through Ace."""
    return SlapjackGame(rng=ordered_rng)


@pytest.fixture
def stacked():
    """Factory for stacked decks: ``stacked("KH", "QS", ...)``."""
    return make_deck
