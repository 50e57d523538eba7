"""Guess the Card game engine."""

import logging
from random import Random

from cardgames.cards import Card, Deck, standard_cards
from cardgames.game.base import CardGame
from cardgames.game.events import EventType, GameEvent
from cardgames.game.state import GuessState
from cardgames.scoring import guess_matches

logger = logging.getLogger(__name__)

PROMPT = "Guess the rank of the card (e.g., Ace, 2, King):"


class GuessTheCardGame(CardGame):
    """
    Pick a random card from a fresh deck and let the player guess its rank.

    Nothing carries over between guesses: every ``start`` draws from a new
    52-card deck. A blank guess is rejected and the same card stays hidden
    for another try.
    """

    STATE_ENUM = GuessState
    INITIAL_STATE = GuessState.IDLE

    TRANSITIONS = [
        {"trigger": "prompt", "source": "idle", "dest": "awaiting_guess"},
        {"trigger": "resolve_guess", "source": "awaiting_guess", "dest": "idle"},
    ]

    def __init__(self, rng: Random | None = None) -> None:
        super().__init__(Deck(standard_cards(), rng=rng), rng=rng)
        self._chosen: Card | None = None

    def start(self) -> GameEvent:
        """Choose a card uniformly at random and ask for a guess."""
        if self.state == GuessState.AWAITING_GUESS:
            return self._refuse("A card is already chosen. Make a guess.")

        self.deck.reset(standard_cards())
        self._chosen = self.rng.choice(list(self.deck))
        self.prompt()
        return self.events.emit_new(EventType.GUESS_PROMPTED, message=PROMPT)

    def submit_guess(self, text: str | None) -> GameEvent:
        """Compare a free-text rank guess with the chosen card."""
        if self.state != GuessState.AWAITING_GUESS or self._chosen is None:
            return self._refuse("No card chosen yet.")

        if text is None or not text.strip():
            return self._refuse("Please enter a rank.")

        card = self._chosen
        correct = guess_matches(text, card)
        self._chosen = None
        self.resolve_guess()

        logger.info("Guess %r for %s: %s", text, card, "correct" if correct else "wrong")
        if correct:
            return self.events.emit_new(
                EventType.GUESS_CORRECT, message=f"Correct! It was: {card}", card=str(card)
            )
        return self.events.emit_new(
            EventType.GUESS_WRONG, message=f"Wrong! It was: {card}", card=str(card)
        )


def play_guess_the_card(guess: str | None, rng: Random | None = None) -> GameEvent:
    """Single-shot form: choose a card, evaluate one guess, report the result."""
    game = GuessTheCardGame(rng=rng)
    game.start()
    return game.submit_guess(guess)
