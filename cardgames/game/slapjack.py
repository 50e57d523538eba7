"""Slapjack game engine.

Cards from a 13-card single-suit sub-deck are flipped on a fixed cadence.
When a Jack shows, a single-shot reaction countdown is armed; slapping in
time scores a point, letting it run out ends the game. The four suits are
played in order, each from a freshly shuffled sub-deck.

Both cadences are logical clocks. ``advance`` lets time pass on both of them
and fires due callbacks one at a time, in time order, so game state is only
ever touched by one action at once.
"""

import logging
from dataclasses import dataclass
from random import Random

from cardgames.cards import Card, Deck, Suit, suit_cards
from cardgames.game.base import CardGame
from cardgames.game.clock import Cadence
from cardgames.game.events import EventType, GameEvent
from cardgames.game.state import SlapjackState
from cardgames.hand import Hand
from cardgames.scoring import apply_penalty, is_slappable
from config import SlapjackConfig, config

logger = logging.getLogger(__name__)

SUITS: tuple[Suit, ...] = tuple(Suit)


@dataclass(frozen=True)
class SlapjackSummary:
    """Final tally of a finished game."""

    score: int
    cards_collected: int

    def __str__(self) -> str:
        return f"Your score: {self.score} points\nCards collected: {self.cards_collected}"


class SlapjackGame(CardGame):
    """
    Slapjack engine.

    The game starts running on construction with the flip cadence armed.
    """

    STATE_ENUM = SlapjackState
    INITIAL_STATE = SlapjackState.RUNNING

    TRANSITIONS = [
        {"trigger": "exhaust_suit", "source": "running", "dest": "suit_exhausted"},
        {"trigger": "next_suit", "source": "suit_exhausted", "dest": "running"},
        {"trigger": "complete", "source": "suit_exhausted", "dest": "all_suits_complete"},
        {"trigger": "miss", "source": ["running", "suit_exhausted"], "dest": "jack_missed"},
        {"trigger": "restart", "source": ["all_suits_complete", "jack_missed"], "dest": "running"},
    ]

    def __init__(
        self,
        settings: SlapjackConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize and start a game on the first suit.

        Args:
            settings: Cadence settings (uses defaults if not provided)
            rng: Random number generator for reproducible sub-deck shuffles
        """
        self.settings = settings or config.slapjack
        self.suit_index = 0
        super().__init__(Deck(self._suit_cards(), rng=rng), rng=rng)
        self.deck.shuffle()

        self.player = Hand("Player")
        self.score = 0
        self.current_card: Card | None = None
        self.card_live = False

        self._reaction_window = self.settings.reaction_window
        self.flip_clock = Cadence(self.settings.flip_interval, self.flip, name="flip")
        self.reaction_clock = Cadence(
            self._reaction_window, self.expire_reaction, repeating=False, name="reaction"
        )
        self._announce_start("Game started! Watch for Jacks and SLAP!")

    @property
    def current_suit(self) -> Suit:
        """Suit of the sub-deck in play."""
        return SUITS[self.suit_index]

    @property
    def reaction_window(self) -> float:
        """Seconds allowed to slap the next revealed Jack."""
        return self._reaction_window

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.state.is_over

    def set_reaction_window(self, seconds: float) -> GameEvent:
        """
        Pick a reaction window from the fixed menu.

        A countdown that is already running keeps its remaining time; the new
        window is used from the next Jack.

        Raises:
            ValueError: If ``seconds`` is not one of the menu choices
        """
        if seconds not in self.settings.reaction_window_choices:
            raise ValueError(
                f"Reaction window must be one of {self.settings.reaction_window_choices}, got {seconds}"
            )
        self._reaction_window = seconds
        self.reaction_clock.interval = seconds
        return self.events.emit_new(EventType.REACTION_WINDOW_CHANGED, seconds=seconds)

    def flip(self) -> GameEvent | None:
        """One tick of the flip cadence."""
        if self.is_over:
            return None

        if self.state == SlapjackState.SUIT_EXHAUSTED:
            if self.suit_index < len(SUITS) - 1:
                return self._move_to_next_suit()
            self.complete()
            return self._end_game("All suits completed! Game Over!")

        card = self.deck.deal_card()
        if card is None:
            raise IndexError("Cannot flip from an empty sub-deck")
        self.current_card = card
        self.card_live = is_slappable(card)
        event = self.events.emit_new(
            EventType.CARD_FLIPPED,
            message=f"Card flipped: {card}",
            card=str(card),
            cards_remaining=self.deck.size(),
        )

        if self.deck.is_empty():
            self.exhaust_suit()

        if self.card_live:
            self.reaction_clock.restart()
            logger.debug("Jack revealed; %.1fs to slap", self.reaction_clock.remaining)
            return self.events.emit_new(
                EventType.JACK_REVEALED,
                message="JACK! SLAP NOW!",
                card=str(card),
                window=self.reaction_clock.remaining,
            )
        return event

    def slap(self) -> GameEvent | None:
        """Slap the revealed card."""
        if self.is_over:
            return None

        card = self.current_card
        if not self.card_live or card is None:
            self.score = apply_penalty(self.score)
            return self.events.emit_new(
                EventType.BAD_SLAP,
                message="No Jack to slap! -1 point penalty",
                score=self.score,
            )

        # Cancelled in the same call so a stale countdown can never fire
        self.reaction_clock.stop()
        self.card_live = False
        self.player.add_card(card)
        self.score += 1
        return self.events.emit_new(
            EventType.GOOD_SLAP,
            message="Great slap! +1 point",
            score=self.score,
            cards_collected=len(self.player),
        )

    def expire_reaction(self) -> GameEvent | None:
        """The reaction countdown ran out."""
        if self.is_over or not self.card_live:
            return None
        self.miss()
        return self._end_game("Too slow! You missed the Jack!")

    def advance_flip_clock(self, seconds: float) -> list[GameEvent]:
        """Let time pass on the flip cadence only."""
        with self.events.capture() as emitted:
            self.flip_clock.advance(seconds)
        return emitted

    def advance_reaction_clock(self, seconds: float) -> list[GameEvent]:
        """Let time pass on the reaction countdown only."""
        with self.events.capture() as emitted:
            self.reaction_clock.advance(seconds)
        return emitted

    def advance(self, seconds: float) -> list[GameEvent]:
        """
        Let time pass on both cadences.

        Due callbacks run one at a time in time order. When a countdown and a
        flip fall due together, the countdown runs first.

        Returns:
            Events emitted while time passed
        """
        if seconds < 0:
            raise ValueError("cannot advance by a negative duration")

        with self.events.capture() as emitted:
            while True:
                pending = [c.remaining for c in (self.reaction_clock, self.flip_clock) if c.active]
                step = min(pending, default=None)
                if step is None or step > seconds:
                    self.reaction_clock.advance(seconds)
                    self.flip_clock.advance(seconds)
                    break
                self.reaction_clock.advance(step)
                self.flip_clock.advance(step)
                seconds -= step
        return emitted

    def summary(self) -> SlapjackSummary:
        """Current score and pile size."""
        return SlapjackSummary(score=self.score, cards_collected=len(self.player))

    def play_again(self) -> GameEvent:
        """Start a new game from the first suit after the previous one ended."""
        if not self.is_over:
            return self._refuse("Game still in progress.")

        self.suit_index = 0
        self.deck.reset(self._suit_cards())
        self.deck.shuffle()
        self.player.clear()
        self.score = 0
        self.current_card = None
        self.card_live = False
        self.restart()
        return self._announce_start("New game started! Watch for Jacks and SLAP!")

    def _suit_cards(self) -> list[Card]:
        return suit_cards(self.current_suit)

    def _announce_start(self, message: str) -> GameEvent:
        self.flip_clock.restart()
        return self.events.emit_new(
            EventType.GAME_STARTED,
            message=f"{message}\nCurrent suit: {self.current_suit}",
            suit=str(self.current_suit),
        )

    def _move_to_next_suit(self) -> GameEvent:
        self.suit_index += 1
        self.deck.reset(self._suit_cards())
        self.deck.shuffle()
        self.next_suit()
        logger.debug("Slapjack moved to %s", self.current_suit)
        return self.events.emit_new(
            EventType.SUIT_CHANGED,
            message=f"Moving to {self.current_suit} suit!",
            suit=str(self.current_suit),
        )

    def _end_game(self, message: str) -> GameEvent:
        self.flip_clock.stop()
        self.reaction_clock.stop()
        self.card_live = False
        summary = self.summary()
        logger.info("Slapjack over: %s (score %d)", message, summary.score)
        return self.events.emit_new(
            EventType.GAME_ENDED,
            message=message,
            reason=self.state.name,
            score=summary.score,
            cards_collected=summary.cards_collected,
        )
