"""High Card game engine."""

import logging
from random import Random

from cardgames.cards import Deck, standard_cards
from cardgames.game.base import CardGame, Winner
from cardgames.game.events import EventType, GameEvent
from cardgames.game.state import HighCardState
from cardgames.hand import Hand
from cardgames.scoring import Comparison, compare_high_card

logger = logging.getLogger(__name__)


class HighCardGame(CardGame):
    """
    Player and Dealer each draw one card; the higher rank wins.

    An exhausted deck is replaced with a fresh shuffled one, so the game can
    be replayed indefinitely.
    """

    STATE_ENUM = HighCardState
    INITIAL_STATE = HighCardState.IDLE

    TRANSITIONS = [
        {"trigger": "begin_draw", "source": ["idle", "round_over"], "dest": "player_drawn"},
        {"trigger": "finish_round", "source": "player_drawn", "dest": "round_over"},
        {"trigger": "rematch", "source": "round_over", "dest": "idle"},
    ]

    def __init__(self, rng: Random | None = None, deck: Deck | None = None) -> None:
        """
        Initialize a new game with a shuffled deck.

        Args:
            rng: Random number generator for reproducible shuffles
            deck: Pre-built deck, used as given (not shuffled)
        """
        if deck is None:
            deck = Deck(standard_cards(), rng=rng)
            deck.shuffle()
        super().__init__(deck, rng=rng)
        self.player = Hand("Player")
        self.dealer = Hand("Dealer")
        self.outcome: Winner | None = None

    @property
    def in_progress(self) -> bool:
        """Check if the Player has drawn and the Dealer has not."""
        return self.state == HighCardState.PLAYER_DRAWN

    def draw_for_player(self) -> GameEvent:
        """Start a round by drawing the Player's card."""
        if self.state == HighCardState.PLAYER_DRAWN:
            return self._refuse("Player already drew a card!")

        self.player.clear()
        self.dealer.clear()
        self.outcome = None
        self._recycle_if_empty()

        card = self._deal_to(self.player)
        self.begin_draw()
        return self.events.emit_new(
            EventType.ROUND_STARTED,
            message=f"Player drew {card}.",
            card=str(card),
        )

    def draw_for_dealer(self) -> GameEvent:
        """Draw the Dealer's card and decide the round."""
        if self.state == HighCardState.ROUND_OVER:
            return self._refuse("Dealer already drew a card!")
        if self.state != HighCardState.PLAYER_DRAWN:
            return self._refuse("Player must draw first!")

        self._recycle_if_empty()
        self._deal_to(self.dealer)
        self.finish_round()
        return self._announce_winner()

    def play_again(self) -> GameEvent:
        """Accept the rematch: clear the table for a new round."""
        if self.state != HighCardState.ROUND_OVER:
            return self._refuse("Finish the current round first.")

        self.player.clear()
        self.dealer.clear()
        self.outcome = None
        self.rematch()
        return self.events.emit_new(EventType.GAME_STARTED, message="New round. Draw for Player.")

    def _recycle_if_empty(self) -> None:
        if not self.deck.is_empty():
            return
        self.deck.reset(standard_cards())
        self.deck.shuffle()
        logger.debug("High Card deck exhausted; recycled a fresh deck")
        self.events.emit_new(
            EventType.DECK_RECYCLED,
            message="Deck exhausted. Shuffled a fresh deck.",
            cards_remaining=self.deck.size(),
        )

    def _announce_winner(self) -> GameEvent:
        player_card = self.player.first
        dealer_card = self.dealer.first
        if player_card is None or dealer_card is None:
            raise RuntimeError("Both hands need a card to decide the round")

        comparison = compare_high_card(player_card, dealer_card)
        if comparison is Comparison.FIRST:
            self.outcome = Winner.PLAYER
            message = f"Player wins with {player_card} vs {dealer_card}!"
        elif comparison is Comparison.SECOND:
            self.outcome = Winner.DEALER
            message = f"Dealer wins with {dealer_card} vs {player_card}!"
        else:
            self.outcome = Winner.TIE
            message = f"It's a tie! Both have {player_card.rank.label}!"

        logger.info("High Card round over: %s", message)
        return self.events.emit_new(
            EventType.ROUND_ENDED,
            message=message,
            winner=self.outcome.name,
            player_card=str(player_card),
            dealer_card=str(dealer_card),
            rematch_offered=True,
        )
