"""Blackjack game engine with state machine."""

import logging
from random import Random

from cardgames.cards import Deck, standard_cards
from cardgames.game.base import CardGame, Winner
from cardgames.game.events import EventType, GameEvent
from cardgames.game.state import BlackjackState
from cardgames.hand import Hand
from cardgames.scoring import BLACKJACK, blackjack_score, is_bust
from config import BlackjackConfig, config

logger = logging.getLogger(__name__)

NOT_ENOUGH_CARDS = "Not enough cards. Please shuffle or reset."

RESULT_MESSAGES = {
    Winner.PLAYER: "Player 1 wins!",
    Winner.DEALER: "Dealer wins!",
    Winner.TIE: "It's a tie!",
}


class BlackjackGame(CardGame):
    """
    One player against a dealer who stands on 17.

    Dealing with too few cards fails loudly (an ``INSUFFICIENT_CARDS``
    event) while hitting or standing out of turn is silently ignored and
    returns None. Callers rely on that difference.
    """

    STATE_ENUM = BlackjackState
    INITIAL_STATE = BlackjackState.AWAITING_DEAL

    TRANSITIONS = [
        {"trigger": "start_round", "source": ["awaiting_deal", "round_over"], "dest": "player_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "round_over"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "round_over"},
    ]

    def __init__(
        self,
        rules: BlackjackConfig | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a new blackjack table.

        Args:
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible shuffles
            deck: Pre-built deck, mostly for stacking cards in tests.
                The default deck is a fresh, unshuffled 52 cards.
        """
        if deck is None:
            deck = Deck(standard_cards(), rng=rng)
        super().__init__(deck, rng=rng)
        self.rules = rules or config.blackjack
        self.player = Hand("Player 1")
        self.dealer = Hand("Dealer")
        self.outcome: Winner | None = None

    @property
    def player_score(self) -> int:
        """Current Player total."""
        return blackjack_score(self.player)

    @property
    def dealer_score(self) -> int:
        """Current Dealer total."""
        return blackjack_score(self.dealer)

    @property
    def can_deal(self) -> bool:
        """Check if a new round may be dealt."""
        return (
            self.state in (BlackjackState.AWAITING_DEAL, BlackjackState.ROUND_OVER)
            and self.deck.size() >= self.rules.min_cards_to_deal
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == BlackjackState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == BlackjackState.PLAYER_TURN

    def deal(self) -> GameEvent:
        """Start a round: two cards each, alternating Player and Dealer."""
        if self.state in (BlackjackState.PLAYER_TURN, BlackjackState.DEALER_TURN):
            return self._refuse("Round already in progress.")

        if self.deck.size() < self.rules.min_cards_to_deal:
            return self._refuse(NOT_ENOUGH_CARDS, EventType.INSUFFICIENT_CARDS)

        self.player.clear()
        self.dealer.clear()
        self.outcome = None

        for hand in (self.player, self.dealer, self.player, self.dealer):
            self._deal_to(hand)

        self.start_round()
        logger.debug("Dealt %s against %s", self.player, self.dealer)
        return self.events.emit_new(
            EventType.ROUND_STARTED,
            player_score=self.player_score,
            dealer_score=self.dealer_score,
        )

    def hit(self) -> GameEvent | None:
        """Player takes another card."""
        if self.state != BlackjackState.PLAYER_TURN:
            return None

        if self._deal_to(self.player) is None:
            return self._refuse(NOT_ENOUGH_CARDS, EventType.INSUFFICIENT_CARDS)

        if is_bust(self.player):
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_score)
            self.player_busts()
            return self._end_round(Winner.DEALER, "Player 1 busts! Dealer wins.")

        return self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_score)

    def stand(self) -> GameEvent | None:
        """Player stands; the dealer plays out and the round is settled."""
        if self.state != BlackjackState.PLAYER_TURN:
            return None

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_score)
        self.player_done()
        self._play_dealer()
        self.dealer_done()
        return self._end_round(self._settle())

    def shuffle(self) -> GameEvent:
        """Shuffle the cards left in the deck; hands are untouched."""
        self.deck.shuffle()
        return self.events.emit_new(
            EventType.DECK_SHUFFLED,
            message="Deck shuffled!",
            cards_remaining=self.deck.size(),
        )

    def reset_deck(self) -> GameEvent:
        """Replace the deck with a fresh, ordered 52 cards."""
        self.deck.reset(standard_cards())
        return self.events.emit_new(
            EventType.DECK_RESET,
            message="Deck reset to full 52 cards.",
            cards_remaining=self.deck.size(),
        )

    def _play_dealer(self) -> None:
        """Dealer draws until reaching the stand threshold."""
        while self.dealer_score < self.rules.dealer_stands_on:
            if self._deal_to(self.dealer) is None:
                logger.warning("Deck ran out during dealer turn; dealer stands on %d", self.dealer_score)
                break
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_score)

        if not is_bust(self.dealer):
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_score)

    def _settle(self) -> Winner:
        """Compare totals after the dealer has played."""
        player_score = self.player_score
        dealer_score = self.dealer_score
        if dealer_score > BLACKJACK or player_score > dealer_score:
            return Winner.PLAYER
        if player_score < dealer_score:
            return Winner.DEALER
        return Winner.TIE

    def _end_round(self, winner: Winner, message: str | None = None) -> GameEvent:
        """Record the outcome and announce it."""
        self.outcome = winner
        message = message or RESULT_MESSAGES[winner]
        logger.info("Blackjack round over (%d vs %d): %s", self.player_score, self.dealer_score, message)
        return self.events.emit_new(
            EventType.ROUND_ENDED,
            message=message,
            winner=winner.name,
            player_score=self.player_score,
            dealer_score=self.dealer_score,
        )
