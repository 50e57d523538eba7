"""Shared round lifecycle for the card game engines."""

import logging
from enum import Enum, auto
from random import Random
from typing import Any, Callable, ClassVar

from transitions import Machine

from cardgames.cards import Card, Deck
from cardgames.game.events import EventEmitter, EventType, GameEvent
from cardgames.game.state import _MachineState
from cardgames.hand import Hand

logger = logging.getLogger(__name__)


class Winner(Enum):
    """Who took a two-sided round."""

    PLAYER = auto()
    DEALER = auto()
    TIE = auto()


class CardGame:
    """
    Base class for the game engines.

    Subclasses declare ``STATE_ENUM``, ``INITIAL_STATE`` and ``TRANSITIONS``;
    the state machine is bound to the instance here. Actions run to completion
    synchronously and report through events and return values only.
    """

    STATE_ENUM: ClassVar[type[_MachineState]]
    INITIAL_STATE: ClassVar[_MachineState]
    TRANSITIONS: ClassVar[list[dict[str, Any]]] = []

    def __init__(self, deck: Deck, rng: Random | None = None) -> None:
        """
        Initialize the engine around a deck.

        Args:
            deck: The deck this engine owns exclusively
            rng: Random source for draws that bypass the deck order
        """
        self.deck = deck
        self.rng = rng or deck.rng
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=[s.name.lower() for s in self.STATE_ENUM],
            transitions=self.TRANSITIONS,
            initial=self.INITIAL_STATE.name.lower(),
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> _MachineState:
        """Get current game state as enum."""
        return self.STATE_ENUM[self._machine_state.upper()]  # type: ignore[attr-defined]

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _deal_to(self, hand: Hand) -> Card | None:
        """Deal the front card of the deck to a hand."""
        card = self.deck.deal_card()
        if card is None:
            return None
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=hand.owner,
            cards_remaining=self.deck.size(),
        )
        return card

    def _refuse(
        self,
        message: str,
        event_type: EventType = EventType.INVALID_ACTION,
    ) -> GameEvent:
        """Report a refused action without touching game state."""
        logger.debug("%s refused in %s: %s", type(self).__name__, self.state, message)
        return self.events.emit_new(event_type, message=message, state=self.state.name)
