"""Game events for the event system."""

from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Iterator


class EventType(Enum):
    """Types of game events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Deck events
    CARD_DEALT = auto()
    DECK_SHUFFLED = auto()
    DECK_RESET = auto()
    DECK_RECYCLED = auto()

    # Blackjack events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_BUSTS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()

    # Slapjack events
    CARD_FLIPPED = auto()
    JACK_REVEALED = auto()
    GOOD_SLAP = auto()
    BAD_SLAP = auto()
    SUIT_CHANGED = auto()
    REACTION_WINDOW_CHANGED = auto()

    # Guess the Card events
    GUESS_PROMPTED = auto()
    GUESS_CORRECT = auto()
    GUESS_WRONG = auto()

    # Error events
    INVALID_ACTION = auto()
    INSUFFICIENT_CARDS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the engines
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def message(self) -> str:
        """Return the user-facing message, if the event carries one."""
        return self.data.get("message", "")

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]

# Events kept per emitter; older ones are dropped first
HISTORY_LIMIT = 500


class EventEmitter:
    """
    Simple event emitter for game events.

    Allows subscribing to specific event types or all events. Only the most
    recent ``max_history`` events are kept.
    """

    def __init__(self, max_history: int = HISTORY_LIMIT) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: deque[GameEvent] = deque(maxlen=max_history)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Unsubscribe from events.

        Args:
            handler: Handler to remove
            event_type: Event type to unsubscribe from
        """
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribers."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        # Catch-all handlers
        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return list(self._event_history)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()

    @contextmanager
    def capture(self) -> Iterator[list[GameEvent]]:
        """Collect the events emitted inside a ``with`` block."""
        captured: list[GameEvent] = []
        self.subscribe(captured.append)
        try:
            yield captured
        finally:
            self.unsubscribe(captured.append)
