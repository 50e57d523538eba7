"""Game state enumerations."""

from enum import Enum, auto


class _MachineState(Enum):
    """Base for state enums whose lowercase names are machine state names."""

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class BlackjackState(_MachineState):
    """
    Blackjack round states.

    Flow: AWAITING_DEAL → PLAYER_TURN → DEALER_TURN → ROUND_OVER
    """

    AWAITING_DEAL = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    ROUND_OVER = auto()


class HighCardState(_MachineState):
    """
    High Card round states.

    Flow: IDLE → PLAYER_DRAWN → ROUND_OVER → IDLE | PLAYER_DRAWN
    """

    IDLE = auto()
    PLAYER_DRAWN = auto()
    ROUND_OVER = auto()


class SlapjackState(_MachineState):
    """
    Slapjack game states.

    Flow: RUNNING ⇄ SUIT_EXHAUSTED → ALL_SUITS_COMPLETE, or JACK_MISSED
    from either live state. Both end states restart at RUNNING.
    """

    RUNNING = auto()
    SUIT_EXHAUSTED = auto()
    ALL_SUITS_COMPLETE = auto()
    JACK_MISSED = auto()

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self in (SlapjackState.ALL_SUITS_COMPLETE, SlapjackState.JACK_MISSED)


class GuessState(_MachineState):
    """Guess the Card states."""

    IDLE = auto()
    AWAITING_GUESS = auto()


# Valid state transitions
VALID_TRANSITIONS: dict[_MachineState, list[_MachineState]] = {
    BlackjackState.AWAITING_DEAL: [BlackjackState.PLAYER_TURN],
    BlackjackState.PLAYER_TURN: [BlackjackState.DEALER_TURN, BlackjackState.ROUND_OVER],
    BlackjackState.DEALER_TURN: [BlackjackState.ROUND_OVER],
    BlackjackState.ROUND_OVER: [BlackjackState.PLAYER_TURN],
    HighCardState.IDLE: [HighCardState.PLAYER_DRAWN],
    HighCardState.PLAYER_DRAWN: [HighCardState.ROUND_OVER],
    HighCardState.ROUND_OVER: [HighCardState.IDLE, HighCardState.PLAYER_DRAWN],
    SlapjackState.RUNNING: [SlapjackState.SUIT_EXHAUSTED, SlapjackState.JACK_MISSED],
    SlapjackState.SUIT_EXHAUSTED: [
        SlapjackState.RUNNING,
        SlapjackState.ALL_SUITS_COMPLETE,
        SlapjackState.JACK_MISSED,
    ],
    SlapjackState.ALL_SUITS_COMPLETE: [SlapjackState.RUNNING],
    SlapjackState.JACK_MISSED: [SlapjackState.RUNNING],
    GuessState.IDLE: [GuessState.AWAITING_GUESS],
    GuessState.AWAITING_GUESS: [GuessState.IDLE],
}


def is_valid_transition(from_state: _MachineState, to_state: _MachineState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
