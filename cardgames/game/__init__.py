"""Game engines and state management."""

from cardgames.game.events import GameEvent, EventType, EventEmitter
from cardgames.game.state import BlackjackState, HighCardState, SlapjackState, GuessState
from cardgames.game.clock import Cadence
from cardgames.game.base import CardGame, Winner
from cardgames.game.blackjack import BlackjackGame
from cardgames.game.high_card import HighCardGame
from cardgames.game.slapjack import SlapjackGame, SlapjackSummary
from cardgames.game.guess import GuessTheCardGame, play_guess_the_card

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "BlackjackState",
    "HighCardState",
    "SlapjackState",
    "GuessState",
    "Cadence",
    "CardGame",
    "Winner",
    "BlackjackGame",
    "HighCardGame",
    "SlapjackGame",
    "SlapjackSummary",
    "GuessTheCardGame",
    "play_guess_the_card",
]
