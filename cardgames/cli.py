"""
Headless text front end for the card table.

Drives every engine through its public actions and prints the returned
events, so the games can be played (or scripted) without a desktop UI.
"""

import argparse
import logging
from random import Random
from typing import Callable, Sequence

from cardgames.game import (
    BlackjackGame,
    GameEvent,
    GuessState,
    GuessTheCardGame,
    HighCardGame,
    SlapjackGame,
)
from cardgames.hand import Hand
from cardgames.logging_utils import setup_logging
from cardgames.scoring import blackjack_score
from config import config

logger = logging.getLogger(__name__)

GAMES = ("blackjack", "high-card", "guess", "slapjack")

MENU = """
==== Card Game Menu ====
1) Play Blackjack
2) Play High Card
3) Play Guess the Card
4) Play Slapjack
q) Quit
"""


class TableCLI:
    """Text menu and game loops over injectable input/output functions."""

    def __init__(
        self,
        rng: Random | None = None,
        reaction_window: float | None = None,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        """
        Initialize the CLI.

        Args:
            rng: Random source shared by every game started from this CLI
            reaction_window: Slapjack reaction window in seconds
            input_fn: Reads one line of user input given a prompt (default: input)
            output_fn: Writes one block of text (default: print)
        """
        self.rng = rng or Random()
        self.reaction_window = reaction_window
        self._input = input_fn or input
        self._output = output_fn or print

    def ask(self, prompt: str) -> str | None:
        """Read one line, or None at end of input."""
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def say(self, text: str) -> None:
        self._output(text)

    def show_event(self, event: GameEvent | None) -> None:
        if event is not None and event.message:
            self.say(event.message)

    def show_hand(self, hand: Hand, score: int | None = None) -> None:
        title = f"{hand.owner} Hand" if score is None else f"{hand.owner} Hand ({score})"
        self.say(f"{title}:\n{hand.show()}")

    def run_menu(self) -> None:
        """Main menu loop."""
        games = {
            "1": self.play_blackjack,
            "2": self.play_high_card,
            "3": self.play_guess,
            "4": self.play_slapjack,
        }
        while True:
            self.say(MENU)
            choice = self.ask("Choose a game: ")
            if choice is None or choice.strip().lower() in ("q", "quit"):
                return
            game = games.get(choice.strip())
            if game is None:
                self.say("Please choose 1-4 or q.")
                continue
            game()

    def run_game(self, name: str) -> None:
        """Play one named game directly."""
        {
            "blackjack": self.play_blackjack,
            "high-card": self.play_high_card,
            "guess": self.play_guess,
            "slapjack": self.play_slapjack,
        }[name]()

    def play_blackjack(self) -> None:
        game = BlackjackGame(rng=self.rng)
        actions = {
            "d": game.deal,
            "h": game.hit,
            "s": game.stand,
            "f": game.shuffle,
            "r": game.reset_deck,
        }
        self.say("Blackjack: (d)eal, (h)it, (s)tand, shu(f)fle, (r)eset deck, (b)ack")
        while True:
            command = self.ask("blackjack> ")
            if command is None or command.strip().lower() == "b":
                return
            action = actions.get(command.strip().lower())
            if action is None:
                self.say("Unknown command.")
                continue
            event = action()
            if command.strip().lower() in ("d", "h", "s") and game.player.cards:
                self.show_hand(game.player, blackjack_score(game.player))
                self.show_hand(game.dealer, blackjack_score(game.dealer))
            self.show_event(event)

    def play_high_card(self) -> None:
        game = HighCardGame(rng=self.rng)
        self.say("High Card: (p)layer draw, (d)ealer draw, (b)ack")
        while True:
            command = self.ask("high-card> ")
            if command is None or command.strip().lower() == "b":
                return
            command = command.strip().lower()
            if command == "p":
                event = game.draw_for_player()
            elif command == "d":
                event = game.draw_for_dealer()
            else:
                self.say("Unknown command.")
                continue

            self.show_event(event)
            if event.data.get("rematch_offered"):
                answer = self.ask("Would you like to play again? (y/n) ")
                if answer is None or answer.strip().lower() not in ("y", "yes"):
                    return
                self.show_event(game.play_again())

    def play_guess(self) -> None:
        game = GuessTheCardGame(rng=self.rng)
        self.show_event(game.start())
        while True:
            guess = self.ask("> ")
            if guess is None:
                return
            event = game.submit_guess(guess)
            self.show_event(event)
            if game.state == GuessState.IDLE:
                return

    def play_slapjack(self) -> None:
        game = SlapjackGame(rng=self.rng)
        if self.reaction_window is not None:
            game.set_reaction_window(self.reaction_window)
        step = game.settings.flip_interval
        self.say(
            f"Slapjack: Enter lets {step}s pass, (s)lap, (b)ack. "
            f"Reaction window: {game.reaction_window}s"
        )
        for event in game.events.history:
            self.show_event(event)

        while True:
            command = self.ask("slapjack> ")
            if command is None or command.strip().lower() == "b":
                return
            if command.strip().lower() == "s":
                self.show_event(game.slap())
                continue
            for event in game.advance(step):
                self.show_event(event)
            if game.is_over:
                self.say(str(game.summary()))
                answer = self.ask("Would you like to play again? (y/n) ")
                if answer is None or answer.strip().lower() not in ("y", "yes"):
                    return
                self.show_event(game.play_again())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="card-table",
        description="Play Blackjack, High Card, Guess the Card and Slapjack in the terminal",
    )
    parser.add_argument("-g", "--game", choices=GAMES, help="Skip the menu and play one game")
    parser.add_argument("-s", "--seed", type=int, help="Seed for reproducible shuffles")
    parser.add_argument(
        "-w",
        "--reaction-window",
        type=float,
        choices=config.slapjack.reaction_window_choices,
        help="Slapjack reaction window in seconds",
    )
    parser.add_argument(
        "--log-level",
        default=config.logging.level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``card-table`` command."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    rng = Random(args.seed) if args.seed is not None else Random()
    cli = TableCLI(rng=rng, reaction_window=args.reaction_window)
    logger.debug("Starting card table (game=%s, seed=%s)", args.game, args.seed)

    if args.game:
        cli.run_game(args.game)
    else:
        cli.run_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
