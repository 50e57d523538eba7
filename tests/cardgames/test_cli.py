"""Tests for the text front end."""

from random import Random

import pytest

from cardgames.cli import TableCLI, build_parser, main


class Script:
    """Feeds canned answers to the CLI and records what it prints."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


def make_cli(script, rng=None, reaction_window=None):
    return TableCLI(
        rng=rng or Random(0),
        reaction_window=reaction_window,
        input_fn=script.read,
        output_fn=script.write,
    )


class TestTableCLI:
    """Tests for the game loops."""

    def test_blackjack_round(self):
        """Test a scripted deal and stand against the ordered deck."""
        script = Script("d", "s", "b")
        make_cli(script).play_blackjack()

        assert "Player 1 Hand (6):\n2 of Hearts\n4 of Hearts\n" in script.output
        assert "Dealer Hand (21):\n3 of Hearts\n5 of Hearts\n6 of Hearts\n7 of Hearts\n" in script.output
        assert "Dealer wins!" in script.output

    def test_blackjack_unknown_command(self):
        """Test unknown commands are reported and the loop continues."""
        script = Script("x", "h", "b")
        make_cli(script).play_blackjack()
        assert "Unknown command." in script.output

    def test_blackjack_shuffle_and_reset(self):
        """Test the deck commands print their messages."""
        script = Script("f", "r")
        make_cli(script).play_blackjack()
        assert "Deck shuffled!" in script.output
        assert "Deck reset to full 52 cards." in script.output

    def test_high_card_round_and_decline(self):
        """Test one High Card round, then declining the rematch."""
        script = Script("d", "p", "d", "n")
        make_cli(script).play_high_card()

        assert "Player must draw first!" in script.output
        assert any(line.startswith("Player drew ") for line in script.output)
        assert "Would you like to play again? (y/n) " in script.prompts
        assert script.answers == []

    def test_high_card_rematch(self):
        """Test accepting the rematch keeps playing."""
        script = Script("p", "d", "y", "p", "b")
        make_cli(script).play_high_card()

        assert "New round. Draw for Player." in script.output
        assert sum(line.startswith("Player drew ") for line in script.output) == 2

    def test_guess(self, ace_rng):
        """Test a blank guess is refused and the next one is judged."""
        script = Script("", "ace")
        make_cli(script, rng=ace_rng).play_guess()

        assert "Guess the rank of the card (e.g., Ace, 2, King):" in script.output
        assert "Please enter a rank." in script.output
        assert "Correct! It was: Ace of Hearts" in script.output

    def test_slapjack_missed_jack(self, ordered_rng):
        """Test waiting past a Jack ends the game with a summary."""
        script = Script(*([""] * 11), "n")
        make_cli(script, rng=ordered_rng, reaction_window=1.0).play_slapjack()

        assert "JACK! SLAP NOW!" in script.output
        assert "Too slow! You missed the Jack!" in script.output
        assert "Your score: 0 points\nCards collected: 0" in script.output

    def test_slapjack_good_slap(self, ordered_rng):
        """Test slapping the Jack scores a point."""
        script = Script(*([""] * 10), "s", "b")
        make_cli(script, rng=ordered_rng).play_slapjack()
        assert "Great slap! +1 point" in script.output

    def test_menu_quit(self):
        """Test the menu returns on q."""
        script = Script("9", "q")
        make_cli(script).run_menu()
        assert "Please choose 1-4 or q." in script.output

    def test_menu_end_of_input(self):
        """Test the menu returns when input runs out."""
        script = Script("3", "7")
        make_cli(script).run_menu()
        assert script.answers == []


class TestMain:
    """Tests for argument parsing and the entry point."""

    def test_parser_defaults(self):
        """Test defaults when no options are given."""
        args = build_parser().parse_args([])
        assert args.game is None
        assert args.seed is None
        assert args.reaction_window is None
        assert args.log_level == "WARNING"

    def test_parser_options(self):
        """Test every option parses."""
        args = build_parser().parse_args(["-g", "slapjack", "-s", "5", "-w", "2.5"])
        assert args.game == "slapjack"
        assert args.seed == 5
        assert args.reaction_window == 2.5

    def test_reaction_window_must_be_a_menu_choice(self):
        """Test off-menu windows are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-w", "0.5"])

    def test_main_plays_one_game(self, monkeypatch, capsys):
        """Test main runs the chosen game and exits cleanly."""
        answers = iter(["p", "d", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--game", "high-card", "--seed", "3"]) == 0
        assert "Player drew" in capsys.readouterr().out
