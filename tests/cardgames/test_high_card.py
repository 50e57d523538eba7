"""Tests for the High Card engine."""

from random import Random

from cardgames.cards import Deck
from cardgames.game import EventType, HighCardGame, HighCardState, Winner
from cardgames.game.events import HISTORY_LIMIT


class TestHighCardRound:
    """Tests for a single High Card round."""

    def test_initial_state(self, high_card):
        """Test a new game is idle with a shuffled full deck."""
        assert high_card.state == HighCardState.IDLE
        assert high_card.deck.size() == 52
        assert not high_card.in_progress

    def test_player_draw(self, stacked):
        """Test the Player's draw starts the round."""
        game = HighCardGame(deck=stacked("KH", "QS"))

        event = game.draw_for_player()

        assert event.event_type == EventType.ROUND_STARTED
        assert event.message == "Player drew King of Hearts."
        assert game.state == HighCardState.PLAYER_DRAWN
        assert game.in_progress

    def test_player_wins(self, stacked):
        """Test a higher Player card wins."""
        game = HighCardGame(deck=stacked("KH", "QS"))
        game.draw_for_player()

        event = game.draw_for_dealer()

        assert event.event_type == EventType.ROUND_ENDED
        assert event.message == "Player wins with King of Hearts vs Queen of Spades!"
        assert event.data["rematch_offered"] is True
        assert game.outcome == Winner.PLAYER
        assert game.state == HighCardState.ROUND_OVER

    def test_dealer_wins(self, stacked):
        """Test a higher Dealer card wins."""
        game = HighCardGame(deck=stacked("7C", "AD"))
        game.draw_for_player()

        event = game.draw_for_dealer()

        assert event.message == "Dealer wins with Ace of Diamonds vs 7 of Clubs!"
        assert game.outcome == Winner.DEALER

    def test_tie_ignores_suit(self, stacked):
        """Test equal ranks tie regardless of suit."""
        game = HighCardGame(deck=stacked("QS", "QH"))
        game.draw_for_player()

        event = game.draw_for_dealer()

        assert event.message == "It's a tie! Both have Queen!"
        assert game.outcome == Winner.TIE

    def test_dealer_before_player_refused(self, high_card):
        """Test the Dealer cannot draw first."""
        event = high_card.draw_for_dealer()

        assert event.event_type == EventType.INVALID_ACTION
        assert event.message == "Player must draw first!"
        assert high_card.dealer.is_empty()
        assert high_card.deck.size() == 52

    def test_player_cannot_draw_twice(self, stacked):
        """Test a second Player draw in the same round is refused."""
        game = HighCardGame(deck=stacked("KH", "QS", "2C"))
        game.draw_for_player()

        event = game.draw_for_player()

        assert event.message == "Player already drew a card!"
        assert len(game.player) == 1
        assert game.deck.size() == 2

    def test_dealer_cannot_draw_twice(self, stacked):
        """Test a second Dealer draw after the round is refused."""
        game = HighCardGame(deck=stacked("KH", "QS", "2C"))
        game.draw_for_player()
        game.draw_for_dealer()

        event = game.draw_for_dealer()

        assert event.message == "Dealer already drew a card!"
        assert game.deck.size() == 1


class TestHighCardReplay:
    """Tests for rematches and deck recycling."""

    def test_play_again(self, stacked):
        """Test accepting a rematch clears the table."""
        game = HighCardGame(deck=stacked("KH", "QS", "2C", "3C"))
        game.draw_for_player()
        game.draw_for_dealer()

        event = game.play_again()

        assert event.event_type == EventType.GAME_STARTED
        assert game.state == HighCardState.IDLE
        assert game.player.is_empty()
        assert game.dealer.is_empty()
        assert game.outcome is None

    def test_play_again_mid_round_refused(self, stacked):
        """Test a rematch needs a finished round."""
        game = HighCardGame(deck=stacked("KH", "QS"))
        game.draw_for_player()

        event = game.play_again()

        assert event.event_type == EventType.INVALID_ACTION
        assert game.state == HighCardState.PLAYER_DRAWN

    def test_draw_after_round_starts_new_round(self, stacked):
        """Test the Player may draw again straight after a finished round."""
        game = HighCardGame(deck=stacked("KH", "QS", "2C", "3C"))
        game.draw_for_player()
        game.draw_for_dealer()

        game.draw_for_player()

        assert game.state == HighCardState.PLAYER_DRAWN
        assert [str(c) for c in game.player] == ["2 of Clubs"]
        assert game.dealer.is_empty()

    def test_empty_deck_recycled_for_player(self, rng):
        """Test an exhausted deck is replaced before the Player draws."""
        game = HighCardGame(rng=rng, deck=Deck([], rng=rng))

        game.draw_for_player()

        assert game.deck.size() == 51
        recycled = [e for e in game.events.history if e.event_type == EventType.DECK_RECYCLED]
        assert len(recycled) == 1

    def test_empty_deck_recycled_for_dealer(self, stacked):
        """Test an exhausted deck is replaced before the Dealer draws."""
        game = HighCardGame(deck=stacked("KH"))
        game.draw_for_player()
        assert game.deck.is_empty()

        event = game.draw_for_dealer()

        assert event.event_type == EventType.ROUND_ENDED
        assert len(game.dealer) == 1
        assert game.deck.size() == 51

    def test_many_rounds_never_run_dry(self, high_card):
        """Test play continues well past a single deck."""
        for _ in range(60):
            high_card.draw_for_player()
            event = high_card.draw_for_dealer()
            assert event.event_type == EventType.ROUND_ENDED
            high_card.play_again()
        assert high_card.state == HighCardState.IDLE

    def test_long_session_history_stays_bounded(self):
        """Test thousands of rounds keep only the most recent events."""
        game = HighCardGame(rng=Random(1))
        for _ in range(10_000):
            game.draw_for_player()
            game.draw_for_dealer()

        assert len(game.events.history) == HISTORY_LIMIT
        assert game.events.history[-1].event_type == EventType.ROUND_ENDED
