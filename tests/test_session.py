"""Tests for the game session."""

import pytest

from holdem_sim.models.player import Player
from holdem_sim.models.simulation import GameOutcome, TableConfig
from holdem_sim.simulation.session import GameSession

from conftest import ScriptedAgent, ScriptedInput, ScriptedRandom, cards


TABLE = TableConfig(small_blind=2, big_blind=5, num_decks=1, starting_bank=100)

# First seat: As Ad, second seat: 7c 2h, pair of aces wins
FIRST_WINS = cards("As Ad 7c 2h 9c Kd Qs 4h 9d Jc 9h 8d")

# First seat: Kc 2d, second seat: Ah Ad, pair of aces wins
SECOND_WINS = cards("Kc 2d Ah Ad 9c 7s 5h 4c 9d Jc 9h 8d")


def make_session(players, rng, output, answers=None, max_rounds=None):
    agents = {p: ScriptedAgent() for p in players}
    return GameSession(players, agents, rng, TABLE, input_source=answers,
                       output=output, max_rounds=max_rounds)


class TestHumanGame:
    """Tests for games with a human seat."""

    def test_bankrupt_human(self, output):
        """Test that the game ends when the human can't cover the blind and loses."""
        human = Player("H", 2, is_human=True)
        players = [Player("A", 100), human]
        answers = ScriptedInput()
        session = make_session(players, ScriptedRandom(picks=[0], top=FIRST_WINS), output,
                               answers)

        assert session.run() == GameOutcome.BANKRUPT
        assert session.round_number == 1
        assert human not in session.players
        assert answers.asked == []
        assert "H is bankrupt and has been removed from the game!" in output.lines
        assert "Oh No" not in output
        assert session.result_message() == "Oh No! You went bankrupt! Game over :("

    def test_cash_out(self, output):
        human = Player("H", 100, is_human=True)
        players = [Player("A", 100), human]
        answers = ScriptedInput(["N"])
        session = make_session(players, ScriptedRandom(picks=[0], top=SECOND_WINS), output,
                               answers)

        assert session.run() == GameOutcome.CASHED_OUT
        assert answers.asked == ["Y/N"]
        assert human.bankroll == 105
        assert session.profit == 5
        assert session.result_message() == "Congrats! You made $5!"
        assert "Do you want to continue playing? (Y/N) " in output.lines

    def test_continue_then_cash_out(self, output):
        """Test that the blinds move one seat between rounds."""
        human = Player("H", 100, is_human=True)
        players = [Player("A", 100), human]
        answers = ScriptedInput(["y", "n"])
        session = make_session(players, ScriptedRandom(picks=[0], top=SECOND_WINS), output,
                               answers)

        assert session.run() == GameOutcome.CASHED_OUT
        assert session.round_number == 2
        assert session.first_player == 1
        assert human.bankroll == 110
        assert "Starting round 2!" in output.lines
        assert "You have chosen to continue playing. Onto the next round!" in output.lines
        assert session.result_message() == "Congrats! You made $10!"

    def test_losing_message(self, output):
        human = Player("H", 100, is_human=True)
        players = [human, Player("A", 100)]
        session = make_session(players, ScriptedRandom(picks=[0], top=SECOND_WINS), output,
                               ScriptedInput(["N"]))
        session.run()
        assert human.bankroll == 95
        assert session.result_message() == "Unfortunately, you lost $5 :("

    def test_round_limit_skips_prompt(self, output):
        players = [Player("A", 100), Player("H", 100, is_human=True)]
        answers = ScriptedInput()
        session = make_session(players, ScriptedRandom(top=SECOND_WINS), output, answers,
                               max_rounds=1)
        assert session.run() == GameOutcome.ROUND_LIMIT
        assert answers.asked == []

    def test_needs_input_source(self, output):
        players = [Player("A", 100), Player("H", 100, is_human=True)]
        with pytest.raises(ValueError):
            make_session(players, ScriptedRandom(), output)


class TestAIGame:
    """Tests for games between AI players only."""

    def test_last_standing(self, output):
        players = [Player("A", 100), Player("B", 5)]
        session = make_session(players, ScriptedRandom(picks=[0], top=FIRST_WINS), output,
                               max_rounds=5)

        assert session.run() == GameOutcome.LAST_STANDING
        assert [p.name for p in session.players] == ["A"]
        assert players[0].bankroll == 105
        assert session.result_message() == "Game over after 1 round(s)."

    def test_round_limit(self, output):
        """Test that the session stops at the limit and chips are conserved."""
        players = [Player(name, 100) for name in "ABC"]
        session = make_session(list(players), ScriptedRandom(picks=[1], seed=7), output,
                               max_rounds=2)

        assert session.run() == GameOutcome.ROUND_LIMIT
        assert len(session.results) == 2
        assert session.first_player == 2
        assert sum(p.bankroll for p in players) == 300
        assert "Onto the next round!" in output.lines
        assert session.profit == 0

    def test_needs_round_limit(self, output):
        with pytest.raises(ValueError):
            make_session([Player("A", 100), Player("B", 100)], ScriptedRandom(), output)

    def test_round_callback_sees_bankrupt_players(self, output):
        """Test that each round is reported before its bankrupt players leave."""
        seen = []
        players = [Player("A", 100), Player("B", 5)]
        session = GameSession(players, {p: ScriptedAgent() for p in players},
                              ScriptedRandom(picks=[0], top=FIRST_WINS), TABLE,
                              output=output, max_rounds=5,
                              on_round=lambda result, seated: seen.append((result, seated)))
        session.run()

        assert len(seen) == 1
        result, seated = seen[0]
        assert [p.name for p in seated] == ["A", "B"]
        assert result.winners == [players[0]]
