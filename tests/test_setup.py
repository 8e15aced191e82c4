"""Tests for table setup: settings, opponents, agents and logging."""

import logging

import pytest

from holdem_sim.agents.base import AIAgent, HumanAgent
from holdem_sim.agents.decision import AIDecisionEngine
from holdem_sim.agents.factory import OPPONENT_NAMES, OpponentFactory
from holdem_sim.agents.preflop import get_preflop_table
from holdem_sim.collaborators import StdRandomSource
from holdem_sim.models.simulation import TableConfig
from holdem_sim.observability.logger import LOGGER_NAME, setup_logging

from conftest import ScriptedInput, ScriptedRandom


class TestTableConfig:
    def test_defaults(self):
        table = TableConfig()
        assert (table.small_blind, table.big_blind) == (2, 5)
        assert table.community_cards == (3, 1, 1)
        assert table.starting_bank == 100

    @pytest.mark.parametrize("kwargs", [
        {"num_decks": 0},
        {"small_blind": 0},
        {"small_blind": 10, "big_blind": 5},
        {"community_cards": (3, 2)},
        {"starting_bank": -1},
        {"min_opp_bankroll": -5},
        {"max_opp_bankroll": 0},
        {"min_opp_bankroll": 130, "max_opp_bankroll": 120},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            TableConfig(**kwargs)


class TestOpponentFactory:
    """Tests for the OpponentFactory class."""

    def test_lil_and_big_opponents(self):
        """Test that one seat gets the low bankroll and another the high one."""
        factory = OpponentFactory(ScriptedRandom(picks=[0, 0, 0, 1, 0]), TableConfig())
        opponents = factory.create_opponents(3)
        assert [p.name for p in opponents] == ["Big Anne", "Lil' Antonio", "Barry"]
        assert [p.bankroll for p in opponents] == [120, 80, 100]

    def test_big_skips_the_lil_seat(self):
        factory = OpponentFactory(ScriptedRandom(picks=[0, 0, 0, 0]), TableConfig())
        opponents = factory.create_opponents(2)
        assert opponents[0].name.startswith("Lil' ")
        assert opponents[1].name.startswith("Big ")

    def test_single_opponent_keeps_starting_bank(self):
        factory = OpponentFactory(ScriptedRandom(), TableConfig())
        (opponent,) = factory.create_opponents(1)
        assert opponent.name == "Anne"
        assert opponent.bankroll == 100

    def test_names_are_distinct(self):
        factory = OpponentFactory(StdRandomSource(9), TableConfig())
        opponents = factory.create_opponents(len(OPPONENT_NAMES))
        assert len({p.name for p in opponents}) == len(OPPONENT_NAMES)

    @pytest.mark.parametrize("count", [0, len(OPPONENT_NAMES) + 1])
    def test_bad_opponent_count(self, count):
        factory = OpponentFactory(StdRandomSource(1), TableConfig())
        with pytest.raises(ValueError):
            factory.create_opponents(count)

    def test_human_sits_last(self):
        factory = OpponentFactory(StdRandomSource(4), TableConfig(num_opponents=4))
        players = factory.create_players("Tester")
        assert len(players) == 5
        assert players[-1].name == "Tester"
        assert players[-1].is_human
        assert not any(p.is_human for p in players[:-1])

    def test_agents(self, output):
        factory = OpponentFactory(StdRandomSource(4), TableConfig(num_opponents=2))
        players = factory.create_players("Tester")
        engine = AIDecisionEngine(get_preflop_table(), StdRandomSource(4))
        agents = factory.create_agents(players, engine, ScriptedInput(), output)
        assert isinstance(agents[players[-1]], HumanAgent)
        assert all(isinstance(agents[p], AIAgent) for p in players[:-1])

    def test_human_agent_needs_input(self):
        factory = OpponentFactory(StdRandomSource(4), TableConfig(num_opponents=1))
        players = factory.create_players("Tester")
        engine = AIDecisionEngine(get_preflop_table(), StdRandomSource(4))
        with pytest.raises(ValueError):
            factory.create_agents(players, engine)


class TestLogging:
    """Tests for setup_logging."""

    def test_level_by_name(self):
        logger = setup_logging("debug", format_style="simple")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_repeat_setup_replaces_handler(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            setup_logging("INFO", format_style="json")
