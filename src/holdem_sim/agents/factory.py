"""Opponent factory for setting up a table."""

from typing import Dict, List, Optional, Sequence

from holdem_sim.collaborators import InputSource, OutputSink, RandomSource
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import TableConfig
from holdem_sim.agents.base import AIAgent, HumanAgent, SeatAgent
from holdem_sim.agents.decision import AIDecisionEngine


OPPONENT_NAMES = [
    "Anne", "Antonio", "Barry", "Bobby", "Brian", "Carlos", "Chad", "Chris",
    "Dan", "Darrell", "Dave", "Erick", "E-Dog", "Greg", "Howard", "Hoyt",
    "Humberto", "Jack", "Jimmy", "John", "Kenny", "Lady Linda", "Marcel",
    "Mike", "Paul", "Phil", "Randy", "Scott", "Stu", "Tommy", "Viktor",
    "Walter",
]


class OpponentFactory:
    """Creates the players and seat agents for a game."""

    def __init__(self, rng: RandomSource, table: Optional[TableConfig] = None,
                 names: Sequence[str] = OPPONENT_NAMES):
        """Initialize the factory.

        Args:
            rng: Source of name and bankroll picks.
            table: Table settings. Defaults to the configured values.
            names: Roster to draw opponent names from.
        """
        self.rng = rng
        self.table = table or TableConfig()
        self.names = list(names)

    def create_opponents(self, num_opponents: Optional[int] = None) -> List[Player]:
        """Create AI opponents with distinct names.

        One random opponent becomes "Lil' <name>" with the minimum bankroll and
        a different one becomes "Big <name>" with the maximum.
        """
        if num_opponents is None:
            num_opponents = self.table.num_opponents
        if num_opponents < 1:
            raise ValueError(f"Need at least one opponent, got {num_opponents}")
        if num_opponents > len(self.names):
            raise ValueError(f"Only {len(self.names)} opponent names available")

        available = list(self.names)
        opponents = [
            Player(available.pop(self.rng.pick(len(available))), self.table.starting_bank)
            for _ in range(num_opponents)
        ]

        if num_opponents >= 2:
            small = self.rng.pick(num_opponents)
            # Any seat but the small one
            big = self.rng.pick(num_opponents - 1)
            if big >= small:
                big += 1

            opponents[small].name = f"Lil' {opponents[small].name}"
            opponents[small].bankroll = self.table.min_opp_bankroll
            opponents[big].name = f"Big {opponents[big].name}"
            opponents[big].bankroll = self.table.max_opp_bankroll

        return opponents

    def create_players(self, human_name: Optional[str],
                       num_opponents: Optional[int] = None) -> List[Player]:
        """Create the full table. The human, if any, sits last."""
        players = self.create_opponents(num_opponents)
        if human_name is not None:
            players.append(Player(human_name, self.table.starting_bank, is_human=True))
        return players

    @staticmethod
    def create_agents(
        players: Sequence[Player],
        decision_engine: AIDecisionEngine,
        input_source: Optional[InputSource] = None,
        output: Optional[OutputSink] = None,
    ) -> Dict[Player, SeatAgent]:
        """Map each player to the agent that decides for it."""
        ai_agent = AIAgent(decision_engine)
        agents: Dict[Player, SeatAgent] = {}
        for player in players:
            if player.is_human:
                if input_source is None or output is None:
                    raise ValueError("A human player needs an input source and an output sink")
                agents[player] = HumanAgent(input_source, output)
            else:
                agents[player] = ai_agent
        return agents
