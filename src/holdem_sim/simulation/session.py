"""Game session: repeated rounds until someone cashes out or goes broke."""

import logging
from typing import Callable, List, Mapping, Optional, Sequence

from holdem_sim.collaborators import InputSource, NullOutput, OutputSink, RandomSource
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import GameOutcome, TableConfig
from holdem_sim.agents.base import SeatAgent
from holdem_sim.simulation.engine import BettingEngine, RoundResult

logger = logging.getLogger(__name__)


class GameSession:
    """Drives a whole game of rounds at one table.

    The first player is picked at random and moves one seat each round.
    Bankrupt players leave after every round. A game with a human ends when
    they go broke, win the table, or decline another round; an all-AI game
    ends when one player is left or the round limit is reached.
    """

    def __init__(
        self,
        players: List[Player],
        agents: Mapping[Player, SeatAgent],
        rng: RandomSource,
        table: Optional[TableConfig] = None,
        input_source: Optional[InputSource] = None,
        output: Optional[OutputSink] = None,
        max_rounds: Optional[int] = None,
        on_round: Optional[Callable[[RoundResult, Sequence[Player]], None]] = None,
    ):
        """Initialize the session.

        Args:
            players: Players in seat order, with the human (if any) last.
            agents: The agent deciding for each player.
            rng: Shared source of randomness.
            table: Table settings.
            input_source: Asks the human whether to keep playing.
            output: Receives narration.
            max_rounds: Round limit. Required when nobody is human.
            on_round: Called with each finished round and the players who
                played it, before bankrupt players leave.
        """
        self.players = players
        self.agents = agents
        self.rng = rng
        self.table = table or TableConfig()
        self.input_source = input_source
        self.output = output or NullOutput()
        self.max_rounds = max_rounds
        self.on_round = on_round
        self.human: Optional[Player] = next((p for p in players if p.is_human), None)
        self.round_number = 0
        self.first_player = 0
        self.results: List[RoundResult] = []
        self.outcome: Optional[GameOutcome] = None

        if self.human is not None and input_source is None:
            raise ValueError("A game with a human player needs an input source")
        if self.human is None and max_rounds is None:
            raise ValueError("An all-AI game needs a round limit")

    def run(self) -> GameOutcome:
        """Play rounds until the game ends.

        Returns:
            Why the game ended.
        """
        self.first_player = self.rng.pick(len(self.players))

        while True:
            self.round_number += 1
            self._say(f"Starting round {self.round_number}!")
            self.play_round()

            outcome = self._check_end()
            if outcome is not None:
                self.outcome = outcome
                logger.info("Game over after %d round(s): %s", self.round_number, outcome.value)
                return outcome

            self._say("You have chosen to continue playing. Onto the next round!" if self.human
                      else "Onto the next round!")
            self._say("")
            self.first_player += 1

    def play_round(self) -> RoundResult:
        """Play one round and drop bankrupt players."""
        engine = BettingEngine(self.players, self.agents, self.table, self.rng,
                               self.output)
        result = engine.play_round(self.first_player)
        self.results.append(result)
        if self.on_round is not None:
            self.on_round(result, list(self.players))
        self._remove_bankrupt()
        return result

    def _remove_bankrupt(self):
        for player in [p for p in self.players if p.is_bankrupt]:
            self._say(f"{player.name} is bankrupt and has been removed from the game!")
            self.players.remove(player)

    def _check_end(self) -> Optional[GameOutcome]:
        if self.human is not None and self.human not in self.players:
            return GameOutcome.BANKRUPT
        if len(self.players) <= 1:
            return GameOutcome.LAST_STANDING
        if self.human is None:
            if self.round_number >= self.max_rounds:
                return GameOutcome.ROUND_LIMIT
            return None
        if self.max_rounds is not None and self.round_number >= self.max_rounds:
            return GameOutcome.ROUND_LIMIT

        self._say("Do you want to continue playing? (Y/N) ")
        response = self.input_source.prompt_choice("Y", "N")
        if response.upper() != "Y":
            return GameOutcome.CASHED_OUT
        return None

    @property
    def profit(self) -> int:
        """The human's winnings relative to the starting bankroll."""
        if self.human is None:
            return 0
        return self.human.bankroll - self.table.starting_bank

    def result_message(self) -> str:
        """End-of-game message for the human."""
        if self.human is None:
            return f"Game over after {self.round_number} round(s)."
        if self.outcome == GameOutcome.BANKRUPT:
            return "Oh No! You went bankrupt! Game over :("
        if self.profit > 0:
            return f"Congrats! You made ${self.profit}!"
        if self.profit == 0:
            return "You broke even!"
        return f"Unfortunately, you lost ${-self.profit} :("

    def _say(self, text: str):
        self.output.display(text)
