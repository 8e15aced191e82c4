"""Seat agents: who decides for each player at the table."""

from abc import ABC, abstractmethod

from holdem_sim.collaborators import InputSource, OutputSink
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import RoundState, Street
from holdem_sim.agents.decision import AIDecisionEngine, Decision, DecisionType


class SeatAgent(ABC):
    """Abstract base class for anything that makes decisions for a seat."""

    @abstractmethod
    def decide(
        self,
        player: Player,
        call_cost: int,
        can_raise: bool,
        state: RoundState,
    ) -> Decision:
        """Make a decision for the current situation.

        Args:
            player: The player to act.
            call_cost: The bet the player must match.
            can_raise: Whether the player may raise.
            state: The round's betting state (street, pot, players left).

        Returns:
            The decision. A RAISE amount is the increase over ``call_cost``.
        """


class AIAgent(SeatAgent):
    """Plays a seat with the AI decision engine."""

    def __init__(self, engine: AIDecisionEngine):
        self.engine = engine

    def decide(self, player: Player, call_cost: int, can_raise: bool,
               state: RoundState) -> Decision:
        if state.street == Street.ANTE:
            return self.engine.preflop(player, call_cost, can_raise)
        return self.engine.postflop(player, call_cost, can_raise, state.pot,
                                    state.num_players_in_round)


class HumanAgent(SeatAgent):
    """Asks the human player what to do through an input source."""

    def __init__(self, input_source: InputSource, output: OutputSink):
        self.input_source = input_source
        self.output = output

    def decide(self, player: Player, call_cost: int, can_raise: bool,
               state: RoundState) -> Decision:
        max_raise = player.max_raise(call_cost)

        if can_raise:
            self.output.display(
                f"{player.name}, your hand contains {player.hand}, your bankroll is "
                f"${player.bankroll}, and you can raise up to ${max(max_raise, 0)}"
            )
            if max_raise > 0:
                self.output.display("Would you like to raise? If so, type how much. If not, type 0: ")
                raise_by = self.input_source.prompt_integer(max_raise)
                if raise_by > 0:
                    return Decision(DecisionType.RAISE, raise_by, "player raised")
        else:
            self.output.display(
                f"{player.name}, your hand contains {player.hand} and your bankroll is ${player.bankroll}"
            )

        if call_cost > player.bet:
            self.output.display(f"You need to put in {call_cost - player.bet} chips to call")
            self.output.display("Would you like to call or fold? (C/F) ")
            response = self.input_source.prompt_choice("C", "F")
            if response.upper() == "C":
                return Decision(DecisionType.CALL, reasoning="player called")
            return Decision(DecisionType.FOLD, reasoning="player folded")

        return Decision(DecisionType.CALL, reasoning="player checked")
