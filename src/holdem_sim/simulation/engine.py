"""Betting engine: plays one round of Texas Hold'em from deal to showdown."""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from holdem_sim.collaborators import NullOutput, OutputSink, RandomSource
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import DEAL_STREETS, RoundState, Street, TableConfig
from holdem_sim.agents.base import SeatAgent
from holdem_sim.agents.decision import Decision, DecisionType
from holdem_sim.simulation.deck import Deck
from holdem_sim.simulation.pot import PotResolver, Settlement

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of a finished round."""
    state: RoundState
    settlement: Settlement
    decisions: int = 0

    @property
    def winners(self) -> List[Player]:
        return self.settlement.winners

    @property
    def pot(self) -> int:
        return self.state.pot


def format_names(players: Sequence[Player]) -> str:
    """Join player names for narration: 'A, B, C'."""
    return ", ".join(p.name for p in players)


class BettingEngine:
    """Runs the betting state machine for a single round.

    Each street walks the table twice from the first player so every raise
    can be answered: raising is only open on the first lap, and the second
    lap only visits players who still owe chips.
    """

    def __init__(
        self,
        players: Sequence[Player],
        agents: Mapping[Player, SeatAgent],
        table: Optional[TableConfig] = None,
        rng: Optional[RandomSource] = None,
        output: Optional[OutputSink] = None,
        resolver: Optional[PotResolver] = None,
    ):
        """Initialize the betting engine.

        Args:
            players: Players in seat order. Bankrolls persist across rounds.
            agents: The agent deciding for each player.
            table: Table settings.
            rng: Shuffles the deck each round.
            output: Receives narration.
            resolver: Distributes the pot at showdown.
        """
        if rng is None:
            raise ValueError("BettingEngine needs a RandomSource")
        missing = [p.name for p in players if p not in agents]
        if missing:
            raise ValueError(f"No agent for player(s): {', '.join(missing)}")
        self.players = list(players)
        self.agents = agents
        self.table = table or TableConfig()
        self.rng = rng
        self.output = output or NullOutput()
        self.resolver = resolver or PotResolver()
        self.state: Optional[RoundState] = None
        self.decisions = 0

    def play_round(self, first_player: int = 0) -> RoundResult:
        """Play a full round: blinds, flop, turn, river and showdown.

        Args:
            first_player: Seat index (mod table size) that posts the small blind.

        Returns:
            The round's final state and settlement.
        """
        if len(self.players) < 2:
            raise ValueError("A round needs at least two players")

        num_players = len(self.players)
        self.state = RoundState(call_cost=self.table.big_blind,
                                num_players_in_round=num_players)
        self.decisions = 0

        deck = Deck(self.table.num_decks)
        deck.shuffle(self.rng)

        self._say("Dealing cards...")
        for player in self.players:
            player.reset()
            for _ in range(2):
                player.hand.add(deck.deal())

        for player in self.players:
            if player.is_human:
                self._say(f"Your starting hand is {player.hand}")

        logger.debug("Round starts with %d players, first player %d, %d cards left",
                     num_players, first_player, deck.remaining)
        self._betting_loop(first_player, start=0)

        for street, num_cards in zip(DEAL_STREETS, self.table.community_cards):
            if self.state.num_players_in_round == 1:
                break
            self.state.street = street
            logger.debug("Street %s, pot %d, call cost %d", street.value,
                         self.state.pot, self.state.call_cost)

            self._say("")
            self._say("Time to reveal new cards!")
            self._say("Burning one card...")
            self._say(f"Now, adding {num_cards} new card(s) to the community...")
            deck.burn(self.table.burn_per_street)
            for _ in range(num_cards):
                card = deck.deal()
                self.state.community.append(card)
                for player in self.players:
                    player.hand.add(card)
            self._say("The community is now comprised of: "
                      f"[{', '.join(c.long_name for c in self.state.community)}]")

            self._betting_loop(first_player, start=2)

        return self._showdown()

    def _betting_loop(self, first_player: int, start: int):
        """Walk the table twice from ``first_player``.

        Offsets 0 and 1 only exist on the ante street and post the blinds.
        """
        state = self.state
        num_players = len(self.players)

        for i in range(start, 2 * num_players + 1):
            if state.num_players_in_round == 1:
                break

            player = self.players[(i + first_player) % num_players]

            if state.street == Street.ANTE:
                if i < num_players:
                    self._say(f"{player.name} has entered the round with a bankroll of ${player.bankroll}")
                if i == 0:
                    self._post_blind(player, self.table.small_blind, "small")
                    continue
                if i == 1:
                    self._post_blind(player, self.table.big_blind, "big")
                    continue

            can_raise = i < num_players + 2 and state.num_players_in_round - state.num_players_all_in > 1

            if player.cannot_play(state.call_cost, can_raise):
                continue

            init_bet = player.bet
            decision = self.agents[player].decide(player, state.call_cost, can_raise, state)
            self.decisions += 1
            logger.debug("%s decides %s %d (%s)", player.name, decision.decision_type.value,
                         decision.amount, decision.reasoning)
            state.call_cost = self.apply(player, decision, can_raise)

            if player.has_folded:
                state.num_players_in_round -= 1
            else:
                state.pot += player.bet - init_bet

            if player.is_bankrupt:
                state.num_players_all_in += 1

    def _post_blind(self, player: Player, amount: int, which: str):
        self._say(f"They're {which} blind and ante {amount} chips")
        self.state.pot += player.sub_from_bankroll(amount)
        if player.is_bankrupt:
            self.state.num_players_all_in += 1

    def apply(self, player: Player, decision: Decision, can_raise: bool = True) -> int:
        """Apply a decision to a player.

        Returns:
            The call cost after the action.
        """
        call_cost = self.state.call_cost
        if decision.decision_type == DecisionType.RAISE and can_raise:
            return self._raise(player, call_cost, decision.amount)
        if decision.decision_type == DecisionType.FOLD:
            return self._fold(player, call_cost)
        return self._call(player, call_cost)

    def _raise(self, player: Player, call_cost: int, raise_by: int) -> int:
        # Raises the player can't cover fall back to a call
        if raise_by <= 0 or call_cost + raise_by > player.bankroll + player.bet:
            return self._call(player, call_cost)

        new_call_cost = call_cost + raise_by
        self._say(f"{player.name} has decided to raise the bet by ${raise_by}!")
        self._say(f"The current bet is now set at ${new_call_cost}")
        player.sub_from_bankroll(new_call_cost - player.bet)
        return new_call_cost

    def _call(self, player: Player, call_cost: int) -> int:
        if call_cost == player.bet:
            self._say(f"{player.name} has decided to check")
        elif call_cost == player.bet + player.bankroll:
            self._say(f"{player.name} has decided to go all in to call!")
        elif call_cost > player.bet + player.bankroll:
            self._say(f"{player.name} has decided to go all in to match part of the bet!")
            player.side_pot_only = True
        else:
            self._say(f"{player.name} has decided to call")
        player.sub_from_bankroll(call_cost - player.bet)
        return call_cost

    def _fold(self, player: Player, call_cost: int) -> int:
        self._say(f"{player.name} has decided to fold!")
        player.has_folded = True
        return call_cost

    def _showdown(self) -> RoundResult:
        state = self.state
        state.street = Street.SHOWDOWN

        self._say("")
        self._say("Betting has concluded. Everyone must now show their hands!")
        for player in self.players:
            self._say(player.showdown_line())

        settlement = self.resolver.resolve(self.players, state.num_players_in_round, state.pot)
        for payout in settlement.side_pot_payouts:
            self._say(f"{payout.player.name} wins ${payout.amount} in a side pot!")
        self._say(f"The main pot winner(s) of this round are: {format_names(settlement.winners)}!")

        return RoundResult(state=state, settlement=settlement, decisions=self.decisions)

    def _say(self, text: str):
        self.output.display(text)
