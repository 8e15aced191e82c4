"""Pot resolution for poker simulation."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from holdem_sim.models.player import Player

logger = logging.getLogger(__name__)


class PotResolutionError(RuntimeError):
    """Raised when chips are left in the pot with nobody to pay."""


@dataclass
class Payout:
    """Chips paid to one player at showdown."""
    player: Player
    amount: int
    side_pot: bool = False


@dataclass
class Settlement:
    """Result of distributing a pot."""
    winners: List[Player] = field(default_factory=list)
    payouts: List[Payout] = field(default_factory=list)

    def total_for(self, player: Player) -> int:
        return sum(p.amount for p in self.payouts if p.player is player)

    @property
    def side_pot_payouts(self) -> List[Payout]:
        return [p for p in self.payouts if p.side_pot]


class PotResolver:
    """Distributes the pot to the best hands, capping side-pot-only winners.

    Players are ranked by (not folded, score), best first. The best tier
    (same folded status and score) takes the pot. If anyone in that tier went
    all in short of the bet, the tier's take is capped at the short bet times
    the players still in the round times the tier size, and the rest goes to
    the next tier down.
    """

    def resolve(self, players: Sequence[Player], num_players_in_round: int,
                pot: int) -> Settlement:
        """Pay out ``pot`` and return who won.

        Args:
            players: Every player dealt into the round.
            num_players_in_round: Players who did not fold.
            pot: Chips to distribute.

        Returns:
            The final winning tier and every payout made.
        """
        scores: Dict[int, float] = {id(p): p.score() for p in players}

        def rank_key(player: Player):
            return (not player.has_folded, scores[id(player)])

        remaining = sorted(players, key=rank_key, reverse=True)
        settlement = Settlement()

        while pot > 0:
            if not remaining:
                raise PotResolutionError(f"{pot} chips left in the pot with no players to pay")

            head_key = rank_key(remaining[0])
            tier = [p for p in remaining if rank_key(p) == head_key]

            short = [p for p in tier if p.side_pot_only]
            if short:
                capped = min(p.bet for p in short) * num_players_in_round * len(tier)
                entitlement = min(capped, pot)
            else:
                entitlement = pot

            is_side_pot = entitlement < pot
            left = entitlement
            for i, player in enumerate(tier):
                share = -(-left // (len(tier) - i))
                left -= share
                player.add_to_bankroll(share)
                settlement.payouts.append(Payout(player, share, is_side_pot))
                remaining.remove(player)
                logger.info("%s wins %d%s", player.name, share, " (side pot)" if is_side_pot else "")

            pot -= entitlement
            settlement.winners = tier

        return settlement
