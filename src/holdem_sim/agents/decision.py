"""Decision engine for AI-controlled players."""

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import Optional, Sequence, Tuple

from holdem_sim import config
from holdem_sim.collaborators import RandomSource
from holdem_sim.models.card import Card
from holdem_sim.models.hand import Hand
from holdem_sim.models.player import Player
from holdem_sim.agents.preflop import PreflopMove, PreflopPolicyTable
from holdem_sim.simulation.deck import Deck

logger = logging.getLogger(__name__)


class DecisionType(str, Enum):
    """Types of decisions a seat can make."""
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"


@dataclass
class Decision:
    """A decision made by a seat. ``amount`` is the raise size for RAISE."""
    decision_type: DecisionType
    amount: int = 0
    reasoning: str = ""


def sample_pool(num_decks: int = config.NUM_SAMPLE_DECKS) -> Tuple[Card, ...]:
    """Unshuffled cards the AI draws hypothetical completions from."""
    return Deck(num_decks).as_tuple()


def score_percentile(avg_score: float) -> float:
    """Estimate the share of hands worse than one with this expected score.

    Thresholds follow the seven-card hand frequency tables; one pair is
    spread across its pair rank because that band covers so much ground.
    """
    if avg_score > 90:
        return .97
    if avg_score > 75:
        return .94
    if avg_score > 60:
        return .9
    if avg_score > 45:
        return .85
    if avg_score > 30:
        return .6
    if avg_score > 15:
        return .2 + (avg_score - 17) * .03
    if avg_score > 14:
        return .1
    return .05


class AIDecisionEngine:
    """Chooses fold/call/raise for an AI player.

    Pre-flop play follows a lookup table. After the flop the engine averages
    the scores of every way the hand could be completed, turns that into a
    chance of beating the rest of the table, and sizes its bet against the pot.
    """

    def __init__(
        self,
        policy: PreflopPolicyTable,
        rng: RandomSource,
        ai_raise: int = config.AI_RAISE,
        ai_bluff: float = config.AI_BLUFF,
        pool: Optional[Sequence[Card]] = None,
    ):
        """Initialize the decision engine.

        Args:
            policy: The pre-flop lookup table.
            rng: Source of bluffing randomness.
            ai_raise: Fixed raise size for table raises and bluffs.
            ai_bluff: Probability of bluffing at each bluff check.
            pool: Cards to draw completions from. Defaults to an unshuffled deck.
        """
        self.policy = policy
        self.rng = rng
        self.ai_raise = ai_raise
        self.ai_bluff = ai_bluff
        self.pool: Tuple[Card, ...] = tuple(pool) if pool is not None else sample_pool()

    def preflop(self, player: Player, call_cost: int, can_raise: bool) -> Decision:
        """Decide before the flop using the lookup table."""
        high, low = player.hand.opening_hand
        move = self.policy.lookup(high.rank, low.rank, suited=player.hand.is_suited)

        if can_raise and (move == PreflopMove.RAISE or self._bluff()):
            return Decision(DecisionType.RAISE, self.ai_raise, f"table says {move.value}")
        if move == PreflopMove.CALL or call_cost == player.bet or self._bluff():
            return Decision(DecisionType.CALL, reasoning=f"table says {move.value}")
        return Decision(DecisionType.FOLD, reasoning=f"table says {move.value}")

    def postflop(
        self,
        player: Player,
        call_cost: int,
        can_raise: bool,
        pot: int,
        num_players_in_round: int,
    ) -> Decision:
        """Decide after the flop from the hand's expected strength.

        Args:
            player: The AI player.
            call_cost: Current bet to match.
            can_raise: Whether raising is still open.
            pot: Chips in the pot before this action.
            num_players_in_round: Players who have not folded, this one included.

        Returns:
            The decision.
        """
        avg_score = self.expected_score(player.hand)
        percentile = score_percentile(avg_score)
        win_prob = percentile ** num_players_in_round
        optimal = int(min(player.max_raise(call_cost), pot * win_prob - player.bet))

        logger.debug("%s expects %.2f (p=%.3f, win=%.3f), optimal raise %d",
                     player.name, avg_score, percentile, win_prob, optimal)

        reasoning = f"expected score {avg_score:.2f}, win chance {win_prob:.1%}"
        if can_raise and optimal > 0:
            return Decision(DecisionType.RAISE, optimal, reasoning)
        if can_raise and self._bluff():
            return Decision(DecisionType.RAISE, self.ai_raise, "bluff")
        if optimal < 0 and player.bet < call_cost:
            return Decision(DecisionType.FOLD, reasoning=reasoning)
        return Decision(DecisionType.CALL, reasoning=reasoning)

    def expected_score(self, hand: Hand) -> float:
        """Average score over the current hand and every completion to seven cards.

        Works on a detached copy; ``hand`` is not modified.
        """
        lookahead = hand.copy()
        total = lookahead.score()
        count = 1
        missing = config.TOTAL_CARDS - len(lookahead)
        if missing > 0:
            for combo in combinations(self.pool, missing):
                lookahead.add_cards(combo)
                total += lookahead.score()
                count += 1
                lookahead.remove_cards(combo)
        return total / count

    def _bluff(self) -> bool:
        return self.rng.uniform() < self.ai_bluff
