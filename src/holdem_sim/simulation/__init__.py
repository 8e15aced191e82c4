"""Poker simulation module.

The betting engine and game session live in ``holdem_sim.simulation.engine``
and ``holdem_sim.simulation.session``; they depend on the agents package,
which in turn uses the deck and evaluator exported here.
"""

from holdem_sim.simulation.deck import Deck
from holdem_sim.simulation.evaluator import HandRank, best_hand_label, category, score
from holdem_sim.simulation.pot import Payout, PotResolutionError, PotResolver, Settlement

__all__ = ["Deck", "HandRank", "best_hand_label", "category", "score",
           "Payout", "PotResolutionError", "PotResolver", "Settlement"]
