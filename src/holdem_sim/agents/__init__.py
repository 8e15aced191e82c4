"""Seat agents and AI decision making."""

from holdem_sim.agents.preflop import PreflopMove, PreflopPolicyTable, get_preflop_table
from holdem_sim.agents.decision import AIDecisionEngine, Decision, DecisionType
from holdem_sim.agents.base import SeatAgent, AIAgent, HumanAgent
from holdem_sim.agents.factory import OpponentFactory

__all__ = ["PreflopMove", "PreflopPolicyTable", "get_preflop_table",
           "AIDecisionEngine", "Decision", "DecisionType",
           "SeatAgent", "AIAgent", "HumanAgent", "OpponentFactory"]
