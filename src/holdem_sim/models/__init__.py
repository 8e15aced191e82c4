"""Data models for the Hold'em simulator."""

from holdem_sim.models.card import Card, Rank, Suit
from holdem_sim.models.hand import Hand
from holdem_sim.models.player import Player
from holdem_sim.models.simulation import (
    Street, GameOutcome, TableConfig, RoundState, DEAL_STREETS
)

__all__ = [
    "Card", "Rank", "Suit",
    "Hand",
    "Player",
    "Street", "GameOutcome", "TableConfig", "RoundState", "DEAL_STREETS",
]
