"""Simulation data models for a game of Texas Hold'em."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from holdem_sim import config
from holdem_sim.models.card import Card


class Street(str, Enum):
    """Betting round phases."""
    ANTE = "ante"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"


# Streets that reveal community cards, in order
DEAL_STREETS = (Street.FLOP, Street.TURN, Street.RIVER)


class GameOutcome(str, Enum):
    """Why a game session ended."""
    CASHED_OUT = "cashed_out"
    BANKRUPT = "bankrupt"
    LAST_STANDING = "last_standing"
    ROUND_LIMIT = "round_limit"


@dataclass
class TableConfig:
    """Per-game table settings."""
    small_blind: int = config.SMALL_BLIND
    big_blind: int = config.BIG_BLIND
    num_decks: int = config.NUM_DECKS
    community_cards: tuple = config.COMMUNITY_CARDS
    burn_per_street: int = config.BURN_PER_STREET
    starting_bank: int = config.STARTING_BANK
    min_opp_bankroll: int = config.MIN_OPP_BANKROLL
    max_opp_bankroll: int = config.MAX_OPP_BANKROLL
    num_opponents: int = config.NUM_OPPONENTS
    ai_raise: int = config.AI_RAISE
    ai_bluff: float = config.AI_BLUFF

    def __post_init__(self):
        if self.num_decks < 1:
            raise ValueError(f"Need at least one deck, got {self.num_decks}")
        if not 0 < self.small_blind <= self.big_blind:
            raise ValueError("Blinds must satisfy 0 < small blind <= big blind")
        if len(self.community_cards) != len(DEAL_STREETS):
            raise ValueError("Community cards must list one count per street")
        if min(self.starting_bank, self.min_opp_bankroll, self.max_opp_bankroll) <= 0:
            raise ValueError("Bankrolls must be positive")
        if self.min_opp_bankroll > self.max_opp_bankroll:
            raise ValueError("Minimum opponent bankroll exceeds the maximum")


@dataclass
class RoundState:
    """Betting state for a single round."""
    call_cost: int
    pot: int = 0
    num_players_in_round: int = 0
    num_players_all_in: int = 0
    community: List[Card] = field(default_factory=list)
    street: Street = Street.ANTE
