"""Player model for the simulated table."""

from dataclasses import dataclass, field

from holdem_sim.models.hand import Hand


@dataclass(eq=False)
class Player:
    """A seat at the table, human or AI.

    Chips only move through ``sub_from_bankroll`` (bankroll -> bet) and
    ``add_to_bankroll`` (winnings). Everything except name, bankroll and
    ``is_human`` is reset at the start of each round.
    """
    name: str
    bankroll: int
    is_human: bool = False
    bet: int = 0
    has_folded: bool = False
    # All in without matching the bet: may only win a capped share of the pot
    side_pot_only: bool = False
    hand: Hand = field(default_factory=Hand)

    def __post_init__(self):
        if self.bankroll < 0:
            raise ValueError(f"Bankroll cannot be negative: {self.bankroll}")

    def sub_from_bankroll(self, amount: int) -> int:
        """Move chips from the bankroll into this round's bet.

        The move is clamped to the bankroll, so a short stack goes all in
        rather than negative.

        Args:
            amount: Chips requested.

        Returns:
            The chips actually moved.
        """
        if amount < 0:
            raise ValueError(f"Cannot bet a negative amount: {amount}")
        moved = min(amount, self.bankroll)
        self.bankroll -= moved
        self.bet += moved
        return moved

    def add_to_bankroll(self, amount: int) -> int:
        """Credit winnings. Returns the amount added."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        self.bankroll += amount
        return amount

    def reset(self) -> None:
        """Clear per-round state."""
        self.bet = 0
        self.has_folded = False
        self.side_pot_only = False
        self.hand.clear()

    @property
    def is_bankrupt(self) -> bool:
        """True once the bankroll is spent (all in during a round)."""
        return self.bankroll <= 0

    @property
    def is_all_in(self) -> bool:
        return self.is_bankrupt and not self.has_folded

    def score(self) -> float:
        return self.hand.score()

    def max_raise(self, call_cost: int) -> int:
        """Largest raise this player can cover on top of ``call_cost``."""
        return self.bankroll + self.bet - call_cost

    def cannot_play(self, call_cost: int, can_raise: bool) -> bool:
        """Check whether this seat has no decision to make.

        A folded or all-in player never acts, nor does one who already
        matches the bet when raising is closed. An all-in player whose bet
        has since been raised past is flagged side-pot-only here.
        """
        if self.is_bankrupt and call_cost > self.bet:
            self.side_pot_only = True
        return self.has_folded or self.is_all_in or (call_cost == self.bet and not can_raise)

    def showdown_line(self) -> str:
        """Describe the player's cards and best hand at showdown."""
        if self.has_folded:
            return f"{self.name} folded, but they had unique cards {self.hand} and a {self.hand.label()}"
        return f"{self.name} has unique cards {self.hand} and a {self.hand.label()}"

    def __str__(self) -> str:
        return self.name
