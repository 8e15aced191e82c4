"""Deck management for poker simulation."""

from typing import List, Tuple

from holdem_sim.collaborators import RandomSource
from holdem_sim.models.card import Card, Rank, Suit


class Deck:
    """One or more standard 52-card decks stacked together, like a casino shoe."""

    def __init__(self, num_decks: int = 1):
        """Initialize the deck in rank-then-suit order.

        Args:
            num_decks: Number of 52-card decks to combine.
        """
        if num_decks < 1:
            raise ValueError(f"Need at least one deck, got {num_decks}")
        self.num_decks = num_decks
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        """Reset to the full, unshuffled set of cards."""
        self.cards = [
            Card(rank, suit)
            for _ in range(self.num_decks)
            for rank in Rank
            for suit in Suit
        ]

    def shuffle(self, rng: RandomSource):
        """Shuffle the deck in place."""
        rng.shuffle(self.cards)

    def deal(self) -> Card:
        """Deal the top card.

        Returns:
            The dealt card.
        """
        if not self.cards:
            raise ValueError("Cannot deal from an empty deck")
        return self.cards.pop(0)

    def burn(self, count: int = 1):
        """Discard cards from the top of the deck.

        Args:
            count: Number of cards to discard.
        """
        if count > len(self.cards):
            raise ValueError(f"Not enough cards to burn. Need {count}, have {len(self.cards)}")
        del self.cards[:count]

    def as_tuple(self) -> Tuple[Card, ...]:
        """Snapshot of the remaining cards."""
        return tuple(self.cards)

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
