"""Hand model: the cards held by one participant during a round."""

from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from holdem_sim.models.card import Card


class Hand:
    """The cards owned by a single player.

    Cards arrive in deal order: the two hole cards first, then community
    cards as they are revealed. A rank -> count table is kept in step with
    the card list so scoring never has to rebuild it.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = []
        self._rank_counts: Dict[int, int] = {}
        self.add_cards(cards)

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self._cards.append(card)
        self._rank_counts[card.rank] = self._rank_counts.get(card.rank, 0) + 1

    def remove(self, card: Card) -> None:
        """Remove one copy of a card from the hand.

        Raises:
            ValueError: If the card is not held.
        """
        self._cards.remove(card)
        remaining = self._rank_counts[card.rank] - 1
        if remaining:
            self._rank_counts[card.rank] = remaining
        else:
            del self._rank_counts[card.rank]

    def add_cards(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.add(card)

    def remove_cards(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.remove(card)

    def clear(self) -> None:
        """Drop every card, ready for a new round."""
        self._cards.clear()
        self._rank_counts.clear()

    def copy(self) -> "Hand":
        """Return a detached hand holding the same cards."""
        return Hand(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def rank_counts(self) -> Mapping[int, int]:
        """Read-only view of the rank -> count table."""
        return MappingProxyType(self._rank_counts)

    @property
    def opening_hand(self) -> Tuple[Card, Card]:
        """The two hole cards, highest rank first.

        Raises:
            ValueError: If fewer than two cards have been dealt.
        """
        if len(self._cards) < 2:
            raise ValueError("Opening hand needs two dealt cards")
        first, second = self._cards[0], self._cards[1]
        if second.rank > first.rank:
            first, second = second, first
        return first, second

    @property
    def is_suited(self) -> bool:
        first, second = self.opening_hand
        return first.suit == second.suit

    def score(self) -> float:
        """Score the hand with the evaluator. Does not modify the hand."""
        from holdem_sim.simulation.evaluator import score
        return score(self._cards, self._rank_counts)

    def label(self) -> str:
        """Name of the hand's category, e.g. 'Full House!'."""
        from holdem_sim.simulation.evaluator import best_hand_label
        return best_hand_label(self.score())

    def check_invariant(self) -> bool:
        """Check the incremental rank counts against the held cards."""
        return Counter(c.rank for c in self._cards) == Counter(self._rank_counts)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        if len(self._cards) < 2:
            return "[" + ", ".join(c.long_name for c in self._cards) + "]"
        return "[" + ", ".join(c.long_name for c in self.opening_hand) + "]"

    def __repr__(self) -> str:
        return f"Hand({' '.join(repr(c) for c in self._cards)})"
