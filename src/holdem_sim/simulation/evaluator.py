"""Hand evaluation for poker simulation.

Every hand maps to a single float. Each category owns a disjoint band
(high card 0-15, one pair 15-30, ... straight flush 120-135) and the
fractional part breaks ties inside the band. Kickers are weighted
``rank / 100 ** position`` so one higher kicker always beats any
combination of lower ones.

The evaluator looks at every held card rather than picking the best five
out of seven, so a few rare hands (two sets of trips, for one) score
differently than a strict best-five ranking would.
"""

from collections import Counter
from enum import IntEnum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from holdem_sim.config import HAND_SIZE, TOTAL_CARDS
from holdem_sim.models.card import Card

MIN_CARDS = 2

ROYAL_FLUSH_SCORE = 134


class HandRank(IntEnum):
    """Hand rankings from worst to best, valued by the base of their band."""
    HIGH_CARD = 0
    ONE_PAIR = 15
    TWO_PAIR = 30
    THREE_OF_A_KIND = 45
    STRAIGHT = 60
    FLUSH = 75
    FULL_HOUSE = 90
    FOUR_OF_A_KIND = 105
    STRAIGHT_FLUSH = 120
    ROYAL_FLUSH = 134


LABELS: Dict[HandRank, str] = {
    HandRank.ROYAL_FLUSH: "Royal Flush!!!",
    HandRank.STRAIGHT_FLUSH: "Straight Flush!",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind!",
    HandRank.FULL_HOUSE: "Full House!",
    HandRank.FLUSH: "Flush!",
    HandRank.STRAIGHT: "Straight!",
    HandRank.THREE_OF_A_KIND: "Three of a Kind!",
    HandRank.TWO_PAIR: "Two Pair!",
    HandRank.ONE_PAIR: "Two of a Kind!",
    HandRank.HIGH_CARD: "High Card",
}


def score(cards: Sequence[Card], rank_counts: Optional[Mapping[int, int]] = None) -> float:
    """Score a hand of 2-7 cards. Higher is stronger.

    Args:
        cards: The held cards (hole cards plus any community cards).
        rank_counts: Optional precomputed rank -> count table for ``cards``.
            Entries with a zero count are ignored.

    Returns:
        The hand's strength score.
    """
    if not MIN_CARDS <= len(cards) <= TOTAL_CARDS:
        raise ValueError(f"Can only score {MIN_CARDS}-{TOTAL_CARDS} cards, got {len(cards)}")

    ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
    if rank_counts is None:
        rank_counts = Counter(c.rank for c in ordered)
    counts = sorted(((r, n) for r, n in rank_counts.items() if n > 0), reverse=True)

    straight_flush = _straight_flush_high(ordered)
    if straight_flush:
        return float(HandRank.STRAIGHT_FLUSH + straight_flush)

    four_of_a_kind = _duplicates(counts, 4, at_least=True)
    if four_of_a_kind:
        # Four of a kind ties are always broken by a single high card
        return HandRank.FOUR_OF_A_KIND + four_of_a_kind + _kicker_score(ordered, four_of_a_kind, 1)

    trips = _duplicates(counts, 3)
    pair = _duplicates(counts, 2, excluded=trips)
    if trips and pair:
        return HandRank.FULL_HOUSE + trips + pair / 100

    flush_cards = _flush_cards(ordered)
    if flush_cards:
        return HandRank.FLUSH + _kicker_score(flush_cards, 0, HAND_SIZE)

    straight = _straight_high(ordered)
    if straight:
        return float(HandRank.STRAIGHT + straight)

    if trips:
        return HandRank.THREE_OF_A_KIND + trips + _kicker_score(ordered, trips, HAND_SIZE - 3)

    high_pair, low_pair, kicker = _two_pair(counts)
    if low_pair:
        return HandRank.TWO_PAIR + high_pair + low_pair / 100 + kicker / 10000

    if pair:
        return HandRank.ONE_PAIR + pair + _kicker_score(ordered, pair, HAND_SIZE - 2)

    return HandRank.HIGH_CARD + _kicker_score(ordered, 0, HAND_SIZE)


def category(hand_score: float) -> HandRank:
    """Map a score back to its hand category."""
    if hand_score == ROYAL_FLUSH_SCORE:
        return HandRank.ROYAL_FLUSH
    for rank in (HandRank.STRAIGHT_FLUSH, HandRank.FOUR_OF_A_KIND, HandRank.FULL_HOUSE,
                 HandRank.FLUSH, HandRank.STRAIGHT, HandRank.THREE_OF_A_KIND,
                 HandRank.TWO_PAIR, HandRank.ONE_PAIR):
        if hand_score > rank:
            return rank
    return HandRank.HIGH_CARD


def best_hand_label(hand_score: float) -> str:
    """Get a human-readable name for the category of a score."""
    return LABELS[category(hand_score)]


def _duplicates(counts: List[Tuple[int, int]], num_dupes: int, excluded: int = 0,
                at_least: bool = False) -> int:
    """Return the highest rank held exactly ``num_dupes`` times, 0 if none.

    With ``at_least`` any count of ``num_dupes`` or more matches, which a
    multi-deck shoe can produce. Ranks equal to ``excluded`` are skipped (the
    full house pair search passes the trip rank here).
    """
    for rank, count in counts:
        if rank != excluded and (count >= num_dupes if at_least else count == num_dupes):
            return rank
    return 0


def _two_pair(counts: List[Tuple[int, int]]) -> Tuple[int, int, int]:
    """Return (high pair, low pair, kicker), with zeros for missing parts."""
    pairs: List[int] = []
    kicker = 0
    for rank, count in counts:
        if count >= 2 and len(pairs) < 2:
            pairs.append(rank)
        elif rank > kicker:
            kicker = rank
    pairs.extend([0] * (2 - len(pairs)))
    return pairs[0], pairs[1], kicker


def _straight_high(ordered: Sequence[Card]) -> int:
    """Return the high card of the highest five-rank run, 0 if none."""
    ranks = sorted({c.rank for c in ordered}, reverse=True)
    run = 1
    for i in range(1, len(ranks)):
        if ranks[i - 1] == ranks[i] + 1:
            run += 1
            if run == HAND_SIZE:
                return ranks[i] + HAND_SIZE - 1
        else:
            run = 1
    return 0


def _straight_flush_high(ordered: Sequence[Card]) -> int:
    """Return the high card of the highest single-suit run, 0 if none."""
    suits = Counter(c.suit for c in ordered)
    best = 0
    for suit, count in suits.items():
        if count >= HAND_SIZE:
            best = max(best, _straight_high([c for c in ordered if c.suit == suit]))
    return best


def _flush_cards(ordered: Sequence[Card]) -> List[Card]:
    """Return the cards of the flush suit (highest first), empty if no flush."""
    suits = Counter(c.suit for c in ordered)
    for suit, count in suits.items():
        if count >= HAND_SIZE:
            return [c for c in ordered if c.suit == suit]
    return []


def _kicker_score(ordered: Sequence[Card], excluded: int, num_cards: int) -> float:
    """Weighted sum of the ``num_cards`` highest cards whose rank isn't ``excluded``."""
    total = 0.0
    position = 1
    for card in ordered:
        if position > num_cards:
            break
        if card.rank != excluded:
            total += card.rank / 100 ** position
            position += 1
    return total
