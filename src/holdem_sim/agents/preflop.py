"""Pre-flop lookup table used by the AI before any community card is shown."""

import json
import os
from enum import Enum
from functools import lru_cache
from itertools import combinations_with_replacement
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from holdem_sim.models.card import Rank

# 13 pocket pairs + 78 distinct-rank hands
TABLE_SIZE = 91

DEFAULT_TABLE_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),
    "data",
    "preflop_table.json"
)


class PreflopMove(str, Enum):
    """What the table recommends for an opening hand."""
    RAISE = "RAISE"
    CALL = "CALL"
    FOLD = "FOLD"


class PreflopPolicyTable:
    """Read-only mapping from an opening hand to a (suited, offsuit) move pair.

    Keys are ``(high rank, low rank)`` with ``high >= low``.
    """

    def __init__(self, entries: Mapping[Tuple[int, int], Tuple[PreflopMove, PreflopMove]]):
        expected = set(combinations_with_replacement(sorted(Rank, reverse=True), 2))
        missing = expected - set(entries)
        if missing:
            raise ValueError(f"Preflop table is missing {len(missing)} hand(s), e.g. {_key_label(min(missing))}")
        extra = set(entries) - expected
        if extra:
            raise ValueError(f"Preflop table has unknown hand(s), e.g. {_key_label(min(extra))}")
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_json(cls, data: Dict[str, list]) -> "PreflopPolicyTable":
        """Build a table from ``{"AK": ["RAISE", "RAISE"], ...}`` data."""
        entries: Dict[Tuple[int, int], Tuple[PreflopMove, PreflopMove]] = {}
        for label, moves in data.items():
            if len(label) != 2 or len(moves) != 2:
                raise ValueError(f"Malformed preflop entry: {label!r}: {moves!r}")
            first, second = Rank.from_char(label[0]), Rank.from_char(label[1])
            key = (max(first, second), min(first, second))
            if key in entries:
                raise ValueError(f"Duplicate preflop entry: {label}")
            entries[key] = (PreflopMove(moves[0]), PreflopMove(moves[1]))
        return cls(entries)

    @property
    def entries(self) -> Mapping[Tuple[int, int], Tuple[PreflopMove, PreflopMove]]:
        return self._entries

    def lookup(self, high: int, low: int, suited: bool) -> PreflopMove:
        """Get the recommended move for an opening hand."""
        if high < low:
            high, low = low, high
        suited_move, offsuit_move = self._entries[(high, low)]
        return suited_move if suited else offsuit_move

    def __len__(self) -> int:
        return len(self._entries)


def load_table(path: Optional[str] = None) -> PreflopPolicyTable:
    """Load and validate a table from a JSON file."""
    path = path or DEFAULT_TABLE_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return PreflopPolicyTable.from_json(data)


@lru_cache(maxsize=1)
def get_preflop_table() -> PreflopPolicyTable:
    """Get the packaged table, loaded once per process."""
    return load_table()


def _key_label(key: Tuple[int, int]) -> str:
    return Rank(key[0]).char + Rank(key[1]).char
