"""Tests for the pre-flop lookup table."""

import json

import pytest

from holdem_sim.agents.preflop import (
    DEFAULT_TABLE_PATH, TABLE_SIZE, PreflopMove, PreflopPolicyTable,
    get_preflop_table, load_table
)
from holdem_sim.models.card import Rank


@pytest.fixture
def raw_table():
    with open(DEFAULT_TABLE_PATH, encoding="utf-8") as f:
        return json.load(f)


class TestPackagedTable:
    """Tests for the table shipped with the package."""

    def test_has_every_opening_hand(self):
        table = get_preflop_table()
        assert len(table) == TABLE_SIZE == 91
        for high in Rank:
            for low in Rank:
                if low <= high:
                    assert (high, low) in table.entries

    def test_loaded_once(self):
        assert get_preflop_table() is get_preflop_table()

    def test_read_only(self):
        table = get_preflop_table()
        with pytest.raises(TypeError):
            table.entries[(14, 14)] = (PreflopMove.FOLD, PreflopMove.FOLD)

    @pytest.mark.parametrize("high,low,suited,move", [
        (Rank.ACE, Rank.ACE, False, PreflopMove.RAISE),
        (Rank.ACE, Rank.KING, False, PreflopMove.RAISE),
        (Rank.ACE, Rank.SIX, True, PreflopMove.CALL),
        (Rank.ACE, Rank.SIX, False, PreflopMove.FOLD),
        (Rank.KING, Rank.TEN, True, PreflopMove.RAISE),
        (Rank.KING, Rank.TEN, False, PreflopMove.CALL),
        (Rank.SEVEN, Rank.TWO, False, PreflopMove.FOLD),
        (Rank.TWO, Rank.TWO, False, PreflopMove.CALL),
    ])
    def test_lookup(self, high, low, suited, move):
        assert get_preflop_table().lookup(high, low, suited) == move

    def test_lookup_any_order(self):
        table = get_preflop_table()
        assert table.lookup(Rank.SIX, Rank.ACE, True) == table.lookup(Rank.ACE, Rank.SIX, True)

    def test_pairs_play_the_same_either_way(self, raw_table):
        for label, (suited, offsuit) in raw_table.items():
            if label[0] == label[1]:
                assert suited == offsuit


class TestValidation:
    """Tests for rejecting bad tables."""

    def test_missing_entry(self, raw_table):
        del raw_table["72"]
        with pytest.raises(ValueError, match="missing"):
            PreflopPolicyTable.from_json(raw_table)

    def test_duplicate_entry(self, raw_table):
        raw_table["27"] = ["FOLD", "FOLD"]
        with pytest.raises(ValueError, match="Duplicate"):
            PreflopPolicyTable.from_json(raw_table)

    def test_malformed_entry(self, raw_table):
        raw_table["AK"] = ["RAISE"]
        with pytest.raises(ValueError):
            PreflopPolicyTable.from_json(raw_table)

    def test_unknown_move(self, raw_table):
        raw_table["AK"] = ["SHOVE", "RAISE"]
        with pytest.raises(ValueError):
            PreflopPolicyTable.from_json(raw_table)

    def test_load_from_file(self, raw_table, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps(raw_table), encoding="utf-8")
        assert len(load_table(str(path))) == TABLE_SIZE
