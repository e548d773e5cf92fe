"""Tests for crystalcell.construction.structure_io."""

import json
from dataclasses import replace

import pytest

from crystalcell.construction.structure_io import load_structures, save_structures
from crystalcell.model import Bond, BondType
from crystalcell.structures import DIAMOND, GRAPHITE, STRUCTURES


class TestStructureIO:
    def test_round_trip_builtins(self, tmp_path):
        path = tmp_path / "structures.json"
        save_structures(path, STRUCTURES.values())
        loaded = load_structures(path)
        assert list(loaded) == list(STRUCTURES)
        assert loaded == STRUCTURES

    def test_predefined_bonds_preserved(self, tmp_path, make_structure):
        s = make_structure([("C", 0, 0, 0), ("O", 0.2, 0, 0)], id="co")
        s = replace(s, bonds=(Bond(0, 1, BondType.DOUBLE),))
        path = tmp_path / "co.json"
        save_structures(path, [s])
        assert load_structures(path)["co"].bonds == (Bond(0, 1, BondType.DOUBLE),)

    def test_file_layout(self, tmp_path):
        path = tmp_path / "structures.json"
        save_structures(str(path), [GRAPHITE])
        data = json.loads(path.read_text(encoding="utf-8"))
        assert list(data) == ["structures"]
        assert data["structures"][0]["id"] == "graphite"
        assert data["structures"][0]["cell"]["gamma"] == 120.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "structures.json"
        path.write_text("{}")
        assert load_structures(path) == {}

    def test_unknown_top_level_key(self, tmp_path):
        path = tmp_path / "structures.json"
        path.write_text('{"structures": [], "bonds": []}')
        with pytest.raises(ValueError, match="unknown top-level keys"):
            load_structures(path)

    def test_duplicate_id(self, tmp_path):
        path = tmp_path / "structures.json"
        save_structures(path, [DIAMOND, DIAMOND])
        with pytest.raises(ValueError, match="duplicate structure id 'diamond'"):
            load_structures(path)
