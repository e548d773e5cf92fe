"""Tests for crystalcell.structures — the built-in unit cells."""

import pytest

from crystalcell.structures import (
    STRUCTURES,
    available_structures,
    get_structure,
)


class TestRegistry:
    def test_ids(self):
        assert available_structures() == [
            "diamond", "dryice", "sic", "nacl", "cscl", "zns", "caf2", "graphite",
        ]

    def test_keys_match_ids(self):
        for key, structure in STRUCTURES.items():
            assert structure.id == key

    def test_get_structure(self):
        assert get_structure("nacl").name == "Sodium Chloride"

    def test_unknown(self):
        with pytest.raises(KeyError, match="available"):
            get_structure("unobtainium")


class TestBuiltinContents:
    @pytest.mark.parametrize("structure_id, n_atoms, elements", [
        ("diamond", 18, ["C"]),
        ("dryice", 42, ["C", "O"]),
        ("sic", 18, ["C", "Si"]),
        ("nacl", 27, ["Cl", "Na"]),
        ("cscl", 9, ["Cl", "Cs"]),
        ("zns", 18, ["S", "Zn"]),
        ("caf2", 22, ["Ca", "F"]),
        ("graphite", 15, ["C"]),
    ])
    def test_atoms(self, structure_id, n_atoms, elements):
        structure = get_structure(structure_id)
        assert structure.n_atoms == n_atoms
        assert structure.elements == elements

    def test_metadata_present(self, builtin_structure):
        assert builtin_structure.name
        assert builtin_structure.description
        assert builtin_structure.coordination

    def test_no_duplicate_positions(self, builtin_structure):
        positions = [(a.x, a.y, a.z) for a in builtin_structure.atoms]
        assert len(set(positions)) == len(positions)

    def test_graphite_is_hexagonal(self):
        cell = get_structure("graphite").cell
        assert (cell.a, cell.c, cell.gamma) == (2.46, 6.70, 120.0)
