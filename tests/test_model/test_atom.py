"""Tests for Atom validation, translation and serialisation."""

import numpy as np
import pytest

from crystalcell.model import Atom


class TestAtom:
    def test_coordinates_converted_to_float(self):
        atom = Atom("C", 0, 1, 0)
        assert isinstance(atom.y, float)

    def test_coordinates_outside_cell_allowed(self):
        atom = Atom("O", 0.0, 0.0, -0.115)
        assert atom.z == -0.115

    def test_empty_element_raises(self):
        with pytest.raises(ValueError, match="element"):
            Atom("", 0.0, 0.0, 0.0)

    def test_non_finite_coordinate_raises(self):
        with pytest.raises(ValueError, match="z must be finite"):
            Atom("C", 0.0, 0.0, float("inf"))

    def test_non_positive_radius_raises(self):
        with pytest.raises(ValueError, match="radius"):
            Atom("C", 0.0, 0.0, 0.0, radius=0.0)

    def test_frac(self):
        np.testing.assert_array_equal(Atom("C", 0.25, 0.5, 0.75).frac, [0.25, 0.5, 0.75])

    def test_translated_returns_new_atom(self):
        atom = Atom("Na", 0.5, 0.0, 0.5, colour="purple")
        moved = atom.translated(1, 0, 2)
        assert moved == Atom("Na", 1.5, 0.0, 2.5, colour="purple")
        assert atom.x == 0.5

    def test_frozen(self):
        atom = Atom("C", 0.0, 0.0, 0.0)
        with pytest.raises(AttributeError):
            atom.x = 1.0


class TestAtomDict:
    def test_overrides_omitted_when_unset(self):
        d = Atom("C", 0.0, 0.5, 1.0).to_dict()
        assert d == {"element": "C", "x": 0.0, "y": 0.5, "z": 1.0}

    def test_overrides_included_when_set(self):
        d = Atom("C", 0.0, 0.0, 0.0, colour="#333333", radius=0.7).to_dict()
        assert d["colour"] == "#333333"
        assert d["radius"] == 0.7

    def test_round_trip(self):
        atom = Atom("Cl", 0.5, 0.5, 0.5, radius=1.8)
        assert Atom.from_dict(atom.to_dict()) == atom
