"""Tests for crystalcell.construction.slicing."""

import pytest

from crystalcell.construction.bonds import compute_bonds
from crystalcell.construction.config import BondingConfig
from crystalcell.construction.slicing import VALID_PLANES, slice_plane
from crystalcell.model import Atom, Bond, BondType
from crystalcell.structures import DRY_ICE

ATOMS = [
    Atom("C", 0.0, 0.0, 0.0),
    Atom("C", 0.5, 0.5, 0.5),
    Atom("C", 0.3, 0.2, 1.0),
    Atom("O", 0.3, 0.2, 0.9),
]
BONDS = [Bond(0, 1), Bond(0, 2), Bond(2, 3, BondType.DOUBLE)]


class TestSlicePlane:
    def test_valid_planes(self):
        assert VALID_PLANES == {"none", "xy", "xz", "yz"}

    def test_none_returns_copies(self):
        atoms, bonds = slice_plane(ATOMS, BONDS, "none")
        assert atoms == ATOMS and atoms is not ATOMS
        assert bonds == BONDS and bonds is not BONDS

    def test_xy_keeps_faces_and_reindexes(self):
        atoms, bonds = slice_plane(ATOMS, BONDS, "xy")
        assert atoms == [ATOMS[0], ATOMS[2]]
        assert bonds == [Bond(0, 1)]

    def test_yz_tests_x(self):
        atoms, _ = slice_plane(ATOMS, BONDS, "yz")
        assert atoms == [ATOMS[0]]

    def test_xz_tests_y(self):
        atoms, _ = slice_plane(ATOMS, BONDS, "xz")
        assert atoms == [ATOMS[0]]

    def test_tolerance(self):
        atoms, bonds = slice_plane(ATOMS, BONDS, "xy", tolerance=0.1)
        assert len(atoms) == 3
        assert bonds == [Bond(0, 1), Bond(1, 2, BondType.DOUBLE)]

    def test_whole_molecules(self):
        atoms, bonds = slice_plane(
            ATOMS[2:], [Bond(0, 1, BondType.DOUBLE)], "xy", whole_molecules=True,
        )
        assert atoms == ATOMS[2:]
        assert bonds == [Bond(0, 1, BondType.DOUBLE)]

    def test_dry_ice_molecules_kept_whole(self):
        bonds = compute_bonds(DRY_ICE, BondingConfig(periodic=False))
        cut_atoms, cut_bonds = slice_plane(DRY_ICE.atoms, bonds, "xy")
        whole_atoms, whole_bonds = slice_plane(
            DRY_ICE.atoms, bonds, "xy", whole_molecules=True,
        )
        # Ten carbons lie on z = 0 or 1; their oxygens sit 0.115 away.
        assert {a.element for a in cut_atoms} == {"C"}
        assert len(cut_atoms) == 10
        assert cut_bonds == []
        assert len(whole_atoms) == 30
        assert len(whole_bonds) == 20

    def test_unknown_plane(self):
        with pytest.raises(ValueError, match="plane must be one of"):
            slice_plane(ATOMS, BONDS, "ab")

    def test_negative_tolerance(self):
        with pytest.raises(ValueError, match="tolerance"):
            slice_plane(ATOMS, BONDS, "xy", tolerance=-0.01)
