"""Tests for crystalcell.construction.supercell."""

import pytest

from crystalcell.construction.bonds import compute_bonds
from crystalcell.construction.supercell import (
    cell_offsets,
    generate_supercell,
    replicate_atoms,
    replicate_bonds,
)
from crystalcell.model import Atom, Bond, BondType
from crystalcell.structures import CAESIUM_CHLORIDE, DIAMOND, DRY_ICE


class TestCellOffsets:
    def test_order(self):
        assert list(cell_offsets(2, 1, 2)) == [
            (0, 0, 0), (0, 0, 1), (1, 0, 0), (1, 0, 1),
        ]

    def test_block_index(self):
        nx, ny, nz = 2, 3, 4
        for n, (i, j, k) in enumerate(cell_offsets(nx, ny, nz)):
            assert n == i * ny * nz + j * nz + k


class TestReplicateAtoms:
    def test_translation(self):
        atoms = [Atom("Na", 0.0, 0.0, 0.0), Atom("Cl", 0.5, 0.5, 0.5)]
        out = replicate_atoms(atoms, 1, 2, 1)
        assert out == [
            Atom("Na", 0.0, 0.0, 0.0), Atom("Cl", 0.5, 0.5, 0.5),
            Atom("Na", 0.0, 1.0, 0.0), Atom("Cl", 0.5, 1.5, 0.5),
        ]

    def test_keeps_element_and_style(self):
        atoms = [Atom("O", 0.1, 0.2, 0.3, colour="#ff0000", radius=0.7)]
        (copy,) = replicate_atoms(atoms, 1, 1, 1)
        assert copy.colour == "#ff0000"
        assert copy.radius == 0.7


class TestReplicateBonds:
    def test_shift(self):
        bonds = [Bond(0, 1), Bond(1, 2, BondType.DOUBLE)]
        out = replicate_bonds(bonds, 3, 2, 1, 1)
        assert out == [
            Bond(0, 1), Bond(1, 2, BondType.DOUBLE),
            Bond(3, 4), Bond(4, 5, BondType.DOUBLE),
        ]

    def test_bond_out_of_range(self):
        with pytest.raises(ValueError, match="atom_count"):
            replicate_bonds([Bond(0, 3)], 3, 1, 1, 1)

    def test_negative_atom_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            replicate_bonds([], -1, 1, 1, 1)


class TestGenerateSupercell:
    def test_identity(self):
        atoms, bonds = generate_supercell(DIAMOND, 1, 1, 1)
        assert atoms == list(DIAMOND.atoms)
        assert bonds == compute_bonds(DIAMOND)

    def test_counts(self):
        n, b = DRY_ICE.n_atoms, len(compute_bonds(DRY_ICE))
        atoms, bonds = generate_supercell(DRY_ICE, 2, 1, 1)
        assert len(atoms) == 2 * n
        assert len(bonds) == 2 * b

    @pytest.mark.parametrize("repeats", [(2, 1, 1), (1, 2, 2), (3, 1, 2)])
    def test_bonds_stay_within_block(self, repeats):
        n = CAESIUM_CHLORIDE.n_atoms
        atoms, bonds = generate_supercell(CAESIUM_CHLORIDE, *repeats)
        assert len(atoms) == n * repeats[0] * repeats[1] * repeats[2]
        for bond in bonds:
            assert bond.atom1 // n == bond.atom2 // n
            assert bond.atom2 < len(atoms)

    def test_block_positions(self):
        n = DIAMOND.n_atoms
        atoms, _ = generate_supercell(DIAMOND, 2, 2, 2)
        for block, (i, j, k) in enumerate(cell_offsets(2, 2, 2)):
            for base, atom in zip(DIAMOND.atoms, atoms[block * n:(block + 1) * n]):
                assert atom == base.translated(i, j, k)

    def test_supplied_bonds_used(self):
        atoms, bonds = generate_supercell(DIAMOND, 2, 1, 1, bonds=[Bond(0, 14)])
        assert bonds == [Bond(0, 14), Bond(18, 32)]

    def test_input_not_mutated(self):
        before = DIAMOND.to_dict()
        generate_supercell(DIAMOND, 2, 2, 2)
        assert DIAMOND.to_dict() == before

    @pytest.mark.parametrize("repeats", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
    def test_rejects_non_positive(self, repeats):
        with pytest.raises(ValueError, match=">= 1"):
            generate_supercell(DIAMOND, *repeats)

    @pytest.mark.parametrize("repeats", [(1.5, 1, 1), (1, True, 1), (1, 1, "2")])
    def test_rejects_non_integer(self, repeats):
        with pytest.raises(ValueError, match="integer"):
            generate_supercell(DIAMOND, *repeats)
