"""Replication of a unit cell's atoms and bonds over an integer grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from crystalcell.construction.bonds import compute_bonds
from crystalcell.construction.config import BondingConfig
from crystalcell.model import Atom, Bond, UnitCellStructure


def _check_repeats(nx: int, ny: int, nz: int) -> None:
    for name, n in (("nx", nx), ("ny", ny), ("nz", nz)):
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"{name} must be an integer, got {n!r}")
        if n < 1:
            raise ValueError(f"{name} must be >= 1, got {n}")


def cell_offsets(nx: int, ny: int, nz: int) -> Iterator[tuple[int, int, int]]:
    """Yield the integer cell translations of an ``nx × ny × nz`` grid.

    The order is *i*-major, then *j*, then *k*, so the *n*-th offset
    yielded has block index ``n = i*ny*nz + j*nz + k``.
    """
    _check_repeats(nx, ny, nz)
    for i in range(nx):
        for j in range(ny):
            for k in range(nz):
                yield (i, j, k)


def replicate_atoms(
    atoms: Sequence[Atom],
    nx: int,
    ny: int,
    nz: int,
) -> list[Atom]:
    """Repeat *atoms* over an ``nx × ny × nz`` grid of cells.

    The output is ``nx*ny*nz`` contiguous blocks, each a copy of
    *atoms* translated by one offset from :func:`cell_offsets`.

    Returns:
        A new list; the input atoms are not modified.
    """
    return [
        atom.translated(i, j, k)
        for i, j, k in cell_offsets(nx, ny, nz)
        for atom in atoms
    ]


def replicate_bonds(
    bonds: Sequence[Bond],
    atom_count: int,
    nx: int,
    ny: int,
    nz: int,
) -> list[Bond]:
    """Repeat *bonds* to match the block layout of :func:`replicate_atoms`.

    Block ``n`` receives a copy of every base bond with both indices
    shifted by ``n * atom_count``.  No bond spans two blocks.

    Args:
        bonds: Bonds indexed into the base atom list.
        atom_count: Length of the base atom list.
        nx: Repeats along **a**.
        ny: Repeats along **b**.
        nz: Repeats along **c**.
    """
    if atom_count < 0:
        raise ValueError(f"atom_count must be non-negative, got {atom_count}")
    for bond in bonds:
        if bond.atom2 >= atom_count:
            raise ValueError(
                f"bond {bond.key} refers to atom {bond.atom2} but "
                f"atom_count is {atom_count}"
            )
    _check_repeats(nx, ny, nz)
    return [
        bond.shifted(block * atom_count)
        for block in range(nx * ny * nz)
        for bond in bonds
    ]


def generate_supercell(
    structure: UnitCellStructure,
    nx: int,
    ny: int,
    nz: int,
    *,
    bonds: Sequence[Bond] | None = None,
    config: BondingConfig | None = None,
) -> tuple[list[Atom], list[Bond]]:
    """Build the atoms and bonds of an ``nx × ny × nz`` supercell.

    Bonds are copied cell by cell; bonds between neighbouring cells
    are not added.  Upper limits on the repeat counts are left to
    the caller.

    Args:
        structure: The unit cell to repeat.
        nx: Repeats along **a** (>= 1).
        ny: Repeats along **b** (>= 1).
        nz: Repeats along **c** (>= 1).
        bonds: Base bonds, e.g. from a
            :class:`~crystalcell.construction.cache.BondCache`.  When
            ``None`` they are computed with :func:`compute_bonds`.
        config: Bonding configuration used when *bonds* is ``None``.

    Returns:
        ``(atoms, bonds)`` for the supercell.  For ``1 × 1 × 1`` these
        equal the base atoms and bonds.
    """
    _check_repeats(nx, ny, nz)
    if bonds is None:
        bonds = compute_bonds(structure, config)
    atoms = replicate_atoms(structure.atoms, nx, ny, nz)
    return atoms, replicate_bonds(bonds, structure.n_atoms, nx, ny, nz)
