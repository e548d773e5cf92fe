"""Convenience constructors for UnitCellStructure."""

from typing import TYPE_CHECKING

from crystalcell.model import (
    Atom, Category, CellParams, LatticeType, UnitCellStructure,
)

if TYPE_CHECKING:
    from pymatgen.core import Structure


def from_pymatgen(
    structure: "Structure",
    *,
    lattice_type: LatticeType | str,
    category: Category | str,
    id: str = "",
    name: str = "",
) -> UnitCellStructure:
    """Create a UnitCellStructure from a pymatgen ``Structure``.

    Only the six lattice parameters and the fractional coordinates
    are taken; pymatgen's choice of Cartesian orientation is
    discarded in favour of **a** along *x* and **b** in the *xy*
    plane.  Fractional coordinates are kept as stored (not wrapped).

    Args:
        structure: A pymatgen ``Structure``.
        lattice_type: Structure-type tag used to choose the bonding
            policy.
        category: Chemical class.
        id: Registry key.
        name: Display name.  Defaults to the reduced formula.

    Returns:
        A new UnitCellStructure.

    Raises:
        ImportError: If pymatgen is not installed.
    """
    try:
        from pymatgen.core import Structure
    except ImportError:
        raise ImportError(
            "pymatgen is required for from_pymatgen(). "
            "Install it with: pip install pymatgen"
        )

    if not isinstance(structure, Structure):
        raise TypeError(
            f"expected a pymatgen Structure, got {type(structure).__name__}"
        )
    if len(structure) == 0:
        raise ValueError("structure must contain at least one site")

    lattice = structure.lattice
    cell = CellParams(
        a=lattice.a, b=lattice.b, c=lattice.c,
        alpha=lattice.alpha, beta=lattice.beta, gamma=lattice.gamma,
    )
    # .symbol works for both Element and Species ("Na+") site species.
    atoms = tuple(
        Atom(site.specie.symbol, *(float(v) for v in site.frac_coords))
        for site in structure
    )
    return UnitCellStructure(
        id=id,
        name=name or structure.composition.reduced_formula,
        lattice_type=lattice_type,
        cell=cell,
        atoms=atoms,
        category=category,
    )
