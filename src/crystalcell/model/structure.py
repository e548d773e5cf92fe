from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from crystalcell.model.atom import Atom
from crystalcell.model.bond import Bond
from crystalcell.model.cell_params import CellParams
from crystalcell.model.enums import Category, LatticeType

if TYPE_CHECKING:
    from pymatgen.core import Structure


@dataclass(frozen=True)
class UnitCellStructure:
    """A conventional unit cell: lattice, atoms and classification tags.

    Instances are immutable and hashable, so they can key a
    :class:`~crystalcell.construction.cache.BondCache`.  The
    *lattice_type* and *category* tags only select a bonding policy
    and coordinate window; they are not checked against the atoms.

    Attributes:
        id: Short registry key, e.g. ``"diamond"``.
        name: Display name.
        lattice_type: Structure-type tag (see :class:`LatticeType`).
        cell: Lattice parameters.
        atoms: Fully enumerated atoms of the conventional cell,
            including boundary replicas.  Stored as a tuple.
        category: Chemical class (see :class:`Category`).
        description: Free-text description.
        coordination: Free-text coordination summary, e.g. ``"4"``.
        bonds: Optional predefined bonds.  When set, they are used in
            place of inferred bonds.
    """

    id: str
    name: str
    lattice_type: LatticeType
    cell: CellParams
    atoms: tuple[Atom, ...]
    category: Category
    description: str = ""
    coordination: str = ""
    bonds: tuple[Bond, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lattice_type", LatticeType(self.lattice_type))
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "atoms", tuple(self.atoms))
        for i, atom in enumerate(self.atoms):
            if not isinstance(atom, Atom):
                raise TypeError(
                    f"atoms[{i}] must be an Atom, got {type(atom).__name__}"
                )
        if self.bonds is not None:
            bonds = tuple(self.bonds)
            n_atoms = len(self.atoms)
            for bond in bonds:
                if bond.atom2 >= n_atoms:
                    raise ValueError(
                        f"bond {bond.key} refers to atom {bond.atom2} but "
                        f"the structure has {n_atoms} atoms"
                    )
            if len({b.key for b in bonds}) != len(bonds):
                raise ValueError("predefined bonds contain a duplicate pair")
            object.__setattr__(self, "bonds", bonds)

    @property
    def n_atoms(self) -> int:
        """Number of atoms in the conventional cell."""
        return len(self.atoms)

    @property
    def elements(self) -> list[str]:
        """Sorted unique element symbols."""
        return sorted({atom.element for atom in self.atoms})

    @property
    def species(self) -> list[str]:
        """Element symbol of each atom, in atom order."""
        return [atom.element for atom in self.atoms]

    @property
    def frac_coords(self) -> np.ndarray:
        """Fractional coordinates, shape ``(n_atoms, 3)``."""
        return np.array(
            [(atom.x, atom.y, atom.z) for atom in self.atoms], dtype=float,
        ).reshape(-1, 3)

    @property
    def lattice_matrix(self) -> np.ndarray:
        """``(3, 3)`` lattice matrix with lattice vectors as rows."""
        from crystalcell.lattice import lattice_matrix

        return lattice_matrix(self.cell)

    def cartesian_coords(self) -> np.ndarray:
        """Cartesian coordinates in angstroms, shape ``(n_atoms, 3)``."""
        return self.frac_coords @ self.lattice_matrix

    @property
    def volume(self) -> float:
        """Cell volume in cubic angstroms."""
        from crystalcell.lattice import cell_volume

        return cell_volume(self.cell)

    @property
    def lattice_constants(self) -> str:
        """Human-readable lattice constants (see :meth:`CellParams.constants_label`)."""
        return self.cell.constants_label()

    @classmethod
    def from_pymatgen(
        cls,
        structure: Structure,
        *,
        lattice_type: LatticeType | str,
        category: Category | str,
        id: str = "",
        name: str = "",
    ) -> UnitCellStructure:
        """Create a UnitCellStructure from a pymatgen ``Structure``.

        See Also:
            :func:`crystalcell.construction.builders.from_pymatgen`
        """
        from crystalcell.construction.builders import from_pymatgen

        return from_pymatgen(
            structure, lattice_type=lattice_type, category=category,
            id=id, name=name,
        )

    def with_atoms(self, atoms: Sequence[Atom]) -> UnitCellStructure:
        """Return a copy holding *atoms* and no predefined bonds."""
        return UnitCellStructure(
            id=self.id,
            name=self.name,
            lattice_type=self.lattice_type,
            cell=self.cell,
            atoms=tuple(atoms),
            category=self.category,
            description=self.description,
            coordination=self.coordination,
        )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Empty text fields and absent predefined bonds are omitted.
        """
        d: dict = {
            "id": self.id,
            "name": self.name,
            "lattice_type": str(self.lattice_type),
            "category": str(self.category),
            "cell": self.cell.to_dict(),
            "atoms": [atom.to_dict() for atom in self.atoms],
        }
        if self.description:
            d["description"] = self.description
        if self.coordination:
            d["coordination"] = self.coordination
        if self.bonds is not None:
            d["bonds"] = [bond.to_dict() for bond in self.bonds]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> UnitCellStructure:
        """Deserialise from a dictionary."""
        bonds = None
        if "bonds" in d:
            bonds = tuple(Bond.from_dict(b) for b in d["bonds"])
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            lattice_type=d["lattice_type"],
            cell=CellParams.from_dict(d["cell"]),
            atoms=tuple(Atom.from_dict(a) for a in d["atoms"]),
            category=d["category"],
            description=d.get("description", ""),
            coordination=d.get("coordination", ""),
            bonds=bonds,
        )
