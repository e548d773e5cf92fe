"""crystalcell: geometry and bonding engine for crystal unit cells.

crystalcell turns a conventional unit cell (six lattice parameters and
a list of atoms in fractional coordinates) into Cartesian positions,
a deterministic set of chemical bonds, and replicated supercells
ready for a renderer.

Example usage::

    from crystalcell import compute_bonds, generate_supercell, get_structure

    diamond = get_structure("diamond")
    bonds = compute_bonds(diamond)
    atoms, bonds = generate_supercell(diamond, 2, 2, 2)
"""

from crystalcell.construction.bonds import compute_bonds, filter_candidates
from crystalcell.construction.builders import from_pymatgen
from crystalcell.construction.cache import BondCache
from crystalcell.construction.config import BondingConfig, load_config, save_config
from crystalcell.construction.policies import BondingPolicy, PolicyChoice, select_policy
from crystalcell.construction.slicing import slice_plane
from crystalcell.construction.structure_io import load_structures, save_structures
from crystalcell.construction.supercell import (
    generate_supercell,
    replicate_atoms,
    replicate_bonds,
)
from crystalcell.errors import BondingWarning, InvalidCellGeometry, UnsupportedStructure
from crystalcell.lattice import (
    cartesian_to_fractional,
    cell_volume,
    fractional_to_cartesian,
    lattice_matrix,
    transform_matrix,
)
from crystalcell.model import (
    Atom,
    Bond,
    BondType,
    Category,
    CellParams,
    LatticeType,
    UnitCellStructure,
)
from crystalcell.periodic import bond_length, minimum_distance
from crystalcell.structures import STRUCTURES, available_structures, get_structure

__all__ = [
    "Atom",
    "Bond",
    "BondCache",
    "BondType",
    "BondingConfig",
    "BondingPolicy",
    "BondingWarning",
    "Category",
    "CellParams",
    "InvalidCellGeometry",
    "LatticeType",
    "PolicyChoice",
    "STRUCTURES",
    "UnitCellStructure",
    "UnsupportedStructure",
    "available_structures",
    "bond_length",
    "cartesian_to_fractional",
    "cell_volume",
    "compute_bonds",
    "filter_candidates",
    "fractional_to_cartesian",
    "from_pymatgen",
    "generate_supercell",
    "get_structure",
    "lattice_matrix",
    "load_config",
    "load_structures",
    "minimum_distance",
    "replicate_atoms",
    "replicate_bonds",
    "save_config",
    "save_structures",
    "select_policy",
    "slice_plane",
    "transform_matrix",
]
