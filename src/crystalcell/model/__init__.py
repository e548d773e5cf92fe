"""Core data model for crystalcell: lattice parameters, atoms, bonds and structures.

Everything is re-exported here so that ``from crystalcell.model import
Atom`` works regardless of which submodule defines it.
"""

from crystalcell.model.atom import Atom
from crystalcell.model.bond import Bond
from crystalcell.model.cell_params import CellParams
from crystalcell.model.enums import BondType, Category, LatticeType
from crystalcell.model.structure import UnitCellStructure

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "Category",
    "CellParams",
    "LatticeType",
    "UnitCellStructure",
]
