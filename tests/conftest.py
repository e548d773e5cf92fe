"""Shared test fixtures for crystalcell."""

import pytest

from crystalcell.model import Atom, Category, CellParams, LatticeType, UnitCellStructure
from crystalcell.structures import STRUCTURES


@pytest.fixture
def cubic_cell():
    """Return a 4 Å cubic cell."""
    return CellParams(4.0, 4.0, 4.0)


@pytest.fixture
def triclinic_cell():
    """Return a general triclinic cell."""
    return CellParams(4.1, 5.3, 6.2, 78.0, 95.0, 104.0)


@pytest.fixture(params=sorted(STRUCTURES))
def builtin_structure(request):
    """Each built-in structure in turn."""
    return STRUCTURES[request.param]


@pytest.fixture
def make_structure():
    """Return a factory for small test structures."""
    def _make(
        atoms,
        lattice_type=LatticeType.ROCKSALT,
        category=Category.IONIC,
        cell=None,
        id="test",
    ):
        return UnitCellStructure(
            id=id,
            name=id,
            lattice_type=lattice_type,
            cell=cell if cell is not None else CellParams(5.0, 5.0, 5.0),
            atoms=tuple(Atom(*a) if isinstance(a, tuple) else a for a in atoms),
            category=category,
        )
    return _make
