"""Built-in conventional unit cells.

Each cell is fully enumerated for display: all eight corners, every
face and edge replica, and (for dry ice) oxygen atoms just outside
the cell so that molecules on the boundary are whole.  Boundary
replicas are periodic images of each other and are never bonded to
one another by the bonding engine.
"""

from __future__ import annotations

from crystalcell.model import (
    Atom, Category, CellParams, LatticeType, UnitCellStructure,
)

_Point = tuple[float, float, float]

# Corners ordered with x varying fastest: (0,0,0), (1,0,0), (0,1,0), ...
_CORNERS: list[_Point] = [
    (x, y, z) for z in (0, 1) for y in (0, 1) for x in (0, 1)
]

_FACE_CENTRES: list[_Point] = [
    (0.5, 0.5, 0), (0.5, 0.5, 1),
    (0.5, 0, 0.5), (0.5, 1, 0.5),
    (0, 0.5, 0.5), (1, 0.5, 0.5),
]

_EDGE_CENTRES: list[_Point] = [
    (0.5, 0, 0), (0, 0.5, 0), (0.5, 1, 0), (1, 0.5, 0),
    (0.5, 0, 1), (0, 0.5, 1), (0.5, 1, 1), (1, 0.5, 1),
    (0, 0, 0.5), (1, 0, 0.5), (0, 1, 0.5), (1, 1, 0.5),
]

# Alternate tetrahedral holes of an fcc lattice.
_TETRAHEDRAL: list[_Point] = [
    (0.25, 0.25, 0.25), (0.75, 0.75, 0.25),
    (0.75, 0.25, 0.75), (0.25, 0.75, 0.75),
]

_OTHER_TETRAHEDRAL: list[_Point] = [
    (0.75, 0.25, 0.25), (0.25, 0.75, 0.25),
    (0.25, 0.25, 0.75), (0.75, 0.75, 0.75),
]

# C=O half-length of CO2 along c, in fractional units of a = 5.64 Å.
_CO2_OFFSET = 0.115


def _atoms(element: str, points: list[_Point]) -> list[Atom]:
    return [Atom(element, *p) for p in points]


def _cubic(a: float) -> CellParams:
    return CellParams(a, a, a, 90.0, 90.0, 90.0)


def _co2_molecules(centres: list[_Point]) -> list[Atom]:
    atoms: list[Atom] = []
    for x, y, z in centres:
        atoms.append(Atom("C", x, y, z))
        atoms.append(Atom("O", x, y, round(z + _CO2_OFFSET, 6)))
        atoms.append(Atom("O", x, y, round(z - _CO2_OFFSET, 6)))
    return atoms


def _graphite_layer(z: float, inner: tuple[float, float]) -> list[Atom]:
    corners = [(0, 0), (1, 0), (0, 1), (1, 1)]
    return [Atom("C", x, y, z) for x, y in [*corners, inner]]


DIAMOND = UnitCellStructure(
    id="diamond",
    name="Diamond",
    lattice_type=LatticeType.DIAMOND,
    cell=_cubic(3.56683),
    atoms=tuple(
        _atoms("C", _CORNERS) + _atoms("C", _FACE_CENTRES)
        + _atoms("C", _TETRAHEDRAL)
    ),
    category=Category.COVALENT,
    description=(
        "Face-centred cubic carbon with four of the eight tetrahedral "
        "holes filled; every atom is tetrahedrally bonded."
    ),
    coordination="4 (tetrahedral)",
)

# Molecular axes are all drawn along c for clarity; real dry ice
# (Pa-3) orients them along the four body diagonals.
DRY_ICE = UnitCellStructure(
    id="dryice",
    name="Dry Ice",
    lattice_type=LatticeType.FCC,
    cell=_cubic(5.64),
    atoms=tuple(_co2_molecules(
        [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
        + _FACE_CENTRES
    )),
    category=Category.MOLECULAR,
    description=(
        "Molecular crystal of CO2 with a molecule on every fcc lattice "
        "point."
    ),
    coordination="12 (intermolecular)",
)

SILICON_CARBIDE = UnitCellStructure(
    id="sic",
    name="Silicon Carbide",
    lattice_type=LatticeType.ZINCBLENDE,
    cell=_cubic(4.3596),
    atoms=tuple(
        _atoms("Si", _CORNERS) + _atoms("Si", _FACE_CENTRES)
        + _atoms("C", _TETRAHEDRAL)
    ),
    category=Category.COVALENT,
    description="Cubic 3C-SiC in the zincblende structure.",
    coordination="4 (tetrahedral)",
)

SODIUM_CHLORIDE = UnitCellStructure(
    id="nacl",
    name="Sodium Chloride",
    lattice_type=LatticeType.ROCKSALT,
    cell=_cubic(5.64),
    atoms=tuple(
        _atoms("Na", _CORNERS) + _atoms("Na", _FACE_CENTRES)
        + _atoms("Cl", _EDGE_CENTRES) + _atoms("Cl", [(0.5, 0.5, 0.5)])
    ),
    category=Category.IONIC,
    description=(
        "Rock salt: Na on the corners and face centres, Cl on the edge "
        "centres and body centre."
    ),
    coordination="6 (octahedral)",
)

CAESIUM_CHLORIDE = UnitCellStructure(
    id="cscl",
    name="Cesium Chloride",
    lattice_type=LatticeType.CESIUMCHLORIDE,
    cell=_cubic(4.123),
    atoms=tuple(_atoms("Cs", _CORNERS) + _atoms("Cl", [(0.5, 0.5, 0.5)])),
    category=Category.IONIC,
    description="Simple cubic Cs with Cl at the body centre.",
    coordination="8 (cubic)",
)

ZINC_SULFIDE = UnitCellStructure(
    id="zns",
    name="Zinc Sulfide",
    lattice_type=LatticeType.ZINCBLENDE,
    cell=_cubic(5.4093),
    atoms=tuple(
        _atoms("Zn", _CORNERS) + _atoms("Zn", _FACE_CENTRES)
        + _atoms("S", _TETRAHEDRAL)
    ),
    category=Category.IONIC,
    description=(
        "Zincblende: fcc Zn with S in alternate tetrahedral holes."
    ),
    coordination="4 (tetrahedral)",
)

CALCIUM_FLUORIDE = UnitCellStructure(
    id="caf2",
    name="Calcium Fluoride",
    lattice_type=LatticeType.FLUORITE,
    cell=_cubic(5.4626),
    atoms=tuple(
        _atoms("Ca", _CORNERS) + _atoms("Ca", _FACE_CENTRES)
        + _atoms("F", _TETRAHEDRAL + _OTHER_TETRAHEDRAL)
    ),
    category=Category.IONIC,
    description="Fluorite: fcc Ca with F in all eight tetrahedral holes.",
    coordination="8 (Ca), 4 (F)",
)

GRAPHITE = UnitCellStructure(
    id="graphite",
    name="Graphite",
    lattice_type=LatticeType.HEXAGONAL,
    cell=CellParams(2.46, 2.46, 6.70, 90.0, 90.0, 120.0),
    atoms=tuple(
        _graphite_layer(0.0, (0.3333, 0.6667))
        + _graphite_layer(0.5, (0.6667, 0.3333))
        + _graphite_layer(1.0, (0.3333, 0.6667))
    ),
    category=Category.COVALENT,
    description=(
        "AB-stacked hexagonal graphite; only in-plane C-C bonds are "
        "drawn, layers are held by van der Waals contacts."
    ),
    coordination="3 (trigonal planar)",
)

STRUCTURES: dict[str, UnitCellStructure] = {
    s.id: s
    for s in (
        DIAMOND,
        DRY_ICE,
        SILICON_CARBIDE,
        SODIUM_CHLORIDE,
        CAESIUM_CHLORIDE,
        ZINC_SULFIDE,
        CALCIUM_FLUORIDE,
        GRAPHITE,
    )
}
"""Built-in structures keyed by id."""


def get_structure(structure_id: str) -> UnitCellStructure:
    """Look up a built-in structure by id.

    Raises:
        KeyError: If *structure_id* is not registered.
    """
    try:
        return STRUCTURES[structure_id]
    except KeyError:
        raise KeyError(
            f"unknown structure {structure_id!r}; "
            f"available: {sorted(STRUCTURES)}"
        ) from None


def available_structures() -> list[str]:
    """Ids of the built-in structures, in registry order."""
    return list(STRUCTURES)
