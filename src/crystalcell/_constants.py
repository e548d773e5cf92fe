"""Shared constants used across the model and construction layers."""

MIN_BOND_LENGTH: float = 0.01
"""Pairs closer than this (angstroms) are coincident, not bonded."""

NEAREST_NEIGHBOUR_TOLERANCE: float = 0.02
"""Relative half-width of the accepted band around the shortest distance."""

LAYER_TOLERANCE: float = 0.005
"""Fractional z separation below which two atoms share a layer."""

DEFAULT_WINDOW: tuple[float, float] = (0.0, 1.0)
MOLECULAR_WINDOW: tuple[float, float] = (-0.2, 1.2)
HEXAGONAL_WINDOW: tuple[float, float] = (-0.6, 1.6)

MAX_BONDS_PER_CENTRAL_ATOM: int = 2
"""Satellite atoms bonded to each central atom of a molecule (CO2)."""

IMAGE_OFFSETS: tuple[tuple[int, int, int], ...] = tuple(
    (n1, n2, n3)
    for n1 in (-1, 0, 1) for n2 in (-1, 0, 1) for n3 in (-1, 0, 1)
)
"""The 27 lattice translations searched by the minimum-image distance."""

DISTANCE_DECIMALS: int = 6
"""Distances (angstroms) equal to this many decimals are treated as ties."""
