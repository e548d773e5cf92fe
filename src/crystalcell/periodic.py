"""Minimum-image distances under full 3D periodic boundary conditions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from crystalcell._constants import IMAGE_OFFSETS
from crystalcell.lattice import _as_points, lattice_matrix

if TYPE_CHECKING:
    from crystalcell.model import Atom, CellParams


def minimum_distance_matrix(
    frac_a: np.ndarray,
    frac_b: np.ndarray,
    lattice: np.ndarray,
) -> np.ndarray:
    """Minimum-image distances between two sets of fractional points.

    Every point of *frac_b* is tried at all 27 translations in
    ``{-1, 0, 1}^3`` and the shortest Cartesian distance is kept.  The
    search is exhaustive rather than a rounding shortcut because
    atoms in conventional-cell data are not wrapped into ``[0, 1)``.

    Offsets are processed one at a time, so peak memory is
    O(n_a × n_b) rather than O(27 × n_a × n_b).

    Args:
        frac_a: Fractional coordinates, shape ``(n_a, 3)``.
        frac_b: Fractional coordinates, shape ``(n_b, 3)``.
        lattice: ``(3, 3)`` lattice matrix (rows are lattice vectors).

    Returns:
        Array of shape ``(n_a, n_b)``.
    """
    frac_a = np.asarray(frac_a, dtype=float).reshape(-1, 3)
    frac_b = np.asarray(frac_b, dtype=float).reshape(-1, 3)
    lattice = np.asarray(lattice, dtype=float)

    diff = frac_b[np.newaxis, :, :] - frac_a[:, np.newaxis, :]  # (n_a, n_b, 3)
    best = np.full(diff.shape[:2], np.inf)
    for offset in IMAGE_OFFSETS:
        cart = (diff + np.asarray(offset, dtype=float)) @ lattice
        np.minimum(best, np.linalg.norm(cart, axis=2), out=best)
    return best


def direct_distance_matrix(
    frac_a: np.ndarray,
    frac_b: np.ndarray,
    lattice: np.ndarray,
) -> np.ndarray:
    """Cartesian distances between points exactly as stored (no images).

    Args:
        frac_a: Fractional coordinates, shape ``(n_a, 3)``.
        frac_b: Fractional coordinates, shape ``(n_b, 3)``.
        lattice: ``(3, 3)`` lattice matrix (rows are lattice vectors).

    Returns:
        Array of shape ``(n_a, n_b)``.
    """
    cart_a = np.asarray(frac_a, dtype=float).reshape(-1, 3) @ lattice
    cart_b = np.asarray(frac_b, dtype=float).reshape(-1, 3) @ lattice
    diff = cart_b[np.newaxis, :, :] - cart_a[:, np.newaxis, :]
    return np.linalg.norm(diff, axis=2)


def minimum_distance(
    p1: Atom | np.ndarray | tuple | list,
    p2: Atom | np.ndarray | tuple | list,
    params: CellParams,
) -> float:
    """Minimum-image distance between two fractional points, in angstroms.

    Args:
        p1: First point (an :class:`Atom` or a ``(3,)`` fractional
            coordinate).
        p2: Second point.
        params: Lattice parameters.

    Returns:
        The shortest distance from *p1* to any of the 27 nearest
        periodic images of *p2*.
    """
    a = _as_points(p1)
    b = _as_points(p2)
    if a.shape != (3,) or b.shape != (3,):
        raise ValueError(
            f"expected two single points, got shapes {a.shape} and {b.shape}"
        )
    return float(minimum_distance_matrix(a, b, lattice_matrix(params))[0, 0])


def bond_length(atom1: Atom, atom2: Atom, params: CellParams) -> float:
    """Minimum-image length of the bond between two atoms."""
    return minimum_distance(atom1, atom2, params)
