"""Conversion between fractional and Cartesian coordinates for triclinic cells."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from crystalcell.errors import InvalidCellGeometry
from crystalcell.model.atom import Atom

if TYPE_CHECKING:
    from crystalcell.model.cell_params import CellParams

_EPS = np.finfo(float).eps


def transform_matrix(params: CellParams) -> np.ndarray:
    """Build the fractional-to-Cartesian matrix *M* of a cell.

    ``cartesian = M @ fractional``.  The columns of *M* are the
    lattice vectors::

        a = (a, 0, 0)
        b = (b cos(gamma), b sin(gamma), 0)
        c = (c cos(beta), c_y, c sqrt(1 - cos(beta)^2 - (c_y / c)^2))

    with ``c_y = c (cos(alpha) - cos(beta) cos(gamma)) / sin(gamma)``.

    Args:
        params: Lattice parameters.  Any object with ``a``, ``b``,
            ``c``, ``alpha``, ``beta`` and ``gamma`` attributes is
            accepted; angles are in degrees.

    Returns:
        ``(3, 3)`` array.

    Raises:
        InvalidCellGeometry: If ``sin(gamma)`` vanishes or the angles
            leave no room for a positive *z* component of **c**.
    """
    alpha, beta, gamma = np.radians([params.alpha, params.beta, params.gamma])
    cos_alpha, cos_beta, cos_gamma = np.cos([alpha, beta, gamma])
    sin_gamma = np.sin(gamma)
    if abs(sin_gamma) <= _EPS:
        raise InvalidCellGeometry(
            f"gamma = {params.gamma} degrees gives a degenerate cell "
            f"(sin(gamma) = 0)"
        )

    a, b, c = params.a, params.b, params.c
    c_x = c * cos_beta
    c_y = c * (cos_alpha - cos_beta * cos_gamma) / sin_gamma
    radicand = 1.0 - cos_beta**2 - (c_y / c) ** 2
    if radicand <= 0.0:
        raise InvalidCellGeometry(
            f"angles (alpha={params.alpha}, beta={params.beta}, "
            f"gamma={params.gamma}) do not describe a physical cell"
        )
    c_z = c * np.sqrt(radicand)

    return np.array([
        [a, b * cos_gamma, c_x],
        [0.0, b * sin_gamma, c_y],
        [0.0, 0.0, c_z],
    ])


def lattice_matrix(params: CellParams) -> np.ndarray:
    """Lattice vectors as the rows of a ``(3, 3)`` array.

    This is the transpose of :func:`transform_matrix`, so that
    ``cartesian = fractional @ lattice_matrix(params)`` works for
    ``(n, 3)`` coordinate arrays.
    """
    return transform_matrix(params).T


def _as_points(points: Atom | np.ndarray | tuple | list) -> np.ndarray:
    if isinstance(points, Atom):
        return points.frac
    arr = np.asarray(points, dtype=float)
    if arr.shape[-1:] != (3,) or arr.ndim > 2:
        raise ValueError(
            f"points must have shape (3,) or (n_points, 3), got {arr.shape}"
        )
    return arr


def fractional_to_cartesian(
    frac: Atom | np.ndarray | tuple | list,
    params: CellParams,
) -> np.ndarray:
    """Convert fractional coordinates to Cartesian coordinates.

    Args:
        frac: An :class:`Atom`, a single ``(3,)`` point or an
            ``(n, 3)`` array of points.
        params: Lattice parameters.

    Returns:
        Cartesian coordinates in angstroms, with the same shape as
        the input points.
    """
    return _as_points(frac) @ lattice_matrix(params)


def cartesian_to_fractional(
    cart: np.ndarray | tuple | list,
    params: CellParams,
) -> np.ndarray:
    """Convert Cartesian coordinates to fractional coordinates.

    Inverse of :func:`fractional_to_cartesian`.

    Raises:
        TypeError: If *cart* is an :class:`Atom`, whose coordinates are
            already fractional.
    """
    if isinstance(cart, Atom):
        raise TypeError(
            "cartesian_to_fractional() takes Cartesian coordinates, not an "
            "Atom; use atom.frac for its fractional coordinates"
        )
    return _as_points(cart) @ np.linalg.inv(lattice_matrix(params))


def cell_volume(params: CellParams) -> float:
    """Cell volume in cubic angstroms.

    ``V = abc sqrt(1 - cos²α - cos²β - cos²γ + 2 cosα cosβ cosγ)``.
    """
    cos_alpha, cos_beta, cos_gamma = np.cos(
        np.radians([params.alpha, params.beta, params.gamma])
    )
    factor = (
        1.0 - cos_alpha**2 - cos_beta**2 - cos_gamma**2
        + 2.0 * cos_alpha * cos_beta * cos_gamma
    )
    return float(params.a * params.b * params.c * np.sqrt(factor))
