"""Restriction of atoms and bonds to the faces of a cell."""

from __future__ import annotations

from collections.abc import Sequence

from crystalcell.model import Atom, Bond

_PLANE_AXES: dict[str, str] = {"yz": "x", "xz": "y", "xy": "z"}

VALID_PLANES: frozenset[str] = frozenset({"none", *_PLANE_AXES})
"""Accepted values of the *plane* argument of :func:`slice_plane`."""


def slice_plane(
    atoms: Sequence[Atom],
    bonds: Sequence[Bond],
    plane: str,
    *,
    tolerance: float = 0.05,
    whole_molecules: bool = False,
) -> tuple[list[Atom], list[Bond]]:
    """Keep only atoms lying on a pair of opposite cell faces.

    For ``plane="xy"`` an atom is kept when its fractional *z* is
    within *tolerance* of 0 or 1; ``"xz"`` tests *y* and ``"yz"``
    tests *x*.  Bonds are kept when both ends are kept and are
    re-indexed into the returned atom list.

    Args:
        atoms: Atoms, e.g. from
            :func:`~crystalcell.construction.supercell.generate_supercell`.
        bonds: Bonds indexed into *atoms*.
        plane: One of ``"xy"``, ``"xz"``, ``"yz"`` or ``"none"``.
        tolerance: Fractional distance from the face.
        whole_molecules: If ``True``, also keep every atom bonded to
            an atom on the plane, so that molecules are not cut.

    Returns:
        ``(atoms, bonds)`` restricted to the plane.  ``"none"``
        returns copies of the inputs.

    Raises:
        ValueError: If *plane* is not recognised or *tolerance* is
            negative.
    """
    if plane not in VALID_PLANES:
        raise ValueError(
            f"plane must be one of {sorted(VALID_PLANES)}, got {plane!r}"
        )
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    if plane == "none":
        return list(atoms), list(bonds)

    axis = _PLANE_AXES[plane]
    keep = {
        i for i, atom in enumerate(atoms)
        if abs(getattr(atom, axis)) <= tolerance
        or abs(getattr(atom, axis) - 1.0) <= tolerance
    }
    if whole_molecules:
        on_plane = set(keep)
        for bond in bonds:
            if bond.atom1 in on_plane:
                keep.add(bond.atom2)
            if bond.atom2 in on_plane:
                keep.add(bond.atom1)

    kept = sorted(keep)
    new_index = {old: new for new, old in enumerate(kept)}
    sliced_bonds = [
        Bond(new_index[b.atom1], new_index[b.atom2], b.bond_type)
        for b in bonds
        if b.atom1 in new_index and b.atom2 in new_index
    ]
    return [atoms[i] for i in kept], sliced_bonds
