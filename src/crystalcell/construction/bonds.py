"""Bond inference for unit-cell structures."""

from __future__ import annotations

import warnings

import numpy as np

from crystalcell.construction.config import BondingConfig
from crystalcell.construction.policies import (
    BondingPolicy,
    CandidateSet,
    apply_policy,
    select_policy,
)
from crystalcell.errors import BondingWarning, UnsupportedStructure
from crystalcell.model import Bond, Category, LatticeType, UnitCellStructure


def coordinate_window(
    structure: UnitCellStructure,
    config: BondingConfig | None = None,
) -> tuple[float, float]:
    """Inclusive fractional-coordinate range of atoms considered for bonding.

    Hexagonal structures use the widest window, then molecular
    crystals; everything else uses the default ``[0, 1]``.  The wider
    windows keep boundary replicas that complete layers and molecules
    while still excluding far-away ghost atoms.
    """
    if config is None:
        config = BondingConfig()
    if structure.lattice_type is LatticeType.HEXAGONAL:
        return config.hexagonal_window
    if structure.category is Category.MOLECULAR:
        return config.molecular_window
    return config.default_window


def filter_candidates(
    structure: UnitCellStructure,
    config: BondingConfig | None = None,
) -> CandidateSet:
    """Select the atoms whose x, y and z all lie inside the coordinate window.

    Args:
        structure: Structure to filter.
        config: Bonding configuration.  Defaults to
            :class:`BondingConfig()`.

    Returns:
        A :class:`CandidateSet` recording the original index of each
        surviving atom.
    """
    lower, upper = coordinate_window(structure, config)
    frac = structure.frac_coords
    inside = np.all((frac >= lower) & (frac <= upper), axis=1)
    indices = np.flatnonzero(inside)
    species = structure.species
    return CandidateSet(
        indices=indices,
        elements=np.array([species[i] for i in indices], dtype=str),
        frac=frac[indices],
    )


def compute_bonds(
    structure: UnitCellStructure,
    config: BondingConfig | None = None,
) -> list[Bond]:
    """Infer the chemical bonds of a unit cell.

    Predefined bonds on the structure are returned unchanged.
    Otherwise the atoms are filtered to the coordinate window (see
    :func:`coordinate_window`) and the policy chosen by
    :func:`~crystalcell.construction.policies.select_policy` is
    applied.  The result depends only on the structure and *config*.

    Recoverable problems do not raise: when no policy applies, or the
    heterogeneous policy finds other than two elements, a
    :class:`~crystalcell.errors.BondingWarning` is issued and an
    empty list returned.  An empty candidate set also gives an empty
    list, without a warning.

    Args:
        structure: The unit cell.
        config: Bonding configuration.  Defaults to
            :class:`BondingConfig()`.

    Returns:
        Bonds indexed into ``structure.atoms``, sorted by
        ``(atom1, atom2)`` with no repeated pair.
    """
    if structure.bonds is not None:
        return list(structure.bonds)
    if config is None:
        config = BondingConfig()

    label = structure.id or structure.name or "structure"
    choice = select_policy(structure.lattice_type, structure.category, config)
    if choice.policy is BondingPolicy.NONE:
        warnings.warn(
            f"{label}: no bonding policy for lattice type "
            f"{str(structure.lattice_type)!r} in category "
            f"{str(structure.category)!r}; no bonds computed",
            BondingWarning,
            stacklevel=2,
        )
        return []

    candidates = filter_candidates(structure, config)
    if len(candidates) == 0:
        return []

    try:
        bonds = apply_policy(choice, candidates, structure.lattice_matrix, config)
    except UnsupportedStructure as exc:
        warnings.warn(f"{label}: {exc}", BondingWarning, stacklevel=2)
        return []
    return sorted(bonds, key=lambda bond: bond.key)
