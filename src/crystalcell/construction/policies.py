"""Bonding policies: nearest-neighbour rules selected by structure type.

Each policy is a plain function taking the candidate atoms, the
lattice matrix, the :class:`BondingConfig` and the
:class:`PolicyChoice` that selected it, and returning bonds indexed
into the structure's full atom list.  :func:`select_policy` picks the
policy from ``(lattice_type, category)`` and :func:`apply_policy`
dispatches through a lookup table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from crystalcell._constants import DISTANCE_DECIMALS
from crystalcell.construction.config import BondingConfig
from crystalcell.errors import UnsupportedStructure
from crystalcell.model import Bond, BondType, Category, LatticeType
from crystalcell.periodic import direct_distance_matrix, minimum_distance_matrix


class BondingPolicy(StrEnum):
    """The closed set of bonding rules.

    Attributes:
        HOMOGENEOUS: Shortest-distance band between atoms of one
            element (diamond).
        HETEROGENEOUS: Shortest-distance band between the two elements
            of a binary compound (SiC, NaCl, CsCl, ZnS, CaF2).
        LAYERED: Homogeneous band applied separately within each layer
            of constant fractional *z* (graphite).
        MOLECULAR: Each central atom bonds to its *k* nearest
            satellite atoms (CO2 in dry ice).
        NONE: No rule applies; no bonds are produced.
    """

    HOMOGENEOUS = "homogeneous"
    HETEROGENEOUS = "heterogeneous"
    LAYERED = "layered"
    MOLECULAR = "molecular"
    NONE = "none"


@dataclass(frozen=True)
class PolicyChoice:
    """A bonding policy together with its parameters.

    Attributes:
        policy: Which rule to apply.
        element: Bonded element for homogeneous and layered policies;
            central element for the molecular policy.
        satellite: Satellite element for the molecular policy.
        max_bonds: Satellites bonded per central atom (molecular only).
        bond_type: Type assigned to every emitted bond.
    """

    policy: BondingPolicy
    element: str = "C"
    satellite: str = "O"
    max_bonds: int = 2
    bond_type: BondType = BondType.SINGLE


@dataclass(frozen=True)
class CandidateSet:
    """Atoms that survived coordinate-window filtering.

    Attributes:
        indices: Index of each candidate in the structure's atom list,
            shape ``(n,)``.
        elements: Element symbol of each candidate, shape ``(n,)``.
        frac: Fractional coordinates, shape ``(n, 3)``.
    """

    indices: np.ndarray
    elements: np.ndarray
    frac: np.ndarray

    def __len__(self) -> int:
        return len(self.indices)

    def select(self, element: str) -> np.ndarray:
        """Positions (into this set) of the candidates of *element*."""
        return np.flatnonzero(self.elements == element)


_HETEROGENEOUS_LATTICES = frozenset({
    LatticeType.ZINCBLENDE,
    LatticeType.ROCKSALT,
    LatticeType.CESIUMCHLORIDE,
    LatticeType.FLUORITE,
})


def select_policy(
    lattice_type: LatticeType | str,
    category: Category | str,
    config: BondingConfig | None = None,
) -> PolicyChoice:
    """Choose the bonding policy for a structure.

    The molecular category takes precedence over the lattice type.

    Args:
        lattice_type: Structure-type tag.
        category: Chemical class.
        config: Supplies ``max_bonds_per_central_atom`` for the
            molecular policy.  Defaults to :class:`BondingConfig()`.

    Returns:
        The selected :class:`PolicyChoice`.  Unrecognised combinations
        give ``BondingPolicy.NONE``.
    """
    lattice_type = LatticeType(lattice_type)
    category = Category(category)
    if config is None:
        config = BondingConfig()

    if category is Category.MOLECULAR:
        return PolicyChoice(
            BondingPolicy.MOLECULAR,
            element="C",
            satellite="O",
            max_bonds=config.max_bonds_per_central_atom,
            bond_type=BondType.DOUBLE,
        )
    if lattice_type is LatticeType.DIAMOND:
        return PolicyChoice(BondingPolicy.HOMOGENEOUS, element="C")
    if lattice_type in _HETEROGENEOUS_LATTICES:
        return PolicyChoice(BondingPolicy.HETEROGENEOUS)
    if lattice_type is LatticeType.HEXAGONAL:
        return PolicyChoice(BondingPolicy.LAYERED, element="C")
    return PolicyChoice(BondingPolicy.NONE)


def _distances(
    frac_a: np.ndarray,
    frac_b: np.ndarray,
    lattice: np.ndarray,
    config: BondingConfig,
) -> np.ndarray:
    if config.periodic:
        return minimum_distance_matrix(frac_a, frac_b, lattice)
    return direct_distance_matrix(frac_a, frac_b, lattice)


def nearest_neighbour_bonds(
    index_a: np.ndarray,
    index_b: np.ndarray,
    dist: np.ndarray,
    tolerance: float,
    bond_type: BondType = BondType.SINGLE,
) -> list[Bond]:
    """Bond every pair whose distance lies in the band around the minimum.

    The minimum is taken over *all* supplied distances before any
    pair is accepted.  The accepted band is
    ``[d_min (1 - tolerance), d_min (1 + tolerance)]``.

    Args:
        index_a: Atom index of the first member of each pair, ``(p,)``.
        index_b: Atom index of the second member of each pair, ``(p,)``.
        dist: Distance of each pair, ``(p,)``.  Coincident pairs must
            already be removed.
        tolerance: Relative half-width of the band.
        bond_type: Type of the emitted bonds.

    Returns:
        Canonical bonds with no repeated pair, in input order.
    """
    dist = np.asarray(dist, dtype=float)
    if dist.size == 0:
        return []
    d_min = dist.min()
    hits = (dist >= d_min * (1.0 - tolerance)) & (dist <= d_min * (1.0 + tolerance))
    return _unique_bonds(
        zip(np.asarray(index_a)[hits], np.asarray(index_b)[hits]), bond_type,
    )


def _unique_bonds(
    pairs: Iterable[tuple[int, int]],
    bond_type: BondType,
) -> list[Bond]:
    seen: set[tuple[int, int]] = set()
    bonds: list[Bond] = []
    for i, j in pairs:
        bond = Bond.between(i, j, bond_type)
        if bond.key not in seen:
            seen.add(bond.key)
            bonds.append(bond)
    return bonds


def _band_within(
    candidates: CandidateSet,
    members: np.ndarray,
    lattice: np.ndarray,
    config: BondingConfig,
    bond_type: BondType,
) -> list[Bond]:
    """Apply the distance band to all unordered pairs among *members*."""
    if len(members) < 2:
        return []
    frac = candidates.frac[members]
    dist = _distances(frac, frac, lattice, config)
    ii, jj = np.triu_indices(len(members), k=1)
    d = dist[ii, jj]
    keep = d > config.min_bond_length
    atom_index = candidates.indices[members]
    return nearest_neighbour_bonds(
        atom_index[ii[keep]], atom_index[jj[keep]], d[keep],
        config.tolerance, bond_type,
    )


def homogeneous_bonds(
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
    choice: PolicyChoice,
) -> list[Bond]:
    """Nearest-neighbour bonds between atoms of ``choice.element``."""
    members = candidates.select(choice.element)
    return _band_within(candidates, members, lattice, config, choice.bond_type)


def heterogeneous_bonds(
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
    choice: PolicyChoice,
) -> list[Bond]:
    """Nearest-neighbour bonds between the two elements of a binary compound.

    Only cross-element pairs are considered, so no A-A or B-B bond
    is ever produced.

    Raises:
        UnsupportedStructure: If the candidates do not contain exactly
            two distinct elements.
    """
    elements = sorted(set(candidates.elements.tolist()))
    if len(elements) != 2:
        raise UnsupportedStructure(
            f"heterogeneous bonding requires exactly 2 elements, got {elements}"
        )
    sel_a = candidates.select(elements[0])
    sel_b = candidates.select(elements[1])
    dist = _distances(candidates.frac[sel_a], candidates.frac[sel_b], lattice, config)
    ii, jj = np.nonzero(dist > config.min_bond_length)
    return nearest_neighbour_bonds(
        candidates.indices[sel_a][ii],
        candidates.indices[sel_b][jj],
        dist[ii, jj],
        config.tolerance,
        choice.bond_type,
    )


def group_layers(z: np.ndarray, tolerance: float) -> list[np.ndarray]:
    """Partition positions into layers of (nearly) equal *z*.

    Values are visited in ascending order; a value starts a new layer
    when it lies more than *tolerance* above the first value of the
    current layer.

    Args:
        z: Fractional *z* coordinates, shape ``(n,)``.
        tolerance: Maximum spread of *z* within one layer.

    Returns:
        One array of positions into *z* per layer, each sorted, with
        the layers in ascending *z*.
    """
    z = np.asarray(z, dtype=float)
    if z.size == 0:
        return []
    order = np.argsort(z, kind="stable")
    layers: list[list[int]] = [[int(order[0])]]
    anchor = z[order[0]]
    for pos in order[1:]:
        if z[pos] - anchor > tolerance:
            layers.append([])
            anchor = z[pos]
        layers[-1].append(int(pos))
    return [np.array(sorted(layer), dtype=int) for layer in layers]


def layered_bonds(
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
    choice: PolicyChoice,
) -> list[Bond]:
    """In-plane nearest-neighbour bonds for layered structures.

    The band is applied independently within each layer, so the
    minimum distance of one layer never admits contacts between
    layers.
    """
    members = candidates.select(choice.element)
    layers = group_layers(candidates.frac[members, 2], config.layer_tolerance)
    per_layer = [
        _band_within(candidates, members[layer], lattice, config, choice.bond_type)
        for layer in layers
    ]
    return _unique_bonds(
        (bond.key for bonds in per_layer for bond in bonds), choice.bond_type,
    )


def molecular_bonds(
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
    choice: PolicyChoice,
) -> list[Bond]:
    """Bond each central atom to its ``max_bonds`` nearest satellites.

    Unlike the band policies this is a per-atom rule: a molecule's
    internal bond length is unrelated to lattice translations.

    Satellites are ranked by the configured distance.  Under
    minimum-image distances a boundary atom is equally close to its
    own satellites and to images of its neighbours' satellites, so
    ties are broken by the distance between the stored coordinates,
    then by candidate order.  This keeps every stored molecule whole.
    """
    central = candidates.select(choice.element)
    satellite = candidates.select(choice.satellite)
    if len(central) == 0 or len(satellite) == 0:
        return []
    dist = _distances(
        candidates.frac[central], candidates.frac[satellite], lattice, config,
    )
    direct = direct_distance_matrix(
        candidates.frac[central], candidates.frac[satellite], lattice,
    )
    satellite_index = candidates.indices[satellite]

    pairs: list[tuple[int, int]] = []
    for row, centre_index in enumerate(candidates.indices[central]):
        valid = np.flatnonzero(dist[row] > config.min_bond_length)
        primary = np.round(dist[row, valid], DISTANCE_DECIMALS)
        nearest = valid[np.lexsort((direct[row, valid], primary))]
        for col in nearest[:choice.max_bonds]:
            pairs.append((int(centre_index), int(satellite_index[col])))
    return _unique_bonds(pairs, choice.bond_type)


def _no_bonds(
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
    choice: PolicyChoice,
) -> list[Bond]:
    return []


PolicyFunction = Callable[
    [CandidateSet, np.ndarray, BondingConfig, PolicyChoice], list[Bond]
]

POLICY_FUNCTIONS: dict[BondingPolicy, PolicyFunction] = {
    BondingPolicy.HOMOGENEOUS: homogeneous_bonds,
    BondingPolicy.HETEROGENEOUS: heterogeneous_bonds,
    BondingPolicy.LAYERED: layered_bonds,
    BondingPolicy.MOLECULAR: molecular_bonds,
    BondingPolicy.NONE: _no_bonds,
}


def apply_policy(
    choice: PolicyChoice,
    candidates: CandidateSet,
    lattice: np.ndarray,
    config: BondingConfig,
) -> list[Bond]:
    """Run the policy named by *choice* on *candidates*."""
    return POLICY_FUNCTIONS[choice.policy](candidates, lattice, config, choice)
