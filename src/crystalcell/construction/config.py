"""Bond-inference settings and their JSON file I/O."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path

from crystalcell._constants import (
    DEFAULT_WINDOW,
    HEXAGONAL_WINDOW,
    LAYER_TOLERANCE,
    MAX_BONDS_PER_CENTRAL_ATOM,
    MIN_BOND_LENGTH,
    MOLECULAR_WINDOW,
    NEAREST_NEIGHBOUR_TOLERANCE,
)
from crystalcell.model._util import _non_default_items

_WINDOW_FIELDS = ("default_window", "molecular_window", "hexagonal_window")


@dataclass(frozen=True)
class BondingConfig:
    """Tunable parameters of the bond inference engine.

    The defaults reproduce the bonds of the built-in structures; most
    callers never need to change them.

    Attributes:
        min_bond_length: Distances at or below this value (angstroms)
            are treated as coincident atoms and never bonded.
        tolerance: Relative half-width of the accepted distance band.
            Pairs within ``[d_min (1 - tol), d_min (1 + tol)]`` of the
            shortest candidate distance ``d_min`` are bonded.
        layer_tolerance: Two atoms belong to the same layer of a
            layered (hexagonal) structure when their fractional *z*
            coordinates differ by no more than this.
        periodic: If ``True`` (the default), pair distances use the
            minimum-image convention.  If ``False``, distances are
            measured between the coordinates as stored, which keeps
            every bond inside the drawn cell.
        default_window: Inclusive fractional-coordinate range of
            atoms considered for bonding.
        molecular_window: Range used for molecular crystals.
        hexagonal_window: Range used for hexagonal structures.
        max_bonds_per_central_atom: Number of nearest satellite atoms
            bonded to each central atom in molecular crystals.
    """

    min_bond_length: float = MIN_BOND_LENGTH
    tolerance: float = NEAREST_NEIGHBOUR_TOLERANCE
    layer_tolerance: float = LAYER_TOLERANCE
    periodic: bool = True
    default_window: tuple[float, float] = DEFAULT_WINDOW
    molecular_window: tuple[float, float] = MOLECULAR_WINDOW
    hexagonal_window: tuple[float, float] = HEXAGONAL_WINDOW
    max_bonds_per_central_atom: int = MAX_BONDS_PER_CENTRAL_ATOM

    def __post_init__(self) -> None:
        if self.min_bond_length < 0:
            raise ValueError(
                f"min_bond_length must be non-negative, got {self.min_bond_length}"
            )
        if not 0.0 <= self.tolerance < 1.0:
            raise ValueError(
                f"tolerance must be in [0, 1), got {self.tolerance}"
            )
        if self.layer_tolerance < 0:
            raise ValueError(
                f"layer_tolerance must be non-negative, got {self.layer_tolerance}"
            )
        if self.max_bonds_per_central_atom < 1:
            raise ValueError(
                f"max_bonds_per_central_atom must be >= 1, "
                f"got {self.max_bonds_per_central_atom}"
            )
        for name in _WINDOW_FIELDS:
            window = tuple(float(v) for v in getattr(self, name))
            if len(window) != 2:
                raise ValueError(
                    f"{name} must be a (lower, upper) pair, got {window}"
                )
            if window[0] > window[1]:
                raise ValueError(
                    f"{name} lower bound exceeds upper bound: {window}"
                )
            object.__setattr__(self, name, window)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Only fields that differ from their defaults are included.
        Windows are written as ``[lower, upper]`` lists.
        """
        d = _non_default_items(self)
        for name in _WINDOW_FIELDS:
            if name in d:
                d[name] = list(d[name])
        return d

    @classmethod
    def from_dict(cls, d: dict) -> BondingConfig:
        """Deserialise from a dictionary.

        Missing fields take their defaults.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(
                f"unknown bonding config keys: {sorted(unknown)}"
            )
        return cls(**d)


def save_config(path: str | Path, config: BondingConfig) -> None:
    """Write *config* to a JSON file with two-space indentation."""
    Path(path).write_text(json.dumps(config.to_dict(), indent=2) + "\n")


def load_config(path: str | Path) -> BondingConfig:
    """Read a :class:`BondingConfig` from a JSON file.

    An empty JSON object yields the default configuration.

    Raises:
        ValueError: If the file contains unknown keys.
    """
    return BondingConfig.from_dict(json.loads(Path(path).read_text()))
