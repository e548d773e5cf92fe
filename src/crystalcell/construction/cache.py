"""Explicit memoisation of inferred bonds."""

from __future__ import annotations

from crystalcell.construction.bonds import compute_bonds
from crystalcell.construction.config import BondingConfig
from crystalcell.model import Bond, UnitCellStructure


class BondCache:
    """Per-structure cache of :func:`compute_bonds` results.

    Structures are immutable and hashable, so equal structures share
    an entry.  Bonds are computed at most once per structure until
    :meth:`invalidate` is called.  A structure whose computation
    raises leaves the cache unchanged.

    Args:
        config: Bonding configuration used for every entry.  Defaults
            to :class:`BondingConfig()`.
    """

    def __init__(self, config: BondingConfig | None = None) -> None:
        self.config = config if config is not None else BondingConfig()
        self._bonds: dict[UnitCellStructure, tuple[Bond, ...]] = {}

    def bonds(self, structure: UnitCellStructure) -> list[Bond]:
        """Return the bonds of *structure*, computing them on first use."""
        if structure not in self._bonds:
            self._bonds[structure] = tuple(compute_bonds(structure, self.config))
        return list(self._bonds[structure])

    def invalidate(self, structure: UnitCellStructure | None = None) -> None:
        """Drop the entry for *structure*, or every entry when ``None``."""
        if structure is None:
            self._bonds.clear()
        else:
            self._bonds.pop(structure, None)

    def __contains__(self, structure: object) -> bool:
        return structure in self._bonds

    def __len__(self) -> int:
        return len(self._bonds)

    def __repr__(self) -> str:
        return f"BondCache(config={self.config!r}, entries={len(self)})"
