from __future__ import annotations

from dataclasses import dataclass

from crystalcell.model.enums import BondType


@dataclass(frozen=True)
class Bond:
    """An undirected bond between two atoms of the same atom list.

    Bonds are stored in canonical order (``atom1 < atom2``) so that a
    bond list is a simple graph: two bonds describe the same edge if
    and only if they compare equal on :attr:`key`.  Use
    :meth:`between` to build a bond from an unordered pair.

    Attributes:
        atom1: Index of the lower-numbered atom.
        atom2: Index of the higher-numbered atom.
        bond_type: Bond order.
    """

    atom1: int
    atom2: int
    bond_type: BondType = BondType.SINGLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "atom1", int(self.atom1))
        object.__setattr__(self, "atom2", int(self.atom2))
        object.__setattr__(self, "bond_type", BondType(self.bond_type))
        if self.atom1 < 0:
            raise ValueError(f"atom indices must be non-negative, got {self.atom1}")
        if self.atom1 == self.atom2:
            raise ValueError(f"bond must join two different atoms, got {self.atom1} twice")
        if self.atom1 > self.atom2:
            raise ValueError(
                f"bond indices must satisfy atom1 < atom2, "
                f"got ({self.atom1}, {self.atom2}); use Bond.between()"
            )

    @classmethod
    def between(
        cls,
        i: int,
        j: int,
        bond_type: BondType | str = BondType.SINGLE,
    ) -> Bond:
        """Create a bond between atoms *i* and *j* in either order."""
        i, j = int(i), int(j)
        return cls(min(i, j), max(i, j), BondType(bond_type))

    @property
    def key(self) -> tuple[int, int]:
        """The ``(atom1, atom2)`` pair identifying this edge."""
        return (self.atom1, self.atom2)

    def shifted(self, offset: int) -> Bond:
        """Return a copy with both indices increased by *offset*."""
        return Bond(self.atom1 + offset, self.atom2 + offset, self.bond_type)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        The type is omitted for single bonds.
        """
        d: dict = {"atom1": self.atom1, "atom2": self.atom2}
        if self.bond_type is not BondType.SINGLE:
            d["type"] = str(self.bond_type)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Bond:
        """Deserialise from a dictionary, accepting either index order."""
        return cls.between(d["atom1"], d["atom2"], d.get("type", BondType.SINGLE))
