"""Exception and warning types raised by crystalcell."""


class InvalidCellGeometry(ValueError):
    """Lattice parameters that do not describe a physical cell."""


class UnsupportedStructure(ValueError):
    """A structure whose bonding cannot be inferred by any policy."""


class BondingWarning(UserWarning):
    """Issued when bond inference falls back to an empty bond list."""
