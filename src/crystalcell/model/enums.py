from __future__ import annotations

from enum import StrEnum


class BondType(StrEnum):
    """Bond order drawn between two atoms."""

    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"


class LatticeType(StrEnum):
    """Structure-type tag used to choose a bonding policy.

    The tag says nothing about symmetry beyond what the bonding
    policies need: ``DIAMOND`` bonds one element to itself,
    ``ZINCBLENDE``, ``ROCKSALT``, ``CESIUMCHLORIDE`` and ``FLUORITE``
    bond two elements to each other, and ``HEXAGONAL`` bonds within
    layers of constant fractional *z*.
    """

    CUBIC = "cubic"
    FCC = "fcc"
    BCC = "bcc"
    DIAMOND = "diamond"
    ZINCBLENDE = "zincblende"
    ROCKSALT = "rocksalt"
    CESIUMCHLORIDE = "cesiumchloride"
    FLUORITE = "fluorite"
    HEXAGONAL = "hexagonal"


class Category(StrEnum):
    """Chemical class of a crystal.

    Attributes:
        COVALENT: Network solids such as diamond or SiC.
        MOLECULAR: Crystals of discrete molecules (dry ice).  Selects
            the per-molecule bonding policy and a wider coordinate
            window so that whole molecules are kept.
        IONIC: Salts such as NaCl or CaF2.
        METALLIC: Metals.
    """

    COVALENT = "covalent"
    MOLECULAR = "molecular"
    IONIC = "ionic"
    METALLIC = "metallic"
