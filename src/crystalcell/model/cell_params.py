from __future__ import annotations

import math
from dataclasses import dataclass

from crystalcell.errors import InvalidCellGeometry

_PARAM_NAMES = ("a", "b", "c", "alpha", "beta", "gamma")


@dataclass(frozen=True)
class CellParams:
    """The six lattice parameters of a triclinic unit cell.

    Lattice vector **a** lies along *x*, **b** lies in the *xy* plane
    and **c** completes a right-handed set, so that
    ``a·b = |a||b| cos(gamma)``, ``a·c = |a||c| cos(beta)`` and
    ``b·c = |b||c| cos(alpha)``.

    Attributes:
        a: Length of lattice vector **a** in angstroms.
        b: Length of lattice vector **b** in angstroms.
        c: Length of lattice vector **c** in angstroms.
        alpha: Angle between **b** and **c** in degrees.
        beta: Angle between **a** and **c** in degrees.
        gamma: Angle between **a** and **b** in degrees.

    Raises:
        InvalidCellGeometry: If a length is not positive, an angle
            lies outside ``(0, 180)``, or the angles cannot be realised
            by three vectors in space.
    """

    a: float
    b: float
    c: float
    alpha: float = 90.0
    beta: float = 90.0
    gamma: float = 90.0

    def __post_init__(self) -> None:
        for name in _PARAM_NAMES:
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise InvalidCellGeometry(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)
        for name in ("a", "b", "c"):
            if getattr(self, name) <= 0:
                raise InvalidCellGeometry(
                    f"{name} must be positive, got {getattr(self, name)}"
                )
        for name in ("alpha", "beta", "gamma"):
            if not 0.0 < getattr(self, name) < 180.0:
                raise InvalidCellGeometry(
                    f"{name} must lie strictly between 0 and 180 degrees, "
                    f"got {getattr(self, name)}"
                )
        # Raises for cells whose angles cannot close.
        from crystalcell.lattice import transform_matrix

        transform_matrix(self)

    @property
    def lengths(self) -> tuple[float, float, float]:
        """``(a, b, c)`` in angstroms."""
        return (self.a, self.b, self.c)

    @property
    def angles(self) -> tuple[float, float, float]:
        """``(alpha, beta, gamma)`` in degrees."""
        return (self.alpha, self.beta, self.gamma)

    @property
    def is_cubic(self) -> bool:
        """``True`` when ``a == b == c`` and all angles are 90 degrees."""
        return (
            self.a == self.b == self.c
            and self.alpha == self.beta == self.gamma == 90.0
        )

    def constants_label(self) -> str:
        """Short human-readable description of the lattice constants.

        Cubic cells are summarised by their single edge length,
        e.g. ``"a = 3.567 Å"``; other cells list all three lengths.
        """
        if self.is_cubic:
            return f"a = {self.a:.3f} Å"
        return f"a={self.a:.2f}, b={self.b:.2f}, c={self.c:.2f} Å"

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Angles equal to 90 degrees are omitted.
        """
        d: dict = {"a": self.a, "b": self.b, "c": self.c}
        for name in ("alpha", "beta", "gamma"):
            if getattr(self, name) != 90.0:
                d[name] = getattr(self, name)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> CellParams:
        """Deserialise from a dictionary; missing angles default to 90."""
        return cls(
            a=d["a"],
            b=d["b"],
            c=d["c"],
            alpha=d.get("alpha", 90.0),
            beta=d.get("beta", 90.0),
            gamma=d.get("gamma", 90.0),
        )
