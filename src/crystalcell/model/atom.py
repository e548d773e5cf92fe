from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from crystalcell.model._util import _non_default_items


@dataclass(frozen=True)
class Atom:
    """An atom at a fractional position in a unit cell.

    Fractional coordinates are not wrapped: conventional-cell data
    deliberately carries corner, edge and face replicas at 0 and 1,
    and molecular crystals carry atoms slightly outside ``[0, 1]`` so
    that whole molecules are shown.

    Attributes:
        element: Chemical symbol, e.g. ``"C"`` or ``"Si"``.
        x: Fractional coordinate along **a**.
        y: Fractional coordinate along **b**.
        z: Fractional coordinate along **c**.
        colour: Optional display colour override.  Not used by the
            bonding engine.
        radius: Optional display radius override in angstroms.  Not
            used by the bonding engine.
    """

    element: str
    x: float
    y: float
    z: float
    colour: str | None = None
    radius: float | None = None

    def __post_init__(self) -> None:
        if not self.element:
            raise ValueError("element must be a non-empty symbol")
        for name in ("x", "y", "z"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)
        if self.radius is not None and self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")

    @property
    def frac(self) -> np.ndarray:
        """Fractional coordinates as a ``(3,)`` array."""
        return np.array([self.x, self.y, self.z])

    def translated(self, dx: float, dy: float, dz: float) -> Atom:
        """Return a copy shifted by ``(dx, dy, dz)`` in fractional units."""
        return Atom(
            self.element,
            self.x + dx,
            self.y + dy,
            self.z + dz,
            colour=self.colour,
            radius=self.radius,
        )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        ``colour`` and ``radius`` are omitted when unset.
        """
        d: dict = {
            "element": self.element,
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }
        d.update(_non_default_items(self))
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Atom:
        """Deserialise from a dictionary."""
        return cls(
            element=d["element"],
            x=d["x"],
            y=d["y"],
            z=d["z"],
            colour=d.get("colour"),
            radius=d.get("radius"),
        )
