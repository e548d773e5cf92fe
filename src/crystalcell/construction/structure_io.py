"""Structure registry save/load for JSON files."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from crystalcell.model import UnitCellStructure

_VALID_SECTIONS = frozenset({"structures"})


def save_structures(
    path: str | Path,
    structures: Iterable[UnitCellStructure],
) -> None:
    """Save structures to a JSON file.

    The file holds a single ``"structures"`` list, written with
    two-space indentation.

    Args:
        path: Destination file path.
        structures: Structures to write, in order.
    """
    data = {"structures": [s.to_dict() for s in structures]}
    text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    Path(path).write_text(text, encoding="utf-8")


def load_structures(path: str | Path) -> dict[str, UnitCellStructure]:
    """Load structures from a JSON file.

    Args:
        path: Source file path.

    Returns:
        Structures keyed by id, in file order.

    Raises:
        ValueError: If the file contains unknown top-level keys, or
            two structures share an id.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in structure file: {sorted(unknown)}"
        )

    structures: dict[str, UnitCellStructure] = {}
    for d in data.get("structures", []):
        structure = UnitCellStructure.from_dict(d)
        if structure.id in structures:
            raise ValueError(f"duplicate structure id {structure.id!r}")
        structures[structure.id] = structure
    return structures
