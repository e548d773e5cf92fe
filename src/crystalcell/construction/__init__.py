"""Bond inference, supercell replication and file I/O for unit cells."""

from crystalcell.construction.bonds import (
    compute_bonds,
    coordinate_window,
    filter_candidates,
)
from crystalcell.construction.builders import from_pymatgen
from crystalcell.construction.cache import BondCache
from crystalcell.construction.config import BondingConfig, load_config, save_config
from crystalcell.construction.policies import (
    BondingPolicy,
    CandidateSet,
    PolicyChoice,
    apply_policy,
    select_policy,
)
from crystalcell.construction.slicing import slice_plane
from crystalcell.construction.structure_io import load_structures, save_structures
from crystalcell.construction.supercell import (
    generate_supercell,
    replicate_atoms,
    replicate_bonds,
)

__all__ = [
    "BondCache",
    "BondingConfig",
    "BondingPolicy",
    "CandidateSet",
    "PolicyChoice",
    "apply_policy",
    "compute_bonds",
    "coordinate_window",
    "filter_candidates",
    "from_pymatgen",
    "generate_supercell",
    "load_config",
    "load_structures",
    "replicate_atoms",
    "replicate_bonds",
    "save_config",
    "save_structures",
    "select_policy",
    "slice_plane",
]
