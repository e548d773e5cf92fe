"""Demo script: infer bonds for the built-in cells and build a supercell."""

from pathlib import Path

from crystalcell import (
    BondCache,
    available_structures,
    generate_supercell,
    get_structure,
    save_structures,
    slice_plane,
)

OUTPUT = Path(__file__).resolve().parent / "structures.json"


def main():
    cache = BondCache()
    for structure_id in available_structures():
        structure = get_structure(structure_id)
        bonds = cache.bonds(structure)
        print(
            f"{structure.name:<18} {structure.lattice_constants:<32} "
            f"{structure.n_atoms:>3} atoms {len(bonds):>3} bonds"
        )

    diamond = get_structure("diamond")
    atoms, bonds = generate_supercell(diamond, 2, 2, 2, bonds=cache.bonds(diamond))
    print(f"Diamond 2x2x2: {len(atoms)} atoms, {len(bonds)} bonds")

    face_atoms, face_bonds = slice_plane(atoms, bonds, "xy")
    print(f"Diamond xy faces: {len(face_atoms)} atoms, {len(face_bonds)} bonds")

    save_structures(OUTPUT, [get_structure(s) for s in available_structures()])
    print(f"Saved structures to {OUTPUT}")


if __name__ == "__main__":
    main()
