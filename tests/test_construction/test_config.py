"""Tests for crystalcell.construction.config."""

import json

import pytest

from crystalcell.construction.config import BondingConfig, load_config, save_config


class TestBondingConfig:
    def test_defaults(self):
        config = BondingConfig()
        assert config.min_bond_length == pytest.approx(0.01)
        assert config.tolerance == pytest.approx(0.02)
        assert config.periodic is True
        assert config.default_window == (0.0, 1.0)
        assert config.molecular_window == (-0.2, 1.2)
        assert config.hexagonal_window == (-0.6, 1.6)
        assert config.max_bonds_per_central_atom == 2

    def test_windows_coerced_to_float_tuples(self):
        config = BondingConfig(default_window=[0, 1])
        assert config.default_window == (0.0, 1.0)
        assert isinstance(config.default_window, tuple)

    def test_hashable(self):
        assert hash(BondingConfig()) == hash(BondingConfig())

    @pytest.mark.parametrize("kwargs, match", [
        ({"min_bond_length": -0.1}, "min_bond_length"),
        ({"tolerance": -0.01}, "tolerance"),
        ({"tolerance": 1.0}, "tolerance"),
        ({"layer_tolerance": -1.0}, "layer_tolerance"),
        ({"max_bonds_per_central_atom": 0}, "max_bonds_per_central_atom"),
        ({"default_window": (1.0, 0.0)}, "lower bound"),
        ({"molecular_window": (0.0, 0.5, 1.0)}, "pair"),
    ])
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            BondingConfig(**kwargs)


class TestDictRoundTrip:
    def test_default_is_empty(self):
        assert BondingConfig().to_dict() == {}

    def test_only_changed_fields(self):
        d = BondingConfig(tolerance=0.05, periodic=False).to_dict()
        assert d == {"tolerance": 0.05, "periodic": False}

    def test_window_as_list(self):
        d = BondingConfig(hexagonal_window=(-0.5, 1.5)).to_dict()
        assert d == {"hexagonal_window": [-0.5, 1.5]}

    def test_from_dict(self):
        config = BondingConfig.from_dict({"molecular_window": [-0.3, 1.3]})
        assert config == BondingConfig(molecular_window=(-0.3, 1.3))

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="unknown bonding config keys"):
            BondingConfig.from_dict({"tolerence": 0.1})


class TestFileIO:
    def test_save_load(self, tmp_path):
        config = BondingConfig(tolerance=0.03, max_bonds_per_central_atom=4)
        path = tmp_path / "bonding.json"
        save_config(path, config)
        assert load_config(path) == config

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "bonding.json"
        path.write_text("{}")
        assert load_config(path) == BondingConfig()

    def test_saved_json(self, tmp_path):
        path = tmp_path / "bonding.json"
        save_config(str(path), BondingConfig(periodic=False))
        assert json.loads(path.read_text()) == {"periodic": False}

    def test_load_unknown_key(self, tmp_path):
        path = tmp_path / "bonding.json"
        path.write_text('{"colour": "red"}')
        with pytest.raises(ValueError, match="colour"):
            load_config(path)
