"""
Unit tests for configuration loading and validation.
"""

import pytest
from pathlib import Path

from stargen.config import CatalogParameters
from stargen.components import StellarCategory


CONFIG_TEMPLATE = """
catalog_name: {name}
output_directory: ./results/test
generation:
  base_seed: {seed}
  white_dwarf_count: {wd}
  giant_count: {giants}
diagnostics:
  check_physical_consistency: {check}
  show_progress: false
"""


def write_config(tmp_path, name="test_catalog", seed=42, wd=100, giants=0, check="true"):
    """Write a configuration file and return its path."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_TEMPLATE.format(
        name=name, seed=seed, wd=wd, giants=giants, check=check
    ))
    return str(path)


def test_load_shipped_config():
    """Test loading the white dwarf catalog configuration file."""
    config_path = Path(__file__).parent.parent / 'configs' / 'white_dwarf_catalog.yaml'
    params = CatalogParameters.from_yaml(str(config_path))

    assert params.catalog_name == "white_dwarf_survey"
    assert params.output_directory == "./results/white_dwarfs"
    assert params.base_seed == 42
    assert params.white_dwarf_count == 1000
    assert params.total_count == 1000
    assert params.validate() == []


def test_load_config(tmp_path):
    params = CatalogParameters.from_yaml(write_config(tmp_path, seed=7, wd=25, check="false"))

    assert params.catalog_name == "test_catalog"
    assert params.base_seed == 7
    assert params.white_dwarf_count == 25
    assert params.main_sequence_count == 0
    assert params.check_physical_consistency is False
    assert params.show_progress is False


def test_counts_in_category_order(tmp_path):
    params = CatalogParameters.from_yaml(write_config(tmp_path, wd=10))

    assert list(params.counts) == list(StellarCategory)
    assert params.counts[StellarCategory.WHITE_DWARF] == 10
    assert params.total_count == 10


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        CatalogParameters.from_yaml("/nonexistent/config.yaml")


def test_missing_required_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("catalog_name: x\noutput_directory: ./out\n")
    with pytest.raises(ValueError):
        CatalogParameters.from_yaml(str(path))


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    with pytest.raises(ValueError):
        CatalogParameters.from_yaml(str(path))


def test_fractional_count_rejected(tmp_path):
    with pytest.raises(ValueError):
        CatalogParameters.from_yaml(write_config(tmp_path, wd=10.5))


def test_large_seed_parsed_exactly(tmp_path):
    params = CatalogParameters.from_yaml(write_config(tmp_path, seed=2**64 - 100, wd=10))
    assert params.base_seed == 2**64 - 100
    assert params.validate() == []


class TestValidation:
    """Tests for CatalogParameters.validate()."""

    def test_valid(self):
        params = CatalogParameters("ok", "./out", white_dwarf_count=10)
        assert params.validate() == []

    def test_negative_seed(self):
        params = CatalogParameters("bad", "./out", base_seed=-1, white_dwarf_count=10)
        warnings = params.validate()
        assert any(w.startswith("ERROR") and "base_seed" in w for w in warnings)

    def test_seed_too_large(self):
        params = CatalogParameters("bad", "./out", base_seed=2**64, white_dwarf_count=10)
        assert any(w.startswith("ERROR") for w in params.validate())

    def test_seed_range_overflow(self):
        params = CatalogParameters("bad", "./out", base_seed=2**64 - 5, white_dwarf_count=10)
        warnings = params.validate()
        assert any("overflows" in w for w in warnings)

    def test_negative_count(self):
        params = CatalogParameters("bad", "./out", white_dwarf_count=-3)
        warnings = params.validate()
        assert any(w.startswith("ERROR") and "white dwarf" in w for w in warnings)

    def test_unimplemented_category_requested(self):
        params = CatalogParameters("bad", "./out", white_dwarf_count=10, giant_count=5)
        warnings = params.validate()
        assert any(w.startswith("ERROR") and "giant" in w for w in warnings)

    def test_empty_catalog_warning(self):
        params = CatalogParameters("empty", "./out")
        warnings = params.validate()
        assert len(warnings) == 1
        assert warnings[0].startswith("WARNING")

    def test_repr(self):
        params = CatalogParameters("survey", "./out", white_dwarf_count=10)
        text = repr(params)
        assert "survey" in text
        assert "white dwarf: 10" in text
