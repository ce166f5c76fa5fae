"""
Pipeline configuration: defaults, dotted updates and file round-trips.
"""

import pytest
from pydantic import ValidationError
from pgxrules.services.pharmacogenomics import config
from pgxrules.services.pharmacogenomics.genotype_normalizer import normalize


@pytest.fixture(autouse=True)
def fresh_config():
    config.reset_config()
    yield
    config.reset_config()


class TestDefaults:

    def test_enabled_genes(self):
        assert config.get_enabled_genes() == ["UGT1A1", "SLCO1B1", "F5", "CYP2C9", "VKORC1", "CYP3A5", "CYP2D6"]

    def test_input_defaults(self):
        settings = config.get_input_config()
        assert "--" in settings.no_call_tokens
        assert settings.directional_variants == ["rs9923231"]

    def test_disclaimer_long_enough_for_metadata(self):
        assert len(config.get_config().disclaimer) >= 50


class TestUpdateConfig:

    def test_dotted_key(self):
        config.update_config(**{"input.default_provider": "23andme"})
        assert config.get_default_provider() == "23andme"

    def test_top_level_key(self):
        config.update_config(verbose_logging=True)
        assert config.get_config().verbose_logging is True

    def test_invalid_version_rejected(self):
        with pytest.raises(ValidationError):
            config.update_config(api_version="two")

    def test_no_call_tokens_drive_normalization(self):
        config.update_config(**{"input.no_call_tokens": ["--", "XX"]})
        assert normalize("rs6025", "XX").is_unknown
        assert normalize("rs6025", "NN").is_unknown

    def test_reset_restores_defaults(self):
        config.update_config(enabled_genes=["F5"])
        config.reset_config()
        assert "CYP2D6" in config.get_enabled_genes()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "pgx_config.json"
    config.update_config(enabled_genes=["VKORC1", "CYP2C9"])
    config.save_config_to_file(str(path))

    config.reset_config()
    loaded = config.load_config_from_file(str(path))

    assert loaded.enabled_genes == ["VKORC1", "CYP2C9"]
    assert config.get_enabled_genes() == ["VKORC1", "CYP2C9"]
