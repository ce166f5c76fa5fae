"""
Unit tests for genotype normalization and provider handling.
"""

import pytest
from pgxrules.services.pharmacogenomics.config import reset_config, update_config
from pgxrules.services.pharmacogenomics.genotype_normalizer import (
    coerce_provider,
    detect_provider,
    normalize,
    normalize_calls,
)
from pgxrules.services.pharmacogenomics.models import UNKNOWN, ProviderHint, VariantCall


class TestNormalize:
    """Canonical form of single genotype strings."""

    @pytest.mark.parametrize("raw", ["A/G", "G/A", "ag", " a-g ", "A|G", "G A"])
    def test_separators_and_case_collapse_to_sorted_pair(self, raw):
        result = normalize("rs4149056", raw)

        assert result.canonical_pair == "AG"
        assert result.is_complete
        assert result.raw_input == raw

    def test_directional_variant_keeps_order(self):
        assert normalize("rs9923231", "G/A").canonical_pair == "GA"
        assert normalize("rs9923231", "AG").canonical_pair == "AG"

    @pytest.mark.parametrize("raw", [None, "--", "00", "II", "DD", "NN", "", "  ", "Unknown", "unknown"])
    def test_no_calls_become_unknown(self, raw):
        result = normalize("rs6025", raw)

        assert result.canonical_pair == UNKNOWN
        assert not result.is_complete
        assert result.is_unknown

    def test_non_nucleotide_pair_is_unknown(self):
        result = normalize("rs6025", "XY")
        assert result.canonical_pair == UNKNOWN
        assert not result.is_complete

    @pytest.mark.parametrize("raw,expected", [("A", "A"), ("AGT", "AGT"), ("ATTG", "ATTG")])
    def test_wrong_length_passes_through_incomplete(self, raw, expected):
        result = normalize("rs6025", raw)

        assert result.canonical_pair == expected
        assert not result.is_complete

    def test_idempotent(self):
        once = normalize("rs1057910", "c/a")
        twice = normalize("rs1057910", once.canonical_pair)

        assert once.canonical_pair == twice.canonical_pair == "AC"

    def test_configured_no_call_token(self):
        try:
            update_config(**{"input.no_call_tokens": ["--", "AA"]})
            assert normalize("rs6025", "AA").canonical_pair == UNKNOWN
        finally:
            reset_config()

        assert normalize("rs6025", "AA").canonical_pair == "AA"


class TestNormalizeCalls:

    def test_keyed_by_variant_id(self):
        calls = [
            VariantCall(variant_id="rs1799853", genotype="C/T"),
            VariantCall(variant_id="rs1057910", genotype="AA"),
        ]
        normalized = normalize_calls(calls)

        assert set(normalized) == {"rs1799853", "rs1057910"}
        assert normalized["rs1799853"].canonical_pair == "CT"

    def test_first_call_for_a_variant_wins(self):
        calls = [
            VariantCall(variant_id="rs6025", genotype="GG"),
            VariantCall(variant_id="rs6025", genotype="AA"),
        ]
        assert normalize_calls(calls)["rs6025"].canonical_pair == "GG"

    def test_empty_input(self):
        assert normalize_calls([]) == {}


class TestProvider:

    def test_detect_23andme(self):
        header = "# This data file generated by 23andMe at: Mon Jan 01 2024\n# rsid\tchromosome\tposition\tgenotype"
        assert detect_provider(header) == ProviderHint.TWENTYTHREE_AND_ME

    def test_detect_ancestrydna(self):
        assert detect_provider("#AncestryDNA raw data download") == ProviderHint.ANCESTRYDNA

    def test_detect_unknown(self):
        assert detect_provider("rs123\t1\t100\tAG") == ProviderHint.UNKNOWN

    @pytest.mark.parametrize("value,expected", [
        ("23andMe", ProviderHint.TWENTYTHREE_AND_ME),
        (" ancestrydna ", ProviderHint.ANCESTRYDNA),
        ("myheritage", ProviderHint.UNKNOWN),
        (None, ProviderHint.UNKNOWN),
    ])
    def test_coerce_provider(self, value, expected):
        assert coerce_provider(value) == expected
