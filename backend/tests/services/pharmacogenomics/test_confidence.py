"""
Confidence is driven by data completeness only.
"""

import pytest
from pgxrules.services.pharmacogenomics.confidence import ConfidenceScorer
from pgxrules.services.pharmacogenomics.diplotype_caller import DiplotypeCaller
from pgxrules.services.pharmacogenomics.genotype_normalizer import normalize_calls
from pgxrules.services.pharmacogenomics.models import ConfidenceLevel, VariantCall


def _normalized(**genotypes):
    return normalize_calls([VariantCall(variant_id=k, genotype=v) for k, v in genotypes.items()])


class TestConfidenceScorer:

    @pytest.fixture
    def scorer(self):
        return ConfidenceScorer()

    @pytest.fixture
    def caller(self):
        return DiplotypeCaller()

    def _score(self, scorer, caller, gene, normalized):
        return scorer.score(gene, caller.call(gene, normalized), normalized)

    def test_no_data_is_low_even_when_reference_assumed(self, scorer, caller):
        assert self._score(scorer, caller, "UGT1A1", {}) == ConfidenceLevel.LOW

    def test_partial_data_is_medium(self, scorer, caller):
        normalized = _normalized(rs4148323="AA")
        assert self._score(scorer, caller, "UGT1A1", normalized) == ConfidenceLevel.MEDIUM

    def test_all_defining_variants_complete_is_high(self, scorer, caller):
        normalized = _normalized(rs4148323="GG", rs887829="CC")
        assert self._score(scorer, caller, "UGT1A1", normalized) == ConfidenceLevel.HIGH

    def test_single_variant_gene_complete_is_high(self, scorer, caller):
        assert self._score(scorer, caller, "SLCO1B1", _normalized(rs4149056="CT")) == ConfidenceLevel.HIGH

    def test_unknown_allele_is_low(self, scorer, caller):
        normalized = _normalized(rs1799853="CT")
        assert self._score(scorer, caller, "CYP2C9", normalized) == ConfidenceLevel.LOW

    def test_incomplete_variant_lowers_to_medium(self, scorer, caller):
        normalized = _normalized(rs6025="GG", rs6027="C")
        assert self._score(scorer, caller, "F5", normalized) == ConfidenceLevel.MEDIUM

    def test_breakdown_records_variants(self, scorer, caller):
        normalized = _normalized(rs6025="GG", rs6027="--")
        breakdown = scorer.breakdown("F5", caller.call("F5", normalized), normalized)

        assert breakdown.complete_variants == ["rs6025"]
        assert breakdown.incomplete_variants == ["rs6027"]
        assert breakdown.missing_variants == []
        assert breakdown.to_dict()["level"] == "medium"

    @pytest.mark.parametrize("gene,genotypes,expected", [
        ("UGT1A1", {"rs4148323": "CT"}, ConfidenceLevel.LOW),
        ("UGT1A1", {"rs4148323": "AC", "rs887829": "CC"}, ConfidenceLevel.MEDIUM),
        ("SLCO1B1", {"rs4149056": "AG"}, ConfidenceLevel.LOW),
        ("F5", {"rs6025": "CT"}, ConfidenceLevel.LOW),
        ("F5", {"rs6025": "GG", "rs6027": "AG"}, ConfidenceLevel.MEDIUM),
        ("VKORC1", {"rs9923231": "CT"}, ConfidenceLevel.LOW),
        ("CYP2C9", {"rs1799853": "AG", "rs1057910": "AA"}, ConfidenceLevel.LOW),
        ("CYP3A5", {"rs776746": "CT"}, ConfidenceLevel.LOW),
        ("CYP2D6", {"rs3892097": "CT"}, ConfidenceLevel.LOW),
        ("CYP2D6", {
            "rs3892097": "CT", "rs28371725": "CC", "rs1065852": "CC", "rs5030655": "GG", "rs28371706": "CC",
        }, ConfidenceLevel.MEDIUM),
    ])
    def test_pair_unknown_at_its_locus_is_not_complete(self, scorer, caller, gene, genotypes, expected):
        assert self._score(scorer, caller, gene, _normalized(**genotypes)) == expected

    def test_breakdown_records_unrecognised_pairs(self, scorer, caller):
        normalized = _normalized(rs4148323="AC", rs887829="CC")
        breakdown = scorer.breakdown("UGT1A1", caller.call("UGT1A1", normalized), normalized)

        assert breakdown.complete_variants == ["rs887829"]
        assert breakdown.unrecognised_variants == ["rs4148323"]
        assert breakdown.to_dict()["unrecognised_variants"] == ["rs4148323"]

    def test_more_complete_data_never_lowers_confidence(self, scorer, caller):
        order = [ConfidenceLevel.LOW, ConfidenceLevel.MEDIUM, ConfidenceLevel.HIGH]
        steps = [
            {},
            {"rs3892097": "GG"},
            {"rs3892097": "GG", "rs28371725": "CC", "rs1065852": "CC"},
            {"rs3892097": "GG", "rs28371725": "CC", "rs1065852": "CC", "rs5030655": "GG", "rs28371706": "CC"},
        ]
        levels = [order.index(self._score(scorer, caller, "CYP2D6", _normalized(**s))) for s in steps]
        assert levels == sorted(levels)
        assert levels[-1] == 2
