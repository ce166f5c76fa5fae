"""
Unit tests for table-driven diplotype calling.
Covers the priority, combined and count calling modes.
"""

import pytest
from pgxrules.services.pharmacogenomics.diplotype_caller import DiplotypeCaller
from pgxrules.services.pharmacogenomics.gene_definitions import UnsupportedGeneError
from pgxrules.services.pharmacogenomics.genotype_normalizer import normalize_calls
from pgxrules.services.pharmacogenomics.models import UNKNOWN, VariantCall


def _normalized(**genotypes):
    return normalize_calls([VariantCall(variant_id=k, genotype=v) for k, v in genotypes.items()])


@pytest.fixture
def caller():
    return DiplotypeCaller()


class TestPriorityMode:

    def test_ugt1a1_no_data_assumes_reference(self, caller):
        diplotype = caller.call("UGT1A1", {})
        assert (diplotype.allele1, diplotype.allele2) == ("*1", "*1")

    @pytest.mark.parametrize("genotype,expected", [
        ("GG", ("*1", "*1")),
        ("AG", ("*1", "*6")),
        ("AA", ("*6", "*6")),
    ])
    def test_ugt1a1_star6(self, caller, genotype, expected):
        diplotype = caller.call("UGT1A1", _normalized(rs4148323=genotype))
        assert (diplotype.allele1, diplotype.allele2) == expected

    def test_ugt1a1_star27_consulted_when_star6_wild_type(self, caller):
        diplotype = caller.call("UGT1A1", _normalized(rs4148323="GG", rs887829="CT"))
        assert diplotype.label == "*1/*27"

    def test_ugt1a1_star27_ignored_once_star6_found(self, caller):
        diplotype = caller.call("UGT1A1", _normalized(rs4148323="AG", rs887829="TT"))
        assert diplotype.label == "*1/*6"

    def test_slco1b1_no_data_is_unknown(self, caller):
        diplotype = caller.call("SLCO1B1", {})
        assert diplotype.is_unknown

    def test_slco1b1_heterozygote(self, caller):
        assert caller.call("SLCO1B1", _normalized(rs4149056="C/T")).label == "*1/*5"

    def test_f5_leiden_takes_priority(self, caller):
        diplotype = caller.call("F5", _normalized(rs6025="AG", rs6027="TT"))
        assert diplotype.label == "WT/R506Q"

    def test_f5_h1299r_when_leiden_wild_type(self, caller):
        assert caller.call("F5", _normalized(rs6025="GG", rs6027="CT")).label == "WT/H1299R"

    def test_vkorc1_keeps_allele_order(self, caller):
        assert caller.call("VKORC1", _normalized(rs9923231="GA")).label == "G/A"
        assert caller.call("VKORC1", _normalized(rs9923231="AG")).label == "A/G"

    def test_cyp3a5(self, caller):
        assert caller.call("CYP3A5", _normalized(rs776746="A/G")).label == "*1/*3"

    def test_incomplete_genotype_does_not_resolve(self, caller):
        diplotype = caller.call("CYP3A5", _normalized(rs776746="A"))
        assert diplotype.is_unknown

    def test_case_insensitive_gene(self, caller):
        assert caller.call("cyp3a5", _normalized(rs776746="GG")).label == "*3/*3"


class TestCombinedMode:

    @pytest.mark.parametrize("star2,star3,expected", [
        ("CC", "AA", "*1/*1"),
        ("CT", "AA", "*1/*2"),
        ("TT", "AA", "*2/*2"),
        ("CC", "AC", "*1/*3"),
        ("CC", "CC", "*3/*3"),
        ("CT", "AC", "*2/*3"),
    ])
    def test_cyp2c9(self, caller, star2, star3, expected):
        diplotype = caller.call("CYP2C9", _normalized(rs1799853=star2, rs1057910=star3))
        assert diplotype.label == expected

    def test_cyp2c9_requires_both_variants(self, caller):
        assert caller.call("CYP2C9", _normalized(rs1799853="CT")).is_unknown
        assert caller.call("CYP2C9", _normalized(rs1799853="CT", rs1057910="--")).is_unknown


class TestCountMode:

    def test_no_variant_copies(self, caller):
        diplotype = caller.call("CYP2D6", _normalized(rs3892097="GG", rs1065852="CC"))
        assert diplotype.label == "*1/*1"

    def test_single_copy(self, caller):
        assert caller.call("CYP2D6", _normalized(rs3892097="AG")).label == "*1/*4"

    def test_homozygous_variant(self, caller):
        assert caller.call("CYP2D6", _normalized(rs3892097="AA")).label == "*4/*4"

    def test_two_heterozygous_variants_flag_phase_ambiguity(self, caller):
        detail = caller.call_with_detail("CYP2D6", _normalized(rs3892097="AG", rs1065852="CT"))

        assert detail.diplotype.label == "*4/*10"
        assert detail.phase_ambiguity
        assert detail.possible_diplotypes == ["*4/*10", "*4/*1", "*10/*1"]

    def test_more_than_two_copies_is_unknown(self, caller):
        detail = caller.call_with_detail("CYP2D6", _normalized(rs3892097="AA", rs1065852="CT"))

        assert detail.diplotype.is_unknown
        assert detail.phase_ambiguity
        assert detail.possible_diplotypes == ["*4/*4", "*4/*10"]

    @pytest.mark.parametrize("genotype", ["CT", "AC", "TT"])
    def test_pair_outside_locus_alleles_is_not_counted(self, caller, genotype):
        detail = caller.call_with_detail("CYP2D6", _normalized(rs3892097=genotype, rs1065852="CC"))

        assert detail.resolved_variants == ["rs1065852"]
        assert detail.diplotype.label == "*1/*1"

    def test_only_unrecognised_pairs_is_unknown(self, caller):
        assert caller.call("CYP2D6", _normalized(rs3892097="CT")).is_unknown

    def test_no_data_is_unknown(self, caller):
        assert caller.call("CYP2D6", {}).allele1 == UNKNOWN


class TestUnsupportedGene:

    def test_raises(self, caller):
        with pytest.raises(UnsupportedGeneError) as exc:
            caller.call("CYP2C19", {})
        assert exc.value.gene == "CYP2C19"
        assert "UGT1A1" in str(exc.value)

    def test_is_a_key_error(self, caller):
        with pytest.raises(KeyError):
            caller.call("TPMT", {})
