"""
Per-gene result composition, including the reference clinical scenarios.
"""

import pytest
from pydantic import ValidationError
from pgxrules.services.pharmacogenomics.genotype_normalizer import normalize_calls
from pgxrules.services.pharmacogenomics.models import (
    CombinedRiskBand,
    ConfidenceLevel,
    Diplotype,
    ProviderHint,
    RiskTier,
    SLCO1B1AnalysisResult,
    VariantCall,
)
from pgxrules.services.pharmacogenomics.result_composer import ResultComposer


def _normalized(**genotypes):
    return normalize_calls([VariantCall(variant_id=k, genotype=v) for k, v in genotypes.items()])


@pytest.fixture
def composer():
    return ResultComposer()


class TestClinicalScenarios:

    def test_ugt1a1_star6_homozygote(self, composer):
        result = composer.compose("UGT1A1", _normalized(rs4148323="AA"))

        assert result.diplotype.label == "*6/*6"
        assert result.score == pytest.approx(0.6)
        assert result.phenotype == "Poor Metabolizer"
        irinotecan = result.recommendations[0]
        assert irinotecan.risk_tier == RiskTier.CRITICAL
        assert "30%" in irinotecan.dose_adjustment
        assert result.gilbert_syndrome.status == "Positive"

    def test_ugt1a1_no_data(self, composer):
        result = composer.compose("UGT1A1", {})

        assert result.diplotype.label == "*1/*1"
        assert result.phenotype == "Normal Metabolizer"
        assert result.confidence == ConfidenceLevel.LOW
        assert result.safety_alerts == []

    def test_slco1b1_heterozygote(self, composer):
        result = composer.compose("SLCO1B1", _normalized(rs4149056="C/T"))

        assert result.diplotype.label == "*1/*5"
        assert result.phenotype == "Decreased Function"
        simvastatin = result.recommendations[0]
        assert simvastatin.drug == "Simvastatin"
        assert simvastatin.risk_tier == RiskTier.HIGH
        assert "4-5x" in simvastatin.risk_multiplier
        for statin in ("Pravastatin", "Rosuvastatin", "Pitavastatin"):
            assert statin in simvastatin.alternatives

    def test_f5_leiden_homozygote(self, composer):
        result = composer.compose("F5", _normalized(rs6025="A/A"))

        assert result.phenotype == "Very High"
        assert result.thrombophilia_risk == "Very High"
        assert result.vte_risk_multiplier == 50
        assert result.contraceptive_safety.combined_ocps == "Contraindicated"
        assert result.contraceptive_safety.fda_black_box_applies is True

    def test_vkorc1_high_sensitivity_with_cyp2c9_poor(self, composer):
        normalized = _normalized(rs9923231="AA", rs1799853="CC", rs1057910="CC")
        cyp2c9 = composer.compose("CYP2C9", normalized)
        assert cyp2c9.phenotype == "Poor Metabolizer"

        result = composer.compose("VKORC1", normalized, cyp2c9_result=cyp2c9)

        assert result.phenotype == "High Sensitivity"
        assert result.combined_risk.combined_risk == CombinedRiskBand.VERY_HIGH
        assert result.combined_risk.bleeding_risk_multiplier == "5-8x baseline risk"
        assert result.warfarin_dosing.estimated_dose == "0.5-2mg/day"
        assert result.warfarin_recommendation.risk_tier == RiskTier.VERY_HIGH

    def test_cyp3a5_intermediate_expressor(self, composer):
        result = composer.compose("CYP3A5", _normalized(rs776746="A/G"))

        assert result.diplotype.label == "*1/*3"
        assert result.phenotype == "Intermediate Expressor"
        tacrolimus = next(r for r in result.recommendations if r.drug.startswith("Tacrolimus"))
        assert "1.2-1.5x" in tacrolimus.dose_adjustment
        assert tacrolimus.cpic_guideline is True
        assert tacrolimus.cpic_level == "A"


class TestComposition:

    def test_diplotype_carries_confidence(self, composer):
        result = composer.compose("SLCO1B1", _normalized(rs4149056="TT"))
        assert result.confidence == ConfidenceLevel.HIGH
        assert result.diplotype.confidence == ConfidenceLevel.HIGH

    def test_normalized_genotypes_reported(self, composer):
        result = composer.compose("CYP2C9", _normalized(rs1799853="TC", rs1057910="AA", rs6025="GG"))
        assert [g.variant_id for g in result.normalized_genotypes] == ["rs1799853", "rs1057910"]

    def test_ugt1a1_carrier(self, composer):
        result = composer.compose("UGT1A1", _normalized(rs4148323="GG", rs887829="CT"))
        assert result.phenotype == "Intermediate Metabolizer"
        assert result.gilbert_syndrome.status == "Carrier"
        assert any("IRINOTECAN" in a for a in result.safety_alerts)

    def test_cyp3a5_has_no_alerts_or_score(self, composer):
        result = composer.compose("CYP3A5", _normalized(rs776746="AA"))
        assert result.safety_alerts == []
        assert result.score is None

    def test_vkorc1_without_cyp2c9(self, composer):
        result = composer.compose("VKORC1", _normalized(rs9923231="GA"))

        assert result.phenotype == "Intermediate Sensitivity"
        assert result.combined_risk.combined_risk == CombinedRiskBand.MODERATE
        assert result.combined_risk.bleeding_risk_multiplier == "Unknown - CYP2C9 not tested"
        assert result.combined_risk.vkorc1_genotype == "GA"
        assert "CYP2C9 testing recommended" in result.clinical_summary

    def test_cyp2d6_phase_ambiguity(self, composer):
        result = composer.compose("CYP2D6", _normalized(rs3892097="AG", rs28371725="CT"))

        assert result.diplotype.label == "*4/*41"
        assert result.phenotype == "Intermediate Metabolizer"
        assert result.phase_ambiguity
        assert "PHASE AMBIGUITY" in result.clinical_summary

    def test_cyp2d6_ultrarapid_alerts_never_reached_for_normal(self, composer):
        result = composer.compose("CYP2D6", _normalized(rs3892097="GG"))
        assert result.phenotype == "Normal Metabolizer"
        assert result.safety_alerts == []

    def test_f5_unknown(self, composer):
        result = composer.compose("F5", {})

        assert result.phenotype == "Unknown"
        assert result.vte_risk_multiplier == 1.0
        assert result.contraceptive_safety.combined_ocps == "Use Caution"
        assert result.confidence == ConfidenceLevel.LOW

    def test_f5_h1299r_carrier(self, composer):
        result = composer.compose("F5", _normalized(rs6025="GG", rs6027="CT"))
        assert result.phenotype == "Elevated"
        assert result.vte_risk_multiplier == 3.0
        assert result.safety_alerts[0] == "FACTOR V H1299R CARRIER - ELEVATED VTE RISK"
        assert not any("Leiden" in alert for alert in result.safety_alerts)
        assert result.safety_alerts[-1] == "MEDICAL ALERT: Wear bracelet/carry card noting Factor V H1299R status"

    def test_f5_leiden_medical_alert(self, composer):
        result = composer.compose("F5", _normalized(rs6025="AG"))
        assert result.safety_alerts[-1] == "MEDICAL ALERT: Wear bracelet/carry card noting Factor V Leiden status"

    def test_unrecognised_pair_is_not_high_confidence(self, composer):
        result = composer.compose("UGT1A1", _normalized(rs4148323="AC", rs887829="CC"))

        assert result.diplotype.label == "*1/*1"
        assert result.confidence == ConfidenceLevel.MEDIUM

    def test_consumer_provider_adds_limitation(self, composer):
        plain = composer.compose("UGT1A1", {}, ProviderHint.UNKNOWN)
        consumer = composer.compose("UGT1A1", {}, ProviderHint.TWENTYTHREE_AND_ME)

        assert len(consumer.limitations) == len(plain.limitations) + 1
        assert any("Consumer" in item for item in consumer.limitations)
        assert any("*28" in item for item in plain.limitations)

    def test_summaries_are_never_empty(self, composer):
        for gene in ("UGT1A1", "SLCO1B1", "F5", "VKORC1", "CYP2C9", "CYP3A5", "CYP2D6"):
            assert composer.compose(gene, {}).clinical_summary.strip()


class TestResultSchema:

    def test_score_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            SLCO1B1AnalysisResult(
                diplotype=Diplotype(allele1="*1", allele2="*1"),
                phenotype="Normal Function",
                score=2.5,
                confidence=ConfidenceLevel.HIGH,
                clinical_summary="summary",
            )

    def test_phenotype_outside_enum_rejected(self):
        with pytest.raises(ValidationError):
            SLCO1B1AnalysisResult(
                diplotype=Diplotype(allele1="*1", allele2="*1"),
                phenotype="Rapid Function",
                score=2.0,
                confidence=ConfidenceLevel.HIGH,
                clinical_summary="summary",
            )

    def test_empty_summary_rejected(self):
        with pytest.raises(ValidationError):
            SLCO1B1AnalysisResult(
                diplotype=Diplotype(allele1="*1", allele2="*1"),
                phenotype="Normal Function",
                score=2.0,
                confidence=ConfidenceLevel.HIGH,
                clinical_summary="",
            )
