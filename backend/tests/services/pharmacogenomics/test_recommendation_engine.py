"""
Unit tests for table-driven drug recommendations.
"""

import pytest
from pgxrules.services.pharmacogenomics.gene_definitions import SUPPORTED_GENES
from pgxrules.services.pharmacogenomics.models import RiskTier
from pgxrules.services.pharmacogenomics.recommendation_engine import RecommendationEngine
from pgxrules.services.pharmacogenomics.recommendation_tables import DRUG_TABLES, SLCO1B1_PREFERRED_STATINS


@pytest.fixture
def engine():
    return RecommendationEngine()


def _by_drug(recommendations):
    return {r.drug.split(" (")[0]: r for r in recommendations}


class TestUGT1A1:

    def test_poor_metabolizer(self, engine):
        recs = _by_drug(engine.recommend("UGT1A1", "Poor Metabolizer"))

        assert list(recs) == ["Irinotecan", "Cabotegravir", "Nilotinib", "Belinostat"]
        assert recs["Irinotecan"].risk_tier == RiskTier.CRITICAL
        assert "30%" in recs["Irinotecan"].dose_adjustment
        assert recs["Irinotecan"].cpic_level == "A"
        assert recs["Irinotecan"].guideline_citation.pmid == "15883587"

    def test_normal_metabolizer_skips_drugs_without_a_row(self, engine):
        recs = _by_drug(engine.recommend("UGT1A1", "Normal Metabolizer"))

        assert list(recs) == ["Irinotecan", "Cabotegravir"]
        assert all(r.risk_tier == RiskTier.STANDARD for r in recs.values())


class TestSLCO1B1:

    def test_decreased_function(self, engine):
        recs = engine.recommend("SLCO1B1", "Decreased Function")
        simvastatin = recs[0]

        assert simvastatin.drug == "Simvastatin"
        assert simvastatin.risk_tier == RiskTier.HIGH
        assert "4-5x" in simvastatin.risk_multiplier
        assert simvastatin.alternatives == ["Pravastatin", "Rosuvastatin", "Pitavastatin"]
        assert SLCO1B1_PREFERRED_STATINS in [r.drug for r in recs]

    def test_poor_function_simvastatin_very_high(self, engine):
        simvastatin = engine.recommend("SLCO1B1", "Poor Function")[0]
        assert simvastatin.risk_tier == RiskTier.VERY_HIGH

    def test_normal_function(self, engine):
        drugs = [r.drug for r in engine.recommend("SLCO1B1", "Normal Function")]
        assert drugs == ["Simvastatin", "Atorvastatin"]

    def test_unknown_uses_conservative_fallback(self, engine):
        simvastatin = engine.recommend("SLCO1B1", "Unknown")[0]
        assert simvastatin.risk_tier == RiskTier.MODERATELY_INCREASED


class TestOtherGenes:

    def test_cyp3a5_intermediate_tacrolimus(self, engine):
        tacrolimus = engine.recommend_drug("CYP3A5", "tacrolimus", "Intermediate Expressor")

        assert "1.2-1.5x" in tacrolimus.dose_adjustment
        assert tacrolimus.cpic_guideline is True
        assert tacrolimus.cpic_level == "A"

    def test_cyp2d6_ultrarapid_codeine(self, engine):
        codeine = engine.recommend_drug("CYP2D6", "Codeine", "Ultrarapid Metabolizer")
        assert codeine.risk_tier == RiskTier.CRITICAL
        assert "Morphine" in codeine.alternatives

    def test_f5_very_high_contraceptives_critical(self, engine):
        recs = engine.recommend("F5", "Very High")
        assert recs[0].drug.startswith("Combined Oral Contraceptives")
        assert recs[0].risk_tier == RiskTier.CRITICAL

    def test_unknown_drug(self, engine):
        assert engine.recommend_drug("CYP2D6", "aspirin", "Poor Metabolizer") is None

    @pytest.mark.parametrize("gene", SUPPORTED_GENES)
    @pytest.mark.parametrize("phenotype", [
        "Poor Metabolizer", "Intermediate Metabolizer", "Normal Metabolizer", "Unknown",
        "Poor Function", "Decreased Function", "Normal Function",
        "High Sensitivity", "Low Sensitivity", "Expressor", "Non-expressor", "Very High", "Normal",
    ])
    def test_at_most_one_entry_per_drug(self, engine, gene, phenotype):
        drugs = [r.drug for r in engine.recommend(gene, phenotype)]
        assert len(drugs) == len(set(drugs))
        assert all(r.guidance for r in engine.recommend(gene, phenotype))


class TestDrugTables:

    @pytest.mark.parametrize("gene", SUPPORTED_GENES)
    def test_outcome_rows_are_read_only(self, gene):
        for rule in DRUG_TABLES[gene]:
            with pytest.raises(TypeError):
                rule.outcomes["Normal"] = rule.fallback

    def test_expressor_rows_keep_their_phenotypes(self):
        tacrolimus = next(r for r in DRUG_TABLES["CYP3A5"] if r.drug.startswith("Tacrolimus"))
        assert list(tacrolimus.outcomes) == ["Expressor", "Intermediate Expressor"]
