"""
Integration tests for the multi-gene analysis pipeline and report contract.
"""

import pytest
from pydantic import ValidationError
from pgxrules.schemas.pgx_schema import ComprehensiveReport, validate_report
from pgxrules.services.pharmacogenomics.gene_definitions import UnsupportedGeneError
from pgxrules.services.pharmacogenomics.models import CombinedRiskBand, ProviderHint, VariantCall
from pgxrules.services.pipeline.analysis_pipeline import analyze_gene, run_comprehensive_analysis


def _calls(**genotypes):
    return [VariantCall(variant_id=k, genotype=v) for k, v in genotypes.items()]


class TestComprehensiveAnalysis:

    def test_all_enabled_genes_in_evaluation_order(self):
        report = run_comprehensive_analysis([])

        assert isinstance(report, ComprehensiveReport)
        assert report.summary.genes_analyzed == ["UGT1A1", "SLCO1B1", "F5", "CYP2C9", "VKORC1", "CYP3A5", "CYP2D6"]
        assert report.provider == ProviderHint.UNKNOWN

    def test_empty_input_raises_no_warnings(self):
        report = run_comprehensive_analysis([])
        assert report.summary.critical_warnings == []
        assert report.summary.high_confidence_results == 0

    def test_genes_filter(self):
        report = run_comprehensive_analysis(_calls(rs4149056="CC"), genes=["slco1b1"])

        assert list(report.results) == ["SLCO1B1"]
        assert report.summary.total_drugs_affected == len(report.results["SLCO1B1"].recommendations)

    def test_unsupported_gene(self):
        with pytest.raises(UnsupportedGeneError):
            run_comprehensive_analysis([], genes=["BRCA1"])

    def test_cyp2c9_feeds_vkorc1(self):
        report = run_comprehensive_analysis(_calls(rs9923231="AA", rs1799853="CC", rs1057910="CC"))
        combined = report.results["VKORC1"].combined_risk

        assert combined.combined_risk == CombinedRiskBand.VERY_HIGH
        assert combined.cyp2c9_diplotype == "*3/*3"

    def test_high_confidence_count(self):
        report = run_comprehensive_analysis(
            _calls(rs4149056="TT", rs776746="GG"), genes=["SLCO1B1", "CYP3A5", "F5"]
        )
        assert report.summary.high_confidence_results == 2


class TestCriticalWarnings:

    def test_poor_statin_function(self):
        warnings = run_comprehensive_analysis(_calls(rs4149056="CC")).summary.critical_warnings
        assert "SLCO1B1: High statin myopathy risk" in warnings

    def test_decreased_statin_function_is_not_critical(self):
        warnings = run_comprehensive_analysis(_calls(rs4149056="CT")).summary.critical_warnings
        assert "SLCO1B1: High statin myopathy risk" not in warnings

    def test_warfarin_sensitivity(self):
        warnings = run_comprehensive_analysis(_calls(rs9923231="AA")).summary.critical_warnings
        assert "VKORC1: Warfarin sensitivity detected" in warnings

    def test_factor_v_leiden_fold(self):
        heterozygous = run_comprehensive_analysis(_calls(rs6025="AG")).summary.critical_warnings
        homozygous = run_comprehensive_analysis(_calls(rs6025="AA")).summary.critical_warnings

        assert any("5-7x clotting risk" in w for w in heterozygous)
        assert any("80x clotting risk" in w for w in homozygous)

    def test_actionable_metabolizer_alerts_promoted(self):
        warnings = run_comprehensive_analysis(_calls(rs4148323="AA")).summary.critical_warnings
        assert "IRINOTECAN: 30% dose reduction required (FDA label)" in warnings

    def test_normal_metabolizer_alerts_not_promoted(self):
        warnings = run_comprehensive_analysis(
            _calls(rs4148323="GG", rs887829="CC", rs3892097="GG")
        ).summary.critical_warnings
        assert warnings == []


class TestAnalyzeGene:

    def test_single_gene(self):
        result = analyze_gene("cyp3a5", _calls(rs776746="AA"))
        assert result.gene == "CYP3A5"
        assert result.phenotype == "Expressor"

    def test_vkorc1_picks_up_cyp2c9_from_same_calls(self):
        result = analyze_gene("VKORC1", _calls(rs9923231="GG", rs1799853="CT", rs1057910="AA"))

        assert result.combined_risk.cyp2c9_phenotype == "Intermediate Metabolizer"
        assert result.combined_risk.combined_risk == CombinedRiskBand.NORMAL

    def test_vkorc1_alone(self):
        result = analyze_gene("VKORC1", _calls(rs9923231="GG"))
        assert result.combined_risk.cyp2c9_phenotype is None

    def test_provider_string_is_coerced(self):
        result = analyze_gene("F5", _calls(rs6025="GG"), "AncestryDNA")
        assert any("Consumer" in item for item in result.limitations)

    def test_unsupported_gene(self):
        with pytest.raises(UnsupportedGeneError):
            analyze_gene("TPMT", [])


class TestReportValidation:

    def test_round_trip(self):
        report = run_comprehensive_analysis(_calls(rs9923231="AG", rs6025="AG"))
        restored = validate_report(report.model_dump(mode="json"))

        assert restored == report

    def test_bad_version_rejected(self):
        payload = run_comprehensive_analysis([]).model_dump(mode="json")
        payload["metadata"]["version"] = "v2"

        with pytest.raises(ValidationError):
            validate_report(payload)

    def test_bad_timestamp_rejected(self):
        payload = run_comprehensive_analysis([]).model_dump(mode="json")
        payload["metadata"]["timestamp"] = "yesterday"

        with pytest.raises(ValidationError):
            validate_report(payload)

    def test_out_of_range_score_rejected(self):
        payload = run_comprehensive_analysis([]).model_dump(mode="json")
        payload["results"]["VKORC1"]["score"] = 7.0

        with pytest.raises(ValidationError):
            validate_report(payload)

    def test_mismatched_result_key_rejected(self):
        payload = run_comprehensive_analysis([]).model_dump(mode="json")
        payload["results"]["CYP2D6"] = payload["results"].pop("CYP3A5")

        with pytest.raises(ValidationError):
            validate_report(payload)
