"""
Result Composer - runs one gene through the rule pipeline and assembles
its typed analysis result.

    normalized genotypes -> diplotype -> phenotype -> confidence
        -> recommendations (+ warfarin resolver) -> annotations + summary

Schema violations surface as pydantic.ValidationError when the result
model is constructed.
"""

import logging
from typing import Dict, List, Optional

from . import clinical_annotations as annotations
from . import clinical_summaries as summaries
from .confidence import ConfidenceScorer
from .diplotype_caller import CallDetail, DiplotypeCaller
from .gene_definitions import get_gene_definition
from .models import (
    UNKNOWN,
    ConfidenceLevel,
    CYP2C9AnalysisResult,
    CYP2D6AnalysisResult,
    CYP3A5AnalysisResult,
    Diplotype,
    F5AnalysisResult,
    GeneAnalysisResult,
    NormalizedGenotype,
    PhenotypeCall,
    ProviderHint,
    SLCO1B1AnalysisResult,
    UGT1A1AnalysisResult,
    VKORC1AnalysisResult,
)
from .phenotype_mapper import PhenotypeClassifier
from .recommendation_engine import RecommendationEngine
from .warfarin_resolver import combined_warfarin_dosing, resolve_warfarin_risk, warfarin_recommendation

logger = logging.getLogger(__name__)


class ResultComposer:
    """
    Builds per-gene analysis results.

    Usage::

        composer = ResultComposer()
        result = composer.compose("SLCO1B1", normalize_calls(calls))
        vkorc1 = composer.compose("VKORC1", normalized, cyp2c9_result=cyp2c9)
    """

    def __init__(
        self,
        caller: Optional[DiplotypeCaller] = None,
        classifier: Optional[PhenotypeClassifier] = None,
        scorer: Optional[ConfidenceScorer] = None,
        engine: Optional[RecommendationEngine] = None,
    ):
        self.caller = caller or DiplotypeCaller()
        self.classifier = classifier or PhenotypeClassifier()
        self.scorer = scorer or ConfidenceScorer()
        self.engine = engine or RecommendationEngine()

    def compose(
        self,
        gene: str,
        normalized: Dict[str, NormalizedGenotype],
        provider: ProviderHint = ProviderHint.UNKNOWN,
        cyp2c9_result: Optional[CYP2C9AnalysisResult] = None,
    ) -> GeneAnalysisResult:
        definition = get_gene_definition(gene)
        gene = definition.gene

        detail = self.caller.call_with_detail(gene, normalized)
        call = self.classifier.classify(gene, detail.diplotype)
        confidence = self.scorer.score(gene, detail.diplotype, normalized)
        diplotype = detail.diplotype.with_confidence(confidence)

        common = dict(
            diplotype=diplotype,
            phenotype=call.phenotype,
            confidence=confidence,
            recommendations=self.engine.recommend(gene, call.phenotype),
            limitations=annotations.gene_limitations(gene, provider),
            guidelines=annotations.gene_guidelines(gene),
            normalized_genotypes=[
                normalized[variant_id] for variant_id in definition.defining_variants if variant_id in normalized
            ],
        )

        builder = getattr(self, f"_compose_{gene.lower()}")
        if gene == "VKORC1":
            result = builder(common, call, normalized, cyp2c9_result)
        elif gene == "CYP2D6":
            result = builder(common, call, detail)
        else:
            result = builder(common, call, normalized)

        logger.debug(
            "%s composed: %s %s (%s confidence, %d recommendations)",
            gene, diplotype.label, call.phenotype, confidence.value, len(result.recommendations),
        )
        return result

    # ------------------------------------------------------------------
    # Per-gene builders
    # ------------------------------------------------------------------

    @staticmethod
    def _compose_ugt1a1(common: dict, call: PhenotypeCall, normalized) -> UGT1A1AnalysisResult:
        diplotype: Diplotype = common["diplotype"]
        gilbert = annotations.gilbert_syndrome_status(diplotype, call.score)
        return UGT1A1AnalysisResult(
            **common,
            score=call.score,
            gilbert_syndrome=gilbert,
            safety_alerts=annotations.ugt1a1_alerts(call.phenotype),
            clinical_summary=summaries.ugt1a1_summary(diplotype, call.phenotype, call.score, gilbert),
        )

    @staticmethod
    def _compose_slco1b1(common: dict, call: PhenotypeCall, normalized) -> SLCO1B1AnalysisResult:
        diplotype: Diplotype = common["diplotype"]
        return SLCO1B1AnalysisResult(
            **common,
            score=call.score,
            safety_alerts=annotations.slco1b1_alerts(call.phenotype, diplotype),
            clinical_summary=summaries.slco1b1_summary(
                diplotype, call.phenotype, call.score, common["confidence"], normalized
            ),
        )

    @staticmethod
    def _compose_f5(common: dict, call: PhenotypeCall, normalized) -> F5AnalysisResult:
        diplotype: Diplotype = common["diplotype"]
        risk = call.phenotype
        multiplier = call.score if call.score is not None else 1.0
        safety = annotations.contraceptive_safety(risk)
        vte = annotations.vte_risk_assessment(risk)
        return F5AnalysisResult(
            **common,
            vte_risk_multiplier=multiplier,
            contraceptive_safety=safety,
            vte_risk_assessment=vte,
            clinical_recommendations=annotations.f5_clinical_recommendations(risk),
            family_screening=annotations.family_screening(risk),
            population_context=annotations.population_context(risk, diplotype),
            safety_alerts=annotations.f5_alerts(risk, diplotype),
            clinical_summary=summaries.f5_summary(
                diplotype, risk, multiplier, common["confidence"], normalized, safety, vte
            ),
        )

    @staticmethod
    def _compose_vkorc1(
        common: dict,
        call: PhenotypeCall,
        normalized: Dict[str, NormalizedGenotype],
        cyp2c9_result: Optional[CYP2C9AnalysisResult],
    ) -> VKORC1AnalysisResult:
        variant = get_gene_definition("VKORC1").defining_variants[0]
        genotype = normalized.get(variant)
        genotype_label = genotype.canonical_pair if genotype is not None and genotype.is_complete else UNKNOWN
        if common["diplotype"].is_unknown:
            genotype_label = UNKNOWN

        cyp2c9_phenotype = cyp2c9_result.phenotype if cyp2c9_result is not None else None
        cyp2c9_diplotype = cyp2c9_result.diplotype.label if cyp2c9_result is not None else None

        combined = resolve_warfarin_risk(
            call.phenotype,
            cyp2c9_phenotype,
            vkorc1_genotype=genotype_label,
            cyp2c9_diplotype=cyp2c9_diplotype,
        )

        return VKORC1AnalysisResult(
            **common,
            score=call.score,
            warfarin_dosing=combined_warfarin_dosing(call.phenotype, cyp2c9_phenotype),
            combined_risk=combined,
            warfarin_recommendation=warfarin_recommendation(combined),
            safety_alerts=annotations.vkorc1_alerts(call.phenotype, combined),
            clinical_summary=summaries.vkorc1_summary(
                genotype_label, call.phenotype, call.score, common["confidence"], combined
            ),
        )

    @staticmethod
    def _compose_cyp2c9(common: dict, call: PhenotypeCall, normalized) -> CYP2C9AnalysisResult:
        diplotype: Diplotype = common["diplotype"]
        return CYP2C9AnalysisResult(
            **common,
            score=call.score,
            warfarin_dosing=annotations.cyp2c9_warfarin_dosing(call.phenotype),
            safety_alerts=annotations.cyp2c9_alerts(call.phenotype),
            clinical_summary=summaries.cyp2c9_summary(
                diplotype, call.phenotype, call.score, common["confidence"], normalized
            ),
        )

    @staticmethod
    def _compose_cyp3a5(common: dict, call: PhenotypeCall, normalized) -> CYP3A5AnalysisResult:
        return CYP3A5AnalysisResult(
            **common,
            safety_alerts=[],
            clinical_summary=summaries.cyp3a5_summary(common["diplotype"], call.phenotype),
        )

    @staticmethod
    def _compose_cyp2d6(common: dict, call: PhenotypeCall, detail: CallDetail) -> CYP2D6AnalysisResult:
        return CYP2D6AnalysisResult(
            **common,
            score=call.score,
            phase_ambiguity=detail.phase_ambiguity,
            possible_diplotypes=list(detail.possible_diplotypes),
            safety_alerts=annotations.cyp2d6_alerts(call.phenotype),
            clinical_summary=summaries.cyp2d6_summary(
                common["diplotype"], call.phenotype, call.score, common["confidence"], detail.phase_ambiguity
            ),
        )


def actionable(result: GeneAnalysisResult) -> bool:
    """True when the phenotype differs from normal function and is known."""
    return result.phenotype not in (UNKNOWN, "Normal Metabolizer", "Normal Function", "Normal", "Expressor")


def high_confidence(results: List[GeneAnalysisResult]) -> int:
    return sum(1 for result in results if result.confidence == ConfidenceLevel.HIGH)
