"""
Analysis Pipeline — Orchestrates genotype calls → per-gene results → report.

Receives variant calls (from the API, the CLI or a parsed raw export),
runs every requested gene through the rule pipeline and assembles a
ComprehensiveReport.
"""
import logging
from typing import Dict, Iterable, List, Optional

from pgxrules.schemas.pgx_schema import ComprehensiveReport, ReportSummary, create_api_metadata
from pgxrules.services.pharmacogenomics.config import get_config, get_default_provider, get_enabled_genes
from pgxrules.services.pharmacogenomics.gene_definitions import get_gene_definition
from pgxrules.services.pharmacogenomics.genotype_normalizer import coerce_provider, normalize_calls
from pgxrules.services.pharmacogenomics.models import (
    UNKNOWN,
    CombinedRiskBand,
    CYP2C9AnalysisResult,
    GeneAnalysisResult,
    ProviderHint,
    RiskTier,
    VariantCall,
)
from pgxrules.services.pharmacogenomics.result_composer import ResultComposer, actionable, high_confidence

logger = logging.getLogger(__name__)

_composer = ResultComposer()

# CYP2C9 feeds the warfarin resolver, so it always runs before VKORC1
_EVALUATION_ORDER = ("UGT1A1", "SLCO1B1", "F5", "CYP2C9", "VKORC1", "CYP3A5", "CYP2D6")

# Genes whose safety alerts are promoted to critical warnings when actionable
_ALERT_GENES = ("UGT1A1", "CYP2C9", "CYP2D6")


def _resolve_provider(provider) -> ProviderHint:
    if isinstance(provider, ProviderHint):
        return provider
    return coerce_provider(provider if provider is not None else get_default_provider())


def _ordered_genes(genes: Optional[Iterable[str]]) -> List[str]:
    requested = {get_gene_definition(g).gene for g in (genes if genes is not None else get_enabled_genes())}
    return [gene for gene in _EVALUATION_ORDER if gene in requested]


def analyze_gene(
    gene: str,
    calls: Iterable[VariantCall],
    provider=None,
    cyp2c9_result: Optional[CYP2C9AnalysisResult] = None,
) -> GeneAnalysisResult:
    """
    Run a single gene through the pipeline.

    VKORC1 analyzed on its own picks up CYP2C9 from the same calls when
    any CYP2C9 defining variant is present.
    """
    gene = get_gene_definition(gene).gene
    hint = _resolve_provider(provider)
    normalized = normalize_calls(calls, hint)

    if gene == "VKORC1" and cyp2c9_result is None:
        cyp2c9_variants = get_gene_definition("CYP2C9").defining_variants
        if any(v in normalized for v in cyp2c9_variants):
            cyp2c9_result = _composer.compose("CYP2C9", normalized, hint)

    return _composer.compose(gene, normalized, hint, cyp2c9_result=cyp2c9_result)


def _critical_warnings(results: Dict[str, GeneAnalysisResult]) -> List[str]:
    warnings: List[str] = []

    for gene in _ALERT_GENES:
        result = results.get(gene)
        if result is not None and actionable(result):
            warnings.extend(result.safety_alerts)

    vkorc1 = results.get("VKORC1")
    if vkorc1 is not None:
        combined = vkorc1.combined_risk
        high_combined = combined is not None and combined.combined_risk.rank >= CombinedRiskBand.HIGH.rank
        if vkorc1.phenotype == "High Sensitivity" or high_combined:
            warnings.append("VKORC1: Warfarin sensitivity detected")

    slco1b1 = results.get("SLCO1B1")
    if slco1b1 is not None:
        if any(r.drug == "Simvastatin" and r.risk_tier == RiskTier.VERY_HIGH for r in slco1b1.recommendations):
            warnings.append("SLCO1B1: High statin myopathy risk")

    f5 = results.get("F5")
    if f5 is not None and f5.phenotype not in ("Normal", UNKNOWN):
        fold = "80x" if f5.vte_risk_multiplier > 20 else "5-7x"
        warnings.append(
            f"FACTOR V LEIDEN DETECTED: {fold} clotting risk - AVOID estrogen-containing contraceptives"
        )

    return warnings


def run_comprehensive_analysis(
    calls: Iterable[VariantCall],
    provider=None,
    genes: Optional[Iterable[str]] = None,
) -> ComprehensiveReport:
    """
    Analyze every requested gene (all enabled genes by default) and
    assemble the multi-gene report.

    Raises UnsupportedGeneError for an unknown gene name and
    pydantic.ValidationError if a result breaks its schema.
    """
    hint = _resolve_provider(provider)
    ordered = _ordered_genes(genes)
    normalized = normalize_calls(list(calls), hint)

    if get_config().verbose_logging:
        for genotype in normalized.values():
            logger.debug("Normalized %s: %s -> %s", genotype.variant_id, genotype.raw_input, genotype.canonical_pair)

    results: Dict[str, GeneAnalysisResult] = {}
    for gene in ordered:
        results[gene] = _composer.compose(
            gene,
            normalized,
            hint,
            cyp2c9_result=results.get("CYP2C9") if gene == "VKORC1" else None,
        )

    summary = ReportSummary(
        genes_analyzed=list(results),
        total_drugs_affected=sum(len(r.recommendations) for r in results.values()),
        high_confidence_results=high_confidence(list(results.values())),
        critical_warnings=_critical_warnings(results),
    )

    logger.info(
        "Report assembled: %d genes, %d drugs affected, %d critical warnings",
        len(summary.genes_analyzed), summary.total_drugs_affected, len(summary.critical_warnings),
    )

    return ComprehensiveReport(
        metadata=create_api_metadata(),
        provider=hint,
        results=results,
        summary=summary,
    )
