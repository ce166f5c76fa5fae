"""
Confidence Scoring — driven by data completeness only.

A defining variant counts as complete only when its pair is a known
genotype at that locus. A well-formed pair the tables do not recognise
counts against confidence just like a no-call.

Rules:
  - low    any allele Unknown, or no defining variant resolved
  - high   every defining variant resolved
  - medium anything in between
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .gene_definitions import get_gene_definition
from .models import ConfidenceLevel, Diplotype, NormalizedGenotype


# ---------------------------------------------------------------------------
# Confidence Breakdown — audit trail of what the level was based on
# ---------------------------------------------------------------------------

@dataclass
class ConfidenceBreakdown:
    """Which defining variants were usable for a gene."""

    gene: str
    complete_variants: List[str] = field(default_factory=list)
    incomplete_variants: List[str] = field(default_factory=list)
    unrecognised_variants: List[str] = field(default_factory=list)
    missing_variants: List[str] = field(default_factory=list)
    unknown_allele: bool = False

    @property
    def level(self) -> ConfidenceLevel:
        if self.unknown_allele or not self.complete_variants:
            return ConfidenceLevel.LOW
        if not (self.incomplete_variants or self.unrecognised_variants or self.missing_variants):
            return ConfidenceLevel.HIGH
        return ConfidenceLevel.MEDIUM

    def to_dict(self) -> Dict[str, object]:
        return {
            "gene": self.gene,
            "complete_variants": list(self.complete_variants),
            "incomplete_variants": list(self.incomplete_variants),
            "unrecognised_variants": list(self.unrecognised_variants),
            "missing_variants": list(self.missing_variants),
            "unknown_allele": self.unknown_allele,
            "level": self.level.value,
        }


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------

class ConfidenceScorer:
    """
    Deterministic confidence scoring.

    Usage::

        scorer = ConfidenceScorer()
        level = scorer.score("CYP2C9", diplotype, normalized)
    """

    def score(
        self,
        gene: str,
        diplotype: Diplotype,
        normalized: Dict[str, NormalizedGenotype],
    ) -> ConfidenceLevel:
        return self.breakdown(gene, diplotype, normalized).level

    @staticmethod
    def breakdown(
        gene: str,
        diplotype: Diplotype,
        normalized: Dict[str, NormalizedGenotype],
    ) -> ConfidenceBreakdown:
        definition = get_gene_definition(gene)
        bd = ConfidenceBreakdown(gene=definition.gene, unknown_allele=diplotype.is_unknown)

        for variant_id in definition.defining_variants:
            genotype = normalized.get(variant_id)
            if genotype is None:
                bd.missing_variants.append(variant_id)
            elif not genotype.is_complete:
                bd.incomplete_variants.append(variant_id)
            elif definition.resolves(variant_id, genotype.canonical_pair):
                bd.complete_variants.append(variant_id)
            else:
                bd.unrecognised_variants.append(variant_id)

        return bd
