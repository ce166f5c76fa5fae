"""
Recommendation Engine - turn a phenotype into ordered drug recommendations.

Features:
- Table-driven lookup per gene (see recommendation_tables)
- At most one entry per drug per call
- Guideline metadata carried through unchanged; it never alters the tier
"""

import logging
from typing import List, Optional

from .gene_definitions import get_gene_definition
from .models import DrugRecommendation, GuidelineCitation
from .recommendation_tables import DRUG_TABLES, DrugOutcome, DrugRule

logger = logging.getLogger(__name__)


# ============================================================================
# Conversion
# ============================================================================

def build_recommendation(rule: DrugRule, outcome: DrugOutcome) -> DrugRecommendation:
    """Materialize a table row into a DrugRecommendation."""
    citation = None
    if rule.citation is not None:
        citation = GuidelineCitation(
            source=rule.citation.source,
            level=rule.citation.level,
            pmid=rule.citation.pmid,
        )

    return DrugRecommendation(
        drug=rule.drug,
        category=rule.category,
        risk_tier=outcome.risk_tier,
        guidance=outcome.guidance,
        dose_adjustment=outcome.dose_adjustment,
        risk_multiplier=outcome.risk_multiplier,
        monitoring=outcome.monitoring,
        alternatives=list(outcome.alternatives),
        cpic_guideline=rule.cpic_guideline,
        cpic_level=rule.cpic_level,
        fda_label=rule.fda_label if outcome.fda_label is None else outcome.fda_label,
        guideline_citation=citation,
        references=list(outcome.references),
    )


# ============================================================================
# Engine
# ============================================================================

class RecommendationEngine:
    """Generates drug recommendations from per-gene tables."""

    def recommend(self, gene: str, phenotype: str) -> List[DrugRecommendation]:
        definition = get_gene_definition(gene)
        recommendations: List[DrugRecommendation] = []
        seen = set()

        for rule in DRUG_TABLES.get(definition.gene, ()):
            if rule.drug in seen:
                continue
            outcome = rule.outcome_for(phenotype)
            if outcome is None:
                continue
            seen.add(rule.drug)
            recommendations.append(build_recommendation(rule, outcome))

        logger.debug("%s %s: %d drug recommendations", definition.gene, phenotype, len(recommendations))
        return recommendations

    def recommend_drug(self, gene: str, drug: str, phenotype: str) -> Optional[DrugRecommendation]:
        """Look up one drug by name (case-insensitive prefix match on the table entry)."""
        definition = get_gene_definition(gene)
        needle = drug.strip().lower()
        for rule in DRUG_TABLES.get(definition.gene, ()):
            if rule.drug.lower().startswith(needle):
                outcome = rule.outcome_for(phenotype)
                return build_recommendation(rule, outcome) if outcome is not None else None
        return None
