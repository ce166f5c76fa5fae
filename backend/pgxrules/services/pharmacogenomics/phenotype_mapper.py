"""
Phenotype classification from a called diplotype.
Additive genes sum allele weights and look the score up in ordered bands;
categorical genes look the allele pair up directly.
"""

import logging
from typing import Optional

from .gene_definitions import GeneDefinition, get_gene_definition
from .models import UNKNOWN, Diplotype, PhenotypeCall

logger = logging.getLogger(__name__)


class PhenotypeClassifier:
    """
    Maps diplotypes to phenotypes.

    An Unknown allele always classifies as Unknown with the gene's
    neutral score.
    """

    def classify(self, gene: str, diplotype: Diplotype) -> PhenotypeCall:
        definition = get_gene_definition(gene)

        if diplotype.is_unknown:
            return PhenotypeCall(phenotype=UNKNOWN, score=definition.unknown_score)

        if definition.is_additive:
            score = self.activity_score(definition, diplotype)
            if score is None:
                return PhenotypeCall(phenotype=UNKNOWN, score=definition.unknown_score)
            return PhenotypeCall(phenotype=self.phenotype_for_score(definition, score), score=score)

        category = (definition.categories or {}).get(diplotype.key())
        if category is None:
            logger.debug("No %s phenotype for %s", definition.gene, diplotype.label)
            return PhenotypeCall(phenotype=UNKNOWN, score=definition.unknown_score)
        return PhenotypeCall(phenotype=category.phenotype, score=category.score)

    @staticmethod
    def activity_score(definition: GeneDefinition, diplotype: Diplotype) -> Optional[float]:
        """Sum of allele weights, or None if an allele has no weight."""
        weights = definition.allele_weights or {}
        try:
            total = weights[diplotype.allele1] + weights[diplotype.allele2]
        except KeyError:
            logger.debug("No %s weight for %s", definition.gene, diplotype.label)
            return None
        return round(total, 4)

    @staticmethod
    def phenotype_for_score(definition: GeneDefinition, score: float) -> str:
        for band in definition.score_bands:
            if band.contains(score):
                return band.phenotype
        return UNKNOWN
