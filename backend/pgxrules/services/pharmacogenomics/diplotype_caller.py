"""
Diplotype Caller — resolves normalized genotypes into a diplotype.

Three calling modes, chosen per gene:
  priority  – ordered rules; later rules are only consulted while the
              result is still the reference pair
  combined  – every rule required; variant alleles pooled
  count     – variant-allele copies counted across defining variants

A variant is "resolved" when it is present, complete and its pair
appears in the rule table. Nothing in here raises for bad genotypes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, List, Optional, Tuple

from .gene_definitions import (
    COMBINED,
    COUNT,
    GeneDefinition,
    GenotypeRule,
    get_gene_definition,
)
from .models import UNKNOWN, Diplotype, NormalizedGenotype

logger = logging.getLogger(__name__)


@dataclass
class CallDetail:
    """Diplotype plus the bookkeeping collected while calling it."""
    diplotype: Diplotype
    resolved_variants: List[str] = field(default_factory=list)
    phase_ambiguity: bool = False
    possible_diplotypes: List[str] = field(default_factory=list)


def _unknown() -> Diplotype:
    return Diplotype(allele1=UNKNOWN, allele2=UNKNOWN)


def _resolve(rule: GenotypeRule, normalized: Dict[str, NormalizedGenotype]) -> Optional[Tuple[str, str]]:
    genotype = normalized.get(rule.variant_id)
    if genotype is None or not genotype.is_complete:
        return None
    return rule.outcomes.get(genotype.canonical_pair)


class DiplotypeCaller:
    """
    Table-driven diplotype caller.

    Usage::

        caller = DiplotypeCaller()
        diplotype = caller.call("UGT1A1", normalize_calls(calls))
    """

    def call(self, gene: str, normalized: Dict[str, NormalizedGenotype]) -> Diplotype:
        return self.call_with_detail(gene, normalized).diplotype

    def call_with_detail(self, gene: str, normalized: Dict[str, NormalizedGenotype]) -> CallDetail:
        definition = get_gene_definition(gene)

        if definition.mode == COMBINED:
            detail = self._call_combined(definition, normalized)
        elif definition.mode == COUNT:
            detail = self._call_count(definition, normalized)
        else:
            detail = self._call_priority(definition, normalized)

        logger.debug(
            "%s diplotype %s (resolved: %s)",
            definition.gene, detail.diplotype.label, ", ".join(detail.resolved_variants) or "none",
        )
        return detail

    # -- priority -----------------------------------------------------------

    @staticmethod
    def _call_priority(definition: GeneDefinition, normalized: Dict[str, NormalizedGenotype]) -> CallDetail:
        reference = definition.reference_pair
        current = reference
        resolved: List[str] = []

        for rule in definition.rules:
            outcome = _resolve(rule, normalized)
            if outcome is None:
                continue
            resolved.append(rule.variant_id)
            if current == reference:
                current = outcome

        if not resolved:
            if definition.assume_reference_when_absent:
                return CallDetail(Diplotype(allele1=reference[0], allele2=reference[1]))
            return CallDetail(_unknown())

        return CallDetail(Diplotype(allele1=current[0], allele2=current[1]), resolved_variants=resolved)

    # -- combined -----------------------------------------------------------

    @staticmethod
    def _call_combined(definition: GeneDefinition, normalized: Dict[str, NormalizedGenotype]) -> CallDetail:
        reference_allele = definition.reference_pair[0]
        outcomes: List[Tuple[str, str]] = []

        for rule in definition.rules:
            outcome = _resolve(rule, normalized)
            if outcome is None:
                # Every defining variant is required
                return CallDetail(_unknown())
            outcomes.append(outcome)

        resolved = [rule.variant_id for rule in definition.rules]
        variant_alleles = []
        for outcome in outcomes:
            for allele in outcome:
                if allele != reference_allele and allele not in variant_alleles:
                    variant_alleles.append(allele)

        if not variant_alleles:
            pair = definition.reference_pair
        elif len(variant_alleles) == 1:
            pair = next(o for o in outcomes if variant_alleles[0] in o)
        else:
            pair = tuple(sorted(variant_alleles[:2], key=_star_number))

        return CallDetail(Diplotype(allele1=pair[0], allele2=pair[1]), resolved_variants=resolved)

    # -- count --------------------------------------------------------------

    @staticmethod
    def _call_count(definition: GeneDefinition, normalized: Dict[str, NormalizedGenotype]) -> CallDetail:
        copies: List[Tuple[str, int]] = []
        resolved: List[str] = []

        for variant in definition.counted_variants:
            genotype = normalized.get(variant.variant_id)
            if genotype is None or not genotype.is_complete:
                continue
            if not variant.accepts(genotype.canonical_pair):
                logger.debug(
                    "%s: %s is not a known genotype at %s",
                    definition.gene, genotype.canonical_pair, variant.variant_id,
                )
                continue
            resolved.append(variant.variant_id)
            count = genotype.canonical_pair.count(variant.variant_base)
            if count:
                copies.append((variant.allele, count))

        if not resolved:
            return CallDetail(_unknown())

        total = sum(count for _, count in copies)
        reference = definition.reference_pair[0]

        if total == 0:
            return CallDetail(Diplotype(allele1=reference, allele2=reference), resolved_variants=resolved)

        if total == 1:
            allele = copies[0][0]
            return CallDetail(Diplotype(allele1=reference, allele2=allele), resolved_variants=resolved)

        if total == 2 and len(copies) == 1:
            allele = copies[0][0]
            return CallDetail(Diplotype(allele1=allele, allele2=allele), resolved_variants=resolved)

        if total == 2:
            first, second = copies[0][0], copies[1][0]
            return CallDetail(
                Diplotype(allele1=first, allele2=second),
                resolved_variants=resolved,
                phase_ambiguity=True,
                possible_diplotypes=[
                    f"{first}/{second}",
                    f"{first}/{reference}",
                    f"{second}/{reference}",
                ],
            )

        logger.debug(
            "%s: %d variant copies across %s, call is ambiguous",
            definition.gene, total, ", ".join(a for a, _ in copies),
        )
        # Every pairing of the detected alleles, for clinical review
        detected = [allele for allele, count in copies for _ in range(count)]
        candidates: List[str] = []
        for first, second in combinations(detected, 2):
            label = f"{first}/{second}"
            if label not in candidates:
                candidates.append(label)

        return CallDetail(
            _unknown(),
            resolved_variants=resolved,
            phase_ambiguity=True,
            possible_diplotypes=candidates,
        )


def _star_number(allele: str) -> int:
    digits = "".join(ch for ch in allele if ch.isdigit())
    return int(digits) if digits else 0
