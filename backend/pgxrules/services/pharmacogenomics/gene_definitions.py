"""
Gene definitions: defining variants, genotype rule tables and phenotype bands.

All tables are built once at import and are read-only afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class UnsupportedGeneError(KeyError):
    """Raised when a gene has no definition."""

    def __init__(self, gene: str):
        super().__init__(gene)
        self.gene = gene

    def __str__(self) -> str:
        return f"Unsupported gene: {self.gene}. Supported genes: {', '.join(SUPPORTED_GENES)}"


# Calling modes
PRIORITY = "priority"
COMBINED = "combined"
COUNT = "count"


@dataclass(frozen=True)
class GenotypeRule:
    """Maps canonical pairs of one variant onto an allele pair."""
    variant_id: str
    outcomes: Mapping[str, Tuple[str, str]]
    label: str = ""


@dataclass(frozen=True)
class CountedVariant:
    """A variant whose copies of `variant_base` each contribute one `allele`."""
    variant_id: str
    variant_base: str
    allele: str
    reference_base: str

    def accepts(self, canonical_pair: str) -> bool:
        return len(canonical_pair) == 2 and set(canonical_pair) <= {self.reference_base, self.variant_base}


@dataclass(frozen=True)
class ScoreBand:
    """
    Half-open score interval mapped onto a phenotype.

    Bounds default to closed at the lower edge and open at the upper edge.
    """
    phenotype: str
    lower: float = -math.inf
    upper: float = math.inf
    lower_inclusive: bool = True
    upper_inclusive: bool = False

    def contains(self, score: float) -> bool:
        above = score >= self.lower if self.lower_inclusive else score > self.lower
        below = score <= self.upper if self.upper_inclusive else score < self.upper
        return above and below


@dataclass(frozen=True)
class CategoricalPhenotype:
    phenotype: str
    score: Optional[float] = None


@dataclass(frozen=True)
class GeneDefinition:
    """Everything the caller and classifier need to know about one gene."""
    gene: str
    mode: str
    reference_pair: Tuple[str, str]
    rules: Tuple[GenotypeRule, ...] = ()
    counted_variants: Tuple[CountedVariant, ...] = ()
    assume_reference_when_absent: bool = False
    allele_weights: Optional[Mapping[str, float]] = None
    score_bands: Tuple[ScoreBand, ...] = ()
    categories: Optional[Mapping[Tuple[str, str], CategoricalPhenotype]] = None
    unknown_score: Optional[float] = None
    score_label: str = "Activity Score"
    description: str = ""
    nomenclature: str = "star alleles"

    @property
    def defining_variants(self) -> Tuple[str, ...]:
        if self.mode == COUNT:
            return tuple(v.variant_id for v in self.counted_variants)
        return tuple(rule.variant_id for rule in self.rules)

    @property
    def is_additive(self) -> bool:
        return self.allele_weights is not None

    def resolves(self, variant_id: str, canonical_pair: str) -> bool:
        """True when `canonical_pair` is a known genotype at this defining variant."""
        if self.mode == COUNT:
            return any(v.accepts(canonical_pair) for v in self.counted_variants if v.variant_id == variant_id)
        return any(canonical_pair in rule.outcomes for rule in self.rules if rule.variant_id == variant_id)


def _frozen(mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


def _pair(a: str, b: str) -> Tuple[str, str]:
    return tuple(sorted((a, b)))


# ---------------------------------------------------------------------------
# UGT1A1
# ---------------------------------------------------------------------------

UGT1A1 = GeneDefinition(
    gene="UGT1A1",
    mode=PRIORITY,
    reference_pair=("*1", "*1"),
    rules=(
        GenotypeRule("rs4148323", _frozen({
            "GG": ("*1", "*1"),
            "AG": ("*1", "*6"),
            "AA": ("*6", "*6"),
        }), label="*6 (G71R)"),
        GenotypeRule("rs887829", _frozen({
            "CC": ("*1", "*1"),
            "CT": ("*1", "*27"),
            "TT": ("*27", "*27"),
        }), label="*27 (P229Q)"),
    ),
    assume_reference_when_absent=True,
    allele_weights=_frozen({"*1": 1.0, "*6": 0.3, "*27": 0.5}),
    score_bands=(
        ScoreBand("Poor Metabolizer", upper=1.0),
        ScoreBand("Intermediate Metabolizer", lower=1.0, upper=1.5, upper_inclusive=True),
        ScoreBand("Normal Metabolizer", lower=1.5, lower_inclusive=False),
    ),
    unknown_score=2.0,
    description="UDP-glucuronosyltransferase 1A1 (bilirubin and irinotecan glucuronidation)",
)


# ---------------------------------------------------------------------------
# SLCO1B1
# ---------------------------------------------------------------------------

SLCO1B1 = GeneDefinition(
    gene="SLCO1B1",
    mode=PRIORITY,
    reference_pair=("*1", "*1"),
    rules=(
        GenotypeRule("rs4149056", _frozen({
            "TT": ("*1", "*1"),
            "CT": ("*1", "*5"),
            "CC": ("*5", "*5"),
        }), label="*5 (V174A)"),
    ),
    allele_weights=_frozen({"*1": 1.0, "*5": 0.5}),
    score_bands=(
        ScoreBand("Poor Function", upper=1.5),
        ScoreBand("Decreased Function", lower=1.5, upper=2.0),
        ScoreBand("Normal Function", lower=2.0),
    ),
    unknown_score=1.0,
    score_label="Function Score",
    description="OATP1B1 hepatic uptake transporter (statin uptake)",
)


# ---------------------------------------------------------------------------
# F5
# ---------------------------------------------------------------------------

F5 = GeneDefinition(
    gene="F5",
    mode=PRIORITY,
    reference_pair=("WT", "WT"),
    rules=(
        GenotypeRule("rs6025", _frozen({
            "GG": ("WT", "WT"),
            "AG": ("WT", "R506Q"),
            "AA": ("R506Q", "R506Q"),
        }), label="Factor V Leiden (R506Q)"),
        GenotypeRule("rs6027", _frozen({
            "CC": ("WT", "WT"),
            "CT": ("WT", "H1299R"),
            "TT": ("H1299R", "H1299R"),
        }), label="R2 haplotype (H1299R)"),
    ),
    categories=_frozen({
        _pair("WT", "WT"): CategoricalPhenotype("Normal", 1.0),
        _pair("WT", "R506Q"): CategoricalPhenotype("Elevated", 5.0),
        _pair("R506Q", "R506Q"): CategoricalPhenotype("Very High", 50.0),
        _pair("WT", "H1299R"): CategoricalPhenotype("Elevated", 3.0),
        _pair("H1299R", "H1299R"): CategoricalPhenotype("High", 20.0),
    }),
    unknown_score=1.0,
    score_label="VTE Risk Multiplier",
    description="Coagulation factor V (thrombophilia risk)",
    nomenclature="protein-change alleles",
)


# ---------------------------------------------------------------------------
# VKORC1
# ---------------------------------------------------------------------------

VKORC1 = GeneDefinition(
    gene="VKORC1",
    mode=PRIORITY,
    reference_pair=("G", "G"),
    rules=(
        # rs9923231 is directional: both orders are listed
        GenotypeRule("rs9923231", _frozen({
            "GG": ("G", "G"),
            "AG": ("A", "G"),
            "GA": ("G", "A"),
            "AA": ("A", "A"),
        }), label="-1639G>A"),
    ),
    categories=_frozen({
        _pair("G", "G"): CategoricalPhenotype("Low Sensitivity", 1.0),
        _pair("A", "G"): CategoricalPhenotype("Intermediate Sensitivity", 2.0),
        _pair("A", "A"): CategoricalPhenotype("High Sensitivity", 3.0),
    }),
    unknown_score=2.0,
    score_label="Sensitivity Score",
    description="Vitamin K epoxide reductase (warfarin target)",
    nomenclature="raw bases",
)


# ---------------------------------------------------------------------------
# CYP2C9
# ---------------------------------------------------------------------------

CYP2C9 = GeneDefinition(
    gene="CYP2C9",
    mode=COMBINED,
    reference_pair=("*1", "*1"),
    rules=(
        GenotypeRule("rs1799853", _frozen({
            "CC": ("*1", "*1"),
            "CT": ("*1", "*2"),
            "TT": ("*2", "*2"),
        }), label="*2 (R144C)"),
        GenotypeRule("rs1057910", _frozen({
            "AA": ("*1", "*1"),
            "AC": ("*1", "*3"),
            "CC": ("*3", "*3"),
        }), label="*3 (I359L)"),
    ),
    allele_weights=_frozen({"*1": 1.0, "*2": 0.5, "*3": 0.0}),
    score_bands=(
        ScoreBand("Poor Metabolizer", upper=1.0),
        ScoreBand("Intermediate Metabolizer", lower=1.0, upper=1.5, upper_inclusive=True),
        ScoreBand("Normal Metabolizer", lower=1.5, lower_inclusive=False),
    ),
    unknown_score=1.0,
    description="Cytochrome P450 2C9 (warfarin, NSAID, sulfonylurea and phenytoin metabolism)",
)


# ---------------------------------------------------------------------------
# CYP3A5
# ---------------------------------------------------------------------------

CYP3A5 = GeneDefinition(
    gene="CYP3A5",
    mode=PRIORITY,
    reference_pair=("*1", "*1"),
    rules=(
        GenotypeRule("rs776746", _frozen({
            "AA": ("*1", "*1"),
            "AG": ("*1", "*3"),
            "GG": ("*3", "*3"),
        }), label="*3 (6986A>G splice defect)"),
    ),
    categories=_frozen({
        _pair("*1", "*1"): CategoricalPhenotype("Expressor"),
        _pair("*1", "*3"): CategoricalPhenotype("Intermediate Expressor"),
        _pair("*3", "*3"): CategoricalPhenotype("Non-expressor"),
    }),
    description="Cytochrome P450 3A5 (tacrolimus metabolism)",
)


# ---------------------------------------------------------------------------
# CYP2D6
# ---------------------------------------------------------------------------

CYP2D6 = GeneDefinition(
    gene="CYP2D6",
    mode=COUNT,
    reference_pair=("*1", "*1"),
    counted_variants=(
        CountedVariant("rs3892097", "A", "*4", reference_base="G"),
        CountedVariant("rs28371725", "T", "*41", reference_base="C"),
        CountedVariant("rs1065852", "T", "*10", reference_base="C"),
        CountedVariant("rs5030655", "A", "*6", reference_base="G"),
        CountedVariant("rs28371706", "T", "*17", reference_base="C"),
    ),
    allele_weights=_frozen({
        "*1": 1.0,
        "*4": 0.0,
        "*6": 0.0,
        "*10": 0.25,
        "*17": 0.5,
        "*41": 0.5,
    }),
    score_bands=(
        ScoreBand("Poor Metabolizer", upper=0.0, upper_inclusive=True),
        ScoreBand("Intermediate Metabolizer", lower=0.0, upper=1.5, lower_inclusive=False, upper_inclusive=True),
        ScoreBand("Normal Metabolizer", lower=1.5, upper=2.0, lower_inclusive=False, upper_inclusive=True),
        ScoreBand("Ultrarapid Metabolizer", lower=2.0, lower_inclusive=False),
    ),
    unknown_score=1.0,
    description="Cytochrome P450 2D6 (opioid, antidepressant, tamoxifen and stimulant metabolism)",
)


GENE_DEFINITIONS: Mapping[str, GeneDefinition] = MappingProxyType({
    definition.gene: definition
    for definition in (UGT1A1, SLCO1B1, F5, VKORC1, CYP2C9, CYP3A5, CYP2D6)
})

SUPPORTED_GENES: Tuple[str, ...] = tuple(GENE_DEFINITIONS)


def get_gene_definition(gene: str) -> GeneDefinition:
    """Look up a gene definition, case-insensitively."""
    try:
        return GENE_DEFINITIONS[gene.upper()]
    except KeyError:
        raise UnsupportedGeneError(gene) from None
