"""
Data models for the pharmacogenomics rule pipeline.
These models carry a genotype from raw input through normalization,
diplotype calling and phenotype classification into the per-gene
analysis result consumed by the multi-gene report.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, Tuple, Union
from typing_extensions import Annotated
from enum import Enum


UNKNOWN = "Unknown"


class ProviderHint(str, Enum):
    """Source of the raw genotype data. Only affects limitation notes."""
    UNKNOWN = "unknown"
    TWENTYTHREE_AND_ME = "23andme"
    ANCESTRYDNA = "ancestrydna"


class ConfidenceLevel(str, Enum):
    """Reliability of a gene result, derived from data completeness."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskTier(str, Enum):
    """Risk tier attached to a drug recommendation."""
    # Clinical action tiers
    CRITICAL = "critical"
    WARNING = "warning"
    CAUTION = "caution"
    MODERATE = "moderate"
    STANDARD = "standard"
    INFORMATIONAL = "informational"

    # Exposure / adverse-event risk tiers
    NORMAL = "Normal"
    INCREASED = "Increased"
    MODERATELY_INCREASED = "Moderately Increased"
    HIGH = "High"
    VERY_HIGH = "Very High"


class CombinedRiskBand(str, Enum):
    """Ordinal warfarin bleeding-risk band (Normal < Moderate < High < Very High)."""
    NORMAL = "Normal"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @property
    def rank(self) -> int:
        return _COMBINED_RISK_ORDER.index(self)


_COMBINED_RISK_ORDER = [
    CombinedRiskBand.NORMAL,
    CombinedRiskBand.MODERATE,
    CombinedRiskBand.HIGH,
    CombinedRiskBand.VERY_HIGH,
]


# ============================================================================
# Pipeline Intermediates
# ============================================================================

class VariantCall(BaseModel):
    """A single (variant id, genotype) pair as supplied by the caller."""
    model_config = ConfigDict(frozen=True)

    variant_id: str = Field(..., description="Canonical variant identifier (rsID)")
    genotype: Optional[str] = Field(None, description="Raw genotype string, e.g. 'A/G', 'ag', '--'")


class NormalizedGenotype(BaseModel):
    """Canonicalized genotype for one variant."""
    model_config = ConfigDict(frozen=True)

    variant_id: str = Field(..., description="Canonical variant identifier (rsID)")
    canonical_pair: str = Field(..., description="Separator-free uppercase pair, or 'Unknown'")
    is_complete: bool = Field(..., description="True when the pair is a usable two-base call")
    raw_input: Optional[str] = Field(None, description="Genotype string as received")

    @property
    def is_unknown(self) -> bool:
        return self.canonical_pair == UNKNOWN


class Diplotype(BaseModel):
    """Unordered pair of gene-specific alleles."""
    model_config = ConfigDict(frozen=True)

    allele1: str = Field(..., description="First allele (e.g. *1, WT, G, or Unknown)")
    allele2: str = Field(..., description="Second allele")
    confidence: ConfidenceLevel = Field(
        default=ConfidenceLevel.LOW,
        description="Confidence assigned once the diplotype has been scored"
    )

    @property
    def label(self) -> str:
        return f"{self.allele1}/{self.allele2}"

    @property
    def is_unknown(self) -> bool:
        return UNKNOWN in (self.allele1, self.allele2)

    @property
    def is_heterozygous(self) -> bool:
        return self.allele1 != self.allele2

    def key(self) -> Tuple[str, str]:
        """Order-free identity of the pair."""
        return tuple(sorted((self.allele1, self.allele2)))

    def same_pair(self, other: "Diplotype") -> bool:
        return self.key() == other.key()

    def with_confidence(self, confidence: ConfidenceLevel) -> "Diplotype":
        return self.model_copy(update={"confidence": confidence})


class PhenotypeCall(BaseModel):
    """Phenotype classification for a diplotype."""
    phenotype: str = Field(..., description="Categorical phenotype")
    score: Optional[float] = Field(None, description="Activity/function/sensitivity score, if the gene uses one")


# ============================================================================
# Recommendations
# ============================================================================

class GuidelineCitation(BaseModel):
    """Prescribing guideline backing a recommendation."""
    source: str = Field(..., description="Guideline body or label, e.g. CPIC")
    level: Optional[str] = Field(None, description="Evidence level, e.g. A")
    pmid: Optional[str] = Field(None, description="PubMed identifier of the guideline")


class DrugRecommendation(BaseModel):
    """Structured recommendation for one drug (or drug class)."""
    drug: str = Field(..., description="Drug or drug class")
    category: Optional[str] = Field(None, description="Therapeutic category")
    risk_tier: RiskTier = Field(..., description="Risk tier for this phenotype")
    guidance: str = Field(..., min_length=1, description="Clinical guidance text")
    dose_adjustment: Optional[str] = Field(None, description="Dose adjustment guidance")
    risk_multiplier: Optional[str] = Field(None, description="Qualitative risk multiplier, e.g. '4-5x baseline risk'")
    monitoring: Optional[str] = Field(None, description="Monitoring guidance")
    alternatives: List[str] = Field(default_factory=list, description="Alternative drugs")
    cpic_guideline: bool = Field(False, description="Whether a CPIC guideline exists for this drug")
    cpic_level: Optional[str] = Field(None, description="CPIC evidence level")
    fda_label: bool = Field(False, description="Whether the FDA label carries pharmacogenomic guidance")
    guideline_citation: Optional[GuidelineCitation] = Field(None, description="Guideline citation")
    references: List[str] = Field(default_factory=list, description="Literature references")


# ============================================================================
# Gene-Specific Blocks
# ============================================================================

class GilbertSyndromeStatus(BaseModel):
    """UGT1A1 Gilbert syndrome interpretation."""
    status: Literal["Positive", "Carrier", "Negative", "Unknown"]
    clinical_significance: str


class ContraceptiveSafety(BaseModel):
    """F5 hormonal therapy safety assessment."""
    combined_ocps: Literal["Safe", "Use Caution", "Contraindicated"]
    progestin_only: Literal["Safe", "Use Caution"]
    estrogen_hrt: Literal["Safe", "Use Caution", "Contraindicated"]
    recommended_alternatives: List[str] = Field(default_factory=list)
    fda_black_box_applies: bool


class VTERiskAssessment(BaseModel):
    """F5 venous thromboembolism risk estimates by exposure."""
    baseline_risk: str
    with_ocps: str
    with_pregnancy: str
    with_surgery: str
    absolute_risk_estimate: str


class WarfarinDosing(BaseModel):
    """Warfarin starting-dose guidance (VKORC1, optionally combined with CYP2C9)."""
    estimated_dose: str
    dose_range: str
    titration_protocol: str
    inr_target: str
    inr_monitoring: str
    time_to_therapeutic: str


class CYP2C9WarfarinDosing(BaseModel):
    """Warfarin guidance derived from CYP2C9 metabolizer status alone."""
    recommended_dose: str
    titration_guidance: str
    inr_monitoring: str
    bleeding_risk_category: str


class CombinedWarfarinRisk(BaseModel):
    """Cross-gene VKORC1 x CYP2C9 warfarin risk."""
    vkorc1_genotype: str = Field(..., description="Normalized rs9923231 genotype")
    vkorc1_phenotype: str = Field(..., description="VKORC1 sensitivity phenotype")
    cyp2c9_diplotype: Optional[str] = Field(None, description="CYP2C9 diplotype, if tested")
    cyp2c9_phenotype: Optional[str] = Field(None, description="CYP2C9 phenotype, if tested")
    combined_risk: CombinedRiskBand = Field(..., description="Ordinal combined risk band")
    bleeding_risk_multiplier: str = Field(..., description="Qualitative bleeding risk multiplier")
    over_anticoagulation_risk: str = Field(..., description="Over-anticoagulation risk statement")
    estimated_dose: str = Field(..., description="Estimated starting dose band")
    clinical_considerations: List[str] = Field(default_factory=list)


# ============================================================================
# Per-Gene Analysis Results
# ============================================================================

class GeneAnalysisResult(BaseModel):
    """Fields shared by every per-gene analysis result."""
    diplotype: Diplotype = Field(..., description="Called diplotype")
    phenotype: str = Field(..., description="Categorical phenotype")
    score: Optional[float] = Field(None, description="Gene-specific score")
    confidence: ConfidenceLevel = Field(..., description="Result confidence")
    recommendations: List[DrugRecommendation] = Field(default_factory=list)
    safety_alerts: List[str] = Field(default_factory=list)
    clinical_summary: str = Field(..., min_length=1)
    limitations: List[str] = Field(default_factory=list)
    guidelines: List[str] = Field(default_factory=list)
    normalized_genotypes: List[NormalizedGenotype] = Field(default_factory=list)


MetabolizerPhenotype = Literal[
    "Normal Metabolizer", "Intermediate Metabolizer", "Poor Metabolizer", "Unknown"
]


class UGT1A1AnalysisResult(GeneAnalysisResult):
    gene: Literal["UGT1A1"] = "UGT1A1"
    phenotype: MetabolizerPhenotype
    score: float = Field(..., ge=0.0, le=2.0, description="Activity score")
    gilbert_syndrome: GilbertSyndromeStatus


class SLCO1B1AnalysisResult(GeneAnalysisResult):
    gene: Literal["SLCO1B1"] = "SLCO1B1"
    phenotype: Literal["Normal Function", "Decreased Function", "Poor Function", "Unknown"]
    score: float = Field(..., ge=0.0, le=2.0, description="Function score")


class F5AnalysisResult(GeneAnalysisResult):
    gene: Literal["F5"] = "F5"
    phenotype: Literal["Normal", "Elevated", "High", "Very High", "Unknown"]
    vte_risk_multiplier: float = Field(..., ge=1.0, description="VTE risk multiplier vs. baseline")
    contraceptive_safety: ContraceptiveSafety
    vte_risk_assessment: VTERiskAssessment
    clinical_recommendations: List[str] = Field(default_factory=list)
    family_screening: List[str] = Field(default_factory=list)
    population_context: str

    @property
    def thrombophilia_risk(self) -> str:
        return self.phenotype


class VKORC1AnalysisResult(GeneAnalysisResult):
    gene: Literal["VKORC1"] = "VKORC1"
    phenotype: Literal["High Sensitivity", "Intermediate Sensitivity", "Low Sensitivity", "Unknown"]
    score: float = Field(..., ge=1.0, le=3.0, description="Sensitivity score (higher = more sensitive)")
    warfarin_dosing: WarfarinDosing
    combined_risk: Optional[CombinedWarfarinRisk] = None
    warfarin_recommendation: Optional[DrugRecommendation] = Field(
        None, description="Cross-gene warfarin recommendation owned by the warfarin resolver"
    )


class CYP2C9AnalysisResult(GeneAnalysisResult):
    gene: Literal["CYP2C9"] = "CYP2C9"
    phenotype: MetabolizerPhenotype
    score: float = Field(..., ge=0.0, le=2.0, description="Activity score")
    warfarin_dosing: CYP2C9WarfarinDosing


class CYP3A5AnalysisResult(GeneAnalysisResult):
    gene: Literal["CYP3A5"] = "CYP3A5"
    phenotype: Literal["Expressor", "Intermediate Expressor", "Non-expressor", "Unknown"]
    score: None = None


class CYP2D6AnalysisResult(GeneAnalysisResult):
    gene: Literal["CYP2D6"] = "CYP2D6"
    phenotype: Literal[
        "Ultrarapid Metabolizer", "Normal Metabolizer", "Intermediate Metabolizer",
        "Poor Metabolizer", "Unknown"
    ]
    score: float = Field(..., ge=0.0, le=3.0, description="Activity score")
    phase_ambiguity: bool = False
    possible_diplotypes: List[str] = Field(default_factory=list)


AnalysisResult = Annotated[
    Union[
        UGT1A1AnalysisResult,
        SLCO1B1AnalysisResult,
        F5AnalysisResult,
        VKORC1AnalysisResult,
        CYP2C9AnalysisResult,
        CYP3A5AnalysisResult,
        CYP2D6AnalysisResult,
    ],
    Field(discriminator="gene"),
]
