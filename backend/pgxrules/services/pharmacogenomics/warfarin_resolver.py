"""
Warfarin cross-gene resolver (VKORC1 x CYP2C9).

The combined bleeding-risk band is decided by an ordered guard list;
the first guard that matches wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .models import (
    UNKNOWN,
    CombinedRiskBand,
    CombinedWarfarinRisk,
    DrugRecommendation,
    GuidelineCitation,
    RiskTier,
    WarfarinDosing,
)

logger = logging.getLogger(__name__)


HIGH_SENSITIVITY = "High Sensitivity"
INTERMEDIATE_SENSITIVITY = "Intermediate Sensitivity"
LOW_SENSITIVITY = "Low Sensitivity"

POOR = "Poor Metabolizer"
INTERMEDIATE = "Intermediate Metabolizer"

SLOW_CYP2C9 = frozenset({POOR, INTERMEDIATE})

CPIC_NOTE = "CPIC guidelines recommend pharmacogenetic-guided dosing"
CYP2C9_TESTING_CONSIDERATIONS = (
    "CYP2C9 testing recommended for comprehensive warfarin risk assessment",
    "Combined VKORC1 + CYP2C9 explains ~40-50% of dose variability",
    "Clinical factors (age, weight, drug interactions) also important",
)

_INR_TARGET = "2.0-3.0 (standard)"


# ---------------------------------------------------------------------------
# Dosing tables
# ---------------------------------------------------------------------------

def _dosing(estimated, dose_range, titration, monitoring, time_to_therapeutic) -> WarfarinDosing:
    return WarfarinDosing(
        estimated_dose=estimated,
        dose_range=dose_range,
        titration_protocol=titration,
        inr_target=_INR_TARGET,
        inr_monitoring=monitoring,
        time_to_therapeutic=time_to_therapeutic,
    )


# VKORC1 alone (CYP2C9 not tested)
_VKORC1_ONLY_DOSING = {
    HIGH_SENSITIVITY: lambda: _dosing(
        "2-3mg/day", "1.5-3.5mg/day",
        "Start 2mg/day, increase by 0.5-1mg every 5-7 days based on INR",
        "Check INR every 2-3 days for first 2 weeks, then weekly",
        "7-14 days (faster than typical due to low dose)",
    ),
    INTERMEDIATE_SENSITIVITY: lambda: _dosing(
        "4-5mg/day", "3.5-5.5mg/day",
        "Start 4-5mg/day, adjust by 1-2mg weekly based on INR",
        "Check INR every 3-4 days for first 2 weeks, then weekly",
        "10-14 days (standard timeframe)",
    ),
    LOW_SENSITIVITY: lambda: _dosing(
        "6-7mg/day", "5.5-8mg/day",
        "Start 6-7mg/day, may need higher doses. Adjust by 2-3mg weekly.",
        "Check INR every 3-4 days for first 2 weeks, then weekly",
        "14-21 days (slower due to higher doses needed)",
    ),
}

# VKORC1 with a slow (IM/PM) CYP2C9
_SLOW_CYP2C9_DOSING = {
    HIGH_SENSITIVITY: lambda: _dosing(
        "0.5-2mg/day", "0.5-2.5mg/day",
        "Start 0.5-1mg/day, increase by 0.5mg every 7 days. VERY SLOW titration.",
        "Check INR every 2-3 days for first 3 weeks (high bleeding risk)",
        "14-21 days (very conservative approach)",
    ),
    INTERMEDIATE_SENSITIVITY: lambda: _dosing(
        "2.5-4mg/day", "2-4.5mg/day",
        "Start 2.5-3mg/day, increase by 1mg every 5-7 days",
        "Check INR every 3 days for first 2 weeks",
        "10-14 days",
    ),
    LOW_SENSITIVITY: lambda: _dosing(
        "4-6mg/day", "3.5-6.5mg/day",
        "Start 5mg/day, adjust by 1-2mg weekly",
        "Check INR every 3-4 days for first 2 weeks",
        "10-14 days",
    ),
}

# VKORC1 with a normal CYP2C9
_NORMAL_CYP2C9_DOSING = {
    HIGH_SENSITIVITY: lambda: _dosing(
        "2-3mg/day", "1.5-3.5mg/day",
        "Start 2mg/day, increase by 0.5-1mg every 5-7 days",
        "Check INR every 2-3 days for first 2 weeks",
        "7-14 days",
    ),
    INTERMEDIATE_SENSITIVITY: lambda: _dosing(
        "4-5mg/day", "3.5-5.5mg/day",
        "Start 4-5mg/day, adjust by 1-2mg weekly",
        "Check INR every 3-4 days for first 2 weeks",
        "10-14 days",
    ),
    LOW_SENSITIVITY: lambda: _dosing(
        "6-7mg/day", "5.5-8mg/day",
        "Start 6-7mg/day, may need higher. Adjust by 2-3mg weekly.",
        "Check INR every 3-4 days for first 2 weeks",
        "14-21 days",
    ),
}


def _tested(cyp2c9_phenotype: Optional[str]) -> bool:
    return cyp2c9_phenotype is not None and cyp2c9_phenotype != UNKNOWN


def combined_warfarin_dosing(vkorc1_phenotype: str, cyp2c9_phenotype: Optional[str] = None) -> WarfarinDosing:
    """Starting-dose guidance from VKORC1, refined by CYP2C9 when it is known."""
    if not _tested(cyp2c9_phenotype):
        table = _VKORC1_ONLY_DOSING
    elif cyp2c9_phenotype in SLOW_CYP2C9:
        table = _SLOW_CYP2C9_DOSING
    else:
        table = _NORMAL_CYP2C9_DOSING

    factory = table.get(vkorc1_phenotype)
    if factory is None:
        return _dosing(
            "5mg/day (standard)", "3-7mg/day",
            "Use standard INR-guided titration protocol",
            "Standard protocol: weekly INR for first month",
            "10-14 days (standard)",
        )
    return factory()


# ---------------------------------------------------------------------------
# Combined risk guards
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RiskOutcome:
    band: CombinedRiskBand
    bleeding_risk_multiplier: str
    over_anticoagulation_risk: str
    considerations: Tuple[str, ...]


Guard = Tuple[str, Callable[[str, str], bool], RiskOutcome]

WARFARIN_RISK_GUARDS: Tuple[Guard, ...] = (
    (
        "high-sensitivity-poor-metabolizer",
        lambda v, c: v == HIGH_SENSITIVITY and c == POOR,
        RiskOutcome(
            CombinedRiskBand.VERY_HIGH,
            "5-8x baseline risk",
            "VERY HIGH - requires 0.5-2mg/day dosing",
            (
                "HIGHEST RISK COMBINATION - requires very low doses",
                "Start 0.5-1mg/day, titrate extremely slowly",
                "INR every 2-3 days for first 3 weeks",
            ),
        ),
    ),
    (
        "high-and-intermediate",
        lambda v, c: (v == HIGH_SENSITIVITY and c == INTERMEDIATE)
        or (v == INTERMEDIATE_SENSITIVITY and c == POOR),
        RiskOutcome(
            CombinedRiskBand.HIGH,
            "3-5x baseline risk",
            "HIGH - requires 2-4mg/day dosing",
            (
                "HIGH RISK - requires reduced dosing and close monitoring",
                "Start 2-3mg/day, titrate slowly",
                "Frequent INR monitoring (every 2-3 days initially)",
            ),
        ),
    ),
    (
        "single-risk-factor",
        lambda v, c: v == HIGH_SENSITIVITY or c == POOR
        or (v == INTERMEDIATE_SENSITIVITY and c == INTERMEDIATE),
        RiskOutcome(
            CombinedRiskBand.MODERATE,
            "2-3x baseline risk",
            "MODERATE - requires 2.5-5mg/day dosing",
            (
                "MODERATE RISK - dose adjustment recommended",
                "More frequent monitoring than standard protocol",
            ),
        ),
    ),
)

_NORMAL_OUTCOME = RiskOutcome(
    CombinedRiskBand.NORMAL,
    "Baseline (1-2% per year)",
    "Normal - standard 5mg/day starting dose appropriate",
    (
        "Normal pharmacogenetic risk profile",
        "Standard warfarin dosing and monitoring appropriate",
        "Still requires INR monitoring (other factors affect response)",
    ),
)


def resolve_warfarin_risk(
    vkorc1_phenotype: str,
    cyp2c9_phenotype: Optional[str] = None,
    vkorc1_genotype: str = UNKNOWN,
    cyp2c9_diplotype: Optional[str] = None,
) -> CombinedWarfarinRisk:
    """
    Combine VKORC1 sensitivity and CYP2C9 metabolizer status into one risk band.

    Missing or undetermined inputs resolve to Moderate with a testing
    recommendation rather than to Normal.
    """
    estimated_dose = combined_warfarin_dosing(vkorc1_phenotype, cyp2c9_phenotype).estimated_dose

    def build(outcome: RiskOutcome, considerations: List[str]) -> CombinedWarfarinRisk:
        return CombinedWarfarinRisk(
            vkorc1_genotype=vkorc1_genotype,
            vkorc1_phenotype=vkorc1_phenotype,
            cyp2c9_diplotype=cyp2c9_diplotype,
            cyp2c9_phenotype=cyp2c9_phenotype,
            combined_risk=outcome.band,
            bleeding_risk_multiplier=outcome.bleeding_risk_multiplier,
            over_anticoagulation_risk=outcome.over_anticoagulation_risk,
            estimated_dose=estimated_dose,
            clinical_considerations=considerations,
        )

    if vkorc1_phenotype == UNKNOWN:
        return build(
            RiskOutcome(
                CombinedRiskBand.MODERATE,
                "Unknown - VKORC1 phenotype undetermined",
                "Unknown VKORC1 status: use conservative dosing and monitor closely",
                (),
            ),
            [
                "VKORC1 genotype could not be determined",
                "Consider VKORC1 genetic testing for personalized dosing",
            ] + list(CYP2C9_TESTING_CONSIDERATIONS[1:]),
        )

    if cyp2c9_phenotype is None or cyp2c9_phenotype == UNKNOWN:
        multiplier = (
            "Unknown - CYP2C9 not tested" if cyp2c9_phenotype is None
            else "Unknown - CYP2C9 phenotype undetermined"
        )
        return build(
            RiskOutcome(CombinedRiskBand.MODERATE, multiplier, "VKORC1 alone: monitor closely", ()),
            list(CYP2C9_TESTING_CONSIDERATIONS),
        )

    outcome = _NORMAL_OUTCOME
    for name, predicate, candidate in WARFARIN_RISK_GUARDS:
        if predicate(vkorc1_phenotype, cyp2c9_phenotype):
            logger.debug("Warfarin guard %s matched (%s, %s)", name, vkorc1_phenotype, cyp2c9_phenotype)
            outcome = candidate
            break

    considerations = list(outcome.considerations)
    if outcome.band in (CombinedRiskBand.HIGH, CombinedRiskBand.VERY_HIGH):
        considerations.append(CPIC_NOTE)

    return build(outcome, considerations)


# ---------------------------------------------------------------------------
# Cross-gene recommendation
# ---------------------------------------------------------------------------

_BAND_TO_TIER = {
    CombinedRiskBand.VERY_HIGH: RiskTier.VERY_HIGH,
    CombinedRiskBand.HIGH: RiskTier.HIGH,
    CombinedRiskBand.MODERATE: RiskTier.INCREASED,
    CombinedRiskBand.NORMAL: RiskTier.NORMAL,
}


def warfarin_recommendation(risk: CombinedWarfarinRisk) -> DrugRecommendation:
    """The single warfarin entry that reflects both VKORC1 and CYP2C9."""
    dosing = combined_warfarin_dosing(risk.vkorc1_phenotype, risk.cyp2c9_phenotype)

    alternatives = []
    if risk.combined_risk.rank >= CombinedRiskBand.HIGH.rank:
        alternatives = [
            "Direct oral anticoagulants (DOACs): Apixaban, rivaroxaban, edoxaban",
            "Dabigatran (not affected by CYP2C9 or VKORC1)",
        ]

    return DrugRecommendation(
        drug="Warfarin",
        category="Anticoagulant",
        risk_tier=_BAND_TO_TIER[risk.combined_risk],
        guidance=f"Combined VKORC1/CYP2C9 risk: {risk.combined_risk.value}. {risk.over_anticoagulation_risk}",
        dose_adjustment=f"Estimated starting dose {dosing.estimated_dose} (range {dosing.dose_range}). "
                        f"{dosing.titration_protocol}",
        risk_multiplier=risk.bleeding_risk_multiplier,
        monitoring=dosing.inr_monitoring,
        alternatives=alternatives,
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        guideline_citation=GuidelineCitation(source="CPIC", level="A", pmid="21716271"),
        references=["PMID: 21716271"],
    )
