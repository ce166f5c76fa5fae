"""
Per-gene drug tables.

Each gene maps to an ordered tuple of DrugRule entries. A rule emits the
outcome for the matching phenotype, else its fallback, else nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import RiskTier


PM = "Poor Metabolizer"
IM = "Intermediate Metabolizer"
NM = "Normal Metabolizer"
UM = "Ultrarapid Metabolizer"


@dataclass(frozen=True)
class Citation:
    source: str
    level: Optional[str] = None
    pmid: Optional[str] = None


@dataclass(frozen=True)
class DrugOutcome:
    """What a drug rule says for one phenotype."""
    risk_tier: RiskTier
    guidance: str
    dose_adjustment: Optional[str] = None
    risk_multiplier: Optional[str] = None
    monitoring: Optional[str] = None
    alternatives: Tuple[str, ...] = ()
    references: Tuple[str, ...] = ()
    fda_label: Optional[bool] = None


@dataclass(frozen=True)
class DrugRule:
    drug: str
    category: Optional[str]
    outcomes: Mapping[str, DrugOutcome]
    fallback: Optional[DrugOutcome] = None
    cpic_guideline: bool = False
    cpic_level: Optional[str] = None
    fda_label: bool = False
    citation: Optional[Citation] = None

    def outcome_for(self, phenotype: str) -> Optional[DrugOutcome]:
        return self.outcomes.get(phenotype, self.fallback)


def _by_phenotype(pairs) -> Mapping[str, DrugOutcome]:
    return MappingProxyType(dict(pairs))


# ---------------------------------------------------------------------------
# UGT1A1
# ---------------------------------------------------------------------------

UGT1A1_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Irinotecan (Camptosar)",
        category="Chemotherapy",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.CRITICAL,
                "POOR METABOLIZER: HIGH RISK of severe diarrhea and neutropenia",
                dose_adjustment="REDUCE starting dose by 30% - FDA recommendation",
                references=("PMID: 15883587", "PMID: 16116063", "FDA Label"),
            )),
            (IM, DrugOutcome(
                RiskTier.WARNING,
                "INTERMEDIATE METABOLIZER: Increased risk of toxicity",
                dose_adjustment="Consider 20% dose reduction. Monitor closely for diarrhea/neutropenia",
                references=("PMID: 15883587", "FDA Label"),
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "NORMAL METABOLIZER: Standard dosing",
            dose_adjustment="No dose adjustment needed based on UGT1A1 genotype",
        ),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        citation=Citation("CPIC", "A", "15883587"),
    ),
    DrugRule(
        drug="Cabotegravir (Apretude PrEP, Vocabria)",
        category="Antiretroviral",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.MODERATE,
                "POOR METABOLIZER: May have INCREASED cabotegravir levels",
                dose_adjustment=(
                    "Standard dosing per FDA label. Enhanced monitoring recommended for "
                    "injection site reactions and adverse events"
                ),
                references=("Cabotegravir metabolized by UGT1A1/UGT1A9",),
            )),
            (IM, DrugOutcome(
                RiskTier.MODERATE,
                "INTERMEDIATE METABOLIZER: Slightly increased cabotegravir exposure possible",
                dose_adjustment="Standard dosing. Monitor for injection site reactions",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "NORMAL METABOLIZER: Standard metabolism expected",
            dose_adjustment="Standard dosing (600mg IM every 2 months after loading)",
        ),
    ),
    DrugRule(
        drug="Nilotinib (Tasigna)",
        category="Kinase Inhibitor",
        outcomes=_by_phenotype([
            (phenotype, DrugOutcome(
                RiskTier.MODERATE,
                "Monitor for QT prolongation and hepatotoxicity",
                dose_adjustment="Standard dosing, enhanced monitoring",
            ))
            for phenotype in (PM, IM)
        ]),
        fda_label=True,
    ),
    DrugRule(
        drug="Belinostat (Beleodaq)",
        category="HDAC Inhibitor",
        outcomes=_by_phenotype([
            (phenotype, DrugOutcome(
                RiskTier.MODERATE,
                "Monitor for increased toxicity",
                dose_adjustment="Consider dose reduction if toxicity occurs",
            ))
            for phenotype in (PM, IM)
        ]),
        fda_label=True,
    ),
)


# ---------------------------------------------------------------------------
# SLCO1B1
# ---------------------------------------------------------------------------

SLCO1B1_PREFERRED_STATINS = "Pravastatin / Rosuvastatin / Pitavastatin"

SLCO1B1_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Simvastatin",
        category="Statin",
        outcomes=_by_phenotype([
            ("Poor Function", DrugOutcome(
                RiskTier.VERY_HIGH,
                "AVOID SIMVASTATIN or prescribe ≤20mg dose with close monitoring",
                dose_adjustment="If used, MAX 20mg/day (avoid 40-80mg doses)",
                risk_multiplier="16-17x baseline risk",
                monitoring="Baseline CK, monitor closely for muscle pain/weakness",
                alternatives=("Pravastatin", "Rosuvastatin", "Pitavastatin"),
            )),
            ("Decreased Function", DrugOutcome(
                RiskTier.HIGH,
                "LIMIT simvastatin to ≤40mg/day. Consider alternative statin.",
                dose_adjustment="MAX 40mg/day (avoid 80mg dose)",
                risk_multiplier="4-5x baseline risk",
                monitoring="Baseline CK, monitor for muscle symptoms",
                alternatives=("Pravastatin", "Rosuvastatin", "Pitavastatin"),
            )),
            ("Normal Function", DrugOutcome(
                RiskTier.NORMAL,
                "Standard dosing appropriate (up to 80mg/day)",
                dose_adjustment="No adjustment needed",
                risk_multiplier="Baseline risk (~1-5%)",
                monitoring="Standard monitoring (CK if symptomatic)",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.MODERATELY_INCREASED,
            "Use conservative dosing (≤40mg/day)",
            dose_adjustment="Start low, avoid 80mg dose",
            risk_multiplier="Unknown - assume 2-4x risk",
            monitoring="Baseline CK, close symptom monitoring",
        ),
        cpic_guideline=True,
        cpic_level="A",
        citation=Citation("CPIC", "A", "24918167"),
    ),
    DrugRule(
        drug="Atorvastatin",
        category="Statin",
        outcomes=_by_phenotype([
            ("Poor Function", DrugOutcome(
                RiskTier.HIGH,
                "LIMIT to ≤40mg/day OR use alternative statin",
                dose_adjustment="MAX 40mg/day, consider starting at 20mg",
                risk_multiplier="2-3x baseline risk (lower than simvastatin)",
                monitoring="Baseline CK, monitor muscle symptoms",
            )),
            ("Decreased Function", DrugOutcome(
                RiskTier.MODERATELY_INCREASED,
                "Use standard dosing with monitoring. Consider dose limit.",
                dose_adjustment="Consider MAX 40-60mg/day",
                risk_multiplier="1.5-2x baseline risk",
                monitoring="Standard monitoring for muscle symptoms",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.NORMAL,
            "Standard dosing appropriate",
            dose_adjustment="No adjustment needed",
            risk_multiplier="Baseline risk",
            monitoring="Standard monitoring",
        ),
    ),
    DrugRule(
        drug=SLCO1B1_PREFERRED_STATINS,
        category="Statin",
        outcomes=_by_phenotype([
            (phenotype, DrugOutcome(
                RiskTier.NORMAL,
                "PREFERRED ALTERNATIVES - No SLCO1B1-related risk",
                dose_adjustment="Standard dosing appropriate",
                risk_multiplier="No increased risk (NOT substrates of OATP1B1)",
                monitoring="Standard statin monitoring",
            ))
            for phenotype in ("Poor Function", "Decreased Function")
        ]),
        cpic_guideline=True,
    ),
    DrugRule(
        drug="Lovastatin",
        category="Statin",
        outcomes=_by_phenotype([
            ("Poor Function", DrugOutcome(
                RiskTier.HIGH,
                "Use with caution, consider alternatives",
                dose_adjustment="MAX 40mg/day",
                risk_multiplier="Similar to simvastatin (less data available)",
                monitoring="Close monitoring for muscle symptoms",
            )),
            ("Decreased Function", DrugOutcome(
                RiskTier.MODERATELY_INCREASED,
                "Use with caution, consider alternatives",
                dose_adjustment="Consider dose limit",
                risk_multiplier="Similar to simvastatin (less data available)",
                monitoring="Close monitoring for muscle symptoms",
            )),
        ]),
    ),
)


# ---------------------------------------------------------------------------
# F5
# ---------------------------------------------------------------------------

_F5_ESTROGEN_AVOID = ("Progestin-only pills (mini-pill)", "Progestin IUD", "Copper IUD (non-hormonal)")

F5_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Combined Oral Contraceptives (estrogen + progestin)",
        category="Hormonal Contraceptive",
        outcomes=_by_phenotype([
            ("Very High", DrugOutcome(
                RiskTier.CRITICAL,
                "ABSOLUTE CONTRAINDICATION: NO estrogen-containing contraceptives",
                risk_multiplier="~10-15% VTE risk per year with estrogen",
                alternatives=_F5_ESTROGEN_AVOID,
            )),
            ("High", DrugOutcome(
                RiskTier.CRITICAL,
                "CONTRAINDICATED: Estrogen-containing oral contraceptives",
                alternatives=_F5_ESTROGEN_AVOID,
            )),
            ("Elevated", DrugOutcome(
                RiskTier.CRITICAL,
                "CONTRAINDICATED: Estrogen-containing oral contraceptives (30-35x VTE risk)",
                risk_multiplier="30-35x baseline VTE risk",
                alternatives=_F5_ESTROGEN_AVOID,
            )),
            ("Normal", DrugOutcome(
                RiskTier.STANDARD,
                "All hormonal contraceptives appropriate from a thrombophilia perspective",
                risk_multiplier="3-4x baseline (acceptable risk)",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.CAUTION,
            "Factor V status unknown. Consider testing before starting estrogen-containing contraceptives",
        ),
        fda_label=True,
    ),
    DrugRule(
        drug="Estrogen Hormone Replacement Therapy",
        category="Hormone Therapy",
        outcomes=_by_phenotype([
            ("Very High", DrugOutcome(
                RiskTier.CRITICAL,
                "ABSOLUTE CONTRAINDICATION: NO hormone replacement therapy with estrogen",
                alternatives=("Non-hormonal treatments for menopausal symptoms (SSRIs, lifestyle)",),
            )),
            ("High", DrugOutcome(
                RiskTier.CRITICAL,
                "CONTRAINDICATED: Hormone replacement therapy with estrogen",
                alternatives=("Non-hormonal treatments for menopausal symptoms (SSRIs, lifestyle)",),
            )),
            ("Elevated", DrugOutcome(
                RiskTier.CRITICAL,
                "CONTRAINDICATED: Hormone replacement therapy with estrogen",
                alternatives=("Non-hormonal treatments for menopausal symptoms (SSRIs, lifestyle)",),
            )),
            ("Normal", DrugOutcome(
                RiskTier.STANDARD,
                "No Factor V-related restriction on estrogen therapy",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.CAUTION,
            "Factor V status unknown. Consider testing before starting estrogen therapy",
        ),
        fda_label=True,
    ),
    DrugRule(
        drug="Progestin-only Contraception",
        category="Hormonal Contraceptive",
        outcomes=_by_phenotype([
            ("Very High", DrugOutcome(
                RiskTier.CAUTION,
                "Use Caution: progestin-only methods preferred over estrogen but discuss with hematology",
            )),
            ("High", DrugOutcome(
                RiskTier.STANDARD,
                "SAFE ALTERNATIVE: Progestin-only contraceptives are preferred",
            )),
            ("Elevated", DrugOutcome(
                RiskTier.STANDARD,
                "SAFE ALTERNATIVE: Progestin-only contraceptives are preferred",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "Progestin-only methods appropriate",
        ),
    ),
)


# ---------------------------------------------------------------------------
# VKORC1 (VKORC1-only warfarin dosing)
# ---------------------------------------------------------------------------

VKORC1_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Warfarin",
        category="Anticoagulant",
        outcomes=_by_phenotype([
            ("High Sensitivity", DrugOutcome(
                RiskTier.HIGH,
                "HIGH WARFARIN SENSITIVITY - Requires LOW dose (2-3mg/day)",
                dose_adjustment="Start 2mg/day, increase by 0.5-1mg every 5-7 days based on INR",
                monitoring="Check INR every 2-3 days for first 2 weeks, then weekly",
                alternatives=("Direct oral anticoagulants (DOACs): Apixaban, rivaroxaban, edoxaban",),
            )),
            ("Intermediate Sensitivity", DrugOutcome(
                RiskTier.MODERATELY_INCREASED,
                "INTERMEDIATE WARFARIN SENSITIVITY - Requires MEDIUM dose (4-5mg/day)",
                dose_adjustment="Start 4-5mg/day, adjust by 1-2mg weekly based on INR",
                monitoring="Check INR every 3-4 days for first 2 weeks, then weekly",
            )),
            ("Low Sensitivity", DrugOutcome(
                RiskTier.NORMAL,
                "LOW WARFARIN SENSITIVITY - May require HIGH dose (6-7mg/day)",
                dose_adjustment="Start 6-7mg/day, may need higher doses. Adjust by 2-3mg weekly.",
                monitoring="Check INR every 3-4 days for first 2 weeks, then weekly",
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.MODERATELY_INCREASED,
            "UNKNOWN VKORC1 STATUS - Use conservative dosing",
            dose_adjustment="Use standard INR-guided titration protocol",
            monitoring="Standard protocol: weekly INR for first month",
        ),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        citation=Citation("CPIC", "A", "21716271"),
    ),
)


# ---------------------------------------------------------------------------
# CYP2C9
# ---------------------------------------------------------------------------

CYP2C9_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Warfarin",
        category="Anticoagulant",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.VERY_HIGH,
                "REDUCE starting dose by 50-75%. Start at 0.5-2mg/day.",
                dose_adjustment="See warfarin dosing section for detailed guidance",
                monitoring="Frequent INR monitoring - see warfarin dosing section",
                alternatives=(
                    "Direct oral anticoagulants (DOACs): Apixaban, rivaroxaban, edoxaban",
                    "Dabigatran (not affected by CYP2C9)",
                ),
            )),
            (IM, DrugOutcome(
                RiskTier.HIGH,
                "REDUCE starting dose by 25-40%. Start at 2.5-4mg/day.",
                dose_adjustment="See warfarin dosing section for detailed guidance",
                monitoring="Frequent INR monitoring - see warfarin dosing section",
                alternatives=(
                    "Direct oral anticoagulants (DOACs): Apixaban, rivaroxaban, edoxaban",
                    "Dabigatran (not affected by CYP2C9)",
                ),
            )),
        ]),
        fallback=DrugOutcome(
            RiskTier.NORMAL,
            "Standard dosing appropriate. Start 5mg/day.",
            dose_adjustment="Use standard INR-guided titration",
            monitoring="Standard INR monitoring protocol",
        ),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        citation=Citation("CPIC", "A", "21716271"),
    ),
    DrugRule(
        drug="NSAIDs (Ibuprofen, Naproxen, Celecoxib)",
        category="Anti-inflammatory",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.INCREASED,
                "REDUCE dose by 30-50%. Start at lowest effective dose.",
                dose_adjustment="Ibuprofen: Start 200mg (vs 400mg), Celecoxib: 100mg (vs 200mg)",
                monitoring="Monitor for GI bleeding, renal function",
                alternatives=(
                    "Acetaminophen (not metabolized by CYP2C9)",
                    "Topical NSAIDs (lower systemic exposure)",
                ),
            )),
            (IM, DrugOutcome(
                RiskTier.NORMAL,
                "Consider 20-30% dose reduction or use alternative",
                dose_adjustment="Start at low end of dosing range",
                monitoring="Standard monitoring for GI/renal effects",
                alternatives=("Acetaminophen for mild-moderate pain",),
            )),
        ]),
    ),
    DrugRule(
        drug="Sulfonylureas (Glipizide, Glyburide)",
        category="Antidiabetic",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.NORMAL,
                "AVOID or reduce dose by 50%. High hypoglycemia risk.",
                dose_adjustment="Start at lowest available dose, titrate slowly",
                monitoring="Frequent blood glucose monitoring for hypoglycemia",
                alternatives=(
                    "Metformin (not metabolized by CYP2C9)",
                    "DPP-4 inhibitors (sitagliptin, linagliptin)",
                    "GLP-1 agonists (liraglutide, semaglutide)",
                ),
            )),
            (IM, DrugOutcome(
                RiskTier.NORMAL,
                "Reduce dose by 25-30%. Monitor blood glucose closely.",
                dose_adjustment="Start at lowest available dose, titrate slowly",
                monitoring="Frequent blood glucose monitoring for hypoglycemia",
                alternatives=(
                    "Metformin (not metabolized by CYP2C9)",
                    "DPP-4 inhibitors (sitagliptin, linagliptin)",
                    "GLP-1 agonists (liraglutide, semaglutide)",
                ),
            )),
        ]),
    ),
    DrugRule(
        drug="Phenytoin",
        category="Antiepileptic",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.NORMAL,
                "REDUCE starting dose by 25-50%. High toxicity risk.",
                dose_adjustment="Start low, titrate slowly with therapeutic drug monitoring",
                monitoring="Therapeutic drug monitoring (target 10-20 mcg/mL)",
                alternatives=("Levetiracetam (not metabolized by CYP2C9)", "Lamotrigine", "Valproic acid"),
            )),
            (IM, DrugOutcome(
                RiskTier.NORMAL,
                "Reduce starting dose by 20-25%.",
                dose_adjustment="Start low, titrate slowly with therapeutic drug monitoring",
                monitoring="Therapeutic drug monitoring (target 10-20 mcg/mL)",
                alternatives=("Levetiracetam (not metabolized by CYP2C9)", "Lamotrigine", "Valproic acid"),
            )),
        ]),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
    ),
)


# ---------------------------------------------------------------------------
# CYP3A5
# ---------------------------------------------------------------------------

CYP3A5_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Alprazolam (Xanax)",
        category="Benzodiazepines",
        outcomes=_by_phenotype({
            "Expressor": DrugOutcome(
                RiskTier.INFORMATIONAL,
                "EXPRESSOR: May have faster alprazolam clearance → potentially lower drug levels",
                dose_adjustment="No formal guideline. Standard dosing recommended. Monitor response.",
                references=("CYP3A5 metabolizes alprazolam", "No CPIC guideline available"),
            ),
            "Intermediate Expressor": DrugOutcome(
                RiskTier.STANDARD,
                "INTERMEDIATE EXPRESSOR: Moderate CYP3A5 expression",
                dose_adjustment="Standard dosing recommended",
            ),
        }),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "NON-EXPRESSOR: Standard alprazolam metabolism via CYP3A4",
            dose_adjustment="Standard dosing",
        ),
    ),
    DrugRule(
        drug="Sildenafil/Tadalafil (Viagra/Cialis)",
        category="PDE5 Inhibitors",
        outcomes=_by_phenotype({
            "Expressor": DrugOutcome(
                RiskTier.INFORMATIONAL,
                "EXPRESSOR: May have lower sildenafil levels",
                dose_adjustment="Consider standard to higher dosing if inadequate response",
                references=("PMID: 28440343 - CYP3A4 genotype associated with sildenafil concentrations",),
            ),
        }),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "Standard sildenafil/tadalafil metabolism",
            dose_adjustment="Standard dosing",
        ),
    ),
    DrugRule(
        drug="Zolpidem (Ambien)",
        category="Sedative-Hypnotics",
        outcomes=_by_phenotype({
            "Expressor": DrugOutcome(
                RiskTier.INFORMATIONAL,
                "EXPRESSOR: CYP3A4 is primary pathway (61%), CYP3A5 secondary",
                dose_adjustment="Standard dosing",
            ),
        }),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "Standard zolpidem metabolism",
            dose_adjustment="Standard dosing",
        ),
    ),
    DrugRule(
        drug="Tacrolimus (Prograf)",
        category="Immunosuppressants",
        outcomes=_by_phenotype({
            "Expressor": DrugOutcome(
                RiskTier.MODERATE,
                "EXPRESSOR: Increased tacrolimus metabolism → LOWER drug levels",
                dose_adjustment="CPIC: Recommend 1.5-2x higher starting dose. Monitor levels closely.",
                references=("CPIC Guideline PMID: 25801146",),
            ),
            "Intermediate Expressor": DrugOutcome(
                RiskTier.MODERATE,
                "INTERMEDIATE: Moderately increased tacrolimus metabolism",
                dose_adjustment="CPIC: Consider 1.2-1.5x higher starting dose. Monitor levels.",
            ),
        }),
        fallback=DrugOutcome(
            RiskTier.STANDARD,
            "NON-EXPRESSOR: Standard tacrolimus metabolism",
            dose_adjustment="Standard dosing per CPIC guideline",
        ),
        cpic_guideline=True,
        cpic_level="A",
        citation=Citation("CPIC", "A", "25801146"),
    ),
)


# ---------------------------------------------------------------------------
# CYP2D6
# ---------------------------------------------------------------------------

_OPIOID_ALTERNATIVES = ("Morphine", "Oxycodone", "Hydromorphone")

CYP2D6_DRUGS: Tuple[DrugRule, ...] = (
    DrugRule(
        drug="Amphetamines (Adderall, Vyvanse)",
        category="ADHD Stimulant",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "POOR METABOLIZER: May experience HIGHER drug levels and MORE SIDE EFFECTS. "
                "CYP2D6 handles ~30% of amphetamine metabolism.",
                dose_adjustment=(
                    "Consider LOWER starting dose (25-50% reduction). Titrate slowly. Monitor for "
                    "cardiovascular side effects (increased heart rate, blood pressure), anxiety, "
                    "insomnia, appetite suppression."
                ),
                monitoring=(
                    "Close monitoring of blood pressure, heart rate, anxiety levels. More frequent "
                    "follow-ups during dose titration."
                ),
            )),
            (IM, DrugOutcome(
                RiskTier.CAUTION,
                "INTERMEDIATE METABOLIZER: Moderate impact on amphetamine levels. "
                "CYP2D6 is a minor metabolic pathway (~30%).",
                dose_adjustment=(
                    "Standard dosing likely appropriate. Monitor response and side effects. "
                    "May need slight dose adjustments."
                ),
                monitoring="Standard monitoring of efficacy and side effects (cardiovascular, sleep, appetite).",
            )),
            (UM, DrugOutcome(
                RiskTier.CAUTION,
                "ULTRARAPID METABOLIZER: May experience LOWER drug levels and REDUCED EFFICACY. "
                "Drug cleared faster than normal.",
                dose_adjustment=(
                    "May require HIGHER doses for therapeutic effect. If \"medication doesn't seem to "
                    "work\" at standard doses, ultrarapid CYP2D6 metabolism could be a factor."
                ),
                monitoring="Monitor for inadequate symptom control. May need higher-than-average doses.",
            )),
            (NM, DrugOutcome(
                RiskTier.STANDARD,
                "NORMAL METABOLIZER: Standard amphetamine metabolism. Expected typical response to medication.",
                dose_adjustment="Standard dosing recommended. Adjust based on clinical response.",
                monitoring="Routine monitoring of efficacy and side effects.",
            )),
        ]),
    ),
    DrugRule(
        drug="Codeine",
        category="Opioid Analgesic",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.CRITICAL,
                "AVOID CODEINE - Poor metabolizers cannot convert codeine to morphine (active form). "
                "NO analgesic effect.",
                alternatives=_OPIOID_ALTERNATIVES + ("Tramadol (with caution)",),
            )),
            (UM, DrugOutcome(
                RiskTier.CRITICAL,
                "AVOID CODEINE - Ultrarapid metabolizers convert too much codeine to morphine. "
                "FATAL OVERDOSE RISK, especially in children (FDA BLACK BOX WARNING).",
                alternatives=_OPIOID_ALTERNATIVES,
            )),
            (IM, DrugOutcome(
                RiskTier.WARNING,
                "REDUCED EFFICACY - Intermediate metabolizers have reduced codeine → morphine conversion. "
                "May need higher doses or alternative.",
                alternatives=_OPIOID_ALTERNATIVES,
            )),
        ]),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        citation=Citation("CPIC", "A", "22205192"),
    ),
    DrugRule(
        drug="Tramadol",
        category="Opioid Analgesic",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "AVOID TRAMADOL - Poor metabolizers cannot convert tramadol to active metabolite. "
                "Reduced analgesic effect.",
                alternatives=_OPIOID_ALTERNATIVES,
            )),
            (UM, DrugOutcome(
                RiskTier.CRITICAL,
                "AVOID TRAMADOL - Ultrarapid metabolism → toxicity risk.",
                alternatives=("Morphine", "Oxycodone"),
            )),
        ]),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
    ),
    DrugRule(
        drug="Tricyclic Antidepressants (Amitriptyline, Nortriptyline)",
        category="Antidepressant",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "REDUCE DOSE by 50-75% - Poor metabolizers have 2-10x higher drug levels. Risk of side "
                "effects (sedation, anticholinergic effects, cardiac arrhythmias).",
                dose_adjustment="Start at 50% of standard dose or less. Consider alternative antidepressant.",
                monitoring="TDM (therapeutic drug monitoring) recommended. ECG monitoring.",
                alternatives=("Sertraline", "Citalopram", "Escitalopram", "Mirtazapine", "Bupropion"),
            )),
            (UM, DrugOutcome(
                RiskTier.CAUTION,
                "May need HIGHER doses due to rapid metabolism. Risk of treatment failure at standard doses.",
                dose_adjustment="Monitor response. May need dose increases. TDM recommended.",
                fda_label=False,
            )),
        ]),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
        citation=Citation("CPIC", "A", "28002639"),
    ),
    DrugRule(
        drug="SSRIs (Fluoxetine, Paroxetine, Fluvoxamine)",
        category="Antidepressant",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "REDUCE DOSE by 25-50% or use alternative - Higher risk of side effects in poor metabolizers.",
                dose_adjustment="Start low, titrate slowly. Monitor for serotonin syndrome, GI side effects.",
                alternatives=("Sertraline", "Citalopram", "Escitalopram (less CYP2D6-dependent)"),
            )),
        ]),
        cpic_guideline=True,
        cpic_level="B",
        citation=Citation("CPIC", "B", "27997040"),
    ),
    DrugRule(
        drug="Tamoxifen",
        category="Breast Cancer Treatment",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.CRITICAL,
                "CRITICAL - Poor metabolizers have REDUCED EFFICACY. Tamoxifen is a prodrug requiring "
                "CYP2D6 conversion to endoxifen (active form). INCREASED RISK OF CANCER RECURRENCE.",
                dose_adjustment="Consider higher tamoxifen dose OR switch to aromatase inhibitor if postmenopausal.",
                monitoring="Endoxifen level monitoring if available. Close oncology follow-up.",
                alternatives=("Aromatase inhibitors (letrozole, anastrozole, exemestane) for postmenopausal women",),
            )),
        ]),
        cpic_guideline=True,
        cpic_level="A",
        fda_label=True,
    ),
    DrugRule(
        drug="Beta Blockers (Metoprolol, Carvedilol, Propranolol)",
        category="Cardiovascular",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "REDUCE DOSE - Poor metabolizers have 2-5x higher drug levels. Risk of bradycardia, hypotension.",
                dose_adjustment="Start at 25-50% of standard dose. Titrate based on heart rate and blood pressure.",
                monitoring="Monitor heart rate and blood pressure closely.",
                alternatives=("Atenolol", "Bisoprolol (less CYP2D6-dependent)", "Calcium channel blockers"),
            )),
        ]),
    ),
    DrugRule(
        drug="Antipsychotics (Risperidone, Aripiprazole, Haloperidol)",
        category="Antipsychotic",
        outcomes=_by_phenotype([
            (PM, DrugOutcome(
                RiskTier.WARNING,
                "REDUCE DOSE by 30-50% - Poor metabolizers at risk of side effects (extrapyramidal "
                "symptoms, sedation, metabolic effects).",
                dose_adjustment="Start low, go slow. Monitor for extrapyramidal symptoms.",
            )),
        ]),
    ),
)


DRUG_TABLES: Mapping[str, Tuple[DrugRule, ...]] = MappingProxyType({
    "UGT1A1": UGT1A1_DRUGS,
    "SLCO1B1": SLCO1B1_DRUGS,
    "F5": F5_DRUGS,
    "VKORC1": VKORC1_DRUGS,
    "CYP2C9": CYP2C9_DRUGS,
    "CYP3A5": CYP3A5_DRUGS,
    "CYP2D6": CYP2D6_DRUGS,
})


def drug_names(gene: str) -> Tuple[str, ...]:
    return tuple(rule.drug for rule in DRUG_TABLES.get(gene, ()))

