"""
Gene-specific clinical annotations: safety alerts, limitations, guidelines
and the extra blocks (Gilbert syndrome, F5 contraceptive safety and VTE
risk, CYP2C9 warfarin dosing) that only some genes carry.
"""

from typing import List, Optional

from .config import get_input_config
from .models import (
    UNKNOWN,
    CombinedRiskBand,
    CombinedWarfarinRisk,
    ContraceptiveSafety,
    CYP2C9WarfarinDosing,
    Diplotype,
    GilbertSyndromeStatus,
    ProviderHint,
    VTERiskAssessment,
)


# ============================================================================
# UGT1A1 - Gilbert syndrome
# ============================================================================

GILBERT_ALLELES = frozenset({"*6", "*27", "*28"})


def gilbert_syndrome_status(diplotype: Diplotype, score: float) -> GilbertSyndromeStatus:
    if diplotype.is_unknown:
        return GilbertSyndromeStatus(
            status="Unknown",
            clinical_significance="Gilbert syndrome status could not be determined from the available data.",
        )

    if score < 0.7:
        return GilbertSyndromeStatus(
            status="Positive",
            clinical_significance=(
                "GILBERT SYNDROME: Mild unconjugated hyperbilirubinemia (usually <3 mg/dL). "
                "Benign condition - no treatment needed. May cause mild jaundice during fasting "
                "or illness. Not associated with liver disease."
            ),
        )

    if diplotype.is_heterozygous and GILBERT_ALLELES & {diplotype.allele1, diplotype.allele2}:
        return GilbertSyndromeStatus(
            status="Carrier",
            clinical_significance=(
                "Carrier for Gilbert syndrome variant. May have slightly elevated bilirubin "
                "during fasting, but typically no clinical symptoms."
            ),
        )

    return GilbertSyndromeStatus(
        status="Negative",
        clinical_significance="No Gilbert syndrome variants detected. Normal bilirubin metabolism expected.",
    )


# ============================================================================
# F5 - thrombophilia
# ============================================================================

def _carries_leiden(diplotype: Diplotype) -> bool:
    return "R506Q" in (diplotype.allele1, diplotype.allele2)


def contraceptive_safety(risk: str) -> ContraceptiveSafety:
    if risk == "Very High":
        return ContraceptiveSafety(
            combined_ocps="Contraindicated",
            progestin_only="Use Caution",
            estrogen_hrt="Contraindicated",
            fda_black_box_applies=True,
            recommended_alternatives=[
                "Progestin-only pills (mini-pill)",
                "Progestin IUD (Mirena, Kyleena, Skyla)",
                "Copper IUD (non-hormonal)",
                "Barrier methods (condoms, diaphragm)",
                "Permanent sterilization if family complete",
            ],
        )

    if risk in ("Elevated", "High"):
        return ContraceptiveSafety(
            combined_ocps="Contraindicated",
            progestin_only="Safe",
            estrogen_hrt="Contraindicated",
            fda_black_box_applies=True,
            recommended_alternatives=[
                "Progestin-only pills (mini-pill) - PREFERRED",
                "Progestin IUD (Mirena, Kyleena, Skyla) - PREFERRED",
                "Copper IUD (non-hormonal) - PREFERRED",
                "Barrier methods (condoms, diaphragm)",
                "Nexplanon (progestin implant)",
                "Depo-Provera (progestin injection) - Use Caution",
            ],
        )

    if risk == UNKNOWN:
        return ContraceptiveSafety(
            combined_ocps="Use Caution",
            progestin_only="Safe",
            estrogen_hrt="Use Caution",
            fda_black_box_applies=False,
            recommended_alternatives=[
                "Factor V Leiden testing recommended before estrogen-containing methods",
                "Progestin-only or non-hormonal methods until status is known",
            ],
        )

    return ContraceptiveSafety(
        combined_ocps="Safe",
        progestin_only="Safe",
        estrogen_hrt="Safe",
        fda_black_box_applies=False,
        recommended_alternatives=[
            "All contraceptive methods appropriate",
            "Choice based on patient preference and other factors",
        ],
    )


def vte_risk_assessment(risk: str) -> VTERiskAssessment:
    if risk == "Very High":
        return VTERiskAssessment(
            baseline_risk="5-8% per year (50-80x baseline)",
            with_ocps="~10-15% per year (EXTREME RISK - CONTRAINDICATED)",
            with_pregnancy="~10-15% during pregnancy/postpartum (HIGH RISK)",
            with_surgery="VERY HIGH - Extended prophylaxis essential",
            absolute_risk_estimate=(
                "Approximately 5-8 in 100 people with FVL homozygous will develop VTE per year "
                "without additional risk factors. With estrogen exposure, risk approaches 10-15%."
            ),
        )

    if risk in ("Elevated", "High"):
        return VTERiskAssessment(
            baseline_risk="0.5-0.7% per year (5-7x baseline)" if risk == "Elevated"
            else "~2% per year (approximately 20x baseline)",
            with_ocps="~3% per year (30-35x baseline - CONTRAINDICATED)",
            with_pregnancy="~2.5% during pregnancy/postpartum (25x baseline)",
            with_surgery="HIGH - Prophylactic anticoagulation strongly recommended",
            absolute_risk_estimate=(
                "Approximately 5-7 in 1,000 people with FVL heterozygous will develop VTE per year. "
                "With estrogen exposure, risk increases to ~3 in 100."
            ),
        )

    if risk == UNKNOWN:
        return VTERiskAssessment(
            baseline_risk="Unknown - Factor V genotype not determined",
            with_ocps="Unknown - testing recommended before estrogen exposure",
            with_pregnancy="Unknown - discuss thrombophilia testing with OB-GYN",
            with_surgery="Standard prophylaxis; consider testing if personal or family VTE history",
            absolute_risk_estimate="Cannot be estimated without rs6025 genotype.",
        )

    return VTERiskAssessment(
        baseline_risk="0.1% per year (general population)",
        with_ocps="0.3-0.4% per year (3-4x baseline - acceptable risk)",
        with_pregnancy="~0.5% during pregnancy/postpartum (5x baseline)",
        with_surgery="MODERATE - Standard prophylaxis appropriate",
        absolute_risk_estimate="Approximately 1 in 1,000 people in the general population will develop VTE per year.",
    )


def f5_clinical_recommendations(risk: str) -> List[str]:
    if risk == "Very High":
        return [
            "IMMEDIATE: Discontinue any estrogen-containing medications",
            "CONTRACEPTION: Switch to progestin-only or copper IUD",
            "HEMATOLOGY: Refer to hematology for comprehensive thrombophilia workup",
            "PREGNANCY PLANNING: Maternal-fetal medicine consultation required",
            "SURGICAL: Inform all providers - extended LMWH prophylaxis needed",
            "ANTICOAGULATION: May require lifelong after first VTE event",
            "GENETIC COUNSELING: Discuss inheritance pattern and family testing",
        ]
    if risk in ("Elevated", "High"):
        return [
            "CONTRACEPTION: Avoid all estrogen - use progestin-only options",
            "MENOPAUSE: Non-hormonal treatments for symptoms (SSRIs, lifestyle)",
            "PREGNANCY: Discuss thromboprophylaxis with OB-GYN",
            "SURGERY: Prophylactic LMWH (e.g., enoxaparin) for major procedures",
            "TRAVEL: Aspirin 81mg + compression stockings for long flights",
            "LIFESTYLE: Maintain healthy weight, regular exercise, stay hydrated",
            "MONITORING: Know signs of DVT/PE - seek immediate care if suspected",
            "FAMILY: Consider testing first-degree relatives if clinically relevant",
        ]
    if risk == UNKNOWN:
        return [
            "TESTING: Factor V Leiden genotyping recommended before estrogen therapy",
            "PREVENTIVE: Standard VTE prevention for surgery/hospitalization",
        ]
    return [
        "STANDARD CARE: No special precautions needed",
        "CONTRACEPTION: All options appropriate based on preference",
        "PREVENTIVE: Standard VTE prevention for surgery/hospitalization",
    ]


def family_screening(risk: str) -> List[str]:
    if risk == "Normal":
        return ["No family screening indicated - normal Factor V genotype"]
    if risk == UNKNOWN:
        return ["Family screening cannot be assessed - Factor V genotype not determined"]
    return [
        "INHERITANCE: Autosomal dominant - 50% chance children inherit mutation",
        "FIRST-DEGREE RELATIVES: Consider testing parents, siblings, children",
        "WOMEN OF REPRODUCTIVE AGE: Testing recommended BEFORE starting contraceptives",
        "PREGNANCY PLANNING: Testing valuable for pregnant relatives",
        "ASYMPTOMATIC TESTING: Controversial - discuss pros/cons with genetic counselor",
        "POST-VTE ONLY: Some guidelines recommend testing only after VTE event",
        "GENETIC COUNSELING: Recommended before family cascade screening",
    ]


def population_context(risk: str, diplotype: Diplotype) -> str:
    if risk == "Very High":
        return (
            "Homozygous Factor V Leiden occurs in ~0.06% of Northern Europeans (1 in 1,600). "
            "Extremely rare in Asian and African populations."
        )
    if risk in ("Elevated", "High") and _carries_leiden(diplotype):
        return (
            "Heterozygous Factor V Leiden occurs in 5-8% of Northern Europeans, 2-4% of Southern "
            "Europeans, and <0.5% of Asian/African populations."
        )
    if risk in ("Elevated", "High"):
        return (
            "The F5 H1299R (R2) variant is less common and less studied than Factor V Leiden; "
            "risk estimates are approximate."
        )
    if risk == UNKNOWN:
        return "Factor V Leiden is the most common inherited thrombophilia in people of European descent (3-8%)."
    return "92-95% of Northern Europeans do not carry Factor V Leiden."


# ============================================================================
# CYP2C9 - warfarin dosing block
# ============================================================================

def cyp2c9_warfarin_dosing(phenotype: str) -> CYP2C9WarfarinDosing:
    if phenotype == "Poor Metabolizer":
        return CYP2C9WarfarinDosing(
            recommended_dose="0.5-2mg/day (50-75% reduction from standard 5mg)",
            titration_guidance=(
                "Increase by 0.5-1mg every 5-7 days based on INR. Therapeutic dose typically 2-3mg/day."
            ),
            inr_monitoring="Check INR every 2-3 days for first 2 weeks, then weekly until stable",
            bleeding_risk_category="VERY HIGH (3-5x baseline risk) - Major bleeding risk elevated",
        )
    if phenotype == "Intermediate Metabolizer":
        return CYP2C9WarfarinDosing(
            recommended_dose="2.5-4mg/day (25-40% reduction from standard 5mg)",
            titration_guidance="Increase by 1-2mg weekly based on INR. Therapeutic dose typically 3-4mg/day.",
            inr_monitoring="Check INR every 3-4 days for first 2 weeks, then weekly",
            bleeding_risk_category="INCREASED (2-3x baseline risk) - Moderate bleeding risk",
        )
    if phenotype == "Normal Metabolizer":
        return CYP2C9WarfarinDosing(
            recommended_dose="5mg/day (standard starting dose)",
            titration_guidance="Use standard warfarin titration protocol based on INR",
            inr_monitoring="Weekly INR checks for first month, then monthly when stable",
            bleeding_risk_category="NORMAL (baseline risk ~1-2% per year)",
        )
    return CYP2C9WarfarinDosing(
        recommended_dose="Standard dosing (5mg/day) with close monitoring",
        titration_guidance="Use standard INR-guided dose adjustment",
        inr_monitoring="Weekly INR checks for first month",
        bleeding_risk_category="Unknown - assume increased risk",
    )


# ============================================================================
# Safety alerts
# ============================================================================

def ugt1a1_alerts(phenotype: str) -> List[str]:
    if phenotype == "Poor Metabolizer":
        return [
            "IRINOTECAN: 30% dose reduction required (FDA label)",
            "CABOTEGRAVIR: Monitor for increased exposure",
            "Gilbert syndrome likely - benign, no treatment needed",
        ]
    if phenotype == "Intermediate Metabolizer":
        return [
            "IRINOTECAN: Consider dose reduction and close monitoring",
            "Monitor for elevated bilirubin (mild Gilbert phenotype possible)",
        ]
    return []


def slco1b1_alerts(phenotype: str, diplotype: Diplotype) -> List[str]:
    label = diplotype.label
    if phenotype == "Poor Function":
        return [
            "POOR FUNCTION - VERY HIGH MYOPATHY RISK",
            f"Diplotype: {label} - 16-17x risk with simvastatin",
            "AVOID SIMVASTATIN or use MAX 20mg/day with close monitoring",
            "ATORVASTATIN: Limit to ≤40mg/day",
            "PREFERRED: Pravastatin, rosuvastatin, or pitavastatin (no SLCO1B1 effect)",
            "FDA WARNING: Simvastatin 80mg has highest myopathy risk",
            "INFORM ALL PRESCRIBERS of poor function status",
        ]
    if phenotype == "Decreased Function":
        return [
            "DECREASED FUNCTION - HIGH MYOPATHY RISK",
            f"Diplotype: {label} - 4-5x risk with simvastatin",
            "SIMVASTATIN: MAX 40mg/day (avoid 80mg dose)",
            "ATORVASTATIN: Consider dose limit ≤40-60mg/day",
            "PREFERRED: Pravastatin, rosuvastatin, or pitavastatin",
            "INFORM PRESCRIBERS of decreased function status",
        ]
    if phenotype == "Normal Function":
        return [
            "NORMAL FUNCTION - Standard statin dosing appropriate",
            f"Diplotype: {label} - No increased myopathy risk",
            "Still monitor for muscle symptoms (other risk factors exist)",
        ]
    return [
        "UNKNOWN FUNCTION STATUS",
        "Use CONSERVATIVE statin dosing",
        "SIMVASTATIN: Limit to ≤40mg/day",
        "Consider genetic testing for SLCO1B1*5",
        "Monitor closely for muscle symptoms",
    ]


def f5_alerts(risk: str, diplotype: Diplotype) -> List[str]:
    if risk == "Very High":
        alerts = [
            "HOMOZYGOUS FACTOR V LEIDEN - VERY HIGH VTE RISK",
            "ABSOLUTE CONTRAINDICATION: NO estrogen-containing contraceptives",
            "ABSOLUTE CONTRAINDICATION: NO hormone replacement therapy with estrogen",
            "PREGNANCY RISK: Requires thromboprophylaxis - discuss with maternal-fetal medicine",
            "SURGERY RISK: Extended anticoagulation required - inform all surgeons/anesthesiologists",
            "FAMILY SCREENING: 50% chance children inherit mutation - genetic counseling recommended",
            "AVOID: Long-haul flights without prophylaxis, prolonged immobilization",
        ]
    elif risk in ("Elevated", "High"):
        if _carries_leiden(diplotype):
            headline = "HETEROZYGOUS FACTOR V LEIDEN - ELEVATED VTE RISK"
        elif risk == "High":
            headline = "HOMOZYGOUS FACTOR V H1299R - HIGH VTE RISK"
        else:
            headline = "FACTOR V H1299R CARRIER - ELEVATED VTE RISK"
        alerts = [
            headline,
            "CONTRAINDICATED: Estrogen-containing oral contraceptives (30-35x VTE risk)",
            "CONTRAINDICATED: Hormone replacement therapy with estrogen",
            "SAFE ALTERNATIVES: Progestin-only contraceptives, copper IUD",
            "PREGNANCY: May require thromboprophylaxis - discuss with OB-GYN",
            "SURGERY: Prophylactic anticoagulation recommended - inform surgeons",
            "FAMILY SCREENING: 50% chance children inherit - consider testing if relevant",
            "LIFESTYLE: Stay hydrated on flights, avoid prolonged immobilization",
        ]
    elif risk == UNKNOWN:
        return [
            "UNKNOWN FACTOR V STATUS - rs6025 not determined",
            "Consider Factor V Leiden testing before estrogen-containing medications",
        ]
    else:
        return [
            "NORMAL FACTOR V - No inherited thrombophilia detected",
            "CONTRACEPTIVE SAFETY: All hormonal contraceptives appropriate",
            "STANDARD PRECAUTIONS: Normal VTE prevention measures apply",
        ]

    alerts.extend([
        "DRUG INTERACTIONS: Tamoxifen, raloxifene also increase VTE risk",
        "SMOKING: Strongly contraindicated - further increases VTE risk",
    ])
    variant = "Factor V Leiden" if _carries_leiden(diplotype) else "Factor V H1299R"
    alerts.append(f"MEDICAL ALERT: Wear bracelet/carry card noting {variant} status")
    return alerts


def vkorc1_alerts(phenotype: str, combined: Optional[CombinedWarfarinRisk]) -> List[str]:
    if phenotype == "High Sensitivity":
        alerts = [
            "HIGH WARFARIN SENSITIVITY - Requires LOW dose (2-3mg/day)",
            "VKORC1 A/A genotype - low enzyme expression",
            "Start 2mg/day or LOWER (not standard 5mg/day)",
            "Over-anticoagulation risk - requires close INR monitoring",
        ]
    elif phenotype == "Intermediate Sensitivity":
        alerts = [
            "INTERMEDIATE WARFARIN SENSITIVITY - Requires MEDIUM dose (4-5mg/day)",
            "VKORC1 A/G genotype - intermediate enzyme expression",
            "Start 4-5mg/day with standard monitoring",
        ]
    elif phenotype == "Low Sensitivity":
        alerts = [
            "LOW WARFARIN SENSITIVITY - May require HIGH dose (6-7mg/day)",
            "VKORC1 G/G genotype - high enzyme expression",
            "May need 6-7mg/day or higher to achieve therapeutic INR",
        ]
    else:
        alerts = [
            "UNKNOWN VKORC1 STATUS - Use conservative dosing",
            "Consider VKORC1 genetic testing for personalized dosing",
        ]

    if combined is not None:
        if combined.combined_risk == CombinedRiskBand.VERY_HIGH:
            alerts.extend([
                "VERY HIGH COMBINED RISK (VKORC1 + CYP2C9)",
                "5-8x INCREASED BLEEDING RISK",
                "Requires VERY LOW doses (0.5-2mg/day)",
                "Consider alternative anticoagulant (DOAC) if appropriate",
            ])
        elif combined.combined_risk == CombinedRiskBand.HIGH:
            alerts.extend([
                "HIGH COMBINED RISK (VKORC1 + CYP2C9)",
                "3-5x INCREASED BLEEDING RISK",
                "Requires reduced doses and close monitoring",
            ])

    alerts.extend([
        "FDA requires pharmacogenetic testing before warfarin initiation",
        "INFORM ALL PRESCRIBERS of warfarin sensitivity status",
        "Carry medical alert card with VKORC1/CYP2C9 genotypes",
        "Many drug-drug interactions affect warfarin (antibiotics, NSAIDs, etc.)",
    ])
    return alerts


def cyp2c9_alerts(phenotype: str) -> List[str]:
    if phenotype == "Poor Metabolizer":
        return [
            "POOR METABOLIZER - HIGH BLEEDING RISK with warfarin",
            "WARFARIN: Reduce starting dose by 50-75% (start 0.5-2mg/day)",
            "NSAIDs: Reduce dose by 30-50%, consider alternatives",
            "SULFONYLUREAS: Avoid or reduce 50% - high hypoglycemia risk",
            "PHENYTOIN: Reduce dose 25-50% - high toxicity risk",
            "INFORM ALL PRESCRIBERS of poor metabolizer status",
            "CARRY MEDICAL ALERT card noting CYP2C9 poor metabolizer",
        ]
    if phenotype == "Intermediate Metabolizer":
        return [
            "INTERMEDIATE METABOLIZER - INCREASED BLEEDING RISK with warfarin",
            "WARFARIN: Reduce starting dose by 25-40% (start 2.5-4mg/day)",
            "NSAIDs: Consider dose reduction or alternatives",
            "SULFONYLUREAS: Reduce dose 25-30%, monitor glucose closely",
            "INFORM PRESCRIBERS of intermediate metabolizer status",
        ]
    if phenotype == "Normal Metabolizer":
        return [
            "NORMAL METABOLIZER - Standard dosing appropriate",
            "WARFARIN: Can start at standard 5mg/day with INR monitoring",
            "Still requires INR monitoring with warfarin (other factors affect dosing)",
        ]
    return [
        "UNKNOWN METABOLIZER STATUS - Assume increased risk",
        "Use CONSERVATIVE dosing for CYP2C9 substrates",
        "Consider additional genetic testing for CYP2C9",
    ]


def cyp2d6_alerts(phenotype: str) -> List[str]:
    if phenotype == "Poor Metabolizer":
        return [
            "AVOID: Codeine, Tramadol (no analgesic effect)",
            "REDUCE DOSE: Tricyclic antidepressants (50-75% reduction)",
            "AMPHETAMINES: May experience higher drug levels and more side effects",
            "TAMOXIFEN: Reduced efficacy - consider aromatase inhibitor",
        ]
    if phenotype == "Ultrarapid Metabolizer":
        return [
            "NEVER USE CODEINE - Fatal overdose risk (FDA BLACK BOX)",
            "AVOID TRAMADOL - Toxicity risk",
            "AMPHETAMINES: May need higher doses for efficacy",
        ]
    return []


# ============================================================================
# Limitations and guidelines
# ============================================================================

_LIMITATIONS = {
    "UGT1A1": [
        "UGT1A1*28 (TA repeat) is NOT reliably detected on SNP arrays - requires separate testing",
        "Most consumer tests only detect *6 and *27, not *28",
        "True Gilbert syndrome diagnosis requires *28/*28 genotyping",
        "rs887829 (*27) is only consulted when rs4148323 (*6) is wild-type, so *6/*27 "
        "compound heterozygotes are reported by their *6 call",
    ],
    "SLCO1B1": [
        "Only the *5 defining variant (rs4149056) is evaluated; *15 and other haplotypes are not phased",
        "Statin myopathy also depends on dose, drug interactions, age and hypothyroidism",
    ],
    "F5": [
        "Only rs6025 (Leiden) and rs6027 (H1299R) are evaluated; prothrombin G20210A and other "
        "thrombophilias are not assessed",
        "rs6027 is only consulted when rs6025 is wild-type",
        "Risk multipliers for H1299R are approximate (limited data)",
    ],
    "VKORC1": [
        "Only the -1639G>A promoter variant (rs9923231) is evaluated",
        "VKORC1 + CYP2C9 explain ~40-50% of warfarin dose variability; clinical factors explain the rest",
        "CYP4F2 and other warfarin modifiers are not assessed",
    ],
    "CYP2C9": [
        "Only *2 (rs1799853) and *3 (rs1057910) are evaluated; *5, *6, *8 and *11 are not detected",
        "Both defining variants are required; a missing variant makes the result Unknown",
    ],
    "CYP3A5": [
        "NO CPIC guidelines exist for alprazolam, sildenafil, tadalafil, or zolpidem",
        "CYP3A5 recommendations for these drugs are INFORMATIONAL only, not actionable",
        "CYP3A4 genetic variation also matters but is harder to assess from SNP arrays",
        "Most people (60-90%) are CYP3A5 non-expressors (*3/*3) and rely on CYP3A4",
        "Drug-drug interactions with CYP3A4 inhibitors/inducers are more clinically significant",
    ],
    "CYP2D6": [
        "SNP array data cannot detect gene deletions (CYP2D6*5) or duplications (*1xN, *2xN)",
        "True CYP2D6 phenotyping requires copy number variant analysis",
        "Phase ambiguity possible with multiple heterozygous variants",
        "This analysis covers major star alleles but not all 150+ known variants",
        "Clinical decisions should incorporate full medication history and patient factors",
    ],
}

_CONSUMER_LIMITATIONS = {
    "UGT1A1": "Consumer genetic tests may miss rare/novel UGT1A1 variants",
    "SLCO1B1": "Consumer genetic tests may not report rs4149056 on every chip version",
    "F5": "Consumer genetic test results for Factor V Leiden should be confirmed by clinical testing",
    "VKORC1": "Consumer genetic tests should be confirmed by a clinical laboratory before warfarin dosing",
    "CYP2C9": "Consumer genetic tests may not include rare CYP2C9 alleles",
    "CYP3A5": "Consumer genetic tests may not include rare CYP3A5 variants (*6, *7)",
    "CYP2D6": "Consumer genetic tests cannot detect CYP2D6 copy number variation",
}


def gene_limitations(gene: str, provider: ProviderHint) -> List[str]:
    limitations = list(_LIMITATIONS.get(gene, []))
    if provider.value in get_input_config().consumer_providers and gene in _CONSUMER_LIMITATIONS:
        limitations.append(_CONSUMER_LIMITATIONS[gene])
    return limitations


_GUIDELINES = {
    "UGT1A1": [
        "CPIC Guideline for UGT1A1 and Irinotecan (PMID: 15883587)",
        "Irinotecan FDA label includes UGT1A1*28 testing recommendation",
        "Nilotinib and Belinostat labels mention UGT1A1",
    ],
    "SLCO1B1": [
        "CPIC Guideline for SLCO1B1 and Simvastatin-Induced Myopathy (PMID: 24918167)",
        "FDA Simvastatin label: 80mg dose restricted due to myopathy risk",
    ],
    "F5": [
        "FDA boxed warning: estrogen-containing contraceptives and thromboembolism",
        "ACOG guidance on hormonal contraception in inherited thrombophilia",
    ],
    "VKORC1": [
        "CPIC Guideline for CYP2C9 and VKORC1 Genotypes and Warfarin Dosing (PMID: 21716271)",
        "FDA warfarin label includes VKORC1/CYP2C9 dosing table",
    ],
    "CYP2C9": [
        "CPIC Guideline for CYP2C9 and VKORC1 Genotypes and Warfarin Dosing (PMID: 21716271)",
        "CPIC Guideline for CYP2C9 and NSAIDs",
        "FDA phenytoin label mentions CYP2C9 poor metabolizers",
    ],
    "CYP3A5": [
        "CPIC Guideline for CYP3A5 and Tacrolimus (PMID: 25801146)",
        "NO CPIC guidelines for alprazolam, sildenafil, tadalafil, zolpidem",
        "CYP3A5*3 is the most common variant (60-90% of populations)",
        "Most people are CYP3A5 non-expressors and rely on CYP3A4 for CYP3A metabolism",
    ],
    "CYP2D6": [
        "CPIC Guideline for CYP2D6 and Codeine Therapy (PMID: 22205192)",
        "CPIC Guideline for CYP2D6 and SSRIs (PMID: 27997040)",
        "CPIC Guideline for CYP2D6 and Tricyclic Antidepressants (PMID: 28002639)",
        "PharmVar CYP2D6 Allele Nomenclature: www.pharmvar.org/gene/CYP2D6",
        "FDA Table of Pharmacogenomic Biomarkers in Drug Labeling",
    ],
}


def gene_guidelines(gene: str) -> List[str]:
    return list(_GUIDELINES.get(gene, []))
