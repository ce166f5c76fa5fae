"""
Clinical summary templates, one per gene.

Each builder returns a multi-paragraph plain-text summary. The text is
fully determined by its arguments.
"""

from typing import Dict, Optional

from .models import (
    UNKNOWN,
    CombinedWarfarinRisk,
    ConfidenceLevel,
    ContraceptiveSafety,
    Diplotype,
    GilbertSyndromeStatus,
    NormalizedGenotype,
    VTERiskAssessment,
)


def _genotype(normalized: Dict[str, NormalizedGenotype], variant_id: str) -> str:
    genotype = normalized.get(variant_id)
    if genotype is None:
        return "not tested"
    if genotype.is_unknown:
        return "Unknown (no call)"
    if not genotype.is_complete:
        return f"{genotype.canonical_pair} (incomplete)"
    return genotype.canonical_pair


def _join(*blocks: str) -> str:
    return "\n\n".join(block.strip("\n") for block in blocks if block).strip()


# ---------------------------------------------------------------------------
# UGT1A1
# ---------------------------------------------------------------------------

def ugt1a1_summary(diplotype: Diplotype, phenotype: str, score: float, gilbert: GilbertSyndromeStatus) -> str:
    header = f"UGT1A1 {diplotype.label} - {phenotype} (Activity Score: {score:.1f})"

    if phenotype == "Poor Metabolizer":
        body = (
            "CRITICAL: Poor UGT1A1 function detected\n\n"
            "- **Irinotecan Chemotherapy**: 30% dose reduction required per FDA label\n"
            "- **Cabotegravir (Apretude)**: Monitor for increased drug levels\n"
            f"- **Gilbert Syndrome**: {gilbert.clinical_significance}"
        )
    elif phenotype == "Intermediate Metabolizer":
        body = (
            "WARNING: Reduced UGT1A1 function\n\n"
            "- **Irinotecan**: Consider dose reduction, monitor closely\n"
            "- **Cabotegravir**: Slightly increased exposure possible\n"
            f"- **Gilbert Syndrome**: {gilbert.clinical_significance}"
        )
    elif phenotype == UNKNOWN:
        body = (
            "UGT1A1 function could not be determined from the available genotypes.\n"
            "Use standard irinotecan dosing with close monitoring for neutropenia and diarrhea."
        )
    else:
        body = "Normal UGT1A1 function\n\nStandard dosing for UGT1A1-metabolized drugs."

    return _join(header, body)


# ---------------------------------------------------------------------------
# SLCO1B1
# ---------------------------------------------------------------------------

_SLCO1B1_INTERPRETATION = {
    "Poor Function": (
        "You have VERY LOW OATP1B1 function (~25-30% of normal). This causes:\n"
        "- 16-17x INCREASED MYOPATHY RISK with simvastatin\n"
        "- 2-3x increased risk with atorvastatin\n"
        "- CPIC recommends AVOIDING simvastatin or using MAX 20mg/day\n"
        "- Pravastatin, rosuvastatin, pitavastatin are PREFERRED (no SLCO1B1 effect)"
    ),
    "Decreased Function": (
        "You have REDUCED OATP1B1 function (~50-75% of normal). This causes:\n"
        "- 4-5x INCREASED MYOPATHY RISK with simvastatin\n"
        "- 1.5-2x increased risk with atorvastatin\n"
        "- CPIC recommends LIMITING simvastatin to MAX 40mg/day\n"
        "- Consider pravastatin, rosuvastatin, or pitavastatin"
    ),
    "Normal Function": (
        "You have NORMAL OATP1B1 function. Standard statin dosing is appropriate.\n"
        "No SLCO1B1-related increase in myopathy risk."
    ),
}


def slco1b1_summary(
    diplotype: Diplotype,
    phenotype: str,
    score: float,
    confidence: ConfidenceLevel,
    normalized: Dict[str, NormalizedGenotype],
) -> str:
    return _join(
        "SLCO1B1 TRANSPORTER FUNCTION\n"
        f"Diplotype: {diplotype.label}\n"
        f"Phenotype: {phenotype}\n"
        f"Function Score: {score:.2f} (0=none, 2=normal)\n"
        f"Confidence: {confidence.value}",
        "SLCO1B1 encodes OATP1B1, the primary hepatic uptake transporter for statins.\n"
        "Reduced function leads to HIGHER statin blood levels and INCREASED myopathy risk.",
        _SLCO1B1_INTERPRETATION.get(
            phenotype, "Your SLCO1B1 status could not be determined. Use conservative statin dosing."
        ),
        "STATIN MYOPATHY RISK SPECTRUM:\n"
        "HIGHEST RISK: Simvastatin 80mg (AVOID in poor/decreased function)\n"
        "HIGH RISK: Simvastatin 40mg, Atorvastatin 80mg\n"
        "MODERATE RISK: Atorvastatin ≤40mg, Lovastatin\n"
        "LOW RISK: Pravastatin, Rosuvastatin, Pitavastatin (NOT affected by SLCO1B1)",
        "GENOTYPE DETAILS:\n"
        f"• rs4149056 (SLCO1B1*5): {_genotype(normalized, 'rs4149056')}",
        "CLINICAL PEARLS:\n"
        "• Simvastatin 80mg has FDA boxed warning for myopathy risk\n"
        "• Myopathy symptoms: Muscle pain, weakness, dark urine, CK elevation >10x ULN\n"
        "• ~30-50% of patients carry at least one *5 allele (decreased function)\n"
        "• Pharmacogenetic testing recommended before high-dose simvastatin",
    )


# ---------------------------------------------------------------------------
# F5
# ---------------------------------------------------------------------------

def _f5_interpretation(risk: str, diplotype: Diplotype) -> str:
    if risk == "Very High":
        return (
            "You are HOMOZYGOUS for Factor V Leiden (two copies). This confers a 50-80x increased risk "
            "of venous thromboembolism (VTE) compared to the general population. Estrogen-containing "
            "medications are ABSOLUTELY CONTRAINDICATED."
        )
    if risk == "Elevated" and "R506Q" in (diplotype.allele1, diplotype.allele2):
        return (
            "You are HETEROZYGOUS for Factor V Leiden (one copy). This confers a 5-7x increased risk of VTE. "
            "While absolute risk remains low (~0.5-0.7% per year), estrogen contraceptives increase this "
            "to ~3% per year and are CONTRAINDICATED."
        )
    if risk == "Elevated":
        return (
            "You carry one copy of the Factor V H1299R (R2) variant. This confers an approximately 3x "
            "increased risk of VTE. Estrogen-containing medications are CONTRAINDICATED."
        )
    if risk == "High":
        return (
            "You are HOMOZYGOUS for the Factor V H1299R (R2) variant. This confers a markedly increased "
            "risk of VTE. Estrogen-containing medications are CONTRAINDICATED."
        )
    if risk == UNKNOWN:
        return (
            "Your Factor V status could not be determined. Consider Factor V Leiden testing before "
            "starting estrogen-containing medications."
        )
    return (
        "You do NOT carry Factor V Leiden. Your baseline VTE risk is normal (~0.1% per year). "
        "All contraceptive options are appropriate from a thrombophilia perspective."
    )


def f5_summary(
    diplotype: Diplotype,
    risk: str,
    multiplier: float,
    confidence: ConfidenceLevel,
    normalized: Dict[str, NormalizedGenotype],
    safety: ContraceptiveSafety,
    vte: VTERiskAssessment,
) -> str:
    header = [
        "FACTOR V LEIDEN STATUS",
        f"Diplotype: {diplotype.label}",
        f"Genotype (rs6025): {_genotype(normalized, 'rs6025')}",
    ]
    if "rs6027" in normalized:
        header.append(f"Secondary variant (rs6027): {_genotype(normalized, 'rs6027')}")
    header.extend([
        f"Thrombophilia Risk: {risk}",
        f"VTE Risk Multiplier: {multiplier:g}x baseline",
        f"Confidence: {confidence.value}",
    ])

    return _join(
        "\n".join(header),
        "Factor V Leiden (FVL) is the MOST COMMON inherited thrombophilia in people\n"
        "of European descent, affecting 3-8% of the population. The mutation causes\n"
        "resistance to activated Protein C, a natural anticoagulant, leading to\n"
        "increased blood clotting tendency.",
        _f5_interpretation(risk, diplotype),
        "CONTRACEPTIVE SAFETY:\n"
        f"• Combined OCPs (estrogen + progestin): {safety.combined_ocps}\n"
        f"• Progestin-only methods: {safety.progestin_only}\n"
        f"• Estrogen HRT: {safety.estrogen_hrt}\n"
        f"• FDA Black Box Warning: {'YES - Applies' if safety.fda_black_box_applies else 'No'}",
        "VTE RISK ESTIMATES:\n"
        f"• Baseline (no risk factors): {vte.baseline_risk}\n"
        f"• With estrogen contraceptives: {vte.with_ocps}\n"
        f"• During pregnancy/postpartum: {vte.with_pregnancy}\n"
        f"• With major surgery: {vte.with_surgery}",
    )


# ---------------------------------------------------------------------------
# VKORC1
# ---------------------------------------------------------------------------

_VKORC1_INTERPRETATION = {
    "High Sensitivity": (
        "You have HIGH WARFARIN SENSITIVITY (A/A genotype). You express LOW levels of VKORC1.\n"
        "This means you need a LOW warfarin dose (typically 2-3mg/day vs standard 5mg/day).\n"
        "Starting at standard doses may cause dangerous over-anticoagulation."
    ),
    "Intermediate Sensitivity": (
        "You have INTERMEDIATE WARFARIN SENSITIVITY (A/G genotype). You express MODERATE levels of VKORC1.\n"
        "This means you need a MEDIUM warfarin dose (typically 4-5mg/day).\n"
        "Standard starting dose may still be appropriate with close monitoring."
    ),
    "Low Sensitivity": (
        "You have LOW WARFARIN SENSITIVITY (G/G genotype). You express HIGH levels of VKORC1.\n"
        "This means you may need a HIGH warfarin dose (typically 6-7mg/day or more).\n"
        "Standard starting doses may be insufficient to achieve therapeutic INR."
    ),
}


def vkorc1_summary(
    genotype: str,
    phenotype: str,
    score: float,
    confidence: ConfidenceLevel,
    combined: Optional[CombinedWarfarinRisk],
) -> str:
    if combined is not None and combined.cyp2c9_diplotype is not None:
        combined_block = (
            "COMBINED PHARMACOGENETICS:\n"
            f"• VKORC1: {genotype}\n"
            f"• CYP2C9: {combined.cyp2c9_diplotype} ({combined.cyp2c9_phenotype})\n"
            f"• Combined Risk: {combined.combined_risk.value}\n"
            f"• Bleeding Risk: {combined.bleeding_risk_multiplier}\n\n"
            "Together, VKORC1 and CYP2C9 explain ~40-50% of warfarin dose variability.\n"
            "The remaining variability comes from clinical factors (age, weight, diet, medications)."
        )
    else:
        combined_block = (
            "CYP2C9 testing recommended for comprehensive warfarin risk assessment.\n"
            "Combined VKORC1 + CYP2C9 testing explains ~40-50% of warfarin dose variability."
        )

    return _join(
        "VKORC1 WARFARIN SENSITIVITY\n"
        f"Genotype: {genotype}\n"
        f"Phenotype: {phenotype}\n"
        f"Sensitivity Score: {score:.1f} (1=low, 3=high)\n"
        f"Confidence: {confidence.value}",
        "VKORC1 encodes the DIRECT TARGET of warfarin - the enzyme that recycles vitamin K.\n"
        "Lower VKORC1 expression = HIGHER warfarin sensitivity = LOWER dose needed.",
        _VKORC1_INTERPRETATION.get(
            phenotype, "Your VKORC1 status could not be determined. Use standard dosing with close monitoring."
        ),
        "GENOTYPE DETAILS:\n"
        f"• rs9923231: {genotype}\n"
        "  - Located in VKORC1 promoter region (-1639G>A)\n"
        "  - Controls VKORC1 gene expression levels\n"
        "  - Accounts for 25-30% of warfarin dose variability",
        combined_block,
        "CLINICAL PEARLS:\n"
        "• Warfarin is the #2 cause of drug-related hospitalizations in the US\n"
        "• Pharmacogenetic-guided dosing reduces bleeding risk by 25-30%\n"
        "• Direct oral anticoagulants (DOACs) are not affected by these genes\n"
        "• Vitamin K intake (leafy greens) also affects warfarin response",
    )


# ---------------------------------------------------------------------------
# CYP2C9
# ---------------------------------------------------------------------------

_CYP2C9_INTERPRETATION = {
    "Poor Metabolizer": (
        "You have SIGNIFICANTLY REDUCED CYP2C9 activity (~5-10% of normal). This causes:\n"
        "- 3-5x INCREASED bleeding risk with warfarin\n"
        "- Requires 50-75% DOSE REDUCTION for warfarin, NSAIDs, sulfonylureas\n"
        "- FDA pharmacogenetic testing recommended before warfarin initiation"
    ),
    "Intermediate Metabolizer": (
        "You have MODERATELY REDUCED CYP2C9 activity (~50-75% of normal). This causes:\n"
        "- 2-3x increased bleeding risk with warfarin\n"
        "- Requires 25-40% dose reduction for warfarin\n"
        "- Consider dose adjustments for NSAIDs and sulfonylureas"
    ),
    "Normal Metabolizer": (
        "You have NORMAL CYP2C9 activity. Standard dosing is appropriate for CYP2C9 substrates.\n"
        "Warfarin dosing still requires INR monitoring (other factors affect response)."
    ),
}


def cyp2c9_summary(
    diplotype: Diplotype,
    phenotype: str,
    score: float,
    confidence: ConfidenceLevel,
    normalized: Dict[str, NormalizedGenotype],
) -> str:
    return _join(
        "CYP2C9 METABOLIZER STATUS\n"
        f"Diplotype: {diplotype.label}\n"
        f"Phenotype: {phenotype}\n"
        f"Activity Score: {score:.2f} (0=none, 2=normal)\n"
        f"Confidence: {confidence.value}",
        "CYP2C9 metabolizes approximately 15% of clinically used drugs, including\n"
        "warfarin (the #2 most common cause of drug-related hospitalizations in the US).",
        _CYP2C9_INTERPRETATION.get(
            phenotype, "Your CYP2C9 status could not be determined. Use conservative dosing for CYP2C9 substrates."
        ),
        "GENOTYPE DETAILS:\n"
        f"• rs1799853 (CYP2C9*2): {_genotype(normalized, 'rs1799853')}\n"
        f"• rs1057910 (CYP2C9*3): {_genotype(normalized, 'rs1057910')}",
    )


# ---------------------------------------------------------------------------
# CYP3A5
# ---------------------------------------------------------------------------

def cyp3a5_summary(diplotype: Diplotype, phenotype: str) -> str:
    header = f"CYP3A5 {diplotype.label} - {phenotype}"

    if phenotype == "Expressor":
        body = (
            "EXPRESSOR: You have functional CYP3A5 enzyme expression\n\n"
            "**Clinical Significance:**\n"
            "- Faster metabolism of CYP3A5 substrates, potentially lower drug levels\n"
            "- **Tacrolimus**: CPIC recommends 1.5-2x higher dose (if prescribed)\n"
            "- **Alprazolam**: May have slightly lower levels (no formal guideline)\n"
            "- **Sildenafil**: May need higher doses if inadequate response\n\n"
            "**Population Context**: 10-40% of people (varies by ancestry)"
        )
    elif phenotype == "Intermediate Expressor":
        body = (
            "INTERMEDIATE EXPRESSOR: Reduced CYP3A5 enzyme expression\n\n"
            "**Clinical Significance:**\n"
            "- Moderately faster metabolism of some CYP3A5 substrates\n"
            "- **Tacrolimus**: CPIC suggests 1.2-1.5x higher dose (if prescribed)\n"
            "- Most other drugs: Standard dosing\n\n"
            "**Population Context**: Variable by ancestry (heterozygotes)"
        )
    elif phenotype == UNKNOWN:
        body = (
            "CYP3A5 expression status could not be determined.\n"
            "Use standard dosing and therapeutic drug monitoring for tacrolimus."
        )
    else:
        body = (
            "NON-EXPRESSOR: NO functional CYP3A5 enzyme expression\n\n"
            "**Clinical Significance:**\n"
            "- You rely ENTIRELY on CYP3A4 for CYP3A metabolism\n"
            "- Standard dosing for most medications\n"
            "- More susceptible to CYP3A4 drug-drug interactions\n\n"
            "**Population Context**: 60-90% of most populations (most common)"
        )

    return _join(header, body)


# ---------------------------------------------------------------------------
# CYP2D6
# ---------------------------------------------------------------------------

_CYP2D6_INTERPRETATION = {
    "Poor Metabolizer": (
        "You are a CYP2D6 POOR METABOLIZER (PM). This means you have little to no CYP2D6 enzyme activity. "
        "CYP2D6 metabolizes approximately 25% of all prescription drugs, including:\n\n"
        "• AMPHETAMINES: May experience HIGHER drug levels, more side effects (cardiovascular, anxiety, insomnia)\n"
        "• CODEINE/TRAMADOL: These prodrugs will NOT work for you - no analgesic effect\n"
        "• ANTIDEPRESSANTS: May need 50-75% dose reduction to avoid side effects\n"
        "• TAMOXIFEN: CRITICAL - Reduced cancer treatment efficacy, consider alternatives\n"
        "• BETA BLOCKERS: May need dose reduction\n\n"
        "IMPORTANT: Always inform healthcare providers of your Poor Metabolizer status before starting new medications."
    ),
    "Intermediate Metabolizer": (
        "You are a CYP2D6 INTERMEDIATE METABOLIZER (IM). You have reduced but not absent enzyme activity. "
        "This affects ~10-15% of Europeans and >50% of East Asians.\n\n"
        "• AMPHETAMINES: Moderate impact, may need dose adjustments\n"
        "• CODEINE/TRAMADOL: Reduced analgesic efficacy\n"
        "• ANTIDEPRESSANTS: May need dose adjustments\n"
        "• Most drugs: Close monitoring recommended during dose titration"
    ),
    "Ultrarapid Metabolizer": (
        "You are a CYP2D6 ULTRARAPID METABOLIZER (UM). You have increased enzyme activity, typically due to "
        "gene duplications. This affects 1-2% of Europeans and up to 30% in some Middle Eastern/North "
        "African populations.\n\n"
        "• AMPHETAMINES: May experience LOWER drug levels at standard doses\n"
        "• CODEINE: LIFE-THREATENING RISK - Do not use codeine (especially in children) - FDA BLACK BOX WARNING\n"
        "• TRAMADOL: Avoid - toxicity risk\n"
        "• ANTIDEPRESSANTS: May need higher doses for efficacy\n"
        "• TAMOXIFEN: May have enhanced efficacy\n\n"
        "CRITICAL: Ultrarapid metabolizers should NEVER use codeine or tramadol due to fatal overdose risk."
    ),
    "Normal Metabolizer": (
        "You are a CYP2D6 NORMAL METABOLIZER (NM). You have typical enzyme activity. Standard drug dosing "
        "is appropriate for most CYP2D6 substrates.\n\n"
        "• AMPHETAMINES: Expected typical response\n"
        "• CODEINE/TRAMADOL: Normal analgesic effect\n"
        "• ANTIDEPRESSANTS: Standard dosing\n"
        "• TAMOXIFEN: Normal efficacy"
    ),
}


def cyp2d6_summary(
    diplotype: Diplotype,
    phenotype: str,
    score: float,
    confidence: ConfidenceLevel,
    phase_ambiguity: bool,
) -> str:
    ambiguity = ""
    if phase_ambiguity:
        ambiguity = (
            "PHASE AMBIGUITY: Multiple variants detected. "
            "True diplotype may differ without long-range phasing data."
        )

    return _join(
        f"CYP2D6 Diplotype: {diplotype.label}\n"
        f"Phenotype: {phenotype}\n"
        f"Activity Score: {score:.2f}\n"
        f"Confidence: {confidence.value.upper()}",
        ambiguity,
        "CLINICAL INTERPRETATION:\n"
        + _CYP2D6_INTERPRETATION.get(
            phenotype,
            "CYP2D6 metabolizer status could not be determined. "
            "Use standard dosing with close monitoring for CYP2D6 substrates.",
        ),
    )
