"""
Pharmacogenomics Service

Deterministic, table-driven rule pipeline that turns raw genotype calls
into per-gene diplotypes, phenotypes and drug-dosing guidance.
"""

from .models import (
    UNKNOWN,
    VariantCall,
    NormalizedGenotype,
    Diplotype,
    PhenotypeCall,
    DrugRecommendation,
    CombinedWarfarinRisk,
    ConfidenceLevel,
    RiskTier,
    CombinedRiskBand,
    ProviderHint,
    AnalysisResult,
)
from .genotype_normalizer import normalize, normalize_calls, detect_provider
from .gene_definitions import (
    GENE_DEFINITIONS,
    SUPPORTED_GENES,
    UnsupportedGeneError,
    get_gene_definition,
)
from .diplotype_caller import DiplotypeCaller
from .phenotype_mapper import PhenotypeClassifier
from .confidence import ConfidenceScorer, ConfidenceBreakdown
from .recommendation_engine import RecommendationEngine
from .warfarin_resolver import resolve_warfarin_risk, combined_warfarin_dosing, warfarin_recommendation
from .result_composer import ResultComposer
from .raw_data import RawDataParseError, parse_raw_data
from .config import (
    get_config,
    update_config,
    load_config_from_file,
    save_config_to_file,
)

__all__ = [
    # Models
    'UNKNOWN',
    'VariantCall',
    'NormalizedGenotype',
    'Diplotype',
    'PhenotypeCall',
    'DrugRecommendation',
    'CombinedWarfarinRisk',
    'ConfidenceLevel',
    'RiskTier',
    'CombinedRiskBand',
    'ProviderHint',
    'AnalysisResult',
    # Normalizer
    'normalize',
    'normalize_calls',
    'detect_provider',
    # Gene tables
    'GENE_DEFINITIONS',
    'SUPPORTED_GENES',
    'UnsupportedGeneError',
    'get_gene_definition',
    # Pipeline stages
    'DiplotypeCaller',
    'PhenotypeClassifier',
    'ConfidenceScorer',
    'ConfidenceBreakdown',
    'RecommendationEngine',
    'resolve_warfarin_risk',
    'combined_warfarin_dosing',
    'warfarin_recommendation',
    'ResultComposer',
    # Raw data
    'RawDataParseError',
    'parse_raw_data',
    # Config
    'get_config',
    'update_config',
    'load_config_from_file',
    'save_config_to_file',
]
