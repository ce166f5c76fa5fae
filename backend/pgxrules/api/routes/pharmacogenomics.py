from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from pydantic import ValidationError
from typing import Any, Dict, List, Optional
import logging

from pgxrules.schemas.pgx_schema import AnalyzeRequest, ComprehensiveReport
from pgxrules.services.pharmacogenomics.gene_definitions import (
    GENE_DEFINITIONS,
    UnsupportedGeneError,
    get_gene_definition,
)
from pgxrules.services.pharmacogenomics.genotype_normalizer import coerce_provider
from pgxrules.services.pharmacogenomics.models import AnalysisResult, ProviderHint, VariantCall
from pgxrules.services.pharmacogenomics.raw_data import RawDataParseError, parse_raw_data
from pgxrules.services.pharmacogenomics.recommendation_tables import drug_names
from pgxrules.services.pipeline.analysis_pipeline import analyze_gene, run_comprehensive_analysis

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_calls(request: AnalyzeRequest) -> List[VariantCall]:
    return [VariantCall(variant_id=g.variant_id, genotype=g.genotype) for g in request.genotypes]


def _schema_failure(e: ValidationError) -> HTTPException:
    logger.exception(f"Result failed schema validation: {e.error_count()} errors")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Analysis result failed schema validation."
    )


@router.post(
    "/analyze",
    response_model=ComprehensiveReport,
    status_code=status.HTTP_200_OK,
    summary="Multi-gene pharmacogenomic analysis",
)
async def analyze(request: AnalyzeRequest) -> ComprehensiveReport:
    """
    Run every requested gene (all enabled genes by default) over the
    submitted genotype calls.
    """
    try:
        return run_comprehensive_analysis(_to_calls(request), request.provider, request.genes)
    except UnsupportedGeneError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise _schema_failure(e)


@router.post(
    "/analyze/{gene}",
    response_model=AnalysisResult,
    status_code=status.HTTP_200_OK,
    summary="Single-gene pharmacogenomic analysis",
)
async def analyze_single_gene(gene: str, request: AnalyzeRequest):
    try:
        return analyze_gene(gene, _to_calls(request), request.provider)
    except UnsupportedGeneError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise _schema_failure(e)


@router.post(
    "/analyze-file",
    response_model=ComprehensiveReport,
    status_code=status.HTTP_200_OK,
    summary="Analyze a raw 23andMe / AncestryDNA export",
)
async def analyze_file(
    file: UploadFile = File(..., description="Raw genotype export (tab-separated text)"),
    provider: Optional[str] = Form(None, description="23andme, ancestrydna or unknown; sniffed when omitted"),
) -> ComprehensiveReport:
    content = await file.read()

    try:
        hint = coerce_provider(provider) if provider else None
        parsed = parse_raw_data(content, hint)
    except RawDataParseError as e:
        logger.error(f"Raw data parse error for {file.filename}: {str(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return run_comprehensive_analysis(parsed.calls, parsed.provider)
    except ValidationError as e:
        raise _schema_failure(e)


def _describe(definition) -> Dict[str, Any]:
    return {
        "gene": definition.gene,
        "description": definition.description,
        "nomenclature": definition.nomenclature,
        "defining_variants": list(definition.defining_variants),
        "drugs": list(drug_names(definition.gene)),
    }


@router.get("/genes", summary="Supported genes")
async def list_genes() -> Dict[str, Any]:
    """Supported genes with their defining variants and the drugs they inform."""
    return {
        "genes": [_describe(definition) for definition in GENE_DEFINITIONS.values()],
        "providers": [p.value for p in ProviderHint],
    }


@router.get("/genes/{gene}", summary="One supported gene")
async def get_gene(gene: str) -> Dict[str, Any]:
    try:
        return _describe(get_gene_definition(gene))
    except UnsupportedGeneError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
