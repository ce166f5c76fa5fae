from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime, timezone

from pgxrules.services.pharmacogenomics.config import get_config
from pgxrules.services.pharmacogenomics.models import AnalysisResult, ProviderHint


class ClinicalReference(BaseModel):
    type: Literal["PMID", "URL", "DOI", "PharmGKB", "ClinVar"]
    id: str = Field(..., min_length=1)
    description: Optional[str] = None


class ApiMetadata(BaseModel):
    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$", description="Semantic version of the report format")
    timestamp: str = Field(..., description="ISO 8601 generation time")
    disclaimer: str = Field(..., min_length=50)
    references: List[ClinicalReference] = Field(default_factory=list)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v):
        try:
            datetime.fromisoformat(v.replace('Z', '+00:00'))
            return v
        except ValueError:
            raise ValueError("Timestamp must be a valid ISO 8601 string")


class GenotypeInput(BaseModel):
    """One genotype call as accepted at the API boundary."""
    variant_id: str = Field(..., pattern=r"^rs\d+$", description="dbSNP rsID, e.g. rs4149056")
    genotype: Optional[str] = Field(None, max_length=4, description="Raw genotype, e.g. 'CT', 'C/T' or '--'")


class AnalyzeRequest(BaseModel):
    genotypes: List[GenotypeInput] = Field(default_factory=list)
    provider: ProviderHint = Field(default=ProviderHint.UNKNOWN, description="Source of the genotype data")
    genes: Optional[List[str]] = Field(None, description="Genes to analyze; all enabled genes when omitted")


class ReportSummary(BaseModel):
    genes_analyzed: List[str] = Field(default_factory=list)
    total_drugs_affected: int = Field(0, ge=0)
    high_confidence_results: int = Field(0, ge=0)
    critical_warnings: List[str] = Field(default_factory=list)


class ComprehensiveReport(BaseModel):
    """Multi-gene report: metadata envelope, per-gene results and a summary."""
    metadata: ApiMetadata
    provider: ProviderHint = ProviderHint.UNKNOWN
    results: Dict[str, AnalysisResult] = Field(default_factory=dict)
    summary: ReportSummary

    @field_validator('results')
    @classmethod
    def validate_result_keys(cls, v):
        for key, result in v.items():
            if key != result.gene:
                raise ValueError(f"Result keyed '{key}' holds a {result.gene} analysis")
        return v


def create_api_metadata(timestamp: Optional[str] = None) -> ApiMetadata:
    """Metadata envelope built from the active configuration."""
    config = get_config()
    return ApiMetadata(
        version=config.api_version,
        timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
        disclaimer=config.disclaimer,
        references=[ClinicalReference(**ref.model_dump()) for ref in config.default_references],
    )


def validate_report(data: Dict[str, Any]) -> ComprehensiveReport:
    """
    Validate a report payload.

    Raises pydantic.ValidationError on any contract breach; the payload is
    never corrected.
    """
    return ComprehensiveReport.model_validate(data)
