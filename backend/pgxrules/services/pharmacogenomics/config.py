"""
Configuration for the pharmacogenomics rule pipeline.
Centralizes report metadata, input handling and logging settings.
Environment variables (or a .env file) override the defaults at import.
"""

import os
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

load_dotenv(find_dotenv())


DEFAULT_DISCLAIMER = (
    "This pharmacogenomic analysis is for educational and research purposes only. "
    "It is not a substitute for professional medical advice, diagnosis, or treatment. "
    "Always consult a qualified healthcare provider before making any medication changes. "
    "Genetic testing results should be interpreted by a clinical pharmacist or physician "
    "with expertise in pharmacogenomics in the context of your complete medical history."
)


class ReferenceConfig(BaseModel):
    """A literature or database reference attached to every report."""

    type: str = Field(..., description="Reference type: PMID, URL, DOI, PharmGKB or ClinVar")
    id: str = Field(..., description="Identifier or URL")
    description: Optional[str] = Field(None, description="Short description")


class InputConfig(BaseModel):
    """Configuration for genotype input handling."""

    no_call_tokens: List[str] = Field(
        default_factory=lambda: ["--", "00", "II", "DD", "NN"],
        description="Genotype strings that mean 'no call'"
    )

    directional_variants: List[str] = Field(
        default_factory=lambda: ["rs9923231"],
        description="Variants whose allele order is meaningful and must not be sorted"
    )

    default_provider: str = Field(
        default="unknown",
        description="Provider hint used when the caller does not supply one"
    )

    consumer_providers: List[str] = Field(
        default_factory=lambda: ["23andme", "ancestrydna"],
        description="Providers that get consumer-array limitation notes"
    )


class PipelineConfig(BaseModel):
    """Main configuration for the pharmacogenomics pipeline."""

    api_version: str = Field(
        default="2.0.0",
        pattern=r"^\d+\.\d+\.\d+$",
        description="Semantic version stamped into report metadata"
    )

    disclaimer: str = Field(
        default=DEFAULT_DISCLAIMER,
        min_length=50,
        description="Medical disclaimer stamped into report metadata"
    )

    default_references: List[ReferenceConfig] = Field(
        default_factory=lambda: [
            ReferenceConfig(type="URL", id="https://cpicpgx.org/", description="CPIC Guidelines"),
            ReferenceConfig(type="URL", id="https://www.pharmgkb.org/", description="PharmGKB Database"),
            ReferenceConfig(type="PMID", id="21716271", description="CYP2C9/VKORC1 Warfarin Dosing"),
        ],
        description="References included in every report"
    )

    input: InputConfig = Field(
        default_factory=InputConfig,
        description="Genotype input configuration"
    )

    enabled_genes: List[str] = Field(
        default_factory=lambda: ["UGT1A1", "SLCO1B1", "F5", "CYP2C9", "VKORC1", "CYP3A5", "CYP2D6"],
        description="Genes analyzed when the caller does not name any"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    verbose_logging: bool = Field(
        default=False,
        description="Log every normalized genotype and diplotype call"
    )


def _from_environment() -> PipelineConfig:
    overrides = {}
    if os.environ.get("PGX_API_VERSION"):
        overrides["api_version"] = os.environ["PGX_API_VERSION"]
    if os.environ.get("PGX_LOG_LEVEL"):
        overrides["log_level"] = os.environ["PGX_LOG_LEVEL"].upper()
    config = PipelineConfig(**overrides)
    if os.environ.get("PGX_DEFAULT_PROVIDER"):
        config.input.default_provider = os.environ["PGX_DEFAULT_PROVIDER"].lower()
    return config


# Global configuration instance
_config: PipelineConfig = _from_environment()


def get_config() -> PipelineConfig:
    """Get the global configuration instance."""
    return _config


def update_config(**kwargs):
    """Update configuration parameters."""
    global _config
    current_dict = _config.model_dump()

    for key, value in kwargs.items():
        if '.' in key:
            # Nested keys like 'input.default_provider'
            parts = key.split('.')
            current = current_dict
            for part in parts[:-1]:
                current = current[part]
            current[parts[-1]] = value
        else:
            current_dict[key] = value

    _config = PipelineConfig(**current_dict)
    return _config


def reset_config() -> PipelineConfig:
    """Restore defaults (plus environment overrides)."""
    global _config
    _config = _from_environment()
    return _config


def load_config_from_file(filepath: str):
    """Load configuration from a JSON file."""
    import json
    global _config

    with open(filepath, 'r') as f:
        config_dict = json.load(f)

    _config = PipelineConfig(**config_dict)
    return _config


def save_config_to_file(filepath: str):
    """Save current configuration to a JSON file."""
    import json

    with open(filepath, 'w') as f:
        json.dump(_config.model_dump(), f, indent=2)


# Convenience accessors
def get_input_config() -> InputConfig:
    """Get genotype input configuration."""
    return _config.input


def get_default_provider() -> str:
    """Get the provider hint used when none is supplied."""
    return _config.input.default_provider


def get_enabled_genes() -> List[str]:
    """Get the genes analyzed by default."""
    return list(_config.enabled_genes)
