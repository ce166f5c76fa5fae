from __future__ import annotations

import json
import sys
from pathlib import Path

from pydantic import ValidationError

from pgxrules.services.pipeline.analysis_pipeline import analyze_gene, run_comprehensive_analysis

from .gene_definitions import UnsupportedGeneError
from .genotype_normalizer import coerce_provider
from .models import VariantCall
from .raw_data import RawDataParseError, parse_raw_data

USAGE = (
    "Usage: python -m pgxrules.services.pharmacogenomics <raw-file|calls.json> "
    "[--provider 23andme|ancestrydna|unknown] [--gene GENE]"
)


def _option(argv: list[str], name: str) -> str | None:
    if name not in argv:
        return None
    idx = argv.index(name)
    if idx + 1 >= len(argv):
        raise ValueError(f"{name} requires an argument")
    return argv[idx + 1]


def _load_calls(path: Path, provider):
    """Calls from a JSON list / {"genotypes": [...]} document, or from a raw export."""
    if path.suffix.lower() == ".json":
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
        if isinstance(document, dict):
            if provider is None and document.get("provider"):
                provider = coerce_provider(document["provider"])
            document = document.get("genotypes", [])
        try:
            calls = [VariantCall(**item) for item in document]
        except (TypeError, ValidationError) as e:
            raise RawDataParseError(f"Invalid genotype entry in {path.name}: {e}") from e
        return calls, provider

    parsed = parse_raw_data(path, provider)
    return parsed.calls, parsed.provider


def main(argv: list[str]) -> int:
    if len(argv) < 2 or "--help" in argv:
        print(USAGE)
        return 0

    path = Path(argv[1])
    if not path.exists():
        print(f"File not found: {path}")
        return 2

    try:
        provider_arg = _option(argv, "--provider")
        gene = _option(argv, "--gene")
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    provider = coerce_provider(provider_arg) if provider_arg is not None else None

    try:
        calls, provider = _load_calls(path, provider)
        if gene:
            payload = analyze_gene(gene, calls, provider).model_dump(mode="json")
        else:
            payload = run_comprehensive_analysis(calls, provider).model_dump(mode="json")
    except (RawDataParseError, json.JSONDecodeError) as e:
        print(f"Could not read {path}: {e}")
        return 2
    except UnsupportedGeneError as e:
        print(f"Error: {e}")
        return 2

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
