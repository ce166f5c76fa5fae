"""
Genotype Normalizer — canonical form for raw genotype strings.

Handles:
  1. Separator and whitespace stripping ("A/G", "a-g", " AG ")
  2. No-call tokens ("--", "00", "II", "DD", "NN")
  3. Allele ordering (sorted, except for directional variants)
  4. Provider sniffing for raw consumer exports

Never raises. Unusable input becomes "Unknown" with is_complete=False.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Optional

from .config import get_input_config
from .models import UNKNOWN, NormalizedGenotype, ProviderHint, VariantCall

logger = logging.getLogger(__name__)


_SEPARATORS_RE = re.compile(r"[/\-\s|]")
_BASES = frozenset("ACGT")


def _strip(raw: str) -> str:
    return _SEPARATORS_RE.sub("", raw.strip().upper())


def normalize(
    variant_id: str,
    raw_genotype: Optional[str],
    provider_hint: ProviderHint = ProviderHint.UNKNOWN,
) -> NormalizedGenotype:
    """
    Canonicalize a raw genotype for one variant.

    Two-base ACGT calls are sorted so that "GA" and "AG" compare equal,
    unless the variant is configured as directional.
    """
    settings = get_input_config()

    if raw_genotype is None or raw_genotype.strip().upper() in settings.no_call_tokens:
        return NormalizedGenotype(
            variant_id=variant_id, canonical_pair=UNKNOWN, is_complete=False, raw_input=raw_genotype
        )

    if raw_genotype.strip().lower() == UNKNOWN.lower():
        return NormalizedGenotype(
            variant_id=variant_id, canonical_pair=UNKNOWN, is_complete=False, raw_input=raw_genotype
        )

    payload = _strip(raw_genotype)

    if not payload or payload in settings.no_call_tokens:
        return NormalizedGenotype(
            variant_id=variant_id, canonical_pair=UNKNOWN, is_complete=False, raw_input=raw_genotype
        )

    if len(payload) != 2:
        # Haploid, indel or multi-base payloads: passed through, never resolved
        return NormalizedGenotype(
            variant_id=variant_id, canonical_pair=payload, is_complete=False, raw_input=raw_genotype
        )

    if not set(payload) <= _BASES:
        return NormalizedGenotype(
            variant_id=variant_id, canonical_pair=UNKNOWN, is_complete=False, raw_input=raw_genotype
        )

    if variant_id not in settings.directional_variants:
        payload = "".join(sorted(payload))

    return NormalizedGenotype(
        variant_id=variant_id, canonical_pair=payload, is_complete=True, raw_input=raw_genotype
    )


def normalize_calls(
    calls: Iterable[VariantCall],
    provider_hint: ProviderHint = ProviderHint.UNKNOWN,
) -> Dict[str, NormalizedGenotype]:
    """
    Normalize a collection of calls, keyed by variant id.

    When a variant id repeats, the first call wins.
    """
    normalized: Dict[str, NormalizedGenotype] = {}
    for call in calls:
        if call.variant_id in normalized:
            logger.debug("Ignoring duplicate call for %s", call.variant_id)
            continue
        normalized[call.variant_id] = normalize(call.variant_id, call.genotype, provider_hint)
    return normalized


# ---------------------------------------------------------------------------
# Provider detection
# ---------------------------------------------------------------------------

def detect_provider(raw_text: str) -> ProviderHint:
    """Sniff the provider from the comment header of a raw export."""
    head = raw_text[:4096].lower()
    if "23andme" in head:
        return ProviderHint.TWENTYTHREE_AND_ME
    if "ancestrydna" in head or "ancestry.com" in head:
        return ProviderHint.ANCESTRYDNA
    return ProviderHint.UNKNOWN


def coerce_provider(value: Optional[str]) -> ProviderHint:
    """Map a free-form provider string onto a ProviderHint, defaulting to unknown."""
    if value is None:
        return ProviderHint.UNKNOWN
    try:
        return ProviderHint(value.strip().lower())
    except ValueError:
        logger.debug("Unrecognised provider hint %r, treating as unknown", value)
        return ProviderHint.UNKNOWN

