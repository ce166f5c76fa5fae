from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .genotype_normalizer import detect_provider
from .models import ProviderHint, VariantCall

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Raw consumer-genotype exports
#
#   23andMe       rsid  chromosome  position  genotype
#   AncestryDNA   rsid  chromosome  position  allele1  allele2
#
# Comment lines start with '#'. AncestryDNA adds a column header row.
# ----------------------------------------------------------------------

_HEADER_FIRST_COLUMNS = {"rsid", "# rsid", "snp", "name"}


class RawDataParseError(ValueError):
    pass


@dataclass
class RawDataParseResult:
    provider: ProviderHint
    calls: List[VariantCall]
    comment_lines: int = 0
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def variant_count(self) -> int:
        return len(self.calls)


def _normalize_to_lines(content: Union[str, bytes, Path, Iterable[str]]) -> Iterator[str]:
    if isinstance(content, Path):
        with content.open("r", encoding="utf-8", errors="replace", newline="") as f:
            yield from f
        return
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    if isinstance(content, str):
        yield from content.splitlines()
        return
    yield from content


def parse_raw_data(
    content: Union[str, bytes, Path, Iterable[str]],
    provider: Optional[ProviderHint] = None,
) -> RawDataParseResult:
    """
    Parse a 23andMe or AncestryDNA raw data export into variant calls.

    Only rs-identified rows are kept. Rows with too few columns are
    skipped and their line numbers recorded; a file with no usable rows
    raises RawDataParseError.

    Args:
        content:  File bytes, string, Path or line iterable.
        provider: Provider hint; sniffed from the comment header when omitted.
    """
    comments: List[str] = []
    calls: List[VariantCall] = []
    skipped: List[int] = []

    for lineno, raw in enumerate(_normalize_to_lines(content), start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if line.startswith("#"):
            comments.append(line)
            continue

        columns = line.split("\t") if "\t" in line else line.split()
        if columns[0].strip().lower() in _HEADER_FIRST_COLUMNS:
            continue

        call = _row_to_call(columns)
        if call is None:
            skipped.append(lineno)
            continue
        calls.append(call)

    if provider is None or provider == ProviderHint.UNKNOWN:
        provider = detect_provider("\n".join(comments))

    if not calls:
        raise RawDataParseError("No genotype rows found in raw data file")

    if skipped:
        logger.debug("Skipped %d malformed raw data rows", len(skipped))
    logger.info("Parsed %d genotype calls (%s)", len(calls), provider.value)

    return RawDataParseResult(
        provider=provider,
        calls=calls,
        comment_lines=len(comments),
        skipped_lines=skipped,
    )


def _row_to_call(columns: List[str]) -> Optional[VariantCall]:
    columns = [c.strip() for c in columns]
    if len(columns) < 4:
        return None

    rsid = columns[0].lower()
    if not rsid.startswith("rs"):
        return None

    if len(columns) >= 5:
        # AncestryDNA: one column per allele, '0' for a no-call
        allele1, allele2 = columns[3], columns[4]
        if allele1 == "0" or allele2 == "0":
            genotype = "--"
        else:
            genotype = f"{allele1}{allele2}"
    else:
        genotype = columns[3]

    return VariantCall(variant_id=rsid, genotype=genotype)
