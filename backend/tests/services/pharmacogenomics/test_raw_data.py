"""
Raw consumer export parsing (23andMe / AncestryDNA).
"""

import pytest
from pgxrules.services.pharmacogenomics.models import ProviderHint
from pgxrules.services.pharmacogenomics.raw_data import RawDataParseError, parse_raw_data

TWENTYTHREE_AND_ME = (
    "# This data file generated by 23andMe at: Mon Jan 01 00:00:00 2024\n"
    "# rsid\tchromosome\tposition\tgenotype\n"
    "rs4149056\t12\t21331549\tCT\n"
    "rs9923231\t16\t31107689\tAA\n"
    "rs6025\t1\t169519049\t--\n"
    "i3000001\t1\t1000\tAA\n"
)

ANCESTRY = (
    "#AncestryDNA raw data download\n"
    "rsid\tchromosome\tposition\tallele1\tallele2\n"
    "rs776746\t7\t99270539\tA\tG\n"
    "rs4148323\t2\t234669144\t0\t0\n"
)


class TestParseRawData:

    def test_23andme_export(self):
        result = parse_raw_data(TWENTYTHREE_AND_ME)

        assert result.provider == ProviderHint.TWENTYTHREE_AND_ME
        assert [(c.variant_id, c.genotype) for c in result.calls] == [
            ("rs4149056", "CT"),
            ("rs9923231", "AA"),
            ("rs6025", "--"),
        ]
        assert result.comment_lines == 2
        assert result.variant_count == 3

    def test_ancestry_export_joins_allele_columns(self):
        result = parse_raw_data(ANCESTRY.encode("utf-8"))

        assert result.provider == ProviderHint.ANCESTRYDNA
        assert result.calls[0].genotype == "AG"
        assert result.calls[1].genotype == "--"

    def test_explicit_provider_wins(self):
        result = parse_raw_data(TWENTYTHREE_AND_ME, ProviderHint.ANCESTRYDNA)
        assert result.provider == ProviderHint.ANCESTRYDNA

    def test_no_header_means_unknown_provider(self):
        result = parse_raw_data("rs4149056 12 21331549 TT\n")
        assert result.provider == ProviderHint.UNKNOWN
        assert result.calls[0].genotype == "TT"

    def test_short_rows_are_skipped(self):
        result = parse_raw_data("rs4149056\t12\nrs6025\t1\t169519049\tGG\n")
        assert result.skipped_lines == [1]
        assert [c.variant_id for c in result.calls] == ["rs6025"]

    def test_rsid_is_lowercased(self):
        result = parse_raw_data("RS776746\t7\t99270539\tGG\n")
        assert result.calls[0].variant_id == "rs776746"

    def test_reads_path(self, tmp_path):
        path = tmp_path / "genome.txt"
        path.write_text(TWENTYTHREE_AND_ME, encoding="utf-8")
        assert parse_raw_data(path).variant_count == 3

    @pytest.mark.parametrize("content", ["", "# only a comment\n", "i3000001\t1\t1000\tAA\n"])
    def test_no_usable_rows_raises(self, content):
        with pytest.raises(RawDataParseError):
            parse_raw_data(content)
