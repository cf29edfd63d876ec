"""
Unit tests — Bulk normalization and consolidation of URL records.
"""

import pandas as pd

from urlkey.dedupe import (
    CONSOLIDATED_COLUMNS,
    RECORD_COLUMNS,
    consolidate,
    dedupe_urls,
    normalize_records,
)
from urlkey.hashing import compute_hash
from tests.conftest import SOURCE


class TestNormalizeRecords:
    """urlkey.dedupe.normalize_records — one row per input record."""

    def test_columns_and_row_count(self, url_records):
        frame = normalize_records(url_records)
        assert list(frame.columns) == RECORD_COLUMNS
        assert len(frame) == 4

    def test_variants_share_identifier(self, url_records):
        frame = normalize_records(url_records)
        assert list(frame["url_identifier"]) == [
            "example.com/docs",
            "example.com/docs",
            "example.com/docs",
            "example.com/other?id=7",
        ]
        assert frame["error"].isna().all()

    def test_failures_tagged_not_raised(self):
        frame = normalize_records([
            {"loc": ""},
            {"loc": "http://example.com/%zz"},
            {"loc": "http://example.com:abc/"},
            {"loc": "http://example.com/ok"},
        ])
        assert list(frame["error"][:3]) == ["EmptyInput", "DecodeError", "ParseError"]
        assert pd.isna(frame["error"][3])
        assert (frame["url_identifier"][:3] == "").all()

    def test_empty_input_gives_empty_frame(self):
        frame = normalize_records([])
        assert frame.empty
        assert list(frame.columns) == RECORD_COLUMNS


class TestConsolidate:
    """urlkey.dedupe.consolidate — group by identifier hash."""

    def test_variants_collapse_to_one_row(self, url_records):
        out = consolidate(normalize_records(url_records))

        assert list(out.columns) == CONSOLIDATED_COLUMNS
        assert len(out) == 2

        docs = out.iloc[0]
        assert docs["url_identifier"] == "example.com/docs"
        assert docs["url_identifier_hash"] == compute_hash("example.com/docs")
        assert docs["canonical_url"] == "https://example.com/docs"
        assert docs["lastmod"] == "2025-12-01"
        assert docs["sources"] == SOURCE
        assert docs["duplicates"] == 3

        other = out.iloc[1]
        assert other["url_identifier"] == "example.com/other?id=7"
        assert other["canonical_url"] == "https://example.com/other"
        assert other["duplicates"] == 1

    def test_sources_are_distinct_and_sorted(self):
        records = [
            {"loc": "https://example.com/a/", "source": "https://example.com/s2.xml"},
            {"loc": "https://example.com/a", "source": "https://example.com/s1.xml"},
            {"loc": "https://example.com/a/index.html", "source": "https://example.com/s2.xml"},
        ]
        out = consolidate(normalize_records(records))
        assert len(out) == 1
        assert out.iloc[0]["sources"] == "https://example.com/s1.xml,https://example.com/s2.xml"
        assert pd.isna(out.iloc[0]["lastmod"])

    def test_failed_and_empty_identifiers_dropped(self):
        frame = normalize_records([
            {"loc": ""},
            {"loc": "mailto:someone@example.com"},
            {"loc": "https://example.com/kept"},
        ])
        out = consolidate(frame)
        assert list(out["url_identifier"]) == ["example.com/kept"]

    def test_nothing_usable_gives_empty_frame(self):
        out = consolidate(normalize_records([{"loc": ""}]))
        assert out.empty
        assert list(out.columns) == CONSOLIDATED_COLUMNS


class TestDedupeUrls:

    def test_plain_urls(self):
        out = dedupe_urls([
            "HTTP://Example.com/",
            "http://example.com:80",
            "http://example.com/index.html",
            "https://example.com/news?p=3&utm_medium=rss",
        ])
        assert list(out["url_identifier"]) == ["example.com", "example.com/news?p=3"]
        assert list(out["duplicates"]) == [3, 1]
        assert out.iloc[0]["canonical_url"] == "http://example.com"

    def test_undecodable_bytes_not_merged(self):
        out = dedupe_urls(["http://x.com/%ff", "http://x.com/%fe"])
        assert len(out) == 2
        assert list(out["duplicates"]) == [1, 1]
