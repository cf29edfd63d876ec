"""
urlkey — Canonical URL identifiers for crawl deduplication.

Re-exports every public symbol so callers can use
``from urlkey import normalize_url`` without knowing the module layout.
"""

from urlkey.errors import (
    NormalizationError,
    EmptyInputError,
    DecodeError,
    ParseError,
)

from urlkey.models import ParsedUrl, NormalizationResult, RENDER_FIELDS

from urlkey.hashing import HASH_ALGORITHM, compute_hash

from urlkey.prepare import prepare, parse_url, query_unescape

from urlkey.rules import (
    DIRECTORY_INDEX_RE,
    DUPLICATE_SLASHES_RE,
    IDENTIFYING_QUERY_RE,
    RULES,
    remove_default_port,
    remove_dot_segments,
    remove_directory_index,
    remove_protocol,
    remove_duplicate_slashes,
    remove_trailing_slash,
    handle_query_params,
    normalize,
)

from urlkey.identifier import build_url_identifier, derive

from urlkey.normalize import normalize_url

from urlkey.dedupe import (
    RECORD_COLUMNS,
    CONSOLIDATED_COLUMNS,
    normalize_records,
    consolidate,
    dedupe_urls,
)
