"""
urlkey.identifier — Derive the URL identifier and canonical URL.
"""

from urlkey.hashing import compute_hash
from urlkey.models import NormalizationResult, ParsedUrl


def build_url_identifier(parsed: ParsedUrl) -> str:
    identifier = parsed.host + parsed.path
    if parsed.raw_query:
        identifier += "?" + parsed.raw_query
    return identifier


def derive(result: NormalizationResult, parsed: ParsedUrl) -> NormalizationResult:
    """
    Fill the identifier and canonical fields of ``result`` from a fully
    normalized URL.

    An empty identifier is left unhashed.  The canonical URL never carries
    the query; without an original protocol it falls back to the
    identifier, query included.
    """
    identifier = build_url_identifier(parsed)
    if identifier:
        result.url_identifier = identifier
        result.url_identifier_hash = compute_hash(identifier)

    if result.protocol:
        result.canonical_url = f"{result.protocol}://{parsed.host}{parsed.path}"
    else:
        result.canonical_url = result.url_identifier
    result.canonical_url_hash = compute_hash(result.canonical_url)

    return result
