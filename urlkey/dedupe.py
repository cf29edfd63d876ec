"""
urlkey.dedupe — Normalize URL records in bulk and collapse duplicates.

Records are plain dicts with a ``loc`` and optionally ``lastmod`` and
``source`` (where the URL was seen).  Consolidation groups them by
identifier hash, the way a MERGE keyed on the normalized URL would.
"""

import logging
from typing import Iterable, Optional

import pandas as pd

from urlkey.errors import NormalizationError
from urlkey.models import NormalizationResult
from urlkey.normalize import normalize_url

logger = logging.getLogger(__name__)

RESULT_COLUMNS = list(NormalizationResult().to_dict())
RECORD_COLUMNS = ["loc", "lastmod", "source"] + RESULT_COLUMNS + ["error"]
CONSOLIDATED_COLUMNS = [
    "url_identifier_hash",
    "url_identifier",
    "canonical_url",
    "canonical_url_hash",
    "lastmod",
    "sources",
    "duplicates",
]


def normalize_records(records: Iterable[dict]) -> pd.DataFrame:
    """One row per record; failed inputs keep empty result fields and an ``error`` kind."""
    rows = []
    for record in records:
        loc = record.get("loc") or ""
        error = None
        try:
            result = normalize_url(loc)
        except NormalizationError as e:
            logger.warning("skipping %r: %s", loc, e)
            result = NormalizationResult()
            error = e.kind

        rows.append({
            "loc": loc,
            "lastmod": record.get("lastmod"),
            "source": record.get("source"),
            **result.to_dict(),
            "error": error,
        })

    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def _latest(values: pd.Series) -> Optional[str]:
    return max((v for v in values if isinstance(v, str) and v), default=None)


def _join_sources(values: pd.Series) -> str:
    return ",".join(sorted({v for v in values if isinstance(v, str) and v}))


def consolidate(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Collapse normalized rows sharing a ``url_identifier_hash``.

    Failed rows and rows with an empty identifier are dropped.  Each
    surviving group keeps its first identifier and canonical URL, the
    latest ``lastmod``, the distinct sorted sources and its row count.
    """
    usable = frame[frame["error"].isna() & (frame["url_identifier"] != "")]
    if usable.empty:
        return pd.DataFrame(columns=CONSOLIDATED_COLUMNS)

    grouped = usable.groupby("url_identifier_hash", sort=False).agg(
        url_identifier=("url_identifier", "first"),
        canonical_url=("canonical_url", "first"),
        canonical_url_hash=("canonical_url_hash", "first"),
        lastmod=("lastmod", _latest),
        sources=("source", _join_sources),
        duplicates=("loc", "count"),
    )
    consolidated = grouped.reset_index()[CONSOLIDATED_COLUMNS]

    dropped = len(frame) - len(usable)
    logger.info(
        "consolidated %d rows into %d identifiers (%d unusable)",
        len(frame), len(consolidated), dropped,
    )
    return consolidated


def dedupe_urls(urls: Iterable[str]) -> pd.DataFrame:
    """Consolidate plain URL strings."""
    return consolidate(normalize_records({"loc": url} for url in urls))
