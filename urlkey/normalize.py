"""
urlkey.normalize — Canonicalize a URL into a deduplication key.
"""

import logging

from urlkey.errors import NormalizationError
from urlkey.identifier import derive
from urlkey.models import NormalizationResult
from urlkey.prepare import prepare
from urlkey.rules import normalize

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> NormalizationResult:
    """
    Normalize a URL for consistent deduplication:
      - Lowercase and percent-decode the whole input
      - Drop the fragment, any port and the protocol
      - Resolve dot segments, strip directory index files
      - Collapse duplicate slashes, remove the trailing slash
      - Keep the first query parameter only when it identifies the page

    Raises a ``NormalizationError`` subclass when the input is empty or
    cannot be decoded or parsed.
    """
    try:
        result, parsed = prepare(url)
    except NormalizationError as e:
        logger.debug("could not prepare %r: %s", url, e)
        raise

    normalize(parsed)
    derive(result, parsed)

    logger.debug("normalized %r -> %r", url, result.url_identifier)
    return result
