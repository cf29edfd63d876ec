"""
urlkey.prepare — Turn caller input into a working ``ParsedUrl``.

Input is lowercased as a whole (path and query included), percent-decoded
the way a query string is decoded, then split into its components.  The
fragment is dropped here and nothing downstream ever sees it.

Escapes that are not valid UTF-8 are kept as surrogate code points
(``surrogateescape``), so the original bytes survive through to hashing.
"""

import re
from urllib.parse import SplitResult, unquote, unquote_plus, urlsplit

from urlkey.errors import DecodeError, EmptyInputError, ParseError
from urlkey.models import NormalizationResult, ParsedUrl

_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_HOST_CHARS = re.compile(r"[ \\^`{|}]")
_PORT_DIGITS = re.compile(r"[0-9]*")


def query_unescape(value: str) -> str:
    """
    Decode ``%XX`` escapes and ``+`` (as a space).
    Raises ``DecodeError`` on a ``%`` that does not start a valid escape.
    """
    bad = _BAD_ESCAPE.search(value)
    if bad:
        escape = value[bad.start():bad.start() + 3]
        raise DecodeError(value, f"invalid URL escape {escape!r}")
    return unquote_plus(value, errors="surrogateescape")


def _unescape_component(value: str, url: str) -> str:
    if "%" not in value:
        return value
    bad = _BAD_ESCAPE.search(value)
    if bad:
        escape = value[bad.start():bad.start() + 3]
        raise ParseError(url, f"invalid URL escape {escape!r}")
    return unquote(value, errors="surrogateescape")


def _split_host(netloc: str, url: str) -> str:
    """Strip user info and validate the optional ``:port`` suffix."""
    host = netloc.rpartition("@")[2]

    colon = host.find(":", host.rfind("]") + 1)
    if colon != -1 and not _PORT_DIGITS.fullmatch(host, colon + 1):
        raise ParseError(url, f"invalid port {host[colon:]!r}")

    if _INVALID_HOST_CHARS.search(host):
        raise ParseError(url, "invalid character in host name")

    return _unescape_component(host, url)


def _split(url: str) -> SplitResult:
    # urlsplit drops leading spaces; such input has no scheme and no authority
    if url[:1] == " ":
        path, _, query = url.partition("#")[0].partition("?")
        return SplitResult("", "", path, query, "")
    try:
        return urlsplit(url)
    except ValueError as e:
        raise ParseError(url, str(e)) from e


def parse_url(url: str) -> ParsedUrl:
    """Split a decoded URL into a ``ParsedUrl``, discarding the fragment."""
    if _CONTROL_CHARS.search(url):
        raise ParseError(url, "invalid control character in URL")
    if url.startswith(":"):
        raise ParseError(url, "missing protocol scheme")

    parts = _split(url)

    # Without a scheme, "host:port/page" or "bad_scheme:x" must not pass as a path
    if not parts.scheme and not parts.path.startswith("/"):
        if ":" in parts.path.partition("/")[0]:
            raise ParseError(url, "first path segment in URL cannot contain colon")

    host = _split_host(parts.netloc, url)
    path = _unescape_component(parts.path, url)

    # scheme:rest without an authority, e.g. mailto:someone@example.com,
    # keeps no host or path
    if parts.scheme and not parts.netloc and path and not path.startswith("/"):
        return ParsedUrl(scheme=parts.scheme, raw_query=parts.query)

    return ParsedUrl(
        scheme=parts.scheme,
        host=host,
        path=path,
        raw_query=parts.query,
    )


def prepare(raw_input: str) -> tuple[NormalizationResult, ParsedUrl]:
    """
    Build the empty result record and the working URL for one input.

    ``protocol`` and ``raw_query_params`` are captured here, before any
    rule rewrites the working copy.
    """
    if not raw_input:
        raise EmptyInputError()

    decoded = query_unescape(raw_input.lower())
    parsed = parse_url(decoded)

    result = NormalizationResult(
        raw_url=decoded,
        protocol=parsed.scheme,
        raw_query_params=parsed.raw_query,
    )
    return result, parsed
