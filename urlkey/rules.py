"""
urlkey.rules — Ordered URL-rewriting rules.

Each rule rewrites fields of a ``ParsedUrl`` in place and never fails.
``RULES`` fixes the order; several rules depend on it:

  * the port must be gone before dot-segment resolution checks the host
  * directory indexes are stripped before duplicate slashes collapse
  * trailing slashes are removed only after both of the above
"""

import re

from urlkey.models import ParsedUrl

DIRECTORY_INDEX_RE = re.compile(r"(^|/)(?:default|index)\.\w{1,4}\Z", re.ASCII)
DUPLICATE_SLASHES_RE = re.compile(r"/{2,}")
# ``=*`` admits zero "=", so keys such as "page" or "idx" match as well
IDENTIFYING_QUERY_RE = re.compile(r"^(id|libid|p)=*", re.IGNORECASE)


def remove_default_port(parsed: ParsedUrl) -> None:
    """Drop any ``:port`` suffix from the host, default or not."""
    if ":" in parsed.host:
        parsed.host = parsed.host.split(":", 1)[0]


def remove_dot_segments(parsed: ParsedUrl) -> None:
    """
    Resolve ``.`` and ``..`` path segments.

    This is looser than RFC 3986: a ``..`` with nothing to pop is silently
    dropped, and empty segments (``//``) are kept for the duplicate-slash
    rule to clean up.  Stored identifiers depend on this exact behavior.
    """
    if not parsed.path:
        return

    dot_free: list[str] = []
    last_is_dot = False
    for segment in parsed.path.split("/"):
        if segment == "..":
            if dot_free:
                dot_free.pop()
        elif segment != ".":
            dot_free.append(segment)
        last_is_dot = segment in (".", "..")

    path = "/".join(dot_free)
    if parsed.host and not parsed.host.endswith("/") and not path.startswith("/"):
        path = "/" + path
    if last_is_dot and not path.endswith("/"):
        path += "/"
    parsed.path = path


def remove_directory_index(parsed: ParsedUrl) -> None:
    """``/a/index.html`` -> ``/a/``; ``default.asp`` -> ``""``."""
    if parsed.path:
        parsed.path = DIRECTORY_INDEX_RE.sub(r"\1", parsed.path)


def remove_protocol(parsed: ParsedUrl) -> None:
    parsed.scheme = ""


def remove_duplicate_slashes(parsed: ParsedUrl) -> None:
    if parsed.path:
        parsed.path = DUPLICATE_SLASHES_RE.sub("/", parsed.path)


def remove_trailing_slash(parsed: ParsedUrl) -> None:
    if parsed.path:
        if parsed.path.endswith("/"):
            parsed.path = parsed.path[:-1]
    elif parsed.host.endswith("/"):
        parsed.host = parsed.host[:-1]


def handle_query_params(parsed: ParsedUrl) -> None:
    """
    Keep only the first parameter of an identifying query (``id=``,
    ``libid=``, ``p=``); drop any other query entirely.
    """
    if IDENTIFYING_QUERY_RE.match(parsed.raw_query):
        parsed.raw_query = parsed.raw_query.split("&", 1)[0]
    else:
        parsed.raw_query = ""


RULES = (
    remove_default_port,
    remove_dot_segments,
    remove_directory_index,
    remove_protocol,
    remove_duplicate_slashes,
    remove_trailing_slash,
    handle_query_params,
)


def normalize(parsed: ParsedUrl) -> ParsedUrl:
    """Apply every rule, in order, to ``parsed``.  Returns the same object."""
    for rule in RULES:
        rule(parsed)
    return parsed
