"""
urlkey.errors — Failure kinds raised while preparing a URL.

Nothing past preparation can fail, so these are the only errors a caller
of ``normalize_url`` needs to handle.  All of them are final: the input
simply cannot be normalized.
"""


class NormalizationError(Exception):
    """Base class; ``kind`` is the stable tag reported to callers."""

    kind = "NormalizationError"

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"{self.kind}: {url!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class EmptyInputError(NormalizationError):
    kind = "EmptyInput"

    def __init__(self, url: str = "", reason: str = "input url is empty"):
        super().__init__(url, reason)


class DecodeError(NormalizationError):
    kind = "DecodeError"


class ParseError(NormalizationError):
    kind = "ParseError"
