"""
urlkey.models — Working URL structure and the normalization result record.
"""

from dataclasses import dataclass, fields

# Field order of the diagnostic rendering
RENDER_FIELDS = (
    "raw_url",
    "protocol",
    "canonical_url",
    "canonical_url_hash",
    "url_identifier",
    "url_identifier_hash",
    "raw_query_params",
)


@dataclass
class ParsedUrl:
    """
    Decomposed URL rewritten in place by the normalization rules.
    There is no fragment field: it is dropped when the URL is prepared.
    """

    scheme: str = ""
    host: str = ""
    path: str = ""
    raw_query: str = ""


@dataclass
class NormalizationResult:
    raw_url: str = ""
    protocol: str = ""
    canonical_url: str = ""
    canonical_url_hash: str = ""
    url_identifier: str = ""
    url_identifier_hash: str = ""
    raw_query_params: str = ""

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        return "\n".join(f"{name}: {getattr(self, name)}" for name in RENDER_FIELDS)
