"""
tests/conftest.py — Shared fixtures and sample URLs for the test suite.
"""

import pytest

SOURCE = "https://example.com/sitemap.xml"

# The worked example: encoded scheme, port, blank and dot segments,
# duplicate slashes, directory index, noise query and a fragment
ENCODED_URL = (
    "Http%3A%2F%2FSomeUrl.com%3A8080%2Fa%2F+%2F..%2F.%2Fc%2F%2F%2Findex.html"
    "%3Fc%3D3%26a%3D1%26b%3D9%26c%3D0%23target"
)



@pytest.fixture
def url_records():
    """Three spellings of the same page plus one page with an identifying query."""
    return [
        {"loc": "https://Example.com/docs/index.html", "lastmod": "2025-12-01", "source": SOURCE},
        {"loc": "http://example.com:8080/docs/", "lastmod": "2025-11-01", "source": SOURCE},
        {"loc": "https://example.com/docs?utm_source=newsletter", "lastmod": None, "source": SOURCE},
        {"loc": "https://example.com/other?id=7&ref=a", "lastmod": "2025-10-01", "source": SOURCE},
    ]
