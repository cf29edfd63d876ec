"""
urlkey.hashing — Fingerprints for identifiers and canonical URLs.
"""

import hashlib

# MD5 keeps identifier hashes compatible with previously stored keys
HASH_ALGORITHM = "md5"


def compute_hash(content: str, algorithm: str = HASH_ALGORITHM) -> str:
    """
    Compute the hex digest of content (MD5 unless told otherwise).
    Undecodable bytes carried as surrogates are hashed as the original bytes.
    """
    return hashlib.new(algorithm, content.encode("utf-8", errors="surrogateescape")).hexdigest()
