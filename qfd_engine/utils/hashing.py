"""
Fingerprinting for project snapshots.

Two snapshots with identical JSON serialisation produce the same fingerprint,
so callers can skip recomputing an analysis they already hold.
"""

from __future__ import annotations

import hashlib


def sha256_hash(content: str | bytes, length: int | None = None) -> str:
    """SHA-256 hex digest of *content*, optionally truncated to *length* chars."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    digest = hashlib.sha256(content).hexdigest()
    return digest[:length] if length else digest
