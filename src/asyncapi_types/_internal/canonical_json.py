"""Centralized canonical JSON serialization.

One function for byte-stable JSON used for document digests, round-trip
comparison and CLI reports. Two documents with the same semantic content
(same keys and values, any member order) serialize to the same bytes.
"""

import hashlib
import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":")
    - List order is significant and kept as given
    - No trailing whitespace

    Args:
        obj: JSON-compatible Python object

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False  # UTF-8 encoding
    )


def compute_document_hash(obj: Any) -> str:
    """SHA256 of the canonical form, prefixed with "sha256:"."""
    digest = hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"
