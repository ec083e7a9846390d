"""Context hash — cache/identity key for a compiled prompt context.

Not a security primitive: it only has to be stable for identical input and
unlikely to collide for different input.
"""

from __future__ import annotations

import hashlib

HASH_LENGTH = 32
CONTEXT_DELIMITER = "||"


def generate_context_hash(project_prompt: str, copy_prompt: str) -> str:
    """SHA-256 of ``project || copy``, truncated to HASH_LENGTH hex chars."""
    payload = f"{project_prompt or ''}{CONTEXT_DELIMITER}{copy_prompt or ''}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:HASH_LENGTH]
