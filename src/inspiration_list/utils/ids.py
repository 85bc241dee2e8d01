"""Record identifier generation."""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str = "inspiration") -> str:
    """Timestamp plus random base-36 suffix, e.g. inspiration_1718000000000_k3x9qa"""
    timestamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(6))
    return f"{prefix}_{timestamp}_{suffix}"
