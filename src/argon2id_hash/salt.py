# file: argon2id_hash/salt.py
"""
Random salt generation from the operating system CSPRNG.
"""

import secrets

from .hash_errors import EntropySourceError


def generate_random_bytes(n: int) -> bytes:
    """
    Return n cryptographically-secure random bytes.

    Args:
        n: Number of bytes (positive)

    Returns:
        Fresh random bytes; never reused across calls

    Raises:
        ValueError: If n is not a positive integer
        EntropySourceError: If the OS entropy source fails
    """
    if not isinstance(n, int) or n < 1:
        raise ValueError(f"Byte count must be a positive integer, got {n!r}")

    try:
        return secrets.token_bytes(n)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"Unable to read {n} random bytes: {e}") from e
