# file: argon2id_hash/testing_utils.py
"""
Testing utilities for password hashing.

Provides random password generation and hash tampering for tests.
Used only in test/evaluation contexts.
"""

import random
import string
from typing import Optional

from .codec import SEPARATOR


LETTERS = string.ascii_letters
B64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + '+/'


def generate_random_string(n: int, seed: Optional[int] = None) -> str:
    """
    Generate a string of n random ASCII letters.

    WARNING: Uses the non-cryptographic ``random`` module and should ONLY
    be used to build test passwords, never salts or secrets.

    Args:
        n: Length of the string
        seed: Random seed for reproducibility (optional)

    Returns:
        Random string of length n

    Example:
        >>> password = generate_random_string(MAX_PASSWORD_LENGTH)
        >>> len(password)
        128
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")

    rng = random.Random(seed)
    return ''.join(rng.choice(LETTERS) for _ in range(n))


def tamper_last_char(encoded: str) -> str:
    """
    Replace the final character of an encoded hash (the key field) with a
    different base64 character.

    The result either fails strict decoding or decodes to a different key.
    """
    if not encoded or encoded.endswith(SEPARATOR):
        raise ValueError("Encoded hash has no key field to tamper with")

    last = encoded[-1]
    replacement = 'A' if last != 'A' else 'B'
    return encoded[:-1] + replacement
