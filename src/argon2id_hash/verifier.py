# file: argon2id_hash/verifier.py
"""
Constant-time verification of a password against an encoded hash.
"""

import logging
import struct
from typing import Tuple, Union

from cryptography.hazmat.primitives import constant_time

from .codec import decode_hash
from .kdf import derive_key
from .params import Parameters


logger = logging.getLogger(__name__)


def check_hash(password: Union[str, bytes], encoded: str) -> Tuple[bool, Parameters]:
    """
    Verify a password and return the parameters the hash was created with.

    The parameters let callers upgrade stored hashes over time (see
    needs_rehash). A non-matching password is a normal False result.

    Args:
        password: Candidate plain-text password
        encoded: Stored encoded hash

    Returns:
        Tuple of (match, params)

    Raises:
        HashError: If the hash cannot be decoded (no derivation is attempted)
            or the derivation primitive fails
    """
    params, salt, key = decode_hash(encoded)

    other_key = derive_key(password, salt, params)

    # Lengths first, so the byte comparison below always sees equal lengths
    if not constant_time.bytes_eq(
        struct.pack('>I', len(key)), struct.pack('>I', len(other_key))
    ):
        logger.debug("Derived key length differs from stored key length")
        return False, params

    match = constant_time.bytes_eq(key, other_key)
    if not match:
        logger.debug("Password does not match stored hash")
    return match, params


def compare_password_and_hash(password: Union[str, bytes], encoded: str) -> bool:
    """
    Constant-time comparison of a plain-text password and an encoded hash.

    Returns:
        True if they match, otherwise False
    """
    match, _ = check_hash(password, encoded)
    return match


def needs_rehash(encoded: str, params: Parameters) -> bool:
    """Return True if encoded was not created with exactly params."""
    current, _, _ = decode_hash(encoded)
    return current != params
