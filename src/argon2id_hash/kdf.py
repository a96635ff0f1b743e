# file: argon2id_hash/kdf.py
"""
Key derivation using Argon2id.
"""

from typing import Union

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .hash_errors import DerivationError, InvalidParametersError
from .params import Parameters


ALGORITHM = 'argon2id'
VERSION = ARGON2_VERSION  # 19 (0x13)


def encode_password(password: Union[str, bytes]) -> bytes:
    """
    Return password as bytes (UTF-8 for str).

    Raises:
        InvalidParametersError: If a str password is not encodable as UTF-8
    """
    if not isinstance(password, str):
        return password
    try:
        return password.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidParametersError(f"Password is not valid UTF-8 text: {e.reason}") from e


def derive_key(password: Union[str, bytes], salt: bytes, params: Parameters) -> bytes:
    """
    Derive a key of params.key_length bytes from password and salt.

    Args:
        password: Secret (str is encoded as UTF-8)
        salt: Random salt
        params: Argon2id cost parameters

    Returns:
        Derived key bytes

    Raises:
        DerivationError: If the Argon2 primitive fails
        InvalidParametersError: If a str password is not encodable as UTF-8
    """
    secret = encode_password(password)

    try:
        return hash_secret_raw(
            secret=secret,
            salt=salt,
            time_cost=params.iterations,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=Type.ID,  # Argon2id
            version=VERSION,
        )
    except HashingError as e:
        raise DerivationError(f"Argon2id derivation failed: {e}") from e
