# file: argon2id_hash/__init__.py
"""
argon2id_hash: Argon2id password hashing

Hashes passwords into self-describing, salted, versioned strings and
verifies candidates against them in constant time.

Public API:
    - hash_password(password, policy=DEFAULT_POLICY) -> str
    - verify_password(password, encoded, policy=DEFAULT_POLICY) -> bool
    - encode_hash(password, params) -> str
    - decode_hash(encoded) -> (Parameters, salt, key)
    - check_hash(password, encoded) -> (bool, Parameters)
    - compare_password_and_hash(password, encoded) -> bool
"""

from .params import Parameters, DEFAULT_PARAMS, LAMBDA_PARAMS, PRESETS
from .codec import encode_hash, decode_hash
from .verifier import check_hash, compare_password_and_hash, needs_rehash
from .policy import (
    PasswordPolicy,
    PasswordHasher,
    DEFAULT_POLICY,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    check_password_requirements,
    hash_password,
    verify_password,
)
from .config import load_config, load_policy, policy_from_config
from .hash_errors import (
    HashError,
    MalformedHashError,
    UnsupportedVariantError,
    VersionMismatchError,
    ParameterParseError,
    HashEncodingError,
    EntropySourceError,
    DerivationError,
    InvalidParametersError,
    ConfigurationError,
    PasswordPolicyError,
    PasswordTooShortError,
    PasswordTooLongError,
)

__version__ = "1.0.0"

__all__ = [
    "Parameters",
    "DEFAULT_PARAMS",
    "LAMBDA_PARAMS",
    "PRESETS",
    "encode_hash",
    "decode_hash",
    "check_hash",
    "compare_password_and_hash",
    "needs_rehash",
    "PasswordPolicy",
    "PasswordHasher",
    "DEFAULT_POLICY",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "check_password_requirements",
    "hash_password",
    "verify_password",
    "load_config",
    "load_policy",
    "policy_from_config",
    "HashError",
    "MalformedHashError",
    "UnsupportedVariantError",
    "VersionMismatchError",
    "ParameterParseError",
    "HashEncodingError",
    "EntropySourceError",
    "DerivationError",
    "InvalidParametersError",
    "ConfigurationError",
    "PasswordPolicyError",
    "PasswordTooShortError",
    "PasswordTooLongError",
]
