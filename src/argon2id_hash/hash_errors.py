# file: argon2id_hash/hash_errors.py
"""
Error types for password hashing and verification.

All exceptions inherit from HashError for unified handling. A password that
does not match a stored hash is NOT an error; it is reported as ``False``.
"""


class HashError(Exception):
    """Base exception for all hashing and verification errors."""
    pass


class MalformedHashError(HashError):
    """Raised when an encoded hash does not have the expected field layout."""
    pass


class UnsupportedVariantError(HashError):
    """Raised when an encoded hash was produced by a different Argon2 variant."""
    pass


class VersionMismatchError(HashError):
    """Raised when an encoded hash names a different Argon2 version."""

    def __init__(self, message: str, version: int = None, expected: int = None):
        super().__init__(message)
        self.version = version
        self.expected = expected


class ParameterParseError(HashError):
    """Raised when a numeric field of an encoded hash cannot be parsed."""
    pass


class HashEncodingError(HashError):
    """Raised when the salt or key field is not strict unpadded base64."""
    pass


class EntropySourceError(HashError):
    """Raised when the operating system cannot supply random bytes."""
    pass


class DerivationError(HashError):
    """Raised when the Argon2id primitive itself fails."""
    pass


class InvalidParametersError(HashError, ValueError):
    """Raised when Parameters or a PasswordPolicy is constructed with bad values."""
    pass


class ConfigurationError(HashError):
    """Raised when the YAML configuration is invalid."""
    pass


class PasswordPolicyError(HashError):
    """Base exception for password length policy violations."""

    def __init__(self, message: str, length: int = None, limit: int = None):
        super().__init__(message)
        self.length = length
        self.limit = limit


class PasswordTooShortError(PasswordPolicyError):
    """Raised when a password is shorter than the policy minimum."""
    pass


class PasswordTooLongError(PasswordPolicyError):
    """Raised when a password is longer than the policy maximum."""
    pass
