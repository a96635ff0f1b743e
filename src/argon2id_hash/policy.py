# file: argon2id_hash/policy.py
"""
Password length policy and the high-level hash / verify entry points.
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .codec import encode_hash
from .hash_errors import InvalidParametersError, PasswordTooLongError, PasswordTooShortError
from .kdf import encode_password
from .params import LAMBDA_PARAMS, Parameters
from .verifier import check_hash, compare_password_and_hash, needs_rehash


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 12
MAX_PASSWORD_LENGTH = 128


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Length requirements plus the parameter preset used for new hashes.

    Lengths are inclusive and counted in bytes (UTF-8 for str input).
    """
    min_length: int = MIN_PASSWORD_LENGTH
    max_length: int = MAX_PASSWORD_LENGTH
    params: Parameters = LAMBDA_PARAMS

    def __post_init__(self):
        for name in ('min_length', 'max_length'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidParametersError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        if self.min_length < 1:
            raise InvalidParametersError(f"min_length must be >= 1, got {self.min_length!r}")
        if self.max_length < self.min_length:
            raise InvalidParametersError(
                f"max_length={self.max_length!r} must be >= min_length={self.min_length}"
            )
        if not isinstance(self.params, Parameters):
            raise InvalidParametersError(
                f"params must be Parameters, got {type(self.params).__name__}"
            )


DEFAULT_POLICY = PasswordPolicy()


def password_length(password: Union[str, bytes]) -> int:
    """Length of password in bytes."""
    return len(encode_password(password))


def check_password_requirements(
    password: Union[str, bytes],
    policy: PasswordPolicy = DEFAULT_POLICY
) -> None:
    """
    Enforce the policy's length bounds.

    Raises:
        PasswordTooShortError: If the password is below policy.min_length
        PasswordTooLongError: If the password is above policy.max_length
    """
    length = password_length(password)

    if length < policy.min_length:
        logger.info(f"Rejected password shorter than {policy.min_length} bytes")
        raise PasswordTooShortError(
            f"Password is too short: minimum length is {policy.min_length}",
            length=length,
            limit=policy.min_length,
        )

    if length > policy.max_length:
        logger.info(f"Rejected password longer than {policy.max_length} bytes")
        raise PasswordTooLongError(
            f"Password is too long: maximum length is {policy.max_length}",
            length=length,
            limit=policy.max_length,
        )


def hash_password(password: Union[str, bytes], policy: PasswordPolicy = DEFAULT_POLICY) -> str:
    """
    Hash a password with the policy's preset parameters.

    The returned string contains the parameters, salt and derived key and is
    safe to store in a database.
    """
    check_password_requirements(password, policy)
    return encode_hash(password, policy.params)


def verify_password(
    password: Union[str, bytes],
    encoded: str,
    policy: PasswordPolicy = DEFAULT_POLICY
) -> bool:
    """
    Check a user-supplied password against a stored hash.

    The hash should come from storage and the password from the user.
    """
    check_password_requirements(password, policy)
    return compare_password_and_hash(password, encoded)


class PasswordHasher:
    """
    Hash and verify passwords under a fixed PasswordPolicy.

    Holds no mutable state; one instance can serve any number of threads.
    """

    def __init__(self, policy: PasswordPolicy = DEFAULT_POLICY):
        self.policy = policy

    def hash(self, password: Union[str, bytes]) -> str:
        return hash_password(password, self.policy)

    def verify(self, password: Union[str, bytes], encoded: str) -> bool:
        return verify_password(password, encoded, self.policy)

    def check(self, password: Union[str, bytes], encoded: str) -> Tuple[bool, Parameters]:
        """Like verify, but also return the parameters the hash was created with."""
        check_password_requirements(password, self.policy)
        return check_hash(password, encoded)

    def needs_rehash(self, encoded: str) -> bool:
        """True if encoded was created with parameters other than the policy's."""
        return needs_rehash(encoded, self.policy.params)
