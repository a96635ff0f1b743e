# file: argon2id_hash/codec.py
"""
Encoded hash assembly and parsing.

Encoded hash structure (PHC string format, as produced by the Argon2
reference implementation):

    $argon2id$v=19$m=65536,t=3,p=2$c29tZXNhbHQ$RdescudvJCsgt3ub+b+dWRWJTmaaJObG

    [empty]$[algorithm]$[version]$[m,t,p]$[base64 salt]$[base64 key]

Salt and key use the standard base64 alphabet without padding and are
decoded strictly: a value is accepted only if re-encoding it reproduces the
field exactly.
"""

import base64
import binascii
import logging
import re
from typing import Tuple, Union

from .hash_errors import (
    HashEncodingError,
    InvalidParametersError,
    MalformedHashError,
    ParameterParseError,
    UnsupportedVariantError,
    VersionMismatchError,
)
from .kdf import ALGORITHM, VERSION, derive_key
from .params import Parameters
from .salt import generate_random_bytes


logger = logging.getLogger(__name__)

FIELD_COUNT = 6
SEPARATOR = '$'

_VERSION_RE = re.compile(r'v=([0-9]{1,10})')
_PARAMS_RE = re.compile(r'm=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,3})')


def b64_encode(data: bytes) -> str:
    """Encode bytes as unpadded standard base64."""
    return base64.b64encode(data).decode('ascii').rstrip('=')


def b64_decode(text: str) -> bytes:
    """
    Strictly decode unpadded standard base64.

    Rejects padding characters, characters outside the standard alphabet,
    impossible lengths and non-zero trailing bits.

    Raises:
        HashEncodingError: If text is not canonical unpadded base64
    """
    try:
        data = base64.b64decode(text + '=' * (-len(text) % 4), validate=True)
    except (binascii.Error, ValueError) as e:
        raise HashEncodingError(f"Invalid base64: {e}") from e

    if b64_encode(data) != text:
        raise HashEncodingError("Non-canonical base64 (padding or trailing bits)")

    return data


def encode_hash(password: Union[str, bytes], params: Parameters) -> str:
    """
    Hash a password with a fresh random salt and return the encoded hash.

    No password length check happens here; see policy.hash_password.

    Args:
        password: Plain-text secret
        params: Argon2id parameters (salt_length and key_length included)

    Returns:
        Encoded hash string safe to persist

    Raises:
        EntropySourceError: If no random salt could be generated
    """
    salt = generate_random_bytes(params.salt_length)
    key = derive_key(password, salt, params)

    return (
        f"{SEPARATOR}{ALGORITHM}"
        f"{SEPARATOR}v={VERSION}"
        f"{SEPARATOR}m={params.memory_cost},t={params.iterations},p={params.parallelism}"
        f"{SEPARATOR}{b64_encode(salt)}"
        f"{SEPARATOR}{b64_encode(key)}"
    )


def decode_hash(encoded: str) -> Tuple[Parameters, bytes, bytes]:
    """
    Parse an encoded hash into its components.

    The returned Parameters carry the decoded salt and key lengths, not
    values trusted from the string.

    Args:
        encoded: Hash created by encode_hash (or any compatible producer)

    Returns:
        Tuple of (params, salt, key)

    Raises:
        MalformedHashError: If the field layout is wrong
        UnsupportedVariantError: If the algorithm is not argon2id
        VersionMismatchError: If the version differs from the primitive's
        ParameterParseError: If a numeric field is malformed or out of range
        HashEncodingError: If the salt or key is not strict base64
    """
    if not isinstance(encoded, str):
        raise MalformedHashError(f"Encoded hash must be str, got {type(encoded).__name__}")

    fields = encoded.split(SEPARATOR)
    if len(fields) != FIELD_COUNT or fields[0] != '':
        logger.debug(f"Rejected hash with {len(fields)} fields")
        raise MalformedHashError(
            f"Expected {FIELD_COUNT} '{SEPARATOR}'-delimited fields, got {len(fields)}"
        )

    _, algorithm, version_field, params_field, salt_field, key_field = fields

    if algorithm != ALGORITHM:
        logger.debug(f"Rejected hash with variant {algorithm!r}")
        raise UnsupportedVariantError(f"Unsupported variant: {algorithm!r}")

    match = _VERSION_RE.fullmatch(version_field)
    if match is None:
        raise ParameterParseError(f"Malformed version field: {version_field!r}")
    version = int(match.group(1))
    if version != VERSION:
        logger.debug(f"Rejected hash with version {version}")
        raise VersionMismatchError(
            f"Argon2 version {version} does not match {VERSION}",
            version=version,
            expected=VERSION,
        )

    match = _PARAMS_RE.fullmatch(params_field)
    if match is None:
        raise ParameterParseError(f"Malformed parameter field: {params_field!r}")
    memory_cost, iterations, parallelism = (int(g) for g in match.groups())

    if not salt_field or not key_field:
        raise HashEncodingError("Empty salt or key field")
    salt = b64_decode(salt_field)
    key = b64_decode(key_field)

    try:
        params = Parameters(
            memory_cost=memory_cost,
            iterations=iterations,
            parallelism=parallelism,
            salt_length=len(salt),
            key_length=len(key),
        )
    except InvalidParametersError as e:
        raise ParameterParseError(f"Invalid parameters in hash: {e}") from e

    return params, salt, key
