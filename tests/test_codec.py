# file: tests/test_codec.py

"""
Unit tests for the encoded hash codec.

Test coverage:
    - Encoded hash format
    - Salt freshness
    - Parameter round-trip through decode
    - Rejection of every malformed field
    - Strict base64 decoding
"""

import re

import pytest

from argon2id_hash import (
    Parameters,
    DEFAULT_PARAMS,
    LAMBDA_PARAMS,
    encode_hash,
    decode_hash,
    MalformedHashError,
    UnsupportedVariantError,
    VersionMismatchError,
    ParameterParseError,
    HashEncodingError,
)
from argon2id_hash.codec import b64_encode, b64_decode
from argon2id_hash.testing_utils import generate_random_string


# Cheap parameters so the suite stays fast
FAST_PARAMS = Parameters(
    memory_cost=1024,
    iterations=1,
    parallelism=1,
    salt_length=16,
    key_length=32,
)

FAST_HASH_RE = re.compile(
    r'^\$argon2id\$v=19\$m=1024,t=1,p=1\$[A-Za-z0-9+/]{22}\$[A-Za-z0-9+/]{43}$'
)

BUG_HASH = (
    "$argon2id$v=19$m=65536,t=1,p=2"
    "$UDk0zEuIzbt0x3bwkf8Bgw"
    "$ihSfHWUJpTgDvNWiojrgcN4E0pJdUVmqCEdRZesx9tE"
)

SALT = "UDk0zEuIzbt0x3bwkf8Bgw"
KEY = "ihSfHWUJpTgDvNWiojrgcN4E0pJdUVmqCEdRZesx9tE"


class TestBase64:
    """Test unpadded strict base64 helpers."""

    def test_encode_has_no_padding(self):
        """Test that encoding strips '=' padding."""
        assert b64_encode(b"a") == "YQ"
        assert b64_encode(b"ab") == "YWI"
        assert b64_encode(b"abc") == "YWJj"

    def test_decode_unpadded(self):
        """Test decoding of unpadded input of every residue length."""
        assert b64_decode("YQ") == b"a"
        assert b64_decode("YWI") == b"ab"
        assert b64_decode("YWJj") == b"abc"

    def test_decode_rejects_padding(self):
        """Test that padded input is rejected."""
        with pytest.raises(HashEncodingError):
            b64_decode("YQ==")

    def test_decode_rejects_invalid_characters(self):
        """Test that characters outside the standard alphabet are rejected."""
        with pytest.raises(HashEncodingError):
            b64_decode("YW-j")
        with pytest.raises(HashEncodingError):
            b64_decode("YW_j")
        with pytest.raises(HashEncodingError):
            b64_decode("YW j")

    def test_decode_rejects_trailing_bits(self):
        """Test that non-zero trailing bits are rejected."""
        # 'YR' carries the same byte as 'YQ' plus a non-zero trailing bit
        with pytest.raises(HashEncodingError):
            b64_decode("YR")

    def test_decode_rejects_impossible_length(self):
        """Test that a length of 1 mod 4 is rejected."""
        with pytest.raises(HashEncodingError):
            b64_decode("YWJjZ")


class TestEncodeHash:
    """Test hash creation."""

    def test_format(self):
        """Test that output matches the expected layout."""
        encoded = encode_hash("pa$$word", FAST_PARAMS)
        assert FAST_HASH_RE.match(encoded)

    def test_bytes_password(self):
        """Test that bytes passwords are accepted."""
        encoded = encode_hash(b"pa$$word", FAST_PARAMS)
        assert FAST_HASH_RE.match(encoded)

    def test_same_password_different_hashes(self):
        """Test that a fresh salt makes every hash unique."""
        hashes = [encode_hash("pa$$word", FAST_PARAMS) for _ in range(20)]
        assert len(set(hashes)) == len(hashes)

        salts = [h.split('$')[4] for h in hashes]
        assert len(set(salts)) == len(salts)

    def test_long_password_different_hashes(self):
        """Test uniqueness for a password longer than the key."""
        password = generate_random_string(FAST_PARAMS.key_length * 2)
        assert encode_hash(password, FAST_PARAMS) != encode_hash(password, FAST_PARAMS)

    def test_field_lengths_follow_params(self):
        """Test that salt and key fields decode to the configured lengths."""
        params = Parameters(
            memory_cost=1024, iterations=1, parallelism=1, salt_length=24, key_length=64
        )
        _, salt, key = decode_hash(encode_hash("pa$$word", params))
        assert len(salt) == 24
        assert len(key) == 64


class TestDecodeHash:
    """Test hash parsing and validation."""

    @pytest.mark.parametrize("password", [
        "pa$$word",
        "",
        "unicode éè中",
        generate_random_string(128, seed=7),
    ])
    def test_params_roundtrip(self, password):
        """Test that decode recovers the exact parameters used to encode."""
        params, salt, key = decode_hash(encode_hash(password, FAST_PARAMS))
        assert params == FAST_PARAMS
        assert len(salt) == FAST_PARAMS.salt_length
        assert len(key) == FAST_PARAMS.key_length

    def test_known_hash(self):
        """Test decoding of a hash from another Argon2 implementation."""
        params, salt, key = decode_hash(BUG_HASH)
        assert params == DEFAULT_PARAMS
        assert salt == b64_decode(SALT)
        assert key == b64_decode(KEY)

    def test_lengths_taken_from_decoded_data(self):
        """Test that salt_length/key_length reflect the actual bytes."""
        params, _, _ = decode_hash(BUG_HASH)
        assert params.salt_length == 16
        assert params.key_length == 32
        assert params != LAMBDA_PARAMS

    @pytest.mark.parametrize("encoded", [
        "",
        "argon2id",
        "$argon2id$v=19$m=65536,t=1,p=2$" + SALT,
        BUG_HASH + "$extra",
        "x" + BUG_HASH,
    ])
    def test_wrong_field_layout(self, encoded):
        """Test that anything but six fields with an empty first is malformed."""
        with pytest.raises(MalformedHashError):
            decode_hash(encoded)

    def test_non_string_input(self):
        """Test that non-str input is malformed."""
        with pytest.raises(MalformedHashError):
            decode_hash(BUG_HASH.encode())

    @pytest.mark.parametrize("variant", ["argon2i", "argon2d", "ARGON2ID", "bcrypt"])
    def test_unsupported_variant(self, variant):
        """Test that other algorithms are told apart from corrupt data."""
        encoded = BUG_HASH.replace("argon2id", variant, 1)
        with pytest.raises(UnsupportedVariantError):
            decode_hash(encoded)

    def test_version_mismatch(self):
        """Test that Argon2 v1.0 (16) hashes are rejected."""
        encoded = BUG_HASH.replace("v=19", "v=16", 1)
        with pytest.raises(VersionMismatchError) as exc_info:
            decode_hash(encoded)
        assert exc_info.value.version == 16
        assert exc_info.value.expected == 19

    @pytest.mark.parametrize("version_field", ["v=", "v=abc", "19", "v=19x", "v=-19", "v= 19"])
    def test_malformed_version(self, version_field):
        """Test that an unparsable version field is a parse error."""
        encoded = BUG_HASH.replace("v=19", version_field, 1)
        with pytest.raises(ParameterParseError):
            decode_hash(encoded)

    @pytest.mark.parametrize("params_field", [
        "m=65536,t=1",
        "t=1,m=65536,p=2",
        "m=65536,t=1,p=2,k=1",
        "m=abc,t=1,p=2",
        "m=65536,t=-1,p=2",
        "m=65536, t=1, p=2",
        "m=0,t=1,p=2",
        "m=65536,t=0,p=2",
        "m=65536,t=1,p=0",
        "m=65536,t=1,p=256",
        "m=4294967296,t=1,p=2",
        "m=8,t=1,p=2",
    ])
    def test_malformed_params(self, params_field):
        """Test that bad or out-of-range numeric fields are parse errors."""
        encoded = BUG_HASH.replace("m=65536,t=1,p=2", params_field, 1)
        with pytest.raises(ParameterParseError):
            decode_hash(encoded)

    def test_short_salt_rejected(self):
        """Test that a salt below the Argon2 minimum is a parse error."""
        encoded = BUG_HASH.replace(SALT, b64_encode(b"1234"), 1)
        with pytest.raises(ParameterParseError):
            decode_hash(encoded)

    @pytest.mark.parametrize("field_index", [4, 5])
    @pytest.mark.parametrize("bad_value", ["", "!!!!", "ihSf=", "ihSf==", "ihS"])
    def test_bad_base64(self, field_index, bad_value):
        """Test that invalid salt or key encodings are rejected."""
        fields = BUG_HASH.split('$')
        fields[field_index] = bad_value
        with pytest.raises(HashEncodingError):
            decode_hash('$'.join(fields))

    def test_tampered_last_character(self):
        """Test that changing the last key character breaks strict decoding."""
        tampered = BUG_HASH[:-1] + "F"
        with pytest.raises(HashEncodingError):
            decode_hash(tampered)
