# file: argon2id_hash/params.py
"""
Argon2id tuning parameters and named presets.

For guidance on choosing parameters see RFC 9106, section 4.
"""

from dataclasses import dataclass

from .hash_errors import InvalidParametersError


UINT32_MAX = 0xFFFFFFFF
UINT8_MAX = 0xFF

# Argon2 hard floors
MIN_SALT_LENGTH = 8
MIN_KEY_LENGTH = 4
MIN_MEMORY_PER_LANE = 8


@dataclass(frozen=True)
class Parameters:
    """
    Input parameters of the Argon2id algorithm.

    Invariants:
        - every field is a positive integer
        - memory_cost, iterations, salt_length, key_length fit in uint32
        - parallelism fits in uint8
        - memory_cost >= 8 * parallelism
        - salt_length >= 8, key_length >= 4
    """
    memory_cost: int   # Memory used by the algorithm (KiB)
    iterations: int    # Passes over the memory
    parallelism: int   # Lanes; between 1 and the number of CPUs is sensible
    salt_length: int   # Random salt length (bytes); 16 is recommended
    key_length: int    # Derived key length (bytes); 16 or more is recommended

    def __post_init__(self):
        for name, limit in (
            ('memory_cost', UINT32_MAX),
            ('iterations', UINT32_MAX),
            ('parallelism', UINT8_MAX),
            ('salt_length', UINT32_MAX),
            ('key_length', UINT32_MAX),
        ):
            value = getattr(self, name)
            # bool is an int subclass but never a sensible parameter
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidParametersError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
            if not 1 <= value <= limit:
                raise InvalidParametersError(
                    f"{name}={value} out of range [1, {limit}]"
                )

        if self.memory_cost < MIN_MEMORY_PER_LANE * self.parallelism:
            raise InvalidParametersError(
                f"memory_cost={self.memory_cost} KiB is below "
                f"{MIN_MEMORY_PER_LANE} * parallelism ({self.parallelism})"
            )
        if self.salt_length < MIN_SALT_LENGTH:
            raise InvalidParametersError(
                f"salt_length={self.salt_length} must be >= {MIN_SALT_LENGTH}"
            )
        if self.key_length < MIN_KEY_LENGTH:
            raise InvalidParametersError(
                f"key_length={self.key_length} must be >= {MIN_KEY_LENGTH}"
            )

    def to_dict(self) -> dict:
        """Return the parameters as a plain dictionary (config schema keys)."""
        return {
            'memory_cost': self.memory_cost,
            'iterations': self.iterations,
            'parallelism': self.parallelism,
            'salt_length': self.salt_length,
            'key_length': self.key_length,
        }


# General-purpose preset
DEFAULT_PARAMS = Parameters(
    memory_cost=64 * 1024,
    iterations=1,
    parallelism=2,
    salt_length=16,
    key_length=32,
)

# Tuned for a base serverless instance with default memory and CPU: a hash
# takes around a second and needs 64 MiB on top of the function's own usage.
LAMBDA_PARAMS = Parameters(
    memory_cost=64 * 1024,
    iterations=15,
    parallelism=4,
    salt_length=64,
    key_length=512,
)

PRESETS = {
    'default': DEFAULT_PARAMS,
    'lambda': LAMBDA_PARAMS,
}
