"""
Configuration — key size, exponent and OAEP padding
====================================================
Every operation takes an OAEPConfig. DEFAULT_CONFIG is RSA-2048,
e = 65537, OAEP with SHA-256 for both the label hash and MGF1, empty label.

Max plaintext = k - 2*hLen - 2
    2048-bit -> 256 - 64 - 2 = 190 bytes
    3072-bit -> 384 - 64 - 2 = 318 bytes
    4096-bit -> 512 - 64 - 2 = 446 bytes
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding


class OAEPConfig:
    """Immutable RSA-OAEP parameters."""

    SUPPORTED_KEY_SIZES = (2048, 3072, 4096)
    SUPPORTED_EXPONENTS = (3, 65537)
    HASH_SIZE = 32   # SHA-256 digest length

    __slots__ = ("_key_size", "_public_exponent")

    def __init__(self, key_size: int = 2048, public_exponent: int = 65537):
        if key_size not in self.SUPPORTED_KEY_SIZES:
            raise ValueError(
                f"key_size must be one of {self.SUPPORTED_KEY_SIZES}, got {key_size}"
            )
        if public_exponent not in self.SUPPORTED_EXPONENTS:
            raise ValueError(
                f"public_exponent must be 3 or 65537, got {public_exponent}"
            )
        self._key_size = key_size
        self._public_exponent = public_exponent

    @property
    def key_size(self) -> int:
        return self._key_size

    @property
    def public_exponent(self) -> int:
        return self._public_exponent

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        return hashes.SHA256()

    def oaep(self) -> padding.OAEP:
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=self.hash_algorithm()),
            algorithm=self.hash_algorithm(),
            label=None
        )

    def max_plaintext_len(self, key=None) -> int:
        """Largest plaintext one OAEP block holds, for `key` or the configured size."""
        bits = key.key_size if key is not None else self._key_size
        k = (bits + 7) // 8
        return k - 2 * self.HASH_SIZE - 2

    def __eq__(self, other):
        if not isinstance(other, OAEPConfig):
            return NotImplemented
        return (self._key_size, self._public_exponent) == \
               (other._key_size, other._public_exponent)

    def __hash__(self):
        return hash((self._key_size, self._public_exponent))

    def __repr__(self):
        return (f"OAEPConfig(key_size={self._key_size}, "
                f"public_exponent={self._public_exponent})")


DEFAULT_CONFIG = OAEPConfig()
