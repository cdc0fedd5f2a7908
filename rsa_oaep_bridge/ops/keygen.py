"""
KeyGenerator — fresh RSA key pairs
==================================
RSA-2048 by default, public exponent 65537 (F4).

The prime search and the random source belong to OpenSSL (via the
`cryptography` package). Its search is bounded; when it gives up, or the
random source fails, the error surfaces as KeyGenerationError. Nothing is
retried here.

Dependencies: cryptography >= 41.0
"""

import logging
from typing import NamedTuple

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa

from ..config import DEFAULT_CONFIG, OAEPConfig
from ..errors import KeyGenerationError

logger = logging.getLogger(__name__)


class KeyPair(NamedTuple):
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey


class KeyGenerator:
    """Produces RSA key pairs for the configured modulus size."""

    def __init__(self, config: OAEPConfig = None):
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> OAEPConfig:
        return self._config

    def generate(self) -> KeyPair:
        """Generate a fresh keypair. Raises KeyGenerationError."""
        try:
            private_key = rsa.generate_private_key(
                public_exponent=self._config.public_exponent,
                key_size=self._config.key_size,
            )
        except (ValueError, UnsupportedAlgorithm, InternalError, OSError) as e:
            raise KeyGenerationError(f"Failed to generate private key: {e}") from e
        logger.debug(f"Generated RSA-{private_key.key_size} keypair")
        return KeyPair(private_key, private_key.public_key())

    def __repr__(self):
        return f"KeyGenerator({self._config!r})"
