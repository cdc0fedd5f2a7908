"""
Encryptor — RSA-OAEP under an armored public key
================================================
OAEP with SHA-256 as label hash and MGF1 hash, empty label. Padding is
randomised, so the same plaintext never encrypts to the same bytes twice.

Max plaintext for RSA-2048 is 190 bytes. Larger payloads are rejected;
there is no chunking.

Dependencies: cryptography >= 41.0
"""

import logging
from typing import Union

from cryptography.hazmat.primitives.asymmetric import rsa

from ..config import DEFAULT_CONFIG, OAEPConfig
from ..errors import ArmorDecodeError, EncryptionError
from ..utils import b64e
from .codec import KeyCodec

logger = logging.getLogger(__name__)


class Encryptor:
    """Encrypt short messages for the holder of a private key."""

    def __init__(self, config: OAEPConfig = None):
        self._config = config or DEFAULT_CONFIG

    def encrypt(self, public_key_text: str, plaintext: Union[str, bytes]) -> str:
        """
        Decode armor, parse the SPKI public key, encrypt.
        Returns the ciphertext as base64 text.
        """
        try:
            block = KeyCodec.decode(public_key_text)
        except ArmorDecodeError:
            raise ArmorDecodeError(
                "Failed to decode PEM block containing public key"
            ) from None
        public_key = KeyCodec.parse_public(block)
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        return b64e(self.encrypt_bytes(public_key, plaintext))

    def encrypt_bytes(self, public_key: rsa.RSAPublicKey, plaintext: bytes) -> bytes:
        limit = self._config.max_plaintext_len(public_key)
        if len(plaintext) > limit:
            raise EncryptionError(
                f"Encryption failed: message too long for RSA key size "
                f"({len(plaintext)} > {limit} bytes)"
            )
        try:
            ct = public_key.encrypt(bytes(plaintext), self._config.oaep())
        except (ValueError, TypeError) as e:
            raise EncryptionError(f"Encryption failed: {e}") from e
        logger.debug(f"Encrypted {len(plaintext)}B -> {len(ct)}B")
        return ct
