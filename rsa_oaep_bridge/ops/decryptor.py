"""
Decryptor — RSA-OAEP under an armored PKCS#1 private key
========================================================
Padding failure, wrong key and corrupted bytes all end in the same
DecryptionError with the same message. The underlying cause is never
chained or logged, so callers cannot use this as a padding oracle.

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from ..config import DEFAULT_CONFIG, OAEPConfig
from ..errors import ArmorDecodeError, DecryptionError
from ..utils import b64d
from .codec import KeyCodec

logger = logging.getLogger(__name__)


class Decryptor:
    """Recover plaintext encrypted by Encryptor."""

    def __init__(self, config: OAEPConfig = None):
        self._config = config or DEFAULT_CONFIG

    def decrypt(self, private_key_text: str, ciphertext_b64: str) -> bytes:
        try:
            block = KeyCodec.decode(private_key_text)
        except ArmorDecodeError:
            raise ArmorDecodeError(
                "Failed to decode PEM block containing private key"
            ) from None
        private_key = KeyCodec.parse_private(block)
        ciphertext = b64d(ciphertext_b64)
        return self.decrypt_bytes(private_key, ciphertext)

    def decrypt_bytes(self, private_key: rsa.RSAPrivateKey, ciphertext: bytes) -> bytes:
        try:
            pt = private_key.decrypt(bytes(ciphertext), self._config.oaep())
        except (ValueError, TypeError):
            logger.debug("Decryption rejected")
            raise DecryptionError() from None
        logger.debug(f"Decrypted {len(ciphertext)}B -> {len(pt)}B")
        return pt
