"""
rsa_oaep_bridge
===============
RSA-2048 key generation, PEM-style key armor, and RSA-OAEP (SHA-256)
encryption for hosts that call in with plain strings.

Surface:
    generate_keys()                    -> {privateKey, publicKey}
    encrypt(publicKey, plaintext)      -> {ciphertext}
    decrypt(privateKey, ciphertext)    -> {plaintext}
Each returns a Result; failures carry {error}.

Building blocks:
    KeyGenerator   fresh RSA key pairs
    KeyCodec       "RSA PRIVATE KEY" (PKCS#1) / "RSA PUBLIC KEY" (SPKI) armor
    Encryptor      OAEP encrypt under an armored public key
    Decryptor      OAEP decrypt under an armored private key

License: Apache 2.0
"""

__version__ = "1.0.0"

from .config         import OAEPConfig, DEFAULT_CONFIG
from .errors         import (
    RSABridgeError,
    KeyGenerationError,
    KeySerializationError,
    ArmorDecodeError,
    KeyParseError,
    WrongKeyTypeError,
    EncodingError,
    EncryptionError,
    DecryptionError,
)
from .result         import Result
from .ops.keygen     import KeyGenerator, KeyPair
from .ops.codec      import KeyCodec, RawBlock
from .ops.encryptor  import Encryptor
from .ops.decryptor  import Decryptor
from .api            import generate_keys, encrypt, decrypt

__all__ = [
    "OAEPConfig",
    "DEFAULT_CONFIG",
    "RSABridgeError",
    "KeyGenerationError",
    "KeySerializationError",
    "ArmorDecodeError",
    "KeyParseError",
    "WrongKeyTypeError",
    "EncodingError",
    "EncryptionError",
    "DecryptionError",
    "Result",
    "KeyGenerator",
    "KeyPair",
    "KeyCodec",
    "RawBlock",
    "Encryptor",
    "Decryptor",
    "generate_keys",
    "encrypt",
    "decrypt",
]
