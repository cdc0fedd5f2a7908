"""
Error taxonomy.

Every failure inside the operations is raised as one of these. The host
surface (api.py) turns them into Result values, so callers branch on
`Result.ok` / the `error` key and never see an exception.
"""


class RSABridgeError(Exception):
    """Base class. `kind` is a stable tag the host can switch on."""

    kind = "error"

    @property
    def message(self) -> str:
        return str(self)


class KeyGenerationError(RSABridgeError):
    kind = "key_generation"


class KeySerializationError(RSABridgeError):
    kind = "key_serialization"


class ArmorDecodeError(RSABridgeError):
    kind = "armor_decode"


class KeyParseError(RSABridgeError):
    kind = "key_parse"


class WrongKeyTypeError(KeyParseError):
    """Well-formed key material, but not the RSA key the operation needs."""

    kind = "wrong_key_type"


class EncodingError(RSABridgeError):
    kind = "encoding"


class EncryptionError(RSABridgeError):
    kind = "encryption"


class DecryptionError(RSABridgeError):
    # One message for every cause: padding, wrong key, corrupted bytes.
    kind = "decryption"

    def __init__(self, message: str = "Decryption failed"):
        super().__init__(message)


__all__ = [
    "RSABridgeError",
    "KeyGenerationError",
    "KeySerializationError",
    "ArmorDecodeError",
    "KeyParseError",
    "WrongKeyTypeError",
    "EncodingError",
    "EncryptionError",
    "DecryptionError",
]
