"""
KeyCodec — PEM-style armor for RSA keys
=======================================
Private keys: PKCS#1 RSAPrivateKey DER, label "RSA PRIVATE KEY".
Public keys:  SubjectPublicKeyInfo DER (algorithm identifier + key),
              label "RSA PUBLIC KEY".

The public label is not the usual "PUBLIC KEY" that goes with SPKI.
Existing callers expect it, so it stays. Because of that label the
standard PEM loaders cannot be used on our public keys; armor is handled
here and only DER goes through `cryptography`.

Armor layout (same bytes OpenSSL / Go encoding/pem write):

    -----BEGIN <LABEL>-----
    <base64, 64 columns>
    -----END <LABEL>-----

Dependencies: cryptography >= 41.0
"""

import base64
import binascii
import logging
import re
from typing import Dict, NamedTuple, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import (
    ArmorDecodeError,
    KeyParseError,
    KeySerializationError,
    WrongKeyTypeError,
)

logger = logging.getLogger(__name__)

PRIVATE_LABEL = "RSA PRIVATE KEY"
PUBLIC_LABEL  = "RSA PUBLIC KEY"
LINE_WIDTH    = 64

_BLOCK_RE = re.compile(
    r"^-----BEGIN (?P<label>[^\r\n]*?)-----[ \t]*\r?\n"
    r"(?P<body>.*?)"
    r"^-----END (?P=label)-----[ \t]*\r?$",
    re.M | re.S,
)

_PARSE_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


class RawBlock(NamedTuple):
    label: str
    data: bytes
    headers: Optional[Dict[str, str]] = None


def armor(label: str, der: bytes) -> str:
    """Wrap DER bytes in BEGIN/END lines with a 64-column base64 body."""
    body = base64.b64encode(der).decode("ascii")
    lines = [body[i:i + LINE_WIDTH] for i in range(0, len(body), LINE_WIDTH)]
    return "".join([
        f"-----BEGIN {label}-----\n",
        "".join(line + "\n" for line in lines),
        f"-----END {label}-----\n",
    ])


def _split_headers(body: str):
    lines = body.splitlines()
    headers = {}
    while lines and ":" in lines[0]:
        key, _, value = lines.pop(0).partition(":")
        headers[key.strip()] = value.strip()
    if headers and lines and not lines[0].strip():
        lines.pop(0)
    return headers, "".join(line.strip() for line in lines)


def public_key_from_numbers(n: int, e: int) -> rsa.RSAPublicKey:
    """Rebuild a public key from its modulus and exponent."""
    try:
        return rsa.RSAPublicNumbers(e, n).public_key()
    except (ValueError, TypeError) as err:
        raise KeySerializationError(f"Failed to marshal public key: {err}") from err


class KeyCodec:
    """Encode keys to armored text and parse them back."""

    @staticmethod
    def encode_private(private_key: rsa.RSAPrivateKey) -> str:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise KeySerializationError(
                f"Failed to marshal private key: expected an RSA private key, "
                f"got {type(private_key).__name__}"
            )
        der = private_key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption()
        )
        return armor(PRIVATE_LABEL, der)

    @staticmethod
    def encode_public(public_key: rsa.RSAPublicKey) -> str:
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise KeySerializationError(
                f"Failed to marshal public key: expected an RSA public key, "
                f"got {type(public_key).__name__}"
            )
        numbers = public_key.public_numbers()
        if numbers.e < 3 or numbers.e % 2 == 0:
            raise KeySerializationError("Failed to marshal public key: invalid exponent")
        if numbers.n <= numbers.e or numbers.n % 2 == 0:
            raise KeySerializationError("Failed to marshal public key: invalid modulus")
        try:
            der = public_key.public_bytes(
                serialization.Encoding.DER,
                serialization.PublicFormat.SubjectPublicKeyInfo
            )
        except ValueError as e:
            raise KeySerializationError(f"Failed to marshal public key: {e}") from e
        return armor(PUBLIC_LABEL, der)

    @staticmethod
    def decode(text: Union[str, bytes]) -> RawBlock:
        """
        Return the first well-formed armor block in `text`.
        Anything before or after it is ignored; broken candidates are skipped.
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError:
                raise ArmorDecodeError("Failed to decode PEM block: input is not ASCII") from None
        if not isinstance(text, str):
            raise ArmorDecodeError(
                f"Failed to decode PEM block: expected text, got {type(text).__name__}"
            )

        pos = 0
        while True:
            m = _BLOCK_RE.search(text, pos)
            if m is None:
                break
            headers, body = _split_headers(m.group("body"))
            try:
                data = base64.b64decode(body, validate=True)
            except (binascii.Error, ValueError):
                logger.debug(f"Skipping malformed PEM block at offset {m.start()}")
                pos = m.start("body")
                continue
            return RawBlock(m.group("label"), data, headers)
        raise ArmorDecodeError("Failed to decode PEM block")

    @staticmethod
    def parse_private(block: RawBlock) -> rsa.RSAPrivateKey:
        try:
            key = serialization.load_der_private_key(block.data, password=None)
        except _PARSE_ERRORS as e:
            raise KeyParseError(f"Failed to parse private key: {e}") from e
        if not isinstance(key, rsa.RSAPrivateKey):
            raise WrongKeyTypeError(
                f"Not an RSA private key ({type(key).__name__})"
            )
        # Only PKCS#1 re-encodes to the same bytes; PKCS#8 does not.
        pkcs1 = key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption()
        )
        if pkcs1 != block.data:
            raise KeyParseError("Failed to parse private key: not PKCS#1")
        return key

    @staticmethod
    def parse_public(block: RawBlock) -> rsa.RSAPublicKey:
        try:
            key = serialization.load_der_public_key(block.data)
        except _PARSE_ERRORS as e:
            if KeyCodec._is_private_key(block.data):
                raise WrongKeyTypeError(
                    "Not an RSA public key: private key supplied where a "
                    "public key was expected"
                ) from None
            raise KeyParseError(f"Failed to parse public key: {e}") from e
        if not isinstance(key, rsa.RSAPublicKey):
            raise WrongKeyTypeError(f"Not an RSA public key ({type(key).__name__})")
        # Bare PKCS#1 RSAPublicKey loads too, but is not SPKI.
        spki = key.public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo
        )
        if spki != block.data:
            raise KeyParseError("Failed to parse public key: not SubjectPublicKeyInfo")
        return key

    @staticmethod
    def _is_private_key(der: bytes) -> bool:
        try:
            serialization.load_der_private_key(der, password=None)
        except _PARSE_ERRORS:
            return False
        return True
