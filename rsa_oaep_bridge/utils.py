import base64
import binascii

from .errors import EncodingError


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s) -> bytes:
    """Strict standard-alphabet base64; CR/LF are ignored, nothing else is."""
    if isinstance(s, str):
        try:
            s = s.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Failed to decode ciphertext: {e}") from e
    s = s.replace(b"\r", b"").replace(b"\n", b"")
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as e:
        raise EncodingError(f"Failed to decode ciphertext: {e}") from e


__all__ = ["b64e", "b64d"]
