"""
Result — one success-or-error value for every operation.

    r = encrypt(pub_pem, "hello")
    if r.ok:
        send(r.payload["ciphertext"])
    else:
        show(r.payload["error"])

`to_dict()` is what the host sees: the success payload, or {"error": msg}.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .errors import RSABridgeError

logger = logging.getLogger(__name__)


class Result:

    __slots__ = ("_payload", "_value", "_error")

    def __init__(self, payload: Dict[str, Any], value: Any = None,
                 error: Optional[RSABridgeError] = None):
        self._payload = payload
        self._value   = value
        self._error   = error

    @classmethod
    def success(cls, payload: Dict[str, Any], value: Any = None) -> "Result":
        return cls(dict(payload), value=value)

    @classmethod
    def failure(cls, error: RSABridgeError) -> "Result":
        return cls({"error": str(error)}, error=error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def payload(self) -> Dict[str, Any]:
        return dict(self._payload)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def error(self) -> Optional[RSABridgeError]:
        return self._error

    @property
    def kind(self) -> Optional[str]:
        return self._error.kind if self._error is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._payload)

    def unwrap(self) -> Any:
        """Return the raw value, or raise the captured error."""
        if self._error is not None:
            raise self._error
        return self._value

    def __repr__(self):
        if self.ok:
            return f"Result.success({sorted(self._payload)})"
        return f"Result.failure({self.kind}: {self._error})"


def capture(operation: Callable[[], Any],
            build: Callable[[Any], Dict[str, Any]]) -> Result:
    """
    Run `operation`; shape its return value with `build`.
    Library errors become failures. Anything else is logged with its
    traceback and reported as a generic failure.
    """
    try:
        value = operation()
    except RSABridgeError as e:
        logger.debug(f"{e.kind}: {e}")
        return Result.failure(e)
    except Exception as e:
        logger.exception("Unexpected error in RSA operation")
        return Result.failure(RSABridgeError(f"Internal error: {type(e).__name__}"))
    return Result.success(build(value), value=value)


__all__ = ["Result", "capture"]
