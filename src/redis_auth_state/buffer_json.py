"""Buffer-safe JSON codec compatible with the protocol library's ``BufferJSON``.

Binary values are written as ``{"type": "Buffer", "data": "<base64>"}`` and
revived back into :class:`bytes`.  Output is compact so stored values are
byte-identical to what the JavaScript client writes with ``JSON.stringify``.
"""

from __future__ import annotations

import base64
import json
from typing import Any

from redis_auth_state.exceptions import DecodeError

_BUFFER_TAG = "Buffer"


def _to_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data or [])


def _replace(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {"type": _BUFFER_TAG, "data": base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, dict):
        if value.get("type") == _BUFFER_TAG:
            raw = _to_bytes(value.get("data") or value.get("value"))
            return {"type": _BUFFER_TAG, "data": base64.b64encode(raw).decode("ascii")}
        return {str(k): _replace(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace(v) for v in value]
    return value


def _revive(obj: dict[str, Any]) -> Any:
    if obj.get("buffer") is True or obj.get("type") == _BUFFER_TAG:
        return _to_bytes(obj.get("data") or obj.get("value"))
    return obj


def encode(value: Any) -> str:
    """Serialize *value* to text, tagging every binary value."""
    return json.dumps(_replace(value), separators=(",", ":"), ensure_ascii=False)


def decode(text: str | bytes, *, location: str = "<value>") -> Any:
    """Parse *text* produced by :func:`encode` (or by the JavaScript client).

    Raises:
        DecodeError: If *text* is not valid JSON or holds a malformed buffer.
    """
    try:
        return json.loads(text, object_hook=_revive)
    except (ValueError, TypeError) as exc:
        raise DecodeError(location, str(exc)) from exc
