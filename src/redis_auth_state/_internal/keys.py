"""Key and field naming shared by both storage layouts."""

from __future__ import annotations

AUTH_STATE_KEY = "authState"
CREDS_FIELD = "creds"


def create_key(key: str, prefix: str) -> str:
    """Join two segments as ``<key>:<prefix>``."""
    return f"{key}:{prefix}"


def record_field(category: str, record_id: str) -> str:
    """Return the field (or key suffix) for a keyed record."""
    return f"{category}-{record_id}"


def hash_key(namespace: str) -> str:
    """Return the hash holding every field of *namespace*."""
    return create_key(AUTH_STATE_KEY, namespace)


def namespace_pattern(namespace: str) -> str:
    """Return a ``SCAN MATCH`` pattern for every flat key under *namespace*.

    Glob metacharacters in the namespace itself are escaped.
    """
    escaped = "".join(f"\\{ch}" if ch in "*?[]\\" else ch for ch in namespace)
    return f"{escaped}:*"
