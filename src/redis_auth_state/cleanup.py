"""Bulk removal of persisted auth state, one helper per storage layout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from redis_auth_state._internal.keys import hash_key
from redis_auth_state.exceptions import StoreError

if TYPE_CHECKING:
    from redis.asyncio import Redis

_logger = logging.getLogger(__name__)

_SCAN_COUNT = 100


async def delete_keys_with_pattern(redis: Redis, pattern: str, *, count: int = _SCAN_COUNT) -> None:
    """Remove every key matching *pattern* (e.g. ``"DB1:*"``).

    Walks the keyspace with ``SCAN`` in batches of about *count* keys and
    removes each batch with ``UNLINK`` so large values are freed off the
    main thread.  Calling it again once nothing matches is a no-op.

    Raises:
        StoreError: On the first failing command.  Keys already unlinked
            stay deleted.
    """
    cursor = 0
    try:
        while True:
            cursor, keys = await redis.scan(cursor=cursor, match=pattern, count=count)
            cursor = int(cursor)
            if keys:
                await redis.unlink(*keys)
                _logger.info("Deleted keys: %s", ", ".join(_as_text(k) for k in keys))
            if cursor == 0:
                break
    except RedisError as exc:
        raise StoreError("delete_keys_with_pattern", f"{pattern}: {exc}") from exc


async def delete_hset_keys(redis: Redis, key: str, *, raise_on_error: bool = False) -> None:
    """Remove the auth-state hash of namespace *key*.

    Cleanup is best-effort by default: a failing ``DEL`` is logged and
    swallowed.  Pass ``raise_on_error=True`` to get a :class:`StoreError`
    instead.
    """
    target = hash_key(key)
    _logger.info("Removing authState keys for %s", key)
    try:
        await redis.delete(target)
    except RedisError as exc:
        if raise_on_error:
            raise StoreError("delete_hset_keys", f"{target}: {exc}") from exc
        _logger.warning("Error deleting keys for %s: %s", target, exc)


def _as_text(key: str | bytes) -> str:
    return key.decode("utf-8", "replace") if isinstance(key, bytes) else key
