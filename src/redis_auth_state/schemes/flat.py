"""FlatKeyScheme — one top-level key per credential bundle or record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis_auth_state._internal.keys import CREDS_FIELD, create_key, namespace_pattern
from redis_auth_state.cleanup import delete_keys_with_pattern
from redis_auth_state.schemes.base import KeyScheme

if TYPE_CHECKING:
    from redis.asyncio import Redis
    from redis.asyncio.client import Pipeline


class FlatKeyScheme(KeyScheme):
    """Keys are ``<namespace>:creds`` and ``<namespace>:<category>-<id>``."""

    def _key(self, name: str) -> str:
        return create_key(self._namespace, name)

    def location(self, name: str) -> str:
        return self._key(name)

    async def read_creds(self, redis: Redis) -> str | None:
        return await redis.get(self._key(CREDS_FIELD))

    async def write_creds(self, redis: Redis, raw: str) -> None:
        await redis.set(self._key(CREDS_FIELD), raw)

    async def read_records(self, redis: Redis, names: list[str]) -> list[str | None]:
        return await redis.mget([self._key(name) for name in names])

    def queue_write(self, pipe: Pipeline, name: str, raw: str) -> None:
        pipe.set(self._key(name), raw)

    def queue_delete(self, pipe: Pipeline, name: str) -> None:
        pipe.delete(self._key(name))

    async def clear(self, redis: Redis) -> None:
        await delete_keys_with_pattern(redis, namespace_pattern(self._namespace))
