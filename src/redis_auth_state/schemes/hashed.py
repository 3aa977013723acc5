"""HashedKeyScheme — every field of a session inside one Redis hash."""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis_auth_state._internal.keys import CREDS_FIELD, hash_key
from redis_auth_state.cleanup import delete_hset_keys
from redis_auth_state.schemes.base import KeyScheme

if TYPE_CHECKING:
    from redis.asyncio import Redis
    from redis.asyncio.client import Pipeline

_CLIENT_NAME_PREFIX = "baileys-auth-"


class HashedKeyScheme(KeyScheme):
    """Hash ``authState:<namespace>`` with fields ``creds`` and ``<category>-<id>``."""

    def __init__(self, namespace: str) -> None:
        super().__init__(namespace)
        self._hash_key = hash_key(namespace)

    @property
    def hash_key(self) -> str:
        return self._hash_key

    @property
    def client_name(self) -> str:
        return f"{_CLIENT_NAME_PREFIX}{self._namespace}"

    def location(self, name: str) -> str:
        return f"{self._hash_key}[{name}]"

    async def read_creds(self, redis: Redis) -> str | None:
        return await redis.hget(self._hash_key, CREDS_FIELD)

    async def write_creds(self, redis: Redis, raw: str) -> None:
        await redis.hset(self._hash_key, CREDS_FIELD, raw)

    async def read_records(self, redis: Redis, names: list[str]) -> list[str | None]:
        return await redis.hmget(self._hash_key, names)

    def queue_write(self, pipe: Pipeline, name: str, raw: str) -> None:
        pipe.hset(self._hash_key, name, raw)

    def queue_delete(self, pipe: Pipeline, name: str) -> None:
        pipe.hdel(self._hash_key, name)

    async def clear(self, redis: Redis) -> None:
        await delete_hset_keys(redis, self._namespace, raise_on_error=True)
