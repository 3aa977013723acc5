"""AuthStateStore — the persistence engine shared by both Redis layouts."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from redis_auth_state._internal.keys import record_field
from redis_auth_state.buffer_json import decode, encode
from redis_auth_state.config import RedisConnectionSchema
from redis_auth_state.creds import AuthenticationCreds, init_auth_creds
from redis_auth_state.exceptions import StoreError
from redis_auth_state.schemes import FlatKeyScheme, HashedKeyScheme
from redis_auth_state.state import AuthenticationState, AuthStateHandle

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from redis_auth_state.schemes.base import KeyScheme

_logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "DB1"

# Strong references to fire-and-forget tasks until they finish.
_background_tasks: set[asyncio.Task[None]] = set()


def is_absent(value: Any) -> bool:
    """Return ``True`` for values the JavaScript client treats as falsy.

    ``None``, ``False``, zero, NaN and ``""`` mean "no record".  Empty dicts,
    lists and bytes are real values.
    """
    if value is None:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return isinstance(value, str) and not value


class RedisSignalKeyStore:
    """Keyed-record accessor that reads and writes through a :class:`KeyScheme`."""

    def __init__(self, redis: Redis, scheme: KeyScheme) -> None:
        self._redis = redis
        self._scheme = scheme

    async def get(self, category: str, ids: Sequence[str]) -> dict[str, Any]:
        """Return ``{id: record}`` for every id that has a stored record.

        Missing ids are left out of the result rather than mapped to ``None``.
        """
        if not ids:
            return {}
        names = [record_field(category, record_id) for record_id in ids]
        try:
            raw_values = await self._scheme.read_records(self._redis, names)
        except RedisError as exc:
            raise StoreError("get_keys", str(exc)) from exc

        data: dict[str, Any] = {}
        for record_id, name, raw in zip(ids, names, raw_values, strict=True):
            if raw:
                data[record_id] = decode(raw, location=self._scheme.location(name))
        return data

    async def set(self, data: Mapping[str, Mapping[str, Any | None]]) -> None:
        """Write or delete records in one pipelined round trip.

        A missing value deletes the record (see :func:`is_absent`); empty
        containers and empty bytes are stored.  The pipeline is not a
        transaction: if a command fails, earlier ones stay applied.
        """
        queued = 0
        try:
            async with self._redis.pipeline(transaction=False) as pipe:
                for category, records in data.items():
                    for record_id, value in records.items():
                        name = record_field(category, record_id)
                        if is_absent(value):
                            self._scheme.queue_delete(pipe, name)
                        else:
                            self._scheme.queue_write(pipe, name, encode(value))
                        queued += 1
                if queued:
                    await pipe.execute()
        except RedisError as exc:
            raise StoreError("set_keys", str(exc)) from exc
        _logger.debug("Flushed %d record command(s) for %s", queued, self._scheme.namespace)


class AuthStateStore:
    """Loads, exposes and saves the auth state of one namespace.

    The engine owns serialization, batching and error translation; the
    :class:`KeyScheme` decides where each value physically lives.

    Parameters:
        redis:      Connected (or lazily connecting) asyncio Redis client.
        scheme:     Storage layout for the namespace.
        init_creds: Factory for a fresh credential bundle when none is stored.
    """

    def __init__(
        self,
        redis: Redis,
        scheme: KeyScheme,
        *,
        init_creds: Callable[[], AuthenticationCreds] = init_auth_creds,
    ) -> None:
        self._redis = redis
        self._scheme = scheme
        self._init_creds = init_creds
        self._state: AuthenticationState | None = None

    @property
    def redis(self) -> Redis:
        return self._redis

    @property
    def scheme(self) -> KeyScheme:
        return self._scheme

    @property
    def state(self) -> AuthenticationState:
        if self._state is None:
            raise RuntimeError("AuthStateStore.load() has not been awaited")
        return self._state

    # ── lifecycle ────────────────────────────────────────────

    async def load(self) -> AuthenticationState:
        """Read stored credentials, falling back to a fresh bundle."""
        try:
            raw = await self._scheme.read_creds(self._redis)
        except RedisError as exc:
            raise StoreError("load_creds", str(exc)) from exc

        creds = decode(raw, location=self._scheme.location("creds")) if raw else None
        if creds is None:
            _logger.info("No stored credentials for %s; starting fresh", self._scheme.namespace)
            creds = self._init_creds()

        self._state = AuthenticationState(
            creds=creds,
            keys=RedisSignalKeyStore(self._redis, self._scheme),
        )
        return self._state

    async def save_creds(self) -> None:
        """Overwrite the stored credential bundle with the in-memory one."""
        raw = encode(self.state.creds)
        try:
            await self._scheme.write_creds(self._redis, raw)
        except RedisError as exc:
            raise StoreError("save_creds", str(exc)) from exc

    def name_connection(self) -> asyncio.Task[None] | None:
        """Schedule ``CLIENT SETNAME`` for the scheme's diagnostic name.

        Runs in the background; failures are logged and never raised.
        """
        name = self._scheme.client_name
        if not name:
            return None
        task = asyncio.ensure_future(self._assign_client_name(name))
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
        return task

    async def _assign_client_name(self, name: str) -> None:
        try:
            await self._redis.client_setname(name)
        except RedisError as exc:
            _logger.warning("Could not set Redis client name to %s: %s", name, exc)
            return
        _logger.info("Redis client name set to %s", name)

    def handle(self) -> AuthStateHandle:
        return AuthStateHandle(state=self.state, save_creds=self.save_creds, redis=self._redis)


async def _open(
    scheme: KeyScheme,
    connection: RedisConnectionSchema | Mapping[str, Any] | None,
    client: Redis | None,
    init_creds: Callable[[], AuthenticationCreds],
) -> AuthStateHandle:
    if client is None:
        client = RedisConnectionSchema.coerce(connection).create_client()
    store = AuthStateStore(client, scheme, init_creds=init_creds)
    store.name_connection()
    await store.load()
    return store.handle()


async def use_redis_auth_state(
    connection: RedisConnectionSchema | Mapping[str, Any] | None = None,
    prefix: str = DEFAULT_PREFIX,
    *,
    client: Redis | None = None,
    init_creds: Callable[[], AuthenticationCreds] = init_auth_creds,
) -> AuthStateHandle:
    """Open auth state stored as flat keys ``<prefix>:creds`` / ``<prefix>:<type>-<id>``.

    Parameters:
        connection: Connection settings; ignored when *client* is given.
        prefix:     Namespace of the session.
        client:     Pre-built Redis client to use instead of opening one.
        init_creds: Factory for the bundle used when nothing is stored yet.

    Raises:
        StoreError:  If Redis cannot be reached or the read fails.
        DecodeError: If the stored credentials are corrupt.
    """
    return await _open(FlatKeyScheme(prefix), connection, client, init_creds)


async def use_redis_auth_state_with_hset(
    connection: RedisConnectionSchema | Mapping[str, Any] | None = None,
    prefix: str = DEFAULT_PREFIX,
    *,
    client: Redis | None = None,
    init_creds: Callable[[], AuthenticationCreds] = init_auth_creds,
) -> AuthStateHandle:
    """Open auth state stored as fields of the hash ``authState:<prefix>``.

    Same contract as :func:`use_redis_auth_state`.  Additionally names the
    connection ``baileys-auth-<prefix>`` in the background.
    """
    return await _open(HashedKeyScheme(prefix), connection, client, init_creds)
