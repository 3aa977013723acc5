"""State handed to the protocol client: credentials plus a keyed-record accessor."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple, Protocol

from redis_auth_state.creds import AuthenticationCreds

if TYPE_CHECKING:
    from redis.asyncio import Redis


class SignalKeyStore(Protocol):
    """Accessor for ``(category, id)``-addressed records."""

    async def get(self, category: str, ids: Sequence[str]) -> dict[str, Any]: ...

    async def set(self, data: Mapping[str, Mapping[str, Any | None]]) -> None: ...


@dataclass
class AuthenticationState:
    """What the protocol client reads and mutates.

    Attributes:
        creds: The credential bundle, held in memory.  Mutate it in place or
               replace it; either way ``save_creds`` persists the current value.
        keys:  Record accessor backed by Redis.
    """

    creds: AuthenticationCreds
    keys: SignalKeyStore


class AuthStateHandle(NamedTuple):
    """Returned by the ``use_redis_auth_state*`` openers.

    Unpacks as ``state, save_creds, redis = await use_redis_auth_state(...)``.
    The caller owns ``redis`` and is responsible for closing it.
    """

    state: AuthenticationState
    save_creds: Callable[[], Awaitable[None]]
    redis: Redis
