"""KeyScheme protocol — where credentials and keyed records live in Redis."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from redis.asyncio import Redis
    from redis.asyncio.client import Pipeline


class KeyScheme(ABC):
    """Abstract base for a physical layout.

    A scheme only maps logical names onto Redis keys/fields and issues the
    matching commands.  It never encodes or decodes values: it moves
    already-serialized text in and out.  Record names are the
    ``<category>-<id>`` strings built by the engine.
    """

    def __init__(self, namespace: str) -> None:
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def client_name(self) -> str | None:
        """Diagnostic connection name, or ``None`` to leave the connection unnamed."""
        return None

    @abstractmethod
    def location(self, name: str) -> str:
        """Human-readable address of *name* (used in error messages)."""
        ...

    @abstractmethod
    async def read_creds(self, redis: Redis) -> str | None:
        """Return the serialized credential bundle, or ``None`` if never saved."""
        ...

    @abstractmethod
    async def write_creds(self, redis: Redis, raw: str) -> None:
        """Create or overwrite the serialized credential bundle."""
        ...

    @abstractmethod
    async def read_records(self, redis: Redis, names: list[str]) -> list[str | None]:
        """Fetch *names* in one round trip.  Result order matches *names*."""
        ...

    @abstractmethod
    def queue_write(self, pipe: Pipeline, name: str, raw: str) -> None:
        """Queue a write of *raw* under *name* on *pipe*."""
        ...

    @abstractmethod
    def queue_delete(self, pipe: Pipeline, name: str) -> None:
        """Queue removal of *name* on *pipe*.  No-op server-side if missing."""
        ...

    @abstractmethod
    async def clear(self, redis: Redis) -> None:
        """Remove the credentials and every record of the namespace."""
        ...
