"""Connection settings for the Redis server holding auth state."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import redis.asyncio as aioredis
from pydantic import BaseModel, Field


class RedisConnectionSchema(BaseModel):
    """How to reach Redis.

    Attributes:
        url: Connection URL (``redis://`` / ``rediss://`` / ``unix://``).
            Falls back to the ``REDIS_URL`` env var.  When set, it takes
            precedence over the discrete host/port/db fields.
        host: Server host name.
        port: Server port.
        db: Logical database index.
        username: ACL user name.
        password: ACL or legacy ``requirepass`` password.
        ssl: Connect over TLS.
        socket_timeout: Per-command socket timeout in seconds.
        client_name: Name announced with ``CLIENT SETNAME`` on every connection.
        options: Extra keyword arguments forwarded to ``redis.asyncio.Redis``.
    """

    url: str | None = Field(default_factory=lambda: os.getenv("REDIS_URL") or None)
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: str | None = None
    password: str | None = None
    ssl: bool = False
    socket_timeout: float | None = None
    client_name: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def coerce(
        cls, value: RedisConnectionSchema | Mapping[str, Any] | None
    ) -> RedisConnectionSchema:
        """Accept a schema, a plain mapping of the same fields, or ``None``."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def create_client(self) -> aioredis.Redis:
        """Instantiate an asyncio Redis client.  No I/O happens until first use."""
        common: dict[str, Any] = {
            "username": self.username,
            "password": self.password,
            "socket_timeout": self.socket_timeout,
            "client_name": self.client_name,
            "decode_responses": True,
            **self.options,
        }
        if self.url:
            return aioredis.Redis.from_url(self.url, **common)
        return aioredis.Redis(
            host=self.host,
            port=self.port,
            db=self.db,
            ssl=self.ssl,
            **common,
        )
