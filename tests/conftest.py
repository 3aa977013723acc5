"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from redis.asyncio.client import Pipeline
from redis.exceptions import ConnectionError as RedisConnectionError


@pytest.fixture
def redis():
    """A fake ``redis.asyncio`` client with its own private server."""
    return FakeAsyncRedis(server=FakeServer(), decode_responses=True)


@pytest.fixture
def spy(monkeypatch):
    """Record the positional arguments of every call to ``obj.name``."""

    def _spy(obj, name):
        calls = []
        original = getattr(obj, name)

        async def wrapper(*args, **kwargs):
            calls.append(args)
            return await original(*args, **kwargs)

        monkeypatch.setattr(obj, name, wrapper)
        return calls

    return _spy


@pytest.fixture
def fail(monkeypatch):
    """Make ``obj.name`` raise a connection error."""

    def _fail(obj, name):
        async def broken(*args, **kwargs):
            raise RedisConnectionError(f"{name} failed")

        monkeypatch.setattr(obj, name, broken)

    return _fail


@pytest.fixture
def pipeline_runs(monkeypatch):
    """Sizes of every executed pipeline, in order."""
    runs = []
    original = Pipeline.execute

    async def execute(self, raise_on_error=True):
        runs.append(len(self.command_stack))
        return await original(self, raise_on_error)

    monkeypatch.setattr(Pipeline, "execute", execute)
    return runs


@pytest.fixture
def fixed_creds():
    return {
        "noiseKey": {"private": b"\x01" * 32, "public": b"\x02" * 32},
        "registrationId": 4242,
        "advSecretKey": "c2VjcmV0",
        "accountSettings": {"unarchiveChats": False},
        "registered": False,
    }
