# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for runner maintenance actions.

Orchestrates the full flow:
1. Create a Redis client from configuration
2. Run the requested cleanup action
3. Close the client if it was created here
4. Return structured result
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis_auth_state._internal.keys import hash_key, namespace_pattern
from redis_auth_state.cleanup import delete_hset_keys, delete_keys_with_pattern
from redis_auth_state.exceptions import StoreError
from redis_auth_state.schemes import FlatKeyScheme, HashedKeyScheme

from .schema import RunnerInput, RunnerOutput

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from redis_auth_state.schemes.base import KeyScheme


class ExecutionError(Exception):
    """Raised when the request cannot be executed as given."""

    pass


class Executor:
    """Executes one maintenance action against Redis.

    The executor is designed for dependency injection to support testing.
    Pass a client to the constructor to skip client creation; injected
    clients are never closed.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with a fake client:
        executor = Executor(client=FakeRedis())
    """

    def __init__(self, client: Redis | None = None) -> None:
        """Initialize executor with optional injected client.

        Args:
            client: Optional client to use instead of creating from config.
        """
        self._injected_client = client

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run the requested action.

        Args:
            input_data: Parsed runner input

        Returns:
            RunnerOutput with success/failure details

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            target = await self._execute_internal(input_data)
        except ExecutionError as e:
            return self._failure(input_data, e, "ExecutionError")
        except StoreError as e:
            return self._failure(input_data, e, "StoreError")
        except Exception as e:
            return self._failure(input_data, e, type(e).__name__)
        return RunnerOutput(success=True, action=input_data.action, target=target)

    async def _execute_internal(self, input_data: RunnerInput) -> str:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.

        Returns:
            The pattern or key that was removed
        """
        client = self._injected_client or input_data.connection.create_client()
        owns_client = self._injected_client is None

        try:
            if input_data.action == "delete_pattern":
                if not input_data.pattern:
                    raise ExecutionError("delete_pattern requires 'pattern'")
                await delete_keys_with_pattern(client, input_data.pattern)
                return input_data.pattern

            if input_data.action == "delete_hash":
                await delete_hset_keys(client, input_data.namespace)
                return hash_key(input_data.namespace)

            scheme = self._create_scheme(input_data)
            await scheme.clear(client)
            if isinstance(scheme, HashedKeyScheme):
                return scheme.hash_key
            return namespace_pattern(input_data.namespace)
        finally:
            if owns_client:
                await client.aclose()

    def _create_scheme(self, input_data: RunnerInput) -> KeyScheme:
        """Create the key scheme matching the requested layout."""
        if input_data.layout == "hashed":
            return HashedKeyScheme(input_data.namespace)
        return FlatKeyScheme(input_data.namespace)

    def _failure(self, input_data: RunnerInput, error: Exception, error_type: str) -> RunnerOutput:
        return RunnerOutput(
            success=False,
            action=input_data.action,
            error=str(error),
            error_type=error_type,
        )
