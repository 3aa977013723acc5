# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of the maintenance
runner: one request on stdin, one response on stdout.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from redis_auth_state.config import RedisConnectionSchema
from redis_auth_state.store import DEFAULT_PREFIX

Action = Literal["delete_pattern", "delete_hash", "clear"]
Layout = Literal["flat", "hashed"]


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        action: What to do:
            ``delete_pattern`` unlinks every key matching ``pattern``;
            ``delete_hash`` removes the hash of ``namespace`` (best-effort);
            ``clear`` removes ``namespace`` under ``layout``.
        connection: Redis connection settings
        namespace: Session namespace (``delete_hash`` and ``clear``)
        layout: Storage layout of the namespace (``clear`` only)
        pattern: SCAN pattern (``delete_pattern`` only)
    """

    action: Action
    connection: RedisConnectionSchema = Field(default_factory=RedisConnectionSchema)
    namespace: str = DEFAULT_PREFIX
    layout: Layout = "flat"
    pattern: str | None = None


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the action completed
        action: Echo of the requested action
        target: Pattern or key the action applied to
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    action: str = ""
    target: str = ""
    error: str = ""
    error_type: str = ""
