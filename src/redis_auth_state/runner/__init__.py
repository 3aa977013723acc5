# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for one-shot maintenance of stored auth state.

Usage:
    python -m redis_auth_state.runner < input.json > output.json

Exports:
    Executor: Runs a single cleanup action
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import ExecutionError, Executor
from .schema import RunnerInput, RunnerOutput

__all__ = [
    "ExecutionError",
    "Executor",
    "RunnerInput",
    "RunnerOutput",
]
