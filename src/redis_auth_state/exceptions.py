"""Custom exceptions for the redis_auth_state package."""

from __future__ import annotations


class AuthStateError(Exception):
    """Base exception for all auth-state persistence errors."""


class StoreError(AuthStateError):
    """Raised when a Redis command fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class DecodeError(AuthStateError, ValueError):
    """Raised when a stored value cannot be decoded."""

    def __init__(self, location: str, detail: str = "") -> None:
        self.location = location
        msg = f"Cannot decode value stored at '{location}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
