"""Physical layouts for auth state inside Redis."""

from redis_auth_state.schemes.base import KeyScheme
from redis_auth_state.schemes.flat import FlatKeyScheme
from redis_auth_state.schemes.hashed import HashedKeyScheme

__all__ = ["FlatKeyScheme", "HashedKeyScheme", "KeyScheme"]
