"""redis_auth_state — persist messaging-client auth state in Redis.

Two layouts are available: flat keys (``use_redis_auth_state``) and one hash
per session (``use_redis_auth_state_with_hset``).  Each has a matching bulk
cleanup helper.
"""

from redis_auth_state.buffer_json import decode, encode
from redis_auth_state.cleanup import delete_hset_keys, delete_keys_with_pattern
from redis_auth_state.config import RedisConnectionSchema
from redis_auth_state.creds import AuthenticationCreds, init_auth_creds
from redis_auth_state.exceptions import AuthStateError, DecodeError, StoreError
from redis_auth_state.state import AuthenticationState, AuthStateHandle, SignalKeyStore
from redis_auth_state.store import (
    AuthStateStore,
    use_redis_auth_state,
    use_redis_auth_state_with_hset,
)

__all__ = [
    "AuthStateError",
    "AuthStateHandle",
    "AuthStateStore",
    "AuthenticationCreds",
    "AuthenticationState",
    "DecodeError",
    "RedisConnectionSchema",
    "SignalKeyStore",
    "StoreError",
    "decode",
    "delete_hset_keys",
    "delete_keys_with_pattern",
    "encode",
    "init_auth_creds",
    "use_redis_auth_state",
    "use_redis_auth_state_with_hset",
]
