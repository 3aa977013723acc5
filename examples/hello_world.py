"""
redis_auth_state — Hello World

Open a session's auth state, let the "protocol client" touch it,
persist it, reopen it, and clean up. Needs a Redis server on localhost
(or REDIS_URL).
"""

import asyncio

from redis_auth_state import (
    delete_hset_keys,
    delete_keys_with_pattern,
    use_redis_auth_state,
    use_redis_auth_state_with_hset,
)


async def flat_layout():
    # ──────────────────────────────────────
    #  1. Open (loads creds or creates fresh ones)
    # ──────────────────────────────────────
    state, save_creds, redis = await use_redis_auth_state({"db": 0}, "hello-flat")
    print(f"registration id: {state.creds['registrationId']}")

    # ──────────────────────────────────────
    #  2. What a protocol client would do
    # ──────────────────────────────────────
    await state.keys.set({"pre-key": {"1": {"public": b"\x05" * 32, "private": b"\x01" * 32}}})
    print(f"pre-key 1: {await state.keys.get('pre-key', ['1', '2'])}")

    state.creds["registered"] = True
    await save_creds()

    # ──────────────────────────────────────
    #  3. Reopen: same creds come back
    # ──────────────────────────────────────
    again = await use_redis_auth_state({"db": 0}, "hello-flat")
    print(f"reloaded registered={again.state.creds['registered']}")
    await again.redis.aclose()

    # ──────────────────────────────────────
    #  4. Clean up
    # ──────────────────────────────────────
    await delete_keys_with_pattern(redis, "hello-flat:*")
    await redis.aclose()


async def hashed_layout():
    state, save_creds, redis = await use_redis_auth_state_with_hset({"db": 0}, "hello-hash")
    await save_creds()
    await state.keys.set({"session": {"123.0": {"record": b"\x00\x01"}}})
    print(f"hash fields: {await redis.hkeys('authState:hello-hash')}")

    await delete_hset_keys(redis, "hello-hash")
    await redis.aclose()


async def main():
    await flat_layout()
    await hashed_layout()


if __name__ == "__main__":
    asyncio.run(main())
