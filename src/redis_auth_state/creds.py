"""Default credential bundle for a fresh session.

Mirrors the protocol library's ``initAuthCreds``: Curve25519 key pairs are raw
32-byte ``{"private", "public"}`` mappings and every field name is camelCase,
so a bundle produced here can be picked up by the JavaScript client and vice
versa.
"""

from __future__ import annotations

import base64
import secrets
from collections.abc import Callable
from typing import Any

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

AuthenticationCreds = dict[str, Any]
KeyPair = dict[str, bytes]

# (identity private key, message) -> signature
PreKeySigner = Callable[[bytes, bytes], bytes]

_KEY_BUNDLE_TYPE = b"\x05"


def generate_key_pair() -> KeyPair:
    """Return a fresh Curve25519 key pair."""
    private_key = X25519PrivateKey.generate()
    return {
        "private": private_key.private_bytes_raw(),
        "public": private_key.public_key().public_bytes_raw(),
    }


def generate_registration_id() -> int:
    return secrets.randbits(16) & 16383


def signed_key_pair(
    identity_key: KeyPair,
    key_id: int,
    signer: PreKeySigner | None = None,
) -> dict[str, Any]:
    """Create a pre-key signed by *identity_key*.

    The signed message is the type-prefixed public key.  Without a *signer*
    the signature is left empty for the protocol client to fill in.
    """
    pre_key = generate_key_pair()
    message = _KEY_BUNDLE_TYPE + pre_key["public"]
    signature = signer(identity_key["private"], message) if signer else b""
    return {"keyPair": pre_key, "signature": signature, "keyId": key_id}


def init_auth_creds(*, signer: PreKeySigner | None = None) -> AuthenticationCreds:
    """Build a brand-new credential bundle.

    The signed pre-key must carry an XEdDSA signature made with the identity
    key.  This module does not implement XEdDSA, so pass a *signer* (for
    example one built on the ``xeddsa`` package) or use the protocol
    client's own initializer.  Without a signer ``signedPreKey.signature``
    is ``b""`` and the server will refuse to register the session.
    """
    identity_key = generate_key_pair()
    return {
        "noiseKey": generate_key_pair(),
        "pairingEphemeralKeyPair": generate_key_pair(),
        "signedIdentityKey": identity_key,
        "signedPreKey": signed_key_pair(identity_key, 1, signer),
        "registrationId": generate_registration_id(),
        "advSecretKey": base64.b64encode(secrets.token_bytes(32)).decode("ascii"),
        "processedHistoryMessages": [],
        "nextPreKeyId": 1,
        "firstUnuploadedPreKeyId": 1,
        "accountSyncCounter": 0,
        "accountSettings": {"unarchiveChats": False},
        "registered": False,
    }
