# Copyright 2026 BadCompany
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Key material helpers.

Two named constructors produce the private keys this tool persists:

- ``generate_ed25519_key()`` draws a fresh Ed25519 seed from the OS CSPRNG.
- ``x25519_from_ed25519()`` converts an Ed25519 seed into an X25519 scalar
  (SHA-512 of the seed, first 32 bytes, clamped).

Both return ``cryptography`` key objects, so the rest of the package only
needs the raw-byte export/import helpers below.
"""

from typing import Type, Union

import nacl.exceptions
import nacl.signing
from cryptography.hazmat.primitives.asymmetric import ed25519, x25519

from .exceptions import UnexpectedError

PrivateKey = Union[ed25519.Ed25519PrivateKey, x25519.X25519PrivateKey]
PublicKey = Union[ed25519.Ed25519PublicKey, x25519.X25519PublicKey]
Key = Union[PrivateKey, PublicKey]

# Every supported key serializes to exactly 32 raw bytes
KEY_LENGTH = 32

_PRIVATE_KEY_CLASSES = (ed25519.Ed25519PrivateKey, x25519.X25519PrivateKey)
_PUBLIC_KEY_CLASSES = (ed25519.Ed25519PublicKey, x25519.X25519PublicKey)

_LOADERS = {
    ed25519.Ed25519PrivateKey: ed25519.Ed25519PrivateKey.from_private_bytes,
    ed25519.Ed25519PublicKey: ed25519.Ed25519PublicKey.from_public_bytes,
    x25519.X25519PrivateKey: x25519.X25519PrivateKey.from_private_bytes,
    x25519.X25519PublicKey: x25519.X25519PublicKey.from_public_bytes,
}


def generate_ed25519_key() -> ed25519.Ed25519PrivateKey:
    """Draw a fresh Ed25519 seed key from system entropy."""
    return ed25519.Ed25519PrivateKey.generate()


def x25519_from_ed25519(seed_key: ed25519.Ed25519PrivateKey) -> x25519.X25519PrivateKey:
    """
    Derive an X25519 private key from an Ed25519 seed key.

    The conversion is deterministic: the same seed always yields the same
    X25519 scalar.

    Raises:
        UnexpectedError: If the seed bytes are rejected by the conversion.
    """
    seed = key_to_bytes(seed_key)
    try:
        curve_key = nacl.signing.SigningKey(seed).to_curve25519_private_key()
    except (nacl.exceptions.CryptoError, ValueError, TypeError) as e:
        raise UnexpectedError(f"Failed to convert ed25519 key to x25519: {e}") from e
    return x25519.X25519PrivateKey.from_private_bytes(curve_key.encode())


def is_private_key(key: object) -> bool:
    return isinstance(key, _PRIVATE_KEY_CLASSES)


def public_key_of(key: PrivateKey) -> PublicKey:
    """Derive the public half of a private key."""
    if not is_private_key(key):
        raise UnexpectedError(f"Expected a private key, got {type(key).__name__}")
    return key.public_key()


def key_to_bytes(key: Key) -> bytes:
    """Export the raw 32-byte representation of any supported key."""
    if isinstance(key, _PRIVATE_KEY_CLASSES):
        return key.private_bytes_raw()
    if isinstance(key, _PUBLIC_KEY_CLASSES):
        return key.public_bytes_raw()
    raise UnexpectedError(f"Unsupported key object: {type(key).__name__}")


def key_from_bytes(key_class: Type[Key], data: bytes) -> Key:
    """
    Rebuild a key of ``key_class`` from raw bytes.

    Raises:
        ValueError: If ``data`` is not a valid key of that class.
        UnexpectedError: If ``key_class`` is not a supported key class.
    """
    loader = _LOADERS.get(key_class)
    if loader is None:
        raise UnexpectedError(f"Unsupported key class: {key_class.__name__}")
    if len(data) != KEY_LENGTH:
        raise ValueError(f"Expected {KEY_LENGTH} bytes, found {len(data)}")
    return loader(data)
