import hashlib
from unittest.mock import patch

import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519, x25519

from keysmith.exceptions import UnexpectedError
from keysmith.keys import (
    generate_ed25519_key,
    key_from_bytes,
    key_to_bytes,
    public_key_of,
    x25519_from_ed25519,
)
from keysmith.types import EncodingType, KeyType


def _clamp(scalar: bytes) -> bytes:
    clamped = bytearray(scalar)
    clamped[0] &= 248
    clamped[31] &= 127
    clamped[31] |= 64
    return bytes(clamped)


# --- X25519 Conversion ---


def test_x25519_conversion_is_deterministic() -> None:
    seed = generate_ed25519_key()

    first = x25519_from_ed25519(seed)
    second = x25519_from_ed25519(seed)

    assert key_to_bytes(first) == key_to_bytes(second)


def test_x25519_conversion_is_hashed_and_clamped_seed() -> None:
    seed = ed25519.Ed25519PrivateKey.from_private_bytes(b"\x07" * 32)

    converted = x25519_from_ed25519(seed)

    expected = _clamp(hashlib.sha512(b"\x07" * 32).digest()[:32])
    assert key_to_bytes(converted) == expected


def test_x25519_conversion_failure_is_unexpected_error() -> None:
    seed = generate_ed25519_key()
    with patch("keysmith.keys.nacl.signing.SigningKey", side_effect=ValueError("bad seed")):
        with pytest.raises(UnexpectedError, match="bad seed"):
            x25519_from_ed25519(seed)


def test_converted_key_performs_exchange() -> None:
    ours = x25519_from_ed25519(generate_ed25519_key())
    theirs = x25519.X25519PrivateKey.generate()

    assert ours.exchange(theirs.public_key()) == theirs.exchange(public_key_of(ours))


# --- Raw Bytes ---


def test_key_from_bytes_rejects_unknown_class() -> None:
    with pytest.raises(UnexpectedError, match="Unsupported key class"):
        key_from_bytes(str, b"\x00" * 32)  # type: ignore[arg-type]


def test_key_from_bytes_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 32 bytes"):
        key_from_bytes(x25519.X25519PublicKey, b"\x00" * 31)


def test_key_to_bytes_rejects_non_keys() -> None:
    with pytest.raises(UnexpectedError):
        key_to_bytes(b"raw")  # type: ignore[arg-type]


def test_public_key_of_rejects_public_keys() -> None:
    public_key = generate_ed25519_key().public_key()
    with pytest.raises(UnexpectedError, match="Expected a private key"):
        public_key_of(public_key)  # type: ignore[arg-type]


# --- Selectors ---


def test_selectors_are_case_insensitive() -> None:
    assert KeyType("Ed25519") is KeyType.ED25519
    assert KeyType("X25519") is KeyType.X25519
    assert EncodingType("BCS") is EncodingType.BCS
    assert EncodingType("Base64") is EncodingType.BASE64
    with pytest.raises(ValueError):
        EncodingType("pem")
