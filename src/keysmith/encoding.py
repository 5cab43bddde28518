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
Key encoding engine.

Maps key objects to and from their on-disk bytes:

- ``hex``: upper-case hexadecimal ASCII of the raw key bytes.
- ``base64``: standard Base64 ASCII of the raw key bytes.
- ``bcs``: the key as a BCS byte vector (ULEB128 length, then raw bytes).

Pure functions only; callers performing file I/O raise their own errors.
"""

import base64
import binascii
from typing import Type

from aptos_sdk.bcs import Deserializer, Serializer

from .exceptions import ParseError, SerializationError, UnexpectedError
from .keys import Key, key_from_bytes, key_to_bytes
from .types import EncodingType

__all__ = ["encode_key", "decode_key"]


def encode_key(encoding: EncodingType, key: Key, key_name: str) -> bytes:
    """
    Encode ``key`` with ``encoding``.

    Raises:
        SerializationError: If BCS serialization fails.
    """
    raw = key_to_bytes(key)
    if encoding == EncodingType.HEX:
        return raw.hex().upper().encode("ascii")
    if encoding == EncodingType.BCS:
        return _bcs_encode(raw, key_name)
    if encoding == EncodingType.BASE64:
        return base64.b64encode(raw)
    raise UnexpectedError(f"Unknown encoding: {encoding!r}")


def decode_key(
    data: bytes,
    encoding: EncodingType,
    key_class: Type[Key],
    key_name: str = "Key",
) -> Key:
    """
    Decode bytes produced by ``encode_key`` back into a ``key_class`` key.

    Raises:
        ParseError: Malformed Hex or Base64 text, or a wrong key length.
        SerializationError: Malformed BCS input.
    """
    if encoding == EncodingType.BCS:
        raw = _bcs_decode(data, key_name)
        try:
            return key_from_bytes(key_class, raw)
        except ValueError as e:
            raise SerializationError(key_name, str(e)) from e

    text = _to_text(data, key_name)
    if encoding == EncodingType.HEX:
        raw = _hex_decode(text, key_name)
    elif encoding == EncodingType.BASE64:
        raw = _base64_decode(text, key_name)
    else:
        raise UnexpectedError(f"Unknown encoding: {encoding!r}")

    try:
        return key_from_bytes(key_class, raw)
    except ValueError as e:
        raise ParseError(key_name, str(e)) from e


def _to_text(data: bytes, key_name: str) -> str:
    try:
        return data.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise ParseError(key_name, f"key file is not valid UTF-8 text: {e}") from e


def _hex_decode(text: str, key_name: str) -> bytes:
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise ParseError(key_name, f"invalid hex: {e}") from e


def _base64_decode(text: str, key_name: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ParseError(key_name, f"invalid base64: {e}") from e


def _bcs_encode(raw: bytes, key_name: str) -> bytes:
    serializer = Serializer()
    try:
        serializer.to_bytes(raw)
    except Exception as e:
        raise SerializationError(key_name, str(e)) from e
    return serializer.output()


def _bcs_decode(data: bytes, key_name: str) -> bytes:
    deserializer = Deserializer(data)
    try:
        raw = deserializer.to_bytes()
    except Exception as e:
        # aptos_sdk.bcs reports truncated input as a plain Exception
        raise SerializationError(key_name, str(e)) from e
    if deserializer.remaining() != 0:
        raise SerializationError(
            key_name, f"{deserializer.remaining()} trailing bytes after key"
        )
    return raw
