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
Key persistence.

A key pair is stored as two files: the private key at ``<key_file>`` and the
public key at ``<key_file>.pub``, both in the same encoding. The two writes
are independent; if the public write fails the private file is left behind.
"""

import logging
from pathlib import Path
from typing import Type

from pydantic import BaseModel, ConfigDict

from .encoding import decode_key, encode_key
from .exceptions import KeyIOError
from .guard import ConfirmFn, ensure_writable, prompt_yes
from .keys import Key, PrivateKey, public_key_of
from .types import EncodingType

_logger = logging.getLogger("keysmith.persistence")

PUBLIC_KEY_EXTENSION = ".pub"


def append_file_extension(path: Path, extension: str) -> Path:
    """Append ``extension`` to the full file name (``key`` -> ``key.pub``)."""
    return path.with_name(path.name + extension)


class SaveKey(BaseModel):
    """Where and how to persist a key pair."""

    model_config = ConfigDict(frozen=True)

    key_file: Path
    encoding: EncodingType = EncodingType.HEX
    assume_yes: bool = False

    @property
    def public_key_file(self) -> Path:
        return append_file_extension(self.key_file, PUBLIC_KEY_EXTENSION)

    def check_key_file(self, confirm: ConfirmFn = prompt_yes) -> None:
        """Guard both files before anything is written."""
        ensure_writable(self.key_file, self.assume_yes, confirm)
        ensure_writable(self.public_key_file, self.assume_yes, confirm)

    def save_key(self, key: PrivateKey, key_name: str) -> None:
        """Encode ``key`` and its public key and write them to disk."""
        encoded_private_key = encode_key(self.encoding, key, key_name)
        encoded_public_key = encode_key(self.encoding, public_key_of(key), key_name)

        write_to_file(self.key_file, key_name, encoded_private_key)
        write_to_file(self.public_key_file, key_name, encoded_public_key)
        _logger.info(
            f"Saved {key_name} key pair to {self.key_file} and {self.public_key_file}"
        )


def write_to_file(key_file: Path, key_name: str, encoded_key: bytes) -> None:
    """Create or truncate ``key_file`` and write ``encoded_key`` to it."""
    try:
        with open(key_file, "wb") as f:
            f.write(encoded_key)
    except OSError as e:
        raise KeyIOError(key_name, f"{key_file}: {e}") from e
    _logger.debug(f"Wrote {len(encoded_key)} bytes to {key_file}")


def load_key(path: Path, encoding: EncodingType, key_class: Type[Key]) -> Key:
    """
    Load a key of ``key_class`` from ``path``.

    The encoding is not stored in the file and must match the one used
    when the key was saved.

    Raises:
        KeyIOError: If the file cannot be read.
        ParseError: Malformed Hex or Base64 content.
        SerializationError: Malformed BCS content.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise KeyIOError("Key", f"{path}: {e}") from e
    _logger.debug(f"Loaded {len(data)} bytes from {path}")
    return decode_key(data, encoding, key_class)
