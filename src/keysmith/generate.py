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
Key generation.

Generation always starts from a fresh Ed25519 seed key. For X25519 the seed
is converted before saving; the seed itself is discarded.

Example:
    params = SaveKey(key_file="validator", encoding=EncodingType.BASE64)
    generate_key(KeyType.X25519, params)
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives.asymmetric import ed25519, x25519

from .encoding import encode_key
from .guard import ConfirmFn, ensure_writable, prompt_yes
from .keys import generate_ed25519_key, public_key_of, x25519_from_ed25519
from .persistence import (
    PUBLIC_KEY_EXTENSION,
    SaveKey,
    append_file_extension,
    load_key,
    write_to_file,
)
from .types import EncodingType, KeyType

_logger = logging.getLogger("keysmith.generate")

# Labels used in error messages and logs
_KEY_NAMES = {
    KeyType.ED25519: "ed25519",
    KeyType.X25519: "x25519",
}

_PRIVATE_KEY_CLASSES = {
    KeyType.ED25519: ed25519.Ed25519PrivateKey,
    KeyType.X25519: x25519.X25519PrivateKey,
}

_PUBLIC_KEY_CLASSES = {
    KeyType.ED25519: ed25519.Ed25519PublicKey,
    KeyType.X25519: x25519.X25519PublicKey,
}


def generate_key(
    key_type: KeyType,
    save_params: SaveKey,
    confirm: ConfirmFn = prompt_yes,
) -> None:
    """
    Generate a key of ``key_type`` and save it as a key pair.

    Both target files are checked before any key material is drawn, so a
    declined overwrite leaves the disk untouched.

    Raises:
        AbortedError: The user declined to overwrite an existing file.
        UnexpectedError: The X25519 conversion rejected the seed.
        KeyIOError: Writing either file failed.
    """
    save_params.check_key_file(confirm)

    seed_key = generate_ed25519_key()

    if key_type == KeyType.X25519:
        private_key = x25519_from_ed25519(seed_key)
    else:
        private_key = seed_key

    _logger.debug(f"Generated {_KEY_NAMES[key_type]} key")
    save_params.save_key(private_key, _KEY_NAMES[key_type])


def generate_ed25519(
    encoding: EncodingType, key_file: Union[str, Path]
) -> Tuple[ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey]:
    """Generate an Ed25519 pair without prompting and return it as loaded from disk."""
    return _generate_and_load(KeyType.ED25519, encoding, Path(key_file))


def generate_x25519(
    encoding: EncodingType, key_file: Union[str, Path]
) -> Tuple[x25519.X25519PrivateKey, x25519.X25519PublicKey]:
    """Generate an X25519 pair without prompting and return it as loaded from disk."""
    return _generate_and_load(KeyType.X25519, encoding, Path(key_file))


def _generate_and_load(key_type: KeyType, encoding: EncodingType, key_file: Path):
    params = SaveKey(key_file=key_file, encoding=encoding, assume_yes=True)
    generate_key(key_type, params)
    return (
        load_key(params.key_file, encoding, _PRIVATE_KEY_CLASSES[key_type]),
        load_key(params.public_key_file, encoding, _PUBLIC_KEY_CLASSES[key_type]),
    )


def extract_public_key(
    key_type: KeyType,
    key_file: Path,
    encoding: EncodingType,
    output_file: Optional[Path] = None,
    assume_yes: bool = False,
    confirm: ConfirmFn = prompt_yes,
) -> Path:
    """
    Re-derive the public key of a saved private key and write it out.

    Args:
        output_file: Destination, ``<key_file>.pub`` by default.

    Returns:
        The path the public key was written to.
    """
    if output_file is None:
        output_file = append_file_extension(key_file, PUBLIC_KEY_EXTENSION)
    ensure_writable(output_file, assume_yes, confirm)

    private_key = load_key(key_file, encoding, _PRIVATE_KEY_CLASSES[key_type])
    key_name = _KEY_NAMES[key_type]
    encoded = encode_key(encoding, public_key_of(private_key), key_name)
    write_to_file(output_file, key_name, encoded)
    _logger.info(f"Extracted {key_name} public key to {output_file}")
    return output_file
