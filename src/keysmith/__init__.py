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
Keysmith - ed25519 / x25519 key generation tool.

Generates a key, encodes it as hex, BCS or base64, and writes it to disk as
a private/public file pair (``<key-file>`` and ``<key-file>.pub``), asking
before overwriting existing files.
"""

from .encoding import decode_key, encode_key
from .exceptions import (
    AbortedError,
    ConfigError,
    KeyIOError,
    KeysmithError,
    ParseError,
    SerializationError,
    UnexpectedError,
)
from .generate import extract_public_key, generate_ed25519, generate_key, generate_x25519
from .persistence import SaveKey, load_key
from .types import EncodingType, KeyType

__version__ = "0.1.0"
__all__ = [
    "AbortedError",
    "ConfigError",
    "EncodingType",
    "KeyIOError",
    "KeyType",
    "KeysmithError",
    "ParseError",
    "SaveKey",
    "SerializationError",
    "UnexpectedError",
    "decode_key",
    "encode_key",
    "extract_public_key",
    "generate_ed25519",
    "generate_key",
    "generate_x25519",
    "load_key",
    "__version__",
]
