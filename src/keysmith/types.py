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

"""Key family and on-disk encoding selectors."""

from enum import Enum
from typing import Any, Optional


class _CaseInsensitiveEnum(str, Enum):
    """String enum that accepts values in any letter case (``Ed25519``, ``HEX``)."""

    @classmethod
    def _missing_(cls, value: Any) -> Optional["_CaseInsensitiveEnum"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class KeyType(_CaseInsensitiveEnum):
    """Key family to produce. X25519 keys are always derived from an Ed25519 seed."""

    ED25519 = "ed25519"
    X25519 = "x25519"


class EncodingType(_CaseInsensitiveEnum):
    """Byte mapping applied to both halves of a key pair."""

    HEX = "hex"
    BCS = "bcs"
    BASE64 = "base64"
