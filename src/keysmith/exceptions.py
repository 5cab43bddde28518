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
Keysmith Exceptions.

Defines the hierarchy of errors raised while generating, encoding and
persisting keys. Every error propagates to the command line entry point,
which reports it and exits non-zero.
"""

from typing import Any, Optional, Dict


class KeysmithError(Exception):
    """Base class for all Keysmith errors.

    Attributes:
        message: A human-readable error message.
        context: Optional dictionary containing debugging metadata.
    """
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class AbortedError(KeysmithError):
    """Raised when the user declines to overwrite an existing key file."""
    def __init__(self, message: str = "Aborted command") -> None:
        super().__init__(message)


class KeyIOError(KeysmithError):
    """Raised when reading or writing a key file fails.

    Attributes:
        key_name: Label of the key being read or written.
        detail: The underlying operating system error message.
    """
    def __init__(self, key_name: str, detail: str) -> None:
        super().__init__(
            f"Unable to read or write {key_name} key file: {detail}",
            context={"key_name": key_name},
        )
        self.key_name = key_name
        self.detail = detail


class ParseError(KeysmithError):
    """Raised when Hex or Base64 key text is malformed.

    Attributes:
        parse_context: What was being parsed (e.g. 'Key').
        detail: Why parsing failed.
    """
    def __init__(self, parse_context: str, detail: str) -> None:
        super().__init__(
            f"Unable to parse {parse_context}: {detail}",
            context={"parsing": parse_context},
        )
        self.parse_context = parse_context
        self.detail = detail


class SerializationError(KeysmithError):
    """Raised when a key cannot be BCS encoded or decoded."""
    def __init__(self, key_name: str, detail: str) -> None:
        super().__init__(
            f"BCS serialization of {key_name} failed: {detail}",
            context={"key_name": key_name},
        )
        self.key_name = key_name
        self.detail = detail


class UnexpectedError(KeysmithError):
    """Raised for key conversion failures and other unclassified faults."""
    def __init__(self, detail: str) -> None:
        super().__init__(f"Unexpected error: {detail}")
        self.detail = detail


class ConfigError(KeysmithError):
    """Raised when configuration is invalid or unreadable.

    Attributes:
        config_key: The name of the configuration setting that caused the error.
    """
    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, context=ctx)
        self.config_key = config_key
