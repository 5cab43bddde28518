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
Keysmith defaults.

Values come from, highest priority first: an optional YAML file passed with
``--config``, ``KEYSMITH_*`` environment variables, a ``.env`` file, and the
defaults below. Command line flags override all of them.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .types import EncodingType, KeyType

_logger = logging.getLogger("keysmith.config")


class KeysmithSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KEYSMITH_", env_file=".env", extra="ignore"
    )

    key_type: KeyType = KeyType.ED25519
    encoding: EncodingType = EncodingType.HEX
    assume_yes: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_settings(config_file: Optional[Union[str, Path]] = None) -> KeysmithSettings:
    """
    Build settings from the environment and an optional YAML file.

    Raises:
        ConfigError: If the file cannot be read, names an unknown setting,
            or a value is invalid.
    """
    overrides: Dict[str, Any] = {}
    if config_file is not None:
        overrides = _read_yaml(Path(config_file))
        unknown = sorted(str(key) for key in overrides if key not in KeysmithSettings.model_fields)
        if unknown:
            raise ConfigError(
                f"Unknown setting in config file {config_file}: {unknown[0]}",
                config_key=unknown[0],
            )
        _logger.debug(f"Loaded config overrides from {config_file}: {sorted(overrides)}")

    try:
        return KeysmithSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigError(
            f"Invalid configuration: {first.get('msg')}", config_key=key or None
        ) from e
