# Copyright 2026 Firefly Software Solutions Inc.
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
"""Dot-notation configuration for MessageKit, read from a dict, YAML or TOML."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from messagekit.kernel.exceptions import InvalidArgumentException, ParseException

M = TypeVar("M", bound=BaseModel)

_CONFIG_PROPERTIES_ATTR = "__messagekit_config_prefix__"

_ENV_PREFIX = "MESSAGEKIT_"


def config_properties(prefix: str) -> Callable[[type[M]], type[M]]:
    """Mark a pydantic model as bound to the configuration section at *prefix*.

    Usage:
        @config_properties(prefix="messagekit.messages")
        class MessagesProperties(BaseModel):
            base_path: str = "."
    """

    def decorator(cls: type[M]) -> type[M]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Read-only dot-notation view over nested configuration data.

    ``get`` checks ``MESSAGEKIT_*`` environment variables before the data,
    so ``messagekit.messages.base-path`` can be overridden with
    ``MESSAGEKIT_MESSAGES_BASE_PATH``.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load a ``.yaml``/``.yml`` or ``.toml`` file. A missing file gives an empty config."""
        path = Path(path)
        if not path.is_file():
            return cls()

        try:
            if path.suffix.lower() == ".toml":
                with open(path, "rb") as f:
                    data = tomllib.load(f)
            else:
                with open(path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
            raise ParseException(
                f"unable to parse configuration file {path} - {exc}",
                context={"file_name": str(path)},
            ) from exc

        if not isinstance(data, dict):
            raise ParseException(
                f"configuration file {path} must contain a mapping",
                context={"file_name": str(path)},
            )
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first."""
        # messagekit.messages.base-path -> MESSAGEKIT_MESSAGES_BASE_PATH
        env_base = key.removeprefix("messagekit.")
        env_key = _ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(part)
            if current is None:
                return default
        return current

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a nested dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}

    def bind(self, model_cls: type[M]) -> M:
        """Validate the section named by a @config_properties model into an instance."""
        prefix = getattr(model_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise InvalidArgumentException(
                f"{model_cls.__name__} is not decorated with @config_properties",
                context={"model": model_cls.__name__},
            )

        try:
            return model_cls.model_validate(self.get_section(prefix))
        except ValidationError as exc:
            raise InvalidArgumentException(
                f"configuration validation failed for '{model_cls.__name__}' (prefix='{prefix}'):\n{exc}",
                context={"model": model_cls.__name__, "prefix": prefix},
            ) from exc
