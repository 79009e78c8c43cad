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
"""Messages subsystem configuration.

:func:`configure_messages` is the usual entry point: it applies the
``messagekit.logging`` section, then registers the template sources
declared under ``messagekit.messages``::

    messagekit:
      messages:
        base-path: config/messages
        sources:
          - scope: space
            file: space.yml
          - scope: space.rockets
            templates:
              ready: go for launch
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator

from messagekit.core.config import Config, config_properties
from messagekit.logging.configuration import configure_logging
from messagekit.messages.facade import Messages
from messagekit.messages.registry import Registry, get_global_registry

logger = structlog.get_logger("messagekit.messages.configuration")


class MessageSourceProperties(BaseModel):
    """A single template source bound to a scope."""

    scope: str = Field(min_length=1)
    file: str | None = None
    templates: dict[str, Any] | None = None
    force: bool = False

    @model_validator(mode="after")
    def _require_single_source(self) -> MessageSourceProperties:
        if (self.file is None) == (self.templates is None):
            raise ValueError(f"source '{self.scope}' must define exactly one of 'file' or 'templates'")
        return self


@config_properties(prefix="messagekit.messages")
class MessagesProperties(BaseModel):
    """Configuration for the messages subsystem (messagekit.messages.*)."""

    model_config = ConfigDict(populate_by_name=True)

    base_path: str = Field(default=".", alias="base-path")
    sources: list[MessageSourceProperties] = Field(default_factory=list)


def configure_registry(config: Config, registry: Registry | None = None) -> Registry:
    """Register every configured template source on *registry* (global by default)."""
    properties = config.bind(MessagesProperties)
    target = registry if registry is not None else get_global_registry()
    base_path = Path(str(config.get("messagekit.messages.base-path", properties.base_path)))

    for source in properties.sources:
        if source.file is not None:
            path = Path(source.file)
            if not path.is_absolute():
                path = base_path / path
            target.register(source.scope, file=path, force=source.force)
        else:
            target.register(source.scope, templates=source.templates, force=source.force)

    logger.info("messages_configured", sources=len(properties.sources), base_path=str(base_path))
    return target


def configure_messages(config: Config, registry: Registry | None = None) -> Messages:
    """Set up logging and configured sources, returning a facade over the registry."""
    configure_logging(config)
    return Messages(configure_registry(config, registry))
