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
"""structlog setup driven by the ``messagekit.logging`` configuration section.

Events are rendered by structlog and written through the stdlib
``messagekit`` logger, so configuring MessageKit never touches the
application's root logger::

    messagekit:
      logging:
        level: INFO
        format: json
        loggers:
          messagekit.messages: DEBUG
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Literal

import structlog
from pydantic import BaseModel, Field, field_validator

from messagekit.core.config import Config, config_properties

ROOT_LOGGER = "messagekit"

_HANDLER_ATTR = "_messagekit_handler"


def _normalize_level(value: str) -> str:
    level = str(value).upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"unknown log level {value!r}")
    return level


@config_properties(prefix="messagekit.logging")
class LoggingProperties(BaseModel):
    """Logging configuration (messagekit.logging.*)."""

    level: str = "INFO"
    format: Literal["console", "json"] = "console"
    loggers: dict[str, str] = Field(default_factory=dict)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        return _normalize_level(value)

    @field_validator("loggers")
    @classmethod
    def _check_logger_levels(cls, value: dict[str, str]) -> dict[str, str]:
        return {name: _normalize_level(level) for name, level in value.items()}


def configure_logging(config: Config, stream: IO[str] | None = None) -> LoggingProperties:
    """Configure structlog and the ``messagekit`` stdlib logger from *config*.

    Calling it again replaces the handler installed by the previous call.
    """
    properties = config.bind(LoggingProperties)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if properties.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.setLevel(properties.level)
    root.propagate = False

    for name, level in properties.loggers.items():
        logging.getLogger(name).setLevel(level)

    return properties
