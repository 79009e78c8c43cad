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
"""Messages — generates configured, user-readable strings from a registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from messagekit.messages.registry import Registry, get_global_registry
from messagekit.messages.strategy import join_scope, missing_message

logger = structlog.get_logger("messagekit.messages")


class Messages:
    """Finds the strategy for a scoped key and delegates message generation to it.

    Uses the global registry unless one is given.
    """

    def __init__(self, registry: Registry | None = None) -> None:
        self._registry = registry if registry is not None else get_global_registry()

    @property
    def registry(self) -> Registry:
        return self._registry

    def message(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        scope: str | None = None,
        **options: Any,
    ) -> str:
        scoped_key = join_scope(key, scope)
        strategy = self._registry.get(scoped_key)

        if strategy is None:
            logger.debug("message_missing", scoped_key=scoped_key, reason="no_strategy")
            return missing_message(scoped_key)

        return strategy.call(key, parameters=parameters, scope=scope, **options)
