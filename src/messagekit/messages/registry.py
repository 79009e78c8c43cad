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
"""Strategy registry — matches message strategies by scope.

Strategies are registered against dotted scopes and stored in a tree keyed
by scope segment. A lookup walks the tree one segment at a time and returns
the strategy bound at the longest registered prefix of the requested key::

    registry = Registry()
    registry.register("space", space_strategy)
    registry.register("space.rockets.parts", parts_strategy)

    registry.get("space.rockets.parts.engine")  # parts_strategy
    registry.get("space.rockets.engines")       # space_strategy
    registry.get("ocean")                       # None

Instances are not synchronised: callers that register from several threads
while others read must provide their own locking. Only creation of the
global registry is guarded.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar

import structlog

from messagekit.kernel.exceptions import InvalidArgumentException, StrategyAlreadyExistsException
from messagekit.messages.adapters.file_strategy import FileStrategy
from messagekit.messages.adapters.hash_strategy import HashStrategy
from messagekit.messages.strategy import Strategy

logger = structlog.get_logger("messagekit.messages.registry")


@dataclass
class _Node:
    """A single scope segment in the registry tree."""

    scope: str
    strategy: Strategy | None = None
    children: dict[str, _Node] = field(default_factory=dict)


class Registry:
    """Maps dotted scopes to strategies using longest-prefix matching."""

    _global: ClassVar[Registry | None] = None
    _global_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._root = _Node(scope="")
        self._strategies: dict[str, Strategy] = {}

    @classmethod
    def global_registry(cls) -> Registry:
        """Return the process-wide registry, creating it on first access."""
        if cls._global is None:
            with cls._global_lock:
                if cls._global is None:
                    cls._global = cls()
        return cls._global

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def strategies(self) -> Mapping[str, Strategy]:
        """Read-only snapshot of the ``scope -> strategy`` bindings."""
        return MappingProxyType(dict(self._strategies))

    def get(self, scope: str) -> Strategy | None:
        """Return the strategy registered at the longest prefix of *scope*."""
        _validate_scope(scope)

        node = self._root
        strategy: Strategy | None = None

        for segment in scope.split("."):
            child = node.children.get(segment)
            if child is None:
                break
            node = child
            if node.strategy is not None:
                strategy = node.strategy

        return strategy

    def __getitem__(self, scope: str) -> Strategy | None:
        return self.get(scope)

    def __contains__(self, scope: object) -> bool:
        return scope in self._strategies

    def register(
        self,
        scope: str,
        strategy: Strategy | None = None,
        force: bool = False,
        *,
        templates: Mapping[str, Any] | None = None,
        file: str | os.PathLike[str] | None = None,
    ) -> Registry:
        """Bind a strategy to *scope*.

        Exactly one of *strategy*, *templates* (builds a
        :class:`HashStrategy`) or *file* (builds a :class:`FileStrategy`)
        must be given.

        Raises:
            InvalidArgumentException: *scope* is blank, not a string or has
                an empty segment, or the strategy source is ambiguous.
            StrategyAlreadyExistsException: a strategy is already bound at
                exactly *scope* and *force* is false.
        """
        _validate_scope(scope)
        if any(not segment for segment in scope.split(".")):
            raise InvalidArgumentException(
                f"scope {scope!r} has an empty segment",
                context={"scope": scope},
            )

        if scope in self._strategies and not force:
            raise StrategyAlreadyExistsException(
                f"strategy already exists with scope {scope}",
                context={"scope": scope},
            )

        resolved = _resolve_strategy(strategy, templates, file)
        replaced = scope in self._strategies

        self._strategies[scope] = resolved
        self._add_node(scope, resolved)

        if replaced:
            logger.info("strategy_replaced", scope=scope, strategy=type(resolved).__name__)
        else:
            logger.debug("strategy_registered", scope=scope, strategy=type(resolved).__name__)
        return self

    add = register

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add_node(self, scope: str, strategy: Strategy) -> None:
        node = self._root
        for segment in scope.split("."):
            node = node.children.setdefault(segment, _Node(scope=segment))
        node.strategy = strategy


def get_global_registry() -> Registry:
    """Return the process-wide :class:`Registry` singleton."""
    return Registry.global_registry()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_scope(scope: Any) -> None:
    if scope is None:
        raise InvalidArgumentException("scope can't be blank")
    if not isinstance(scope, str):
        raise InvalidArgumentException("scope is not a String", context={"scope": scope})
    if not scope:
        raise InvalidArgumentException("scope can't be blank")


def _resolve_strategy(
    strategy: Strategy | None,
    templates: Mapping[str, Any] | None,
    file: str | os.PathLike[str] | None,
) -> Strategy:
    given = [source for source in (strategy, templates, file) if source is not None]
    if len(given) != 1:
        raise InvalidArgumentException("expected exactly one of strategy, templates or file")

    if strategy is not None:
        if not isinstance(strategy, Strategy):
            raise InvalidArgumentException(
                f"strategy is not a Strategy, got {strategy!r}",
                context={"strategy": strategy},
            )
        return strategy
    if templates is not None:
        return HashStrategy(templates)
    return FileStrategy(file)  # type: ignore[arg-type]
