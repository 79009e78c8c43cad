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
"""Hash strategy — resolves messages from an in-memory nested mapping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from messagekit.kernel.exceptions import ParseException
from messagekit.messages.strategy import Strategy
from messagekit.messages.templates import Template, build_template, is_template_value

_ROOT_PATH = "templates"


class HashStrategy(Strategy):
    """Strategy backed by a nested mapping of scope segments to templates.

    Nested keys are flattened with dots, so the mapping::

        {"messages": {"rockets": {"launch_status": "rocket %<name>s is ready"}}}

    is accessed as ``call("launch_status", {"name": "Hellhound IV"},
    scope="messages.rockets")``. Values must be nested mappings, strings,
    callables or None; None and empty strings are dropped.
    """

    def __init__(self, templates: Mapping[str, Any] | None = None) -> None:
        if templates is None:
            templates = {}
        if not isinstance(templates, Mapping):
            raise ParseException(
                f"invalid value in {_ROOT_PATH} - expected a mapping, got {templates!r}",
                context={"scope": None},
            )
        self._templates: Mapping[str, Template] = MappingProxyType(_flatten(templates))

    @property
    def templates(self) -> Mapping[str, Template]:
        """Read-only view of the flattened ``scoped key -> template`` table."""
        return self._templates

    def template_for(self, scoped_key: str, **options: Any) -> Template | None:  # noqa: ARG002
        return self._templates.get(scoped_key)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _flatten(
    data: Mapping[Any, Any],
    scope: str | None = None,
    templates: dict[str, Template] | None = None,
) -> dict[str, Template]:
    """Validate *data* and flatten it into dot-separated keys."""
    if templates is None:
        templates = {}
    path = f"{_ROOT_PATH}.{scope}" if scope else _ROOT_PATH

    for key, value in data.items():
        if not isinstance(key, str) or not key:
            raise ParseException(
                f"invalid key in {path} - expected a non-empty string, got {key!r}",
                context={"scope": scope, "key": key},
            )

        local = f"{scope}.{key}" if scope else key

        if value is None or value == "":
            continue
        if isinstance(value, Mapping):
            _flatten(value, scope=local, templates=templates)
            continue
        if not is_template_value(value):
            raise ParseException(
                f"invalid value in {_ROOT_PATH}.{local} - expected a mapping, callable "
                f"or string, got {value!r}",
                context={"scope": local, "value": value},
            )

        if local in templates:
            raise ParseException(
                f"duplicate key in {_ROOT_PATH}.{local}",
                context={"scope": local},
            )
        templates[local] = build_template(value)

    return templates
