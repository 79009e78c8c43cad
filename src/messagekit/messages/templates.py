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
"""Message template kinds — static text, format strings and callables.

Raw template values are classified exactly once with :func:`build_template`.
A string containing at least one format directive becomes a
:class:`FormatTemplate`::

    "rocket %<name>s is ready to launch"     # formatted reference
    "fuel at %<level>.1f percent"            # flags, width and precision
    "launching from %{pad}"                  # plain substitution
    "100%% ready"                            # literal percent sign

A bare ``%<name>`` reference formats like ``%<name>s``. Names are looked up
directly in the call parameters; there is no attribute or index traversal.
Any other string is a :class:`StaticTemplate` and is returned verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

TemplateFunction = Callable[..., str]

_CONVERSIONS = "diouxXeEfFgGcrsa"

_DIRECTIVE_RE = re.compile(
    r"%(?:"
    r"(?P<percent>%)"
    rf"|<(?P<name>\w+)>(?P<spec>[-+0#]*\d*(?:\.\d+)?[{_CONVERSIONS}]?)"
    r"|\{(?P<plain>\w+)\}"
    r")"
)


class TemplateParameterError(ValueError):
    """A parameter could not be formatted into a template."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


@dataclass(frozen=True)
class StaticTemplate:
    """Literal text, rendered verbatim regardless of parameters."""

    text: str


@dataclass(frozen=True)
class FormatTemplate:
    """Text with named format directives filled from the call parameters."""

    text: str
    fields: tuple[str, ...]

    def missing_field(self, parameters: Mapping[str, Any]) -> str | None:
        """Return the first referenced field absent from *parameters*."""
        for name in self.fields:
            if name not in parameters:
                return name
        return None

    def render(self, parameters: Mapping[str, Any]) -> str:
        """Substitute every directive.

        Raises:
            TemplateParameterError: a referenced parameter is absent or
                cannot be formatted with its conversion.
        """

        def _replace(match: re.Match[str]) -> str:
            if match.group("percent") is not None:
                return "%"

            plain = match.group("plain")
            name = plain if plain is not None else match.group("name")
            if name not in parameters:
                raise TemplateParameterError(name, "not found")
            value = parameters[name]

            if plain is not None:
                return str(value)

            spec = match.group("spec")
            if not spec or spec[-1] not in _CONVERSIONS:
                spec += "s"
            try:
                return f"%{spec}" % (value,)
            except (TypeError, ValueError, OverflowError) as exc:
                raise TemplateParameterError(name, str(exc)) from exc

        return _DIRECTIVE_RE.sub(_replace, self.text)


@dataclass(frozen=True)
class CallableTemplate:
    """A function called as ``function(parameters=..., **options)``."""

    function: TemplateFunction


Template = StaticTemplate | FormatTemplate | CallableTemplate


def is_template_value(value: Any) -> bool:
    """Whether *value* can be turned into a template by :func:`build_template`."""
    return isinstance(value, (str, StaticTemplate, FormatTemplate, CallableTemplate)) or callable(value)


def build_template(value: str | TemplateFunction | Template) -> Template:
    """Classify a raw string or callable into its template kind."""
    if isinstance(value, (StaticTemplate, FormatTemplate, CallableTemplate)):
        return value
    if isinstance(value, str):
        fields = _directive_fields(value)
        if fields is None:
            return StaticTemplate(value)
        return FormatTemplate(value, fields)
    if callable(value):
        return CallableTemplate(value)
    raise TypeError(f"expected a string or callable template, got {value!r}")


def _directive_fields(text: str) -> tuple[str, ...] | None:
    """Names referenced by the directives in *text*, or None when there are no directives."""
    matches = list(_DIRECTIVE_RE.finditer(text))
    if not matches:
        return None

    names: list[str] = []
    for match in matches:
        name = match.group("name") or match.group("plain")
        if name and name not in names:
            names.append(name)
    return tuple(names)
