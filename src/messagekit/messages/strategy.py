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
"""Strategy — abstract base for converting scoped keys into messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import structlog

from messagekit.kernel.exceptions import InvalidArgumentException, InvalidTemplateException
from messagekit.messages.templates import (
    CallableTemplate,
    FormatTemplate,
    StaticTemplate,
    Template,
    TemplateParameterError,
    build_template,
    is_template_value,
)

logger = structlog.get_logger("messagekit.messages")


def validate_key(key: Any) -> None:
    """Raise InvalidArgumentException unless *key* is a non-empty string."""
    if key is None:
        raise InvalidArgumentException("key can't be blank")
    if not isinstance(key, str):
        raise InvalidArgumentException("key is not a String", context={"key": key})
    if not key:
        raise InvalidArgumentException("key can't be blank")


def join_scope(key: Any, scope: Any) -> str:
    """Validate *key* and *scope*, returning the fully scoped key."""
    validate_key(key)
    if scope is None or scope == "":
        return key
    if not isinstance(scope, str):
        raise InvalidArgumentException("scope is not a String", context={"scope": scope})
    return f"{scope}.{key}"


def missing_message(scoped_key: str) -> str:
    return f"Message missing: {scoped_key}"


class Strategy(ABC):
    """Converts a key, scope and parameters into a user-readable message.

    Subclasses implement :meth:`template_for`. Lookups that find no template
    produce ``"Message missing: <scoped key>"`` instead of raising, and a
    format template referencing an absent parameter produces
    ``"Message missing parameters: <scoped key> key<name> not found"``.
    A parameter that cannot be formatted with its conversion (``%<fuel>d``
    given ``"full"``) produces ``"Message invalid parameters: ..."``.

    Strategies hold no mutable state once constructed and are safe to share
    between threads.
    """

    def call(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        scope: str | None = None,
        **options: Any,
    ) -> str:
        """Generate the message for *key* within the optional *scope*.

        Args:
            key: The key used to resolve the message. May itself be dotted.
            parameters: Values for the template's replacement fields, or the
                ``parameters`` argument passed to a callable template.
            scope: Namespace combined with *key* as ``"{scope}.{key}"``.
            **options: Passed through to callable templates.
        """
        scoped_key = join_scope(key, scope)
        template = self.template_for(scoped_key, **options)

        if template is None:
            logger.debug("message_missing", scoped_key=scoped_key)
            return self.missing_message(scoped_key, **options)

        return self.generate(template, scoped_key, parameters or {}, **options)

    def __call__(self, *args: Any, **kwargs: Any) -> str:
        return self.call(*args, **kwargs)

    @abstractmethod
    def template_for(self, scoped_key: str, **options: Any) -> Template | None:
        """Return the template stored for *scoped_key*, or None."""

    def missing_message(self, scoped_key: str, **options: Any) -> str:  # noqa: ARG002
        return missing_message(scoped_key)

    def missing_parameters_message(self, scoped_key: str, name: Any, **options: Any) -> str:  # noqa: ARG002
        return f"Message missing parameters: {scoped_key} key<{name}> not found"

    def invalid_parameters_message(self, scoped_key: str, name: Any, reason: str, **options: Any) -> str:  # noqa: ARG002
        return f"Message invalid parameters: {scoped_key} key<{name}> {reason}"

    def generate(
        self,
        template: Template | Any,
        scoped_key: str,
        parameters: Mapping[str, Any],
        **options: Any,
    ) -> str:
        """Render *template* with *parameters* and *options*."""
        if not isinstance(template, (StaticTemplate, FormatTemplate, CallableTemplate)):
            # Custom strategies may hand back raw strings or functions.
            if template is None or not is_template_value(template):
                raise InvalidTemplateException(
                    f"invalid template {template!r}",
                    context={"scoped_key": scoped_key},
                )
            template = build_template(template)

        if isinstance(template, StaticTemplate):
            return template.text

        if isinstance(template, FormatTemplate):
            name = template.missing_field(parameters)
            if name is not None:
                logger.debug("message_missing_parameters", scoped_key=scoped_key, parameter=name)
                return self.missing_parameters_message(scoped_key, name, **options)
            try:
                return template.render(parameters)
            except TemplateParameterError as exc:
                logger.debug(
                    "message_invalid_parameters", scoped_key=scoped_key, parameter=exc.name, reason=exc.reason
                )
                return self.invalid_parameters_message(scoped_key, exc.name, exc.reason, **options)

        return template.function(parameters=parameters, **options)
