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
"""Unified exception hierarchy for MessageKit.

All library exceptions inherit from MessageKitException, so callers can
catch a single base class or target a specific failure.

Categories:
- ValidationException: malformed arguments and malformed template sources
- ConflictException: duplicate strategy registrations
- InfrastructureException: unreadable or unsupported template files
- InvalidTemplateException: a stored template of an unknown kind
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class MessageKitException(Exception):
    """Base exception for all MessageKit errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "PARSE_ERROR").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(MessageKitException):
    """Input or source data failed validation."""


class InvalidArgumentException(ValidationException):
    """A public operation received a nil, blank or wrongly typed argument."""

    default_code = "INVALID_ARGUMENT"


class ParseException(ValidationException):
    """A template source has a malformed shape or could not be parsed."""

    default_code = "PARSE_ERROR"


# =============================================================================
# Conflict Exceptions
# =============================================================================


class ConflictException(MessageKitException):
    """Operation conflicts with current state."""


class StrategyAlreadyExistsException(ConflictException):
    """A strategy is already registered at the exact requested scope."""

    default_code = "STRATEGY_ALREADY_EXISTS"


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(MessageKitException):
    """Filesystem failures while loading template sources."""


class FileException(InfrastructureException):
    """Templates file is missing, unreadable or has an unknown extension."""

    default_code = "FILE_ERROR"


# =============================================================================
# Programming Errors
# =============================================================================


class InvalidTemplateException(MessageKitException):
    """A stored template is not a static, format or callable template."""

    default_code = "INVALID_TEMPLATE"
