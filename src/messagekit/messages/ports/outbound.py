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
"""MessageResolver protocol — port for generating user-facing messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessageResolver(Protocol):
    """Abstract message-generation interface.

    Implementations never raise for unknown keys or templates; those are
    reported as ``"Message missing: ..."`` strings. Malformed arguments
    raise ``InvalidArgumentException``.
    """

    def message(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        scope: str | None = None,
        **options: Any,
    ) -> str:
        """Generate the message for *key* within *scope*, substituting *parameters*."""
        ...
