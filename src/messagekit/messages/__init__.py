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
"""MessageKit Messages — hierarchical message-template resolution.

Register strategies against dotted scopes, then generate messages::

    from messagekit.messages import HashStrategy, Messages, Registry

    registry = Registry()
    templates = {"space": {"rockets": {"ready": "rocket %<name>s is go"}}}
    registry.register("space.rockets", HashStrategy(templates))
    Messages(registry).message("ready", {"name": "Hellhound IV"}, scope="space.rockets")
"""

from messagekit.messages.adapters.file_strategy import FileStrategy
from messagekit.messages.adapters.hash_strategy import HashStrategy
from messagekit.messages.configuration import (
    MessageSourceProperties,
    MessagesProperties,
    configure_messages,
    configure_registry,
)
from messagekit.messages.facade import Messages
from messagekit.messages.ports.outbound import MessageResolver
from messagekit.messages.registry import Registry, get_global_registry
from messagekit.messages.strategy import Strategy
from messagekit.messages.templates import (
    CallableTemplate,
    FormatTemplate,
    StaticTemplate,
    Template,
    TemplateParameterError,
    build_template,
)

__all__ = [
    # Facade
    "MessageResolver",
    "Messages",
    # Registry
    "Registry",
    "get_global_registry",
    # Strategies
    "FileStrategy",
    "HashStrategy",
    "Strategy",
    # Templates
    "CallableTemplate",
    "FormatTemplate",
    "StaticTemplate",
    "Template",
    "TemplateParameterError",
    "build_template",
    # Configuration
    "MessageSourceProperties",
    "MessagesProperties",
    "configure_messages",
    "configure_registry",
]
