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
"""Tests for HashStrategy — in-memory nested templates."""

import pytest

from messagekit.kernel.exceptions import ParseException
from messagekit.messages.adapters.hash_strategy import HashStrategy
from messagekit.messages.templates import CallableTemplate, FormatTemplate, StaticTemplate


def _launch(parameters, **options):
    return f"{parameters['name']} lifts off" + (" on time" if options.get("on_time") else "")


TEMPLATES = {
    "module_name": "Console Space Program",
    "messages": {
        "errors": {"failure": "not going to space"},
        "rockets": {
            "launch_status": "rocket %<name>s is ready to launch",
            "liftoff": _launch,
        },
    },
}


class TestFlattening:
    def test_flattens_nested_keys(self):
        strategy = HashStrategy(TEMPLATES)
        assert set(strategy.templates) == {
            "module_name",
            "messages.errors.failure",
            "messages.rockets.launch_status",
            "messages.rockets.liftoff",
        }

    def test_classifies_templates(self):
        templates = HashStrategy(TEMPLATES).templates
        assert templates["module_name"] == StaticTemplate("Console Space Program")
        assert isinstance(templates["messages.rockets.launch_status"], FormatTemplate)
        assert templates["messages.rockets.liftoff"] == CallableTemplate(_launch)

    def test_drops_none_and_empty_values(self):
        strategy = HashStrategy({"a": None, "b": "", "c": {}, "d": {"e": None}, "f": "kept"})
        assert dict(strategy.templates) == {"f": StaticTemplate("kept")}

    def test_none_and_empty_mapping(self):
        assert dict(HashStrategy(None).templates) == {}
        assert dict(HashStrategy({}).templates) == {}

    def test_templates_are_read_only(self):
        strategy = HashStrategy(TEMPLATES)
        with pytest.raises(TypeError):
            strategy.templates["module_name"] = StaticTemplate("changed")  # type: ignore[index]

    def test_does_not_share_state_with_source_mapping(self):
        source = {"rockets": {"ready": "go for launch"}}
        strategy = HashStrategy(source)
        source["rockets"]["ready"] = "scrubbed"
        assert strategy.call("ready", scope="rockets") == "go for launch"

    def test_key_order_does_not_matter(self):
        first = HashStrategy({"a": {"x": "1", "y": "2"}, "b": "3"})
        second = HashStrategy({"b": "3", "a": {"y": "2", "x": "1"}})
        assert first.templates == second.templates

    def test_dotted_keys_are_kept(self):
        strategy = HashStrategy({"sleeping_king.tools.assertions.blank": "must be nil or empty"})
        assert strategy.call("blank", scope="sleeping_king.tools.assertions") == "must be nil or empty"


class TestValidation:
    def test_none_key(self):
        with pytest.raises(ParseException, match=r"invalid key in templates\.x - expected a non-empty string, got None") as exc_info:
            HashStrategy({"x": {None: "bad"}})
        assert exc_info.value.context["scope"] == "x"

    def test_non_string_key_at_root(self):
        with pytest.raises(ParseException, match=r"invalid key in templates - "):
            HashStrategy({1: "one"})

    def test_empty_key(self):
        with pytest.raises(ParseException, match=r"invalid key in templates\.messages"):
            HashStrategy({"messages": {"": "blank"}})

    def test_sequence_value(self):
        message = (
            r"invalid value in templates\.messages\.errors - expected a mapping, callable "
            r"or string, got \['not going to space', None\]"
        )
        with pytest.raises(ParseException, match=message):
            HashStrategy({"messages": {"errors": ["not going to space", None]}})

    def test_number_value(self):
        with pytest.raises(ParseException, match=r"templates\.rockets\.count"):
            HashStrategy({"rockets": {"count": 3}})

    def test_duplicate_flattened_key(self):
        with pytest.raises(ParseException, match=r"duplicate key in templates\.rockets\.ready") as exc_info:
            HashStrategy({"rockets.ready": "go", "rockets": {"ready": "no go"}})
        assert exc_info.value.context["scope"] == "rockets.ready"

    def test_non_mapping_root(self):
        with pytest.raises(ParseException, match="expected a mapping"):
            HashStrategy(["not", "a", "mapping"])  # type: ignore[arg-type]


class TestCall:
    def test_scoped_lookup(self):
        strategy = HashStrategy({"rockets": {"ready": "go for launch"}})
        assert strategy.call("ready", scope="rockets") == "go for launch"

    def test_missing_scoped_lookup(self):
        strategy = HashStrategy({"rockets": {"ready": "go for launch"}})
        assert strategy.call("missing", scope="rockets") == "Message missing: rockets.missing"

    def test_full_path_and_scoped_lookup_agree(self):
        strategy = HashStrategy(TEMPLATES)
        assert strategy.call("messages.errors.failure") == strategy.call("failure", scope="messages.errors")

    def test_parent_scope_is_not_a_template(self):
        strategy = HashStrategy(TEMPLATES)
        assert strategy.call("messages.errors") == "Message missing: messages.errors"

    def test_format_template(self):
        strategy = HashStrategy(TEMPLATES)
        result = strategy.call("launch_status", {"name": "Hellhound IV"}, scope="messages.rockets")
        assert result == "rocket Hellhound IV is ready to launch"

    def test_callable_template(self):
        strategy = HashStrategy(TEMPLATES)
        result = strategy.call("liftoff", {"name": "Hellhound IV"}, scope="messages.rockets", on_time=True)
        assert result == "Hellhound IV lifts off on time"

    def test_format_template_missing_parameter(self):
        strategy = HashStrategy({"status": "rocket %<name>s is ready"})
        assert strategy.call("status") == "Message missing parameters: status key<name> not found"

    def test_format_template_invalid_parameter(self):
        strategy = HashStrategy({"status": "fuel %<level>d percent"})
        assert strategy.call("status", {"level": "full"}).startswith("Message invalid parameters: status key<level> ")
