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
"""Tests for template classification and directive rendering."""

import pytest

from messagekit.messages.templates import (
    CallableTemplate,
    FormatTemplate,
    StaticTemplate,
    TemplateParameterError,
    build_template,
)


class TestBuildTemplate:
    def test_plain_string_is_static(self):
        assert build_template("not going to space") == StaticTemplate("not going to space")

    def test_string_with_directives_is_format(self):
        template = build_template("rocket %<name>s carries %<fuel>d kg")
        assert isinstance(template, FormatTemplate)
        assert template.fields == ("name", "fuel")

    def test_plain_and_bare_directives_are_fields(self):
        template = build_template("%{pad} hosts %<name> and %<name>s")
        assert template.fields == ("pad", "name")

    def test_braces_are_static(self):
        assert build_template("{name} and {{literal}}") == StaticTemplate("{name} and {{literal}}")

    def test_unbalanced_brace_is_static(self):
        assert build_template("unbalanced { brace") == StaticTemplate("unbalanced { brace")

    def test_dotted_reference_is_not_a_directive(self):
        assert isinstance(build_template("%<rocket.secret>s"), StaticTemplate)

    def test_percent_escape_only_is_format_without_fields(self):
        template = build_template("100%% ready")
        assert template == FormatTemplate("100%% ready", ())

    def test_callable_is_callable_template(self):
        def launch(parameters, **options):
            return "launched"

        template = build_template(launch)
        assert template == CallableTemplate(launch)

    def test_existing_template_is_returned(self):
        template = StaticTemplate("ready")
        assert build_template(template) is template

    def test_other_values_are_rejected(self):
        with pytest.raises(TypeError):
            build_template(42)


class TestFormatTemplate:
    def test_missing_field(self):
        template = build_template("rocket %<name>s is ready")
        assert template.missing_field({}) == "name"
        assert template.missing_field({"name": "Hellhound IV"}) is None

    def test_render_string_reference(self):
        template = build_template("rocket %<name>s is ready to launch")
        assert template.render({"name": "Hellhound IV", "fuel": 1000}) == "rocket Hellhound IV is ready to launch"

    def test_render_bare_reference(self):
        assert build_template("rocket %<name> is ready").render({"name": "Hellhound IV"}) == "rocket Hellhound IV is ready"

    def test_render_precision_and_width(self):
        template = build_template("fuel at %<level>.1f percent, stage %<stage>03d")
        assert template.render({"level": 87.46, "stage": 2}) == "fuel at 87.5 percent, stage 002"

    def test_render_flags(self):
        assert build_template("[%<name>-8s]").render({"name": "Ares"}) == "[Ares    ]"
        assert build_template("%<delta>+d m/s").render({"delta": 12}) == "+12 m/s"

    def test_render_plain_substitution(self):
        assert build_template("launching from %{pad}").render({"pad": 39}) == "launching from 39"

    def test_render_percent_escape(self):
        assert build_template("%<level>d%% ready").render({"level": 100}) == "100% ready"

    def test_plain_substitution_does_not_traverse(self):
        class Rocket:
            secret = "classified"

            def __str__(self):
                return "Ares"

        template = build_template("%{rocket}.secret")
        assert template.render({"rocket": Rocket()}) == "Ares.secret"

    def test_render_invalid_conversion(self):
        template = build_template("fuel %<level>d percent")
        with pytest.raises(TemplateParameterError) as exc_info:
            template.render({"level": "full"})
        assert exc_info.value.name == "level"
        assert isinstance(exc_info.value, ValueError)

    def test_render_absent_parameter(self):
        with pytest.raises(TemplateParameterError) as exc_info:
            build_template("%{pad}").render({})
        assert exc_info.value.reason == "not found"
