# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for license template rule parsing."""

from __future__ import annotations

import pytest
from licensekit.errors import LicenseTemplateRuleError, TemplateErrorKind
from licensekit.template import LicenseTemplateRule, RuleParser, RuleType, parse_rule


class TestRuleTypes:
    """Tests for rule classification."""

    def test_variable(self) -> None:
        """Test variable."""
        rule = parse_rule('var;name=copyright;original=Copyright (c) 2024;match=.+')
        assert rule == LicenseTemplateRule(
            type=RuleType.VARIABLE,
            name='copyright',
            original='Copyright (c) 2024',
            match='.+',
        )

    def test_begin_optional(self) -> None:
        """Test begin optional."""
        rule = parse_rule('beginOptional;name=title')
        assert rule.type is RuleType.BEGIN_OPTIONAL
        assert rule.name == 'title'

    def test_begin_optional_without_name(self) -> None:
        """Test begin optional without name."""
        assert parse_rule('beginOptional').type is RuleType.BEGIN_OPTIONAL

    def test_end_optional(self) -> None:
        """Test end optional."""
        assert parse_rule('endOptional') == LicenseTemplateRule(type=RuleType.END_OPTIONAL)

    def test_whitespace_around_parts(self) -> None:
        """Whitespace around the type, keys and values is ignored."""
        rule = parse_rule(' var ; name = year ; match = \\d{4} ')
        assert rule.type is RuleType.VARIABLE
        assert rule.name == 'year'
        assert rule.match == '\\d{4}'

    def test_trailing_semicolon(self) -> None:
        """Test trailing semicolon."""
        assert parse_rule('endOptional;').type is RuleType.END_OPTIONAL

    def test_parse_rule_is_a_rule_parser(self) -> None:
        """parse_rule satisfies the RuleParser protocol."""
        assert isinstance(parse_rule, RuleParser)


class TestRuleValues:
    """Tests for parameter values."""

    def test_escaped_semicolon(self) -> None:
        """A backslash-escaped semicolon stays in the value."""
        rule = parse_rule('var;name=x;original=a\\;b;match=.*')
        assert rule.original == 'a;b'
        assert rule.match == '.*'

    def test_quoted_value(self) -> None:
        """Surrounding double quotes are removed."""
        rule = parse_rule('var;name="holder";original="The Authors";match=".+"')
        assert rule.name == 'holder'
        assert rule.original == 'The Authors'
        assert rule.match == '.+'

    def test_equals_in_value(self) -> None:
        """Only the first = separates key and value."""
        rule = parse_rule('var;name=x;match=a=b')
        assert rule.match == 'a=b'

    def test_example(self) -> None:
        """Test example."""
        assert parse_rule('var;name=x;example=Acme;match=.+').example == 'Acme'


class TestRuleErrors:
    """Tests for rejected rule bodies."""

    @pytest.mark.parametrize(
        'text',
        [
            'variable;name=x;match=.+',
            'VAR;name=x;match=.+',
            '',
            'var;name=x;match=.+;colour=red',
            'var;name=x;name=y;match=.+',
            'var;name=x;match',
            'var;original=foo;match=.+',
            'var;name=x;original=foo',
            'var;name=x;match=(unclosed',
        ],
    )
    def test_unrecognized(self, text: str) -> None:
        """Malformed bodies fail with UNRECOGNIZED_RULE."""
        with pytest.raises(LicenseTemplateRuleError) as exc_info:
            parse_rule(text)
        assert exc_info.value.kind is TemplateErrorKind.UNRECOGNIZED_RULE
        assert exc_info.value.rule_text == text

    def test_message_includes_rule(self) -> None:
        """Test message includes rule."""
        with pytest.raises(LicenseTemplateRuleError, match='Unknown rule type'):
            parse_rule('bogus')
