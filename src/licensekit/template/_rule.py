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

r"""License template rules: the body of one ``<<...>>`` marker.

Rule body grammar::

    rule    = type *(";" param)
    type    = "var" / "beginOptional" / "endOptional"
    param   = key "=" value
    key     = "name" / "original" / "example" / "match"

A literal semicolon inside a value is written ``\;``.  Values may be
wrapped in double quotes, which are removed.

Examples::

    <<var;name=copyright;original=Copyright (c) <year> <owner>;match=.+>>
    <<beginOptional;name=title>>
    <<endOptional>>
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from licensekit.errors import LicenseTemplateRuleError, TemplateErrorKind

__all__ = [
    'LicenseTemplateRule',
    'RuleParser',
    'RuleType',
    'parse_rule',
]


class RuleType(str, enum.Enum):
    """Classification of a template rule."""

    VARIABLE = 'var'
    BEGIN_OPTIONAL = 'beginOptional'
    END_OPTIONAL = 'endOptional'


@dataclass(frozen=True)
class LicenseTemplateRule:
    """A parsed template rule.

    Attributes:
        type: Variable, begin-optional or end-optional.
        name: Rule name, used to label the rule when rendered.
        original: The text of the original license at this point; the
            default value of a variable.
        example: An example of acceptable replacement text.
        match: Regular expression that replacement text must match.
    """

    type: RuleType
    name: str = ''
    original: str = ''
    example: str = ''
    match: str = ''


@runtime_checkable
class RuleParser(Protocol):
    """Anything that classifies a rule body, e.g. :func:`parse_rule`."""

    def __call__(self, text: str) -> LicenseTemplateRule:
        """Parse *text* or raise :class:`LicenseTemplateRuleError`."""  # pragma: no cover
        ...


_PARAM_SPLIT_RE = re.compile(r'(?<!\\);')
_VALID_KEYS = frozenset({'name', 'original', 'example', 'match'})


def _unrecognized(detail: str, text: str) -> LicenseTemplateRuleError:
    return LicenseTemplateRuleError(TemplateErrorKind.UNRECOGNIZED_RULE, detail, text)


def _clean_value(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value.replace('\\;', ';')


def parse_rule(text: str) -> LicenseTemplateRule:
    """Parse and validate the body of a ``<<...>>`` marker.

    Args:
        text: The marker interior, without the ``<<`` and ``>>``.

    Returns:
        The classified :class:`LicenseTemplateRule`.

    Raises:
        LicenseTemplateRuleError: With kind ``UNRECOGNIZED_RULE`` for an
            unknown type or key, a malformed parameter, a variable
            missing ``name`` or ``match``, or an invalid ``match`` regex.
    """
    parts = _PARAM_SPLIT_RE.split(text)
    type_text = parts[0].strip()
    try:
        rule_type = RuleType(type_text)
    except ValueError:
        raise _unrecognized(f'Unknown rule type {type_text!r}', text) from None

    params: dict[str, str] = {}
    for part in parts[1:]:
        if not part.strip():
            continue
        key, sep, value = part.partition('=')
        key = key.strip()
        if not sep:
            raise _unrecognized(f'Missing "=" in rule parameter {part.strip()!r}', text)
        if key not in _VALID_KEYS:
            raise _unrecognized(f'Unknown rule parameter {key!r}', text)
        if key in params:
            raise _unrecognized(f'Duplicate rule parameter {key!r}', text)
        params[key] = _clean_value(value)

    rule = LicenseTemplateRule(type=rule_type, **params)
    if rule.type is RuleType.VARIABLE:
        if not rule.name:
            raise _unrecognized('Variable rule is missing a name', text)
        if not rule.match:
            raise _unrecognized('Variable rule is missing a match expression', text)
        try:
            re.compile(rule.match)
        except re.error as exc:
            raise _unrecognized(f'Invalid match expression ({exc})', text) from exc
    return rule
