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

"""License template scanner.

Splits a template into text spans and rule events and drives a
:class:`~licensekit.template.TemplateOutputHandler` with them, in order.

The scanner is a two-state machine::

    NORMAL ──beginOptional──▶ IN_OPTIONAL
       ▲                          │
       └───────endOptional────────┘

Optional regions do not nest, and a template must end in ``NORMAL``.
"""

from __future__ import annotations

import enum
import re
from typing import TYPE_CHECKING

from licensekit.errors import LicenseTemplateRuleError, TemplateErrorKind
from licensekit.template._rule import RuleParser, RuleType, parse_rule

if TYPE_CHECKING:
    from licensekit.template._handlers import TemplateOutputHandler

__all__ = [
    'RULE_PATTERN',
    'ScanState',
    'parse_template',
]

START_RULE = '<<'
END_RULE = '>>'
# Non-greedy: the first ">>" after a "<<" always closes the rule.
RULE_PATTERN = re.compile(re.escape(START_RULE) + r'\s*(.+?)\s*' + re.escape(END_RULE))


class ScanState(enum.Enum):
    """Whether the scanner is inside an optional region."""

    NORMAL = 'normal'
    IN_OPTIONAL = 'in_optional'


def parse_template(
    template: str,
    handler: TemplateOutputHandler,
    *,
    rule_parser: RuleParser = parse_rule,
) -> None:
    """Scan *template* and report its text and rules to *handler*.

    Args:
        template: License template text with ``<<...>>`` rules.
        handler: Receives ``normal_text``, ``optional_text``,
            ``variable_rule``, ``begin_optional`` and ``end_optional``
            calls in template order.  Empty text spans are not reported.
        rule_parser: Classifies each rule body.

    Raises:
        LicenseTemplateRuleError: For an unrecognized rule, a nested or
            unmatched optional rule, or a missing ``endOptional``.  The
            handler's partial output must then be discarded.
    """
    state = ScanState.NORMAL
    end = 0
    for match in RULE_PATTERN.finditer(template):
        preceding = template[end : match.start()]
        if preceding:
            if state is ScanState.IN_OPTIONAL:
                handler.optional_text(preceding)
            else:
                handler.normal_text(preceding)
        end = match.end()

        rule = rule_parser(match.group(1))
        if rule.type is RuleType.VARIABLE:
            handler.variable_rule(rule)
        elif rule.type is RuleType.BEGIN_OPTIONAL:
            if state is ScanState.IN_OPTIONAL:
                raise LicenseTemplateRuleError(
                    TemplateErrorKind.NESTED_OPTIONAL,
                    'Invalid nested optional rule found',
                    match.group(1),
                )
            state = ScanState.IN_OPTIONAL
            handler.begin_optional(rule)
        elif rule.type is RuleType.END_OPTIONAL:
            if state is not ScanState.IN_OPTIONAL:
                raise LicenseTemplateRuleError(
                    TemplateErrorKind.UNMATCHED_END_OPTIONAL,
                    'End optional rule found without a matching begin optional rule',
                    match.group(1),
                )
            state = ScanState.NORMAL
            handler.end_optional(rule)
        else:
            raise LicenseTemplateRuleError(
                TemplateErrorKind.UNRECOGNIZED_RULE,
                f'Unrecognized rule type {rule.type!r}',
                match.group(1),
            )

    if state is not ScanState.NORMAL:
        raise LicenseTemplateRuleError(TemplateErrorKind.MISSING_END_OPTIONAL, 'Missing endOptional rule')

    rest = template[end:]
    if rest:
        handler.normal_text(rest)
