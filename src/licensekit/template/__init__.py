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

r"""License template parsing and rendering.

A license template is license text annotated with ``<<...>>`` rules:
variables that may be replaced and optional passages that may be
omitted.  :func:`parse_template` scans a template and reports its text
and rules to a :class:`TemplateOutputHandler`.

Built-in handlers:

- :class:`HtmlTemplateOutputHandler`: HTML that highlights every rule.
- :class:`TextTemplateOutputHandler`: the default text, with each
  variable replaced by its original value.

Usage::

    from licensekit.template import template_to_html, template_to_text

    template = 'Copyright <<var;name=copyright;original=(c) 2024 Acme;match=.+>>'
    assert template_to_text(template) == 'Copyright (c) 2024 Acme'
"""

from licensekit.template._handlers import (
    HtmlTemplateOutputHandler,
    TemplateOutputHandler,
    TextTemplateOutputHandler,
)
from licensekit.template._rule import (
    LicenseTemplateRule,
    RuleParser,
    RuleType,
    parse_rule,
)
from licensekit.template._scanner import (
    RULE_PATTERN,
    ScanState,
    parse_template,
)


def template_to_html(template: str) -> str:
    """Render a license template as HTML with its rules highlighted.

    Raises:
        LicenseTemplateRuleError: If the template is malformed.
    """
    handler = HtmlTemplateOutputHandler()
    parse_template(template, handler)
    return handler.html


def template_to_text(template: str, *, include_optional: bool = True) -> str:
    """Render a license template as its default text.

    Args:
        template: License template text.
        include_optional: Keep optional passages in the output.

    Raises:
        LicenseTemplateRuleError: If the template is malformed.
    """
    handler = TextTemplateOutputHandler(include_optional=include_optional)
    parse_template(template, handler)
    return handler.text


__all__ = [
    'RULE_PATTERN',
    'HtmlTemplateOutputHandler',
    'LicenseTemplateRule',
    'RuleParser',
    'RuleType',
    'ScanState',
    'TemplateOutputHandler',
    'TextTemplateOutputHandler',
    'parse_rule',
    'parse_template',
    'template_to_html',
    'template_to_text',
]
