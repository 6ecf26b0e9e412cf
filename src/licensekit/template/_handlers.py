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

"""Output handlers for the license template scanner.

A handler is a visitor: :func:`~licensekit.template.parse_template`
calls it once per text span or rule, in template order.  Handlers must
not assume how many calls they receive.
"""

from __future__ import annotations

import html
from typing import Protocol, runtime_checkable

from licensekit.layout import escape_html
from licensekit.template._rule import LicenseTemplateRule

__all__ = [
    'HtmlTemplateOutputHandler',
    'TemplateOutputHandler',
    'TextTemplateOutputHandler',
]


@runtime_checkable
class TemplateOutputHandler(Protocol):
    """Receives the text and rules of a license template."""

    def normal_text(self, text: str) -> None:
        """Text outside any optional region."""  # pragma: no cover
        ...

    def optional_text(self, text: str) -> None:
        """Text inside an optional region."""  # pragma: no cover
        ...

    def variable_rule(self, rule: LicenseTemplateRule) -> None:
        """A replaceable variable."""  # pragma: no cover
        ...

    def begin_optional(self, rule: LicenseTemplateRule) -> None:
        """Start of an optional region."""  # pragma: no cover
        ...

    def end_optional(self, rule: LicenseTemplateRule) -> None:
        """End of an optional region."""  # pragma: no cover
        ...


def _rule_title(rule: LicenseTemplateRule) -> str:
    """Describe *rule* for an HTML ``title`` attribute (already escaped)."""
    fields = [('name', rule.name), ('match', rule.match), ('example', rule.example)]
    return html.escape('; '.join(f'{key}: {value}' for key, value in fields if value))


class HtmlTemplateOutputHandler:
    """Renders a template as HTML that highlights its rules for review.

    Variables render as ``<span class="replaceable-license-text">`` holding
    the original text; optional regions are wrapped in
    ``<div class="optional-license-text">``.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    @property
    def html(self) -> str:
        """The HTML rendered so far."""
        return ''.join(self._parts)

    def normal_text(self, text: str) -> None:
        self._parts.append(escape_html(text))

    def optional_text(self, text: str) -> None:
        formatted = escape_html(text)
        # <p> blocks may not sit inside an inline span.
        tag = 'div' if '<p' in formatted else 'span'
        self._parts.append(f'<{tag} class="optional-text">{formatted}</{tag}>')

    def variable_rule(self, rule: LicenseTemplateRule) -> None:
        self._parts.append(
            f'<span class="replaceable-license-text" title="{_rule_title(rule)}">{escape_html(rule.original)}</span>'
        )

    def begin_optional(self, rule: LicenseTemplateRule) -> None:
        self._parts.append(f'<div class="optional-license-text" title="{_rule_title(rule)}">')

    def end_optional(self, rule: LicenseTemplateRule) -> None:
        self._parts.append('</div>')


class TextTemplateOutputHandler:
    """Renders a template as its default plain text.

    Each variable is replaced by its ``original`` value (empty when the
    rule has none).  Optional text, and variables inside optional
    regions, are kept unless *include_optional* is false.  Rule markers
    themselves produce no output.
    """

    def __init__(self, *, include_optional: bool = True) -> None:
        self.include_optional = include_optional
        self._in_optional = False
        self._parts: list[str] = []

    @property
    def text(self) -> str:
        """The text rendered so far."""
        return ''.join(self._parts)

    def normal_text(self, text: str) -> None:
        self._parts.append(text)

    def optional_text(self, text: str) -> None:
        if self.include_optional:
            self._parts.append(text)

    def variable_rule(self, rule: LicenseTemplateRule) -> None:
        if self.include_optional or not self._in_optional:
            self._parts.append(rule.original)

    def begin_optional(self, rule: LicenseTemplateRule) -> None:
        self._in_optional = True

    def end_optional(self, rule: LicenseTemplateRule) -> None:
        self._in_optional = False
