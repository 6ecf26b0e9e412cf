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

r"""licensekit: license expression and license template toolkit.

Two parsers with their companion transforms:

- :func:`license_expression_to_tree` turns ``(MIT OR Apache-2.0)`` into
  an expression tree of license atoms and license sets.
- :func:`template_to_html` / :func:`template_to_text` render license
  templates annotated with ``<<...>>`` rules.
- :func:`html_to_text` recovers plain text, with its line breaks, from
  rendered license HTML.

Usage::

    import licensekit

    tree = licensekit.license_expression_to_tree('MIT OR Apache-2.0')
    text = licensekit.template_to_text(template)
    plain = licensekit.html_to_text('a<br/>b<p>c</p>')  # 'a\nb\nc'
"""

from __future__ import annotations

from collections.abc import Callable

from licensekit.catalog import default_catalog
from licensekit.errors import (
    CatalogError,
    ConfigError,
    ExpressionErrorKind,
    LicenseExpressionError,
    LicenseKitError,
    LicenseTemplateRuleError,
    TemplateErrorKind,
)
from licensekit.expression import (
    ConjunctiveLicenseSet,
    CustomLicense,
    DisjunctiveLicenseSet,
    LicenseExpression,
    NoAssertionLicense,
    NoneLicense,
    StandardLicense,
    parse,
)
from licensekit.layout import html_to_text
from licensekit.template import template_to_html, template_to_text

__version__ = '0.1.0'


def license_expression_to_tree(
    text: str,
    *,
    is_standard_id: Callable[[str], bool] | None = None,
) -> LicenseExpression:
    """Parse a license expression.

    Args:
        text: The license expression.
        is_standard_id: Membership predicate for standard license IDs.
            Defaults to the bundled catalog.

    Raises:
        LicenseExpressionError: If the expression is blank or malformed.
    """
    if is_standard_id is None:
        is_standard_id = default_catalog().is_standard_license_id
    return parse(text, is_standard_id)


__all__ = [
    'CatalogError',
    'ConfigError',
    'ConjunctiveLicenseSet',
    'CustomLicense',
    'DisjunctiveLicenseSet',
    'ExpressionErrorKind',
    'LicenseExpression',
    'LicenseExpressionError',
    'LicenseKitError',
    'LicenseTemplateRuleError',
    'NoAssertionLicense',
    'NoneLicense',
    'StandardLicense',
    'TemplateErrorKind',
    'html_to_text',
    'license_expression_to_tree',
    'template_to_html',
    'template_to_text',
]
