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

"""Exception hierarchy for licensekit.

Every failure raised by this package derives from :class:`LicenseKitError`
so callers can catch one type at the CLI or service boundary.  Parse
failures carry a machine-readable ``kind`` so tests and callers never
have to match on message text.

All errors are terminal for the current parse.  Renderers do not
produce a consistent partial document, so any output accumulated before
the error must be discarded.
"""

from __future__ import annotations

import enum

__all__ = [
    'CatalogError',
    'ConfigError',
    'ExpressionErrorKind',
    'LicenseExpressionError',
    'LicenseKitError',
    'LicenseTemplateRuleError',
    'TemplateErrorKind',
]


class LicenseKitError(Exception):
    """Base class for all licensekit errors."""


class ExpressionErrorKind(str, enum.Enum):
    """Structural failures of the license expression grammar."""

    EMPTY_EXPRESSION = 'empty_expression'
    UNBALANCED_PARENS = 'unbalanced_parens'
    EXPECTED_OPERATOR = 'expected_operator'
    MIXED_OPERATORS = 'mixed_operators'
    MISSING_OPERATOR = 'missing_operator'
    TRAILING_OPERATOR = 'trailing_operator'
    INVALID_LICENSE_ID = 'invalid_license_id'


class TemplateErrorKind(str, enum.Enum):
    """Structural failures of the license template grammar."""

    UNRECOGNIZED_RULE = 'unrecognized_rule'
    NESTED_OPTIONAL = 'nested_optional'
    UNMATCHED_END_OPTIONAL = 'unmatched_end_optional'
    MISSING_END_OPTIONAL = 'missing_end_optional'


class LicenseExpressionError(LicenseKitError, ValueError):
    """Raised when a license expression cannot be parsed.

    Attributes:
        kind: Which grammar rule was violated.
        expression: The (trimmed) expression text.
        position: Character offset where the error was detected.
        detail: Human-readable description of the problem.
    """

    def __init__(
        self,
        kind: ExpressionErrorKind,
        expression: str,
        position: int,
        detail: str,
    ) -> None:
        """Initialize with the error kind, expression text, position, and detail."""
        self.kind = kind
        self.expression = expression
        self.position = position
        self.detail = detail
        marker = ' ' * position + '^'
        super().__init__(f'License expression error at position {position}: {detail}\n  {expression}\n  {marker}')


class LicenseTemplateRuleError(LicenseKitError):
    """Raised when a license template or one of its rules is malformed.

    Attributes:
        kind: Which template rule was violated.
        detail: Human-readable description of the problem.
        rule_text: The ``<<...>>`` body involved, if any.
    """

    def __init__(self, kind: TemplateErrorKind, detail: str, rule_text: str = '') -> None:
        """Initialize with the error kind, detail, and offending rule text."""
        self.kind = kind
        self.detail = detail
        self.rule_text = rule_text
        if rule_text:
            super().__init__(f'{detail}: <<{rule_text}>>')
        else:
            super().__init__(detail)


class _ValidationError(LicenseKitError):
    def __init__(self, what: str, errors: list[str]) -> None:
        self.errors = errors
        bullet_list = '\n'.join(f'  - {e}' for e in errors)
        super().__init__(f'{what} has {len(errors)} validation error(s):\n{bullet_list}')


class CatalogError(_ValidationError):
    """Raised when license catalog data fails validation.

    Attributes:
        errors: List of human-readable error strings.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the collected validation errors."""
        super().__init__('License catalog', errors)


class ConfigError(_ValidationError):
    """Raised when ``licensekit.toml`` (or ``[tool.licensekit]``) is invalid.

    Attributes:
        errors: List of human-readable error strings.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the collected validation errors."""
        super().__init__('licensekit configuration', errors)
