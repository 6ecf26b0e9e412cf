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

r"""License expression parser.

Parses the compact license grammar used in license metadata fields into
an immutable expression tree of license atoms and license sets.

Grammar::

    expression  = atom / set / implicit-set
    set         = "(" set-body ")"
    set-body    = term 1*(operator term)       ; one operator kind per level
    term        = set / atom
    operator    = ("AND" / "OR") separator     ; case-insensitive
    separator   = whitespace / "("
    atom        = "NONE" / "NOASSERTION" / license-id
    license-id  = 1*(any char except whitespace, "(" and ")")

An *implicit set* is a top-level set body without the surrounding
parentheses (``MIT OR Apache-2.0``).

Key Concepts (ELI5)::

    ┌──────────────────────┬──────────────────────────────────────────────┐
    │ Concept              │ Plain-English                                │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ Standard license     │ An ID the catalog knows (``MIT``).          │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ Custom license       │ Any other ID; a locally-defined license.    │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ Conjunctive set      │ ``(A AND B)``: all licenses apply.          │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ Disjunctive set      │ ``(A OR B)``: any one license applies.      │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ Mixed operators      │ ``(A AND B OR C)`` is rejected; nest with   │
    │                      │ parentheses instead: ``(A AND (B OR C))``.  │
    └──────────────────────┴──────────────────────────────────────────────┘

Usage::

    from licensekit.expression import parse, DisjunctiveLicenseSet, StandardLicense

    expr = parse('MIT OR Apache-2.0', {'MIT', 'Apache-2.0'}.__contains__)
    assert expr == DisjunctiveLicenseSet((StandardLicense('MIT'), StandardLicense('Apache-2.0')))
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from licensekit.errors import ExpressionErrorKind, LicenseExpressionError

__all__ = [
    'ConjunctiveLicenseSet',
    'CustomLicense',
    'DisjunctiveLicenseSet',
    'LicenseExpression',
    'NoAssertionLicense',
    'NoneLicense',
    'StandardLicense',
    'license_ids',
    'parse',
]

NONE_LICENSE_NAME = 'NONE'
NOASSERTION_LICENSE_NAME = 'NOASSERTION'

# ---------------------------------------------------------------------------
# Expression node types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StandardLicense:
    """A license from the catalog, referenced by its short identifier.

    Attributes:
        id: The catalog identifier (e.g. ``"Apache-2.0"``).
    """

    id: str


@dataclass(frozen=True)
class CustomLicense:
    """A non-catalog license with a locally scoped identifier.

    Attributes:
        id: The local identifier (e.g. ``"LicenseRef-1"``).
        text: Inline license text, if known.
    """

    id: str
    text: str | None = None


@dataclass(frozen=True)
class NoneLicense:
    """Sentinel for ``NONE``: no license applies."""


@dataclass(frozen=True)
class NoAssertionLicense:
    """Sentinel for ``NOASSERTION``: no claim is made either way."""


@dataclass(frozen=True)
class ConjunctiveLicenseSet:
    """All members apply simultaneously (``AND``).

    Attributes:
        members: The member expressions, in source order.
    """

    members: tuple[LicenseExpression, ...]


@dataclass(frozen=True)
class DisjunctiveLicenseSet:
    """Any one member applies (``OR``).

    Attributes:
        members: The member expressions, in source order.
    """

    members: tuple[LicenseExpression, ...]


LicenseExpression = (
    StandardLicense | CustomLicense | NoneLicense | NoAssertionLicense | ConjunctiveLicenseSet | DisjunctiveLicenseSet
)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class _Operator(enum.Enum):
    AND = 'AND'
    OR = 'OR'


_SET_TYPES: dict[_Operator, type[ConjunctiveLicenseSet] | type[DisjunctiveLicenseSet]] = {
    _Operator.AND: ConjunctiveLicenseSet,
    _Operator.OR: DisjunctiveLicenseSet,
}


class _ExpressionParser:
    """Cursor-based recursive descent over one trimmed expression string.

    All positions are offsets into the full string so error carets point
    at the right character even inside nested sets.
    """

    def __init__(self, text: str, is_standard_id: Callable[[str], bool]) -> None:
        self._text = text
        self._is_standard_id = is_standard_id

    def _error(self, kind: ExpressionErrorKind, position: int, detail: str) -> LicenseExpressionError:
        return LicenseExpressionError(kind, self._text, position, detail)

    def parse(self) -> LicenseExpression:
        text = self._text
        end = len(text)
        if text.startswith('('):
            if not text.endswith(')'):
                raise self._error(ExpressionErrorKind.UNBALANCED_PARENS, end, "missing end ')'")
            close = self._find_close(0, end)
            if close == end - 1:
                return self._parse_set(1, close)
            return self._parse_set(0, end)
        if self._scan_token(0, end) == end:
            return self._parse_atom(0, end)
        return self._parse_set(0, end)

    def _skip_whitespace(self, pos: int, end: int) -> int:
        while pos < end and self._text[pos].isspace():
            pos += 1
        return pos

    def _scan_token(self, pos: int, end: int) -> int:
        text = self._text
        while pos < end and not text[pos].isspace() and text[pos] not in '()':
            pos += 1
        return pos

    def _find_close(self, open_pos: int, end: int) -> int:
        """Return the offset of the ``)`` matching the ``(`` at *open_pos*."""
        depth = 0
        for pos in range(open_pos, end):
            ch = self._text[pos]
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
                if depth == 0:
                    return pos
        raise self._error(ExpressionErrorKind.UNBALANCED_PARENS, open_pos, "missing end ')' for this '('")

    def _parse_atom(self, start: int, end: int) -> LicenseExpression:
        token = self._text[start:end]
        if token.upper() in (_Operator.AND.value, _Operator.OR.value):
            raise self._error(
                ExpressionErrorKind.INVALID_LICENSE_ID,
                start,
                f'expected a license ID, got operator {token!r}',
            )
        if token == NONE_LICENSE_NAME:
            return NoneLicense()
        if token == NOASSERTION_LICENSE_NAME:
            return NoAssertionLicense()
        if self._is_standard_id(token):
            return StandardLicense(token)
        return CustomLicense(token)

    def _parse_operator(self, pos: int, end: int) -> tuple[_Operator, int]:
        """Match ``AND`` or ``OR`` plus a separator at *pos*.

        Returns the operator and the offset just past the keyword.
        """
        text = self._text
        if text[pos] == ')':
            raise self._error(ExpressionErrorKind.UNBALANCED_PARENS, pos, "unexpected ')'")
        for op in _Operator:
            keyword_end = pos + len(op.value)
            if text[pos:keyword_end].upper() != op.value:
                continue
            if keyword_end >= end:
                raise self._error(
                    ExpressionErrorKind.TRAILING_OPERATOR,
                    pos,
                    f'{op.value} must be followed by another license term',
                )
            nxt = text[keyword_end]
            if nxt.isspace() or nxt == '(':
                return op, keyword_end
        raise self._error(ExpressionErrorKind.EXPECTED_OPERATOR, pos, 'expecting an AND or an OR')

    def _parse_set(self, start: int, end: int) -> LicenseExpression:
        """Parse the body of a set spanning ``text[start:end]``."""
        text = self._text
        members: list[LicenseExpression] = []
        operator: _Operator | None = None
        pos = self._skip_whitespace(start, end)
        while pos < end:
            ch = text[pos]
            if ch == '(':
                close = self._find_close(pos, end)
                members.append(self._parse_set(pos + 1, close))
                pos = close + 1
            elif ch == ')':
                raise self._error(ExpressionErrorKind.UNBALANCED_PARENS, pos, "unexpected ')'")
            else:
                token_end = self._scan_token(pos, end)
                members.append(self._parse_atom(pos, token_end))
                pos = token_end

            pos = self._skip_whitespace(pos, end)
            if pos >= end:
                break
            op_pos = pos
            op, pos = self._parse_operator(pos, end)
            if operator is not None and op is not operator:
                raise self._error(
                    ExpressionErrorKind.MIXED_OPERATORS,
                    op_pos,
                    "can not have both AND's and OR's inside the same set of parenthesis",
                )
            operator = op
            pos = self._skip_whitespace(pos, end)
            if pos >= end:
                raise self._error(
                    ExpressionErrorKind.TRAILING_OPERATOR,
                    op_pos,
                    f'{op.value} must be followed by another license term',
                )

        if operator is None:
            raise self._error(
                ExpressionErrorKind.MISSING_OPERATOR,
                start,
                'missing AND or OR inside parenthesis',
            )
        return _SET_TYPES[operator](tuple(members))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse(expression: str, is_standard_id: Callable[[str], bool]) -> LicenseExpression:
    """Parse a license expression into an expression tree.

    Args:
        expression: The license expression text
            (e.g. ``"(MIT OR Apache-2.0)"``).
        is_standard_id: Membership predicate deciding whether an ID is a
            catalog (standard) license or a custom one.

    Returns:
        The root :data:`LicenseExpression` node.

    Raises:
        LicenseExpressionError: If the expression is blank or malformed;
            ``kind`` names the violated rule.

    Examples::

        >>> parse('MIT', {'MIT'}.__contains__)
        StandardLicense(id='MIT')

        >>> parse('(LicenseRef-1 AND NONE)', {'MIT'}.__contains__)
        ConjunctiveLicenseSet(members=(CustomLicense(id='LicenseRef-1', text=None), NoneLicense()))
    """
    stripped = expression.strip()
    if not stripped:
        raise LicenseExpressionError(ExpressionErrorKind.EMPTY_EXPRESSION, expression, 0, 'empty license string')
    return _ExpressionParser(stripped, is_standard_id).parse()


def license_ids(node: LicenseExpression) -> set[str]:
    """Collect every standard and custom license ID in an expression.

    ``NONE`` and ``NOASSERTION`` carry no ID and are skipped.

    Examples::

        >>> sorted(license_ids(parse('(MIT OR (GPL-2.0 AND LicenseRef-x))', {'MIT'}.__contains__)))
        ['GPL-2.0', 'LicenseRef-x', 'MIT']
    """
    ids: set[str] = set()
    _collect_ids(node, ids)
    return ids


def _collect_ids(node: LicenseExpression, acc: set[str]) -> None:
    """Recursively collect license IDs into *acc*."""
    if isinstance(node, (StandardLicense, CustomLicense)):
        acc.add(node.id)
    elif isinstance(node, (ConjunctiveLicenseSet, DisjunctiveLicenseSet)):
        for member in node.members:
            _collect_ids(member, acc)
