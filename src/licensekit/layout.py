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

"""Plain text to HTML layout, and back.

License text is line-oriented: a blank line separates paragraphs, a
paragraph indented by five spaces is a sub-clause, and every other line
break is significant.  :func:`add_html_formatting` encodes that layout
as ``<p>`` and ``<br/>`` markup; :func:`html_to_text` recovers the line
breaks from such markup while discarding every other tag.
"""

from __future__ import annotations

import html
import re
from html.parser import HTMLParser

__all__ = [
    'add_html_formatting',
    'escape_html',
    'html_to_text',
]

INDENT_PREFIX = ' ' * 5
INDENTED_PARAGRAPH = '<p style="margin-left: 20px;">'
LINE_BREAK = '<br/>'

# Stands in for a line break while the remaining markup is stripped.
_NEWLINE_SENTINEL = '\ue000'
_BREAK_TAG_RE = re.compile(r'<(?:br|p)\b[^>]*>', re.IGNORECASE)
_SENTINEL_SPACING_RE = re.compile(' ?' + _NEWLINE_SENTINEL + ' ?')
_ANY_TAG_RE = re.compile(r'<[^>]*>')


def escape_html(text: str) -> str:
    """Escape *text* for HTML and lay out its paragraphs and line breaks."""
    return add_html_formatting(html.escape(text))


def add_html_formatting(text: str) -> str:
    """Add ``<p>`` and ``<br/>`` markup to plain multi-line text.

    A whitespace-only line closes the current paragraph and opens a new
    one on the following line (indented if that line starts with five
    spaces).  Any other line break becomes ``<br/>`` plus a newline.
    Trailing empty lines are dropped before layout; if no paragraph was
    opened, a trailing newline is kept as a single ``<br/>``.

    >>> add_html_formatting('line1\\n\\nline2')
    'line1\\n<p>line2</p>'
    >>> add_html_formatting('line1\\nline2\\n')
    'line1<br/>\\nline2<br/>\\n'
    """
    lines = text.split('\n')
    while len(lines) > 1 and not lines[-1]:
        lines.pop()

    parts = [lines[0]]
    in_paragraph = False
    i = 1
    while i < len(lines):
        if not lines[i].strip():
            if in_paragraph:
                parts.append('</p>')
            parts.append('\n')
            i += 1
            if i < len(lines):
                parts.append(INDENTED_PARAGRAPH if lines[i].startswith(INDENT_PREFIX) else '<p>')
                parts.append(lines[i])
                i += 1
            else:
                parts.append('<p>')
            in_paragraph = True
        else:
            parts.append(LINE_BREAK)
            parts.append('\n')
            parts.append(lines[i])
            i += 1

    if in_paragraph:
        parts.append('</p>')
    elif text.endswith('\n'):
        parts.append(LINE_BREAK + '\n')
    return ''.join(parts)


class _TextExtractor(HTMLParser):
    """Collects character data, skipping ``<script>`` and ``<style>`` bodies."""

    _SKIPPED = frozenset({'script', 'style'})

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in self._SKIPPED:
            self._skip_depth += 1

    def handle_endtag(self, tag: str) -> None:
        if tag in self._SKIPPED and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self.chunks.append(data)


def html_to_text(markup: str) -> str:
    """Convert HTML to plain text, keeping line breaks from ``<br>`` and ``<p>``.

    Every ``<br ...>`` and ``<p ...>`` tag (case-insensitive, attributes
    ignored) becomes a newline.  All other markup is stripped, entities
    are decoded and whitespace runs collapse to a single space, so
    newlines in the source markup do not survive; a space next to a
    recovered line break is dropped.  Never raises: malformed markup
    degrades to best-effort stripped text.

    >>> html_to_text('a<br/>b<p>c</p>')
    'a\\nb\\nc'
    """
    marked = _BREAK_TAG_RE.sub(_NEWLINE_SENTINEL, markup)
    extractor = _TextExtractor()
    try:
        extractor.feed(marked)
        extractor.close()
        stripped = ''.join(extractor.chunks)
    except AssertionError:
        # html.parser asserts on unknown marked sections such as <![foo[...]]>.
        stripped = html.unescape(_ANY_TAG_RE.sub('', marked))
    text = ' '.join(stripped.split())
    return _SENTINEL_SPACING_RE.sub('\n', text)
