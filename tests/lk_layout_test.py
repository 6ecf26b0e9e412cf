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

"""Tests for the text/HTML layout transforms."""

from __future__ import annotations

import pytest
from licensekit.layout import add_html_formatting, escape_html, html_to_text


class TestAddHtmlFormatting:
    """Tests for add_html_formatting()."""

    def test_paragraph_boundary(self) -> None:
        """One blank line opens a paragraph that is closed at the end."""
        assert add_html_formatting('line1\n\nline2') == 'line1\n<p>line2</p>'

    def test_line_break(self) -> None:
        """Test line break."""
        assert add_html_formatting('a\nb') == 'a<br/>\nb'

    def test_single_line(self) -> None:
        """Test single line."""
        assert add_html_formatting('just text') == 'just text'

    def test_empty(self) -> None:
        """Test empty."""
        assert add_html_formatting('') == ''

    def test_indented_paragraph(self) -> None:
        """A paragraph starting with five spaces gets a left margin."""
        assert add_html_formatting('a\n\n     sub-clause') == ('a\n<p style="margin-left: 20px;">     sub-clause</p>')

    def test_four_spaces_not_indented(self) -> None:
        """Test four spaces not indented."""
        assert add_html_formatting('a\n\n    b') == 'a\n<p>    b</p>'

    def test_consecutive_paragraphs(self) -> None:
        """Each blank line closes the previous paragraph."""
        assert add_html_formatting('a\n\nb\n\nc') == 'a\n<p>b</p>\n<p>c</p>'

    def test_line_break_inside_paragraph(self) -> None:
        """Test line break inside paragraph."""
        assert add_html_formatting('a\n\nb\nc') == 'a\n<p>b<br/>\nc</p>'

    def test_whitespace_only_line_is_boundary(self) -> None:
        """Test whitespace only line is boundary."""
        assert add_html_formatting('a\n  \t\nb') == 'a\n<p>b</p>'

    def test_trailing_newline(self) -> None:
        """A trailing newline outside any paragraph becomes one break."""
        assert add_html_formatting('a\n') == 'a<br/>\n'
        assert add_html_formatting('a\nb\n') == 'a<br/>\nb<br/>\n'

    def test_trailing_blank_lines_collapse(self) -> None:
        """Test trailing blank lines collapse."""
        assert add_html_formatting('a\n\n\n') == 'a<br/>\n'

    def test_newline_only(self) -> None:
        """A newline-only input is a single break."""
        assert add_html_formatting('\n') == '<br/>\n'

    def test_trailing_newline_inside_paragraph(self) -> None:
        """Test trailing newline inside paragraph."""
        assert add_html_formatting('a\n\nb\n') == 'a\n<p>b</p>'


class TestEscapeHtml:
    """Tests for escape_html()."""

    def test_escapes_markup(self) -> None:
        """Test escapes markup."""
        assert escape_html('<x> & "y"') == '&lt;x&gt; &amp; &quot;y&quot;'

    def test_escapes_then_formats(self) -> None:
        """Test escapes then formats."""
        assert escape_html('a<b\n\nc') == 'a&lt;b\n<p>c</p>'


class TestHtmlToText:
    """Tests for html_to_text()."""

    def test_br_and_p(self) -> None:
        """Test br and p."""
        assert html_to_text('a<br/>b<p>c</p>') == 'a\nb\nc'

    @pytest.mark.parametrize('tag', ['<br>', '<BR>', '<br />', '<Br class="x">', '<p>', '<P style="margin-left: 20px;">'])
    def test_break_tag_variants(self, tag: str) -> None:
        """Break tags match case-insensitively and ignore attributes."""
        assert html_to_text(f'x{tag}y') == 'x\ny'

    def test_other_tags_stripped(self) -> None:
        """Test other tags stripped."""
        assert html_to_text('<b>bold</b> and <i>italic</i>') == 'bold and italic'

    def test_pre_is_not_a_paragraph(self) -> None:
        """Test pre is not a paragraph."""
        assert html_to_text('a<pre>b</pre>') == 'ab'

    def test_entities_decoded(self) -> None:
        """Test entities decoded."""
        assert html_to_text('Smith &amp; Sons &lt;2024&gt;') == 'Smith & Sons <2024>'

    def test_source_newlines_collapse(self) -> None:
        """Line breaks come from tags only, not from source newlines."""
        assert html_to_text('a\n   b\t c') == 'a b c'

    def test_script_and_style_skipped(self) -> None:
        """Test script and style skipped."""
        assert html_to_text('a<script>var x = 1;</script><style>p {}</style>b') == 'ab'

    def test_round_trip_of_layout(self) -> None:
        """Line breaks survive add_html_formatting followed by html_to_text."""
        assert html_to_text(add_html_formatting('line1\nline2\n\nline3')) == 'line1\nline2\nline3'

    def test_malformed_markup_does_not_raise(self) -> None:
        """Test malformed markup does not raise."""
        assert html_to_text('a</p></div><b').startswith('a')

    def test_unknown_marked_section(self) -> None:
        """Markup html.parser rejects still degrades to stripped text."""
        assert html_to_text('a<![foo[ x ]]>b') == 'ab'

    def test_unknown_marked_section_keeps_breaks(self) -> None:
        """Test unknown marked section keeps breaks."""
        assert html_to_text('a &amp; b<br/>c<![foo[ x ]]>') == 'a & b\nc'

    def test_empty(self) -> None:
        """Test empty."""
        assert html_to_text('') == ''
