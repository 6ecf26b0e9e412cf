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

"""Tests for licensekit.logging module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from licensekit.cli import main
from licensekit.logging import configure_logging, get_logger


@pytest.fixture
def template_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A small license template in an otherwise empty working directory."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / 'LICENSE.template'
    path.write_text('Copyright <<var;name=year;original=2024;match=.+>>', encoding='utf-8')
    return path


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        ('verbose', 'quiet', 'level'),
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.WARNING),
            (True, True, logging.WARNING),
        ],
    )
    def test_root_level(self, verbose: bool, quiet: bool, level: int) -> None:
        """--quiet outranks --verbose; neither means INFO."""
        configure_logging(verbose=verbose, quiet=quiet)
        assert logging.root.level == level

    def test_json_log_writes_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON mode should emit one JSON object per event on stderr."""
        configure_logging(json_log=True)
        get_logger('licensekit.test').warning('json_event', key='value')
        captured = capsys.readouterr()
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event['event'] == 'json_event'
        assert event['key'] == 'value'
        assert event['level'] == 'warning'
        assert event['logger'] == 'licensekit.test'
        assert captured.out == ''

    def test_reconfigure_replaces_handler(self) -> None:
        """Each call leaves exactly one root handler behind."""
        configure_logging()
        configure_logging(verbose=True)
        assert len(logging.root.handlers) == 1


class TestRenderLogging:
    """Rendered output and logs never share a stream."""

    def test_verbose_render_keeps_stdout_clean(
        self, template_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Debug events go to stderr; stdout holds only the rendered text."""
        assert main(['-v', 'render', str(template_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == 'Copyright 2024'
        assert 'template_read' in captured.err

    def test_json_render_event(self, template_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test json render event."""
        assert main(['-v', '--json-log', 'render', str(template_file), '--format', 'html']) == 0
        captured = capsys.readouterr()
        events = [json.loads(line) for line in captured.err.splitlines() if line.startswith('{')]
        read = next(e for e in events if e['event'] == 'template_read')
        assert read['format'] == 'html'
        assert read['length'] == len(template_file.read_text(encoding='utf-8'))
        assert 'replaceable-license-text' in captured.out

    def test_default_level_hides_debug(self, template_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test default level hides debug."""
        assert main(['render', str(template_file)]) == 0
        assert 'template_read' not in capsys.readouterr().err
