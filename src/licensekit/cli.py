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

"""``licensekit`` command line interface.

Subcommands::

    licensekit parse '(MIT OR Apache-2.0)'       # print the expression tree
    licensekit render LICENSE.template --format html
    licensekit strip-html LICENSE.html           # HTML back to plain text
    licensekit ids                               # list the catalog

Rendered output goes to stdout; diagnostics and logs go to stderr.
A ``-`` file argument reads standard input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from licensekit import __version__
from licensekit.catalog import LicenseCatalog
from licensekit.config import find_config, load_config
from licensekit.errors import LicenseKitError
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
from licensekit.logging import configure_logging, get_logger
from licensekit.template import HtmlTemplateOutputHandler, TextTemplateOutputHandler, parse_template

log = get_logger('licensekit.cli')


def _read_input(name: str) -> str:
    if name == '-':
        return sys.stdin.read()
    return Path(name).read_text(encoding='utf-8')


def _label(node: LicenseExpression, catalog: LicenseCatalog) -> str:
    if isinstance(node, StandardLicense):
        return f'[green]{escape(node.id)}[/] [dim]{escape(catalog.name(node.id))}[/]'
    if isinstance(node, CustomLicense):
        return f'[yellow]{escape(node.id)}[/] [dim](custom)[/]'
    if isinstance(node, NoneLicense):
        return '[bold]NONE[/]'
    if isinstance(node, NoAssertionLicense):
        return '[bold]NOASSERTION[/]'
    if isinstance(node, ConjunctiveLicenseSet):
        return '[bold cyan]AND[/]'
    return '[bold magenta]OR[/]'


def expression_tree(node: LicenseExpression, catalog: LicenseCatalog) -> Tree:
    """Build a Rich :class:`Tree` for an expression."""
    tree = Tree(_label(node, catalog))
    if isinstance(node, (ConjunctiveLicenseSet, DisjunctiveLicenseSet)):
        for member in node.members:
            tree.add(expression_tree(member, catalog))
    return tree


def _cmd_parse(args: argparse.Namespace, console: Console) -> int:
    catalog = args.settings.catalog_for()
    expr = parse(args.expression, catalog.is_standard_license_id)
    log.debug('expression_parsed', expression=args.expression, root=type(expr).__name__)
    console.print(expression_tree(expr, catalog))
    return 0


def _cmd_render(args: argparse.Namespace, console: Console) -> int:
    template = _read_input(args.file)
    log.debug('template_read', source=args.file, length=len(template), format=args.format)
    if args.format == 'html':
        html_handler = HtmlTemplateOutputHandler()
        parse_template(template, html_handler)
        sys.stdout.write(html_handler.html)
    else:
        include_optional = args.settings.include_optional_text and not args.no_optional
        text_handler = TextTemplateOutputHandler(include_optional=include_optional)
        parse_template(template, text_handler)
        sys.stdout.write(text_handler.text)
    return 0


def _cmd_strip_html(args: argparse.Namespace, console: Console) -> int:
    sys.stdout.write(html_to_text(_read_input(args.file)) + '\n')
    return 0


def _cmd_ids(args: argparse.Namespace, console: Console) -> int:
    catalog = args.settings.catalog_for()
    table = Table(title=f'License list {catalog.version}' if catalog.version else 'License list')
    table.add_column('ID', style='bold')
    table.add_column('Name')
    table.add_column('OSI', justify='center')
    for license_id in catalog.license_ids():
        entry = catalog.entries[license_id]
        table.add_row(entry.id, entry.name, '✓' if entry.osi_approved else '')
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the ``licensekit`` argument parser."""
    parser = argparse.ArgumentParser(
        prog='licensekit',
        description='Parse license expressions and render license templates.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Log JSON lines instead of console text.')
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='licensekit.toml or pyproject.toml to read (default: nearest licensekit.toml).',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p_parse = sub.add_parser('parse', help='Parse a license expression and print its tree.')
    p_parse.add_argument('expression', help='License expression, e.g. "(MIT OR Apache-2.0)".')
    p_parse.set_defaults(func=_cmd_parse)

    p_render = sub.add_parser('render', help='Render a license template.')
    p_render.add_argument('file', help='Template file, or - for stdin.')
    p_render.add_argument('--format', choices=('html', 'text'), default='text', help='Output format.')
    p_render.add_argument('--no-optional', action='store_true', help='Drop optional passages from text output.')
    p_render.set_defaults(func=_cmd_render)

    p_strip = sub.add_parser('strip-html', help='Convert license HTML to plain text.')
    p_strip.add_argument('file', help='HTML file, or - for stdin.')
    p_strip.set_defaults(func=_cmd_strip_html)

    p_ids = sub.add_parser('ids', help='List the standard license IDs in the catalog.')
    p_ids.set_defaults(func=_cmd_ids)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)
    console = Console()
    err_console = Console(stderr=True)
    try:
        config_path = args.config or find_config(Path.cwd())
        args.settings = load_config(config_path)
        return args.func(args, console)
    except LicenseKitError as exc:
        log.debug('command_failed', command=args.command, error=type(exc).__name__)
        err_console.print(f'[bold red]error[/]: {escape(str(exc))}')
        return 1
    except OSError as exc:
        err_console.print(f'[bold red]error[/]: {escape(str(exc))}')
        return 1


if __name__ == '__main__':
    sys.exit(main())
