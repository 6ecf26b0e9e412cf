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

"""User configuration for licensekit.

Settings are read from ``licensekit.toml`` or from the ``[tool.licensekit]``
table of ``pyproject.toml``::

    # licensekit.toml
    catalog = "third_party/licenses.toml"
    extra_license_ids = ["LicenseRef-Acme-Internal"]
    include_optional_text = false

Relative ``catalog`` paths resolve against the directory of the config
file.  A missing file or table yields the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from licensekit.catalog import LicenseCatalog, default_catalog
from licensekit.errors import ConfigError
from licensekit.logging import get_logger

__all__ = [
    'CONFIG_FILENAME',
    'LicenseKitConfig',
    'VALID_KEYS',
    'find_config',
    'load_config',
]

log = get_logger('licensekit.config')

CONFIG_FILENAME = 'licensekit.toml'
PYPROJECT_FILENAME = 'pyproject.toml'

VALID_KEYS: frozenset[str] = frozenset({
    'catalog',
    'extra_license_ids',
    'include_optional_text',
})


@dataclass(frozen=True)
class LicenseKitConfig:
    """Validated licensekit settings.

    Attributes:
        catalog: Alternate catalog TOML; ``None`` uses the bundled one.
        extra_license_ids: IDs to treat as standard on top of the catalog.
        include_optional_text: Keep optional passages when rendering
            templates to text.
    """

    catalog: Path | None = None
    extra_license_ids: tuple[str, ...] = field(default=())
    include_optional_text: bool = True

    def catalog_for(self) -> LicenseCatalog:
        """Build the catalog these settings describe."""
        if self.catalog is None and not self.extra_license_ids:
            return default_catalog()
        return LicenseCatalog.load(self.catalog, extra_ids=self.extra_license_ids)


def _parse_config(raw: dict[str, Any], base_dir: Path | None = None) -> LicenseKitConfig:
    """Validate a raw config table and build a :class:`LicenseKitConfig`."""
    errors: list[str] = []
    for key in raw:
        if key not in VALID_KEYS:
            errors.append(f'Unknown key {key!r}. Valid keys: {", ".join(sorted(VALID_KEYS))}')

    catalog: Path | None = None
    if 'catalog' in raw:
        value = raw['catalog']
        if not isinstance(value, str) or not value:
            errors.append('catalog must be a non-empty string path')
        else:
            catalog = Path(value)
            if base_dir is not None and not catalog.is_absolute():
                catalog = base_dir / catalog

    extra_ids: tuple[str, ...] = ()
    if 'extra_license_ids' in raw:
        value = raw['extra_license_ids']
        if not isinstance(value, list):
            errors.append(f'extra_license_ids must be a list, got {type(value).__name__}')
        else:
            for i, item in enumerate(value):
                if not isinstance(item, str):
                    errors.append(f'extra_license_ids[{i}] must be a string, got {type(item).__name__}')
            extra_ids = tuple(str(item) for item in value if isinstance(item, str))

    include_optional = True
    if 'include_optional_text' in raw:
        value = raw['include_optional_text']
        if not isinstance(value, bool):
            errors.append(f'include_optional_text must be a boolean, got {type(value).__name__}')
        else:
            include_optional = value

    if errors:
        raise ConfigError(errors)
    return LicenseKitConfig(
        catalog=catalog,
        extra_license_ids=extra_ids,
        include_optional_text=include_optional,
    )


def find_config(start: Path) -> Path | None:
    """Return the nearest ``licensekit.toml`` at or above *start*, if any."""
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None) -> LicenseKitConfig:
    """Load settings from *path*.

    Args:
        path: A ``licensekit.toml`` or ``pyproject.toml`` file.  ``None``
            or a missing file yields the defaults.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If the file is not valid TOML or a setting is invalid.
    """
    if path is None or not path.is_file():
        return LicenseKitConfig()
    try:
        doc = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    except tomlkit.exceptions.ParseError as exc:
        raise ConfigError([f'{path}: {exc}']) from exc

    if path.name == PYPROJECT_FILENAME:
        tool = doc.get('tool', {})
        if not isinstance(tool, dict):
            raise ConfigError([f'{path}: [tool] must be a table'])
        raw = tool.get('licensekit', {})
    else:
        raw = doc
    if not isinstance(raw, dict):
        raise ConfigError([f'{path}: [tool.licensekit] must be a table'])
    config = _parse_config(raw, base_dir=path.parent)
    log.debug('config_loaded', path=str(path), keys=sorted(raw))
    return config
